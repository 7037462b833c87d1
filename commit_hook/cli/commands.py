"""CLI Commands"""

import os
import sys

from commit_hook import COMMIT_TYPES
from commit_hook.config import ConfigManager, load_config, get_config_path
from commit_hook.output import bold, dim, info, BULLET


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()
    filename = ConfigManager.CONFIG_FILENAME

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {filename} found)")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    rewrite:      {info(str(config.rewrite).lower())}")
    print(f"    quiet:        {info(str(config.quiet).lower())}")
    print(f"    show_example: {info(str(config.show_example).lower())}")
    print(f"    example:      {info(config.example)}")

    print()
    print(f"  {bold('Allowed types:')}")
    for name, description in COMMIT_TYPES.items():
        print(f"    {BULLET} {info(name.ljust(9))}{dim(description)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {filename} (in current directory)")
    print(f"    Global: ~/{filename}\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete commit-msg)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_name = '.zshrc' if 'zsh' in shell else '.bashrc'
        rc_file = os.path.expanduser(f'~/{rc_name}')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim(f'source ~/{rc_name}')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell commit-msg | Out-String | Invoke-Expression\n")
        print("To make it permanent, add the same line to your $PROFILE")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish commit-msg | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0

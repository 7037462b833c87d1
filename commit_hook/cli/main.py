"""CLI Main Entry Point

Usage: commit-msg <commit-msg-file>

Installed as a git commit-msg hook. Cleans the message in place and
rejects headers that don't follow `type(scope): subject`.
"""

import sys

from commit_hook import COMMIT_TYPE_NAMES
from commit_hook.config import load_config
from commit_hook.normalizer import CommitError, CommitMessageError, normalize_commit_message
from commit_hook.output import print_success, print_error, print_hint, colorize_commit_type

from commit_hook.cli.args import parse_args
from commit_hook.cli.commands import display_config, run_install_completion

# Exit status per failure kind. argparse uses 2 for usage errors.
EXIT_OK = 0
EXIT_CODES = {
    CommitError.IO: 1,
    CommitError.EMPTY: 3,
    CommitError.INVALID_FORMAT: 4,
}


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return 0, False


def read_message(path: str) -> str:
    """Read the commit message file, keeping its line endings intact."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CommitMessageError(CommitError.IO, f"Failed to read commit message file: {path}") from e


def write_message(path: str, message: str) -> None:
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(message)
    except OSError as e:
        raise CommitMessageError(CommitError.IO, "Failed to rewrite cleaned commit message") from e


def _report_error(err: CommitMessageError, config) -> int:
    """Print a diagnostic for a failed hook run and return its exit status."""
    if err.kind is CommitError.EMPTY:
        print_error("Empty commit message")
    elif err.kind is CommitError.INVALID_FORMAT:
        print_error("Commit message must follow Conventional Commits format.")
        print_hint(str(err))
        print_hint(f"Allowed types: {', '.join(COMMIT_TYPE_NAMES)}")
        if config.show_example:
            print(f"  Example: `{colorize_commit_type(config.example)}`", file=sys.stderr)
    else:
        print_error(str(err))
    return EXIT_CODES[err.kind]


def run_hook(path: str, rewrite: bool = True, quiet: bool = False, print_message: bool = False, config=None) -> int:
    """Read, normalize, and (optionally) rewrite a commit message file.

    Returns:
        int: Exit code
    """
    config = config or load_config()

    try:
        raw = read_message(path)
        cleaned = normalize_commit_message(raw)
        changed = cleaned != raw
        if changed and rewrite:
            write_message(path, cleaned)
    except CommitMessageError as e:
        return _report_error(e, config)

    if print_message:
        # Message is the output; skip status lines
        print(cleaned, end='')
        return EXIT_OK

    if quiet:
        return EXIT_OK

    if not changed:
        print_success("Commit message validated.")
    elif rewrite:
        print_success("Commit message cleaned and validated.")
    else:
        print_success("Commit message would be cleaned.")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    # CLI flags override config
    config = load_config()
    rewrite = config.rewrite and not args.check
    quiet = config.quiet or args.quiet

    return run_hook(args.path, rewrite=rewrite, quiet=quiet, print_message=args.print_message, config=config)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())

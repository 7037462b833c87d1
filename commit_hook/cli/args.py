"""CLI Argument Parsing"""

import argparse
import argcomplete

from commit_hook import COMMIT_TYPE_NAMES, __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='commit-msg',
        description='Normalize and validate a commit message (git commit-msg hook)',
        epilog=f"Allowed types: {', '.join(COMMIT_TYPE_NAMES)}",
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('path', nargs='?', metavar='COMMIT_MSG_FILE', help='Commit message file (git passes .git/COMMIT_EDITMSG)')

    # Hook options
    parser.add_argument('--check', action='store_true', help='Validate only, never rewrite the file')
    parser.add_argument('--print', dest='print_message', action='store_true', help='Write the cleaned message to stdout')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only report errors')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if args.path is None and not (args.display_config or args.install_completion):
        parser.error("the following arguments are required: COMMIT_MSG_FILE")

    return args

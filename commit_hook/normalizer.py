"""Commit Message Normalizer - Clean up and validate a commit message.

The pipeline, in order:
- normalize newlines
- drop `#` comment lines
- trim trailing whitespace, then leading/trailing blank lines
- lowercase an accidental leading `Type:` / `Type(`
- validate the `type(scope): subject` header
- enforce a blank line after the subject
- always end with a single newline
"""

from enum import Enum

from commit_hook import COMMIT_TYPE_NAMES

# Unicode White_Space. str.strip() with no argument also strips \x1c-\x1f,
# which are separators, not whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class CommitError(Enum):
    """Why a commit message was rejected."""
    EMPTY = "empty commit message"
    INVALID_FORMAT = "invalid conventional commits header"
    IO = "io error"  # Only raised by the hook itself, never by normalize

    def __str__(self) -> str:
        return self.value


class CommitMessageError(Exception):
    """Raised when a commit message cannot be normalized."""

    def __init__(self, kind: CommitError, detail: str = ""):
        super().__init__(detail or str(kind))
        self.kind = kind


def capitalize(text: str) -> str:
    """Uppercase the first character only. 'feat' -> 'Feat'."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def _is_blank(line: str) -> bool:
    return not line.strip(WHITESPACE)


def _has_type_prefix(header: str, commit_type: str) -> bool:
    return header.startswith((f"{commit_type}:", f"{commit_type}("))


def normalize_commit_message(raw: str) -> str:
    """Return the canonical form of a commit message.

    Raises:
        CommitMessageError: kind EMPTY if nothing is left after stripping
            comments and blanks, kind INVALID_FORMAT if the header does not
            start with a known type.
    """
    lines = [
        line.rstrip(WHITESPACE)
        for line in raw.replace('\r\n', '\n').split('\n')
        if not line.lstrip(WHITESPACE).startswith('#')
    ]

    while lines and _is_blank(lines[0]):
        lines.pop(0)
    while lines and _is_blank(lines[-1]):
        lines.pop()

    if not lines:
        raise CommitMessageError(CommitError.EMPTY)

    header = lines[0].strip(WHITESPACE)

    # Maybe downcase accidental `Feat:` -> `feat:`
    for commit_type in COMMIT_TYPE_NAMES:
        if _has_type_prefix(header, capitalize(commit_type)):
            header = commit_type + header[len(commit_type):]
            lines[0] = header
            break

    if not any(_has_type_prefix(header, t) for t in COMMIT_TYPE_NAMES):
        raise CommitMessageError(
            CommitError.INVALID_FORMAT,
            f"{CommitError.INVALID_FORMAT}: {header}",
        )

    # Exactly one blank line after the subject
    if len(lines) > 1 and lines[1]:
        lines.insert(1, '')

    return '\n'.join(lines) + '\n'


__all__ = [
    "CommitError",
    "CommitMessageError",
    "WHITESPACE",
    "capitalize",
    "normalize_commit_message",
]

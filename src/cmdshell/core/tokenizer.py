"""Pure line tokenizer.

Only the ASCII space separates tokens; tabs and every other character
are token content.  There is no quoting, escaping or comment syntax.
"""

from __future__ import annotations

from collections.abc import Iterator

from cmdshell.utils.constants import TOKEN_SEPARATOR


def iter_tokens(line: str) -> Iterator[str]:
    """Yield every prefix before the next space, including empty ones.

    Consumes the whole line: ``"a  b"`` yields ``"a"``, ``""``, ``"b"``.
    """
    remaining = line
    while remaining:
        token, _, remaining = remaining.partition(TOKEN_SEPARATOR)
        yield token


def tokenize(line: str) -> list[str]:
    """Split *line* into non-empty tokens, preserving order."""
    return [token for token in iter_tokens(line) if token]

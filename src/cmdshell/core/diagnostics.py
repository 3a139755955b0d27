"""Single-slot holder for the last error issued during a run.

Any component (argument coercion, arity checks, registry rejections,
command handlers) may write to the channel.  The last write wins; the
only exception is :meth:`DiagnosticChannel.append`, which the shell uses
to attach a usage hint to an arity message.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class DiagnosticChannel:
    """Holds the most recent user-facing error message, if any."""

    def __init__(self) -> None:
        self._message: str | None = None

    @property
    def last_error(self) -> str | None:
        """The current message, or ``None`` when nothing was issued."""
        return self._message

    def issue(self, fmt: str, *args: object) -> None:
        """Format *fmt* with positional *args* and store the result."""
        self._message = fmt.format(*args) if args else fmt
        logger.debug("diagnostic issued: %s", self._message)

    def append(self, text: str) -> None:
        """Concatenate *text* onto the current message."""
        self._message = (self._message or "") + text

    def clear(self) -> None:
        self._message = None

    def __bool__(self) -> bool:
        return bool(self._message)

    def __repr__(self) -> str:
        return f"DiagnosticChannel(last_error={self._message!r})"

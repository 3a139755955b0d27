"""cmdshell — a small text-command interpreter for embedding in host apps.

The interpreter core lives in :mod:`cmdshell.core`; hosts wire commands
and variables into a :class:`~cmdshell.core.shell.CommandShell` and feed
it one line of user input at a time.
"""

from cmdshell.core.arguments import CommandArg
from cmdshell.core.shell import CommandShell
from cmdshell.version import __version__

__all__: list[str] = ["CommandArg", "CommandShell", "__version__"]

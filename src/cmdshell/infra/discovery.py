"""Declarative command discovery over Python namespaces.

Hosts can register commands by hand through
:meth:`~cmdshell.core.shell.CommandShell.add_command`, or mark functions
with :func:`shell_command` and let :func:`discover_commands` find them in
modules, classes, instances or plain mappings.

Conventions
-----------
* A marked function taking exactly one positional parameter (the
  argument sequence) becomes a regular command.
* A marked function with any other signature, e.g.
  ``def command_teleport(x: int, y: int)``, is recorded as a
  *placeholder*: its parameters define the arity, and the handler must
  come from a front command.
* A function whose name starts with ``front_command`` (any case, with or
  without underscores) is a front command even without the decorator.
  It parses the raw arguments and calls the typed function itself; its
  inferred name matches the placeholder's, so the two merge.
* Names are inferred by dropping ``front`` and ``command`` from the
  identifier unless the decorator gives one explicitly.  The identifier
  is the attribute name for modules, classes and instances, and the key
  for mappings, so ``{"command_go": f}`` registers ``GO`` whatever
  ``f.__name__`` is.
* Placeholders still lacking a handler are reported at the end of each
  call.  A later call that supplies the handler withdraws the report.
"""

from __future__ import annotations

import collections.abc
import inspect
import logging
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from cmdshell.core.naming import infer_command_name, infer_front_command_name
from cmdshell.core.shell import CommandShell
from cmdshell.utils.constants import COMMAND_MARKER, FRONT_MARKER, UNBOUNDED

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

SPEC_ATTRIBUTE: str = "__shell_command__"
"""Attribute under which :func:`shell_command` stores its :class:`CommandSpec`."""

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# ---------------------------------------------------------------------------
# Declaration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Registration metadata attached to a function by :func:`shell_command`."""

    name: str | None = None
    min_args: int = 0
    max_args: int = UNBOUNDED
    help: str = ""
    hint: str | None = None
    secret: bool = False


def shell_command(
    name: str | None = None,
    *,
    min_args: int = 0,
    max_args: int = UNBOUNDED,
    help: str = "",
    hint: str | None = None,
    secret: bool = False,
) -> Callable[[F], F]:
    """Mark a function for :func:`discover_commands`.

    Example::

        @shell_command(min_args=1, help="Print the arguments", hint="echo <text>")
        def command_echo(args):
            ...
    """
    spec = CommandSpec(
        name=name,
        min_args=min_args,
        max_args=max_args,
        help=help,
        hint=hint,
        secret=secret,
    )

    def decorator(func: F) -> F:
        setattr(func, SPEC_ATTRIBUTE, spec)
        return func

    return decorator


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

def discover_commands(shell: CommandShell, *namespaces: object) -> list[str]:
    """Register every marked or front command found in *namespaces*.

    Returns the names of placeholders left without a handler once all
    namespaces were scanned; each is also reported to the shell's
    diagnostic channel.
    """
    for namespace in namespaces:
        for attr_name, member in _members(namespace):
            if not callable(member):
                continue
            spec: CommandSpec | None = getattr(member, SPEC_ATTRIBUTE, None)
            front = is_front_command(attr_name)
            if spec is None:
                if not front:
                    continue
                spec = CommandSpec()
            _register(shell, attr_name, member, spec, front=front)

    missing = shell.commands.report_missing_handlers()
    if missing:
        logger.warning("commands without a handler: %s", ", ".join(missing))
    return missing


def is_front_command(identifier: str) -> bool:
    return identifier.replace("_", "").upper().startswith(FRONT_MARKER + COMMAND_MARKER)


def command_name_for(identifier: str, spec: CommandSpec, *, front: bool = False) -> str:
    """Resolve the command name a discovered function registers under."""
    if spec.name is not None:
        return spec.name
    base = identifier
    if front:
        base = infer_front_command_name(identifier) or identifier
    return infer_command_name(base)


def _register(
    shell: CommandShell,
    attr_name: str,
    func: Callable[..., Any],
    spec: CommandSpec,
    *,
    front: bool,
) -> None:
    name = command_name_for(attr_name, spec, front=front)

    if takes_argument_sequence(func):
        shell.add_command(
            name,
            func,
            min_args=spec.min_args,
            max_args=spec.max_args,
            help=spec.help,
            hint=spec.hint,
            secret=spec.secret,
        )
        return

    min_args, max_args = parameter_arity(func)
    logger.debug(
        "%s does not take an argument sequence, recording placeholder %s",
        attr_name,
        name,
    )
    shell.add_placeholder(name, min_args, max_args, spec.help)


def _members(namespace: object) -> list[tuple[str, Any]]:
    """List ``(name, value)`` pairs, in definition order where available."""
    if isinstance(namespace, Mapping):
        return list(namespace.items())
    if isinstance(namespace, types.ModuleType):
        return list(vars(namespace).items())
    return [
        (name, getattr(namespace, name))
        for name in dir(namespace)
        if not name.startswith("__")
    ]


# ---------------------------------------------------------------------------
# Signature inspection
# ---------------------------------------------------------------------------

def takes_argument_sequence(func: Callable[..., Any]) -> bool:
    """Return ``True`` if *func* can be called with the argument tuple alone.

    That means exactly one positional parameter, either unannotated or
    annotated as a sequence (``Sequence[CommandArg]``, ``list``, ...).
    """
    try:
        signature = _resolved_signature(func)
    except (TypeError, ValueError):
        return False

    params = list(signature.parameters.values())
    if len(params) != 1 or params[0].kind not in _POSITIONAL_KINDS:
        return False

    annotation = params[0].annotation
    if annotation is inspect.Parameter.empty:
        return True
    if isinstance(annotation, str):
        return "CommandArg" in annotation or "Sequence" in annotation
    origin = typing.get_origin(annotation) or annotation
    return (
        isinstance(origin, type)
        and issubclass(origin, collections.abc.Sequence)
        and not issubclass(origin, str)
    )


def _resolved_signature(func: Callable[..., Any]) -> inspect.Signature:
    """Signature with string annotations evaluated where possible.

    Annotations naming ``TYPE_CHECKING``-only imports cannot be
    evaluated; those stay strings and are matched by name.
    """
    try:
        return inspect.signature(func, eval_str=True)
    except (NameError, AttributeError, SyntaxError):
        return inspect.signature(func)


def parameter_arity(func: Callable[..., Any]) -> tuple[int, int]:
    """Derive ``(min_args, max_args)`` from *func*'s positional parameters.

    Parameters with defaults are optional; ``*args`` makes the maximum
    unbounded.  Keyword-only parameters are ignored.
    """
    params = inspect.signature(func).parameters.values()
    positional = [p for p in params if p.kind in _POSITIONAL_KINDS]
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return required, UNBOUNDED
    return required, len(positional)

"""Variable bindings backed by object attributes.

Hosts usually keep settings as attributes on a config object or module.
:func:`bind_attribute` turns such an attribute into a
:class:`~cmdshell.core.models.VariableBinding` without the shell ever
holding the value.
"""

from __future__ import annotations

from typing import Any

from cmdshell.core.models import VariableBinding
from cmdshell.exceptions import ShellConfigurationError


def bind_attribute(
    owner: object,
    attribute: str,
    value_type: type | None = None,
) -> VariableBinding:
    """Bind ``owner.attribute`` as a shell variable.

    Parameters
    ----------
    owner:
        Any object, class or module holding the attribute.
    attribute:
        Attribute name.  It must already exist.
    value_type:
        Declared type.  Inferred from the current value when omitted.

    Raises
    ------
    ShellConfigurationError
        If the attribute is missing.
    UnsupportedVariableTypeError
        If the attribute type cannot be coerced from text.
    """
    if not hasattr(owner, attribute):
        raise ShellConfigurationError(
            f"{owner!r} has no attribute {attribute!r}",
        )
    if value_type is None:
        value_type = type(getattr(owner, attribute))

    def getter() -> Any:
        return getattr(owner, attribute)

    def setter(value: Any) -> None:
        setattr(owner, attribute, value)

    return VariableBinding(value_type=value_type, getter=getter, setter=setter)

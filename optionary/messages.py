"""
Optionary message catalog.

Every user-facing error produced by the option engine is built from one of the
templates below. They are plain %-style format strings; the positional order of
the substitutions is part of the stable contract, the wording is not.

Templates (substitutions in order)
- ERROR_MISSING_REQUIRED_OPTION    (name)
- ERROR_CONVERT_TO_INT             (called_as, raw_token)
- ERROR_CONVERT_TO_FLOAT           (called_as, raw_token)
- ERROR_ARGUMENT_IS_NOT_KEY_VALUE  (raw_token)

Localization
- Reassign the module constant:
    >>> from optionary import messages
    >>> messages.ERROR_MISSING_REQUIRED_OPTION = "Falta la opción requerida '%s'!"
- Or let the host application provide a __messages__ mapping in __main__, keyed
  by template name. It takes precedence over the module constants:
    __messages__ = {"ERROR_CONVERT_TO_INT": "option %s: %s is not an integer"}

Templates are resolved when an error is rendered, never at import time, so both
forms affect errors raised afterwards.
"""
import sys

ERROR_MISSING_REQUIRED_OPTION = "Missing required option '%s'!"
ERROR_CONVERT_TO_INT = "Argument error for option '%s': Can't convert string to int: '%s'"
ERROR_CONVERT_TO_FLOAT = "Argument error for option '%s': Can't convert string to float64: '%s'"
ERROR_ARGUMENT_IS_NOT_KEY_VALUE = "Argument error for value '%s': Should be in key=value format!"

_NAMES = frozenset({
    "ERROR_MISSING_REQUIRED_OPTION",
    "ERROR_CONVERT_TO_INT",
    "ERROR_CONVERT_TO_FLOAT",
    "ERROR_ARGUMENT_IS_NOT_KEY_VALUE",
})


def fetch(name, /):
    """
    Return the current template registered under `name`.

    The host's __main__.__messages__ mapping wins over the module constant.
    Unknown names raise KeyError.
    """
    if not isinstance(name, str):
        raise TypeError("fetch() argument must be a string")
    if name not in _NAMES:
        raise KeyError(name)
    overrides = getattr(sys.modules.get("__main__"), "__messages__", {})
    if name in overrides:
        return overrides[name]
    return globals()[name]


def render(name, /, *arguments):
    """
    Format the template `name` with the positional `arguments`.

    Empty strings are valid substitutions, e.g. an option that was never
    called under an alias renders as ''.
    """
    return fetch(name) % tuple(map(str, arguments))


__all__ = (
    "ERROR_MISSING_REQUIRED_OPTION",
    "ERROR_CONVERT_TO_INT",
    "ERROR_CONVERT_TO_FLOAT",
    "ERROR_ARGUMENT_IS_NOT_KEY_VALUE",
    "fetch",
    "render",
)

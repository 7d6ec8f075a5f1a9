"""
Optionary faults (errors and warnings) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing issue raised by
  the option engine. Ranges encode the domain (conversion, structure,
  requirements, configuration warnings).
- OptionException / OptionWarning: base types carrying a message and a hint,
  able to render themselves with rich.
- trigger(): single entry point for a parser to surface a fault, either by
  raising/warning (library use) or by printing it (shell use).

Messages
- The message text of each error comes from optionary.messages, so str(error)
  is exactly the formatted catalog template. Hints and titles are presentation
  only and never part of str(error).

Host configuration (read from __main__ when rendering)
- __codes__: mapping FaultCode -> label, replacing the numeric code.
- __styles__: mapping style name -> rich style.
- __prog__: program name shown in the header.
"""
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used by the option engine (stable identifiers).

    grouping
    - conversion (2111x): CONVERT_TO_INT, CONVERT_TO_FLOAT
    - structure (2112x): NOT_KEY_VALUE
    - requirements (2113x): MISSING_REQUIRED_OPTION
    - configuration warnings (2211x): DUPLICATE_ALIAS
    """
    # --- conversion errors (2111x) ---
    CONVERT_TO_INT          = 21111
    CONVERT_TO_FLOAT        = 21112

    # --- structural errors (2112x) ---
    NOT_KEY_VALUE           = 21121

    # --- requirement errors (2113x) ---
    MISSING_REQUIRED_OPTION = 21131

    # --- warnings (22xxx) ---
    DUPLICATE_ALIAS         = 22111

    def normalize(self):
        """
        return a host-normalized string for this code (see __codes__).
        """
        return str(getattr(sys.modules.get("__main__"), "__codes__", {}).get(self, self.value))


_ERROR_PALETTE = {
    "prog-name": "bold #E6E6F0",  # near-white program name
    "code": "bold #00E5FF",  # neon cyan fault code
    "error-title": "bold #FF4DA6",
    "error-message": "#C8C8D0",
    "hint-arrow": "#9CE19C dim",
    "hint": "italic #9CE19C",
}

_WARNING_PALETTE = {
    "prog-name": "bold #E6E6F0",
    "code": "bold #FFB400",  # amber for warnings
    "warning-title": "bold #FFC2E0",
    "warning-message": "#D6D6DE",
    "hint-arrow": "#B8EFAF dim",
    "hint": "italic #B8EFAF",
}


def _render(fault, kind, palette, options):
    """
    Build the rich renderable shared by errors and warnings.

    kind selects the "<kind>-title" / "<kind>-message" style keys.
    """
    main = sys.modules.get("__main__")
    colorful = options.get("colorful", True)
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), styles[style] if colorful else "")

    prog = getattr(main, "__prog__", options.get("prog", "optionary"))
    header = Text.assemble(
        "[ ",
        text(prog, "prog-name"),
        " — ",
        text(fault.code.normalize(), "code"),
        " | ",
        text(fault.title, kind + "-title"),
        " ]",
    )
    message = text(fault.message, kind + "-message")
    hint = Text.assemble(text(" → ", "hint-arrow"), text(fault.hint, "hint")) if fault.hint else Text("")

    if options.get("fancy", False):
        return Panel(Group(message, hint), title=header, title_align="left")
    return Group(header, message, hint)


class OptionException(Exception):
    """
    Base class of every error raised by Option.save() and Option.check_required().
    """
    code = Unset
    title = "option error"

    def __init__(self, message, /, *, hint=Unset):
        super().__init__(message)
        self.message = message
        self.hint = coalesce(hint)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        return _render(self, "error", _ERROR_PALETTE, {})

    def __trigger__(self, **options):
        if not options.get("shell"):
            raise self from None
        console.print(_render(self, "error", _ERROR_PALETTE, options))
        if options.get("soft"):
            return
        sys.exit(1)


class ConversionError(OptionException):
    """
    A token could not be converted to the option's numeric kind.

    subject is the alias the option was called as (possibly ""), token the raw
    offending token.
    """
    title = "conversion error"

    def __init__(self, message, subject, token, /, *, hint=Unset):
        super().__init__(message, hint=hint)
        self.subject = subject
        self.token = token


class IntConversionError(ConversionError):
    code = FaultCode.CONVERT_TO_INT


class FloatConversionError(ConversionError):
    code = FaultCode.CONVERT_TO_FLOAT


class KeyValueFormatError(OptionException):
    code = FaultCode.NOT_KEY_VALUE
    title = "malformed pair"

    def __init__(self, message, token, /, *, hint=Unset):
        super().__init__(message, hint=hint)
        self.token = token


class MissingRequiredOptionError(OptionException):
    code = FaultCode.MISSING_REQUIRED_OPTION
    title = "missing option"

    def __init__(self, message, subject, /, *, hint=Unset):
        super().__init__(message, hint=hint)
        self.subject = subject


class OptionWarning(Warning):
    """
    Base class for configuration-time warnings (never raised by save()).
    """
    code = Unset
    title = "option warning"

    def __init__(self, message, /, *, hint=Unset):
        super().__init__(message)
        self.message = message
        self.hint = coalesce(hint)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        return _render(self, "warning", _WARNING_PALETTE, {})

    def __trigger__(self, **options):
        if not options.get("shell"):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(_render(self, "warning", _WARNING_PALETTE, options))


class DuplicateAliasWarning(OptionWarning):
    code = FaultCode.DUPLICATE_ALIAS
    title = "duplicate alias"

    def __init__(self, message, subject, alias, /, *, hint=Unset):
        super().__init__(message, hint=hint)
        self.subject = subject
        self.alias = alias


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    options
    - shell: when False (default) exceptions are raised and warnings emitted via
      warnings.warn; when True they are printed to stderr with rich.
    - soft: in shell mode, do not sys.exit(1) after printing an exception.
    - fancy: render inside a rich Panel.
    - colorful: apply styles (default True).
    - prog: program name for the header when __main__.__prog__ is absent.
    """
    if not hasattr(fault, "__trigger__") or not callable(fault.__trigger__):
        raise TypeError("trigger() argument must implement __trigger__ method")
    fault.__trigger__(**options)


__all__ = (
    "FaultCode",
    "OptionException",
    "ConversionError",
    "IntConversionError",
    "FloatConversionError",
    "KeyValueFormatError",
    "MissingRequiredOptionError",
    "OptionWarning",
    "DuplicateAliasWarning",
    "trigger",
)

r"""
Optionary option entity.

Overview
- Kind: the seven value shapes an option can take (bool, string, int, float,
  string list, int list, string map). Fixed at construction.
- Option: one declared command-line option. It owns its identity (canonical
  name plus aliases), presentation metadata for help output, invocation state
  (called / called_as) and a binder slot for its value.
- sort(options): in-place, stable ordering by canonical name.

Life cycle
    >>> verbose = Cell(False)
    >>> opt = Option("verbose", Kind.BOOL).bind_bool(verbose).set_alias("v")
    >>> opt.set_called("v").save("")        # done by the tokenizer
    >>> verbose.value
    True

- Configure with the fluent setters (each returns the option itself).
- The tokenizer calls set_called(alias) and then save(*tokens) for every
  invocation it finds.
- After parsing, the application reads its destinations (authoritative) or the
  typed accessors, and calls check_required().

Saving, by kind
- bool: tokens are ignored; every save toggles the current value. Preloading a
  destination with True therefore expresses "--no-x".
- string: first token, or "" when there is none.
- int / float: first token, converted; failures raise IntConversionError /
  FloatConversionError naming the alias and the raw token.
- string list: every token appended in order.
- int list: every token appended in order; "lo..hi" expands to the inclusive
  ascending range, "hi..lo" is an IntConversionError.
- string map: every token split on the first "="; keys are lowercased when
  map_keys_to_lower is set; missing "=" raises KeyValueFormatError.

A save either fully succeeds or changes nothing: destination, value() and
`called` keep their previous state when any token in the call fails.

Public API
- Classes: Kind, Option
- Functions: sort
"""
import functools
import operator
from enum import Enum

from . import messages
from .binders import (
    BoolSlot,
    StringSlot,
    IntSlot,
    FloatSlot,
    StringListSlot,
    IntListSlot,
    StringMapSlot,
)
from .converters import to_int, to_float, is_range, expand_range, split_pair
from .faults import (
    IntConversionError,
    FloatConversionError,
    KeyValueFormatError,
    MissingRequiredOptionError,
    DuplicateAliasWarning,
    trigger,
)
from .utils import mirror, rename


class Kind(Enum):
    """
    Value shape of an option.

    Properties
    - placeholder: argument label used by Option.synopsis() when no
      help_arg_name is set ("" for bool, which takes no argument).
    - repeatable: whether saves accumulate (list and map kinds).
    """
    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    STRING_LIST = "string-list"
    INT_LIST = "int-list"
    STRING_MAP = "string-map"

    @property
    def placeholder(self):
        return _PLACEHOLDERS[self]

    @property
    def repeatable(self):
        return self in (Kind.STRING_LIST, Kind.INT_LIST, Kind.STRING_MAP)


_PLACEHOLDERS = {
    Kind.BOOL: "",
    Kind.STRING: "string",
    Kind.INT: "int",
    Kind.FLOAT: "float",
    Kind.STRING_LIST: "string",
    Kind.INT_LIST: "int",
    Kind.STRING_MAP: "key=value",
}

_SLOTS = {
    Kind.BOOL: BoolSlot,
    Kind.STRING: StringSlot,
    Kind.INT: IntSlot,
    Kind.FLOAT: FloatSlot,
    Kind.STRING_LIST: StringListSlot,
    Kind.INT_LIST: IntListSlot,
    Kind.STRING_MAP: StringMapSlot,
}


def _binder(kind, name, /):
    """
    Build a bind_<kind>() method: check the option kind, then hand the
    destination to the slot, which validates its shape.
    """
    @rename(name)
    def binder(self, target, /):
        self._expect(kind, name)
        self._slot.bind(target)
        return self

    binder.__doc__ = f"Bind a caller-owned destination to this {kind.value} option; returns the option."
    return binder


def _preloader(kind, name, /):
    """
    Build a set_<kind>() method writing a pre-parse default into both the
    destination (when bound) and the last value.
    """
    @rename(name)
    def preloader(self, value, /):
        self._expect(kind, name)
        self._slot.preload(value)
        return self

    preloader.__doc__ = f"Preload the {kind.value} default, overwriting any previous one; returns the option."
    return preloader


def _presenter(attribute, name, /):
    """
    Build a set_<attribute>() method for a presentation string.
    """
    @rename(name)
    def presenter(self, text, /):
        if not isinstance(text, str):
            raise TypeError(f"{name}() argument must be a string")
        setattr(self, attribute, text)
        return self

    presenter.__doc__ = f"Set {attribute!r} (read by the help renderer); returns the option."
    return presenter


def _accessor(kind, name, /):
    """
    Build an as_<kind>() accessor reading through to the bound destination.
    """
    @rename(name)
    def accessor(self):
        self._expect(kind, name)
        return self._slot.read()

    accessor.__doc__ = (
        f"Current {kind.value} value: the bound destination's content when bound, "
        f"otherwise the last saved value."
    )
    return accessor


class Option:
    """
    A declared command-line option.

    Parameters
    - name: str (positional-only)
      Canonical name, without dashes. It is also the first alias.
    - kind: Kind (positional-only)
      Value shape; cannot be changed later.

    Read-only properties
    - name, aliases, kind, called, called_as, required, required_msg

    Writable attributes
    - description, help_arg_name, default_str, env_var: presentation strings.
    - help_synopsis: filled by synopsis().
    - map_keys_to_lower: lowercase string-map keys on save (values untouched).
    - max_args: upper bound shown by synopsis() for list kinds (default 1).
    - min_args: lower bound shown by synopsis() for list kinds (default 1).

    Raises
    - TypeError: name is not a string or kind is not a Kind.
    - ValueError: name is empty.
    """

    __introspectable__ = (
        "aliases",
        "kind",
        "called",
        "called_as",
        "required",
        "required_msg",
    )

    aliases = mirror("aliases")
    kind = mirror("kind")
    called = mirror("called")
    called_as = mirror("called_as")
    required = mirror("required")
    required_msg = mirror("required_msg")

    def __init__(self, name, kind, /):
        if not isinstance(name, str):
            raise TypeError("option name must be a string")
        elif not name:
            raise ValueError("option name cannot be empty")
        if not isinstance(kind, Kind):
            raise TypeError("option kind must be a Kind")

        self._aliases = [name]
        self._kind = kind
        self._slot = _SLOTS[kind]()
        self._called = False
        self._called_as = ""
        self._required = False
        self._required_msg = ""

        self.description = ""
        self.help_arg_name = ""
        self.default_str = ""
        self.env_var = ""
        self.help_synopsis = ""
        self.map_keys_to_lower = False
        self.max_args = 1
        self.min_args = 1

    @property
    def name(self):
        """
        Canonical name (always aliases[0]).
        """
        return self._aliases[0]

    def _expect(self, kind, method, /):
        if self._kind is not kind:
            raise TypeError(f"{method}() needs a {kind.value} option, {self.name!r} is a {self._kind.value} option")

    # --- destinations ---
    bind_bool = _binder(Kind.BOOL, "bind_bool")
    bind_string = _binder(Kind.STRING, "bind_string")
    bind_int = _binder(Kind.INT, "bind_int")
    bind_float = _binder(Kind.FLOAT, "bind_float")
    bind_string_list = _binder(Kind.STRING_LIST, "bind_string_list")
    bind_int_list = _binder(Kind.INT_LIST, "bind_int_list")
    bind_string_map = _binder(Kind.STRING_MAP, "bind_string_map")

    # --- pre-parse defaults ---
    set_bool = _preloader(Kind.BOOL, "set_bool")
    set_string = _preloader(Kind.STRING, "set_string")
    set_int = _preloader(Kind.INT, "set_int")
    set_float = _preloader(Kind.FLOAT, "set_float")

    # --- presentation ---
    set_description = _presenter("description", "set_description")
    set_help_arg_name = _presenter("help_arg_name", "set_help_arg_name")
    set_default_str = _presenter("default_str", "set_default_str")
    set_env_var = _presenter("env_var", "set_env_var")

    # --- typed accessors ---
    as_bool = _accessor(Kind.BOOL, "as_bool")
    as_string = _accessor(Kind.STRING, "as_string")
    as_int = _accessor(Kind.INT, "as_int")
    as_float = _accessor(Kind.FLOAT, "as_float")
    as_string_list = _accessor(Kind.STRING_LIST, "as_string_list")
    as_int_list = _accessor(Kind.INT_LIST, "as_int_list")
    as_string_map = _accessor(Kind.STRING_MAP, "as_string_map")

    def set_alias(self, *names):
        """
        Append aliases in the given order.

        Uniqueness is left to the option registry; re-adding an alias this
        option already has only emits a DuplicateAliasWarning.
        """
        for alias in names:
            if not isinstance(alias, str):
                raise TypeError("option aliases must be strings")
            elif not alias:
                raise ValueError("option aliases cannot be empty-strings")

        for alias in names:
            if alias in self._aliases:
                trigger(DuplicateAliasWarning(
                    f"option {self.name!r} already answers to {alias!r}",
                    self.name,
                    alias,
                    hint="drop the repeated alias from set_alias()",
                ))
            self._aliases.append(alias)
        return self

    def set_required(self, message="", /):
        """
        Mark the option as required. A non-empty `message` replaces the
        catalog text of the error raised by check_required().
        """
        if not isinstance(message, str):
            raise TypeError("set_required() argument must be a string")
        self._required = True
        self._required_msg = message
        return self

    def set_called(self, alias, /):
        """
        Record that the tokenizer saw this option under `alias`.
        """
        if not isinstance(alias, str):
            raise TypeError("set_called() argument must be a string")
        self._called = True
        self._called_as = alias
        return self

    def set_map_keys_to_lower(self, flag=True, /):
        self.map_keys_to_lower = bool(flag)
        return self

    def set_max_args(self, count, /):
        if not isinstance(count, int) or isinstance(count, bool):
            raise TypeError("set_max_args() argument must be an integer")
        elif count < 1:
            raise ValueError("set_max_args() argument must be a positive integer")
        self.max_args = count
        return self

    def set_min_args(self, count, /):
        if not isinstance(count, int) or isinstance(count, bool):
            raise TypeError("set_min_args() argument must be an integer")
        elif count < 0:
            raise ValueError("set_min_args() argument cannot be negative")
        self.min_args = count
        return self

    def save(self, *tokens):
        """
        Convert `tokens` according to the option kind and store the result.

        Raises
        - IntConversionError / FloatConversionError: a numeric token (or an
          int-list range) is malformed.
        - KeyValueFormatError: a string-map token has no "=".
        - TypeError: a token is not a string.

        On error nothing is stored; later tokens of the same call are not
        looked at.
        """
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("option tokens must be strings")

        match self._kind:
            case Kind.BOOL:
                value = not self._slot.read()
            case Kind.STRING:
                value = tokens[0] if tokens else ""
            case Kind.INT:
                value = self._convert(to_int, tokens[0] if tokens else "")
            case Kind.FLOAT:
                value = self._convert(to_float, tokens[0] if tokens else "")
            case Kind.STRING_LIST:
                value = self._slot.read() + list(tokens)
            case Kind.INT_LIST:
                value = self._slot.read()
                for token in tokens:
                    value.extend(self._convert(expand_range if is_range(token) else _singleton, token))
            case Kind.STRING_MAP:
                value = self._slot.read()
                for token in tokens:
                    key, item = self._pair(token)
                    value[key] = item

        self._slot.write(value)
        self._called = True

    def _convert(self, converter, token, /):
        try:
            return converter(token)
        except ValueError:
            if self._kind is Kind.FLOAT:
                raise FloatConversionError(
                    messages.render("ERROR_CONVERT_TO_FLOAT", self._called_as, token),
                    self._called_as,
                    token,
                    hint="use a decimal number such as 1.5, -2 or 3e-4",
                ) from None
            raise IntConversionError(
                messages.render("ERROR_CONVERT_TO_INT", self._called_as, token),
                self._called_as,
                token,
                hint="use a decimal integer such as 42 or -7" + (
                    ", or an ascending range such as 1..5" if self._kind is Kind.INT_LIST else ""
                ),
            ) from None

    def _pair(self, token, /):
        try:
            key, item = split_pair(token)
        except ValueError:
            raise KeyValueFormatError(
                messages.render("ERROR_ARGUMENT_IS_NOT_KEY_VALUE", token),
                token,
                hint="write the entry as key=value",
            ) from None
        return (key.lower() if self.map_keys_to_lower else key), item

    def value(self):
        """
        Last stored value in the kind's natural shape (containers are copies).
        """
        return self._slot.snapshot()

    def check_required(self):
        """
        Raise MissingRequiredOptionError if the option is required but was
        never called; return None otherwise.
        """
        if not self._required or self._called:
            return
        raise MissingRequiredOptionError(
            self._required_msg or messages.render("ERROR_MISSING_REQUIRED_OPTION", self.name),
            self.name,
            hint=f"pass --{self.name}" if len(self.name) > 1 else f"pass -{self.name}",
        )

    def synopsis(self):
        """
        Render the usage fragment, store it in help_synopsis and return it.

        Examples
        - bool "help"                      -> "--help"
        - int "n"                          -> "-n <int>"
        - int list "help", max_args=2      -> "--help <int>..."
        - string map "define", min_args=0  -> "--define [<key=value>]"
        """
        text = ("--" if len(self.name) > 1 else "-") + self.name
        if self._kind is not Kind.BOOL:
            argument = "<" + (self.help_arg_name or self._kind.placeholder) + ">"
            if self._kind.repeatable and self.min_args == 0:
                argument = "[" + argument + "]"
            text += " " + argument
            if self._kind.repeatable and self.max_args > 1:
                text += "..."
        self.help_synopsis = text
        return text

    def __rich_repr__(self):
        yield "name", self.name
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)
        yield "value", self.value()

    def __repr__(self):
        return f"{type(self).__name__}({
            ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
        })"


def _singleton(token, /):
    return [to_int(token)]


def sort(options, /):
    """
    Sort `options` in place by canonical name (stable, lexicographic).
    """
    options[:] = sorted(options, key=operator.attrgetter("name"))


__all__ = (
    "Kind",
    "Option",
    "sort",
)

"""
Token converters.

Pure functions turning one raw command-line token into a typed value. They know
nothing about options: on malformed input they raise ValueError and the caller
(Option.save) turns that into the proper catalog error.

Parsing is locale-neutral and deliberately narrower than the builtins:
- to_int accepts an optional sign followed by ASCII digits. No whitespace, no
  underscores, no non-ASCII digits ("١٢" and " 12" are rejected, int() takes both).
  Values must fit a signed 64-bit integer (INT_MIN..INT_MAX).
- to_float accepts decimal and exponent notation plus inf/infinity/nan, again
  without whitespace or underscores. Literals overflowing a 64-bit float
  ("1e400") are rejected instead of rounding to inf.
- to_bool accepts exactly 1 t T TRUE true True and 0 f F FALSE false False.

Compact sub-syntaxes
- expand_range("3..6") -> [3, 4, 5, 6]; reversed ranges are rejected.
- split_pair("k=v") -> ("k", "v"), split on the first "=" only.
"""
import math
import re

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_TRUTHY = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSY = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def to_int(token, /):
    if not isinstance(token, str):
        raise TypeError("to_int() argument must be a string")
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"invalid integer: {token!r}")
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def to_float(token, /):
    if not isinstance(token, str):
        raise TypeError("to_float() argument must be a string")
    if not _FLOAT.fullmatch(token):
        raise ValueError(f"invalid float: {token!r}")
    value = float(token)
    # overflowing literals such as 1e400 round to inf; only a spelled-out inf may
    if math.isinf(value) and token.lstrip("+-").lower() not in ("inf", "infinity"):
        raise ValueError(f"float out of range: {token!r}")
    return value


def to_bool(token, /):
    if not isinstance(token, str):
        raise TypeError("to_bool() argument must be a string")
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    raise ValueError(f"invalid boolean: {token!r}")


def is_range(token, /):
    """
    Whether `token` uses the range sub-syntax (contains a literal "..").
    """
    return ".." in token


def expand_range(token, /):
    """
    Expand an inclusive integer range "lo..hi" into [lo, lo+1, ..., hi].

    The token is split on the first ".." only, so "1..2..3" fails on "2..3".
    Both bounds go through to_int(); lo > hi raises ValueError instead of
    producing a descending or empty list.
    """
    lower, separator, upper = token.partition("..")
    if not separator:
        raise ValueError(f"not a range: {token!r}")
    lower, upper = to_int(lower), to_int(upper)
    if lower > upper:
        raise ValueError(f"reversed range: {token!r}")
    return list(range(lower, upper + 1))


def split_pair(token, /):
    """
    Split a "key=value" token on its first "=".

    Returns
    - (key, value); either side may be empty ("=v" -> ("", "v")).

    Raises
    - ValueError when the token holds no "=" at all.
    """
    if not isinstance(token, str):
        raise TypeError("split_pair() argument must be a string")
    key, separator, value = token.partition("=")
    if not separator:
        raise ValueError(f"not a key=value pair: {token!r}")
    return key, value


__all__ = (
    "INT_MIN",
    "INT_MAX",
    "to_int",
    "to_float",
    "to_bool",
    "is_range",
    "expand_range",
    "split_pair",
)

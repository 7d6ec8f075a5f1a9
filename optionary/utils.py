"""
Optionary utilities (internal helpers shared by the option engine)

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “nothing bound”, distinct from None and from the
    zero values (False, 0, "", []) an option may legitimately hold.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, preserving every other value.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated methods (fluent setters).

- mirror("attr")
  • Read-only property over a private backing field (self._attr). Containers are
    handed out as fresh copies so callers cannot reach into option state.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(0, "fallback")
    0
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Sentinel type for “no destination bound” and “no value provided”.

    Characteristics
    - Boolean-false, printable as "Unset", sealed against subclassing.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `object` unless it is Unset, in which case return `default`.

    Falsey values such as False, 0, "" or [] are kept as they are; an option
    preloaded with False is not the same as an option never preloaded.
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable, or return a decorator doing so.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name) -> decorator

    Generated methods (see options._presenter) go through this so that
    tracebacks show `set_description` rather than `_presenter.<locals>.setter`.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _detach(object):
    """
    Copy containers recursively: sequences (other than str) become tuples,
    mappings become dicts, sets become frozensets. Scalars pass through.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_detach, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_detach, object.values())))
    elif isinstance(object, Set):
        return frozenset(map(_detach, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors the private field "_{name}".

    Parameters
    - name: str
      Public property name; the backing field is "_" + name.

    Returns
    - property whose getter returns a detached copy of the backing value.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()
"""
Process-wide “not provided” marker. Pair with coalesce() to materialize a
default only when nothing was given.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)

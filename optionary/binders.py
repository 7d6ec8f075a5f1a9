"""
Value binders: where parsed values end up.

An option writes every successfully parsed value to two places:
- its own `last` slot, always present, used by Option.value();
- an optional caller-owned destination, the authoritative result for the
  application.

Destinations
- Scalar kinds (bool, string, int, float) bind a Cell, a tiny mutable box the
  caller keeps a reference to:
    >>> verbose = Cell(False)
    >>> Option("verbose", Kind.BOOL).bind_bool(verbose)
- Container kinds bind the caller's own list or dict. Writes happen in place,
  so the caller's object identity never changes.

Slots
One slot class per kind. A slot validates what gets bound or preloaded, reads
through to the destination and commits a fully computed value. Slots never
parse tokens; Option.save() computes the new value first and only then calls
write(), so a failing save leaves both places untouched.
"""
from .utils import Unset


class Cell[_T]:
    """
    Caller-owned destination for a scalar option value.

    Cells compare equal to other cells holding an equal value.
    """
    __slots__ = ("value",)

    def __init__(self, value, /):
        self.value = value

    def __eq__(self, other):
        if isinstance(other, Cell):
            return self.value == other.value
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Cell({self.value!r})"


class Slot:
    """
    Base slot: a last-value mirror plus an optional bound target.

    Subclasses declare
    - typename: short name used in TypeError messages.
    - zero(): the kind's zero value.
    - accepts(value): whether value has the kind's natural shape.
    """
    typename = "value"

    def __init__(self):
        self.last = self.zero()
        self.target = Unset

    @staticmethod
    def zero():
        raise NotImplementedError

    @staticmethod
    def accepts(value):
        raise NotImplementedError

    @property
    def bound(self):
        return self.target is not Unset

    def bind(self, target):
        raise NotImplementedError

    def read(self):
        raise NotImplementedError

    def write(self, value):
        raise NotImplementedError

    def snapshot(self):
        raise NotImplementedError


class ScalarSlot(Slot):
    def bind(self, target):
        if not isinstance(target, Cell):
            raise TypeError(f"{self.typename} destination must be a Cell")
        if not self.accepts(target.value):
            raise TypeError(f"{self.typename} destination must hold a {self.typename}, "
                            f"got {type(target.value).__name__}")
        self.target = target
        self.last = target.value

    def preload(self, value):
        if not self.accepts(value):
            raise TypeError(f"{self.typename} default must be a {self.typename}, got {type(value).__name__}")
        self.write(value)

    def read(self):
        return self.target.value if self.bound else self.last

    def write(self, value):
        if self.bound:
            self.target.value = value
        self.last = value

    def snapshot(self):
        return self.last


class BoolSlot(ScalarSlot):
    typename = "bool"

    @staticmethod
    def zero():
        return False

    @staticmethod
    def accepts(value):
        return isinstance(value, bool)


class StringSlot(ScalarSlot):
    typename = "string"

    @staticmethod
    def zero():
        return ""

    @staticmethod
    def accepts(value):
        return isinstance(value, str)


class IntSlot(ScalarSlot):
    typename = "int"

    @staticmethod
    def zero():
        return 0

    @staticmethod
    def accepts(value):
        return isinstance(value, int) and not isinstance(value, bool)


class FloatSlot(ScalarSlot):
    typename = "float"

    @staticmethod
    def zero():
        return 0.0

    @staticmethod
    def accepts(value):
        # ints are welcome in a float cell (Cell(0) for 0.0), bools are not
        return isinstance(value, float | int) and not isinstance(value, bool)

    def read(self):
        return float(super().read())

    def write(self, value):
        super().write(float(value))

    def bind(self, target):
        super().bind(target)
        self.last = float(self.last)


class ListSlot(Slot):
    """
    Slot for list kinds. `item` names the accepted element type.
    """
    item = object

    @staticmethod
    def zero():
        return []

    def accepts(self, value):
        return isinstance(value, list) and all(self.accepts_item(item) for item in value)

    def accepts_item(self, item):
        return isinstance(item, self.item)

    def bind(self, target):
        if not isinstance(target, list):
            raise TypeError(f"{self.typename} destination must be a list")
        if not self.accepts(target):
            raise TypeError(f"{self.typename} destination must only hold {self.item.__name__} items")
        self.target = target
        self.last = list(target)

    def read(self):
        return list(self.target if self.bound else self.last)

    def write(self, value):
        if self.bound:
            self.target[:] = value
        self.last = list(value)

    def snapshot(self):
        return list(self.last)


class StringListSlot(ListSlot):
    typename = "string list"
    item = str


class IntListSlot(ListSlot):
    typename = "int list"
    item = int

    def accepts_item(self, item):
        return isinstance(item, int) and not isinstance(item, bool)


class StringMapSlot(Slot):
    typename = "string map"

    @staticmethod
    def zero():
        return {}

    @staticmethod
    def accepts(value):
        return isinstance(value, dict) and all(
            isinstance(key, str) and isinstance(item, str) for key, item in value.items()
        )

    def bind(self, target):
        if not isinstance(target, dict):
            raise TypeError(f"{self.typename} destination must be a dict")
        if not self.accepts(target):
            raise TypeError(f"{self.typename} destination must only hold str keys and values")
        self.target = target
        self.last = dict(target)

    def read(self):
        return dict(self.target if self.bound else self.last)

    def write(self, value):
        if self.bound:
            self.target.clear()
            self.target.update(value)
        self.last = dict(value)

    def snapshot(self):
        return dict(self.last)


__all__ = (
    "Cell",
    "Slot",
    "ScalarSlot",
    "BoolSlot",
    "StringSlot",
    "IntSlot",
    "FloatSlot",
    "ListSlot",
    "StringListSlot",
    "IntListSlot",
    "StringMapSlot",
)

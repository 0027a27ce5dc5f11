from constants import HARDENED_KEY_START_INDEX
from keys.errors import KeyIndexOutOfRange


class KeyIndex(object):
    """
    The index of a child key. Only normal indices (0 to 2 ** 31 - 1) are
    supported, hardened indices are rejected by `from_index`.

    Use `from_index` to build one, calling the constructor directly skips
    the range check and `is_valid` will catch it before derivation.
    """

    NORMAL = "Normal"

    def __init__(self, index, kind=NORMAL):
        self.index = index
        self.kind = kind

    @classmethod
    def from_index(cls, index):
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("key index must be an int, not %s" % type(index).__name__)
        if not 0 <= index < HARDENED_KEY_START_INDEX:
            raise KeyIndexOutOfRange(index)
        return cls(index)

    def is_valid(self):
        if self.kind == KeyIndex.NORMAL:
            return isinstance(self.index, int) and 0 <= self.index < HARDENED_KEY_START_INDEX
        return False

    def __int__(self):
        return self.index

    def __eq__(self, other):
        if not isinstance(other, KeyIndex):
            return NotImplemented
        return self.kind == other.kind and self.index == other.index

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.index)

    def __repr__(self):
        return "%s(%s)" % (self.kind, self.index)

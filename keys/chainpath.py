import re

from constants import MASTER_SYMBOL, HARDENED_SYMBOLS, SEPARATOR, HARDENED_KEY_START_INDEX, MAX_KEY_INDEX
from keys.errors import InvalidChainPath, BlankSubPath, KeyIndexOutOfRange
from keys.keyindex import KeyIndex

_NUMERAL = re.compile(r"[0-9]+")


class SubPath(object):
    """
    One step of a chain path, either the root (`m`) or a child index.
    """

    def __init__(self, key_index=None):
        self.key_index = key_index

    @classmethod
    def child(cls, key_index):
        return cls(key_index)

    def is_root(self):
        return self.key_index is None

    def __eq__(self, other):
        if not isinstance(other, SubPath):
            return NotImplemented
        return self.key_index == other.key_index

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.key_index)

    def __repr__(self):
        if self.is_root():
            return "Root"
        return "Child(%r)" % self.key_index


SubPath.ROOT = SubPath()


def parse_segment(segment):
    """
    Turn a single path segment into a `SubPath`.

    Raises:
        BlankSubPath: the segment is empty.
        InvalidChainPath: the segment is not a decimal numeral (with an
            optional hardened marker) or does not fit in 32 bits.
        KeyIndexOutOfRange: the numeral is outside the normal range, or it
            carries a hardened marker. Hardened derivation is not supported.
    """
    if segment == MASTER_SYMBOL:
        return SubPath.ROOT
    if not segment:
        raise BlankSubPath(segment)

    hardened = segment[-1:] in HARDENED_SYMBOLS
    numeral = segment[:-1] if hardened else segment
    if not _NUMERAL.fullmatch(numeral):
        raise InvalidChainPath(segment)
    index = int(numeral)
    if index > MAX_KEY_INDEX:
        raise InvalidChainPath(segment)

    if hardened:
        if index >= HARDENED_KEY_START_INDEX:
            raise KeyIndexOutOfRange(index)
        # TODO: return KeyIndex.hardened once hardened CKD is implemented
        raise KeyIndexOutOfRange(index + HARDENED_KEY_START_INDEX,
                                 "hardened key index is not supported")
    return SubPath.child(KeyIndex.from_index(index))


class ChainPath(object):
    """
    A textual BIP-32 path such as `m/0/1`.

    The string is the only state kept. Every call to `iter` splits and
    parses it again, so a ChainPath can be walked any number of times.
    Parsing is lazy: an error is raised when the bad segment is reached.
    """

    def __init__(self, path):
        if isinstance(path, ChainPath):
            path = path.path
        if not isinstance(path, str):
            raise TypeError("chain path must be a str, not %s" % type(path).__name__)
        self.path = path

    def iter(self):
        start = 0
        while True:
            end = self.path.find(SEPARATOR, start)
            if end < 0:
                yield parse_segment(self.path[start:])
                return
            yield parse_segment(self.path[start:end])
            start = end + 1

    def __iter__(self):
        return self.iter()

    def __eq__(self, other):
        if not isinstance(other, ChainPath):
            return NotImplemented
        return self.path == other.path

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.path)

    def __str__(self):
        return self.path

    def __repr__(self):
        return "ChainPath(%r)" % self.path

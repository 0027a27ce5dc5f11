class HDWalletError(Exception):
    """
    Base class for every error raised while parsing a chain path or
    deriving keys.
    """


class ChainPathError(HDWalletError):
    """A chain path segment could not be parsed."""

    def __init__(self, segment, message):
        HDWalletError.__init__(self, "%s: %r" % (message, segment))
        self.segment = segment


class InvalidChainPath(ChainPathError):
    def __init__(self, segment, message="invalid chain path segment"):
        ChainPathError.__init__(self, segment, message)


class BlankSubPath(ChainPathError):
    def __init__(self, segment=""):
        ChainPathError.__init__(self, segment, "blank chain path segment")


class KeyIndexOutOfRange(HDWalletError):
    """
    Raised for an index that is not a valid normal child index. The raw
    value that was rejected is kept in `index`.
    """

    def __init__(self, index, message="key index out of range"):
        HDWalletError.__init__(self, "%s: %s" % (message, index))
        self.index = index


class CurveError(HDWalletError):
    """An error from the elliptic curve library (invalid scalar or point)."""

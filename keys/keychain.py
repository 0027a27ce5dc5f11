from constants import MAX_DEPTH
from log import Logger
from keys.chainpath import ChainPath
from keys.errors import InvalidChainPath
from keys.extended import ExtendedPubKey


class Derivation(object):
    """
    Where a derived key came from.

    depth: number of derivation steps from the master key (0 for the master).
    parent_key: the `ExtendedPrivKey` one step above, None for the master.
    key_index: the `KeyIndex` used on the parent, None for the master.
    """

    def __init__(self, depth, parent_key=None, key_index=None):
        self.depth = depth
        self.parent_key = parent_key
        self.key_index = key_index

    @classmethod
    def master(cls):
        return cls(0)

    def __eq__(self, other):
        if not isinstance(other, Derivation):
            return NotImplemented
        return (self.depth, self.parent_key, self.key_index) == \
            (other.depth, other.parent_key, other.key_index)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return "Derivation(depth=%d, parent_key=%r, key_index=%r)" % (
            self.depth, self.parent_key, self.key_index)


class KeyChain(object):
    """
    Walks a chain path from a master `ExtendedPrivKey`, applying one child
    derivation per path step.
    """

    def __init__(self, master_key):
        self.master_key = master_key
        self.log = Logger(system=self)

    def derive_private_key(self, chain_path):
        """
        Return a tuple of (derived `ExtendedPrivKey`, `Derivation`).

        The path must start with the root symbol `m`, a root anywhere else is
        rejected. The first parse or derivation error stops the walk and is
        raised unchanged.
        """
        chain_path = ChainPath(chain_path)
        steps = chain_path.iter()

        first = next(steps, None)
        if first is None or not first.is_root():
            raise InvalidChainPath(str(chain_path), "chain path must start with the master symbol")

        key = self.master_key
        derivation = Derivation.master()
        for sub_path in steps:
            if sub_path.is_root():
                raise InvalidChainPath(str(chain_path), "master symbol is only allowed at the start")
            depth = derivation.depth + 1
            if depth > MAX_DEPTH:
                raise InvalidChainPath(str(chain_path), "chain path is deeper than %d levels" % MAX_DEPTH)
            self.log.debug("deriving child %s at depth %d" % (sub_path.key_index, depth))
            child = key.derive_private_key(sub_path.key_index)
            derivation = Derivation(depth, key, sub_path.key_index)
            key = child
        return key, derivation

    def derive_public_key(self, chain_path):
        """
        Same walk as `derive_private_key` but returns the `ExtendedPubKey` of
        the derived key with its `Derivation`.
        """
        key, derivation = self.derive_private_key(chain_path)
        return ExtendedPubKey.from_private_key(key), derivation


def derive_private_key(master_key, chain_path):
    return KeyChain(master_key).derive_private_key(chain_path)

import hmac
import hashlib
import struct
from binascii import hexlify, unhexlify

from zope.interface import implementer, provider

from constants import SEED_KEY, CHAIN_CODE_LENGTH, PRIVATE_KEY_LENGTH, PUBLIC_KEY_LENGTH
from interfaces import ExtendedKey, Deserialize
from keys import curve
from keys.errors import KeyIndexOutOfRange
from keys.keyindex import KeyIndex


def _hmac_sha512(key, data):
    return hmac.new(key, data, hashlib.sha512).digest()


def _split(digest):
    """Split a 64 byte HMAC into the key tweak (left) and chain code (right)."""
    return digest[:32], digest[32:]


def _check_chain_code(chain_code):
    chain_code = bytes(chain_code)
    if len(chain_code) != CHAIN_CODE_LENGTH:
        raise ValueError("chain code must be %d bytes, got %d" % (CHAIN_CODE_LENGTH, len(chain_code)))
    return chain_code


def _normal_index(key_index):
    if not isinstance(key_index, KeyIndex):
        raise TypeError("expected a KeyIndex, not %s" % type(key_index).__name__)
    if not key_index.is_valid():
        raise KeyIndexOutOfRange(key_index.index)
    return key_index.index


@implementer(ExtendedKey)
@provider(Deserialize)
class ExtendedPrivKey(object):
    """
    A secp256k1 private key and its chain code.

    Instances are never modified, every derivation returns a new key.
    """

    def __init__(self, private_key, chain_code):
        self.private_key = private_key
        self.chain_code = _check_chain_code(chain_code)

    @classmethod
    def from_seed(cls, seed):
        """
        Build the master key. The seed is fed through HMAC-SHA512 keyed with
        `SEED_KEY`: the left half becomes the private key, the right half the
        chain code. Fails with `CurveError` if the left half is not a valid
        scalar.
        """
        key, chain_code = _split(_hmac_sha512(SEED_KEY, bytes(seed)))
        return cls(curve.private_key_from_bytes(key), chain_code)

    def public_key(self):
        return curve.public_key_from_private(self.private_key)

    def public_key_bytes(self):
        return curve.public_key_to_bytes(self.public_key())

    def _sign_normal_key(self, index):
        return _hmac_sha512(self.chain_code, self.public_key_bytes() + struct.pack(">I", index))

    def derive_private_key(self, key_index):
        """
        Normal child key derivation (CKD). The child private key is
        (IL + parent key) mod n where IL is the left half of
        HMAC-SHA512(chain code, compressed public key || index).

        Raises:
            KeyIndexOutOfRange: the index is not a valid normal index.
            CurveError: IL or the resulting key is not a valid scalar.
        """
        index = _normal_index(key_index)
        tweak, chain_code = _split(self._sign_normal_key(index))
        tweak = curve.private_key_from_bytes(tweak)
        return ExtendedPrivKey(curve.add_private_keys(tweak, self.private_key), chain_code)

    def serialize(self):
        return curve.private_key_to_bytes(self.private_key) + self.chain_code

    @classmethod
    def deserialize(cls, data):
        data = bytes(data)
        private_key = curve.private_key_from_bytes(data[:PRIVATE_KEY_LENGTH])
        return cls(private_key, data[PRIVATE_KEY_LENGTH:])

    def to_hex(self):
        return hexlify(self.serialize()).decode()

    @classmethod
    def from_hex(cls, data):
        return cls.deserialize(unhexlify(data))

    def __eq__(self, other):
        if not isinstance(other, ExtendedPrivKey):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.serialize())

    def __repr__(self):
        # never print the private key
        return "ExtendedPrivKey(public_key=%s)" % hexlify(self.public_key_bytes()).decode()


@implementer(ExtendedKey)
@provider(Deserialize)
class ExtendedPubKey(object):
    """
    A secp256k1 public key and its chain code. Can only derive normal
    children, a hardened child needs the parent's private key.
    """

    def __init__(self, public_key, chain_code):
        self.public_key = public_key
        self.chain_code = _check_chain_code(chain_code)

    @classmethod
    def from_private_key(cls, extended_key):
        return cls(extended_key.public_key(), extended_key.chain_code)

    def public_key_bytes(self):
        return curve.public_key_to_bytes(self.public_key)

    def derive_public_key(self, key_index):
        """
        Public parent to public child derivation (CKD'). The child point is
        parent point + IL * G.

        Raises:
            KeyIndexOutOfRange: the index is not a valid normal index.
            CurveError: IL is not a valid scalar or the child point is the
                point at infinity.
        """
        index = _normal_index(key_index)
        digest = _hmac_sha512(self.chain_code, self.public_key_bytes() + struct.pack(">I", index))
        tweak, chain_code = _split(digest)
        tweak = curve.private_key_from_bytes(tweak)
        return ExtendedPubKey(curve.add_generator_multiple(self.public_key, tweak), chain_code)

    def serialize(self):
        return self.public_key_bytes() + self.chain_code

    @classmethod
    def deserialize(cls, data):
        data = bytes(data)
        public_key = curve.public_key_from_bytes(data[:PUBLIC_KEY_LENGTH])
        return cls(public_key, data[PUBLIC_KEY_LENGTH:])

    def to_hex(self):
        return hexlify(self.serialize()).decode()

    @classmethod
    def from_hex(cls, data):
        return cls.deserialize(unhexlify(data))

    def __eq__(self, other):
        if not isinstance(other, ExtendedPubKey):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.serialize())

    def __repr__(self):
        return "ExtendedPubKey(%s)" % self.to_hex()

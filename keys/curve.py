"""
Thin layer over coincurve (libsecp256k1). Everything the derivation code
needs from the curve goes through here so that a failure in the curve
library always reaches the caller as a `CurveError`.
"""

from coincurve import PrivateKey, PublicKey

from constants import PRIVATE_KEY_LENGTH, PUBLIC_KEY_LENGTH
from keys.errors import CurveError


def private_key_from_bytes(data):
    """
    Parse a 32 byte big-endian scalar. It must be non-zero and smaller than
    the curve order.
    """
    if len(data) != PRIVATE_KEY_LENGTH:
        raise CurveError("private key must be %d bytes, got %d" % (PRIVATE_KEY_LENGTH, len(data)))
    try:
        return PrivateKey(bytes(data))
    except (ValueError, TypeError) as e:
        raise CurveError(str(e)) from e


def private_key_to_bytes(private_key):
    return private_key.secret


def public_key_from_bytes(data):
    """Parse a 33 byte compressed point."""
    if len(data) != PUBLIC_KEY_LENGTH:
        raise CurveError("public key must be %d bytes, got %d" % (PUBLIC_KEY_LENGTH, len(data)))
    try:
        return PublicKey(bytes(data))
    except (ValueError, TypeError) as e:
        raise CurveError(str(e)) from e


def public_key_to_bytes(public_key):
    return public_key.format(compressed=True)


def public_key_from_private(private_key):
    return private_key.public_key


def add_private_keys(tweak, private_key):
    """(tweak + private_key) mod n, failing if the sum is zero."""
    try:
        return private_key.add(tweak.secret)
    except ValueError as e:
        raise CurveError(str(e)) from e


def add_generator_multiple(public_key, tweak):
    """public_key + tweak * G, failing on the point at infinity."""
    try:
        return public_key.add(tweak.secret)
    except ValueError as e:
        raise CurveError(str(e)) from e

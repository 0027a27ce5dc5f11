"""
Hierarchical deterministic (BIP-32 style) key derivation over secp256k1.

Modules:
    keyindex: validated child indices.
    chainpath: the `m/0/1` path grammar and its lazy parser.
    extended: extended private/public keys, child key derivation and the
        fixed-layout byte codec.
    keychain: walks a chain path from a master key and records where the
        derived key came from.

Hardened derivation is not supported, hardened indices and path segments
are rejected with `KeyIndexOutOfRange`.
"""
version_info = (0, 1)
version = '.'.join([str(i) for i in version_info])

from zope.interface import Interface, Attribute


class Serialize(Interface):
    """
    An object with a fixed-layout byte encoding. There is no version byte,
    length prefix or checksum, callers that need one must wrap this layer.
    """

    def serialize():
        """
        Return the encoded object as `bytes`.
        """


class Deserialize(Interface):
    """
    Provided by classes (not instances) which can rebuild an object from the
    output of `Serialize.serialize`.
    """

    def deserialize(data):
        """
        Parse `data` and return a new instance.

        Args:
            data: the bytes produced by `serialize`
        Raises:
            CurveError: a key component is malformed.
            ValueError: the chain code is not 32 bytes.
        """


class ExtendedKey(Serialize):
    """
    A key paired with its chain code, the minimal unit needed to keep
    deriving children.
    """

    chain_code = Attribute("""32 bytes of `bytes` entropy used as the HMAC key for derivation""")

    def public_key_bytes():
        """
        Return the 33 byte compressed public key this extended key identifies.
        """

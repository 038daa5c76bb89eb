class CipherError(Exception):
    """Base class for every failure raised by the cipher facade."""


class KeyGenerationError(CipherError):
    pass


class InvalidKeyError(CipherError):
    pass


class InvalidEncodingError(CipherError):
    pass


class EncryptionError(CipherError):
    pass


class DecryptionError(CipherError):
    # One message for every cause: wrong key, truncation, tampering.
    MESSAGE = 'failed to decrypt data'

    def __init__(self):
        super().__init__(self.MESSAGE)


class SerializationError(CipherError):
    pass

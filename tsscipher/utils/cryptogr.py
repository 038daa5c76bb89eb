from binascii import unhexlify

from coincurve import PrivateKey, PublicKey
from ecies import encrypt, decrypt

from tsscipher.cipher import const


def generate_key() -> PrivateKey:
    """
    Generates a fresh secp256k1 private key from the system random source.
    :return: The private key.
    """
    return PrivateKey()


def load_private_key(key: str) -> PrivateKey:
    """
    Loads a private key from a hex string.
    Keys shorter than 32 bytes are left-padded, big-integer style.
    :param key: The private key in hex format.
    :return: The private key.
    """
    secret = unhexlify(key)
    if not secret or len(secret) > const.PRIVATE_KEY_SIZE:
        raise ValueError(f'private key must be 1 to {const.PRIVATE_KEY_SIZE} bytes, got {len(secret)}')

    return PrivateKey(secret.rjust(const.PRIVATE_KEY_SIZE, b'\x00'))


def dump_private_key(key: PrivateKey) -> str:
    """
    Dumps a private key to a hex string.
    :param key: The private key.
    :return: The private key in hex format.
    """
    return key.secret.hex()


def load_public_key(key: str) -> PublicKey:
    """
    Loads a public key from a hex string, compressed or uncompressed.
    :param key: The public key in hex format.
    :return: The public key.
    """
    data = unhexlify(key)
    if len(data) not in (const.PUB_KEY_SIZE, const.UNCOMPRESSED_PUB_KEY_SIZE):
        raise ValueError(f'public key must be {const.PUB_KEY_SIZE} or {const.UNCOMPRESSED_PUB_KEY_SIZE} bytes, got {len(data)}')

    return PublicKey(data)


def dump_public_key(key: PublicKey, compressed: bool = True) -> str:
    """
    Dumps a public key to a hex string.
    :param key: The public key.
    :param compressed: Whether to use the 33 byte compressed point encoding.
    :return: The public key in hex format.
    """
    return key.format(compressed=compressed).hex()


def encrypt_message(message: bytes, public_key: PublicKey) -> bytes:
    """
    Encrypts a message with a public key.
    :param message: The plaintext bytes to encrypt.
    :param public_key: The public key to encrypt with.
    :return: The ECIES envelope.
    """
    return encrypt(public_key.format(True), message)


def decrypt_message(message: bytes, private_key: PrivateKey) -> bytes:
    """
    Decrypts a message with a private key.
    :param message: The ECIES envelope, ephemeral public key first.
    :param private_key: The private key to decrypt with.
    :return: The authenticated plaintext bytes.
    """
    return decrypt(private_key.secret, message)

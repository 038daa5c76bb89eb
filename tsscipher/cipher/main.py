import base64
import binascii
import hashlib
import logging

import pydantic

from tsscipher.cipher import const
from tsscipher.cipher.errors import (
    DecryptionError,
    EncryptionError,
    InvalidEncodingError,
    InvalidKeyError,
    KeyGenerationError,
    SerializationError,
)
from tsscipher.cipher.structures import KeyPair
from tsscipher.utils import cryptogr

logger = logging.getLogger('cipher')


def generate_key_pair() -> str:
    """
    Generates a secp256k1 key pair.
    :return: JSON text {"privateKey": <hex>, "publicKey": <compressed hex>}.
    """
    try:
        private_key = cryptogr.generate_key()
    except Exception as exc:
        raise KeyGenerationError(f'failed to generate key: {exc}') from exc

    try:
        key_pair = KeyPair(
            private_key=cryptogr.dump_private_key(private_key),
            public_key=cryptogr.dump_public_key(private_key.public_key),
        )
        data = key_pair.to_json()
    except (pydantic.ValidationError, ValueError) as exc:
        raise SerializationError(f'failed to marshal key pair to JSON: {exc}') from exc

    logger.debug('generated key pair')
    return data


def public_key_from_private(private_key_hex: str) -> str:
    """
    Derives the compressed public key of a private key.
    :param private_key_hex: The private key in hex format.
    :return: The public key in compressed hex format.
    """
    try:
        private_key = cryptogr.load_private_key(private_key_hex)
    except (ValueError, TypeError) as exc:
        raise InvalidKeyError(f'failed to decode private key: {exc}') from exc

    return cryptogr.dump_public_key(private_key.public_key)


def ecies_encrypt(plaintext: str, public_key_hex: str) -> str:
    """
    Encrypts text to a public key.
    :param plaintext: The text to encrypt, may be empty.
    :param public_key_hex: The recipient public key, compressed or uncompressed hex.
    :return: The ECIES envelope in base64.
    """
    try:
        public_key = cryptogr.load_public_key(public_key_hex)
    except (ValueError, TypeError) as exc:
        raise InvalidKeyError(f'failed to decode public key: {exc}') from exc

    try:
        data = plaintext.encode(const.TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        raise InvalidEncodingError(f'failed to encode plaintext: {exc}') from exc

    try:
        encrypted = cryptogr.encrypt_message(data, public_key)
    except Exception as exc:
        raise EncryptionError(f'failed to encrypt data: {exc}') from exc

    logger.debug('encrypted %d bytes into %d byte envelope', len(data), len(encrypted))
    return base64.b64encode(encrypted).decode('ascii')


def ecies_decrypt(ciphertext_b64: str, private_key_hex: str) -> str:
    """
    Decrypts a base64 ECIES envelope.
    Every authentication failure raises the same DecryptionError.
    :param ciphertext_b64: The envelope in standard base64.
    :param private_key_hex: The private key in hex format.
    :return: The decrypted text.
    """
    try:
        private_key = cryptogr.load_private_key(private_key_hex)
    except (ValueError, TypeError) as exc:
        raise InvalidKeyError(f'failed to decode private key: {exc}') from exc

    try:
        encrypted = base64.b64decode(ciphertext_b64, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise InvalidEncodingError(f'failed to decode encrypted data: {exc}') from exc

    # ephemeral key must be a plain uncompressed point, hybrid prefixes are rejected
    if len(encrypted) < const.MIN_ENVELOPE_SIZE or encrypted[0] != const.UNCOMPRESSED_PREFIX:
        logger.debug('envelope of %d bytes rejected', len(encrypted))
        raise DecryptionError()

    try:
        data = cryptogr.decrypt_message(encrypted, private_key)
    except Exception:
        logger.debug('envelope of %d bytes rejected', len(encrypted))
        raise DecryptionError() from None

    try:
        return data.decode(const.TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(f'decrypted data is not {const.TEXT_ENCODING} text') from exc


def sha256_hex(message: str) -> str:
    """Hex SHA-256 digest of the UTF-8 encoded message."""
    return hashlib.sha256(message.encode(const.TEXT_ENCODING)).hexdigest()

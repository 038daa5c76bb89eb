# secp256k1 sizes, as serialized by coincurve
PRIVATE_KEY_SIZE = 32
PUB_KEY_SIZE = 33
UNCOMPRESSED_PUB_KEY_SIZE = 65
UNCOMPRESSED_PREFIX = 0x04

# ephemeral pub key || nonce || tag || ciphertext
NONCE_SIZE = 16
TAG_SIZE = 16
MIN_ENVELOPE_SIZE = UNCOMPRESSED_PUB_KEY_SIZE + NONCE_SIZE + TAG_SIZE

PRIVATE_KEY_FIELD = 'privateKey'
PUBLIC_KEY_FIELD = 'publicKey'

TEXT_ENCODING = 'utf-8'

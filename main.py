import argparse
import logging
import sys

from tsscipher.cipher import main as cipher
from tsscipher.cipher.errors import CipherError


def build_parser():
    parser = argparse.ArgumentParser(prog='tsscipher')

    parser.add_argument(
        '-l', '--logging-level', type=str,
        help='Logging level',
        default='WARNING',
    )

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('keypair', help='Generate a key pair as JSON')

    encrypt = commands.add_parser('encrypt', help='Encrypt text to a public key')
    encrypt.add_argument(
        '-k', '--public-key', type=str, required=True,
        help='Recipient public key (hex)',
    )
    encrypt.add_argument(
        'text', nargs='?',
        help='Text to encrypt, read from stdin when omitted',
    )

    decrypt = commands.add_parser('decrypt', help='Decrypt a base64 ciphertext')
    decrypt.add_argument(
        '-k', '--private-key', type=str, required=True,
        help='Private key (hex)',
    )
    decrypt.add_argument(
        'ciphertext', nargs='?',
        help='Base64 ciphertext, read from stdin when omitted',
    )

    digest = commands.add_parser('sha256', help='Hex SHA-256 of text')
    digest.add_argument(
        'text', nargs='?',
        help='Text to hash, read from stdin when omitted',
    )

    return parser


def read_input(value):
    if value is not None:
        return value
    # trailing newline from `echo` or a heredoc
    return sys.stdin.read().rstrip('\n')


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.getLevelName(args.logging_level.upper()),
        format='%(name)-24s [LINE:%(lineno)-3s]# %(levelname)-8s [%(asctime)s]  %(message)s'
    )

    logging.debug('running %s', args.command)

    try:
        if args.command == 'keypair':
            result = cipher.generate_key_pair()
        elif args.command == 'encrypt':
            result = cipher.ecies_encrypt(read_input(args.text), args.public_key)
        elif args.command == 'decrypt':
            result = cipher.ecies_decrypt(read_input(args.ciphertext).strip(), args.private_key)
        else:
            result = cipher.sha256_hex(read_input(args.text))
    except CipherError as exc:
        logging.error('%s failed: %s', args.command, exc)
        return 1

    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(run())

# -*- coding: utf-8 -*-
import unittest

from coincurve import PrivateKey

from tsscipher.utils import cryptogr


class TestKeys(unittest.TestCase):
    def test_private_key_hex(self) -> None:
        key = cryptogr.generate_key()
        dumped = cryptogr.dump_private_key(key)

        assert len(dumped) == 64
        assert cryptogr.load_private_key(dumped).secret == key.secret

    def test_private_key_padding(self) -> None:
        key = cryptogr.load_private_key('0102')

        assert key.secret == bytes(30) + b'\x01\x02'
        assert cryptogr.dump_private_key(key) == '00' * 30 + '0102'

    def test_whitespace_rejected(self) -> None:
        key = cryptogr.generate_key()
        private_hex = cryptogr.dump_private_key(key)
        public_hex = cryptogr.dump_public_key(key.public_key)

        with self.assertRaises(ValueError):
            cryptogr.load_private_key(' ' + private_hex)
        with self.assertRaises(ValueError):
            cryptogr.load_public_key(public_hex[:2] + ' ' + public_hex[2:])

    def test_private_key_too_long(self) -> None:
        with self.assertRaises(ValueError):
            cryptogr.load_private_key('01' * 33)

    def test_public_key_formats(self) -> None:
        key = PrivateKey().public_key
        compressed = cryptogr.dump_public_key(key)
        uncompressed = cryptogr.dump_public_key(key, compressed=False)

        assert len(compressed) == 66
        assert len(uncompressed) == 130
        assert uncompressed.startswith('04')
        assert cryptogr.load_public_key(uncompressed).format() == key.format()
        assert cryptogr.load_public_key(compressed).format(compressed=False).hex() == uncompressed

    def test_public_key_wrong_size(self) -> None:
        key = cryptogr.dump_public_key(PrivateKey().public_key)

        with self.assertRaises(ValueError):
            cryptogr.load_public_key(key + '00')


class TestMessages(unittest.TestCase):
    def test_encrypt_decrypt(self) -> None:
        key = cryptogr.generate_key()
        message = b'\x00\xffkeyshare'

        encrypted = cryptogr.encrypt_message(message, key.public_key)
        assert encrypted[0] == 0x04
        assert cryptogr.decrypt_message(encrypted, key) == message


if __name__ == '__main__':
    unittest.main()

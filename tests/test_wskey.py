import os
import sys
import base64
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wscore import config
from wscore.wskey import derive_accept, new_client_key, new_mask_key, sha1


class TestDeriveAccept(unittest.TestCase):
    def test_rfc_sample_nonce(self):
        self.assertEqual(derive_accept("dGhlIHNhbXBsZSBub25jZQ=="), "s3pPLMBiTxaQ9kYGzzhZRbK+xOo=")

    def test_same_key_same_result(self):
        key = new_client_key()
        self.assertEqual(derive_accept(key), derive_accept(key))

    def test_no_case_folding(self):
        key = "dGhlIHNhbXBsZSBub25jZQ=="
        self.assertNotEqual(derive_accept(key.lower()), derive_accept(key))

    def test_whitespace_is_significant(self):
        key = "dGhlIHNhbXBsZSBub25jZQ=="
        self.assertNotEqual(derive_accept(key + " "), derive_accept(key))

    def test_total_over_arbitrary_strings(self):
        for key in ("", "not base64 at all", "ключ", ":::"):
            accept = derive_accept(key)
            self.assertEqual(len(base64.b64decode(accept)), 20)

    def test_surrogate_escaped_bytes_hash_as_original(self):
        wire = b"k\xe9y=="
        key = wire.decode("utf-8", "surrogateescape")
        expected = base64.b64encode(sha1(wire + config.WS_GUID.encode())).decode()
        self.assertEqual(derive_accept(key), expected)

    def test_plain_text_hashes_as_utf8(self):
        expected = base64.b64encode(sha1("k\u00e9y".encode("utf-8") + config.WS_GUID.encode())).decode()
        self.assertEqual(derive_accept("k\u00e9y"), expected)

    def test_uses_shared_guid(self):
        self.assertEqual(config.WS_GUID, "258EAFA5-E914-47DA-95CA-C5AB0DC85B11")
        expected = base64.b64encode(sha1(("abc" + config.WS_GUID).encode())).decode()
        self.assertEqual(derive_accept("abc"), expected)


class TestNonces(unittest.TestCase):
    def test_client_key_is_16_random_bytes(self):
        key = new_client_key()
        self.assertEqual(len(key), 24)
        self.assertEqual(len(base64.b64decode(key)), 16)

    def test_client_keys_differ(self):
        self.assertNotEqual(new_client_key(), new_client_key())

    def test_mask_key_length(self):
        self.assertEqual(len(new_mask_key()), 4)


if __name__ == '__main__':
    unittest.main()

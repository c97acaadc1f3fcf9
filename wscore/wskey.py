
# Accept-key derivation and nonces (PyCA cryptography)
import os, base64
from cryptography.hazmat.primitives import hashes
from wscore import config

def sha1(data: bytes) -> bytes:
    d = hashes.Hash(hashes.SHA1())
    d.update(data)
    return d.finalize()

def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")

def derive_accept(key: str) -> str:
    """Sec-WebSocket-Accept for a client key.

    The key is hashed exactly as given: no case folding, no trimming. Keys
    taken from read_header_block hash as their original wire bytes, since
    undecodable bytes come back out of the surrogate escapes.
    """
    return b64(sha1((key + config.WS_GUID).encode("utf-8", "surrogateescape")))

def new_client_key() -> str:
    return b64(os.urandom(16))

def new_mask_key() -> bytes:
    return os.urandom(4)


# Blocking byte-stream transport over a socket
from wscore.errors import ConnectionClosed, HeaderTooLarge
from wscore import config

HEADER_END = b"\r\n\r\n"

class Transport:
    def __init__(self, sock):
        self.sock = sock
        self._pending = b""

    def read_some(self, n: int = config.RECV_CHUNK) -> bytes:
        """Up to n bytes; b"" once the peer has closed."""
        if self._pending:
            data, self._pending = self._pending[:n], self._pending[n:]
            return data
        return self.sock.recv(n)

    def unread(self, data: bytes):
        self._pending = data + self._pending

    def write_all(self, data: bytes):
        self.sock.sendall(data)

    def close(self):
        try: self.sock.close()
        except OSError: pass

def read_header_block(transport, limit: int = config.MAX_HEADER_BYTES) -> str:
    """Raw header text up to and including the first blank line.

    Undecodable bytes are kept as surrogate escapes so header values can be
    turned back into their wire bytes. Anything read past the terminator goes
    back to the transport so the first frame is not lost.
    """
    buf = b""
    while HEADER_END not in buf:
        if len(buf) > limit:
            raise HeaderTooLarge(f"no header terminator within {limit} bytes")
        chunk = transport.read_some()
        if not chunk:
            raise ConnectionClosed("peer closed during handshake")
        buf += chunk
    end = buf.index(HEADER_END) + len(HEADER_END)
    if end < len(buf):
        transport.unread(buf[end:])
    return buf[:end].decode("utf-8", "surrogateescape")

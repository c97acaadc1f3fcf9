
import socket
from wscore.transport import Transport, read_header_block
from wscore.frames import decode_frame, encode_text, encode_client_text, encode_close, OP_TEXT, OP_CLOSE
from wscore.errors import IncompleteFrame, ProtocolError, ConnectionClosed
from wscore.handshake import server_response, client_request, verify_server_response
from wscore.wskey import new_client_key, new_mask_key
from wscore import config

def handshake_server(conn) -> str:
    """Answer the opening handshake on `conn`; returns the request header text."""
    req = read_header_block(conn)
    conn.write_all(server_response(req).encode("ascii"))
    return req

def client_handshake(conn, host, port, path="/") -> str:
    key = new_client_key()
    conn.write_all(client_request(key, host, port, path).encode("ascii"))
    resp = read_header_block(conn)
    verify_server_response(resp, key)
    return resp

def client_connect(host, port, path="/"):
    s = socket.create_connection((host, port))
    conn = Transport(s)
    try: client_handshake(conn, host, port, path)
    except Exception:
        conn.close(); raise
    return conn

def recv_frame(conn, expect_masked=None, limit=config.MAX_FRAME_BYTES):
    """Next whole frame from `conn`, buffering across short reads.

    Returns None if the peer closes between frames. With expect_masked set,
    a frame with the wrong mask direction is a ProtocolError, as is a frame
    declaring more than `limit` bytes.
    """
    buf = b""
    while True:
        try:
            frame = decode_frame(buf)
            break
        except IncompleteFrame as e:
            if e.needed > limit:
                raise ProtocolError(f"frame of {e.needed} bytes exceeds the {limit} byte limit")
            chunk = conn.read_some()
            if not chunk:
                if not buf: return None
                raise ConnectionClosed(f"peer closed mid-frame ({len(buf)} bytes buffered)")
            buf += chunk
    if frame.size > limit:
        raise ProtocolError(f"frame of {frame.size} bytes exceeds the {limit} byte limit")
    if frame.size < len(buf):
        conn.unread(buf[frame.size:])
    if not frame.fin:
        raise ProtocolError("fragmented messages are not supported")
    if expect_masked is not None and frame.masked != expect_masked:
        raise ProtocolError("client frames must be masked" if expect_masked else "server frames must not be masked")
    return frame

def send_text(conn, text: str):
    conn.write_all(encode_text(text))

def client_send_text(conn, text: str):
    conn.write_all(encode_client_text(text))

def _recv_text(conn, expect_masked, on_close):
    while True:
        frame = recv_frame(conn, expect_masked)
        if frame is None: return None
        if frame.opcode == OP_CLOSE:
            on_close()
            return None
        if frame.opcode == OP_TEXT:
            return frame.text
        # ping/pong/binary are not handled; skip them

def server_recv_text(conn):
    """Next text message from a client, or None once it closed."""
    return _recv_text(conn, True, lambda: conn.write_all(encode_close()))

def client_recv_text(conn):
    return _recv_text(conn, False, lambda: None)

def client_close(conn):
    try: conn.write_all(encode_close(new_mask_key()))
    except OSError: pass
    conn.close()

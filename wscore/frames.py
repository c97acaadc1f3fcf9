
"""Frame codec.

     0                   1                   2                   3
     0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    +-+-+-+-+-------+-+-------------+-------------------------------+
    |F|R|R|R| opcode|M| Payload len |    Extended payload length    |
    |I|S|S|S|  (4)  |A|     (7)     |             (16/64)           |
    |N|V|V|V|       |S|             |   (if payload len==126/127)   |
    +-+-+-+-+-------+-+-------------+ - - - - - - - - - - - - - - - +
    |     Extended payload length continued, if payload len == 127  |
    + - - - - - - - - - - - - - - - +-------------------------------+
    |                               |Masking-key, if MASK set to 1  |
    +-------------------------------+-------------------------------+
    | Masking-key (continued)       |          Payload Data         |
    +-------------------------------- - - - - - - - - - - - - - - - +

Only whole, unfragmented frames are produced. The decoder reads any opcode
but callers only act on text.
"""
import struct
from wscore.errors import IncompleteFrame, ProtocolError
from wscore.wskey import new_mask_key

OP_CONTINUATION, OP_TEXT, OP_BINARY, OP_CLOSE, OP_PING, OP_PONG = 0x0, 0x1, 0x2, 0x8, 0x9, 0xA
OPCODE_NAMES = {OP_CONTINUATION: "continuation", OP_TEXT: "text", OP_BINARY: "binary",
                OP_CLOSE: "close", OP_PING: "ping", OP_PONG: "pong"}

MAX_PAYLOAD = (1 << 63) - 1

class Frame:
    def __init__(self, fin=True, opcode=OP_TEXT, masked=False, mask_key=None, payload=b"", size=0):
        self.fin = fin
        self.opcode = opcode
        self.masked = masked
        self.mask_key = mask_key
        self.payload = payload
        self.size = size

    @property
    def payload_length(self) -> int:
        return len(self.payload)

    @property
    def text(self) -> str:
        return self.payload.decode("utf-8", errors="replace")

    def __repr__(self):
        name = OPCODE_NAMES.get(self.opcode, hex(self.opcode))
        return f"<Frame {name} fin={int(self.fin)} masked={int(self.masked)} len={self.payload_length}>"

def apply_mask(data: bytes, mask_key: bytes) -> bytes:
    """XOR with the 4-byte key; masks and unmasks alike."""
    return bytes(b ^ mask_key[i % 4] for i, b in enumerate(data))

def decode_frame(buf) -> Frame:
    """Decode the frame at the start of `buf`.

    Raises IncompleteFrame when `buf` does not yet hold the whole frame.
    Bytes past the frame are ignored; Frame.size tells how many were used.
    """
    have = len(buf)
    if have < 2:
        raise IncompleteFrame(2, have)
    b1, b2 = buf[0], buf[1]
    fin = bool(b1 & 0x80)
    opcode = b1 & 0x0F
    masked = bool(b2 & 0x80)
    length = b2 & 0x7F
    start = 2
    if length == 126:
        if have < 4: raise IncompleteFrame(4, have)
        length = struct.unpack("!H", bytes(buf[2:4]))[0]
        start = 4
    elif length == 127:
        if have < 10: raise IncompleteFrame(10, have)
        length = struct.unpack("!Q", bytes(buf[2:10]))[0]
        if length > MAX_PAYLOAD:
            raise ProtocolError("64-bit payload length has its high bit set")
        start = 10
    mask_key = None
    if masked:
        if have < start + 4: raise IncompleteFrame(start + 4, have)
        mask_key = bytes(buf[start:start+4])
        start += 4
    end = start + length
    if have < end:
        raise IncompleteFrame(end, have)
    payload = bytes(buf[start:end])
    if masked:
        payload = apply_mask(payload, mask_key)
    return Frame(fin, opcode, masked, mask_key, payload, end)

def encode_frame(payload: bytes, opcode=OP_TEXT, mask_key=None) -> bytes:
    """Build one final frame. Pass a 4-byte mask_key for client->server frames."""
    n = len(payload)
    mask_bit = 0x80 if mask_key is not None else 0
    header = bytearray([0x80 | opcode])
    if n < 126:
        header.append(mask_bit | n)
    elif n < (1 << 16):
        header.append(mask_bit | 126)
        header += struct.pack("!H", n)
    else:
        header.append(mask_bit | 127)
        header += struct.pack("!Q", n)
    if mask_key is not None:
        if len(mask_key) != 4:
            raise ValueError("mask key must be 4 bytes")
        header += mask_key
        payload = apply_mask(payload, mask_key)
    return bytes(header) + bytes(payload)

def encode_text(text: str) -> bytes:
    return encode_frame(text.encode("utf-8"))

def encode_client_text(text: str) -> bytes:
    return encode_frame(text.encode("utf-8"), OP_TEXT, new_mask_key())

def encode_close(mask_key=None) -> bytes:
    return encode_frame(b"", OP_CLOSE, mask_key)

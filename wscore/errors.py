
# Error taxonomy for the handshake and framing core

class WSError(Exception):
    """Base for everything this package raises about a single connection."""

class HandshakeError(WSError): pass
class MissingKeyHeader(HandshakeError): pass
class MissingAcceptHeader(HandshakeError): pass
class MalformedHeaderLine(HandshakeError): pass

class InvalidHandshakeKey(HandshakeError):
    def __init__(self, expected: str, got: str):
        super().__init__(f"Sec-WebSocket-Accept mismatch: expected {expected!r}, got {got!r}")
        self.expected = expected
        self.got = got

class HeaderTooLarge(HandshakeError): pass

class FrameError(WSError): pass

class IncompleteFrame(FrameError):
    def __init__(self, needed: int, have: int):
        super().__init__(f"need {needed} bytes, have {have}")
        self.needed = needed
        self.have = have

class ProtocolError(FrameError): pass

class ConnectionClosed(WSError): pass

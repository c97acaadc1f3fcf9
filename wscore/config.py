
# Process-wide settings; env vars override the defaults
import os

SERVER_HOST = os.environ.get("WS_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("WS_PORT", "8765"))

# RFC 6455 handshake constants, shared by both roles
WS_GUID = "258EAFA5-E914-47DA-95CA-C5AB0DC85B11"
WS_VERSION = "13"

RECV_CHUNK = 4096
MAX_HEADER_BYTES = 16384
MAX_FRAME_BYTES = int(os.environ.get("WS_MAX_FRAME_BYTES", str(16 * 1024 * 1024)))
MAX_CONNECTIONS = int(os.environ.get("WS_MAX_CONNECTIONS", "0"))  # 0 = unlimited

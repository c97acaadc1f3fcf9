
# Opening handshake, as pure text in / text out
from wscore.errors import MissingKeyHeader, MissingAcceptHeader, MalformedHeaderLine, InvalidHandshakeKey
from wscore.wskey import derive_accept
from wscore import config

KEY_HEADER = "Sec-WebSocket-Key"
ACCEPT_HEADER = "Sec-WebSocket-Accept"

def extract_header(text: str, name: str):
    """Value of header `name` in a raw header block, or None.

    Names match case-insensitively; the value is only stripped of surrounding
    whitespace and otherwise returned untouched. Splits on the first ':' so
    values may contain colons.
    """
    wanted = name.lower()
    for line in text.split("\r\n")[1:]:
        if not line: break
        if ":" not in line:
            head = line.split(None, 1)
            if head and head[0].lower() == wanted:
                raise MalformedHeaderLine(line)
            continue
        k, v = line.split(":", 1)
        if k.strip().lower() == wanted:
            return v.strip()
    return None

def server_response(request_text: str) -> str:
    key = extract_header(request_text, KEY_HEADER)
    if key is None:
        raise MissingKeyHeader(KEY_HEADER)
    accept = derive_accept(key)
    # must end exactly at the blank line; the peer reads frames right after it
    return (
        "HTTP/1.1 101 Switching Protocols\r\n"
        "Upgrade: websocket\r\n"
        "Connection: Upgrade\r\n"
        f"{ACCEPT_HEADER}: {accept}\r\n"
        "\r\n"
    )

def client_request(client_key: str, host: str, port: int, path: str = "/") -> str:
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Sec-WebSocket-Version: {config.WS_VERSION}\r\n"
        f"{KEY_HEADER}: {client_key}\r\n"
        "Connection: Upgrade\r\n"
        "Upgrade: websocket\r\n"
        f"Host: {host}:{port}\r\n"
        "\r\n"
    )

def verify_server_response(response_text: str, client_key: str) -> str:
    accept = extract_header(response_text, ACCEPT_HEADER)
    if accept is None:
        raise MissingAcceptHeader(ACCEPT_HEADER)
    control = derive_accept(client_key)
    if accept != control:
        raise InvalidHandshakeKey(control, accept)
    return accept


# WebSocket handshake and frame codec

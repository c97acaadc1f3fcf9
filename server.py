
import threading, socket, time, argparse
from wscore.transport import Transport
from wscore.ws import handshake_server, server_recv_text, send_text
from wscore.errors import WSError
from wscore import config

def log(*a): print(time.strftime("[%H:%M:%S]"), *a, flush=True)

def handle_connection(sock, addr, on_message=None):
    """Handshake then echo text frames until the client closes.

    on_message(text) -> reply text overrides the echo; return None to stay quiet.
    """
    conn = Transport(sock)
    try:
        handshake_server(conn)
        log("Upgraded", addr)
        while True:
            text = server_recv_text(conn)
            if text is None: break
            reply = text if on_message is None else on_message(text)
            if reply is not None:
                send_text(conn, reply)
        log("Closed", addr)
    except WSError as e:
        log("Dropping", addr, f"{type(e).__name__}: {e}")
    except OSError as e:
        log("Socket error", addr, e)
    finally:
        conn.close()

def listen(host, port):
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    s.bind((host, port)); s.listen(100)
    log(f"WebSocket server listening on ws://{host}:{s.getsockname()[1]}")
    return s

def serve(host, port, max_connections=config.MAX_CONNECTIONS, on_message=None):
    serve_on(listen(host, port), max_connections, on_message)

def serve_on(s, max_connections=config.MAX_CONNECTIONS, on_message=None):
    """Accept loop on a listening socket; one worker thread per connection.

    With max_connections > 0, accepting pauses while that many workers run.
    """
    slots = threading.BoundedSemaphore(max_connections) if max_connections > 0 else None

    def worker(conn, addr):
        try: handle_connection(conn, addr, on_message)
        finally:
            if slots: slots.release()

    try:
        while True:
            if slots: slots.acquire()
            try: conn, addr = s.accept()
            except OSError:
                if slots: slots.release()
                break
            threading.Thread(target=worker, args=(conn, addr), daemon=True).start()
    finally:
        s.close()

def build_parser():
    ap = argparse.ArgumentParser(description="WebSocket echo server")
    ap.add_argument("--host", default=config.SERVER_HOST)
    ap.add_argument("--port", type=int, default=config.SERVER_PORT)
    ap.add_argument("--max-connections", type=int, default=config.MAX_CONNECTIONS,
                    help="Cap on concurrent connections (0 = unlimited)")
    return ap

def main():
    args = build_parser().parse_args()
    try: serve(args.host, args.port, args.max_connections)
    except KeyboardInterrupt:
        log("Shutting down")

if __name__ == "__main__":
    main()

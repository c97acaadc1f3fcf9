
import argparse, sys, threading
from wscore.ws import client_connect, client_send_text, client_recv_text, client_close
from wscore.errors import WSError
from wscore import config

def build_parser():
    ap = argparse.ArgumentParser(description="Interactive WebSocket text client")
    ap.add_argument("--host", default=config.SERVER_HOST)
    ap.add_argument("--port", type=int, default=config.SERVER_PORT)
    ap.add_argument("--path", default="/")
    return ap

def main():
    args = build_parser().parse_args()

    try: conn = client_connect(args.host, args.port, args.path)
    except (WSError, OSError) as e:
        print(f"Handshake with ws://{args.host}:{args.port} failed: {e}", file=sys.stderr)
        return 1
    print(f"Connected to ws://{args.host}:{args.port}{args.path}")

    def reader():
        try:
            while True:
                msg = client_recv_text(conn)
                if msg is None:
                    print("\nDisconnected."); break
                print(f"\n< {msg}")
                sys.stdout.write("> "); sys.stdout.flush()
        except (WSError, OSError) as e:
            print(f"\nConnection lost: {e}")
    threading.Thread(target=reader, daemon=True).start()

    while True:
        try: line = input("> ")
        except EOFError: break
        if line in ("/quit", "/exit"): break
        if line in ("/help", "/h"):
            print("Type a line to send it. /quit to leave."); continue
        try: client_send_text(conn, line)
        except OSError as e:
            print("Send failed:", e); break
    client_close(conn)
    return 0

if __name__ == "__main__":
    sys.exit(main())

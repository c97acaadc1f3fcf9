
import argparse, subprocess, sys, time
from wscore import config

def build_commands(argv, py=sys.executable):
    """server.py and client.py command lines; each child only gets the options it knows."""
    ap = argparse.ArgumentParser(description="Start the echo server and an interactive client")
    ap.add_argument("--host", default=config.SERVER_HOST)
    ap.add_argument("--port", type=int, default=config.SERVER_PORT)
    ap.add_argument("--max-connections", type=int, default=config.MAX_CONNECTIONS)
    ap.add_argument("--path", default="/")
    args = ap.parse_args(argv)
    common = ["--host", args.host, "--port", str(args.port)]
    srv = [py, "server.py"] + common + ["--max-connections", str(args.max_connections)]
    cli = [py, "client.py"] + common + ["--path", args.path]
    return srv, cli

def main():
    srv_cmd, cli_cmd = build_commands(sys.argv[1:])
    # start the echo server
    srv = subprocess.Popen(srv_cmd)
    time.sleep(0.6)  # small head-start
    cli = subprocess.Popen(cli_cmd)
    print("Launched server.py (pid", srv.pid, ") and client.py (pid", cli.pid, "). Ctrl+C to stop.")
    try:
        cli.wait()
    except KeyboardInterrupt:
        pass
    finally:
        try: cli.terminate()
        except OSError: pass
        try: srv.terminate()
        except OSError: pass

if __name__ == "__main__":
    main()

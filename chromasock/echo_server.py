"""Server that echoes back every text message a client sends."""

from __future__ import annotations

import argparse
import socket
import sys
import threading

from .colorserver import BACKLOG, BUFFER_SIZE, MESSAGE_CODE, PORT, message_code


def reply_for(data: str) -> str | None:
    """Return the reply to one client message, or None when there is none.

    Only messages whose first word is ``message:`` are echoed back unchanged.
    """
    print(f"Message reçu: {data}")
    if message_code(data) == MESSAGE_CODE:
        return data
    return None


def handle_client(conn: socket.socket) -> int:
    """Serve one connected client until it disconnects.

    The connection is closed on return. Returns the number of messages read.
    """
    handled = 0
    with conn:
        while True:
            try:
                raw = conn.recv(BUFFER_SIZE)
            except OSError as exc:
                print(f"Erreur de réception: {exc}", file=sys.stderr)
                break
            if not raw:
                print("Client déconnecté.")
                break
            handled += 1
            reply = reply_for(raw.decode("utf-8", errors="replace"))
            if reply is None:
                continue
            try:
                conn.sendall(reply.encode("utf-8"))
            except OSError as exc:
                print(f"Erreur d'écriture: {exc}", file=sys.stderr)
    return handled


def serve(host: str = "", port: int = PORT) -> None:
    """Accept clients forever, serving each one on its own thread."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
        print("Serveur en attente de connexions...")
        while True:
            try:
                conn, _ = server.accept()
            except OSError as exc:
                print(f"accept: {exc}", file=sys.stderr)
                continue
            worker = threading.Thread(target=handle_client, args=(conn,), daemon=True)
            worker.start()


def main(argv: list[str] | None = None) -> int:
    """Run the echo server from the command line."""
    parser = argparse.ArgumentParser(description="Echo text messages back to clients.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        print("\nSignal Ctrl+C capturé. Sortie du programme.")
        return 0
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    return 0
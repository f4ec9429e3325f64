"""Interactive client that sends text messages and prints the replies."""

from __future__ import annotations

import argparse
import socket
import sys

from .colorserver import BUFFER_SIZE, PORT

PROMPT = "Votre message (max 1000 caractères): "


def format_message(text: str) -> str:
    """Label ``text`` as a text message for the server."""
    return f"message: {text}"


def exchange(sock: socket.socket, text: str) -> str:
    """Send ``text`` as a message and return the server's reply."""
    sock.sendall(format_message(text).encode("utf-8"))
    return sock.recv(BUFFER_SIZE).decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Read messages from standard input and exchange them with the server."""
    parser = argparse.ArgumentParser(description="Send text messages to the echo server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1
    with sock:
        while True:
            print(PROMPT, end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                break
            try:
                reply = exchange(sock, line)
            except OSError as exc:
                print(f"Erreur de communication: {exc}", file=sys.stderr)
                return 1
            print(f"Message reçu: {reply}")
    return 0
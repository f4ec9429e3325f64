"""Client that sends the dominant colours of a BMP image, or a text message."""

from __future__ import annotations

import argparse
import os
import socket
import sys

from .bmp import analyse_bmp_image
from .colorserver import BUFFER_SIZE, PORT

MAX_COLORS = 10


def build_palette_message(path: str | os.PathLike[str]) -> str:
    """Build the palette message for a BMP image.

    The message is ``couleurs: N,`` followed by the most frequent colours,
    most frequent first. N is the number of distinct colours capped at ten;
    the least frequent colour is never listed.
    """
    counts = analyse_bmp_image(path)
    size = len(counts)
    fields = [f"couleurs: {min(size, MAX_COLORS)}"]
    most_frequent_first = counts[:0:-1]
    fields.extend(entry.color.hex() for entry in most_frequent_first[:MAX_COLORS])
    return ",".join(fields)


def exchange_message(sock: socket.socket, message: str) -> str:
    """Send ``message`` labelled as a text message and return the reply."""
    sock.sendall(f"message: {message}".encode("utf-8"))
    return sock.recv(BUFFER_SIZE).decode("utf-8", errors="replace")


def send_colors(sock: socket.socket, path: str | os.PathLike[str]) -> str:
    """Send the palette message of a BMP image and return what was sent."""
    data = build_palette_message(path)
    sock.sendall(data.encode("utf-8"))
    return data


def main(argv: list[str] | None = None) -> int:
    """Run the client from the command line."""
    parser = argparse.ArgumentParser(add_help=True)
    parser.add_argument("paths", nargs="*")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    if not args.paths:
        print("usage: ./client chemin_bmp_image")
        return 1
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1
    with sock:
        if len(args.paths) != 1:
            print("Votre message (max 1000 caracteres): ", end="", flush=True)
            reply = exchange_message(sock, sys.stdin.readline())
            print(f"Message recu: {reply}")
        else:
            send_colors(sock, args.paths[0])
    return 0
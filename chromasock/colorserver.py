"""Server that echoes text messages and draws received colour palettes."""

from __future__ import annotations

import argparse
import os
import socket
import sys

from .piechart import DEFAULT_BROWSER, SVG_FILE_PATH, open_in_browser, write_pie_chart

PORT = 8089
BUFFER_SIZE = 1024
BACKLOG = 10
MESSAGE_CODE = "message:"


def message_code(data: str) -> str:
    """Return the first whitespace separated word of a message, or ''."""
    words = data.split(maxsplit=1)
    return words[0] if words else ""


def respond(
    data: str,
    svg_path: str | os.PathLike[str] = SVG_FILE_PATH,
    browser: str = DEFAULT_BROWSER,
) -> str | None:
    """Handle one client message.

    A message starting with ``message:`` is returned unchanged as the reply.
    Anything else is taken as a palette: it is drawn to ``svg_path`` and shown
    with ``browser``, and there is no reply.
    """
    print(f"Message recu: {data}")
    if message_code(data) == MESSAGE_CODE:
        return data
    write_pie_chart(data, svg_path)
    open_in_browser(svg_path, browser)
    return None


def serve(
    host: str = "",
    port: int = PORT,
    svg_path: str | os.PathLike[str] = SVG_FILE_PATH,
    browser: str = DEFAULT_BROWSER,
) -> None:
    """Accept clients forever, reading one message from each."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
        while True:
            conn, _ = server.accept()
            with conn:
                raw = conn.recv(BUFFER_SIZE)
                reply = respond(raw.decode("utf-8", errors="replace"), svg_path, browser)
                if reply is not None:
                    conn.sendall(reply.encode("utf-8"))


def main(argv: list[str] | None = None) -> int:
    """Run the colour server from the command line."""
    parser = argparse.ArgumentParser(description="Echo messages and draw colour palettes.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--svg", default=SVG_FILE_PATH)
    parser.add_argument("--browser", default=DEFAULT_BROWSER)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.svg, args.browser)
    except KeyboardInterrupt:
        print("\nSignal Ctrl+C capturé. Sortie du programme.")
        return 0
    except OSError as exc:
        print(f"server error: {exc}", file=sys.stderr)
        return 1
    return 0
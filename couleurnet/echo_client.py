"""Interactive client that sends typed messages to the echo server."""

from __future__ import annotations

import argparse
import socket
import sys

PORT = 8089
DEFAULT_HOST = "127.0.0.1"
BUFFER_SIZE = 1024
MESSAGE_PREFIX = "message: "
PROMPT = "Votre message (max 1000 caractères): "


def build_message(text: str) -> str:
    """Label ``text`` as a ``message:`` for the server."""
    return MESSAGE_PREFIX + text


def exchange(sock: socket.socket, text: str) -> str:
    """Send ``text`` as a message and return the server's reply."""
    sock.sendall(build_message(text).encode("utf-8"))
    reply = sock.recv(BUFFER_SIZE).decode("utf-8", errors="replace")
    print(f"Message reçu: {reply}")
    return reply


def main(argv: list[str] | None = None) -> int:
    """Send lines read from standard input until it ends or the server leaves."""
    parser = argparse.ArgumentParser(
        prog="couleurnet-echo-client",
        description="Send typed messages to the echo server.",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=PORT, help="server port")
    args = parser.parse_args(argv)

    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1

    with sock:
        while True:
            print(PROMPT, end="", flush=True)
            text = sys.stdin.readline()
            if not text:
                break
            try:
                reply = exchange(sock, text)
            except OSError as exc:
                print(f"Erreur: {exc}", file=sys.stderr)
                return 1
            if not reply:
                break
    return 0
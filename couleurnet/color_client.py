"""Client that sends the dominant colours of a BMP image to the colour server."""

from __future__ import annotations

import argparse
import os
import socket
import sys

from couleurnet.bmp import BmpError, analyse_bmp_image
from couleurnet.colors import ColorCounter
from couleurnet.echo_client import build_message

PORT = 8089
DEFAULT_HOST = "127.0.0.1"
BUFFER_SIZE = 1024
MAX_COLORS = 10
COLORS_CODE = "couleurs: "
PROMPT = "Votre message (max 1000 caracteres): "


def dominant_colors_message(counter: ColorCounter) -> str:
    """Build the ``couleurs:`` message from a counter sorted least frequent first.

    The header holds the number of distinct colours, capped at ten; then
    come the most frequent colours, most frequent first. The colour at the
    very start of the counter is never listed.
    """
    header = str(min(counter.size, MAX_COLORS))
    chosen = list(reversed(counter.counts[1:]))[:MAX_COLORS]
    fields = [header, *(entry.color.hex() for entry in chosen)]
    return COLORS_CODE + ",".join(fields)


def analyse(path: str | os.PathLike) -> str:
    """Return the ``couleurs:`` message for the BMP image at ``path``."""
    return dominant_colors_message(analyse_bmp_image(path))


def send_colors(sock: socket.socket, path: str | os.PathLike) -> str:
    """Send the dominant colours of the image at ``path`` and return the message sent."""
    message = analyse(path)
    sock.sendall(message.encode("utf-8"))
    return message


def send_and_receive(sock: socket.socket, message: str) -> str:
    """Send ``message`` as a ``message:`` and return the server's answer."""
    sock.sendall(build_message(message).encode("utf-8"))
    reply = sock.recv(BUFFER_SIZE).decode("utf-8", errors="replace")
    print(f"Message recu: {reply}")
    return reply


def main(argv: list[str] | None = None) -> int:
    """Send an image's colours, or a typed message when extra arguments are given."""
    parser = argparse.ArgumentParser(
        prog="couleurnet-color-client",
        description="Send the dominant colours of a BMP image to the server.",
    )
    parser.add_argument("image", nargs="?", help="path of a BMP image")
    parser.add_argument("extra", nargs="*", help="send a typed message instead")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=PORT, help="server port")
    args = parser.parse_args(argv)

    if args.image is None:
        print("usage: couleurnet-color-client chemin_bmp_image")
        return 1

    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1

    with sock:
        try:
            if args.extra:
                print(PROMPT, end="", flush=True)
                send_and_receive(sock, sys.stdin.readline())
            else:
                send_colors(sock, args.image)
        except BmpError as exc:
            print(f"Erreur: {exc}", file=sys.stderr)
            return 1
        except OSError as exc:
            print(f"erreur: {exc}", file=sys.stderr)
            return 1
    return 0
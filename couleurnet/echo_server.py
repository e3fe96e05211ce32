"""Echo server that answers every ``message:`` it receives, one thread per client."""

from __future__ import annotations

import argparse
import socket
import sys
import threading

PORT = 8089
BUFFER_SIZE = 1024
MESSAGE_CODE = "message:"
_CODE_LENGTH = 9


def message_code(data: str) -> str | None:
    """Return the first word of ``data``, cut to nine characters, or None if blank."""
    words = data.split()
    if not words:
        return None
    return words[0][:_CODE_LENGTH]


def handle_message(data: str) -> str | None:
    """Return the reply to ``data``: the message itself when it is a ``message:``."""
    print(f"Message reçu: {data}")
    if message_code(data) == MESSAGE_CODE:
        return data
    return None


def handle_client(conn: socket.socket) -> None:
    """Answer a client until it disconnects, then close its socket."""
    with conn:
        while True:
            try:
                data = conn.recv(BUFFER_SIZE)
            except OSError as exc:
                print(f"Erreur de réception: {exc}", file=sys.stderr)
                break
            if not data:
                print("Client déconnecté.")
                break
            reply = handle_message(data.decode("utf-8", errors="replace"))
            if reply is None:
                continue
            try:
                conn.sendall(reply.encode("utf-8"))
            except OSError as exc:
                print(f"Erreur d'écriture: {exc}", file=sys.stderr)


def serve(host: str = "", port: int = PORT) -> None:
    """Listen for clients and handle each one in its own thread."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(10)
        print("Serveur en attente de connexions...")
        while True:
            try:
                conn, _ = server.accept()
            except OSError as exc:
                print(f"accept: {exc}", file=sys.stderr)
                continue
            threading.Thread(target=handle_client, args=(conn,), daemon=True).start()


def main(argv: list[str] | None = None) -> int:
    """Run the echo server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="couleurnet-echo-server",
        description="Echo back every message sent by clients.",
    )
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
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
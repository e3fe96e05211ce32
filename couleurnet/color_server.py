"""Server that echoes messages and draws received colour lists."""

from __future__ import annotations

import argparse
import os
import socket
import sys
from pathlib import Path
from typing import Callable

from couleurnet.pie_chart import SVG_FILE_PATH, open_in_browser, write_pie_chart

PORT = 8089
BUFFER_SIZE = 1024
MESSAGE_CODE = "message:"


def _chart_colors(data: str) -> list[str]:
    # The first field is the header ("couleurs: N"); empty fields are skipped.
    return [token for token in data.split(",") if token][1:]


def handle_message(
    data: str,
    reply: Callable[[str], object],
    chart_path: str | os.PathLike = SVG_FILE_PATH,
) -> Path | None:
    """Echo a ``message:`` through ``reply``, or draw any other data as a pie chart.

    Returns the path of the chart when one was written.
    """
    print(f"Message recu: {data}")
    tokens = data.split()
    code = tokens[0] if tokens else ""

    if code == MESSAGE_CODE:
        reply(data)
        return None

    try:
        path = write_pie_chart(_chart_colors(data), chart_path)
    except (OSError, ValueError) as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return None
    open_in_browser(path)
    return path


def _reply(conn: socket.socket, data: str) -> None:
    try:
        conn.sendall(data.encode("utf-8"))
    except OSError as exc:
        print(f"erreur ecriture: {exc}", file=sys.stderr)


def serve(
    host: str = "",
    port: int = PORT,
    chart_path: str | os.PathLike = SVG_FILE_PATH,
) -> None:
    """Accept clients one at a time and handle one message from each."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(10)
        while True:
            conn, _ = server.accept()
            with conn:
                data = conn.recv(BUFFER_SIZE)
                text = data.decode("utf-8", errors="replace")
                handle_message(text, lambda message: _reply(conn, message), chart_path)


def main(argv: list[str] | None = None) -> int:
    """Run the colour server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="couleurnet-color-server",
        description="Echo messages and draw received colours as a pie chart.",
    )
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    parser.add_argument("--chart", default=SVG_FILE_PATH, help="SVG file to write")
    args = parser.parse_args(argv)

    try:
        serve(args.host, args.port, args.chart)
    except KeyboardInterrupt:
        print("\nSignal Ctrl+C capturé. Sortie du programme.")
        return 0
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
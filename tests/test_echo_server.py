import socket
import threading
import time

import pytest

from couleurnet.echo_server import (
    MESSAGE_CODE,
    handle_client,
    handle_message,
    main,
    message_code,
    serve,
)


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _connect(port):
    deadline = time.monotonic() + 5
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=5)
        except OSError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.05)


def test_message_code_of_message():
    assert message_code("message: bonjour") == MESSAGE_CODE


def test_message_code_skips_leading_whitespace():
    assert message_code("  \tmessage: x") == MESSAGE_CODE


@pytest.mark.parametrize("data", ["", "   ", "\n\t"])
def test_message_code_of_blank(data):
    assert message_code(data) is None


def test_message_code_is_truncated():
    code = message_code("couleurs:abcdefghij 3")
    assert len(code) == 9
    assert "couleurs:abcdefghij".startswith(code)


def test_glued_word_is_not_a_message():
    assert handle_message("message:suite") is None


def test_handle_message_echoes(capsys):
    assert handle_message("message: salut\n") == "message: salut\n"
    assert "Message reçu: message: salut" in capsys.readouterr().out


def test_handle_message_ignores_other_codes():
    assert handle_message("couleurs: 1,#ffffff") is None


def test_handle_client_replies_and_closes(capsys):
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.sendall(b"message: hello\n")
        client_side.shutdown(socket.SHUT_WR)
        handle_client(server_side)
        assert client_side.recv(1024) == b"message: hello\n"
        assert client_side.recv(1024) == b""
    assert "Client déconnecté." in capsys.readouterr().out


def test_handle_client_no_reply_for_other_data(capsys):
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.sendall(b"bonjour")
        client_side.shutdown(socket.SHUT_WR)
        handle_client(server_side)
        assert client_side.recv(1024) == b""
    out = capsys.readouterr().out
    assert "Message reçu: bonjour" in out
    assert "Client déconnecté." in out


def test_serve_handles_several_messages_and_clients():
    port = _free_port()
    threading.Thread(target=lambda: serve("127.0.0.1", port), daemon=True).start()
    with _connect(port) as first, _connect(port) as second:
        first.sendall(b"message: un")
        assert first.recv(1024) == b"message: un"
        second.sendall(b"message: deux")
        assert second.recv(1024) == b"message: deux"
        first.sendall(b"message: trois")
        assert first.recv(1024) == b"message: trois"


def test_main_reports_bind_failure(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        port = blocker.getsockname()[1]
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "bind:" in capsys.readouterr().err
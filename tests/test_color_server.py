import socket
import threading
import time
from unittest import mock

from couleurnet.color_server import handle_message, main, serve
from couleurnet.pie_chart import render_pie_chart


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


def test_message_is_echoed_without_chart(tmp_path, capsys):
    replies = []
    chart = tmp_path / "chart.svg"
    result = handle_message("message: bonjour", replies.append, chart)
    assert replies == ["message: bonjour"]
    assert result is None
    assert not chart.exists()
    assert "Message recu: message: bonjour" in capsys.readouterr().out


def test_colours_are_drawn(tmp_path):
    replies = []
    chart = tmp_path / "chart.svg"
    with mock.patch("couleurnet.pie_chart.subprocess.run") as run:
        run.return_value.returncode = 0
        result = handle_message("couleurs: 2,#ff0000,#00ff00", replies.append, chart)
    assert replies == []
    assert result == chart
    assert chart.read_text(encoding="utf-8") == render_pie_chart(["#ff0000", "#00ff00"])
    assert run.call_args.args[0][-1] == str(chart)


def test_empty_fields_are_skipped(tmp_path):
    chart = tmp_path / "chart.svg"
    with mock.patch("couleurnet.pie_chart.subprocess.run") as run:
        run.return_value.returncode = 0
        handle_message("couleurs: 1,,#abcdef,", lambda _: None, chart)
    assert chart.read_text(encoding="utf-8") == render_pie_chart(["#abcdef"])


def test_too_many_colours_writes_nothing(tmp_path):
    chart = tmp_path / "chart.svg"
    data = "couleurs: 11," + ",".join(["#000000"] * 11)
    with mock.patch("couleurnet.pie_chart.subprocess.run") as run:
        result = handle_message(data, lambda _: None, chart)
    assert result is None
    assert not chart.exists()
    assert run.call_count == 0


def test_unwritable_chart_path(tmp_path):
    chart = tmp_path / "missing" / "chart.svg"
    with mock.patch("couleurnet.pie_chart.subprocess.run") as run:
        result = handle_message("couleurs: 1,#ffffff", lambda _: None, chart)
    assert result is None
    assert run.call_count == 0


def test_serve_echoes_message(tmp_path):
    port = _free_port()
    chart = tmp_path / "chart.svg"
    thread = threading.Thread(
        target=lambda: serve("127.0.0.1", port, chart), daemon=True
    )
    thread.start()
    with _connect(port) as client:
        client.sendall(b"message: salut")
        received = client.recv(1024)
    assert received == b"message: salut"
    assert not chart.exists()


def test_main_reports_bind_failure():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        port = blocker.getsockname()[1]
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
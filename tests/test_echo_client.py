import io
import socket
import threading

from chromasock.echo_client import exchange, format_message, main


def _echo_once(conn):
    with conn:
        data = conn.recv(1024)
        conn.sendall(data)


def test_format_message_has_label():
    assert format_message("hi") == "message: hi"


def test_format_message_keeps_text():
    text = "quelque chose\n"
    assert format_message(text).endswith(text)
    assert format_message(text).startswith("message: ")


def test_exchange_returns_reply():
    a, b = socket.socketpair()
    worker = threading.Thread(target=_echo_once, args=(b,))
    worker.start()
    with a:
        assert exchange(a, "ping") == "message: ping"
    worker.join(timeout=5)


def test_main_round_trip(monkeypatch, capsys):
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]

    def serve_one():
        conn, _ = listener.accept()
        _echo_once(conn)

    worker = threading.Thread(target=serve_one)
    worker.start()
    monkeypatch.setattr("sys.stdin", io.StringIO("bonjour\n"))
    try:
        status = main(["--host", "127.0.0.1", "--port", str(port)])
    finally:
        worker.join(timeout=5)
        listener.close()
    assert status == 0
    assert "Message reçu: message: bonjour\n" in capsys.readouterr().out


def test_main_connection_refused():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
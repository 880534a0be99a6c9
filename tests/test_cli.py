import io
import socket

import pytest

from udprouter.cli import main, parse_message_line, run_sender
from udprouter.messages import MESSAGE_SIZE, Address, CoreRouter, Message, MessageType, Router


def test_parse_message_line():
    assert parse_message_line("2 olá mundo\n") == (2, "olá mundo")
    assert parse_message_line("  7   hi") == (7, "hi")


@pytest.mark.parametrize("line", ["", "abc", "3\n", "\n"])
def test_parse_message_line_invalid(line):
    with pytest.raises(ValueError):
        parse_message_line(line)


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2)
    yield sock
    sock.close()


def _core(port):
    return CoreRouter(
        1,
        Address("127.0.0.1", 25001),
        [Router(2, 10, Address("127.0.0.1", port))],
    )


def test_run_sender_sends_message(receiver):
    port = receiver.getsockname()[1]
    out = io.StringIO()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        run_sender(sender, _core(port), io.StringIO("0\n2 hello\n1\n"), out)
    data = receiver.recv(4096)
    assert len(data) == MESSAGE_SIZE
    msg = Message.from_bytes(data)
    assert msg.type is MessageType.DATA
    assert msg.data == "hello"
    assert msg.destination == Address("127.0.0.1", port)
    assert msg.source == Address("127.0.0.1", 25001)


def test_run_sender_unknown_router(receiver):
    port = receiver.getsockname()[1]
    out = io.StringIO()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        run_sender(sender, _core(port), io.StringIO("0\n9 hello\n"), out)
    assert "não é vizinho" in out.getvalue()


def test_main_usage_error():
    assert main([]) == 1
    assert main(["x"]) == 1


def test_main_missing_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["1"]) == 1


def test_main_exits_on_option(tmp_path, monkeypatch):
    (tmp_path / "enlaces.config").write_text("1 2 10\n")
    (tmp_path / "roteador.config").write_text("1 0 127.0.0.1\n2 25002 127.0.0.1\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["1"]) == 0
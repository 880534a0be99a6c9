"""Command-line entry point: an interactive sender of data messages."""

from __future__ import annotations

import re
import sys
import threading
from typing import TextIO

from .config import ConfigError, load_core, make_socket
from .messages import Message, MessageType

LINKS_FILE = "enlaces.config"
ROUTERS_FILE = "roteador.config"

_LINE = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([^\n]+)")

_MENU = (
    "+--------------------------------------+\n"
    f"| {'Escolha uma opção':<39}|\n"
    f"| {'0 - Digitar uma mensagem':<37}|\n"
    f"| {'1 - Sair':<37}|\n"
    "+--------------------------------------+\n"
)


def parse_message_line(line: str) -> tuple[int, str]:
    """Split "<id> <message>" into the router id and the text."""
    match = _LINE.match(line)
    if match is None:
        raise ValueError("Formato inválido. Use: <id> <mensagem>")
    return int(match.group(1)), match.group(2)


def run_sender(sock, core, stdin: TextIO, stdout: TextIO) -> None:
    """Prompt for messages and send each to the chosen neighbour until told to stop."""
    while True:
        stdout.write(_MENU)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        try:
            option = int(line.split()[0])
        except (ValueError, IndexError):
            stdout.write("Opção inválida\n")
            continue
        if option:
            return

        stdout.write("Informe a mensagem no formato: <id> <msg>\n")
        stdout.flush()
        try:
            router_id, text = parse_message_line(stdin.readline())
        except ValueError as exc:
            stdout.write(f"{exc}\n")
            continue

        router = core.find_by_id(router_id)
        if router is None:
            stdout.write("Roteador não existe ou não é vizinho\n")
            continue

        msg = Message(MessageType.DATA, text, router.address, core.address)
        try:
            payload = msg.to_bytes()
        except ValueError as exc:
            stdout.write(f"{exc}\n")
            continue
        sock.sendto(payload, (router.address.ip or "127.0.0.1", router.address.port))


def _receive(sock) -> None:
    try:
        while sock.recv(4096):
            pass
    except OSError:
        pass


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Execute no formato: udprouter <id do roteador>", file=sys.stderr)
        return 1
    try:
        router_id = int(args[0])
    except ValueError:
        print("Execute no formato: udprouter <id do roteador>", file=sys.stderr)
        return 1
    try:
        core = load_core(router_id, LINKS_FILE, ROUTERS_FILE)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    with make_socket(core.address.port) as sock:
        threading.Thread(target=_receive, args=(sock,), daemon=True).start()
        run_sender(sock, core, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Reading the link and router configuration files, and opening the socket."""

from __future__ import annotations

import socket
from collections.abc import Iterable
from pathlib import Path

from .messages import Address, CoreRouter, Router


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""


def _fields(line: str, count: int) -> list[str] | None:
    parts = line.split()
    if not parts:
        return None
    if len(parts) < count:
        raise ConfigError(f"malformed line: {line.rstrip()!r}")
    return parts[:count]


def read_links(lines: Iterable[str], core_id: int) -> list[Router]:
    """Return the neighbours of core_id, sorted by id, from "a b cost" lines."""
    routers = []
    for line in lines:
        parts = _fields(line, 3)
        if parts is None:
            continue
        try:
            first, second, cost = (int(p) for p in parts)
        except ValueError as exc:
            raise ConfigError(f"malformed line: {line.rstrip()!r}") from exc
        if core_id in (first, second):
            routers.append(Router(id=first ^ second ^ core_id, link=cost))
    routers.sort(key=lambda r: r.id)
    return routers


def read_routers(lines: Iterable[str], core: CoreRouter) -> None:
    """Fill in the addresses of the core and its neighbours from "id port ip" lines."""
    remaining = len(core.neighbors)
    it = iter(lines)
    while remaining:
        try:
            line = next(it)
        except StopIteration:
            raise ConfigError("missing addresses for some neighbours") from None
        parts = _fields(line, 3)
        if parts is None:
            continue
        try:
            router_id, port = int(parts[0]), int(parts[1])
        except ValueError as exc:
            raise ConfigError(f"malformed line: {line.rstrip()!r}") from exc
        address = Address(parts[2][:15], port)
        if router_id == core.id:
            core.address = address
            continue
        router = core.find_by_id(router_id)
        if router is None:
            continue
        router.address = address
        remaining -= 1


def load_core(router_id: int, links_path, routers_path) -> CoreRouter:
    """Build the core router from the two configuration files."""
    try:
        with open(links_path, encoding="utf-8") as f:
            core = CoreRouter(router_id, neighbors=read_links(f, router_id))
    except OSError as exc:
        raise ConfigError(f"cannot open {Path(links_path)}: {exc}") from exc
    try:
        with open(routers_path, encoding="utf-8") as f:
            read_routers(f, core)
    except OSError as exc:
        raise ConfigError(f"cannot open {Path(routers_path)}: {exc}") from exc
    return core


def make_socket(port: int) -> socket.socket:
    """Open a UDP socket bound to port on all interfaces."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    try:
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock
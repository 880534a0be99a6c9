# udprouter

A router node that talks to its neighbours over UDP. Each node reads two
plain-text configuration files from the current directory and works out
which routers are its direct neighbours. From an interactive menu you can
then send text messages to any of them.

## Installation

```
pip install .
```

## Configuration

`enlaces.config` lists links, one per line, in the form
`<router id> <router id> <cost>`:

```
1 2 7
2 3 5
1 3 2
```

Only links that touch the running router are kept. The other end of each
such link becomes a neighbour, and the cost is stored with it. Blank lines
are skipped. A line that does not hold three integers raises `ConfigError`.

`roteador.config` lists addresses, one per line, in the form
`<router id> <port> <ip>`:

```
1 25001 127.0.0.1
2 25002 127.0.0.1
3 25003 127.0.0.1
```

The line whose id matches the running router sets the node's own address.
The lines of its neighbours set their addresses. Lines for other routers are
ignored. IP text longer than 15 characters is cut to 15. Reading stops as
soon as every neighbour has an address, so the node's own line must come
before the last neighbour's line. If the file ends before every neighbour
has been given an address, `ConfigError` is raised.

## Running

Start one node per router id, each in its own terminal, in the directory
that holds the two files:

```
udprouter 1
```

The command needs exactly one integer argument. Otherwise it prints a usage
line and exits with status 1. It also exits with status 1 if a configuration
file is missing or malformed.

The node binds a UDP socket on its configured port on all interfaces and
shows a menu:

- `0` asks for a line of the form `<id> <message>` and sends a data message
  to that neighbour. If the id is not a neighbour, or the line is
  malformed, the node reports it and shows the menu again. Messages longer
  than 199 bytes of UTF-8 are refused. If a neighbour has no IP configured,
  the message goes to `127.0.0.1`.
- Any other number quits, and so does the end of input.

## Wire format

`Message.to_bytes` produces a fixed-size, little-endian record of 244 bytes.
It holds, in this order:

- a one-byte type (`MessageType.CONTROL` = 0, `MessageType.DATA` = 1);
- 200 bytes of NUL-padded text;
- 3 padding bytes;
- the destination address as a 16-byte NUL-padded IP and a 32-bit port;
- the source address in the same form.

`Message.from_bytes` decodes it and raises `ValueError` on a record of the
wrong length. `to_bytes` raises `ValueError` when the text is 200 bytes or
longer, or an IP is 16 bytes or longer.

## Library use

- `udprouter.messages` defines:
  - `Address(ip, port)`;
  - `MessageType`;
  - `Message(type, data, destination, source)`;
  - `Router(id, link, address)`;
  - `CoreRouter(id, address, neighbors)`. It keeps its neighbours sorted by
    id, and `find_by_id` returns the neighbour with the given id, or `None`.
- `udprouter.message_queue.MessageQueue` is a FIFO that holds at most 15
  items. `enqueue` raises `QueueFullError` when it is full. `dequeue`
  removes and returns the front item, and raises `QueueEmptyError` when the
  queue is empty. It also has `is_empty`, `is_full` and `len()`.
- `udprouter.config` provides:
  - `read_links(lines, core_id)`;
  - `read_routers(lines, core)`;
  - `load_core(router_id, links_path, routers_path)`;
  - `make_socket(port)`.

  The first three raise `ConfigError` on bad or missing configuration.
- `udprouter.cli` provides:
  - `parse_message_line(line)`, which returns `(id, text)` or raises
    `ValueError`;
  - `run_sender(sock, core, stdin, stdout)`, the menu loop;
  - `main(argv=None)`.

## What it does not do

The node only sends. Datagrams that arrive on its socket are read and
dropped. They are not shown, and they are not forwarded to other routers.
Link costs are read and stored, but no routes are computed from them. Only
direct neighbours can be addressed. `MessageQueue` is not used by the
command.

## Tests

```
pip install .[test]
pytest
```
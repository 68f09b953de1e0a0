# ostepdemos

A collection of small, runnable programs that show classic operating-system
ideas at work: creating processes, lottery scheduling, threads and races,
concurrency bugs, a producer/consumer buffer built on condition variables, a
memory-mapped persistent stack and a tiny UDP client/server pair.

Each demonstration is both a command you can run and a set of functions you
can call from Python. Most functions take an `out` argument (a text stream)
so their output can be captured instead of going to the terminal.

The process demonstrations use `os.fork`, so a POSIX system is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command               | Arguments                                                          | What it shows |
|-----------------------|--------------------------------------------------------------------|---------------|
| `ostep-lottery`       | `<seed> <loops>`                                                   | Lottery scheduling over three jobs holding 50, 100 and 25 tickets |
| `ostep-pstack`        | any mix of integers (push) and `pop`                               | A stack of integers kept in `ps.img` across runs |
| `ostep-udp-server`    | none                                                               | A UDP server on port 10000 that answers every non-empty message with `goodbye world` |
| `ostep-udp-client`    | none                                                               | A UDP client on port 20000 that sends `hello world` to localhost:10000 and prints the reply |
| `ostep-cpu-api`       | `p1`, `p2`, `p3 [file]`, `p4 [file [output]]`                      | Forking, waiting, running `wc` in the child, redirecting its output |
| `ostep-intro`         | `cpu <string>`, `io`, `mem <value>`, `threads <loops>`, `va`       | CPU and memory virtualisation, file output, a racy counter, address layout |
| `ostep-threads-api`   | `create`, `simple`, `return`                                       | Passing arguments to threads and collecting their results |
| `ostep-threads-intro` | `t0`, `t1 <loopcount>`                                             | Two threads running at once and a counter they share |
| `ostep-threads-bugs`  | `atomicity`, `atomicity_fixed`, `deadlock`, `ordering`, `ordering_fixed` | Atomicity and ordering violations, their fixes, and a deadlock |
| `ostep-pc`            | `[--single-cv] <buffersize> <loops> <consumers>`                   | Producer/consumer over a bounded buffer |

Examples:

```
ostep-lottery 1 10
ostep-intro threads 100000
ostep-pc 4 100 2
```

`ostep-intro cpu` and `ostep-intro mem` run until interrupted.
`ostep-intro io` writes `hello world` to `/tmp/file`.
`ostep-threads-bugs deadlock` may hang for good: that is the point.
`ostep-threads-bugs ordering` reports the ordering violation and exits with
status 1.

### The persistent stack

`ostep-pstack` works on a file called `ps.img` in the current directory,
which must already exist; its size must be at least 8 bytes and a multiple
of 4. The first 8 bytes hold the item count, the rest the 32-bit integers:

```
truncate -s 4096 ps.img
ostep-pstack 7 13 47 pop      # prints 47
ostep-pstack pop pop 99       # prints 13, then 7
ostep-pstack pop              # prints 99
```

Popping an empty stack and pushing onto a full one are silently ignored.

### The UDP pair

Run it in two terminals: start `ostep-udp-server` first, then
`ostep-udp-client`. Every datagram is exactly 1000 bytes, zero-padded.

## Using the building blocks

- `ostepdemos.common.get_time()` and `ostepdemos.common.spin(seconds)` — wall
  clock time and a busy-wait loop.
- `ostepdemos.lottery.Lottery(seed)` — `insert(tickets)` adds a job at the
  head of the list, `draw()` returns `(winning_ticket, winner_tickets)`,
  `format_list()` renders the list; `run(seed, loops, out)` is the whole demo.
- `ostepdemos.pstack.PersistentStack(path)` — a context manager with
  `push()`, `pop()`, `len()` and `capacity`; `push` raises `OverflowError`
  when full, `pop` raises `IndexError` when empty.
- `ostepdemos.pc.BoundedBuffer(size, single_cv=False)` — a thread-safe
  bounded FIFO with blocking `put()` and `get()`; `ostepdemos.pc.run(...)`
  returns the values each consumer received.
- `ostepdemos.udp` — `udp_open`, `fill_sock_addr`, `udp_write`, `udp_read`
  and `udp_close`; `ostepdemos.client.run_client()` and
  `ostepdemos.server.serve(sock, out, max_messages)` drive the pair.
- `ostepdemos.threads_bugs` — `atomicity()`, `deadlock()` and `ordering()`
  take delays and timeouts so the bugs can be provoked or avoided on demand.

```python
import io
from ostepdemos.pc import BoundedBuffer, run

per_consumer = run(buffer_size=2, loops=10, consumers=3)
assert sorted(v for taken in per_consumer for v in taken) == list(range(10))

from ostepdemos.lottery import Lottery
lottery = Lottery(seed=1)
lottery.insert(50)
lottery.insert(100)
print(lottery.draw())
```

## What this package does not do

- It has no semaphore demonstrations (semaphores as locks, for joining, for
  throttling, a semaphore-based producer/consumer or reader/writer lock).
- It has no dining-philosophers demonstration.
- It has no condition-variable join demonstrations beyond those built into
  `threads_bugs.ordering` and `pc`.
- It offers no reusable semaphore, reader/writer lock or compare-and-swap
  primitive of its own.
"""Lottery scheduling: pick a job in proportion to its tickets."""

import random
import re
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class Lottery:
    """A list of jobs, each holding tickets, and a seeded draw."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)
        self._jobs: List[int] = []
        self.total_tickets = 0

    @property
    def jobs(self) -> Tuple[int, ...]:
        """Ticket counts, most recently inserted first."""
        return tuple(self._jobs)

    def insert(self, tickets: int) -> None:
        """Add a job with the given tickets at the head of the list."""
        self._jobs.insert(0, tickets)
        self.total_tickets += tickets

    def draw(self) -> Tuple[int, int]:
        """Draw a winning ticket; return it and the winning job's tickets."""
        if self.total_tickets <= 0:
            raise ValueError("no tickets to draw from")
        winner = self._rng.randrange(self.total_tickets)
        counter = 0
        for tickets in self._jobs:
            counter += tickets
            if counter > winner:
                return winner, tickets
        raise ValueError("ticket counts do not cover the winning ticket")

    def format_list(self) -> str:
        return "List: " + "".join(f"[{tickets}] " for tickets in self._jobs)


def run(seed: int, loops: int, out: Optional[TextIO] = None) -> None:
    """Populate three jobs and print the winner of each draw."""
    lottery = Lottery(seed)
    for tickets in (50, 100, 25):
        lottery.insert(tickets)
    print(lottery.format_list(), file=out)
    for _ in range(loops):
        winner, tickets = lottery.draw()
        print(lottery.format_list(), file=out)
        print(f"winner: {winner} {tickets}\n", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: lottery <seed> <loops>", file=sys.stderr)
        return 1
    seed, loops = (_atoi(arg) for arg in args)
    run(seed, loops)
    return 0
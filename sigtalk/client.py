"""Sends a message to a server process, one bit per signal."""

import os
import signal
import sys
import time
from typing import Callable, Iterator, Optional, Union

from .numbers import atoi
from .printf import printf
from .protocol import encode_bits


def signal_sequence(message: Union[bytes, str]) -> Iterator[int]:
    """Yield the signals carrying ``message``: SIGUSR2 for 1, SIGUSR1 for 0."""
    for bit in encode_bits(message):
        yield signal.SIGUSR2 if bit else signal.SIGUSR1


def send_message(
    pid: int,
    message: Union[bytes, str],
    delay: float = 0.5,
    kill: Optional[Callable[[int, int], None]] = None,
) -> int:
    """Signal ``message`` to ``pid``, pausing ``delay`` seconds per bit; return the count."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message must not contain NUL bytes")
    send = os.kill if kill is None else kill
    count = 0
    for signum in signal_sequence(data):
        send(pid, signum)
        time.sleep(delay)
        count += 1
    return count


def _on_acknowledge(signum, frame) -> None:
    if signum == signal.SIGUSR1:
        printf("Message sent.\n")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        printf("Usage: ./client <PID> <message>")
        return 1
    signal.signal(signal.SIGUSR1, _on_acknowledge)
    signal.signal(signal.SIGUSR2, _on_acknowledge)
    pid = atoi(args[0])
    try:
        send_message(pid, os.fsencode(args[1]))
    except ProcessLookupError:
        print(f"no process with id {pid}", file=sys.stderr)
        return 1
    return 0
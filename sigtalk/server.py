"""Signal-driven receiver: prints messages sent one bit per signal."""

import os
import signal
import sys
from typing import Optional, TextIO

from .printf import printf
from .protocol import Receiver

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class SignalServer:
    """Decodes SIGUSR1 (0) and SIGUSR2 (1) into messages and acknowledges them."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.receiver = Receiver()

    def handle(self, signum: int, sender_pid: int) -> Optional[bytes]:
        """Process one signal from ``sender_pid``; return a completed message."""
        message = self.receiver.feed(1 if signum == signal.SIGUSR2 else 0)
        if message is not None:
            printf("%s", message.decode("utf-8", errors="replace"), stream=self.stream)
            os.kill(sender_pid, signal.SIGUSR1)
        os.kill(sender_pid, signal.SIGUSR2)
        return message

    def install(self):
        """Block the message signals so they can be taken with sigwaitinfo."""
        return signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)


def serve(stream: Optional[TextIO] = None) -> None:
    """Print this process's id, then receive messages forever."""
    server = SignalServer(stream)
    printf("PID -> %i\n", os.getpid(), stream=stream)
    server.install()
    while True:
        info = signal.sigwaitinfo(_SIGNALS)
        server.handle(info.si_signo, info.si_pid)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        printf("Usage: ./server\n")
    try:
        serve()
    except KeyboardInterrupt:
        return 0
    return 0
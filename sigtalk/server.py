"""Receive messages bit by bit through SIGUSR1 and SIGUSR2 and print them."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Optional, Sequence, TextIO

from sigtalk.cformat import printf
from sigtalk.protocol import MessageDecoder


class SignalServer:
    """Decode signals into messages and write each finished one as a line."""

    def __init__(
        self,
        output: Optional[TextIO] = None,
        decoder: Optional[MessageDecoder] = None,
    ) -> None:
        self._output = output
        self.decoder = decoder if decoder is not None else MessageDecoder()

    @property
    def output(self) -> TextIO:
        """The stream messages are written to (standard output by default)."""
        return sys.stdout if self._output is None else self._output

    def handle_signal(self, signum: int, frame: Optional[FrameType] = None) -> Optional[str]:
        """Treat SIGUSR1 as a set bit and any other signal as a clear bit.

        Returns the message when this signal completed one.
        """
        message = self.decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if message is not None:
            self.output.write(message + "\n")
            self.output.flush()
        return message

    def install(self) -> None:
        """Route SIGUSR1 and SIGUSR2 to :meth:`handle_signal`."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def run(self) -> None:
        """Announce the process id, install the handlers and wait forever."""
        printf("Bienvenido a mi Server \n", file=self.output)
        printf("My server PID is: %d \n", os.getpid(), file=self.output)
        self.output.flush()
        self.install()
        while True:
            signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the server until interrupted."""
    try:
        SignalServer().run()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
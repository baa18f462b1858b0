"""Send a text message to a running server, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence

from sigtalk.cformat import printf
from sigtalk.numbers import atoi
from sigtalk.protocol import encode_bits

DEFAULT_DELAY = 0.00022
USAGE = "Just write the PID and the message as arguments \n"


def send_message(pid: int, message: str, delay: float = DEFAULT_DELAY) -> None:
    """Signal *message* to process *pid*, pausing *delay* seconds after each bit.

    Raises OSError when a signal cannot be delivered.
    """
    for bit in encode_bits(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf(USAGE)
        return 0
    pid = atoi(args[0])
    if pid == 0:
        print("Error")
        return 1
    try:
        send_message(pid, args[1])
    except OSError:
        print("Error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
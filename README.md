# sigtalk

A small message channel between two processes on the same machine. It uses
only POSIX signals. The client sends a message as its UTF-8 bytes followed by
one zero byte. Each byte goes out as eight signals, least significant bit
first: `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0 bit. The server
rebuilds the bytes. When the zero byte arrives it prints the message on a
line of its own. Bytes that are not valid UTF-8 are shown as replacement
characters.

## Installing

```
pip install .
```

`SIGUSR1` and `SIGUSR2` must be available, so the package works on POSIX
systems only.

## Usage

Start the server in one terminal:

```
sigtalk-server
```

It prints a greeting and its process id, then waits for signals until you
interrupt it with Ctrl-C.

From another terminal, send a message by giving the server's PID and the
text:

```
sigtalk-client 12345 "hello there"
```

The server prints `hello there`.

The client reads the PID the way C's `atoi` does. It skips leading
whitespace, accepts one sign, and stops at the first character that is not a
digit.

- If the PID reads as zero, the client prints `Error` and exits with status 1.
  Text with no leading digits, such as `abc`, reads as zero.
- If a signal cannot be delivered, the client also prints `Error` and exits
  with status 1.
- If the client gets anything other than exactly two arguments, it prints a
  usage hint and exits with status 0.

The client pauses 0.22 ms after each signal so that the server can keep up.

## Library use

You can encode and decode messages without sending any signals:

```python
from sigtalk.protocol import encode_bits, MessageDecoder

decoder = MessageDecoder()
for bit in encode_bits("hi"):
    message = decoder.feed(bit)
    if message is not None:
        print(message)
```

- `encode_bits(message)` accepts `str` or `bytes`. It yields bits, least
  significant bit first, and ends with the terminating zero byte.
- `MessageDecoder.feed(bit)` accepts only `0` or `1` and raises `ValueError`
  for anything else. It returns the finished message once its terminator
  arrives, and `None` before that.
- `MessageDecoder.reset()` discards any partly received message.
- `pending_bits` and `pending_bytes` show the decoder's progress on the
  current message.

To work with signals directly:

- `sigtalk.client.send_message(pid, message, delay=0.00022)` signals a message
  to a running process. It raises `OSError` if a signal cannot be delivered.
- `sigtalk.server.SignalServer(output=None, decoder=None)` receives messages in
  the current process.
  - `install()` routes `SIGUSR1` and `SIGUSR2` to `handle_signal`.
  - `handle_signal(signum, frame)` treats `SIGUSR1` as a 1 bit and any other
    signal as a 0 bit. It writes each completed message to `output`, which is
    standard output by default, and returns that message.
  - `run()` prints the greeting and PID, installs the handlers and waits
    forever.

## Helper modules

The tools are built on these helpers, which you can also use on their own.

`sigtalk.cformat`

- `format_string(fmt, *args)` and `printf(fmt, *args, file=None)` handle the
  conversions `%c %s %d %i %u %x %X %p %%`.
- Integers wrap to 32 bits, as in C.
- `%s` of `None` gives `(null)`.
- An unknown conversion is dropped.
- Too few arguments raise `TypeError`.
- `printf` returns the number of characters it wrote.

`sigtalk.numbers`

- `atoi(text)` returns -1 on positive overflow of a 32-bit `int` and 0 on
  negative overflow.
- `itoa(n)` raises `TypeError` for a value that is not an integer and
  `OverflowError` for one outside the 32-bit range.

`sigtalk.textops`

- `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`,
  `memcmp`, `memchr`, `strlcpy`, `strlcat` and `strmapi` follow the C string
  routines.
- Searches return an index, or `None` when nothing is found.
- `strlcpy` and `strlcat` return the resulting text together with the length
  they tried to create.

`sigtalk.chars`

- ASCII classifiers and case converters: `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_lower` and `to_upper`.
- They accept an integer code point or a one-character string.

## Limitations

- The server never acknowledges a signal. If signals arrive faster than the
  server handles them, bits can be lost and the message comes out garbled.
- The server handles one stream of bits. Two clients sending at the same time
  interleave their bits.
- Received messages are only printed. They are not stored anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```
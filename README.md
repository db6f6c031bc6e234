# sigtalk

A small server and client that pass a text message from one process to
another using only two POSIX signals. `SIGUSR1` carries a 0 bit and
`SIGUSR2` carries a 1 bit.

The client first sends the length of the message as a 32-bit little-endian
number. It then sends the message bytes, each one least significant bit
first. The server acknowledges every bit with `SIGUSR2`. When the whole
message has arrived, the server prints it and sends `SIGUSR1`. The client
then prints `Message sent.`

The server waits for signals with `signal.sigwaitinfo`, so it needs a
system where Python provides that function, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for messages until it is interrupted:

```
$ sigtalk-server
PID -> 4242
```

Then send it a message from another terminal:

```
$ sigtalk-client 4242 "hello there"
```

The client needs exactly two arguments, a process id and a message.
Otherwise it prints `Usage: ./client <PID> <message>` and exits with status
1. It also exits with status 1 if no process has the given id. The process
id is read leniently: leading whitespace and a sign are accepted, and
parsing stops at the first non-digit.

The client waits half a second after every signal. The length header takes
about 16 seconds, and each byte of the message takes about four more.

## Library use

The bit-level protocol in `sigtalk.protocol` works without sending any
signals:

```python
from sigtalk.protocol import Receiver, encode_bits

receiver = Receiver()
for bit in encode_bits(b"hi"):
    message = receiver.feed(bit)
print(message)  # b'hi'
```

- `encode_bits(message)` yields the bits for a `bytes` or `str` message
  (strings are encoded as UTF-8).
- `Receiver.feed(bit)` returns the complete message when its last bit
  arrives and `None` otherwise. A length of zero is ignored, and zero bytes
  in the payload are dropped.
- `BitPacker(width)` collects bits, least significant first, into integers
  of `width` bits.

`sigtalk.client.signal_sequence(message)` yields the signals the client
would send. `sigtalk.client.send_message(pid, message, delay=0.5, kill=None)`
sends them and returns how many it sent. Pass your own `kill` callable to
capture the signals instead of delivering them. Messages containing NUL
bytes are rejected with `ValueError`.

`sigtalk.server.SignalServer` decodes signals passed to
`handle(signum, sender_pid)`. It prints each finished message and
acknowledges the sender with `os.kill`.

`sigtalk.printf.sprintf(template, *args)` formats text with the `%d %i %u
%x %X %c %s %p %%` conversions. `printf(template, *args, stream=None)`
writes the result to `stream` (standard output by default) and returns its
length. `sigtalk.numbers.atoi(text)` is the lenient integer parser that the
client uses.

## Limitations

- The server keeps a single reassembly state, so it cannot tell apart two
  clients sending at the same time.
- An empty message sends only a zero length, which the server ignores. The
  server then treats the next 32 bits it receives as the length.
- Nothing is encrypted or authenticated. Any process allowed to signal the
  server can send it bits.

## Tests

```
pip install .[test]
pytest
```
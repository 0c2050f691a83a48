# tcpseq

TCP sequence numbers are 32-bit values that start at an arbitrary initial
sequence number (ISN) and wrap around. `tcpseq` gives you a small value
type for them, in the module `tcpseq.wrapping`, and the two conversions a
TCP implementation needs:

- `wrap(n, isn)`: turn a zero-based 64-bit absolute sequence number into
  a 32-bit relative one, returned as a `WrappingInt32`.
- `unwrap(n, isn, checkpoint)`: turn a 32-bit relative sequence number
  back into the absolute sequence number that wraps to it and is closest
  to `checkpoint`. The checkpoint is a recent absolute sequence number,
  for example the last byte you reassembled.

The package has no dependencies outside the standard library. Its `test`
extra installs pytest and hypothesis for running the test suite.

## Usage

```python
from tcpseq.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

seqno = wrap(3, isn)          # wraps past 2**32
print(seqno)                  # 1

unwrap(seqno, isn, 0)         # 3
unwrap(seqno, isn, 2**32)     # 2**32 + 3, the closest match to the checkpoint
```

`WrappingInt32` is an immutable, hashable value that behaves like a 32-bit
unsigned counter:

- Any integer passed to the constructor is reduced modulo 2**32; anything
  that is not an `int` (including `bool`) raises `TypeError`.
- Adding an integer to it, or subtracting one from it, steps it forwards
  or backwards modulo 2**32 and gives a new `WrappingInt32`.
- Subtracting one `WrappingInt32` from another gives their signed 32-bit
  offset as a plain `int`. The result is negative when going backwards is
  no longer than going forwards.
- Two values compare equal when their raw 32-bit values are equal.
- `raw_value` and `int()` give the raw value; `str()` prints it.

```python
a = WrappingInt32(5)
b = a - 10                    # WrappingInt32(4294967291)
assert b - a == -10
assert int(a + 2**32) == 5
```

`wrap` checks that `n`, and `unwrap` that `checkpoint`, is a 64-bit
unsigned integer: a value outside `0 <= x < 2**64` raises `ValueError`,
and a non-integer raises `TypeError`. The result of `unwrap` is always
within that range too.

Each direction of a TCP connection has its own ISN. Use the sender's ISN
for outgoing sequence numbers and the peer's ISN for incoming ones.

## What this package does not do

`tcpseq` only handles sequence-number arithmetic. It has no TCP sender,
receiver or connection state machine, no stream reassembly, no segment or
header parsing, and no network I/O. It provides no command-line tool.
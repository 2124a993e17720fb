# marcduino

Building blocks for a Marcduino-style dome panel controller, in plain Python
with no dependencies outside the standard library.

- `marcduino.fifo`: `Fifo`, a bounded first-in, first-out byte buffer of 1 to
  255 bytes that can be shared between threads. `put` returns `False` when the
  buffer is full. `get_nowait` raises `FifoEmpty` when it is empty, and
  `get_wait(timeout=None)` blocks until a byte arrives and raises `FifoEmpty`
  if the timeout runs out first.
- `marcduino.bits`: `bit(n)` gives the mask for bit 0 to 31, and
  `binary_literal(name)` reads names such as `"B00101"` (one to eight binary
  digits).
- `marcduino.toolbox`: `Port`, an in-memory 8-bit port with `output`,
  `direction` and `input` registers. `set_bit`, `clear_bit`, `pin_is_set` and
  `digital_write` work on `output`, `digital_mode` on `direction` (using
  `PinMode`), and `digital_read` reads `input` and returns a `Level`. There are
  also the math helpers `constrain`, `arduino_round` (half away from zero),
  `radians`, `degrees`, `sq` and `boolean`, and the clock conversions
  `clock_cycles_per_microsecond`, `clock_cycles_to_microseconds` and
  `microseconds_to_clock_cycles`.
- `marcduino.panel_sequences`: the built-in dome panel servo sequences, each a
  `Sequence` of `Step`s. A step holds a time in ticks of 1/100 second and one
  pulse per servo (`OPEN_PULSE` 1000, `CLOSE_PULSE` 2000, or `None` for no
  pulse). `get_sequence(name)` returns a sequence, raising `KeyError` for an
  unknown name, and `sequence_names()` lists them. The speed tables
  `PANEL_FAST_SPEED`, `PANEL_SLOW_SPEED` and `PANEL_SUPER_SLOW_SPEED` give one
  value per servo.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Examples

```python
from marcduino.fifo import Fifo, FifoEmpty

fifo = Fifo(4)
fifo.put(0x41)            # True when the byte was stored, False when the buffer is full
print(len(fifo))          # 1
print(fifo.get_nowait())  # 65
try:
    fifo.get_nowait()
except FifoEmpty:
    print("empty")
```

```python
from marcduino.bits import bit, binary_literal

print(bit(3))                      # 8
print(binary_literal("B00101"))    # 5
```

```python
from marcduino.toolbox import Port, Level, PinMode, constrain

port = Port()
port.digital_mode(2, PinMode.OUTPUT)
port.digital_write(2, Level.HIGH)
print(port.pin_is_set(2))          # True
port.input = 0b00000100
print(port.digital_read(2).name)   # HIGH
print(constrain(300, 0, 255))      # 255
```

```python
from marcduino.panel_sequences import get_sequence, sequence_names

print(sequence_names())
wave = get_sequence("panel_wave")
print(len(wave), wave.servo_count(), wave.duration())
for step in wave:
    print(step.seconds, step.pulses)
```

## What this package does not do

It holds the sequences as data and does not play them: there is no timer or
scheduler that steps through a `Sequence`, and nothing here drives servos,
reads a serial line or talks to real hardware. `Port` only models the
registers in memory.

## Tests

```
pytest
```
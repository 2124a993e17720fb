"""Pin-level port helpers and the small math helpers used by the firmware."""

from __future__ import annotations

import math
from enum import IntEnum

PINS_PER_PORT = 8


class Level(IntEnum):
    """Logic level of a pin."""

    LOW = 0
    HIGH = 1


class PinMode(IntEnum):
    """Direction of a pin."""

    INPUT = 0
    OUTPUT = 1


def _mask(pin: int) -> int:
    if not isinstance(pin, int) or isinstance(pin, bool):
        raise TypeError("pin must be an int")
    if not 0 <= pin < PINS_PER_PORT:
        raise ValueError(f"pin must be between 0 and {PINS_PER_PORT - 1}, got {pin}")
    return 1 << pin


class Port:
    """An 8-bit I/O port: output, direction and input registers."""

    def __init__(self) -> None:
        self.output = 0
        self.direction = 0
        self.input = 0

    def set_bit(self, pin: int) -> None:
        """Drive the output bit of ``pin`` high."""
        self.output |= _mask(pin)

    def clear_bit(self, pin: int) -> None:
        """Drive the output bit of ``pin`` low."""
        self.output &= ~_mask(pin) & 0xFF

    def pin_is_set(self, pin: int) -> bool:
        """Return True when the output bit of ``pin`` is high."""
        return bool(self.output & _mask(pin))

    def digital_write(self, pin: int, value: int) -> None:
        """Write LOW for a zero value, HIGH for anything else."""
        if value == Level.LOW:
            self.clear_bit(pin)
        else:
            self.set_bit(pin)

    def digital_mode(self, pin: int, mode: int) -> None:
        """Make ``pin`` an input for a zero mode, an output otherwise."""
        mask = _mask(pin)
        if mode == PinMode.INPUT:
            self.direction &= ~mask & 0xFF
        else:
            self.direction |= mask

    def digital_read(self, pin: int) -> Level:
        """Return the level seen on the input register for ``pin``."""
        return Level.HIGH if self.input & _mask(pin) else Level.LOW

    def __repr__(self) -> str:
        return (
            f"Port(output=0b{self.output:08b}, direction=0b{self.direction:08b}, "
            f"input=0b{self.input:08b})"
        )


def constrain(amount, low, high):
    """Clamp ``amount`` into the range ``low`` to ``high``."""
    if amount < low:
        return low
    if amount > high:
        return high
    return amount


def arduino_round(x: float) -> int:
    """Round half away from zero, returning an int."""
    return int(x + 0.5) if x >= 0 else int(x - 0.5)


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def sq(x):
    """Return ``x`` squared."""
    return x * x


def boolean(x) -> int:
    """Return 0 for a zero value and 1 for anything else."""
    return 0 if x == 0 else 1


def clock_cycles_per_microsecond(f_cpu: int) -> int:
    """Return whole clock cycles per microsecond at clock frequency ``f_cpu`` Hz."""
    cycles = int(f_cpu) // 1_000_000
    if cycles <= 0:
        raise ValueError(f"clock frequency must be at least 1 MHz, got {f_cpu}")
    return cycles


def clock_cycles_to_microseconds(cycles: int, f_cpu: int) -> int:
    """Convert a count of clock cycles to whole microseconds."""
    return cycles // clock_cycles_per_microsecond(f_cpu)


def microseconds_to_clock_cycles(micros: int, f_cpu: int) -> int:
    """Convert microseconds to clock cycles."""
    return micros * clock_cycles_per_microsecond(f_cpu)
"""Timed servo sequences that move the dome panels.

A sequence is a list of steps. Each step gives a hold time in ticks of
1/100 second and one pulse width per servo. A pulse of ``None`` leaves
that servo without a pulse for the step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

COUNT_PER_SECOND = 100
MAX_STEP_TIME = 0xFFFF

OPEN_PULSE = 1000
CLOSE_PULSE = 2000

_PULSE_CODES = {"O": OPEN_PULSE, "C": CLOSE_PULSE, ".": None}


@dataclass(frozen=True)
class Step:
    """One step of a sequence: a hold time in ticks and a pulse per servo."""

    time: int
    pulses: tuple[int | None, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.time, int) or isinstance(self.time, bool):
            raise TypeError("step time must be an int")
        if not 1 <= self.time <= MAX_STEP_TIME:
            raise ValueError(
                f"step time must be between 1 and {MAX_STEP_TIME}, got {self.time}"
            )
        pulses = tuple(self.pulses)
        if not pulses:
            raise ValueError("a step needs at least one servo pulse")
        for pulse in pulses:
            if pulse is None:
                continue
            if not isinstance(pulse, int) or isinstance(pulse, bool) or pulse <= 0:
                raise ValueError(f"pulse must be a positive int or None, got {pulse!r}")
        object.__setattr__(self, "pulses", pulses)

    @property
    def seconds(self) -> float:
        """Hold time of the step in seconds."""
        return self.time / COUNT_PER_SECOND


@dataclass(frozen=True)
class Sequence:
    """A named, non-empty run of steps that all drive the same servos."""

    name: str
    steps: tuple[Step, ...]

    def __post_init__(self) -> None:
        steps = tuple(self.steps)
        if not steps:
            raise ValueError("a sequence needs at least one step")
        width = len(steps[0].pulses)
        if any(len(step.pulses) != width for step in steps):
            raise ValueError("every step must give a pulse for the same servos")
        object.__setattr__(self, "steps", steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def duration(self) -> int:
        """Total run time in ticks of 1/100 second."""
        return sum(step.time for step in self.steps)

    def servo_count(self) -> int:
        """Number of servos the sequence drives."""
        return len(self.steps[0].pulses)


def _build(name: str, rows: list[tuple[int, str]]) -> Sequence:
    steps = tuple(
        Step(time, tuple(_PULSE_CODES[code] for code in pattern))
        for time, pattern in rows
    )
    return Sequence(name, steps)


_ALL_CLOSED = "CCCCCCCCCC"
_ALL_OPEN = "OOOOOOOOOO"
_NO_PULSE = ".........."


def _one_open(position: int) -> str:
    return "".join("O" if i == position else "C" for i in range(10))


_FAST_WAVE_ROWS = (
    [(15, _ALL_CLOSED)]
    + [(15, _one_open(i)) for i in range(10)]
    + [(15, _ALL_CLOSED)]
    + [(15, _one_open(i)) for i in reversed(range(10))]
    + [(15, _ALL_CLOSED)]
)

_DANCE_PATTERNS = """
CCCCCCOCCC CCCCCCOOCC CCCCCCOOOC CCCCCCOOOO CCCCCCOOOC CCCCCCOOCC CCCCCCOCCC
CCCCCCCCCC OCCCCCCCCC OOCCCCCCCC OOOCCCCCCC OOOOCCCCCC COOOCCCCCC CCOOCCCCCC
CCCOCCCCCC CCCCCCCCCC CCCCCCOCOC CCCCCCCCCC CCCCCCCOCO CCCCCCCCCC CCCCCCOOOO
CCCCCCCOCO CCCCCCOCOC CCCCCCCCCC CCCCOCCCCC CCCCCCCCCC CCCCCOCCCC CCCCCCCCCC
OOOOOOCCCC COOOOOCCCC CCCOOOCCCC CCCCCCCCCC COCOCCCCCC CCCCCCCCCC OCOCCCCCCC
CCCCCCCCCC CCCCCCCOCO CCCCCCOCOC CCCCCCCOCO CCCCCCCCCC CCCCCCOOOO CCCCCCCOCO
CCCCCCOCOC CCCCCCCOCO CCCCCCOCOC CCCCCCCOCO OCOCOCOCOC CCCCCCCCCC CCCCCCOCOC
CCCCCCCOCO CCCCCCOCOC CCCCCCCOCO OCOCOCOCOC COCOCOCOCO OCOCOCOCOC CCCCCCCCCC
OOCCCCCCCC CCOOCCCCCC CCCCOOCCCC CCCCCCCCCC OOCCOOCCOO CCOOCCOOCC OOCCOOCCOO
CCCCCCCCCC OCCCCCCCCC CCCCCCCCCC COCCCCCCCC CCCCCCCCCC OOOCCCCCCC COOCCCCCCC
CCOCCCCCCC CCCCCCCCCC CCCCCCOCOC CCCCCCCCCC CCCCCCCOCO CCCCCCCCCC CCCCCCOCOC
CCCCCCCOCO CCCCCCOCOC CCCCCCCCCC OCOCOCOCOC CCCCCCCCCC COCOCOCOCO CCCCCCCCCC
OOOOOOOOOO CCCCCCOOOO OOOOOOCCCC CCCCCCCCCC
""".split()

_SEQUENCES: dict[str, Sequence] = {
    sequence.name: sequence
    for sequence in (
        _build(
            "panel_all_open",
            [(20, _ALL_CLOSED), (300, _ALL_OPEN), (150, _ALL_CLOSED)],
        ),
        _build(
            "panel_all_open_long",
            [(20, _ALL_CLOSED), (1000, _ALL_OPEN), (150, _ALL_CLOSED)],
        ),
        _build(
            "panel_wave",
            [(30, _ALL_CLOSED)]
            + [(30, _one_open(i)) for i in range(10)]
            + [(30, _ALL_CLOSED)],
        ),
        _build("panel_fast_wave", _FAST_WAVE_ROWS),
        _build(
            "panel_open_close_wave",
            [(20, _ALL_CLOSED)]
            + [(20, "O" * k + "C" * (10 - k)) for k in range(1, 10)]
            + [(80, _ALL_OPEN)]
            + [(20, "C" * k + "O" * (10 - k)) for k in range(1, 10)]
            + [(40, _ALL_CLOSED)],
        ),
        _build(
            "panel_marching_ants",
            [(20, _ALL_CLOSED)]
            + [(50, pattern) for _ in range(15) for pattern in ("OCOCOCOCOC", "COCOCOCOCO")]
            + [(100, _ALL_CLOSED)],
        ),
        _build(
            "panel_dance",
            [(20, _ALL_CLOSED)] + [(45, pattern) for pattern in _DANCE_PATTERNS],
        ),
        _build("panel_init", [(100, _ALL_CLOSED)]),
        _build(
            "panel_long_disco",
            _FAST_WAVE_ROWS + [(36000, _NO_PULSE), (2200, _NO_PULSE)],
        ),
    )
}

PANEL_FAST_SPEED: tuple[int, ...] = (0,) * 10
PANEL_SLOW_SPEED: tuple[int, ...] = (15,) * 10
PANEL_SUPER_SLOW_SPEED: tuple[int, ...] = (9,) * 10


def get_sequence(name: str) -> Sequence:
    """Return the panel sequence called ``name``; KeyError if there is none."""
    try:
        return _SEQUENCES[name]
    except KeyError:
        raise KeyError(f"unknown panel sequence: {name!r}") from None


def sequence_names() -> list[str]:
    """Return the names of all panel sequences in their defined order."""
    return list(_SEQUENCES)
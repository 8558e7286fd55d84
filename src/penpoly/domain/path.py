"""Path-side command types.

A path is an ordered stream of drawing commands. Each sub-path opens with
Begin, continues with any number of Line or curve commands and is
terminated by End. Several sub-paths may follow one another in a single
stream; each one describes an independent contour.

Path coordinates are single precision. Values are narrowed to float32 when
a PathPoint is constructed so that a path recorded from any source holds
exactly the values a float32 consumer would see.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import numpy as np


def to_single_precision(value: float) -> float:
    """Round a float to the nearest float32 value.

    Values beyond the float32 range become infinities without a warning.

    Args:
        value: Any real number

    Returns:
        The float32 value as a Python float
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


@dataclass(frozen=True, slots=True)
class PathPoint:
    """A point in the path domain, stored at float32 precision.

    Attributes:
        x: X coordinate (narrowed on construction)
        y: Y coordinate (narrowed on construction)
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_single_precision(self.x))
        object.__setattr__(self, "y", to_single_precision(self.y))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "PathPoint":
        x, y = pt
        return cls(x, y)


@dataclass(frozen=True, slots=True)
class Begin:
    """Open a new sub-path at ``at``."""

    at: PathPoint


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment from the current point to ``to``."""

    to: PathPoint


@dataclass(frozen=True, slots=True)
class QuadraticCurve:
    """Quadratic Bezier segment with one control point."""

    ctrl: PathPoint
    to: PathPoint


@dataclass(frozen=True, slots=True)
class CubicCurve:
    """Cubic Bezier segment with two control points."""

    ctrl1: PathPoint
    ctrl2: PathPoint
    to: PathPoint


@dataclass(frozen=True, slots=True)
class End:
    """Terminate the current sub-path, closing it when ``close`` is set."""

    close: bool


PathEvent = Begin | Line | QuadraticCurve | CubicCurve | End

CURVE_EVENTS: tuple[type, ...] = (QuadraticCurve, CubicCurve)


@dataclass(frozen=True, slots=True)
class Path:
    """An immutable stream of path commands.

    Attributes:
        events: Commands in drawing order
    """

    events: tuple[PathEvent, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.events, tuple):
            object.__setattr__(self, "events", tuple(self.events))

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[PathEvent]:
        return iter(self.events)

    def is_empty(self) -> bool:
        return not self.events

    def is_flat(self) -> bool:
        """Check that the path holds no curve commands.

        Returns:
            True if every command is Begin, Line or End
        """
        return not any(isinstance(event, CURVE_EVENTS) for event in self.events)

    def count(self, kind: type) -> int:
        """Count commands of the given kind."""
        return sum(1 for event in self.events if isinstance(event, kind))

    @classmethod
    def from_events(cls, events: Iterable[PathEvent]) -> "Path":
        return cls(events=tuple(events))

    @classmethod
    def concatenate(cls, *paths: "Path") -> "Path":
        """Join paths into one stream of independent sub-paths.

        Args:
            *paths: Paths to join, in order

        Returns:
            A single Path holding every command of every input
        """
        events: list[PathEvent] = []
        for path in paths:
            events.extend(path.events)
        return cls(events=tuple(events))

    def to_recording(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Express the path as fontTools RecordingPen operations.

        Returns:
            List of (operator, operands) tuples
        """
        recording: list[tuple[str, tuple[Any, ...]]] = []
        for event in self.events:
            if isinstance(event, Begin):
                recording.append(("moveTo", (event.at.to_tuple(),)))
            elif isinstance(event, Line):
                recording.append(("lineTo", (event.to.to_tuple(),)))
            elif isinstance(event, QuadraticCurve):
                recording.append(("qCurveTo", (event.ctrl.to_tuple(), event.to.to_tuple())))
            elif isinstance(event, CubicCurve):
                recording.append(
                    (
                        "curveTo",
                        (event.ctrl1.to_tuple(), event.ctrl2.to_tuple(), event.to.to_tuple()),
                    )
                )
            elif isinstance(event, End):
                recording.append(("closePath" if event.close else "endPath", ()))
        return recording

"""Grouping of a flattened command stream into contours.

The grouper is the only stateful piece of the conversion. It has two
states:

- Idle: no sub-path open
- Accumulating: collecting the vertices of the current sub-path

Begin opens a sub-path (from either state), Line appends to it and End
freezes it into a Contour. Anything else is a broken stream.
"""

import logging
from collections.abc import Iterable

from penpoly.core.adapter import to_polygon_coordinate
from penpoly.domain import Begin, Contour, Coordinate, End, Line, MultiContour, PathEvent
from penpoly.exceptions import MalformedPathError

logger = logging.getLogger(__name__)


def discard_unterminated(vertices: list[Coordinate]) -> None:
    """Drop a sub-path that was never terminated by End.

    This happens when a Begin arrives while a sub-path is still open, or
    when the stream ends mid sub-path. The vertices are dropped without
    producing a contour. Callers that need every vertex must make sure
    their streams terminate each sub-path; ContourGrouper.abandoned counts
    how many were lost.

    Args:
        vertices: Vertices collected for the abandoned sub-path
    """
    logger.warning(
        "Discarding unterminated sub-path with %d vertices starting at %s",
        len(vertices),
        vertices[0].to_tuple() if vertices else None,
    )


class ContourGrouper:
    """Collects Begin/Line/End commands into contours.

    A grouper is single use: build one per stream.

    Example:
        grouper = ContourGrouper()
        grouper.feed(flattened(path, 0.1))
        contours = grouper.finish()
    """

    def __init__(self) -> None:
        self._contours: list[Contour] = []
        self._current: list[Coordinate] | None = None
        self.abandoned = 0

    @property
    def accumulating(self) -> bool:
        """True while a sub-path is open."""
        return self._current is not None

    def push(self, event: PathEvent) -> None:
        """Consume one command.

        Args:
            event: A Begin, Line or End command

        Raises:
            MalformedPathError: On Line or End with no open sub-path, or on
                any other kind of command
        """
        if isinstance(event, Begin):
            if self._current is not None:
                self._abandon(self._current)
            self._current = [to_polygon_coordinate(event.at)]

        elif isinstance(event, Line):
            if self._current is None:
                raise MalformedPathError("Line with no open sub-path", event)
            self._current.append(to_polygon_coordinate(event.to))

        elif isinstance(event, End):
            if self._current is None:
                raise MalformedPathError("End with no open sub-path", event)
            self._contours.append(Contour(coords=tuple(self._current), closed=event.close))
            self._current = None

        else:
            raise MalformedPathError(
                "only Begin, Line and End commands may reach the grouper", event
            )

    def feed(self, events: Iterable[PathEvent]) -> None:
        for event in events:
            self.push(event)

    def finish(self) -> MultiContour:
        """Return the contours in the order their End commands arrived.

        A sub-path still open at this point is discarded.

        Returns:
            MultiContour of completed contours
        """
        if self._current is not None:
            self._abandon(self._current)
        logger.debug(
            "Grouped %d contours (%d abandoned)", len(self._contours), self.abandoned
        )
        return MultiContour(contours=tuple(self._contours))

    def _abandon(self, vertices: list[Coordinate]) -> None:
        discard_unterminated(vertices)
        self.abandoned += 1
        self._current = None


def group_contours(events: Iterable[PathEvent]) -> MultiContour:
    """Group a flattened command stream into contours.

    Args:
        events: Begin, Line and End commands only

    Returns:
        MultiContour, empty if the stream holds no complete sub-path

    Raises:
        MalformedPathError: If the stream breaks the Begin/Line/End contract
    """
    grouper = ContourGrouper()
    grouper.feed(events)
    return grouper.finish()

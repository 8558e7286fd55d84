"""Polygon-side geometric types.

This module defines the straight-line geometry produced by flattening:
- Coordinate: A double precision 2D vertex
- Contour: An ordered vertex sequence with an open/closed flag
- MultiContour: An ordered collection of independent contours
- Polygon: One exterior contour plus ordered hole contours
- MultiPolygon: An ordered collection of polygons
- WindingDirection: Enum for contour winding direction
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Contour winding direction.

    Computed from the sign of the shoelace area with the y axis pointing up:
    - Positive area winds counter-clockwise
    - Negative area winds clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A vertex in the polygon domain.

    Holds full double precision values. Immutable and hashable.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coordinate":
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Contour:
    """An ordered vertex sequence with an open/closed flag.

    A closed contour's last edge runs from its final vertex back to its
    first one; the first vertex is never repeated at the end. A contour
    with no vertices is degenerate but legal.

    Attributes:
        coords: Vertices in drawing order
        closed: Whether the contour is closed
    """

    coords: tuple[Coordinate, ...] = field(default=())
    closed: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.coords, tuple):
            object.__setattr__(self, "coords", tuple(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coords)

    def is_empty(self) -> bool:
        """Check if the contour has no vertices."""
        return not self.coords

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The ring is treated as closed whatever the ``closed`` flag says.

        Returns:
            Signed area, 0.0 for fewer than three vertices
        """
        n = len(self.coords)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.coords[i].x * self.coords[j].y
            area -= self.coords[j].x * self.coords[i].y

        return area / 2.0

    @property
    def direction(self) -> WindingDirection | None:
        """Winding direction implied by vertex order.

        Returns:
            WindingDirection, or None for degenerate (zero area) contours
        """
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), all zero when empty
        """
        if not self.coords:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [c.x for c in self.coords]
        ys = [c.y for c in self.coords]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with coords and closed fields
        """
        return {
            "coords": [c.to_dict() for c in self.coords],
            "closed": self.closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a contour

        Returns:
            Contour instance
        """
        coords = tuple(Coordinate.from_dict(c) for c in data["coords"])
        return cls(coords=coords, closed=data["closed"])


@dataclass(frozen=True, slots=True)
class MultiContour:
    """An ordered collection of independent contours.

    Order only carries meaning when the collection is read as a polygon,
    where the first contour is the exterior.
    """

    contours: tuple[Contour, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.contours, tuple):
            object.__setattr__(self, "contours", tuple(self.contours))

    def __len__(self) -> int:
        return len(self.contours)

    def __iter__(self) -> Iterator[Contour]:
        return iter(self.contours)

    def __getitem__(self, index: int) -> Contour:
        return self.contours[index]

    def is_empty(self) -> bool:
        return not self.contours

    def to_dict(self) -> dict[str, Any]:
        return {"contours": [c.to_dict() for c in self.contours]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MultiContour":
        return cls(contours=tuple(Contour.from_dict(c) for c in data["contours"]))


@dataclass(frozen=True, slots=True)
class Polygon:
    """One exterior contour plus ordered interior contours (holes).

    The split is positional only. Nothing checks that the holes actually
    lie inside the exterior or that they wind opposite to it.

    Attributes:
        exterior: Outer boundary
        interiors: Holes, in the order they were encountered
    """

    exterior: Contour = field(default_factory=lambda: Contour(closed=True))
    interiors: tuple[Contour, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.interiors, tuple):
            object.__setattr__(self, "interiors", tuple(self.interiors))

    def rings(self) -> Iterator[Contour]:
        """Iterate over the exterior followed by every hole."""
        yield self.exterior
        yield from self.interiors

    def is_empty(self) -> bool:
        return self.exterior.is_empty() and not self.interiors

    def area(self) -> float:
        """Unsigned exterior area minus unsigned hole areas."""
        holes = sum(abs(ring.signed_area()) for ring in self.interiors)
        return abs(self.exterior.signed_area()) - holes

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with exterior and interiors fields
        """
        return {
            "exterior": self.exterior.to_dict(),
            "interiors": [ring.to_dict() for ring in self.interiors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(
            exterior=Contour.from_dict(data["exterior"]),
            interiors=tuple(Contour.from_dict(ring) for ring in data["interiors"]),
        )


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """An ordered collection of polygons."""

    polygons: tuple[Polygon, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.polygons, tuple):
            object.__setattr__(self, "polygons", tuple(self.polygons))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> Polygon:
        return self.polygons[index]

    def area(self) -> float:
        return sum(polygon.area() for polygon in self.polygons)

    def to_dict(self) -> dict[str, Any]:
        return {"polygons": [p.to_dict() for p in self.polygons]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MultiPolygon":
        return cls(polygons=tuple(Polygon.from_dict(p) for p in data["polygons"]))

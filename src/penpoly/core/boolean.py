"""Adapter between polygon geometry and the Clipper boolean engine.

This module does not compute intersections itself. It moves rings into
pyclipper at a caller-chosen scale factor, runs the requested operation
and rebuilds the resulting PolyTree into polygons:

- every outer node becomes a polygon exterior
- its direct hole children become that polygon's interiors
- outer nodes nested inside a hole become further polygons

Only rings with at least three vertices take part; every ring is treated
as closed.
"""

import logging
import math

import pyclipper

from penpoly.config.settings import BooleanOp, FillRule
from penpoly.domain import Contour, Coordinate, MultiContour, MultiPolygon, Polygon
from penpoly.exceptions import BooleanOperationError

logger = logging.getLogger(__name__)

Operand = Polygon | MultiPolygon | MultiContour

_CLIP_TYPES = {
    BooleanOp.UNION: pyclipper.CT_UNION,
    BooleanOp.INTERSECTION: pyclipper.CT_INTERSECTION,
    BooleanOp.DIFFERENCE: pyclipper.CT_DIFFERENCE,
    BooleanOp.XOR: pyclipper.CT_XOR,
}

_FILL_TYPES = {
    FillRule.EVEN_ODD: pyclipper.PFT_EVENODD,
    FillRule.NON_ZERO: pyclipper.PFT_NONZERO,
    FillRule.POSITIVE: pyclipper.PFT_POSITIVE,
    FillRule.NEGATIVE: pyclipper.PFT_NEGATIVE,
}


def _rings(operand: Operand) -> list[Contour]:
    if isinstance(operand, Polygon):
        return list(operand.rings())
    if isinstance(operand, MultiPolygon):
        return [ring for polygon in operand for ring in polygon.rings()]
    if isinstance(operand, MultiContour):
        return list(operand)
    raise TypeError(f"Unsupported boolean operand: {type(operand).__name__}")


def _add_rings(
    clipper: pyclipper.Pyclipper, operand: Operand, poly_type: int, scale_factor: float
) -> int:
    """Add every usable ring of an operand to the clipper.

    Returns:
        Number of rings accepted by the engine
    """
    added = 0
    for ring in _rings(operand):
        if len(ring) < 3:
            logger.debug("Skipping ring with %d vertices", len(ring))
            continue
        path = pyclipper.scale_to_clipper([[c.x, c.y] for c in ring], scale_factor)
        try:
            clipper.AddPath(path, poly_type, True)
        except pyclipper.ClipperException:
            # Zero-area rings (e.g. collinear vertices) are rejected by Clipper
            logger.debug("Engine rejected degenerate ring with %d vertices", len(ring))
            continue
        added += 1
    return added


def _ring_from_clipper(path: list[list[int]], scale_factor: float) -> Contour:
    scaled = pyclipper.scale_from_clipper(path, scale_factor)
    return Contour(coords=tuple(Coordinate(float(x), float(y)) for x, y in scaled), closed=True)


def _collect(node: pyclipper.PyPolyNode, scale_factor: float, out: list[Polygon]) -> None:
    exterior = _ring_from_clipper(node.Contour, scale_factor)
    interiors = tuple(_ring_from_clipper(hole.Contour, scale_factor) for hole in node.Childs)
    out.append(Polygon(exterior=exterior, interiors=interiors))

    for hole in node.Childs:
        for island in hole.Childs:
            _collect(island, scale_factor, out)


def polytree_to_multi_polygon(tree: pyclipper.PyPolyNode, scale_factor: float) -> MultiPolygon:
    """Rebuild a Clipper PolyTree into polygons with holes.

    Args:
        tree: Root node returned by Pyclipper.Execute2
        scale_factor: Factor the input was scaled by

    Returns:
        MultiPolygon in tree order
    """
    polygons: list[Polygon] = []
    for outer in tree.Childs:
        _collect(outer, scale_factor, polygons)
    return MultiPolygon(polygons=tuple(polygons))


def boolean_operation(
    subject: Operand,
    clip: Operand,
    op: BooleanOp | str,
    scale_factor: float = 1000.0,
    fill_rule: FillRule | str = FillRule.EVEN_ODD,
) -> MultiPolygon:
    """Run a boolean set operation through pyclipper.

    Args:
        subject: Subject geometry
        clip: Clip geometry
        op: Operation to run
        scale_factor: Multiplier applied before integer clipping
        fill_rule: Fill rule for both subject and clip

    Returns:
        Resulting polygons with their holes

    Raises:
        ValueError: If scale_factor is not positive and finite, or op/fill_rule is unknown
        BooleanOperationError: If the engine fails
    """
    op = BooleanOp(op)
    fill_rule = FillRule(fill_rule)
    if not math.isfinite(scale_factor) or scale_factor <= 0:
        raise ValueError(f"scale_factor must be positive and finite, got {scale_factor!r}")

    clipper = pyclipper.Pyclipper()
    subject_count = _add_rings(clipper, subject, pyclipper.PT_SUBJECT, scale_factor)
    clip_count = _add_rings(clipper, clip, pyclipper.PT_CLIP, scale_factor)
    logger.debug(
        "Running %s on %d subject and %d clip rings (scale=%s)",
        op.value, subject_count, clip_count, scale_factor,
    )

    if subject_count == 0 and clip_count == 0:
        return MultiPolygon()

    fill_type = _FILL_TYPES[fill_rule]
    try:
        tree = clipper.Execute2(_CLIP_TYPES[op], fill_type, fill_type)
    except pyclipper.ClipperException as e:
        raise BooleanOperationError(op.value, str(e)) from e

    return polytree_to_multi_polygon(tree, scale_factor)


def union(subject: Operand, clip: Operand, **kwargs) -> MultiPolygon:
    return boolean_operation(subject, clip, BooleanOp.UNION, **kwargs)


def intersection(subject: Operand, clip: Operand, **kwargs) -> MultiPolygon:
    return boolean_operation(subject, clip, BooleanOp.INTERSECTION, **kwargs)


def difference(subject: Operand, clip: Operand, **kwargs) -> MultiPolygon:
    return boolean_operation(subject, clip, BooleanOp.DIFFERENCE, **kwargs)


def xor(subject: Operand, clip: Operand, **kwargs) -> MultiPolygon:
    return boolean_operation(subject, clip, BooleanOp.XOR, **kwargs)

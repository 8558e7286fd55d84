"""Internal Bezier curve subdivision.

This is an internal module containing helper functions for the flattener.
Not intended for public use. Points are plain (x, y) float tuples so the
arithmetic runs at double precision regardless of the caller's point type.
"""

XY = tuple[float, float]

# 2**16 segments per curve is far below any useful tolerance.
MAX_DEPTH = 16


def _mid(a: XY, b: XY) -> XY:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def quadratic_is_flat(p0: XY, p1: XY, p2: XY, tolerance: float) -> bool:
    """Check whether a quadratic stays within tolerance of its chord.

    The largest deviation of the curve from the chord parametrised at the
    same t is half the distance from the control point to the chord midpoint.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        tolerance: Maximum allowed deviation

    Returns:
        True if the chord p0-p2 approximates the curve
    """
    dx = p1[0] - (p0[0] + p2[0]) / 2
    dy = p1[1] - (p0[1] + p2[1]) / 2
    return dx * dx + dy * dy <= 4 * tolerance * tolerance


def cubic_is_flat(p0: XY, p1: XY, p2: XY, p3: XY, tolerance: float) -> bool:
    """Check whether a cubic stays within tolerance of its chord.

    Uses the control polygon bound: the deviation is at most a quarter of
    the largest of |3*p1 - 2*p0 - p3| and |3*p2 - 2*p3 - p0|, per axis.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        tolerance: Maximum allowed deviation

    Returns:
        True if the chord p0-p3 approximates the curve
    """
    ux = (3 * p1[0] - 2 * p0[0] - p3[0]) ** 2
    uy = (3 * p1[1] - 2 * p0[1] - p3[1]) ** 2
    vx = (3 * p2[0] - 2 * p3[0] - p0[0]) ** 2
    vy = (3 * p2[1] - 2 * p3[1] - p0[1]) ** 2
    return max(ux, vx) + max(uy, vy) <= 16 * tolerance * tolerance


def flatten_quadratic(p0: XY, p1: XY, p2: XY, tolerance: float, depth: int = 0) -> list[XY]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, starting with p0 and
        ending with p2
    """
    if depth >= MAX_DEPTH or quadratic_is_flat(p0, p1, p2, tolerance):
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = _mid(p0, p1)
    r1 = _mid(p1, p2)
    mid = _mid(q1, r1)

    left = flatten_quadratic(p0, q1, mid, tolerance, depth + 1)
    right = flatten_quadratic(mid, r1, p2, tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(p0: XY, p1: XY, p2: XY, p3: XY, tolerance: float, depth: int = 0) -> list[XY]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, starting with p0 and
        ending with p3
    """
    if depth >= MAX_DEPTH or cubic_is_flat(p0, p1, p2, p3, tolerance):
        return [p0, p3]

    # First level
    q1 = _mid(p0, p1)
    q2 = _mid(p1, p2)
    q3 = _mid(p2, p3)

    # Second level
    r1 = _mid(q1, q2)
    r2 = _mid(q2, q3)

    # Third level (midpoint)
    mid = _mid(r1, r2)

    left = flatten_cubic(p0, q1, r1, mid, tolerance, depth + 1)
    right = flatten_cubic(mid, r2, q3, p3, tolerance, depth + 1)

    return left[:-1] + right

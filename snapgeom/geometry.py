''' geometry.py
    -----------
    Line algebra built on the vector helpers: intersections, projections,
    normals and the on-screen visibility test.

    Degenerate input never raises. Parallel lines give None, zero-length
    segments fall back to their first endpoint (or a None normal).
'''
import numpy as np

from snapcore.config import PARALLEL_TOL
from .vector import as_vec


def intersection(p1, p2, p3, p4, tol=PARALLEL_TOL):
    """
    Intersection of the infinite line through (p1, p2) with the infinite
    line through (p3, p4).

    Each line is written as a*x + b*y = c and the 2x2 system is solved by
    Cramer's rule. Returns None when |determinant| <= tol, which with the
    default tol of 0.0 is an exact parallel/coincident test.
    """
    p1, p2, p3, p4 = as_vec(p1), as_vec(p2), as_vec(p3), as_vec(p4)

    a1 = p2[1] - p1[1]
    b1 = p1[0] - p2[0]
    c1 = a1 * p1[0] + b1 * p1[1]

    a2 = p4[1] - p3[1]
    b2 = p3[0] - p4[0]
    c2 = a2 * p3[0] + b2 * p3[1]

    determinant = a1 * b2 - a2 * b1

    if abs(determinant) <= tol:
        return None

    x = (b2 * c1 - b1 * c2) / determinant
    y = (a1 * c2 - a2 * c1) / determinant
    return np.array([x, y], dtype=np.float64)


def intersect(l1, l2, tol=PARALLEL_TOL):
    ''' Intersection of two line-like entities (anything with p1 / p2). '''
    return intersection(l1.p1, l1.p2, l2.p1, l2.p2, tol=tol)


def closest_point_on_line(p, p1, p2):
    """
    Projects p onto the INFINITE line through p1 and p2.
    t = ((p - p1) . d) / |d|^2 is not clamped.
    If p1 == p2 the line is undefined and p1 is returned.
    """
    p, p1, p2 = as_vec(p), as_vec(p1), as_vec(p2)
    d = p2 - p1

    len_sq = np.dot(d, d)
    if len_sq == 0:
        return p1

    t = np.dot(p - p1, d) / len_sq
    return p1 + t * d


def closest_pt(point, line):
    ''' closest_point_on_line() for a line-like entity. '''
    return closest_point_on_line(point, line.p1, line.p2)


def shortest_distance_to_line(p1, p2, point):
    """
    Distance from point to the SEGMENT p1-p2.

    Same projection as closest_point_on_line() but with t clamped to [0, 1],
    so the closest point never leaves the segment.

    Returns:
        (distance, closest_point)
    """
    p1, p2, point = as_vec(p1), as_vec(p2), as_vec(point)
    d = p2 - p1

    length = np.hypot(d[0], d[1])
    if length == 0:
        offset = point - p1
        return float(np.hypot(offset[0], offset[1])), p1

    t = np.dot(point - p1, d) / (length * length)

    # --- CLAMPING (The "Segment" behavior) ---
    t = np.clip(t, 0.0, 1.0)

    closest = p1 + t * d
    offset = point - closest
    return float(np.hypot(offset[0], offset[1])), closest


def unit_normal(p1, p2):
    """
    Unit vector perpendicular to p1 -> p2, rotated (dx, dy) -> (-dy, dx).
    Returns None for a zero-length segment.
    """
    d = as_vec(p2) - as_vec(p1)
    length = np.hypot(d[0], d[1])
    if length == 0:
        return None
    return np.array([-d[1], d[0]], dtype=np.float64) / length


def visible(p, bounds):
    ''' True if p lies inside [0, width] x [0, height] (edges included). '''
    x, y = as_vec(p)
    width, height = bounds
    return bool(0 <= x <= width and 0 <= y <= height)

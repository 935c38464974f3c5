''' vector.py
    ---------
    Stateless 2D vector helpers.

    Every function accepts anything "point-like": an object exposing
    `to_array()` (Point), an object with `x`/`y` attributes, or a length-2
    sequence / numpy array. Results are always float64 numpy arrays, so they
    can be fed straight back into any other helper.
'''
import numpy as np

from snapcore.config import ARROW_HIT_RADIUS


def as_vec(p):
    ''' Converts a point-like value into a fresh (2,) float64 array. '''
    if hasattr(p, 'to_array'):
        return p.to_array()
    if hasattr(p, 'x') and hasattr(p, 'y'):
        return np.array([p.x, p.y], dtype=np.float64)
    v = np.array(p, dtype=np.float64)
    if v.shape != (2,):
        raise ValueError(f"Expected a 2D point, got shape {v.shape}.")
    return v


def scale(v, f):
    ''' Scales a vector by a given factor. '''
    return as_vec(v) * f


def add(v1, v2):
    return as_vec(v1) + as_vec(v2)


def inverse(v):
    return -as_vec(v)


def vector(p1, p2):
    ''' Returns the displacement vector p1 -> p2. '''
    return as_vec(p2) - as_vec(p1)


def side_of_line(p, l1, l2):
    ''' Classifies which side of the directed line l1 -> l2 the point p is on.

        Uses the 2D cross product (l2 - l1) x (p - l1):
            cross > 0 : -1 (left)
            cross < 0 : +1 (right)
            cross = 0 :  0 (on the line)
    '''
    a, b, q = as_vec(l1), as_vec(l2), as_vec(p)
    cross = (b[0] - a[0]) * (q[1] - a[1]) - (b[1] - a[1]) * (q[0] - a[0])
    if cross > 0:
        return -1
    if cross < 0:
        return 1
    return 0


def dist(p1, p2):
    ''' Euclidean distance between two points. '''
    d = vector(p1, p2)
    return float(np.hypot(d[0], d[1]))


def near(p1, p2, r=ARROW_HIT_RADIUS):
    ''' True if the two points are within r of each other (inclusive). '''
    return dist(p1, p2) <= r

"""
Symmetries of a rectangular grid.

The eight transforms (identity, three rotations, four reflections) are plain
coordinate maps. Each maps a vertex of an n x m grid to the grid it lands
in, which is n x m or m x n depending on whether the transform swaps axes.
"""

from typing import Callable, Dict, List, Sequence, Tuple

from .grid import Point, Vertex

Shape = Tuple[int, int]

# name -> (swaps_axes, map(r, c, n, m) -> (r', c'))
_TRANSFORMS: Dict[str, Tuple[bool, Callable[[int, int, int, int], Point]]] = {
    'identity':       (False, lambda r, c, n, m: (r, c)),
    'rot90':          (True,  lambda r, c, n, m: (c, n - 1 - r)),
    'rot180':         (False, lambda r, c, n, m: (n - 1 - r, m - 1 - c)),
    'rot270':         (True,  lambda r, c, n, m: (m - 1 - c, r)),
    'flip_rows':      (False, lambda r, c, n, m: (n - 1 - r, c)),
    'flip_cols':      (False, lambda r, c, n, m: (r, m - 1 - c)),
    'transpose':      (True,  lambda r, c, n, m: (c, r)),
    'anti_transpose': (True,  lambda r, c, n, m: (m - 1 - c, n - 1 - r)),
}

_INVERSE: Dict[str, str] = {
    'identity': 'identity',
    'rot90': 'rot270',
    'rot180': 'rot180',
    'rot270': 'rot90',
    'flip_rows': 'flip_rows',
    'flip_cols': 'flip_cols',
    'transpose': 'transpose',
    'anti_transpose': 'anti_transpose',
}

SYMMETRIES: Tuple[str, ...] = tuple(_TRANSFORMS)


def image_shape(name: str, shape: Shape) -> Shape:
    """Shape of the grid after applying the transform."""
    swaps, _ = _TRANSFORMS[name]
    n, m = shape
    return (m, n) if swaps else (n, m)


def apply(name: str, v: Point, shape: Shape) -> Vertex:
    """Map v, a vertex of a grid of the given shape, through the transform."""
    _, fn = _TRANSFORMS[name]
    return Vertex(*fn(v[0], v[1], shape[0], shape[1]))


def inverse(name: str) -> str:
    return _INVERSE[name]


def apply_all(name: str, vertices: Sequence[Point], shape: Shape) -> List[Vertex]:
    _, fn = _TRANSFORMS[name]
    n, m = shape
    return [Vertex(*fn(r, c, n, m)) for r, c in vertices]


def images(shape: Shape, v: Point, w: Point):
    """
    Yield (name, image_shape, v', w') for every symmetry of the grid.

    Args:
        shape: (n, m) of the source grid
        v, w: Endpoints in the source grid
    """
    for name in SYMMETRIES:
        yield name, image_shape(name, shape), apply(name, v, shape), apply(name, w, shape)

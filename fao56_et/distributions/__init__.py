"""Statistical distributions for hydrological frequency analysis."""

from .pearson3 import (
    ShapeTransform,
    Pearson3Params,
    Pearson3Distribution,
    dpearson3,
    ppearson3,
    qpearson3,
    rpearson3,
)

__all__ = [
    'ShapeTransform',
    'Pearson3Params',
    'Pearson3Distribution',
    'dpearson3',
    'ppearson3',
    'qpearson3',
    'rpearson3',
]

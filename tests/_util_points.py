import numpy as np


def pairwise_min(points):
    """Smallest distance between two distinct points (inf for < 2 points)."""
    P = np.asarray(points, float)
    if len(P) < 2:
        return np.inf
    d = np.linalg.norm(P[None, :, :] - P[:, None, :], axis=-1)
    np.fill_diagonal(d, np.inf)
    return d.min()

"""
Column-wise min-max scaling kernel.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def minmax_scale_columns(
    data: NDArray[np.floating[Any]],
    lower: float,
    upper: float,
) -> None:
    """
    Map each column of `data` onto [lower, upper] in place.

    The column minimum maps exactly to `lower` and the maximum exactly
    to `upper`; values in between are linearly interpolated. Constant
    columns are left untouched. Bounds must already be validated.

    Args:
        data: 2D floating array, modified in place
        lower: Target lower bound
        upper: Target upper bound (> lower)
    """
    if data.shape[0] == 0:
        return

    feature_min = data.min(axis=0)
    feature_max = data.max(axis=0)
    varying = feature_max != feature_min
    if not np.any(varying):
        return

    cols = data[:, varying]
    lo = feature_min[varying]
    hi = feature_max[varying]

    scaled = lower + (upper - lower) * (cols - lo) / (hi - lo)
    scaled[cols == lo] = lower
    scaled[cols == hi] = upper

    data[:, varying] = scaled

"""
Design for simple linear regression.

Wraps paired (x, y) observations. Validation happens once, at
construction; the solver trusts the design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.exceptions import DimensionError
from samplestats.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_same_length,
)


@dataclass(frozen=True, eq=False)
class LinregDesign:
    """
    Paired observations for y = b0 + b1 * x.

    Construction:
        LinregDesign.from_pairs([(1, 2), (2, 4), (3, 6)])
        LinregDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    @classmethod
    def from_pairs(cls, pairs: ArrayLike) -> LinregDesign:
        """Build from a sequence of (x, y) pairs, shape (n, 2)."""
        arr = check_array(pairs, 'pairs')
        if arr.size == 0:
            return cls.from_arrays(np.empty(0), np.empty(0))
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"pairs: expected shape (n, 2), got {arr.shape}"
            )
        return cls.from_arrays(arr[:, 0], arr[:, 1])

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> LinregDesign:
        """
        Build from parallel x and y arrays.

        Unequal lengths raise DomainError(LENGTH_MISMATCH), as covar() does.
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_same_length(x_arr.shape[0], y_arr.shape[0], 'linreg')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        x_arr.setflags(write=False)
        y_arr.setflags(write=False)
        return cls(_x=x_arr, _y=y_arr)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Regressor values."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values."""
        return self._y

    @property
    def n(self) -> int:
        """Number of (x, y) pairs."""
        return int(self._x.shape[0])

    def __repr__(self) -> str:
        return f"LinregDesign(n={self.n})"

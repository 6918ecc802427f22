"""
Immutable 3x3 homography matrix.

The matrix is stored as its 9 row-major coefficients
[h11, h12, h13, h21, h22, h23, h31, h32, h33] and normalized so that h33 == 1.
It maps homogeneous coordinates between two planes:

    [x']       [x]
    [y']  = H  [y]
    [w']       [1]

The final coordinates are (x'/w', y'/w').
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, overload

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class HomographyMatrix:
    """Normalized projective transform as a row-major sequence of 9 floats.

    Supports len(), indexing and iteration, so it can be used anywhere a plain
    list of coefficients is expected (``H[8] == 1``).

    Attributes:
        coefficients: Row-major coefficients with coefficients[8] == 1.0.
    """

    coefficients: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate coefficient count and normalization."""
        values = tuple(float(c) for c in self.coefficients)
        if len(values) != 9:
            raise ValueError(f"Homography matrix must have 9 coefficients, got {len(values)}")
        if values[8] != 1.0:
            raise ValueError(f"Homography matrix must be normalized (h33 == 1), got h33={values[8]}")
        # Use object.__setattr__ since frozen=True
        object.__setattr__(self, "coefficients", values)

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[float]) -> HomographyMatrix:
        """Create a matrix from 9 row-major coefficients."""
        return cls(coefficients=tuple(coefficients))

    @classmethod
    def identity(cls) -> HomographyMatrix:
        """Create the identity homography."""
        return cls(coefficients=(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))

    def as_array(self) -> npt.NDArray[np.float64]:
        """Return a fresh 3x3 float64 array of the coefficients."""
        return np.array(self.coefficients, dtype=np.float64).reshape(3, 3)

    def to_list(self) -> list[float]:
        return list(self.coefficients)

    def is_affine(self, atol: float = 1e-12) -> bool:
        """True when the third row is [0, 0, 1] within ``atol`` (no perspective skew)."""
        return abs(self.coefficients[6]) <= atol and abs(self.coefficients[7]) <= atol

    def __len__(self) -> int:
        return 9

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[float, ...]: ...

    def __getitem__(self, index: int | slice) -> float | tuple[float, ...]:
        return self.coefficients[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.coefficients)

from typing import Tuple
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True, eq=False)
class Point2D:
    """
    Represents a 2D vertex

    Two points are equal only when both coordinates have identical IEEE-754
    bit patterns, so 0.0 and -0.0 differ and a NaN matches itself.
    """
    x: float
    y: float

    def bits(self) -> Tuple[int, int]:
        """Raw float64 bit patterns of (x, y)"""
        raw = np.array([self.x, self.y], dtype=np.float64).view(np.int64)
        return (int(raw[0]), int(raw[1]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.bits() == other.bits()

    def __hash__(self) -> int:
        return hash(self.bits())

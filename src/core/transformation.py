# core/transformation.py
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List
from core.matrix import Matrix, identity
from core.vector import Tuple4

logger = logging.getLogger(__name__)

TRANSFORMATION_MATRIX_SIZE = 4

class RotationAxis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


@dataclass(frozen=True)
class ShearingTransform:
    """
    Each field moves one coordinate in proportion to another,
    e.g. x_to_y moves x in proportion to y.
    """
    x_to_y: float = 0.0
    x_to_z: float = 0.0
    y_to_x: float = 0.0
    y_to_z: float = 0.0
    z_to_x: float = 0.0
    z_to_y: float = 0.0


def translation(dx: float, dy: float, dz: float) -> Matrix:
    matrix = identity(TRANSFORMATION_MATRIX_SIZE)
    matrix.set(dx, 0, 3)
    matrix.set(dy, 1, 3)
    matrix.set(dz, 2, 3)
    return matrix

def scaling(sx: float, sy: float, sz: float) -> Matrix:
    matrix = identity(TRANSFORMATION_MATRIX_SIZE)
    matrix.set(sx, 0, 0)
    matrix.set(sy, 1, 1)
    matrix.set(sz, 2, 2)
    return matrix

def rotation(axis: RotationAxis, radians: float) -> Matrix:
    """
    Right-handed rotation about one of the coordinate axes.
    """
    matrix = identity(TRANSFORMATION_MATRIX_SIZE)
    c = math.cos(radians)
    s = math.sin(radians)
    if axis is RotationAxis.X:
        matrix.set(c, 1, 1)
        matrix.set(-s, 1, 2)
        matrix.set(s, 2, 1)
        matrix.set(c, 2, 2)
    elif axis is RotationAxis.Y:
        matrix.set(c, 0, 0)
        matrix.set(s, 0, 2)
        matrix.set(-s, 2, 0)
        matrix.set(c, 2, 2)
    elif axis is RotationAxis.Z:
        matrix.set(c, 0, 0)
        matrix.set(-s, 0, 1)
        matrix.set(s, 1, 0)
        matrix.set(c, 1, 1)
    else:
        raise ValueError(f"Unknown rotation axis: {axis!r}")
    return matrix

def shearing(transform: ShearingTransform) -> Matrix:
    matrix = identity(TRANSFORMATION_MATRIX_SIZE)
    matrix.set(transform.x_to_y, 0, 1)
    matrix.set(transform.x_to_z, 0, 2)
    matrix.set(transform.y_to_x, 1, 0)
    matrix.set(transform.y_to_z, 1, 2)
    matrix.set(transform.z_to_x, 2, 0)
    matrix.set(transform.z_to_y, 2, 1)
    return matrix


class TransformationBuilder:
    """
    Queues transformations in the order they should be applied to a tuple
    and collapses them into a single matrix.
    """
    def __init__(self):
        self._queued: List[Matrix] = []

    def __len__(self) -> int:
        return len(self._queued)

    def add_transformation(self, transform: Matrix) -> "TransformationBuilder":
        self._queued.append(transform)
        return self

    def add_translation(self, dx: float, dy: float, dz: float) -> "TransformationBuilder":
        return self.add_transformation(translation(dx, dy, dz))

    def add_scaling(self, sx: float, sy: float, sz: float) -> "TransformationBuilder":
        return self.add_transformation(scaling(sx, sy, sz))

    def add_rotation(self, axis: RotationAxis, radians: float) -> "TransformationBuilder":
        return self.add_transformation(rotation(axis, radians))

    def add_shearing(self, transform: ShearingTransform) -> "TransformationBuilder":
        return self.add_transformation(shearing(transform))

    def get_transformation_matrix(self) -> Matrix:
        """
        Returns last_added * ... * first_added, so the first queued
        transformation is the first one applied to a tuple.
        """
        if not self._queued:
            raise ValueError("No transformations have been added to execute")

        result = self._queued[-1]
        for transform in reversed(self._queued[:-1]):
            result = result.multiply(transform)
        logger.debug(f"Collapsed {len(self._queued)} queued transformations")
        return result

    def apply_transformations(self, value: Tuple4) -> Tuple4:
        return self.get_transformation_matrix().multiply(value)

    def reset(self):
        self._queued.clear()

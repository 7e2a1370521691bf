# core/matrix.py
from typing import List, Optional, Sequence, Union
import numpy as np
from core.utils import float_is_equal, is_within_range
from core.vector import Tuple4

# Largest size the cofactor expansion in determinant() is defined for.
MAX_DETERMINANT_SIZE = 4

class Matrix:
    """
    A square matrix of floats stored row-major. The size is fixed at
    construction; cells change only through set().
    """
    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Matrix size cannot be negative: {size}")
        self._data = np.zeros((size, size), dtype=np.float64)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Builds a matrix from row data, which must be square.
        """
        size = len(rows)
        for row in rows:
            if len(row) != size:
                raise ValueError("Cannot create non-square matrix")
        matrix = cls(size)
        if size:
            matrix._data[:, :] = np.asarray(rows, dtype=np.float64)
        return matrix

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        matrix = cls(data.shape[0])
        matrix._data[:, :] = data
        return matrix

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def _check_index(self, row: int, col: int):
        last = self.size - 1
        if not is_within_range(0, last, row) or not is_within_range(0, last, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} matrix")

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return float(self._data[row, col])

    def set(self, value: float, row: int, col: int):
        self._check_index(row, col)
        self._data[row, col] = value

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def is_equal(self, other: "Matrix") -> bool:
        if self.size != other.size:
            return False
        for i in range(self.size):
            for j in range(self.size):
                if not float_is_equal(self._data[i, j], other._data[i, j]):
                    return False
        return True

    def multiply(self, other: Union["Matrix", Tuple4]) -> Union["Matrix", Tuple4]:
        """
        Multiplies by another matrix of the same size, or applies a 4x4
        matrix to a homogeneous tuple.
        """
        if isinstance(other, Tuple4):
            if self.size != 4:
                raise ValueError(f"Only a 4x4 matrix can multiply a tuple, not {self.size}x{self.size}")
            x, y, z, w = self._data @ np.array(tuple(other), dtype=np.float64)
            return Tuple4(x, y, z, w)
        if isinstance(other, Matrix):
            if self.size != other.size:
                raise ValueError(f"Cannot multiply a {self.size}x{self.size} matrix "
                                 f"by a {other.size}x{other.size} matrix")
            return Matrix._wrap(self._data @ other._data)
        raise TypeError(f"Cannot multiply a matrix by {type(other).__name__}")

    def __matmul__(self, other):
        return self.multiply(other)

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T)

    def determinant(self) -> float:
        size = self.size
        if size == 1:
            return float(self._data[0, 0])
        if size == 2:
            a, b = self._data[0]
            c, d = self._data[1]
            return float(a * d - b * c)
        if size in (3, MAX_DETERMINANT_SIZE):
            # Cofactor expansion along the first row.
            return sum(float(self._data[0, j]) * self.cofactor(0, j) for j in range(size))
        raise ValueError(f"Determinant is only supported for sizes 1 to "
                         f"{MAX_DETERMINANT_SIZE}, not {size}")

    def submatrix(self, row_to_remove: int, col_to_remove: int) -> "Matrix":
        self._check_index(row_to_remove, col_to_remove)
        data = np.delete(np.delete(self._data, row_to_remove, axis=0), col_to_remove, axis=1)
        return Matrix._wrap(data)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> "Matrix":
        determinant = self.determinant()
        if determinant == 0:
            raise ValueError("Matrix is not invertible: determinant is 0")
        if self.size == 1:
            return Matrix.from_rows([[1.0 / determinant]])
        result = Matrix(self.size)
        for i in range(self.size):
            for j in range(self.size):
                # Writing to (j, i) transposes the cofactor matrix into the adjugate.
                result._data[j, i] = self.cofactor(i, j) / determinant
        return result

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()})"


def identity(size: int) -> Matrix:
    return Matrix._wrap(np.identity(size, dtype=np.float64))


class MatrixBuilder:
    """
    Accumulates rows fluently and creates a square matrix from them.
    """
    def __init__(self):
        self._rows: List[List[float]] = []
        self._expected_size: Optional[int] = None

    def with_row(self, *values: float) -> "MatrixBuilder":
        if self._expected_size is not None and len(values) != self._expected_size:
            raise ValueError("Rows must all have the same number of values")
        if self._expected_size is None:
            self._expected_size = len(values)
        self._rows.append([float(v) for v in values])
        return self

    def create(self) -> Matrix:
        if self._expected_size is None:
            return Matrix(0)
        if len(self._rows) != self._expected_size:
            raise ValueError("Cannot create non-square matrix")
        return Matrix.from_rows(self._rows)

    def reset(self):
        self._rows.clear()
        self._expected_size = None

"""Square matrices over integers modulo a prime."""

from .modint import DEFAULT_MOD, power


class Matrix:
    """Square matrix with entries reduced modulo ``mod``."""

    def __init__(self, rows, mod=DEFAULT_MOD):
        rows = tuple(tuple(int(v) % mod for v in row) for row in rows)
        if not rows or any(len(row) != len(rows) for row in rows):
            raise ValueError("matrix must be square and non-empty")
        self.rows = rows
        self.mod = mod

    @property
    def size(self):
        return len(self.rows)

    def _check(self, other):
        if not isinstance(other, Matrix):
            return False
        if other.size != self.size or other.mod != self.mod:
            raise ValueError("matrices are not compatible")
        return True

    def __mul__(self, other):
        if not self._check(other):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.rows],
            self.mod,
        )

    def __add__(self, other):
        if not self._check(other):
            return NotImplemented
        return Matrix(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self.rows, other.rows)],
            self.mod,
        )

    def __pow__(self, exponent):
        if exponent == 0:
            return scalar_matrix(self.size, 1, self.mod)
        return power(self, exponent)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mod == other.mod and self.rows == other.rows

    def __hash__(self):
        return hash((self.rows, self.mod))

    def __repr__(self):
        return f"Matrix({[list(r) for r in self.rows]}, {self.mod})"


def scalar_matrix(size, value, mod=DEFAULT_MOD):
    """Matrix with ``value`` on the diagonal and zeros elsewhere."""
    if size < 1:
        raise ValueError("size must be positive")
    return Matrix([[value if i == j else 0 for j in range(size)] for i in range(size)], mod)
"""Integers modulo a fixed modulus and fast exponentiation."""

DEFAULT_MOD = 1_000_000_007


def power(a, b):
    """Raise ``a`` to the non-negative integer ``b`` by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = None
    while b:
        if b & 1:
            result = a if result is None else result * a
        b >>= 1
        if b:
            a = a * a
    if result is None:
        return ModInt(1, a.mod) if isinstance(a, ModInt) else 1
    return result


class ModInt:
    """Residue modulo ``mod``; division assumes ``mod`` is prime."""

    __slots__ = ("value", "mod")

    def __init__(self, value=0, mod=DEFAULT_MOD):
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = int(value) % mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("moduli differ")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _make(self, value):
        return ModInt(value, self.mod)

    def __add__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(self.value + o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(self.value - o)

    def __rsub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(o - self.value)

    def __mul__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(self.value * o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self * self._make(o).inv()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(o) * self.inv()

    def __neg__(self):
        return self._make(-self.value)

    def __pow__(self, exponent):
        if exponent < 0:
            return power(self.inv(), -exponent)
        return power(self, exponent)

    def inv(self):
        """Multiplicative inverse by Fermat's little theorem."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return power(self, self.mod - 2)

    def __int__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.mod
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.mod))

    def __repr__(self):
        return f"ModInt({self.value}, {self.mod})"

    def __str__(self):
        return str(self.value)
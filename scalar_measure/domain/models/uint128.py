_MODULUS = 1 << 128


class Uint128(int):
    """An unsigned 128-bit integer.

    numpy has no 128-bit dtype, so u128 lengths are Python ints reduced modulo
    2**128. Addition and subtraction wrap the same way numpy's unsigned
    scalars do, e.g. Uint128(0) - 1 == 2**128 - 1.
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "Uint128":
        return super().__new__(cls, int(value) % _MODULUS)

    @staticmethod
    def _is_operand(other) -> bool:
        return isinstance(other, int) and not isinstance(other, bool)

    def __add__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return Uint128(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return Uint128(int(self) - int(other))

    def __rsub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return Uint128(int(other) - int(self))

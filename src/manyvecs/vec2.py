from __future__ import annotations

import math
import numbers
import operator
from contextlib import nullcontext
from typing import Any, Callable, ContextManager, Generic, Iterator, List, Sequence, TypeVar

import numpy as np
from numpy import ndarray

from manyvecs.logging import WrongLengthError
from manyvecs.types import Pair, Scalar

T = TypeVar("T")


def _floor_scalar(value):
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return type(value)(math.floor(value))


def _ceil_scalar(value):
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return type(value)(math.ceil(value))


def _greater(a, b):
    return a if a > b else b


def _lesser(a, b):
    return a if a < b else b


class Vec2Base(Generic[T]):
    """
    A class for storing two-component vectors. Provides construction, field
    access and the component-wise ring operators shared by every element type.

    Every binary operator accepts either another vector (paired component-wise)
    or a scalar (broadcast to both components). Numeric edge cases such as
    overflow or division by zero are left to the element type.
    """

    __slots__ = ("_x", "_y")

    dtype: Any = None
    """The NumPy dtype of the components, ``None`` for plain Python numbers."""

    _div = staticmethod(operator.truediv)
    _rem = staticmethod(operator.mod)
    _sqrt = staticmethod(math.sqrt)
    _floor = staticmethod(_floor_scalar)
    _ceil = staticmethod(_ceil_scalar)

    def __init__(self, x: T, y: T):
        """
        Constructs a vector.

        Args:
            x: The vector x-coordinate.
            y: The vector y-coordinate.
        """
        self.x = x
        self.y = y

    @property
    def x(self) -> T:
        return self._x

    @x.setter
    def x(self, value: T) -> None:
        self._x = self._coerce(value)

    @property
    def y(self) -> T:
        return self._y

    @y.setter
    def y(self, value: T) -> None:
        self._y = self._coerce(value)

    @classmethod
    def _coerce(cls, value: Any) -> T:
        return value

    def _numeric_policy(self) -> ContextManager:
        return nullcontext()

    def _new(self, x: T, y: T):
        return type(self)(x, y)

    @classmethod
    def default(cls):
        """
        Returns the zero vector ``(0, 0)`` of this type.
        """
        return cls(0, 0)

    def copy(self):
        """
        Returns an independent copy of this vector.
        """
        return self._new(self.x, self.y)

    def magnitude_squared(self) -> T:
        """
        Returns ``x * x + y * y``. Overflows the way the element type does.
        """
        with self._numeric_policy():
            return self.x * self.x + self.y * self.y

    def _binary(self, other: Any, op: Callable[[Any, Any], Any]):
        if isinstance(other, Vec2Base):
            rx, ry = self._coerce(other.x), self._coerce(other.y)
        elif isinstance(other, numbers.Number):
            rx = ry = self._coerce(other)
        else:
            return NotImplemented
        with self._numeric_policy():
            return self._new(op(self.x, rx), op(self.y, ry))

    def _inplace(self, other: Any, op: Callable[[Any, Any], Any]):
        result = self._binary(other, op)
        if result is NotImplemented:
            return NotImplemented
        self.x, self.y = result.x, result.y
        return self

    def __add__(self, other):
        """
        Component-wise addition.

        Args:
            other: A vector or a scalar, from either left or right.

        Returns:
            The sum as a new vector.
        """
        return self._binary(other, operator.add)

    __radd__ = __add__

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __sub__(self, other):
        """
        Component-wise subtraction.

        Args:
            other: A vector or a scalar to be subtracted from this vector.

        Returns:
            The difference as a new vector.
        """
        return self._binary(other, operator.sub)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __mul__(self, other):
        """
        Component-wise multiplication.

        Args:
            other: A vector or a scalar, from either left or right.

        Returns:
            The product as a new vector.
        """
        return self._binary(other, operator.mul)

    __rmul__ = __mul__

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __truediv__(self, other):
        """
        Component-wise division. Integer vector types divide the way their
        element type does (truncating toward zero).

        Args:
            other: A vector or a scalar by which to divide this vector.

        Returns:
            The quotient as a new vector.
        """
        return self._binary(other, self._div)

    def __itruediv__(self, other):
        return self._inplace(other, self._div)

    def __mod__(self, other):
        """
        Component-wise remainder.

        Args:
            other: A vector or a scalar.

        Returns:
            The remainder as a new vector. Plain Python numbers take the sign
            of the divisor, fixed-width types the sign of the dividend.
        """
        return self._binary(other, self._rem)

    def __imod__(self, other):
        return self._inplace(other, self._rem)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2Base):
            return NotImplemented
        return bool(self.x == other.x) and bool(self.y == other.y)

    # mutable, so not hashable
    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"

    __repr__ = __str__

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, n: int) -> T:
        """
        Returns the n-th element of the vector, starting by zero.

        Args:
            n: The index of the element to return.

        Returns:
            The vector element at n-th index.
        """
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        raise IndexError(f"{type(self).__name__} does not have an element at index {n}.")

    @classmethod
    def from_tuple(cls, value: Pair):
        """
        Creates a vector from an ``(x, y)`` tuple.
        """
        x, y = value
        return cls(x, y)

    def to_tuple(self) -> Pair:
        return (self.x, self.y)

    @classmethod
    def from_array(cls, value: ndarray):
        """
        Creates a vector from a NumPy array of shape ``(2,)``.

        Args:
            value: The array (or anything ``numpy.asarray`` accepts).

        Returns:
            The new vector.

        Raises:
            WrongLengthError: If the array does not have exactly two elements in a single dimension.
        """
        arr = np.asarray(value)
        if arr.shape != (2,):
            raise WrongLengthError(arr.size)
        x, y = arr.tolist()
        return cls(x, y)

    def to_array(self) -> ndarray:
        """
        Returns the vector as a NumPy array of shape ``(2,)`` using the dtype of this vector type.
        """
        return np.array([self.x, self.y], dtype=self.dtype)

    @classmethod
    def from_sequence(cls, value: Sequence[T]):
        """
        Creates a vector from a sequence of any length.

        Args:
            value: The sequence. Element 0 becomes ``x`` and element 1 becomes ``y``.

        Returns:
            The new vector.

        Raises:
            WrongLengthError: If the sequence does not have exactly two elements.
        """
        length = len(value)
        if length != 2:
            raise WrongLengthError(length)
        return cls(value[0], value[1])

    def to_list(self) -> List[T]:
        return [self.x, self.y]


class OrderedVec2(Vec2Base[T]):
    """
    Operations for element types that can be compared.
    """

    __slots__ = ()

    def max(self, value: Scalar):
        """
        The component-wise maximum against a single scalar.

        Args:
            value: The scalar compared against both components. Wins ties.

        Returns:
            The new vector.
        """
        v = self._coerce(value)
        return self._new(_greater(self.x, v), _greater(self.y, v))

    def max_with(self, other: Vec2Base[T]):
        """
        The component-wise maximum against another vector.
        """
        return self._new(
            _greater(self.x, self._coerce(other.x)),
            _greater(self.y, self._coerce(other.y)),
        )

    def min(self, value: Scalar):
        """
        The component-wise minimum against a single scalar.

        Args:
            value: The scalar compared against both components. Wins ties.

        Returns:
            The new vector.
        """
        v = self._coerce(value)
        return self._new(_lesser(self.x, v), _lesser(self.y, v))

    def min_with(self, other: Vec2Base[T]):
        """
        The component-wise minimum against another vector.
        """
        return self._new(
            _lesser(self.x, self._coerce(other.x)),
            _lesser(self.y, self._coerce(other.y)),
        )

    def clamp(self, low: Scalar, high: Scalar):
        """
        Constrains both components to ``[low, high]``. Applies ``max(low)``
        first and ``min(high)`` second, so ``high`` wins if ``low > high``.

        Args:
            low: The lower bound.
            high: The upper bound.

        Returns:
            The clamped vector.
        """
        return self.max(low).min(high)


class SignedVec2(Vec2Base[T]):
    """
    Operations for element types that can be negated.
    """

    __slots__ = ()

    def negate(self):
        """
        Component-wise negation, also available as unary ``-``.
        """
        with self._numeric_policy():
            return self._new(-self.x, -self.y)

    def __neg__(self):
        return self.negate()

    def perpendicular(self):
        """
        Rotates the vector by 90 degrees counter-clockwise, returning ``(-y, x)``.
        """
        with self._numeric_policy():
            return self._new(-self.y, self.x)


class RealVec2(SignedVec2[T]):
    """
    Operations for real (floating-point) element types.
    """

    __slots__ = ()

    def magnitude(self) -> T:
        """
        The length of this vector, ``sqrt(x^2 + y^2)``.

        Returns:
            The length of this vector (a scalar value).
        """
        with self._numeric_policy():
            return self._sqrt(self.magnitude_squared())

    def normalize(self):
        """
        Scales the vector to unit length. A zero vector divides by zero,
        with the outcome decided by the element type.

        Returns:
            The normalized vector.
        """
        with self._numeric_policy():
            mag_inv = self._coerce(1) / self.magnitude()
            return self._new(self.x * mag_inv, self.y * mag_inv)

    def floor(self):
        """
        Rounds both components toward negative infinity.
        """
        return self._new(self._floor(self.x), self._floor(self.y))

    def ceil(self):
        """
        Rounds both components toward positive infinity.
        """
        return self._new(self._ceil(self.x), self._ceil(self.y))


class BitwiseVec2(Vec2Base[T]):
    """
    Component-wise bitwise operators for integer element types.
    """

    __slots__ = ()

    def __and__(self, other):
        return self._binary(other, operator.and_)

    __rand__ = __and__

    def __iand__(self, other):
        return self._inplace(other, operator.and_)

    def __or__(self, other):
        return self._binary(other, operator.or_)

    __ror__ = __or__

    def __ior__(self, other):
        return self._inplace(other, operator.or_)

    def __xor__(self, other):
        return self._binary(other, operator.xor)

    __rxor__ = __xor__

    def __ixor__(self, other):
        return self._inplace(other, operator.xor)

    def __lshift__(self, other):
        return self._binary(other, operator.lshift)

    def __ilshift__(self, other):
        return self._inplace(other, operator.lshift)

    def __rshift__(self, other):
        return self._binary(other, operator.rshift)

    def __irshift__(self, other):
        return self._inplace(other, operator.rshift)


class Vec2(RealVec2[T], OrderedVec2[T]):
    """
    A two-component vector over plain Python numbers (``int``, ``float``,
    ``fractions.Fraction`` and the like). Every operator uses the element
    type's own arithmetic, so dividing by zero raises ``ZeroDivisionError``
    and integers never overflow.

    For fixed-width NumPy element types see :mod:`manyvecs.typed`.

    Example:
        >>> v = Vec2(2.0, -0.5)
        >>> print(v + 1.0)
        Vec2(3.0, 0.5)
    """

    __slots__ = ()

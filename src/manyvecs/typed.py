"""
Fixed-width vector types, one class per NumPy scalar type.

Each class stores its components as NumPy scalars of its ``dtype`` and only
exposes the operations that make sense for that domain:

    - unsigned integers: ring operators, ordering, bitwise operators,
    - signed integers: the above plus negation and :meth:`perpendicular`,
    - floating point: ring operators, ordering, negation and the real
      operations (:meth:`magnitude`, :meth:`normalize`, :meth:`floor`, :meth:`ceil`).

Integer types wrap silently on overflow, divide truncating toward zero and
raise ``FloatingPointError`` when dividing by zero. The remainder ``%`` takes
the sign of the dividend in every domain. Floating point types follow
IEEE 754 without warnings, including when values are cast into the dtype.
"""

from __future__ import annotations

import logging
from typing import Any, ContextManager, Dict, Tuple, Type

import numpy as np

from manyvecs.logging import LOGGER_ID, ManyVecsValueError
from manyvecs.types import DTypeLike
from manyvecs.vec2 import BitwiseVec2, OrderedVec2, RealVec2, SignedVec2, Vec2Base

module_logger = logging.getLogger(f"{LOGGER_ID}.typed")

INTEGER_ERRSTATE = {"over": "ignore", "divide": "raise", "invalid": "raise"}
FLOATING_ERRSTATE = {"all": "ignore"}

_DOMAINS: Dict[str, Tuple[Tuple[type, ...], Dict[str, str]]] = {
    "floating": ((RealVec2, OrderedVec2), FLOATING_ERRSTATE),
    "signed": ((SignedVec2, OrderedVec2, BitwiseVec2), INTEGER_ERRSTATE),
    "unsigned": ((OrderedVec2, BitwiseVec2), INTEGER_ERRSTATE),
}

_registry: Dict[np.dtype, Type[TypedVec2]] = {}


def _truncating_div(a, b):
    # fmod keeps the sign of the dividend, so a - r is an exact multiple of b
    r = np.fmod(a, b)
    return (a - r) // b


class TypedVec2(Vec2Base):
    """
    Base class of the generated vector types. Coerces every component and
    scalar operand to :attr:`dtype` and runs arithmetic under the domain's
    ``numpy.errstate`` policy.
    """

    __slots__ = ()

    dtype: np.dtype
    _errstate: Dict[str, str] = {}

    _rem = staticmethod(np.fmod)
    _sqrt = staticmethod(np.sqrt)
    _floor = staticmethod(np.floor)
    _ceil = staticmethod(np.ceil)

    @classmethod
    def _coerce(cls, value: Any) -> np.generic:
        with np.errstate(**cls._errstate):
            return cls.dtype.type(value)

    def _numeric_policy(self) -> ContextManager:
        return np.errstate(**self._errstate)


def create_vec2(name: str, scalar_type: DTypeLike, domain: str) -> Type[TypedVec2]:
    """
    Generates a vector class for a NumPy scalar type and registers it, so
    that :func:`vec2_type` can find it.

    Args:
        name: The class name, also used when the vector is rendered as text.
        scalar_type: The element type, e.g. ``numpy.float32``.
        domain: One of ``'floating'``, ``'signed'`` or ``'unsigned'``.

    Returns:
        The new vector class.
    """
    if domain not in _DOMAINS:
        raise ManyVecsValueError(
            f"Unknown numeric domain '{domain}', expected one of {', '.join(_DOMAINS)}."
        )
    dtype = np.dtype(scalar_type)
    if dtype in _registry:
        raise ManyVecsValueError(
            f"Cannot create {name}, dtype {dtype.name} is already used by {_registry[dtype].__name__}."
        )
    features, errstate = _DOMAINS[domain]
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "__doc__": f"A two-component vector of ``numpy.{dtype.name}`` values.",
        "dtype": dtype,
        "_errstate": errstate,
    }
    if domain != "floating":
        namespace["_div"] = staticmethod(_truncating_div)
    cls = type(name, features + (TypedVec2,), namespace)
    _registry[dtype] = cls
    module_logger.debug(f"Created vector type {name} for dtype {dtype.name} ({domain}).")
    return cls


def vec2_type(dtype: DTypeLike) -> Type[TypedVec2]:
    """
    Looks up the vector class registered for a dtype.

    Args:
        dtype: Anything ``numpy.dtype`` accepts.

    Returns:
        The vector class.
    """
    try:
        return _registry[np.dtype(dtype)]
    except KeyError:
        raise ManyVecsValueError(f"No vector type is registered for dtype '{dtype}'.") from None


# Floats
Vec2f32 = create_vec2("Vec2f32", np.float32, "floating")
Vec2f64 = create_vec2("Vec2f64", np.float64, "floating")

# Unsigned ints
Vec2u8 = create_vec2("Vec2u8", np.uint8, "unsigned")
Vec2u16 = create_vec2("Vec2u16", np.uint16, "unsigned")
Vec2u32 = create_vec2("Vec2u32", np.uint32, "unsigned")
Vec2u64 = create_vec2("Vec2u64", np.uint64, "unsigned")

# Signed ints
Vec2i8 = create_vec2("Vec2i8", np.int8, "signed")
Vec2i16 = create_vec2("Vec2i16", np.int16, "signed")
Vec2i32 = create_vec2("Vec2i32", np.int32, "signed")
Vec2i64 = create_vec2("Vec2i64", np.int64, "signed")

Vec2f = Vec2f32
""
Vec2d = Vec2f64
""
Vec2u = Vec2u64
""
Vec2i = Vec2i64
""

from __future__ import annotations

import logging

import pytest

from manyvecs import (Vec2, Vec2f32, Vec2f64, Vec2i8, Vec2i16, Vec2i32,
                      Vec2i64, Vec2u8, Vec2u16, Vec2u32, Vec2u64)

FLOATING_TYPES = [Vec2f32, Vec2f64]
SIGNED_TYPES = [Vec2i8, Vec2i16, Vec2i32, Vec2i64]
UNSIGNED_TYPES = [Vec2u8, Vec2u16, Vec2u32, Vec2u64]
ALL_TYPES = [Vec2] + FLOATING_TYPES + SIGNED_TYPES + UNSIGNED_TYPES


def _name(cls) -> str:
    return cls.__name__


@pytest.fixture(params=ALL_TYPES, ids=_name)
def vec_type(request):
    return request.param


@pytest.fixture(params=[Vec2] + FLOATING_TYPES, ids=_name)
def real_type(request):
    return request.param


@pytest.fixture(params=[Vec2] + FLOATING_TYPES + SIGNED_TYPES, ids=_name)
def signed_type(request):
    return request.param


@pytest.fixture(params=SIGNED_TYPES + UNSIGNED_TYPES, ids=_name)
def integer_type(request):
    return request.param


@pytest.fixture
def clean_logging():
    """
    Restores the logging and warnings configuration touched by the manyvecs logging helpers.
    """
    import manyvecs.logging as mv_logging

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = mv_logging.mv_logger.level
    yield
    for h in mv_logging.mv_handlers:
        root_logger.removeHandler(h)
        h.close()
    mv_logging.mv_handlers = list()
    root_logger.handlers = handlers
    mv_logging.mv_logger.setLevel(level)


@pytest.fixture
def scratch_registry():
    """
    Lets a test register extra vector types without leaking them into later tests.
    """
    from manyvecs import typed

    saved = dict(typed._registry)
    yield
    typed._registry.clear()
    typed._registry.update(saved)

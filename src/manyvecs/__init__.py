import os

from manyvecs.logging import (ManyVecsError, ManyVecsValueError,
                              WrongLengthError, config_logging,
                              set_up_simple_logging)
from manyvecs.typed import (Vec2d, Vec2f, Vec2f32, Vec2f64, Vec2i, Vec2i8,
                            Vec2i16, Vec2i32, Vec2i64, Vec2u, Vec2u8, Vec2u16,
                            Vec2u32, Vec2u64, create_vec2, vec2_type)
from manyvecs.vec2 import (BitwiseVec2, OrderedVec2, RealVec2, SignedVec2,
                           Vec2, Vec2Base)


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")

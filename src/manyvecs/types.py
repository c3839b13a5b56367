from __future__ import annotations

from numbers import Number
from typing import Any, Tuple, Union

import numpy as np

# these empty comments are because of the autodocumentation

Scalar = Union[Number, np.generic]
""
Pair = Tuple[Any, Any]
""
DTypeLike = Union[np.dtype, type, str]
"""
Anything accepted by ``numpy.dtype``, e.g. ``numpy.float32`` or ``'int16'``.
"""

from .full import (
    find_msb,
    get_isqrt,
    isqrt_bisect,
    isqrt_bitwise,
    isqrt_builtin,
    isqrt_closest,
    isqrt_map,
    isqrt_newton,
)
from .floor import (
    isqrt_gradually_ascending_from,
    isqrt_gradually_changing_from,
    isqrt_gradually_descending_from,
)
from . import closest
from .stream import isqrt_stream, root_dtype

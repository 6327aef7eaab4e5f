"""
Argument type inference for OSC messages.

Maps Python and numpy values to OSC type tags so that messages can be
built straight from sensor arrays without manual conversion.
"""

import numpy as np

from ..common.arguments import OscImpulse, OscMidi, OscRgba
from ..common.errors import OscError, OscException
from ..common.time_tag import OscTimeTag

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_FLOAT32_MAX = float(np.finfo(np.float32).max)


def infer_type_tag(value):
    """
    Infer the OSC type tag for a single argument value.

    Args:
        value: Python or numpy value

    Returns:
        Type tag string. A single character for plain values, or a
        bracketed string such as "[if]" for list arguments.

    Raises:
        OscException: If the value has no OSC representation
    """
    # bool before int: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return "T" if value else "F"
    if value is None:
        return "N"
    if isinstance(value, OscImpulse):
        return "I"
    if isinstance(value, OscTimeTag):
        return "t"
    if isinstance(value, OscRgba):
        return "r"
    if isinstance(value, OscMidi):
        return "m"
    if isinstance(value, (int, np.integer)):
        return "i" if _INT32_MIN <= int(value) <= _INT32_MAX else "h"
    if isinstance(value, np.float64):
        return "d"
    if isinstance(value, (float, np.floating)):
        return "f"
    if isinstance(value, str):
        return "s"
    if isinstance(value, (bytes, bytearray, memoryview, np.ndarray)):
        return "b"
    if isinstance(value, list):
        return "[" + infer_type_tags(value) + "]"
    raise OscException(
        OscError.INVALID_ARGUMENT, f"no OSC type for {type(value).__name__}"
    )


def infer_type_tags(arguments):
    """
    Infer the type tag string (without leading ',') for a list of arguments.

    Example:
        infer_type_tags([1, 2.0, "x", [True, None]])  # "ifs[TN]"
    """
    return "".join(infer_type_tag(value) for value in arguments)


def to_python(value):
    """
    Convert numpy scalars and arrays to plain Python values.

    Arrays become big-endian raw bytes (blob payload). Other values are
    returned unchanged.

    Args:
        value: Argument value

    Returns:
        Equivalent bool, int, float or bytes for numpy inputs, else value
    """
    if isinstance(value, np.ndarray):
        big_endian = value.astype(value.dtype.newbyteorder(">"), copy=False)
        return np.ascontiguousarray(big_endian).tobytes()
    if isinstance(value, np.generic):
        return value.item()
    return value


def to_float32(value):
    """
    Round a float to the nearest float32, the precision of an 'f' argument.

    Values outside the float32 range and non-float values are returned
    unchanged so that encoding still reports them.
    """
    if isinstance(value, (float, np.floating)) and not abs(value) > _FLOAT32_MAX:
        return float(np.float32(value))
    return value

"""numpy utilities for vectorized per-row calculations."""

from __future__ import annotations

import numpy
from numpy import floating
from numpy.typing import NDArray

FloatArray1D = NDArray[floating]
BoolArray1D = NDArray[numpy.bool_]


def constant_array(value: float, size: int) -> FloatArray1D:
    """Create a float array of length `size` filled with `value`."""
    return numpy.full(size, value, dtype=float)


def safe_divide(num: FloatArray1D, den: FloatArray1D) -> FloatArray1D:
    """Divide two arrays element-wise.

    :param num: the numerator array
    :param den: the denominator array
    :return: an array with the quotient. Elements with a zero denominator are set to NaN, even if the
        numerator is also zero.

    """
    num = numpy.asarray(num, dtype=float)
    den = numpy.asarray(den, dtype=float)
    res = numpy.full(numpy.broadcast(num, den).shape, numpy.nan)
    numpy.divide(num, den, out=res, where=den != 0)
    return res


def clip_to_zero(arr: FloatArray1D) -> FloatArray1D:
    """Replace negative and non-finite values with zero."""
    res = numpy.array(arr, dtype=float)
    res[~numpy.isfinite(res) | (res < 0.0)] = 0.0
    return res

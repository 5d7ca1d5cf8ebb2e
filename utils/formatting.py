"""utils/formatting.py"""
import numpy as np
import pandas as pd

from config.config import DISPLAY_CONFIG


def to_pair(value):
    """结果拆成(实部, 虚部)；None返回(nan, nan)"""
    if value is None:
        return float('nan'), float('nan')
    value = complex(value)
    return value.real, value.imag


def _clean(part, tolerance):
    return 0.0 if abs(part) < tolerance else part


def format_value(value, precision=None):
    """
    把求值结果格式化为字符串
    e^{i*pi} → "-1"，sqrt(-4) → "2i"，1-e^{i*3pi/2} → "1+1i"
    """
    if value is None:
        return ""
    precision = precision or DISPLAY_CONFIG['precision']
    tolerance = DISPLAY_CONFIG['zero_tolerance']
    unit = DISPLAY_CONFIG['imaginary_unit']

    real, imag = to_pair(value)
    real, imag = _clean(real, tolerance), _clean(imag, tolerance)

    def fmt(x):
        return np.format_float_positional(x, precision=precision, unique=True, fractional=False, trim='-')

    if imag == 0:
        return fmt(real)
    if real == 0:
        return fmt(imag) + unit
    sign = '-' if imag < 0 else '+'
    return f"{fmt(real)}{sign}{fmt(abs(imag))}{unit}"


def to_frame(series):
    """evaluate_many的结果展开为实部/虚部两列"""
    pairs = [to_pair(value) for value in series]
    return pd.DataFrame(pairs, index=series.index, columns=['real', 'imag'])

"""core/operators.py"""
import numpy as np
import logging

logger = logging.getLogger(__name__)


def _real(operand):
    """三角函数、取整只取实部"""
    return float(np.real(operand))


def _apply_real(ufunc, operand):
    """inf/nan参数得到nan，不告警"""
    with np.errstate(invalid='ignore', over='ignore'):
        return ufunc(_real(operand))


def _reciprocal(value):
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.divide(1.0, value)


class Operators:
    """所有操作符的静态方法集合，操作数为float或complex"""

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(invalid='ignore', over='ignore'):
            return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(invalid='ignore', over='ignore'):
            return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符：inf*0得到nan"""
        with np.errstate(invalid='ignore', over='ignore'):
            return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除以0得到inf/nan，不抛异常"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.divide(operand1, operand2)

    @staticmethod
    def pow(base, exponent):
        """
        幂运算，支持复数
        负实数的非整数次幂提升为复数：(-8)^(1/3) → 1+1.732i
        """
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            if isinstance(base, complex) or isinstance(exponent, complex):
                return np.power(complex(base), exponent)
            if base < 0 and not float(exponent).is_integer():
                return np.power(complex(base), exponent)
            return np.power(float(base), float(exponent))

    @staticmethod
    def pow_neg(base, exponent):
        """^- 操作符：base^(-exponent)"""
        return Operators.pow(base, -exponent)

    # 一元操作符====================

    @staticmethod
    def sqrt(operand):
        """平方根，负数得到纯虚数"""
        with np.errstate(invalid='ignore'):
            return np.emath.sqrt(operand)

    @staticmethod
    def sin(operand):
        return _apply_real(np.sin, operand)

    @staticmethod
    def cos(operand):
        return _apply_real(np.cos, operand)

    @staticmethod
    def tan(operand):
        return _apply_real(np.tan, operand)

    @staticmethod
    def sec(operand):
        return _reciprocal(Operators.cos(operand))

    @staticmethod
    def csc(operand):
        return _reciprocal(Operators.sin(operand))

    @staticmethod
    def cot(operand):
        return _reciprocal(Operators.tan(operand))

    @staticmethod
    def sinh(operand):
        return _apply_real(np.sinh, operand)

    @staticmethod
    def cosh(operand):
        return _apply_real(np.cosh, operand)

    @staticmethod
    def tanh(operand):
        return _apply_real(np.tanh, operand)

    @staticmethod
    def sech(operand):
        return _reciprocal(Operators.cosh(operand))

    @staticmethod
    def csch(operand):
        return _reciprocal(Operators.sinh(operand))

    @staticmethod
    def coth(operand):
        return _reciprocal(Operators.tanh(operand))

    @staticmethod
    def floor(operand):
        return _apply_real(np.floor, operand)

    @staticmethod
    def ceil(operand):
        return _apply_real(np.ceil, operand)

"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType

import numpy as np


class TokenType(Enum):
    NUMBER = "number"          # 数字字面量
    IDENTIFIER = "identifier"  # 常数、变量、函数名
    OPERATOR = "operator"      # ^ ^+ ^- * / + -
    LPAREN = "lparen"
    RPAREN = "rparen"


class Associativity(Enum):
    LEFT = "L"
    RIGHT = "R"


class InstructionType(Enum):
    PUSH_NUMBER = "num"
    PUSH_VARIABLE = "var"
    APPLY = "apply"


class Token:
    def __init__(self, token_type, text, value=None):
        self.type = token_type
        self.text = text
        self.value = value  # 仅NUMBER使用

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text, self.value) == (other.type, other.text, other.value)

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


class OperatorInfo:
    """操作符描述：符号、参数个数、优先级、结合性以及Operators中的实现方法名"""

    def __init__(self, symbol, arity, precedence, associativity=Associativity.LEFT, method=None):
        self.symbol = symbol
        self.arity = arity
        self.precedence = precedence
        self.associativity = associativity
        self.method = method or symbol


FUNCTION_PRECEDENCE = 10
EXPONENT_PRECEDENCE = 9
PRODUCT_PRECEDENCE = 8
SUM_PRECEDENCE = 7
DEFAULT_PRECEDENCE = 0  # 左括号、空栈以及未知符号


def _function(name):
    return OperatorInfo(name, 1, FUNCTION_PRECEDENCE, Associativity.RIGHT)


# 操作符定义字典
# 注意：指数运算也是左结合，2^3^2 = (2^3)^2
OPERATOR_DEFINITIONS = {
    # 指数
    '^': OperatorInfo('^', 2, EXPONENT_PRECEDENCE, method='pow'),
    '^+': OperatorInfo('^+', 2, EXPONENT_PRECEDENCE, method='pow'),
    '^-': OperatorInfo('^-', 2, EXPONENT_PRECEDENCE, method='pow_neg'),

    # 四则运算
    '*': OperatorInfo('*', 2, PRODUCT_PRECEDENCE, method='mul'),
    '/': OperatorInfo('/', 2, PRODUCT_PRECEDENCE, method='div'),
    '+': OperatorInfo('+', 2, SUM_PRECEDENCE, method='add'),
    '-': OperatorInfo('-', 2, SUM_PRECEDENCE, method='sub'),

    # 三角函数和双曲函数
    'sin': _function('sin'),
    'cos': _function('cos'),
    'tan': _function('tan'),
    'sec': _function('sec'),
    'csc': _function('csc'),
    'cot': _function('cot'),
    'sinh': _function('sinh'),
    'cosh': _function('cosh'),
    'tanh': _function('tanh'),
    'sech': _function('sech'),
    'csch': _function('csch'),
    'coth': _function('coth'),

    # 取整和开方
    'floor': _function('floor'),
    'ceil': _function('ceil'),
    'sqrt': _function('sqrt'),
}

FUNCTION_NAMES = tuple(
    symbol for symbol, info in OPERATOR_DEFINITIONS.items()
    if info.precedence == FUNCTION_PRECEDENCE
)

# 只读常数表，编译器显式接收它
CALC_CONSTANTS = MappingProxyType({
    'e': np.e,
    'pi': np.pi,
    'i': complex(0, 1),
})


def precedence(symbol):
    info = OPERATOR_DEFINITIONS.get(symbol)
    return info.precedence if info else DEFAULT_PRECEDENCE


def associativity(symbol):
    info = OPERATOR_DEFINITIONS.get(symbol)
    return info.associativity if info else Associativity.LEFT


def arity(symbol):
    info = OPERATOR_DEFINITIONS.get(symbol)
    return info.arity if info else 0


def is_function(name):
    return name in FUNCTION_NAMES


class Instruction:
    """RPN指令"""

    def __init__(self, instruction_type, value=None, symbol=None, arity=0):
        self.type = instruction_type
        self.value = value    # PUSH_NUMBER的值 / PUSH_VARIABLE的变量名
        self.symbol = symbol  # APPLY的操作符
        self.arity = arity

    @classmethod
    def push_number(cls, value):
        return cls(InstructionType.PUSH_NUMBER, value=value)

    @classmethod
    def push_variable(cls, name):
        return cls(InstructionType.PUSH_VARIABLE, value=name)

    @classmethod
    def apply(cls, symbol):
        return cls(InstructionType.APPLY, symbol=symbol, arity=arity(symbol))

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return (self.type, self.value, self.symbol, self.arity) == \
            (other.type, other.value, other.symbol, other.arity)

    def __repr__(self):
        if self.type == InstructionType.APPLY:
            return f"{self.symbol}/{self.arity}"
        return repr(self.value)

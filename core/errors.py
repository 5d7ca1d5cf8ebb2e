"""core/errors.py - 公式解析与求值的异常类型"""


class CalcError(Exception):
    """所有公式错误的基类"""

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.expression = expression


class ParseError(CalcError):
    """结构错误（括号不匹配、表达式过长）"""


class CompileError(CalcError):
    """求值器遇到没有实现的操作符"""


class MalformedProgramError(CalcError):
    """RPN指令序列不完整：栈下溢或求值后栈中剩余多个值"""


class UnboundVariableError(CalcError):
    """表达式引用了自由变量但调用方没有提供变量值"""

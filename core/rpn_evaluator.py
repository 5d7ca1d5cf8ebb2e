"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.token_system import InstructionType, OPERATOR_DEFINITIONS
from core.operators import Operators
from core.errors import CompileError, MalformedProgramError, UnboundVariableError

logger = logging.getLogger(__name__)


def _coerce(value):
    """变量值统一为float或complex"""
    if isinstance(value, complex):
        return complex(value)
    return float(value)


def _to_python(value):
    """numpy标量转为Python内置数值"""
    if isinstance(value, np.generic):
        return value.item()
    return value


class RPNEvaluator:
    """评估RPN指令序列的值"""

    @staticmethod
    def evaluate(compilation, variable=None, strict=True):
        """
        评估RPN指令序列
        Args:
            compilation: RPNCompiler.compile()的结果
            variable: 自由变量的取值，表达式中所有变量名都绑定到这个值
            strict: 是否拒绝不完整的程序（求值后栈中剩余多个值、变量未绑定）
        Returns:
            float / complex，指令序列为空时返回None
        """
        source = compilation.source
        if variable is None:
            if compilation.variables and strict:
                raise UnboundVariableError(
                    f"No value supplied for variable {sorted(compilation.variables)[0]!r}", source)
            bound = float('nan')
        else:
            bound = _coerce(variable)

        stack = []
        for instruction in compilation.instructions:
            if instruction.type == InstructionType.PUSH_NUMBER:
                stack.append(instruction.value)

            elif instruction.type == InstructionType.PUSH_VARIABLE:
                stack.append(bound)

            else:
                info = OPERATOR_DEFINITIONS.get(instruction.symbol)
                op_method = getattr(Operators, info.method, None) if info else None
                if op_method is None:
                    logger.error(f"Unknown operator: {instruction.symbol}")
                    raise CompileError(f"Unknown operator {instruction.symbol!r}", source)

                if len(stack) < instruction.arity:
                    raise MalformedProgramError(
                        f"Insufficient operands for {instruction.symbol}: "
                        f"need {instruction.arity}, have {len(stack)}", source)

                # 按原来的从左到右顺序取出参数
                args = stack[len(stack) - instruction.arity:]
                del stack[len(stack) - instruction.arity:]
                stack.append(op_method(*args))

        # 返回结果处理
        if len(stack) == 0:
            return None
        if len(stack) > 1:
            if strict:
                raise MalformedProgramError(
                    f"Stack has {len(stack)} elements after evaluation, expected 1", source)
            logger.warning(f"Stack has {len(stack)} elements after evaluating {source!r}; using the top one")
        return _to_python(stack[-1])

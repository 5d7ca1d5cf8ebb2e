"""core/compiler.py - 调度场算法：Token序列 → RPN指令序列"""
import logging

from core.token_system import (
    TokenType, Associativity, Instruction, CALC_CONSTANTS,
    precedence, associativity, is_function
)

logger = logging.getLogger(__name__)


class Compilation:
    """编译结果。valid=False表示括号不匹配，instructions可能只生成了一部分"""

    def __init__(self, instructions=None, valid=True, variables=None, source=None, infix=None):
        self.instructions = instructions if instructions is not None else []
        self.valid = valid
        self.variables = variables if variables is not None else set()
        self.source = source
        self.infix = infix

    def __len__(self):
        return len(self.instructions)

    def __repr__(self):
        rpn = ' '.join(repr(instruction) for instruction in self.instructions)
        return f"Compilation([{rpn}], valid={self.valid})"


class RPNCompiler:
    """把Token序列编译为RPN指令"""

    @staticmethod
    def _must_reduce(symbol, head):
        """栈顶操作符head是否要在symbol入栈前先输出"""
        token_prec = precedence(symbol)
        head_prec = precedence(head)
        if associativity(symbol) == Associativity.LEFT:
            return token_prec <= head_prec
        return token_prec < head_prec

    @staticmethod
    def _push_operator(symbol, op_stack, output):
        while op_stack and RPNCompiler._must_reduce(symbol, op_stack[-1]):
            output.append(Instruction.apply(op_stack.pop()))
        op_stack.append(symbol)

    @staticmethod
    def compile(tokens, constants=CALC_CONSTANTS, source=None, infix=None):
        """
        编译Token序列
        Args:
            tokens: tokenize()的输出
            constants: 常数表（标识符 → 数值）
            source: 原始表达式，仅用于日志和错误信息
            infix: 规范化后的表达式
        Returns:
            Compilation
        """
        compilation = Compilation(source=source, infix=infix)
        output = compilation.instructions
        op_stack = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output.append(Instruction.push_number(token.value))

            elif token.type == TokenType.IDENTIFIER:
                if is_function(token.text):
                    RPNCompiler._push_operator(token.text, op_stack, output)
                elif token.text in constants:
                    output.append(Instruction.push_number(constants[token.text]))
                else:
                    # 自由变量，例如 f(x) 中的 x
                    compilation.variables.add(token.text)
                    output.append(Instruction.push_variable(token.text))

            elif token.type == TokenType.LPAREN:
                op_stack.append(token.text)

            elif token.type == TokenType.RPAREN:
                # 弹出直到匹配的左括号
                while True:
                    if not op_stack:
                        compilation.valid = False
                        logger.debug(f"Unmatched ')' in {source!r}")
                        break
                    head = op_stack.pop()
                    if head == '(':
                        break
                    output.append(Instruction.apply(head))

            else:
                RPNCompiler._push_operator(token.text, op_stack, output)

        # 剩余操作符全部输出
        while op_stack:
            head = op_stack.pop()
            if head in ('(', ')'):
                compilation.valid = False
                logger.debug(f"Unmatched '(' in {source!r}")
                continue
            output.append(Instruction.apply(head))

        if len(compilation.variables) > 1:
            logger.warning(
                f"Expression {source!r} references several variables "
                f"{sorted(compilation.variables)}; all of them take the same value")

        return compilation

"""公式计算入口：LaTeX表达式 → 规范化 → Token → RPN → 求值"""
import logging

import numpy as np
import pandas as pd

from config.config import PARSER_CONFIG
from core.token_system import CALC_CONSTANTS
from core.normalizer import normalize
from core.tokenizer import tokenize
from core.compiler import RPNCompiler
from core.rpn_evaluator import RPNEvaluator
from core.errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_NAME = 'x'


def compile_expression(expression, constants=CALC_CONSTANTS):
    """
    编译表达式，不检查合法性
    Args:
        expression: LaTeX风格的表达式
        constants: 常数表
    Returns:
        Compilation
    """
    max_length = PARSER_CONFIG['max_expression_length']
    if len(expression) > max_length:
        raise ParseError(f"Expression longer than {max_length} characters", expression)

    infix = normalize(expression)
    try:
        tokens = tokenize(infix)
    except ParseError as e:
        raise ParseError(f"{e} in {expression!r}", expression) from e
    compilation = RPNCompiler.compile(tokens, constants, source=expression, infix=infix)
    logger.debug(f"Compiled {expression!r}: {compilation}")
    return compilation


class Formula:
    """编译一次、多次求值的公式"""

    def __init__(self, expression, strict=None, constants=CALC_CONSTANTS):
        self.expression = expression
        self.strict = PARSER_CONFIG['strict'] if strict is None else strict
        self.compilation = compile_expression(expression, constants)

        if not self.compilation.valid:
            if self.strict:
                raise ParseError(f"Unbalanced parentheses in {expression!r}", expression)
            logger.warning(f"Unbalanced parentheses in {expression!r}, evaluating anyway")

    @property
    def variables(self):
        return frozenset(self.compilation.variables)

    @property
    def variable_name(self):
        if len(self.compilation.variables) == 1:
            return next(iter(self.compilation.variables))
        return DEFAULT_VARIABLE_NAME

    def evaluate(self, variable=None):
        return RPNEvaluator.evaluate(self.compilation, variable, strict=self.strict)

    def evaluate_many(self, values):
        """
        对一组变量取值逐个求值
        Returns:
            以变量取值为索引、表达式为名字的Series
        """
        values = np.asarray(values).ravel()
        results = [self.evaluate(value) for value in values]
        index = pd.Index(values, name=self.variable_name)
        return pd.Series(results, index=index, name=self.expression)

    def __repr__(self):
        return f"Formula({self.expression!r})"


def evaluate(expression, variable=None, strict=None):
    """
    计算表达式的值
    Args:
        expression: LaTeX风格的表达式，例如 "\\frac{1}{2}x" 或 "e^{i*pi}"
        variable: 自由变量的取值
        strict: None时使用PARSER_CONFIG['strict']
    Returns:
        float / complex；空表达式返回None
    """
    if expression is None or not expression.strip():
        return None
    return Formula(expression, strict=strict).evaluate(variable)


def evaluate_many(expression, values, strict=None):
    return Formula(expression, strict=strict).evaluate_many(values)

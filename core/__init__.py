"""核心模块 - 规范化、Token系统、RPN编译器、求值器和操作符"""
from .token_system import (
    TokenType, Token, Associativity, InstructionType, Instruction,
    OperatorInfo, OPERATOR_DEFINITIONS, FUNCTION_NAMES, CALC_CONSTANTS
)
from .errors import CalcError, ParseError, CompileError, MalformedProgramError, UnboundVariableError
from .normalizer import normalize, REWRITE_RULES
from .tokenizer import tokenize
from .compiler import Compilation, RPNCompiler
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .calculator import Formula, compile_expression, evaluate, evaluate_many

__all__ = [
    'TokenType', 'Token', 'Associativity', 'InstructionType', 'Instruction',
    'OperatorInfo', 'OPERATOR_DEFINITIONS', 'FUNCTION_NAMES', 'CALC_CONSTANTS',
    'CalcError', 'ParseError', 'CompileError', 'MalformedProgramError', 'UnboundVariableError',
    'normalize', 'REWRITE_RULES', 'tokenize', 'Compilation', 'RPNCompiler',
    'RPNEvaluator', 'Operators',
    'Formula', 'compile_expression', 'evaluate', 'evaluate_many'
]

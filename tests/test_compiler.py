import unittest

import numpy as np

from core.token_system import Instruction, Associativity, OPERATOR_DEFINITIONS, FUNCTION_NAMES
from core.tokenizer import tokenize
from core.compiler import RPNCompiler
from core.calculator import compile_expression

num = Instruction.push_number
var = Instruction.push_variable
op = Instruction.apply


class OperatorTableTests(unittest.TestCase):

    def test_precedence_and_associativity(self):
        for name in FUNCTION_NAMES:
            with self.subTest(name=name):
                info = OPERATOR_DEFINITIONS[name]
                self.assertEqual((1, 10, Associativity.RIGHT), (info.arity, info.precedence, info.associativity))
        for symbol, precedence in [('^', 9), ('^+', 9), ('^-', 9), ('*', 8), ('/', 8), ('+', 7), ('-', 7)]:
            with self.subTest(symbol=symbol):
                info = OPERATOR_DEFINITIONS[symbol]
                self.assertEqual((2, precedence, Associativity.LEFT), (info.arity, info.precedence, info.associativity))

    def test_hyperbolic_forms_are_functions(self):
        for name in ['sinh', 'cosh', 'tanh', 'sech', 'csch', 'coth', 'floor', 'ceil', 'sqrt']:
            self.assertIn(name, FUNCTION_NAMES)


class CompilerTests(unittest.TestCase):

    def test_rpn_order(self):
        for expression, expected in [
            ("2+3*4", [num(2.0), num(3.0), num(4.0), op('*'), op('+')]),
            ("(2+3)*4", [num(2.0), num(3.0), op('+'), num(4.0), op('*')]),
            ("2^3^2", [num(2.0), num(3.0), op('^'), num(2.0), op('^')]),
            ("cos pi/2", [num(np.pi), op('cos'), num(2.0), op('/')]),
            ("floor(3.3)/ceil(9.9)", [num(3.3), op('floor'), num(9.9), op('ceil'), op('/')]),
            ("2ceil(9.9)", [num(2.0), num(9.9), op('ceil'), op('*')]),
            ("2^-1", [num(2.0), num(1.0), op('^-')]),
            ("-2", [num(0.0), num(2.0), op('-')]),
            ("2x", [num(2.0), var('x'), op('*')]),
        ]:
            with self.subTest(expression=expression):
                compilation = compile_expression(expression)
                self.assertTrue(compilation.valid)
                self.assertEqual(expected, compilation.instructions)

    def test_constants_and_variables(self):
        compilation = compile_expression("e*pi*i*t")
        self.assertEqual(
            [num(np.e), num(np.pi), op('*'), num(complex(0, 1)), op('*'), var('t'), op('*')],
            compilation.instructions)
        self.assertEqual({'t'}, compilation.variables)

    def test_constant_table_is_explicit(self):
        compilation = RPNCompiler.compile(tokenize("k+e"), constants={'k': 2.0})
        self.assertEqual([num(2.0), var('e'), op('+')], compilation.instructions)
        self.assertEqual({'e'}, compilation.variables)

    def test_unbalanced_parentheses(self):
        for expression in ["2+3)", "(2+3", ")", "((1)", "(2+1))"]:
            with self.subTest(expression=expression):
                self.assertFalse(compile_expression(expression).valid)

    def test_unbalanced_keeps_partial_program(self):
        compilation = compile_expression("(2+3")
        self.assertEqual([num(2.0), num(3.0), op('+')], compilation.instructions)
        compilation = compile_expression("2+3)")
        self.assertEqual([num(2.0), num(3.0), op('+')], compilation.instructions)

    def test_balanced(self):
        for expression in ["((1))", "", "2", "\\left(1\\right)", "{1}"]:
            with self.subTest(expression=expression):
                self.assertTrue(compile_expression(expression).valid)

    def test_empty(self):
        compilation = compile_expression("")
        self.assertEqual([], compilation.instructions)
        self.assertEqual(0, len(compilation))

    def test_several_variable_names_warn(self):
        with self.assertLogs('core.compiler', level='WARNING'):
            compilation = compile_expression("x*y")
        self.assertEqual({'x', 'y'}, compilation.variables)

    def test_instruction_arity(self):
        self.assertEqual(1, op('sin').arity)
        self.assertEqual(2, op('^-').arity)


if __name__ == '__main__':
    unittest.main()

"""core/tokenizer.py - 规范中缀表达式 → Token序列"""
import re

from core.token_system import Token, TokenType
from core.errors import ParseError

# 多字符运算符在前，保证最长匹配
_TOKEN_PATTERN = re.compile(r'\^\+|\^-|\^|\*|/|\+|-|\(|\)|[a-zA-Z0-9.]+')
_NUMBER_PATTERN = re.compile(r'[0-9]+\.?[0-9]*|\.[0-9]+')
_IDENTIFIER_PATTERN = re.compile(r'[a-zA-Z][a-zA-Z0-9]*')


def classify(text):
    """把一个匹配到的片段变成Token"""
    if text == '(':
        return Token(TokenType.LPAREN, text)
    if text == ')':
        return Token(TokenType.RPAREN, text)
    if not text[0].isalnum() and text[0] != '.':
        return Token(TokenType.OPERATOR, text)
    if _NUMBER_PATTERN.fullmatch(text):
        return Token(TokenType.NUMBER, text, value=float(text))
    if _IDENTIFIER_PATTERN.fullmatch(text):
        return Token(TokenType.IDENTIFIER, text)
    raise ParseError(f"Malformed number {text!r}")


def tokenize(text):
    """从左到右扫描；无法匹配的字符（空白、反斜杠等）直接跳过"""
    return [classify(match.group()) for match in _TOKEN_PATTERN.finditer(text)]

"""core/normalizer.py - LaTeX风格输入 → 规范中缀表达式

按固定顺序执行一组纯文本改写规则（str -> str）。后面的规则依赖前面规则
已经统一好的括号和分组，所以顺序不能调换。
"""
import logging
import re

from core.token_system import FUNCTION_NAMES

logger = logging.getLogger(__name__)

OPERATOR_CHARS = '+-*/^'
SIGN_CHARS = '+-'

# 函数名按长度降序，保证sinh优先于sin
_FUNCTION_PATTERN = '|'.join(sorted(FUNCTION_NAMES, key=len, reverse=True))
_FUNCTION_CALL = re.compile(r'(?:%s)\([^()]+\)' % _FUNCTION_PATTERN)
_FRAC = '\\frac'


# ================== 扫描辅助函数 ==================

def _previous_char(text, index):
    """index之前最近的非空白字符的位置，没有时返回None"""
    index -= 1
    while index >= 0 and text[index].isspace():
        index -= 1
    return index if index >= 0 else None


def _next_char(text, index):
    """index之后最近的非空白字符的位置，没有时返回None"""
    index += 1
    while index < len(text) and text[index].isspace():
        index += 1
    return index if index < len(text) else None


def _ends_with_function(text, end):
    prefix = text[:end]
    return any(prefix.endswith(name) for name in FUNCTION_NAMES)


def _opens_signed_literal(text, pos):
    """括号内是否以带符号的字面量开头：+3 -3 +i -i（或已补零的0-3）"""
    if text[pos:pos + 1] == '0' and text[pos + 1:pos + 2] in ('+', '-'):
        pos += 1
    if text[pos:pos + 1] not in ('+', '-'):
        return False
    following = text[pos + 1:pos + 2]
    if following.isdigit():
        return True
    return following == 'i' and not text[pos + 2:pos + 3].isalpha()


def _read_group(text, pos, opener='{', closer='}'):
    """读取pos处的 {...} 或 (...)（允许嵌套），返回(内容, 结束位置)"""
    if text[pos:pos + 1] != opener:
        return None
    depth = 0
    for index in range(pos, len(text)):
        if text[index] == opener:
            depth += 1
        elif text[index] == closer:
            depth -= 1
            if depth == 0:
                return text[pos + 1:index], index + 1
    return None


def _primary_end(text, pos):
    """
    pos处基本操作数的结束位置：(...)、数字、标识符（可带反斜杠）或带括号参数的函数调用
    不是操作数时返回None
    """
    if pos is None:
        return None
    if text[pos] == '(':
        group = _read_group(text, pos, '(', ')')
        return group and group[1]
    start = pos + 1 if text[pos] == '\\' else pos
    end = start
    while end < len(text) and (text[end].isalnum() or text[end] in '._'):
        end += 1
    if end == start:
        return None
    if text[start:end] in FUNCTION_NAMES:
        # 没有括号参数的函数（cos pi）不能单独成组
        argument = _next_char(text, end - 1)
        group = argument is not None and _read_group(text, argument, '(', ')')
        return group[1] if group else None
    return end


def _signed_operand_end(text, pos):
    """pos处（可有连续符号）的操作数连同后面的^指数的结束位置"""
    pos = _next_char(text, pos - 1)
    if pos is None:
        return None
    if text[pos] in SIGN_CHARS:
        return _signed_operand_end(text, pos + 1)
    end = _primary_end(text, pos)
    while end is not None and text[end:end + 1] == '^':
        exponent = end + 1
        if text[exponent:exponent + 1] in ('+', '-'):
            exponent += 1
        exponent_end = _primary_end(text, _next_char(text, exponent - 1))
        if exponent_end is None:
            break
        end = exponent_end
    return end


def _wrap_signed(operand):
    """-+x → (-(+x))，每个符号单独成组"""
    sign, rest = operand[0], operand[1:]
    start = _next_char(rest, -1)
    if rest[start] in SIGN_CHARS:
        rest = rest[:start] + _wrap_signed(rest[start:])
    else:
        rest = group_signed_operands(rest)
    return '(' + sign + rest + ')'


# ================== 改写规则 ==================

def expand_fractions(text):
    """\\frac{A}{B} → (A)/(B)"""
    pieces = []
    pos = 0
    while True:
        start = text.find(_FRAC, pos)
        if start < 0:
            pieces.append(text[pos:])
            break
        numerator = _read_group(text, start + len(_FRAC))
        denominator = numerator and _read_group(text, numerator[1])
        if not denominator:
            pieces.append(text[pos:start + len(_FRAC)])
            pos = start + len(_FRAC)
            continue
        pieces.append(text[pos:start])
        pieces.append('(%s)/(%s)' % (expand_fractions(numerator[0]), expand_fractions(denominator[0])))
        pos = denominator[1]
    return ''.join(pieces)


def unify_groups(text):
    """\\left( 和 { → (；\\right) 和 } → )"""
    for opener in ('\\left(', '{'):
        text = text.replace(opener, '(')
    for closer in ('\\right)', '}'):
        text = text.replace(closer, ')')
    return text


def group_function_calls(text):
    """A sin(x) B → A(sin(x))B，使函数调用相对两侧的隐式乘法成为一个整体"""
    pieces = []
    last = 0
    for match in _FUNCTION_CALL.finditer(text):
        start, end = match.span()
        # \cos(x) 的反斜杠属于函数名
        if text[start - 1:start] == '\\':
            start -= 1
        if start == 0 or end == len(text):
            continue
        if text[start - 1] == '(' or text[end] == ')':
            continue
        pieces.append(text[last:start])
        pieces.append('(' + text[start:end] + ')')
        last = end
    pieces.append(text[last:])
    return ''.join(pieces)


def insert_multiplication_before_groups(text):
    """2(3) → 2*(3)；函数调用、运算符之后以及带符号字面量之前不插入"""
    pieces = []
    for index, char in enumerate(text):
        if char == '(':
            previous = _previous_char(text, index)
            if (previous is not None
                    and text[previous] not in OPERATOR_CHARS + '('
                    and not _ends_with_function(text, previous + 1)
                    and not _opens_signed_literal(text, index + 1)):
                pieces.append('*')
        pieces.append(char)
    return ''.join(pieces)


def insert_multiplication_after_groups(text):
    """)x → )*x"""
    return re.sub(r'\)(\w)', r')*\1', text)


def insert_multiplication_after_digits(text):
    """2x → 2*x，i2 → i*2"""
    text = re.sub(r'([0-9])([A-Za-z])', r'\1*\2', text)
    return re.sub(r'i([0-9])', r'i*\1', text)


def group_signed_operands(text):
    """
    运算符后面带符号的操作数加括号：2*-3 → 2*(-3)，2*-x^2 → 2*(-x^2)，x*+-y → x*(+(-y))
    操作数是数字、标识符、括号组或函数调用，连同后面的^指数
    """
    pieces = []
    index = 0
    while index < len(text):
        if text[index] in SIGN_CHARS:
            previous = _previous_char(text, index)
            end = _signed_operand_end(text, index + 1)
            if previous is not None and text[previous] in '+-*/' and end is not None:
                pieces.append(_wrap_signed(text[index:end]))
                index = end
                continue
        pieces.append(text[index])
        index += 1
    return ''.join(pieces)


def pad_leading_signs(text):
    """
    独立的+/-前补0，保证每个+/-都有两个操作数：-2 → 0-2，(-i) → (0-i)
    后面紧跟另一个符号时同样补0：--x → 0-0-x
    """
    pieces = []
    for index, char in enumerate(text):
        if char in SIGN_CHARS:
            previous = _previous_char(text, index)
            following = _next_char(text, index)
            keeps_sign = previous is not None and (
                text[previous].isalnum() or text[previous] in '.)^')
            starts_operand = following is not None and (
                text[following].isalnum() or text[following] in '.(\\' + SIGN_CHARS)
            if not keeps_sign and starts_operand:
                pieces.append('0')
        pieces.append(char)
    return ''.join(pieces)


REWRITE_RULES = (
    expand_fractions,
    unify_groups,
    group_function_calls,
    insert_multiplication_before_groups,
    insert_multiplication_after_groups,
    insert_multiplication_after_digits,
    group_signed_operands,
    pad_leading_signs,
)


def normalize(expression, rules=REWRITE_RULES):
    """依次应用改写规则，返回规范中缀表达式"""
    infix = expression
    for rule in rules:
        infix = rule(infix)
    logger.debug(f"Normalized {expression!r} -> {infix!r}")
    return infix

from typing import Mapping

from lineinterp.cursor import TokenCursor
from lineinterp.errors import (
    DivisionByZeroError,
    InvalidExpressionError,
    UnbalancedParenthesisError,
    UndefinedVariableError,
)
from lineinterp.state import DEFAULT_WORD_BITS, to_signed_word
from lineinterp.tokenizer import describe_token
from lineinterp.utils import is_identifier, is_integer


def evaluate_expression(
    cursor: TokenCursor, variables: Mapping[str, int], word_bits: int = DEFAULT_WORD_BITS
) -> int:
    """Sum of products of primaries, evaluated while parsing"""
    return _consume_sum(cursor, variables, word_bits)


def _consume_sum(cursor: TokenCursor, variables: Mapping[str, int], word_bits: int) -> int:
    value = _consume_product(cursor, variables, word_bits)
    while True:
        operator = cursor.peek()
        if operator == "+":
            cursor.consume("+")
            value = to_signed_word(value + _consume_product(cursor, variables, word_bits), word_bits)
        elif operator == "-":
            cursor.consume("-")
            value = to_signed_word(value - _consume_product(cursor, variables, word_bits), word_bits)
        else:
            return value


def _consume_product(cursor: TokenCursor, variables: Mapping[str, int], word_bits: int) -> int:
    value = _consume_primary(cursor, variables, word_bits)
    while True:
        operator = cursor.peek()
        if operator == "*":
            cursor.consume("*")
            value = to_signed_word(value * _consume_primary(cursor, variables, word_bits), word_bits)
        elif operator == "/":
            cursor.consume("/")
            divisor_idx = cursor.position
            divisor = _consume_primary(cursor, variables, word_bits)
            if divisor == 0:
                raise DivisionByZeroError(
                    f"{value} / 0",
                    tokens=cursor.tokens,
                    error_token_idx=divisor_idx,
                )
            value = to_signed_word(truncating_div(value, divisor), word_bits)
        else:
            return value


def _consume_primary(cursor: TokenCursor, variables: Mapping[str, int], word_bits: int) -> int:
    token = cursor.peek()
    if is_integer(token):
        cursor.consume(token)
        return parse_integer(token, word_bits, tokens=cursor.tokens, token_idx=cursor.position - 1)
    elif is_identifier(token):
        cursor.consume(token)
        if token not in variables:
            raise UndefinedVariableError(
                f"Variable {token!r} is not defined",
                tokens=cursor.tokens,
                error_token_idx=cursor.position - 1,
            )
        return variables[token]
    elif token == "(":
        open_idx = cursor.position
        cursor.consume("(")
        value = _consume_sum(cursor, variables, word_bits)
        if cursor.peek() != ")":
            raise UnbalancedParenthesisError(
                f"No closing parenthesis for '(' at token {open_idx + 1}, found {describe_token(cursor.peek())}",
                tokens=cursor.tokens,
                error_token_idx=cursor.position,
            )
        cursor.consume(")")
        return value
    else:
        raise InvalidExpressionError(
            f"The given expression: {describe_token(token)} is not valid",
            tokens=cursor.tokens,
            error_token_idx=cursor.position,
        )


def parse_integer(token: str, word_bits: int, tokens: list[str], token_idx: int) -> int:
    limit = 1 << (word_bits - 1)
    # digit count check first, int() refuses very long strings
    digits = token.lstrip("-").lstrip("0")
    value = None
    if len(digits) <= len(str(limit)):
        value = int(token)
    if value is None or not -limit <= value < limit:
        raise InvalidExpressionError(
            f"Integer literal does not fit in {word_bits} bits",
            tokens=tokens,
            error_token_idx=token_idx,
        )
    return value


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero rather than toward -inf"""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient

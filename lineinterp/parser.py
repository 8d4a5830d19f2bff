from dataclasses import dataclass

from lineinterp.cursor import TokenCursor
from lineinterp.errors import ConfigurationError, StatementSyntaxError
from lineinterp.state import DISPLAY_MODES, DisplayMode
from lineinterp.tokenizer import describe_token
from lineinterp.utils import is_identifier


@dataclass
class ConfigStatement:
    mode: DisplayMode


@dataclass
class AssignStatement:
    name: str


@dataclass
class PrintStatement:
    pass


Statement = ConfigStatement | AssignStatement | PrintStatement


def parse_statement(cursor: TokenCursor) -> Statement:
    """Consumes the statement head, leaving the cursor on its expression if it has one"""
    first = cursor.peek()
    if is_identifier(first) and cursor.peek(1) == "=":
        cursor.consume(first)
        name = cursor.peek(-1)
        cursor.consume("=")
        return AssignStatement(name=name)
    elif first == "config":
        cursor.consume("config")
        mode_token = cursor.peek()
        mode = DISPLAY_MODES.get(mode_token)
        if mode is None:
            raise ConfigurationError(
                f"{describe_token(mode_token)} is not a valid configuration; expected: dec, hex or bin",
                tokens=cursor.tokens,
                error_token_idx=cursor.position,
            )
        cursor.consume(mode_token)
        return ConfigStatement(mode=mode)
    elif first == "print":
        cursor.consume("print")
        return PrintStatement()
    else:
        raise StatementSyntaxError(
            f"{describe_token(first)} is not a valid statement; expected: config, <name> = or print",
            tokens=cursor.tokens,
            error_token_idx=cursor.position,
        )


def expect_end(cursor: TokenCursor) -> None:
    if not cursor.at_end():
        raise StatementSyntaxError(
            f"Unexpected {describe_token(cursor.peek())} after end of statement",
            tokens=cursor.tokens,
            error_token_idx=cursor.position,
        )

import io
from typing import Type

import pytest

from lineinterp.cursor import TokenCursor
from lineinterp.errors import (
    ConfigurationError,
    DivisionByZeroError,
    InterpreterError,
    InvalidExpressionError,
    StatementSyntaxError,
    UnbalancedParenthesisError,
    UnboundAssignmentError,
    UndefinedVariableError,
)
from lineinterp.parser import AssignStatement, ConfigStatement, PrintStatement, Statement, parse_statement
from lineinterp.runtime import Interpreter
from lineinterp.state import DisplayMode
from lineinterp.tokenizer import tokenize


@pytest.mark.parametrize(
    "line, expected_statement, expected_position",
    [
        pytest.param("config hex", ConfigStatement(DisplayMode.HEX), 2),
        pytest.param("config dec", ConfigStatement(DisplayMode.DEC), 2),
        pytest.param("config bin", ConfigStatement(DisplayMode.BIN), 2),
        pytest.param("x = 1 + 2", AssignStatement("x"), 2),
        pytest.param("print = 3", AssignStatement("print"), 2),
        pytest.param("config = 3", AssignStatement("config"), 2),
        pytest.param("print x", PrintStatement(), 1),
    ],
)
def test_parse_statement(line: str, expected_statement: Statement, expected_position: int) -> None:
    cursor = TokenCursor(tokenize(line))
    assert parse_statement(cursor) == expected_statement
    assert cursor.position == expected_position


@pytest.mark.parametrize(
    "line, error_type, error_token_idx",
    [
        pytest.param("foo bar baz", StatementSyntaxError, 0),
        pytest.param("1 = 2", StatementSyntaxError, 0),
        pytest.param("= 2", StatementSyntaxError, 0),
        pytest.param("config oct", ConfigurationError, 1),
        pytest.param("config", ConfigurationError, 1),
        pytest.param("config hex bin", StatementSyntaxError, 2),
        pytest.param("print y", UndefinedVariableError, 1),
        pytest.param("x = y + 1", UndefinedVariableError, 2),
        pytest.param("print ( 1 + 2", UnbalancedParenthesisError, 5),
        pytest.param("print ( ( 1 ) ", UnbalancedParenthesisError, 5),
        pytest.param("print 1 + )", InvalidExpressionError, 3),
        pytest.param("print", InvalidExpressionError, 1),
        pytest.param("x =", InvalidExpressionError, 2),
        pytest.param("print (1+2)", InvalidExpressionError, 1),
        pytest.param("print 1 2", StatementSyntaxError, 2),
        pytest.param("print 1 )", StatementSyntaxError, 2),
        pytest.param("print 5 / 0", DivisionByZeroError, 3),
        pytest.param("print 5 / ( 2 - 2 )", DivisionByZeroError, 3),
    ],
)
def test_statement_errors(line: str, error_type: Type[InterpreterError], error_token_idx: int) -> None:
    result = Interpreter(io.StringIO()).execute_line(line)
    assert not result.ok
    assert type(result.error) is error_type
    assert result.error.error_token_idx == error_token_idx
    assert result.error.tokens == tokenize(line)


def test_assignment_without_target_is_rejected() -> None:
    interpreter = Interpreter(io.StringIO())
    with pytest.raises(UnboundAssignmentError):
        interpreter._execute(AssignStatement(name=""), TokenCursor(["1"]))
    assert interpreter.variables == {}


def test_failed_assignment_leaves_state_untouched() -> None:
    interpreter = Interpreter(io.StringIO())
    interpreter.execute_line("x = 1")
    assert not interpreter.execute_line("x = 2 / 0").ok
    assert not interpreter.execute_line("x = 3 3").ok
    assert interpreter.variables == {"x": 1}


def test_failed_config_keeps_mode() -> None:
    interpreter = Interpreter(io.StringIO())
    interpreter.execute_line("config hex")
    interpreter.execute_line("config oct")
    interpreter.execute_line("config dec bin")
    assert interpreter.mode is DisplayMode.HEX


def test_assignment_target_does_not_leak_into_next_statement() -> None:
    interpreter = Interpreter(io.StringIO())
    assert not interpreter.execute_line("x = ( 1").ok
    assert interpreter.execute_line("print 7").output == "7"
    assert interpreter.variables == {}


def test_error_message_points_at_offending_token() -> None:
    result = Interpreter(io.StringIO()).execute_line("print y")
    assert str(result.error) == "\n".join(
        [
            "Undefined variable error: Variable 'y' is not defined",
            "print y",
            "      ^",
        ]
    )


def test_error_message_at_first_token() -> None:
    result = Interpreter(io.StringIO()).execute_line("foo bar baz")
    assert str(result.error).splitlines() == [
        "Syntax error: 'foo' is not a valid statement; expected: config, <name> = or print",
        "foo bar baz",
        "^",
    ]

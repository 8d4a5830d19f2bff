import logging
import sys
from dataclasses import dataclass
from os import PathLike
from typing import Callable, Iterable, Iterator, Mapping, Optional, TextIO, Union

from lineinterp.cursor import TokenCursor
from lineinterp.errors import InterpreterError, SourceError, UnboundAssignmentError
from lineinterp.evaluator import evaluate_expression
from lineinterp.parser import AssignStatement, ConfigStatement, PrintStatement, Statement, expect_end, parse_statement
from lineinterp.state import DEFAULT_WORD_BITS, DisplayMode, InterpreterState, format_value
from lineinterp.tokenizer import tokenize

logger = logging.getLogger(__name__)

BAD_INPUT_NOTICE = "bad input, try again"
INTERACTIVE_BANNER = "type code for interpreter; type EOF to stop"
MAX_CONSECUTIVE_READ_FAILURES = 5

SourceLine = Union[str, bytes]


@dataclass
class LineResult:
    output: Optional[str] = None
    error: Optional[InterpreterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Interpreter:
    def __init__(self, out: Optional[TextIO] = None, word_bits: int = DEFAULT_WORD_BITS) -> None:
        self.out = out if out is not None else sys.stdout
        self.word_bits = word_bits
        self.state = InterpreterState()

    @property
    def mode(self) -> DisplayMode:
        return self.state.mode

    @property
    def variables(self) -> Mapping[str, int]:
        return dict(self.state.variables)

    def clear(self) -> None:
        self.state.clear()

    def execute_line(self, line: str) -> LineResult:
        tokens = tokenize(line)
        if not tokens:
            return LineResult()
        cursor = TokenCursor(tokens)
        try:
            statement = parse_statement(cursor)
            output = self._execute(statement, cursor)
        except InterpreterError as e:
            logger.debug("Statement %r failed: %s", line, e.errmsg)
            return LineResult(error=e)
        return LineResult(output=output)

    def _execute(self, statement: Statement, cursor: TokenCursor) -> Optional[str]:
        if isinstance(statement, ConfigStatement):
            expect_end(cursor)
            self.state.set_mode(statement.mode)
            return None
        elif isinstance(statement, AssignStatement):
            if not statement.name:
                raise UnboundAssignmentError("Variable name is undefined", tokens=cursor.tokens)
            value = evaluate_expression(cursor, self.state.variables, self.word_bits)
            expect_end(cursor)
            self.state.assign(statement.name, value)
            return None
        elif isinstance(statement, PrintStatement):
            value = evaluate_expression(cursor, self.state.variables, self.word_bits)
            expect_end(cursor)
            return format_value(value, self.state.mode, self.word_bits)
        else:
            raise RuntimeError(f"Unexpected statement type: {statement}")

    def run_line(self, line: str) -> LineResult:
        result = self.execute_line(line)
        if result.output is not None:
            self._emit(result.output)
        elif result.error is not None:
            self._emit(str(result.error))
        return result

    def run_lines(self, lines: Iterable[Optional[str]]) -> int:
        """`None` stands for a line that failed to read. Returns the failure count"""
        failures = 0
        for line in lines:
            if line is None:
                self._emit(BAD_INPUT_NOTICE)
                failures += 1
                continue
            if not self.run_line(line).ok:
                failures += 1
        return failures

    def run_stream(self, stream: Iterable[SourceLine]) -> int:
        return self.run_lines(decode_lines(stream))

    def run_file(self, path: Union[str, PathLike]) -> int:
        try:
            source = open(path, "rb")
        except OSError as e:
            raise SourceError(path=str(path), reason=e.strerror or str(e)) from e
        with source:
            logger.debug("Running %s", path)
            try:
                return self.run_stream(source)
            except OSError as e:
                raise SourceError(path=str(path), reason=e.strerror or str(e)) from e

    def run_interactive(self, read_line: Callable[[str], str] = input, prompt: str = "> ") -> int:
        self._emit(INTERACTIVE_BANNER)
        return self.run_lines(_prompted_lines(read_line, prompt))

    def _emit(self, text: str) -> None:
        self.out.write(text + "\n")
        self.out.flush()


def decode_lines(stream: Iterable[SourceLine]) -> Iterator[Optional[str]]:
    """Yields text lines, or None for a line that is not valid UTF-8"""
    for raw in stream:
        if isinstance(raw, bytes):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("Undecodable input line: %r", raw)
                yield None
        else:
            yield raw


def _prompted_lines(read_line: Callable[[str], str], prompt: str) -> Iterator[Optional[str]]:
    failures = 0
    while True:
        try:
            line = read_line(prompt)
        except (UnicodeDecodeError, OSError) as e:
            failures += 1
            if failures >= MAX_CONSECUTIVE_READ_FAILURES:
                logger.error("Giving up on interactive input after %d failed reads: %s", failures, e)
                return
            logger.warning("Failed to read interactive input: %s", e)
            yield None
            continue
        except (EOFError, KeyboardInterrupt):
            return
        failures = 0
        yield line

from dataclasses import dataclass, field

from lineinterp.tokenizer import untokenize


@dataclass
class InterpreterError(Exception):
    errmsg: str
    tokens: list[str] = field(default_factory=list)
    error_token_idx: int = 0

    kind = "Interpreter"

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens))
        if parsed_tokens:
            filler_whitespace += " "
        return "\n".join([f"{self.kind} error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


class StatementSyntaxError(InterpreterError):
    kind = "Syntax"


class ConfigurationError(InterpreterError):
    kind = "Configuration"


class UndefinedVariableError(InterpreterError):
    kind = "Undefined variable"


class UnboundAssignmentError(InterpreterError):
    kind = "Unbound assignment"


class UnbalancedParenthesisError(InterpreterError):
    kind = "Unbalanced parenthesis"


class InvalidExpressionError(InterpreterError):
    kind = "Invalid expression"


class DivisionByZeroError(InterpreterError):
    kind = "Division by zero"


@dataclass
class SourceError(Exception):
    """Input source could not be opened or read; ends the whole run"""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"[Source error] unable to open {self.path!r}: {self.reason}"

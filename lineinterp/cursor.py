from lineinterp.errors import StatementSyntaxError
from lineinterp.tokenizer import END_OF_TEXT, describe_token


class TokenCursor:
    def __init__(self, tokens: list[str]) -> None:
        self.tokens = tokens
        self.position = 0

    def peek(self, offset: int = 0) -> str:
        idx = self.position + offset
        if idx < 0:
            raise IndexError(f"Offset {offset} looks before the first token (position {self.position})")
        if idx >= len(self.tokens):
            return END_OF_TEXT
        return self.tokens[idx]

    def consume(self, expected: str) -> None:
        current = self.peek()
        if current != expected:
            raise StatementSyntaxError(
                f"Expected {expected!r}, found {describe_token(current)}",
                tokens=self.tokens,
                error_token_idx=self.position,
            )
        self.position += 1

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

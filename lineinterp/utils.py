import enum
import re

_INTEGER_RE = re.compile(r"-?[0-9]+")
_IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*")


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def is_integer(token: str) -> bool:
    return _INTEGER_RE.fullmatch(token) is not None


def is_identifier(token: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(token) is not None

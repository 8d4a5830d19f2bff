import io
import random

from lineinterp.runtime import Interpreter
from lineinterp.utils import is_integer


class TruncInt(int):
    """int whose "/" truncates toward zero, as the interpreter's does"""

    def __add__(self, other: int) -> "TruncInt":
        return TruncInt(int(self) + int(other))

    def __sub__(self, other: int) -> "TruncInt":
        return TruncInt(int(self) - int(other))

    def __mul__(self, other: int) -> "TruncInt":
        return TruncInt(int(self) * int(other))

    def __truediv__(self, other: int) -> "TruncInt":
        if other == 0:
            raise ZeroDivisionError("division by zero")
        q = abs(int(self)) // abs(int(other))
        return TruncInt(q if (self < 0) == (other < 0) else -q)


def eval_py(tokens: list[str]) -> int | str:
    code = " ".join(f"TruncInt({t})" if is_integer(t) else t for t in tokens)
    try:
        return int(eval(code, {"TruncInt": TruncInt}))
    except Exception as e:
        return str(e)


def eval_my(tokens: list[str]) -> int | str:
    result = Interpreter(io.StringIO()).execute_line("print " + " ".join(tokens))
    if result.error is not None:
        return str(result.error)
    assert result.output is not None
    return int(result.output)


def has_unary_sign(tokens: list[str]) -> bool:
    prev = "("
    for t in tokens:
        if t in ("+", "-") and prev in ("(", "+", "-", "*", "/"):
            return True
        prev = t
    return False


def generate(length: int) -> list[str]:
    alphabet = ["+", "-", "*", "/", "(", ")", "0", "1", "7", "-2", "13", "-40"]
    return random.choices(alphabet, k=length)


if __name__ == "__main__":
    while True:
        tokens = generate(random.randint(1, 10))
        if has_unary_sign(tokens):
            continue  # python accepts unary +/-, the interpreter does not

        res_py = eval_py(tokens)
        res_my = eval_my(tokens)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        print(f"{' '.join(tokens)!r}\npy: {res_py}\nmy: {res_my}\n\n")

# Splitting never yields an empty fragment, so "" cannot collide with a token
END_OF_TEXT = ""


def tokenize(line: str) -> list[str]:
    return line.split()


def untokenize(tokens: list[str]) -> str:
    return " ".join(tokens)


def describe_token(token: str) -> str:
    if token == END_OF_TEXT:
        return "end of statement"
    return repr(token)

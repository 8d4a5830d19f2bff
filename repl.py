import argparse
import logging
import sys

from lineinterp.errors import SourceError
from lineinterp.runtime import Interpreter


def main(argv: list[str]) -> int:
    arg_parser = argparse.ArgumentParser(description="Line-by-line integer interpreter")
    arg_parser.add_argument("files", nargs="*", help="source files to run before the interactive session")
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    interpreter = Interpreter(sys.stdout)
    for path in args.files:
        try:
            interpreter.run_file(path)
        except SourceError as e:
            print(e, file=sys.stderr)
            return 1

    if not args.files or sys.stdin.isatty():
        interpreter.clear()  # the session starts from scratch, not from the files' state
        interpreter.run_interactive()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

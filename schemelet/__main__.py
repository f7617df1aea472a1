"""Run schemelet source files in one shared interpreter.

    python -m schemelet [-q] FILE...

Each file's last value is printed unless -q is given. There is no
interactive mode.
"""

import argparse
import sys

from schemelet.interpreter import Interpreter


def main(argv=None):
    parser = argparse.ArgumentParser(prog="schemelet")
    parser.add_argument("files", nargs="+", help="source files to run, in order")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the result of each file")
    args = parser.parse_args(argv)

    interp = Interpreter()
    for path in args.files:
        try:
            result = interp.run_file(path)
        except OSError as e:
            print(f"{path}: {e.strerror}", file=sys.stderr)
            return 1
        if not args.quiet and result is not None:
            print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

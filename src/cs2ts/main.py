"""cs2ts — translate C# syntax trees to TypeScript.

Usage: cs2ts <tree.json | -> [-o output.ts] [--newline lf|crlf] [--emit-ast]
"""

import sys
import os
import argparse
import logging
from pprint import pformat

from .codegen import CodeGen, CodeGenError
from .loader import TreeLoadError, load_tree_file, load_tree_text

logger = logging.getLogger("cs2ts")

_NEWLINES = {"lf": "\n", "crlf": "\r\n"}


def _default_output_path(input_path: str) -> str:
    stem, _ = os.path.splitext(input_path)
    return stem + ".ts"


def main(argv: list[str] | None = None):
    argparser = argparse.ArgumentParser(description="C# syntax tree to TypeScript translator")
    argparser.add_argument("input", help="Input syntax tree as JSON ('-' for stdin)")
    argparser.add_argument("-o", "--output",
                           help="Output .ts file (default: <input>.ts, stdout for stdin)")
    argparser.add_argument("--newline", choices=sorted(_NEWLINES), default="lf",
                           help="Line terminator for the generated file")
    argparser.add_argument("--emit-ast", action="store_true", help="Print the loaded tree")
    argparser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = argparser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        stream=sys.stderr)

    # Load the tree
    try:
        if args.input == "-":
            tree = load_tree_text(sys.stdin.read())
        else:
            tree = load_tree_file(args.input)
    except FileNotFoundError:
        print(f"error: file '{args.input}' not found", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"error: cannot read '{args.input}': {e.strerror or e}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        print(f"error: '{args.input}' is not valid UTF-8 (byte {e.start})", file=sys.stderr)
        sys.exit(1)
    except TreeLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.emit_ast:
        print(pformat(tree))
        return

    # Code generation
    gen = CodeGen()
    try:
        gen.generate(tree)
    except CodeGenError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    newline = _NEWLINES[args.newline]
    output = gen.emitter.output(newline) + newline

    output_path = args.output
    if output_path is None and args.input != "-":
        output_path = _default_output_path(args.input)

    if output_path is None or output_path == "-":
        sys.stdout.write(output)
    else:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(output)
        logger.info("wrote %d lines to %s", len(gen.emitter), output_path)


if __name__ == "__main__":
    main()

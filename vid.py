"""
vidlang Compiler

This is the main entry point for the vidlang compiler.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar,
   binding `let` values as it goes.
4. The Translator walks the AST, emitting one operation per media command.
5. Diagnostics are printed, followed by the command line for each operation.

Nothing is executed; pipe the output to a shell to run it.
"""
import argparse
import logging
import os
import sys

from vidlang.commands import format_command, render_commands
from vidlang.compiler import compile_source


def parse_args(argv: list[str]) -> argparse.Namespace:
    """
    Parse command-line arguments.
    """
    parser = argparse.ArgumentParser(
        prog="vid",
        description="Compile a vidlang script into media tool command lines",
    )
    parser.add_argument("script", help="path to a vidlang source file")
    parser.add_argument("--operations", action="store_true",
        help="print operation records instead of command lines")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="log scanner, parser and translator progress")
    return parser.parse_args(argv)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_script(script_name: str, show_operations: bool = False) -> int:
    """
    Compile a vidlang script and print its diagnostics and commands.

    Returns:
        int: 0 when the script compiled cleanly, 1 otherwise.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    result = compile_source(code, script_name)

    if os.environ.get("VIDDEBUG"):
        debug_print_tokens_ast(result.tokens, result.program)

    for diagnostic in result.diagnostics:
        print(diagnostic, file=sys.stderr)

    if show_operations:
        for op in result.operations:
            print(op)
    else:
        for argv in render_commands(result.operations):
            print(format_command(argv))

    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)
    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    if os.environ.get("VIDDEBUG"):
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s - %(message)s")
    return run_script(args.script, args.operations)


if __name__ == "__main__":
    sys.exit(main())

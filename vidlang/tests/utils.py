"""
Utility functions shared across vidlang tests.
"""
from pathlib import Path
import sys

from vidlang.compiler import compile_source
from vidlang.lexer import tokenize
from vidlang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the program node and parser diagnostics.
    """
    tokens, _ = tokenize(source)
    parser = Parser(tokens, "<test>")
    program = parser.parse()
    return program, parser.errors


def compile_ok(source: str):
    """
    Compile source code that must produce no diagnostics; return its operations.
    """
    result = compile_source(source, "<test>")
    assert result.diagnostics == [], [str(d) for d in result.diagnostics]
    return result.operations


def expr_tokens(source: str):
    """
    Tokenize a lone expression, dropping the trailing EOF token.
    """
    tokens, errors = tokenize(source)
    assert errors == []
    return tokens[:-1]


def kinds(diagnostics) -> list:
    """
    Return the kinds of a list of diagnostics.
    """
    return [d.kind for d in diagnostics]

"""
Expression parsing utilities for vidlang.

These functions operate on a `vidlang.parser.parser.Parser` instance.
Expressions are returned as flat token lists rather than trees: operators
are left in place between their operands and parentheses are dropped, their
contents spliced into the enclosing chain. Evaluation folds the list left to
right with no precedence between ``+`` and ``*``.

A return value of ``None`` means the expression was malformed; a diagnostic
has been recorded and the parser has already synchronized.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from vidlang.diagnostics import DiagnosticKind
from vidlang.lexer import Token, TokenType

if TYPE_CHECKING:
    from vidlang.parser import Parser


ATOM_TYPES = (TokenType.NUMBER, TokenType.STRING, TokenType.TIME, TokenType.ID)
OPERATOR_TYPES = (TokenType.PLUS, TokenType.MUL)


def parse_atom(parser: 'Parser') -> Optional[list[Token]]:
    """
    Parse an atom.

    Syntax:
        ( <expression> ) | <number> | <string> | <time> | <identifier>

    Args:
        parser: The parser instance.

    Returns:
        list[Token] | None: the atom's tokens, or None on error.
    """
    tok = parser.curr_token
    if tok.type == TokenType.LPAREN:
        parser.advance()
        inner = parser.expr()
        if inner is None:
            return None
        if not parser.expect(TokenType.RPAREN):
            return None
        return inner

    if tok.type in ATOM_TYPES:
        parser.advance()
        return [tok]

    parser.error(
        DiagnosticKind.INVALID_EXPRESSION,
        "Expected number, string, time, or identifier",
    )
    parser.synchronize()
    return None


def parse_expr(parser: 'Parser') -> Optional[list[Token]]:
    """
    Parse a chain of atoms joined by ``+`` or ``*``.

    Syntax:
        <atom> ( ( + | * ) <atom> )*

    Args:
        parser: The parser instance.

    Returns:
        list[Token] | None: the flattened expression, or None on error.
    """
    expr = parser.atom()
    if expr is None:
        return None
    while parser.curr_token.type in OPERATOR_TYPES:
        expr.append(parser.advance())
        operand = parser.atom()
        if operand is None:
            return None
        expr.extend(operand)
    return expr

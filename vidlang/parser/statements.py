"""Statement parsing utilities for vidlang.

These functions operate on a `vidlang.parser.parser.Parser` instance and
handle the statement forms of the language: bindings, conditionals and the
four media commands.

Each function returns a node from `vidlang.nodes`. On any failure inside the
production it returns an :class:`~vidlang.nodes.Error` node instead, after
the parser has recorded a diagnostic and synchronized, so one bad statement
never affects the next.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from vidlang.diagnostics import DiagnosticKind
from vidlang.evaluator import evaluate
from vidlang.lexer import TokenType
from vidlang.nodes import Audio, Concat, Error, Frame, If, Let, Play, Statement

if TYPE_CHECKING:
    from vidlang.parser import Parser


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement.

    Syntax:
        <let> | <if> | <command>

    Args:
        parser: The parser instance.

    Returns:
        Statement: the parsed node, or an Error node.
    """
    tok = parser.curr_token
    if tok.type == TokenType.LET:
        return parser.parse_let()
    elif tok.type == TokenType.IF:
        return parser.parse_if()
    elif tok.type == TokenType.KEYWORD:
        return parser.parse_command()
    elif tok.type in (TokenType.ID, TokenType.PRINT):
        parser.advance()
        parser.error(DiagnosticKind.UNKNOWN_COMMAND, f"Unknown command: {tok.value}", tok)
        parser.synchronize()
        return Error(tok.line, tok.column)
    parser.error(DiagnosticKind.INVALID_STATEMENT, "Expected let, if, or command")
    parser.synchronize()
    return Error(tok.line, tok.column)


def parse_let(parser: 'Parser') -> Statement:
    """
    Parse a 'let' binding and bind its value.

    The right-hand side is evaluated immediately; the name is only bound when
    both parsing and evaluation succeed.

    Syntax:
        let <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        Statement: a Let node, or an Error node.
    """
    tok = parser.advance()
    name_tok = parser.curr_token
    if not parser.expect(TokenType.ID):
        return Error(tok.line, tok.column)
    if not parser.expect(TokenType.ASSIGN):
        return Error(tok.line, tok.column)
    expr = parser.expr()
    if expr is None:
        return Error(tok.line, tok.column)
    if not parser.expect(TokenType.SEMICOLON):
        return Error(tok.line, tok.column)

    result = evaluate(expr, parser.env)
    if not result.ok:
        parser.report(result.error)
        return Error(tok.line, tok.column)
    parser.env.define(name_tok.value, result.value)
    return Let(name_tok.value, expr, result.value, tok.line, tok.column)


def parse_if(parser: 'Parser') -> Statement:
    """
    Parse a conditional statement guarding exactly one statement.

    Syntax:
        if <expression> == <expression> then <statement>

    Args:
        parser: The parser instance.

    Returns:
        Statement: an If node, or an Error node.
    """
    tok = parser.advance()
    left = parser.expr()
    if left is None:
        return Error(tok.line, tok.column)
    if not parser.expect(TokenType.EQ):
        return Error(tok.line, tok.column)
    right = parser.expr()
    if right is None:
        return Error(tok.line, tok.column)
    if not parser.expect(TokenType.THEN):
        return Error(tok.line, tok.column)
    body = parser.statement()
    if isinstance(body, Error):
        return Error(tok.line, tok.column)
    return If(left, right, body, tok.line, tok.column)


def _parse_destination(parser: 'Parser') -> Optional[str]:
    """
    Parse the ``to <string> ;`` tail shared by the output-producing commands.
    """
    if not parser.expect(TokenType.TO):
        return None
    dest_tok = parser.curr_token
    if not parser.expect(TokenType.STRING):
        return None
    if not parser.expect(TokenType.SEMICOLON):
        return None
    return dest_tok.value


def _parse_args(parser: 'Parser', count: int) -> Optional[list]:
    """Parse `count` argument expressions, or return None after an error."""
    args = []
    for _ in range(count):
        expr = parser.expr()
        if expr is None:
            return None
        args.append(expr)
    return args


def parse_frame(parser: 'Parser') -> Statement:
    """
    Parse a frame extraction.

    Syntax:
        frame <source> <frame-number> to <string> ;
    """
    tok = parser.advance()
    args = _parse_args(parser, 2)
    if args is None:
        return Error(tok.line, tok.column)
    dest = _parse_destination(parser)
    if dest is None:
        return Error(tok.line, tok.column)
    return Frame(args[0], args[1], dest, tok.line, tok.column)


def parse_concat(parser: 'Parser') -> Statement:
    """
    Parse a two-clip concatenation.

    Syntax:
        concat <first> <second> to <string> ;
    """
    tok = parser.advance()
    args = _parse_args(parser, 2)
    if args is None:
        return Error(tok.line, tok.column)
    dest = _parse_destination(parser)
    if dest is None:
        return Error(tok.line, tok.column)
    return Concat(args[0], args[1], dest, tok.line, tok.column)


def parse_audio(parser: 'Parser') -> Statement:
    """
    Parse an audio extraction.

    Syntax:
        audio <source> <start> <end> to <string> ;
    """
    tok = parser.advance()
    args = _parse_args(parser, 3)
    if args is None:
        return Error(tok.line, tok.column)
    dest = _parse_destination(parser)
    if dest is None:
        return Error(tok.line, tok.column)
    return Audio(args[0], args[1], args[2], dest, tok.line, tok.column)


def parse_play(parser: 'Parser') -> Statement:
    """
    Parse playback of a whole file or of a range.

    The two forms are told apart by whether a semicolon directly follows the
    source expression.

    Syntax:
        play <source> ;
        play <source> <start> <end> ;
    """
    tok = parser.advance()
    source = parser.expr()
    if source is None:
        return Error(tok.line, tok.column)
    if parser.check(TokenType.SEMICOLON):
        parser.advance()
        return Play(source, None, None, tok.line, tok.column)
    args = _parse_args(parser, 2)
    if args is None:
        return Error(tok.line, tok.column)
    if not parser.expect(TokenType.SEMICOLON):
        return Error(tok.line, tok.column)
    return Play(source, args[0], args[1], tok.line, tok.column)


COMMANDS = {
    "frame": parse_frame,
    "concat": parse_concat,
    "audio": parse_audio,
    "play": parse_play,
}


def parse_command(parser: 'Parser') -> Statement:
    """
    Dispatch on the command word.

    Args:
        parser: The parser instance.

    Returns:
        Statement: the command node, or an Error node.
    """
    tok = parser.curr_token
    handler = COMMANDS.get(tok.value)
    if handler is None:
        parser.advance()
        parser.error(DiagnosticKind.UNKNOWN_COMMAND, f"Unknown command: {tok.value}", tok)
        parser.synchronize()
        return Error(tok.line, tok.column)
    return handler(parser)

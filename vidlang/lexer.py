"""Lexer for vidlang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and 1-based line and column.

Tokens cover literals (integers, strings, times), keywords (``let``, ``if``,
``then``, ``to``, ``print`` and the command words ``frame``, ``concat``,
``audio``, ``play``), operators and delimiters. Line comments beginning with
``#`` and block comments enclosed within ``## … ##`` are skipped, with line
bookkeeping kept exact across multi-line comments and strings.

The lexer never raises. Problems are collected as lexical diagnostics and the
offending text produces no token, so the token list always ends with exactly
one ``EOF`` token.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
import re

from dataclasses import dataclass
from enum import Enum

from vidlang.diagnostics import Diagnostic, DiagnosticKind
from vidlang.values import TimePosition


logger = logging.getLogger(__name__)


class TokenType(str, Enum):
    """
    Enumeration of token types.
    """
    ID = "ID"
    KEYWORD = "KEYWORD"
    LET = "LET"
    IF = "IF"
    THEN = "THEN"
    TO = "TO"
    PRINT = "PRINT"
    NUMBER = "NUMBER"
    STRING = "STRING"
    TIME = "TIME"
    ASSIGN = "ASSIGN"
    EQ = "EQ"
    PLUS = "PLUS"
    MUL = "MUL"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    SEMICOLON = "SEMICOLON"
    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, value and source position.
    """
    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


COMMAND_WORDS = ("frame", "concat", "audio", "play")

WORD_TYPES: dict[str, TokenType] = {
    "let": TokenType.LET,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "to": TokenType.TO,
    "print": TokenType.PRINT,
    **{word: TokenType.KEYWORD for word in COMMAND_WORDS},
}

_DISPLAY_NAMES: dict[TokenType, str] = {
    TokenType.ID: "identifier",
    TokenType.KEYWORD: "command",
    TokenType.LET: "'let'",
    TokenType.IF: "'if'",
    TokenType.THEN: "'then'",
    TokenType.TO: "'to'",
    TokenType.PRINT: "'print'",
    TokenType.NUMBER: "number",
    TokenType.STRING: "string",
    TokenType.TIME: "time",
    TokenType.ASSIGN: "'='",
    TokenType.EQ: "'=='",
    TokenType.PLUS: "'+'",
    TokenType.MUL: "'*'",
    TokenType.LPAREN: "'('",
    TokenType.RPAREN: "')'",
    TokenType.SEMICOLON: "';'",
    TokenType.EOF: "end of program",
}


def describe(token_type: TokenType) -> str:
    """
    Return the display name of a token type for use in messages.
    """
    return _DISPLAY_NAMES[token_type]


token_specification: list[tuple[str, str]] = [
    # Layout
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t\r\f\v]+'),

    # Comments
    ('BLOCK_COMMENT', r'##[\s\S]*?##'),
    ('OPEN_COMMENT',  r'##[\s\S]*'),
    ('COMMENT',       r'#[^\n]*'),

    # Words and literals
    ('WORD',          r'[A-Za-z][A-Za-z0-9]*'),
    ('STRING',        r'"[^"]*"'),
    ('OPEN_STRING',   r'"[^"]*'),
    ('NUMBER',        r'[0-9]+'),

    # Operators and delimiters
    ('EQ',            r'=='),
    ('ASSIGN',        r'='),
    ('PLUS',          r'\+'),
    ('MUL',           r'\*'),
    ('LPAREN',        r'\('),
    ('RPAREN',        r'\)'),
    ('SEMICOLON',     r';'),

    # Miscellaneous
    ('MISMATCH',      r'.'),
]

tok_regex = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


def tokenize(code: str) -> tuple[list[Token], list[Diagnostic]]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances ending with one ``EOF`` token.
        list[Diagnostic]: Lexical diagnostics in order of discovery.
    """
    logger.info("Start scanning")
    tokens: list[Token] = []
    errors: list[Diagnostic] = []
    line_num = 1
    line_start = 0

    def error(kind: DiagnosticKind, message: str, line: int, column: int) -> None:
        errors.append(Diagnostic(line, column, kind, message))

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        start_line = line_num
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue

        newlines = value.count('\n')
        if newlines:
            line_num += newlines
            line_start = match_obj.start() + value.rfind('\n') + 1

        if kind in ('SKIP', 'COMMENT', 'BLOCK_COMMENT'):
            continue
        if kind == 'OPEN_COMMENT':
            error(
                DiagnosticKind.UNTERMINATED_COMMENT,
                "Unterminated multi-line comment",
                line_num,
                len(code) - line_start + 1,
            )
            continue
        if kind == 'OPEN_STRING':
            error(DiagnosticKind.UNCLOSED_STRING, "Unclosed string literal", start_line, column)
            continue
        if kind == 'MISMATCH':
            error(
                DiagnosticKind.INVALID_CHARACTER,
                f"Unexpected character: {value}",
                start_line,
                column,
            )
            continue

        if kind == 'STRING':
            body = value[1:-1]
            if ':' in body:
                try:
                    TimePosition.parse(body)
                except ValueError as e:
                    error(
                        DiagnosticKind.INVALID_TIME,
                        str(e),
                        start_line,
                        column,
                    )
                    continue
                token = Token(TokenType.TIME, body, start_line, column)
            elif not body:
                error(DiagnosticKind.EMPTY_STRING, "Empty string literal", start_line, column)
                continue
            else:
                token = Token(TokenType.STRING, body, start_line, column)
        elif kind == 'WORD':
            token = Token(WORD_TYPES.get(value, TokenType.ID), value, start_line, column)
        else:
            token = Token(TokenType(kind), value, start_line, column)

        logger.debug("%s [ %s ] found at (%d:%d)", token.type.value, token.value, token.line, token.column)
        tokens.append(token)

    tokens.append(Token(TokenType.EOF, "", line_num, len(code) - line_start + 1))
    logger.info("Completed with %d errors", len(errors))
    return tokens, errors


__all__ = ["Token", "TokenType", "describe", "tokenize"]

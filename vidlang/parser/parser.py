"""
Main parser entry point for vidlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`vidlang.parser.expressions` and `vidlang.parser.statements`.

Errors never escape a statement. A failed `expect` records an
``UnexpectedToken`` diagnostic and runs panic-mode recovery
(:meth:`Parser.synchronize`), discarding tokens up to the next statement
boundary so the rest of the program still parses.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
from typing import Optional

from vidlang.diagnostics import Diagnostic, DiagnosticKind
from vidlang.environment import Environment
from vidlang.exceptions import EmptyTokenStreamException
from vidlang.lexer import Token, TokenType, describe
from vidlang.nodes import Program

from . import expressions as _expr
from . import statements as _stmt


logger = logging.getLogger(__name__)

# Tokens that may begin a statement; recovery stops in front of them.
STATEMENT_STARTS = (TokenType.LET, TokenType.IF, TokenType.KEYWORD)


class Parser:
    """vidlang parser."""

    def __init__(self, tokens: list[Token], file: str = "<script>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances.
            file (str): The name of the script.

        Raises:
            EmptyTokenStreamException: If no tokens were supplied.
        """
        if not tokens:
            raise EmptyTokenStreamException(file)
        self.tokens = list(tokens)
        if self.tokens[-1].type != TokenType.EOF:
            last = self.tokens[-1]
            self.tokens.append(Token(TokenType.EOF, "", last.line, last.column + len(last.value)))
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file
        self.env = Environment()
        self.errors: list[Diagnostic] = []

    def check(self, token_type: TokenType) -> bool:
        """
        Return True if the current token has the given type, without consuming it.
        """
        return self.curr_token.type == token_type

    def advance(self) -> Token:
        """
        Consume the current token and return it. The EOF token is never consumed.
        """
        tok = self.curr_token
        if self.position < len(self.tokens) - 1:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def error(self, kind: DiagnosticKind, message: str, tok: Optional[Token] = None) -> None:
        """
        Record a diagnostic at the given token (the current token by default).
        """
        tok = tok if tok is not None else self.curr_token
        self.report(Diagnostic(tok.line, tok.column, kind, message))

    def report(self, diagnostic: Diagnostic) -> None:
        """
        Record an already built diagnostic.
        """
        logger.debug("%s", diagnostic)
        self.errors.append(diagnostic)

    def expect(self, token_type: TokenType) -> bool:
        """
        Consume the current token if it matches the expected type.

        On a mismatch an ``UnexpectedToken`` diagnostic is recorded and the
        parser synchronizes to the next statement boundary.

        Parameters:
            token_type (TokenType): The expected token type.

        Returns:
            bool: True if the token matched and was consumed.
        """
        if self.check(token_type):
            self.advance()
            return True
        actual = self.curr_token.value or "EOF"
        self.error(
            DiagnosticKind.UNEXPECTED_TOKEN,
            f"Expected {describe(token_type)}, got {actual}",
        )
        self.synchronize()
        return False

    def synchronize(self) -> None:
        """
        Discard tokens until a statement boundary.

        A semicolon is consumed; ``let``, ``if``, a command word and EOF are
        left in place so the next statement can start there.
        """
        while not self.check(TokenType.EOF):
            if self.check(TokenType.SEMICOLON):
                self.advance()
                return
            if self.curr_token.type in STATEMENT_STARTS:
                return
            self.advance()


    # Expression wrappers
    def atom(self) -> Optional[list[Token]]:
        """
        Parse a literal, identifier or parenthesized expression.
        """
        return _expr.parse_atom(self)

    def expr(self) -> Optional[list[Token]]:
        """
        Parse a flat ``atom (op atom)*`` chain.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let(self):
        """
        Parse a 'let' binding.
        """
        return _stmt.parse_let(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_command(self):
        """
        Parse one of the media commands.
        """
        return _stmt.parse_command(self)


    def parse(self) -> Program:
        """
        Parse the full input into a program node.
        """
        program = Program()
        while not self.check(TokenType.EOF):
            start = self.position
            program.statements.append(self.statement())
            if self.position == start:
                self.advance()
        logger.info(
            "Parsed %d statements with %d errors",
            len(program.statements),
            len(self.errors),
        )
        return program


def parse_program(tokens: list[Token], file: str = "<script>") -> tuple[Program, list[Diagnostic]]:
    """
    Parse a token list into a program and its syntactic diagnostics.
    """
    parser = Parser(tokens, file)
    program = parser.parse()
    return program, parser.errors

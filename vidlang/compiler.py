"""vidlang compiler.

Runs the whole front end over one source text: the lexer produces tokens
and lexical diagnostics, the parser builds the AST (binding ``let`` values
as it goes) and the translator lowers the AST into operation records.

The pipeline is a pure function of the source text. Nothing is read from or
written to disk and no process is started; a fresh lexer, parser and
environment are built for every call.

Usage:
    from vidlang.compiler import compile_source
    result = compile_source('play "video.mp4";')
    result.operations   # [Play(source='video.mp4')]


File: compiler.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from vidlang.diagnostics import Diagnostic
from vidlang.lexer import Token, tokenize
from vidlang.nodes import Program
from vidlang.operations import Operation
from vidlang.parser import Parser
from vidlang.translator import Translator


@dataclass
class CompileResult:
    """Everything produced by one compilation."""
    tokens: List[Token]
    program: Program
    lexical_errors: List[Diagnostic] = field(default_factory=list)
    syntax_errors: List[Diagnostic] = field(default_factory=list)
    operations: List[Operation] = field(default_factory=list)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """
        Lexical diagnostics followed by syntactic and semantic ones.
        """
        return self.lexical_errors + self.syntax_errors

    @property
    def ok(self) -> bool:
        return not self.lexical_errors and not self.syntax_errors


def compile_source(src: str, file: str = "<script>") -> CompileResult:
    """
    Compile source text into operations and diagnostics.

    Parameters:
        src (str): The whole script.
        file (str): Name used in log messages.

    Returns:
        CompileResult: tokens, AST, both diagnostic streams and operations.
    """
    tokens, lexical_errors = tokenize(src)
    parser = Parser(tokens, file)
    program = parser.parse()
    translator = Translator()
    operations = translator.translate(program)
    return CompileResult(
        tokens=tokens,
        program=program,
        lexical_errors=lexical_errors,
        syntax_errors=parser.errors + translator.errors,
        operations=operations,
    )


__all__ = ["CompileResult", "compile_source"]

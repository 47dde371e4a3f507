"""AST node definitions.

Each statement form is its own dataclass. Parents own their children
directly (``Program.statements``, ``If.body``), so the tree needs no
explicit lifetime management. Expressions are kept unevaluated as flat
token lists; the translator evaluates them.

Every node except :class:`Program` records the line and column of the token
that started the statement.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from vidlang.lexer import Token
from vidlang.values import Value


Expr = List[Token]


@dataclass
class Let:
    """``let <name> = <expr> ;`` with the value bound during parsing."""
    name: str
    expr: Expr
    value: Value
    line: int
    column: int


@dataclass
class If:
    """``if <left> == <right> then <statement>``"""
    left: Expr
    right: Expr
    body: 'Statement'
    line: int
    column: int


@dataclass
class Frame:
    """``frame <source> <frame_number> to <destination> ;``"""
    source: Expr
    frame_number: Expr
    destination: str
    line: int
    column: int


@dataclass
class Concat:
    """``concat <first> <second> to <destination> ;``"""
    first: Expr
    second: Expr
    destination: str
    line: int
    column: int


@dataclass
class Audio:
    """``audio <source> <start> <end> to <destination> ;``"""
    source: Expr
    start: Expr
    end: Expr
    destination: str
    line: int
    column: int


@dataclass
class Play:
    """``play <source> ;`` or ``play <source> <start> <end> ;``"""
    source: Expr
    start: Optional[Expr]
    end: Optional[Expr]
    line: int
    column: int

    @property
    def ranged(self) -> bool:
        return self.start is not None


@dataclass
class Error:
    """Placeholder for a statement that failed to parse or evaluate."""
    line: int
    column: int


Statement = Union[Let, If, Frame, Concat, Audio, Play, Error]


@dataclass
class Program:
    """Root node owning every top-level statement in source order."""
    statements: List[Statement] = field(default_factory=list)


__all__ = [
    "Audio", "Concat", "Error", "Expr", "Frame", "If", "Let", "Play",
    "Program", "Statement",
]

"""AST to operation translator.

Walks a parsed program in source order and emits one operation record per
command statement. ``let`` statements emit nothing; their values were
computed while parsing and are replayed into the translator's own
environment as they are passed, so every command sees exactly the bindings
that preceded it in the source.

``if`` statements evaluate both guard expressions. When both are times and
equal, the guarded statement is translated in place; otherwise it is skipped
without a diagnostic. A ``let`` under a guard binds regardless, matching the
parser, which binds it while parsing.

Each command's arguments are evaluated and type checked here. A failure
records a diagnostic and drops that one operation; ``Error`` nodes were
already diagnosed by the parser and are skipped.


File: translator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
from typing import List, Optional

from vidlang import nodes
from vidlang import operations as ops
from vidlang.diagnostics import Diagnostic, DiagnosticKind
from vidlang.environment import Environment
from vidlang.evaluator import evaluate
from vidlang.values import Value, ValueType


logger = logging.getLogger(__name__)


class Translator:
    """Translate a vidlang AST into operation records."""

    def __init__(self) -> None:
        """
        Initialize the translator state.
        """
        self.operations: List[ops.Operation] = []
        self.errors: List[Diagnostic] = []
        self.env = Environment()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def emit(self, op: ops.Operation) -> None:
        """
        Append an operation to the output.
        """
        logger.debug("emit %s", op)
        self.operations.append(op)

    def eval_arg(self, expr: nodes.Expr, expected: ValueType, what: str) -> Optional[Value]:
        """
        Evaluate a command argument and check its type.

        Returns:
            Value | None: the value, or None after recording a diagnostic.
        """
        result = evaluate(expr, self.env)
        if not result.ok:
            self.errors.append(result.error)
            return None
        if result.value.type != expected:
            tok = expr[0]
            self.errors.append(Diagnostic(
                tok.line,
                tok.column,
                DiagnosticKind.TYPE_ERROR,
                f"{what} must be {expected.value}, got {result.value.type.value}",
            ))
            return None
        return result.value

    def eval_args(self, *specs) -> Optional[list]:
        """
        Evaluate several ``(expr, expected, what)`` argument specs.

        Every argument is evaluated so that each problem is reported once.
        """
        values = [self.eval_arg(expr, expected, what) for expr, expected, what in specs]
        if any(v is None for v in values):
            return None
        return [v.data for v in values]

    # ------------------------------------------------------------------
    # Translation entry points
    # ------------------------------------------------------------------
    def translate(self, program: nodes.Program) -> List[ops.Operation]:
        """
        Translate every top-level statement in order.
        """
        for stmt in program.statements:
            self.translate_stmt(stmt)
        logger.info("Translated %d operations with %d errors", len(self.operations), len(self.errors))
        return self.operations

    def translate_stmt(self, stmt: nodes.Statement) -> None:
        """
        Translate a single statement node.
        """
        if isinstance(stmt, nodes.Let):
            self.env.define(stmt.name, stmt.value)
        elif isinstance(stmt, nodes.If):
            if self.guard_holds(stmt):
                self.translate_stmt(stmt.body)
            else:
                self.bind_skipped(stmt.body)
        elif isinstance(stmt, nodes.Frame):
            args = self.eval_args(
                (stmt.source, ValueType.TEXT, "frame source"),
                (stmt.frame_number, ValueType.NUMBER, "frame number"),
            )
            if args is not None:
                self.emit(ops.ExtractFrame(args[0], args[1], stmt.destination))
        elif isinstance(stmt, nodes.Concat):
            args = self.eval_args(
                (stmt.first, ValueType.TEXT, "first concat source"),
                (stmt.second, ValueType.TEXT, "second concat source"),
            )
            if args is not None:
                self.emit(ops.Concat(args[0], args[1], stmt.destination))
        elif isinstance(stmt, nodes.Audio):
            args = self.eval_args(
                (stmt.source, ValueType.TEXT, "audio source"),
                (stmt.start, ValueType.TIME, "audio start"),
                (stmt.end, ValueType.TIME, "audio end"),
            )
            if args is not None:
                self.emit(ops.ExtractAudio(args[0], args[1], args[2], stmt.destination))
        elif isinstance(stmt, nodes.Play):
            if not stmt.ranged:
                args = self.eval_args((stmt.source, ValueType.TEXT, "play source"))
                if args is not None:
                    self.emit(ops.Play(args[0]))
                return
            args = self.eval_args(
                (stmt.source, ValueType.TEXT, "play source"),
                (stmt.start, ValueType.TIME, "play start"),
                (stmt.end, ValueType.TIME, "play end"),
            )
            if args is not None:
                self.emit(ops.PlayRange(args[0], args[1], args[2]))
        # Error nodes were diagnosed by the parser and contribute nothing.

    def guard_holds(self, stmt: nodes.If) -> bool:
        """
        Return True when both guard expressions are equal times.
        """
        left = evaluate(stmt.left, self.env)
        right = evaluate(stmt.right, self.env)
        for result in (left, right):
            if not result.ok:
                self.errors.append(result.error)
        if not (left.ok and right.ok):
            return False
        if left.value.type != ValueType.TIME or right.value.type != ValueType.TIME:
            return False
        return left.value.data == right.value.data

    def bind_skipped(self, stmt: nodes.Statement) -> None:
        """
        Replay bindings under a guard that did not hold.
        """
        if isinstance(stmt, nodes.Let):
            self.env.define(stmt.name, stmt.value)
        elif isinstance(stmt, nodes.If):
            self.bind_skipped(stmt.body)


def translate(program: nodes.Program) -> tuple[List[ops.Operation], List[Diagnostic]]:
    """
    Translate a program into operations and semantic diagnostics.
    """
    translator = Translator()
    operations = translator.translate(program)
    return operations, translator.errors

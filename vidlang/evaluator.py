"""Expression evaluator.

Expressions reach the evaluator as flat token sequences: an atom followed by
zero or more ``(operator, atom)`` pairs, with any parentheses already
removed by the parser. Evaluation seeds with the first atom and folds
strictly left to right; ``+`` and ``*`` have no precedence over each other.

Only these operand combinations are defined:

    text + text     string concatenation
    time + time     normalized time sum
    time * number   time scaled by an integer
    number * time   time scaled by an integer

Anything else, including ``number + number``, is a type error. Failures are
returned as an :class:`Evaluation` carrying a diagnostic rather than raised,
so the parser and the translator share exactly the same semantics.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from vidlang.diagnostics import Diagnostic, DiagnosticKind
from vidlang.environment import Environment
from vidlang.lexer import Token, TokenType
from vidlang.values import TimePosition, Value, ValueType


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating an expression: a value or a diagnostic."""
    value: Optional[Value] = None
    error: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _fail(tok: Token, kind: DiagnosticKind, message: str) -> Evaluation:
    return Evaluation(error=Diagnostic(tok.line, tok.column, kind, message))


def evaluate_atom(tok: Token, env: Environment) -> Evaluation:
    """
    Evaluate a single literal or identifier token.
    """
    if tok.type == TokenType.NUMBER:
        try:
            return Evaluation(Value.number(int(tok.value)))
        except ValueError:
            return _fail(
                tok,
                DiagnosticKind.INVALID_EXPRESSION,
                f"Integer literal too large: {len(tok.value)} digits",
            )
    if tok.type == TokenType.STRING:
        return Evaluation(Value.text(tok.value))
    if tok.type == TokenType.TIME:
        try:
            return Evaluation(Value.time(TimePosition.parse(tok.value)))
        except ValueError as e:
            return _fail(tok, DiagnosticKind.TYPE_ERROR, str(e))
    if tok.type == TokenType.ID:
        value = env.lookup(tok.value)
        if value is None:
            return _fail(tok, DiagnosticKind.UNKNOWN_IDENTIFIER, f"Unknown identifier: {tok.value}")
        return Evaluation(value)
    return _fail(
        tok,
        DiagnosticKind.INVALID_EXPRESSION,
        "Expected number, string, time, or identifier",
    )


def combine(op: Token, left: Value, right: Value) -> Evaluation:
    """
    Apply one operator to two values.
    """
    if op.type == TokenType.PLUS:
        if left.type == ValueType.TEXT and right.type == ValueType.TEXT:
            return Evaluation(Value.text(left.data + right.data))
        if left.type == ValueType.TIME and right.type == ValueType.TIME:
            return Evaluation(Value.time(left.data + right.data))
        return _fail(op, DiagnosticKind.TYPE_ERROR, f"Invalid + operands: {left.type} and {right.type}")
    if op.type == TokenType.MUL:
        if left.type == ValueType.TIME and right.type == ValueType.NUMBER:
            return Evaluation(Value.time(left.data * right.data))
        if left.type == ValueType.NUMBER and right.type == ValueType.TIME:
            return Evaluation(Value.time(right.data * left.data))
        return _fail(
            op,
            DiagnosticKind.TYPE_ERROR,
            f"Multiplication only defined for time * number, got {left.type} * {right.type}",
        )
    return _fail(op, DiagnosticKind.INVALID_EXPRESSION, f"Unknown operator {op.value}")


def evaluate(expr: Sequence[Token], env: Environment) -> Evaluation:
    """
    Evaluate a flat expression token sequence.

    Parameters:
        expr (Sequence[Token]): ``atom (op atom)*`` with no parentheses.
        env (Environment): Bindings for identifiers.

    Returns:
        Evaluation: the resulting value, or the first diagnostic encountered.
    """
    if not expr:
        return Evaluation(error=Diagnostic(0, 0, DiagnosticKind.INVALID_EXPRESSION, "Empty expression"))

    result = evaluate_atom(expr[0], env)
    if not result.ok:
        return result
    for i in range(1, len(expr), 2):
        op = expr[i]
        if i + 1 >= len(expr):
            return _fail(op, DiagnosticKind.INVALID_EXPRESSION, f"Missing operand after {op.value}")
        rhs = evaluate_atom(expr[i + 1], env)
        if not rhs.ok:
            return rhs
        result = combine(op, result.value, rhs.value)
        if not result.ok:
            return result
    return result


__all__ = ["Evaluation", "evaluate"]

"""Errors.

Language errors (bad tokens, bad statements, bad operand types) are never
raised; they are collected as diagnostics. The exceptions below are for
collaborators handing the pipeline something it cannot work with at all.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""


class EmptyTokenStreamException(Exception):
    """
    Error for a parser constructed without any tokens.
    """
    def __init__(self, file=None):
        self.file = file
        message = "No tokens generated from the source code"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnknownOperationException(Exception):
    """
    Error for objects that are not operation records.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        self.line = line
        message = f"Unknown operation '{op}'"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)

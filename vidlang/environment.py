"""Variable environment.

A single flat table mapping names to values. One environment belongs to one
parse of one program; nothing is shared between scripts.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import Optional

from vidlang.values import Value


class Environment:
    """Flat name to value table built by ``let`` statements."""

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def define(self, name: str, value: Value) -> None:
        """
        Bind (or rebind) a name.
        """
        self.vars[name] = value

    def lookup(self, name: str) -> Optional[Value]:
        """
        Return the value bound to a name, or None when it is unbound.
        """
        return self.vars.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

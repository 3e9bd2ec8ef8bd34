#!/usr/bin/env python3
"""
CLI Error Module

Formats command failures together with the flags they were invoked with and
a suggestion for the user.
"""

import dataclasses
from typing import Any


class CliError(Exception):
    """
    Error raised at the command boundary.
    
    Attributes:
        command: Name of the failed command, e.g. 'account activate'
        variables: Flag values the command was invoked with
        cause: Underlying error
        suggestion: Remediation hint shown to the user
    """

    def __init__(self, command: str, variables: Any, cause: Exception, suggestion: str):
        self.command = command
        self.variables = variables
        self.cause = cause
        self.suggestion = suggestion
        super().__init__(str(cause))
    
    def _format_variables(self) -> str:
        if dataclasses.is_dataclass(self.variables):
            values = dataclasses.asdict(self.variables)
        else:
            values = dict(self.variables or {})
        return "{" + ", ".join(f"{name}: '{value}'" for name, value in values.items()) + "}"
    
    def __str__(self) -> str:
        return (
            f"an error occurred invoking '{self.command}'\n"
            f"with variables: {self._format_variables()}\n"
            f"error: {self.cause}\n"
            f"suggestion: {self.suggestion}"
        )

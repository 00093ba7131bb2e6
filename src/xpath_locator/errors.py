"""
Locator Errors

Exceptions raised by the locator subsystem.

Resolution itself never raises for frame or capability problems; those are
reported as diagnostics and produce an empty match sequence. The exceptions
here cover failures of the host evaluation engine.
"""

from typing import Optional


class LocatorError(Exception):
    """Base class for locator errors."""


class XPathEvaluationError(LocatorError):
    """
    The host could not evaluate an XPath expression.

    Attributes:
        expression: The expression that failed
    """

    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(message)
        self.expression = expression

    def __str__(self) -> str:
        message = super().__str__()
        if self.expression is not None:
            return f"{message} (expression: {self.expression})"
        return message

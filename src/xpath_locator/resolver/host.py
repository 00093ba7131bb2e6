"""
Host Collaborators

Defines the capabilities the resolver consumes from the document host:
- XPathHost: evaluation, installation, frame introspection, ambient globals
- DiagnosticReporter: side channel for recoverable and fatal conditions

The resolver never evaluates XPath itself; a host adapts a concrete document
model (lxml trees, Playwright frames) to this interface.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Protocol

from .models import ANY_TYPE, NamespaceResolver

logger = logging.getLogger(__name__)


class XPathHost(ABC):
    """
    Abstract base class for document hosts.

    A browsing context is whatever object the host uses for a document plus
    its evaluation capability; the resolver only passes it back to the host.
    """

    def __init__(self):
        self.globals: dict[str, Any] = {}

    @abstractmethod
    def has_evaluator(self, context: Any) -> bool:
        """Check whether the context's document can evaluate XPath."""
        pass

    @abstractmethod
    def install(self, context: Any) -> None:
        """
        Install an XPath evaluator on the context's document.

        Must be idempotent. May raise; the resolver treats a raise the same as
        an install that left the capability missing.
        """
        pass

    @abstractmethod
    def evaluate(
        self,
        expression: str,
        context: Any,
        namespace_resolver: NamespaceResolver,
        result_type: int = ANY_TYPE,
    ) -> Iterable[Any]:
        """
        Evaluate an expression against the context's document.

        Returns:
            Iterable of matched nodes, consumed at most once

        Raises:
            XPathEvaluationError: If the expression cannot be evaluated
        """
        pass

    @abstractmethod
    def is_frame_element(self, node: Any) -> bool:
        """Check whether a node is a frame or iframe element."""
        pass

    @abstractmethod
    def get_frame_content_window(self, node: Any) -> Optional[Any]:
        """Return the browsing context nested in a frame node, or None."""
        pass

    def snapshot_global(self, name: str) -> Any:
        """
        Capture the current value of an ambient global.

        The returned token is only meaningful to restore_global().
        """
        return (name in self.globals, self.globals.get(name))

    def restore_global(self, name: str, token: Any) -> None:
        """Put back a global captured by snapshot_global()."""
        present, value = token
        if present:
            self.globals[name] = value
        else:
            self.globals.pop(name, None)


class DiagnosticReporter(Protocol):
    """Receives diagnostics; never expected to raise."""

    def report(self, message: str) -> None:
        ...


class LoggingReporter:
    """Reports diagnostics as errors on a logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def report(self, message: str) -> None:
        self.log.error(message)


class CollectingReporter(LoggingReporter):
    """
    Keeps every reported diagnostic in order, and logs it.

    Attributes:
        messages: Reported messages, oldest first
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        super().__init__(log)
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)
        super().report(message)

    def clear(self) -> None:
        self.messages.clear()

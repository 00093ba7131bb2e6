"""
Frame-Aware XPath Resolver

Resolves XPaths with '/content:' frame annotations through a document host:
- FrameAwareResolver / resolve_xpath: recursive multi-document resolution
- XPathHost: capabilities a host must provide
- Diagnostic reporters for recoverable and fatal conditions
"""

from .models import (
    ANY_TYPE,
    DEFAULT_NAMESPACES,
    EMPTY_MATCHES,
    FRAME_SEPARATOR,
    MatchSequence,
    NamespaceResolver,
)
from .host import XPathHost, DiagnosticReporter, LoggingReporter, CollectingReporter
from .frames import FrameAwareResolver, preserved_global, resolve_xpath

__all__ = [
    # Models
    "ANY_TYPE",
    "DEFAULT_NAMESPACES",
    "EMPTY_MATCHES",
    "FRAME_SEPARATOR",
    "MatchSequence",
    "NamespaceResolver",
    # Host
    "XPathHost",
    "DiagnosticReporter",
    "LoggingReporter",
    "CollectingReporter",
    # Resolution
    "FrameAwareResolver",
    "preserved_global",
    "resolve_xpath",
]

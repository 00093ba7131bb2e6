"""
Frame-Aware XPath Resolution

Resolves XPath expressions across frames and iframes. A path crosses into a
frame's document with an explicit '/content:' annotation:

    //iframe[@name="editor"]/content://body
    id("outer")/content:id("inner")/content://p

The part before the last separator must resolve to a single frame element;
the part after it is evaluated inside that frame's document. Nested frames
resolve recursively, outermost document first.

Problems (ambiguous or non-frame targets, a missing XPath capability) are
reported through a DiagnosticReporter and never raised: resolution always
returns a MatchSequence, empty when it could not proceed.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from ..config import ResolverConfig
from .host import DiagnosticReporter, LoggingReporter, XPathHost
from .models import (
    ANY_TYPE,
    DEFAULT_NAMESPACES,
    EMPTY_MATCHES,
    FRAME_SEPARATOR,
    MatchSequence,
    NamespaceResolver,
)

logger = logging.getLogger(__name__)

MULTIPLE_ELEMENTS = "Frame XPath resolves to multiple elements."
NON_FRAME_ELEMENT = "Frame XPath resolves to a non-frame element."
NO_FRAME_DOCUMENT = "Frame XPath element has no content document."
INSTALL_FAILURE = "Failure to install XPath library"


@contextmanager
def preserved_global(host: XPathHost, name: str) -> Iterator[None]:
    """Restore the host global `name` to its current value on exit."""
    token = host.snapshot_global(name)
    try:
        yield
    finally:
        host.restore_global(name, token)


class FrameAwareResolver:
    """
    Resolves '/content:' annotated XPaths against a host.

    Usage:
        >>> resolver = FrameAwareResolver(LxmlHost())
        >>> matches = resolver.resolve('//iframe/content://h1', document)
        >>> heading = matches.iterate_next()
    """

    def __init__(
        self,
        host: XPathHost,
        reporter: Optional[DiagnosticReporter] = None,
        config: Optional[ResolverConfig] = None,
        namespace_resolver: NamespaceResolver = DEFAULT_NAMESPACES,
    ):
        """
        Initialize resolver.

        Args:
            host: Document host providing evaluation and frame access
            reporter: Diagnostic side channel (default: logs errors)
            config: Resolver limits (default: from environment)
            namespace_resolver: Prefix table used for every evaluation
        """
        self.host = host
        self.reporter = reporter or LoggingReporter()
        self.config = config or ResolverConfig.from_env()
        self.namespace_resolver = namespace_resolver

    def resolve(self, path: str, context: Any) -> MatchSequence:
        """
        Resolve an XPath to a sequence of nodes.

        Args:
            path: XPath, optionally with '/content:' frame annotations
            context: Browsing context of the outermost document

        Returns:
            MatchSequence of nodes, EMPTY_MATCHES when a frame was not found
            or the document cannot evaluate XPath
        """
        return self._resolve(path, context, 0)

    def _resolve(self, path: str, context: Any, depth: int) -> MatchSequence:
        # Recurse from the right to support nested frames
        index = path.rfind(FRAME_SEPARATOR)
        start = index + len(FRAME_SEPARATOR)
        if index < 0 or start >= len(path):
            return self._evaluate(path, context)

        if depth >= self.config.max_frame_depth:
            self.reporter.report(
                f"Frame XPath exceeds maximum frame depth of {self.config.max_frame_depth}."
            )
            return EMPTY_MATCHES

        frames = self._resolve(path[:index], context, depth + 1)
        node = frames.iterate_next()
        if node is None:
            return EMPTY_MATCHES
        if frames.iterate_next() is not None:
            self.reporter.report(MULTIPLE_ELEMENTS)
        if not self.host.is_frame_element(node):
            self.reporter.report(NON_FRAME_ELEMENT)

        nested = self.host.get_frame_content_window(node)
        if nested is None:
            self.reporter.report(NO_FRAME_DOCUMENT)
            return EMPTY_MATCHES

        logger.debug(f"Descending into frame for '{path[start:]}'")
        return self._resolve(path[start:], nested, depth)

    def _evaluate(self, expression: str, context: Any) -> MatchSequence:
        if not self._ensure_evaluator(context):
            self.reporter.report(INSTALL_FAILURE)
            return EMPTY_MATCHES

        # The XPath library may overwrite a global; keep it intact
        with preserved_global(self.host, self.config.ambient_global):
            nodes = self.host.evaluate(
                expression, context, self.namespace_resolver, ANY_TYPE
            )
        return MatchSequence(nodes)

    def _ensure_evaluator(self, context: Any) -> bool:
        """
        Install the XPath capability on demand.

        Checked on every evaluation, not once, so documents loaded later and
        documents inside frames get the capability too.
        """
        if self.host.has_evaluator(context):
            return True
        logger.debug("XPath evaluator missing, installing")
        try:
            self.host.install(context)
        except Exception as e:
            logger.debug(f"XPath install hook failed: {e}")
            return False
        return self.host.has_evaluator(context)


def resolve_xpath(
    path: str,
    context: Any,
    host: XPathHost,
    reporter: Optional[DiagnosticReporter] = None,
) -> MatchSequence:
    """
    Resolve an XPath with a one-off resolver.

    Args:
        path: XPath, optionally with '/content:' frame annotations
        context: Browsing context of the outermost document
        host: Document host
        reporter: Diagnostic side channel (default: logs errors)

    Returns:
        MatchSequence of matched nodes
    """
    return FrameAwareResolver(host, reporter=reporter).resolve(path, context)

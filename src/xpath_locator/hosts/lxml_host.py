"""
lxml Document Host

Runs locator resolution in-process against HTML parsed with lxml.

Frame and iframe elements get a nested HtmlDocument built from their
'srcdoc' attribute, or from their 'src' through a loader callable. This
makes '/content:' paths usable on saved pages and test fixtures without a
browser.

Usage:
    >>> host = LxmlHost(loader=file_loader("fixtures"))
    >>> page = HtmlDocument.from_file("fixtures/page.html")
    >>> matches = FrameAwareResolver(host).resolve('//iframe/content://h1', page)
"""

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union
from urllib.parse import unquote, urljoin, urlparse

import lxml.html
from lxml import etree

from ..errors import XPathEvaluationError
from ..resolver.host import XPathHost
from ..resolver.models import ANY_TYPE, NamespaceResolver

logger = logging.getLogger(__name__)

FRAME_TAGS = frozenset({"frame", "iframe"})
BLANK_DOCUMENT = "<html><head></head><body></body></html>"

Markup = Union[str, bytes]
Loader = Callable[[str], Optional[Markup]]


class HtmlDocument:
    """
    Browsing context for an lxml HTML tree.

    The XPath evaluator slot stays empty until the host installs one.

    Attributes:
        tree: Parsed document
        url: Document URL, used to resolve frame 'src' attributes
        evaluator: Installed XPathDocumentEvaluator, or None
    """

    def __init__(self, tree: etree._ElementTree, url: Optional[str] = None):
        self.tree = tree
        self.url = url
        self.evaluator: Optional[etree.XPathDocumentEvaluator] = None

    @classmethod
    def from_string(cls, html: Markup, url: Optional[str] = None) -> "HtmlDocument":
        """
        Parse HTML text or bytes; blank input gives a blank document.

        Bytes are decoded by lxml, honouring any <meta charset>.

        Raises:
            lxml.etree.ParserError: If the markup holds no document
        """
        if not html.strip():
            html = BLANK_DOCUMENT
        root = lxml.html.document_fromstring(html, base_url=url)
        return cls(root.getroottree(), url=url)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "HtmlDocument":
        """Parse an HTML file; its file:// URL becomes the document URL."""
        path = Path(path)
        return cls.from_string(path.read_bytes(), url=path.resolve().as_uri())

    @property
    def root(self) -> etree._Element:
        return self.tree.getroot()

    def __repr__(self) -> str:
        return f"HtmlDocument(url={self.url!r})"


def file_loader(base_dir: Union[str, Path]) -> Loader:
    """
    Build a loader reading frame sources from the local filesystem.

    Relative URLs are read from `base_dir`; file:// URLs are read as-is;
    any other scheme, or a missing or unreadable file, loads nothing. Files
    are returned as bytes so lxml picks the charset.
    """
    base = Path(base_dir)

    def load(url: str) -> Optional[bytes]:
        parsed = urlparse(url)
        if parsed.scheme not in ("", "file"):
            return None
        path = Path(unquote(parsed.path))
        if not path.is_absolute():
            path = base / path
        if not path.is_file():
            logger.debug(f"Frame source not found: {path}")
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.debug(f"Cannot read frame source {path}: {e}")
            return None

    return load


class LxmlHost(XPathHost):
    """
    XPathHost backed by lxml.

    Nested frame documents are parsed once per frame element and reused, so
    repeated resolutions see the same browsing context. The cache holds every
    frame document the host has seen; use one host per page, or call
    clear_frames() before moving on to another.
    """

    def __init__(self, loader: Optional[Loader] = None):
        """
        Initialize host.

        Args:
            loader: Maps an absolute frame URL to HTML text or bytes, or
                None if the URL cannot be loaded. Without a loader only
                'srcdoc' and blank frames have content.
        """
        super().__init__()
        self.loader = loader
        self._frames: dict[tuple[Any, str], HtmlDocument] = {}

    def clear_frames(self) -> None:
        """Forget cached frame documents."""
        self._frames.clear()

    def has_evaluator(self, context: HtmlDocument) -> bool:
        return context.evaluator is not None

    def install(self, context: HtmlDocument) -> None:
        if context.evaluator is None:
            context.evaluator = etree.XPathDocumentEvaluator(context.tree, smart_strings=False)

    def evaluate(
        self,
        expression: str,
        context: HtmlDocument,
        namespace_resolver: NamespaceResolver,
        result_type: int = ANY_TYPE,
    ) -> Iterable[Any]:
        evaluator = context.evaluator
        evaluator.register_namespaces(dict(namespace_resolver.namespaces))
        try:
            result = evaluator(expression)
        except etree.XPathError as e:
            raise XPathEvaluationError(f"Cannot evaluate XPath: {e}", expression) from e

        # Numbers, strings and booleans come back as a single item
        if isinstance(result, list):
            return iter(result)
        return iter([result])

    def is_frame_element(self, node: Any) -> bool:
        tag = getattr(node, "tag", None)
        return isinstance(tag, str) and tag.lower() in FRAME_TAGS

    def get_frame_content_window(self, node: Any) -> Optional[HtmlDocument]:
        if not self.is_frame_element(node):
            return None

        tree = node.getroottree()
        key = (tree.getroot(), tree.getpath(node))
        document = self._frames.get(key)
        if document is None:
            document = self._load_frame(node, tree.docinfo.URL)
            if document is not None:
                self._frames[key] = document
        return document

    def _load_frame(self, node: Any, parent_url: Optional[str]) -> Optional[HtmlDocument]:
        srcdoc = node.get("srcdoc")
        if srcdoc is not None:
            return self._parse_frame(srcdoc, parent_url)

        src = (node.get("src") or "").strip()
        if not src:
            # about:blank
            return HtmlDocument.from_string("")

        url = urljoin(parent_url, src) if parent_url else src
        if self.loader is None:
            logger.debug(f"No loader for frame source {url}")
            return None
        html = self.loader(url)
        if html is None:
            return None
        return self._parse_frame(html, url)

    def _parse_frame(self, html: Markup, url: Optional[str]) -> Optional[HtmlDocument]:
        try:
            return HtmlDocument.from_string(html, url=url)
        except etree.ParserError as e:
            logger.debug(f"Cannot parse frame document {url}: {e}")
            return None

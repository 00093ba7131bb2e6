"""
Document Hosts

Adapters giving the resolver access to concrete document models:
- LxmlHost: in-process HTML trees parsed with lxml
- PlaywrightHost: live browser pages through Playwright's sync API
"""

from .lxml_host import HtmlDocument, LxmlHost, file_loader
from .playwright_host import PlaywrightHost

__all__ = [
    "HtmlDocument",
    "LxmlHost",
    "file_loader",
    "PlaywrightHost",
]

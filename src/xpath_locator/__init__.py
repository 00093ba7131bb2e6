"""
XPath Locator

Frame-aware XPath resolution and XPath expression builders for browser
test automation.

Usage:
    from xpath_locator import FrameAwareResolver, LxmlHost, HtmlDocument, xid

    resolver = FrameAwareResolver(LxmlHost())
    page = HtmlDocument.from_string(html)
    matches = resolver.resolve(xid("editor", "//iframe") + "/content://p", page)
"""

from .errors import LocatorError, XPathEvaluationError
from .config import ResolverConfig
from .locators import (
    AttributeFunction,
    at,
    id_,
    lower_case,
    make_attribute_function,
    quote,
    xclass,
    xhref,
    xid,
    xname,
    xsrc,
    xstyle,
    xtext,
    xtitle,
    xtype,
    xvalue,
)
from .resolver import (
    EMPTY_MATCHES,
    FrameAwareResolver,
    MatchSequence,
    XPathHost,
    resolve_xpath,
)
from .hosts import HtmlDocument, LxmlHost, PlaywrightHost, file_loader

__all__ = [
    # Errors
    "LocatorError",
    "XPathEvaluationError",
    # Config
    "ResolverConfig",
    # Builders
    "AttributeFunction",
    "at",
    "id_",
    "lower_case",
    "make_attribute_function",
    "quote",
    "xclass",
    "xhref",
    "xid",
    "xname",
    "xsrc",
    "xstyle",
    "xtext",
    "xtitle",
    "xtype",
    "xvalue",
    # Resolver
    "EMPTY_MATCHES",
    "FrameAwareResolver",
    "MatchSequence",
    "XPathHost",
    "resolve_xpath",
    # Hosts
    "HtmlDocument",
    "LxmlHost",
    "PlaywrightHost",
    "file_loader",
]

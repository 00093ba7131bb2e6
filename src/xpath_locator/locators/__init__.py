"""
XPath Locator Builders

String combinators for writing concise XPath locators:
- Quoting, case folding and positional helpers
- Attribute predicate generators with eight variants each
"""

from .builder import quote, lower_case, at, id_
from .predicates import (
    AttributeFunction,
    ATTRIBUTE_FUNCTIONS,
    VARIANT_NAMES,
    make_attribute_function,
    xid,
    xclass,
    xname,
    xtitle,
    xstyle,
    xhref,
    xtype,
    xvalue,
    xsrc,
    xtext,
)

__all__ = [
    # Builder
    "quote",
    "lower_case",
    "at",
    "id_",
    # Predicates
    "AttributeFunction",
    "ATTRIBUTE_FUNCTIONS",
    "VARIANT_NAMES",
    "make_attribute_function",
    "xid",
    "xclass",
    "xname",
    "xtitle",
    "xstyle",
    "xhref",
    "xtype",
    "xvalue",
    "xsrc",
    "xtext",
]

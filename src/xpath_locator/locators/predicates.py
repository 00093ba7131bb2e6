"""
Attribute Predicate Generators

Builds functions that generate XPaths matching elements by an attribute (or
by text()) value. Each generator comes with eight variants combining case
folding, negation and substring matching:

    xid("foo")                 //*[@id="foo"]
    xid.i("Foo")               //*[translate(@id,...)=translate("Foo",...)]
    xid.c("foo", 'id("bar")')  id("bar")[contains(@id,"foo")]
    xid.n("foo", "//div")      //div[not(@id="foo")]
    xid()                      //*[@id]

Values are always passed through quote(), so no value can change the parse
of the surrounding expression.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .builder import lower_case, quote

DEFAULT_CONTEXT = "//*"

PredicateFunction = Callable[..., str]
Template = Callable[[str, Optional[str]], str]


def _equals_or_exists(attr: str, value: Optional[str]) -> str:
    return f"{attr}={value}" if value is not None else attr


def _equals(attr: str, value: Optional[str]) -> str:
    if value is None:
        raise ValueError(f"Predicate on {attr} requires a value")
    return f"{attr}={value}"


def _contains(attr: str, value: Optional[str]) -> str:
    if value is None:
        raise ValueError(f"Predicate on {attr} requires a value")
    return f"contains({attr},{value})"


def _attribute_function(
    key: str,
    ignore_case: bool,
    negate: bool,
    template: Template,
) -> PredicateFunction:
    """
    Generate a function mapping (value, context) to an XPath.

    Args:
        key: Attribute key, e.g. '@id' or 'text()'
        ignore_case: Compare lower-cased attribute and value
        negate: Wrap the predicate in not()
        template: Builds the predicate body from the attribute and the
            quoted value (None when the caller gave no value)

    Returns:
        Function to generate xpaths for a matching attribute value
    """
    attr = lower_case(key) if ignore_case else key

    def predicate_function(value: Optional[str] = None, context: Optional[str] = None) -> str:
        if context is None:
            context = DEFAULT_CONTEXT
        quoted = None
        if value is not None:
            quoted = quote(value)
            if ignore_case:
                quoted = lower_case(quoted)
        predicate = template(attr, quoted)
        if negate:
            predicate = f"not({predicate})"
        return f"{context}[{predicate}]"

    return predicate_function


@dataclass(frozen=True)
class AttributeFunction:
    """
    Family of XPath generators for one attribute key.

    Calling the record directly is the same as calling `plain`.

    Attributes:
        key: Attribute key the generators match on
        plain: Equality, or existence when no value is given
        i: Case-insensitive equality
        c: Contains
        ic: Case-insensitive contains
        n: Negated equality, or absence when no value is given
        nc: Negated contains
        ni: Negated case-insensitive equality
        nic: Negated case-insensitive contains
    """

    key: str
    plain: PredicateFunction
    i: PredicateFunction
    c: PredicateFunction
    ic: PredicateFunction
    n: PredicateFunction
    nc: PredicateFunction
    ni: PredicateFunction
    nic: PredicateFunction

    def __call__(self, value: Optional[str] = None, context: Optional[str] = None) -> str:
        return self.plain(value, context)

    @property
    def variants(self) -> dict[str, PredicateFunction]:
        """Variant generators by suffix name."""
        return {name: getattr(self, name) for name in VARIANT_NAMES}


VARIANT_NAMES = ("plain", "i", "c", "ic", "n", "nc", "ni", "nic")


def make_attribute_function(key: str) -> AttributeFunction:
    """
    Build the generator family for an attribute key.

    The generated functions take a value and an optional context and return
    an xpath prefixed by that context matching elements whose key relates to
    the value. The default context is '//*' (any element).

    Args:
        key: Attribute key such as '@class', or 'text()'

    Returns:
        AttributeFunction with all eight variants
    """
    return AttributeFunction(
        key=key,
        plain=_attribute_function(key, False, False, _equals_or_exists),
        i=_attribute_function(key, True, False, _equals),
        c=_attribute_function(key, False, False, _contains),
        ic=_attribute_function(key, True, False, _contains),
        n=_attribute_function(key, False, True, _equals_or_exists),
        nc=_attribute_function(key, False, True, _contains),
        ni=_attribute_function(key, True, True, _equals),
        nic=_attribute_function(key, True, True, _contains),
    )


# Non-unique 'id' matches. For ids known to be unique prefer id_().
xid = make_attribute_function("@id")
xclass = make_attribute_function("@class")
xname = make_attribute_function("@name")
xtitle = make_attribute_function("@title")
xstyle = make_attribute_function("@style")
xhref = make_attribute_function("@href")
xtype = make_attribute_function("@type")
xvalue = make_attribute_function("@value")
xsrc = make_attribute_function("@src")
xtext = make_attribute_function("text()")

ATTRIBUTE_FUNCTIONS = {
    "id": xid,
    "class": xclass,
    "name": xname,
    "title": xtitle,
    "style": xstyle,
    "href": xhref,
    "type": xtype,
    "value": xvalue,
    "src": xsrc,
    "text": xtext,
}

"""
XPath Expression Builder

Small helpers for composing XPath 1.0 expressions as strings:
- quote(): turn any string into a valid XPath string literal
- lower_case(): case-fold an expression with translate()
- at(): select one element of a node set by zero-based index
- id_(): unique-id lookup
"""

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"


def quote(literal: str) -> str:
    """
    Make a quoted XPath value.

    XPath 1.0 string literals have no escape mechanism, so a value holding
    both quote characters is split on double quotes and joined with concat().

    Examples:
        >>> quote('foo')
        '"foo"'
        >>> quote("foo'bar")
        '"foo\\'bar"'
        >>> quote('foo"bar')
        '\\'foo"bar\\''
        >>> quote('foo"bar\\'')
        'concat("foo", \\'"\\', "bar\\'")'
    """
    has_double_quote = '"' in literal
    has_single_quote = "'" in literal
    if has_double_quote and has_single_quote:
        return 'concat("' + "\", '\"', \"".join(literal.split('"')) + '")'
    if has_double_quote:
        return "'" + literal + "'"
    # Single quotes or no quotes
    return '"' + literal + '"'


def lower_case(expr: str) -> str:
    """Wrap an XPath expression in a translate() call mapping A-Z to a-z."""
    return f'translate({expr},"{UPPERCASE}","{LOWERCASE}")'


def at(path: str, index: int) -> str:
    """
    Select the element at a zero-based index of the node set of `path`.

    Negative indices count from the end like Python sequences: -1 is the
    last element, -2 the one before it.

    Examples:
        >>> at('//div', 0)
        '(//div)[1]'
        >>> at('//div', -1)
        '(//div)[last()]'
        >>> at('//div', -3)
        '(//div)[last()-2]'
    """
    if index >= 0:
        return f"({path})[{index + 1}]"
    offset = "" if index == -1 else str(index + 1)
    return f"({path})[last(){offset}]"


def id_(value: str) -> str:
    """
    Optimized lookup of the element with a unique 'id' attribute.

    Only valid when the id is unique in the document; for repeated ids use
    the `xid` predicate generator instead, e.g. `xid("foo")`.
    """
    return f"id({quote(value)})"

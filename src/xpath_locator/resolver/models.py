"""
Resolver data types.

- NamespaceResolver: immutable prefix -> URI table passed to every evaluation
- MatchSequence: single-pass sequence of matched nodes
- EMPTY_MATCHES: sentinel for resolutions that could not proceed
"""

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

FRAME_SEPARATOR = "/content:"
"""Marks the boundary between a frame element path and a path inside it."""

ANY_TYPE = 0
"""XPathResult.ANY_TYPE; the result shape is never constrained."""

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class NamespaceResolver:
    """
    Read-only namespace table for XPath evaluation.

    Callable like a DOM XPathNSResolver: returns the URI for a prefix or None.
    """

    def __init__(self, namespaces: Mapping[str, str]):
        self._namespaces = MappingProxyType(dict(namespaces))

    @property
    def namespaces(self) -> Mapping[str, str]:
        return self._namespaces

    def __call__(self, prefix: str) -> Optional[str]:
        return self._namespaces.get(prefix)

    def __repr__(self) -> str:
        return f"NamespaceResolver({dict(self._namespaces)!r})"


DEFAULT_NAMESPACES = NamespaceResolver({"svg": SVG_NAMESPACE})


class MatchSequence:
    """
    Forward-only sequence of matched nodes.

    Wraps the iterator produced by one evaluation. Nodes are pulled lazily and
    cannot be revisited once advanced past.

    Usage:
        >>> matches = resolver.resolve('//a', context)
        >>> first = matches.iterate_next()
        >>> rest = list(matches)
    """

    def __init__(self, nodes: Iterable[Any] = ()):
        self._nodes: Iterator[Any] = iter(nodes)

    def iterate_next(self) -> Optional[Any]:
        """Return the next node, or None when the sequence is exhausted."""
        return next(self._nodes, None)

    def __iter__(self) -> "MatchSequence":
        return self

    def __next__(self) -> Any:
        return next(self._nodes)


class _EmptyMatchSequence(MatchSequence):
    def __repr__(self) -> str:
        return "EMPTY_MATCHES"


EMPTY_MATCHES: MatchSequence = _EmptyMatchSequence()

"""
Match records for reporting.

Flattens matched nodes (lxml elements, attribute and text results, scalar
values) into validated records for table or JSON output.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

TEXT_EXCERPT_LENGTH = 60


class MatchRecord(BaseModel):
    """One matched node.

    Validation Rules:
    - position is 1-based, like XPath positions
    - tag is None for non-element results
    """

    position: int = Field(ge=1)
    """Position in the match sequence."""

    tag: Optional[str] = None
    """Element tag name."""

    id: Optional[str] = None
    """'id' attribute."""

    name: Optional[str] = None
    """'name' attribute."""

    text: str = ""
    """Text content (or scalar value), shortened for display."""

    @classmethod
    def from_node(cls, position: int, node: Any) -> "MatchRecord":
        """Build a record from an lxml element or a scalar XPath result."""
        tag = getattr(node, "tag", None)
        if isinstance(tag, str):
            return cls(
                position=position,
                tag=tag,
                id=node.get("id"),
                name=node.get("name"),
                text=_excerpt(node.text_content() if hasattr(node, "text_content") else node.text or ""),
            )
        return cls(position=position, text=_excerpt(str(node)))


def _excerpt(text: str) -> str:
    text = " ".join(text.split())
    if len(text) > TEXT_EXCERPT_LENGTH:
        return text[: TEXT_EXCERPT_LENGTH - 3] + "..."
    return text

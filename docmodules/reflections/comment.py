"""
Doc comment representation: free text plus an ordered list of block tags.
"""

from typing import List, Optional


class CommentTag:
    def __init__(self, tag_name: str, text: str = ''):
        self.tag_name = tag_name
        self.text = text

    def __eq__(self, other) -> bool:
        if not isinstance(other, CommentTag):
            return NotImplemented
        return self.tag_name == other.tag_name and self.text == other.text

    def __repr__(self) -> str:
        return f"CommentTag(@{self.tag_name} {self.text!r})"


class Comment:
    """
    Parsed doc comment attached to a reflection or a call signature.

    Attributes:
        short_text: First paragraph of the comment
        text: Remaining descriptive text
        tags: Block tags in source order; a tag name may repeat
    """

    def __init__(self, short_text: str = '', text: str = '',
                 tags: Optional[List[CommentTag]] = None):
        self.short_text = short_text
        self.text = text
        self.tags: List[CommentTag] = list(tags) if tags else []

    def has_tag(self, tag_name: str) -> bool:
        return self.get_tag(tag_name) is not None

    def get_tag(self, tag_name: str) -> Optional[CommentTag]:
        """Return the first tag with the given name, if any."""
        for tag in self.tags:
            if tag.tag_name == tag_name:
                return tag
        return None

    def remove_tag(self, tag_name: str) -> bool:
        """Remove the first tag with the given name. Returns True if one was removed."""
        for index, tag in enumerate(self.tags):
            if tag.tag_name == tag_name:
                del self.tags[index]
                return True
        return False

    def has_description(self) -> bool:
        """True if the comment has descriptive text besides its tags."""
        return bool(self.short_text.strip() or self.text.strip())

    def is_empty(self) -> bool:
        return not self.has_description() and not self.tags

    def __eq__(self, other) -> bool:
        if not isinstance(other, Comment):
            return NotImplemented
        return (self.short_text == other.short_text and self.text == other.text
                and self.tags == other.tags)

    def __repr__(self) -> str:
        return f"Comment({self.short_text[:30]!r}, tags={self.tags})"

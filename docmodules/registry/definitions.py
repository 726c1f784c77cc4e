"""
Registry of @moduledefinition records collected from container comments.
"""

from typing import Iterator, List, Optional

from ..reflections import Comment, Reflection


class ModuleDefinition:
    """
    A container whose comment names the logical module it should become.

    Attributes:
        name: Logical module name from the tag
        comment: The container's comment with the definition tag removed
        reflection_id: Id of the container reflection
    """

    __slots__ = ('name', 'comment', 'reflection_id')

    def __init__(self, name: str, comment: Comment, reflection_id: int):
        self.name = name
        self.comment = comment
        self.reflection_id = reflection_id

    def __repr__(self) -> str:
        return f"ModuleDefinition({self.name!r} -> #{self.reflection_id})"


class DefinitionRegistry:
    """Ordered list of module definitions. Duplicate names are kept; the first wins."""

    def __init__(self):
        self._definitions: List[ModuleDefinition] = []

    def add_definition(self, name: str, comment: Comment, reflection: Reflection) -> ModuleDefinition:
        definition = ModuleDefinition(name, comment, reflection.id)
        self._definitions.append(definition)
        return definition

    def find(self, name: str) -> Optional[ModuleDefinition]:
        """First definition registered under name."""
        for definition in self._definitions:
            if definition.name == name:
                return definition
        return None

    def __iter__(self) -> Iterator[ModuleDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

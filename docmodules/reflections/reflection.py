"""
Reflection classes for documented entities.
"""

from typing import List, Optional

from .comment import Comment
from .reflection_kind import ReflectionKind


class Signature:
    """Call signature of a function reflection. Not part of the tree."""

    def __init__(self, name: str, comment: Optional[Comment] = None):
        self.name = name
        self.comment = comment

    def __repr__(self) -> str:
        return f"Signature({self.name})"


class ReflectionGroup:
    """
    Presentation bucket inside a container holding children of one kind.

    Attributes:
        title: Display title, the plural of the kind
        kind: The single kind of every member
        children: Member reflection ids
    """

    def __init__(self, kind: ReflectionKind, children: Optional[List[int]] = None,
                 title: Optional[str] = None):
        self.kind = kind
        self.title = title or kind.plural
        self.children: List[int] = list(children) if children else []

    def __repr__(self) -> str:
        return f"ReflectionGroup({self.title}: {self.children})"


class Reflection:
    """
    One documented entity in the tree.

    Children and group members are held as reflection ids; the owning
    ProjectReflection resolves them.

    Attributes:
        id: Stable identity, unique within the project
        name: Display name
        kind: ReflectionKind of this entity
        parent_id: Id of the owning container, None for the root
        comment: Doc comment, if any
        alias_of: Id of the reflection this one re-exports, if it is an alias
        is_exported: Export-visibility flag
        signatures: Call signatures (function-like kinds only)
        children: Owned child ids
        groups: Presentation groups over the children
    """

    def __init__(self, id: int, name: str, kind: ReflectionKind,
                 parent_id: Optional[int] = None):
        self.id = id
        self.name = name
        self.kind = kind
        self.parent_id = parent_id
        self.comment: Optional[Comment] = None
        self.alias_of: Optional[int] = None
        self.is_exported: bool = False
        self.signatures: List[Signature] = []
        self.children: List[int] = []
        self.groups: List[ReflectionGroup] = []

    @property
    def is_container(self) -> bool:
        return self.kind.is_container

    @property
    def is_alias(self) -> bool:
        return self.alias_of is not None

    def stands_for(self, reflection_id: int) -> bool:
        """True if this reflection is, or is an alias of, the given id."""
        return self.id == reflection_id or self.alias_of == reflection_id

    def get_group(self, kind: ReflectionKind) -> Optional[ReflectionGroup]:
        for group in self.groups:
            if group.kind == kind:
                return group
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.value}: {self.name} #{self.id})"

"""
ProjectReflection - root of the documentation tree and index of all reflections.
"""

from typing import Dict, Iterator, List, Optional

from .reflection import Reflection, ReflectionGroup
from .reflection_kind import ReflectionKind
from .. import logger

ROOT_ID = 0


class ProjectReflection(Reflection):
    """
    Root of the documentation tree.

    Owns the global reflection index: every reflection reachable from the
    root is registered here by id, and containers refer to their children
    by id only. Detaching a reflection never unregisters it; pruning does.
    """

    def __init__(self, name: str = 'project'):
        super().__init__(ROOT_ID, name, ReflectionKind.PROJECT)
        self.reflections: Dict[int, Reflection] = {ROOT_ID: self}
        self._next_id = ROOT_ID + 1

    def register(self, reflection: Reflection):
        """Add a reflection to the global index."""
        logger.assert_true(
            reflection.id not in self.reflections,
            f"Reflection id {reflection.id} is already registered"
        )
        self.reflections[reflection.id] = reflection
        self._next_id = max(self._next_id, reflection.id + 1)

    def unregister(self, reflection_id: int):
        """Remove a reflection from the global index."""
        if self.reflections.pop(reflection_id, None) is None:
            logger.warning(f"Attempted to unregister unknown reflection: {reflection_id}")

    def get_reflection(self, reflection_id: int) -> Optional[Reflection]:
        return self.reflections.get(reflection_id)

    def create_reflection(self, name: str, kind: ReflectionKind,
                          parent: Optional[Reflection] = None) -> Reflection:
        """
        Create, register and attach a new reflection.

        Args:
            name: Display name
            kind: Kind of the new reflection
            parent: Owning container, the root when omitted
        """
        reflection = Reflection(self._next_id, name, kind)
        self.register(reflection)
        self.attach(reflection, parent if parent is not None else self)
        return reflection

    def children_of(self, container: Reflection) -> List[Reflection]:
        return [self.reflections[child_id] for child_id in container.children]

    def top_level_containers(self) -> List[Reflection]:
        return [child for child in self.children_of(self) if child.is_container]

    def walk(self, start: Optional[Reflection] = None) -> Iterator[Reflection]:
        """Yield reflections depth-first, parents before children."""
        stack = [start if start is not None else self]
        while stack:
            reflection = stack.pop()
            yield reflection
            stack.extend(self.children_of(reflection)[::-1])

    def attach(self, reflection: Reflection, parent: Reflection):
        """Make parent own reflection: child sequence and kind group."""
        reflection.parent_id = parent.id
        if reflection.id not in parent.children:
            parent.children.append(reflection.id)
        self.add_to_group(parent, reflection)

    def detach(self, reflection: Reflection):
        """Remove reflection from its parent's child sequence and groups."""
        if reflection.parent_id is None:
            return
        parent = self.reflections.get(reflection.parent_id)
        if parent is not None:
            self.remove_child(parent, reflection.id)
        reflection.parent_id = None

    def remove_child(self, container: Reflection, reflection_id: int) -> bool:
        """Remove an id from a container's child sequence and groups."""
        if reflection_id not in container.children:
            return False
        container.children.remove(reflection_id)
        self.remove_from_groups(container, reflection_id)
        return True

    @staticmethod
    def add_to_group(container: Reflection, reflection: Reflection):
        group = container.get_group(reflection.kind)
        if group is None:
            container.groups.append(ReflectionGroup(reflection.kind, [reflection.id]))
        elif reflection.id not in group.children:
            group.children.append(reflection.id)

    @staticmethod
    def remove_from_groups(container: Reflection, reflection_id: int):
        """Drop an id from every group of container, deleting groups left empty."""
        for group in list(container.groups):
            if reflection_id in group.children:
                group.children.remove(reflection_id)
                if not group.children:
                    container.groups.remove(group)

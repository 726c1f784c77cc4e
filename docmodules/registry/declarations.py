"""
Registry of @module records collected from declaration comments.
"""

from typing import Dict, Iterator

from ..reflections import Reflection


class ModuleDeclaration:
    """A declaration and the logical module it belongs to."""

    __slots__ = ('module_name', 'reflection_id')

    def __init__(self, module_name: str, reflection_id: int):
        self.module_name = module_name
        self.reflection_id = reflection_id

    def __repr__(self) -> str:
        return f"ModuleDeclaration(#{self.reflection_id} -> {self.module_name!r})"


class DeclarationRegistry:
    """
    Module declarations keyed by reflection id.

    Registering the same reflection again replaces its module name but keeps
    the record's original position in iteration order.
    """

    def __init__(self):
        self._declarations: Dict[int, ModuleDeclaration] = {}

    def add_declaration(self, module_name: str, reflection: Reflection) -> ModuleDeclaration:
        declaration = ModuleDeclaration(module_name, reflection.id)
        self._declarations[reflection.id] = declaration
        return declaration

    def get(self, reflection_id: int):
        return self._declarations.get(reflection_id)

    def __contains__(self, reflection_id: int) -> bool:
        return reflection_id in self._declarations

    def __iter__(self) -> Iterator[ModuleDeclaration]:
        return iter(list(self._declarations.values()))

    def __len__(self) -> int:
        return len(self._declarations)

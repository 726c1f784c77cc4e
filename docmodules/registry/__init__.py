"""
Registries filled during collection and consumed by the module converter.
"""

from .definitions import ModuleDefinition, DefinitionRegistry
from .declarations import ModuleDeclaration, DeclarationRegistry

__all__ = ['ModuleDefinition', 'DefinitionRegistry', 'ModuleDeclaration', 'DeclarationRegistry']

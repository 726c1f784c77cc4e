"""
Reflection kind enumeration for type-safe reflection classification.
"""

from enum import Enum


class ReflectionKind(Enum):
    """
    Type-safe enumeration of documentation reflection kinds.

    Declaration order is the presentation order: siblings are sorted by the
    position of their kind in this enum before their name.
    """
    PROJECT = "project"
    MODULE = "module"
    NAMESPACE = "namespace"
    ENUM = "enum"
    ENUM_MEMBER = "enum_member"
    CLASS = "class"
    INTERFACE = "interface"
    TYPE_ALIAS = "type_alias"
    CONSTRUCTOR = "constructor"
    PROPERTY = "property"
    VARIABLE = "variable"
    FUNCTION = "function"
    ACCESSOR = "accessor"
    METHOD = "method"
    OBJECT_LITERAL = "object_literal"

    @property
    def weight(self) -> int:
        return _WEIGHTS[self]

    @property
    def plural(self) -> str:
        """Title of the presentation group holding reflections of this kind."""
        return _PLURALS[self]

    @property
    def is_container(self) -> bool:
        return self in _CONTAINER_KINDS

    @property
    def is_function_like(self) -> bool:
        return self == ReflectionKind.FUNCTION


_WEIGHTS = {kind: index for index, kind in enumerate(ReflectionKind)}

_CONTAINER_KINDS = frozenset({
    ReflectionKind.PROJECT,
    ReflectionKind.MODULE,
    ReflectionKind.NAMESPACE,
})

_PLURALS = {
    ReflectionKind.PROJECT: "Projects",
    ReflectionKind.MODULE: "Modules",
    ReflectionKind.NAMESPACE: "Namespaces",
    ReflectionKind.ENUM: "Enumerations",
    ReflectionKind.ENUM_MEMBER: "Enumeration members",
    ReflectionKind.CLASS: "Classes",
    ReflectionKind.INTERFACE: "Interfaces",
    ReflectionKind.TYPE_ALIAS: "Type aliases",
    ReflectionKind.CONSTRUCTOR: "Constructors",
    ReflectionKind.PROPERTY: "Properties",
    ReflectionKind.VARIABLE: "Variables",
    ReflectionKind.FUNCTION: "Functions",
    ReflectionKind.ACCESSOR: "Accessors",
    ReflectionKind.METHOD: "Methods",
    ReflectionKind.OBJECT_LITERAL: "Object literals",
}

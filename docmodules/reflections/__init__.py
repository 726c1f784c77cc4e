"""
Reflection model for the documentation tree.

Reflections are stored in an index owned by the ProjectReflection and refer
to each other by integer id.
"""

from .reflection_kind import ReflectionKind
from .comment import Comment, CommentTag
from .reflection import Reflection, ReflectionGroup, Signature
from .project import ProjectReflection, ROOT_ID

__all__ = [
    'ReflectionKind',
    'Comment',
    'CommentTag',
    'Reflection',
    'ReflectionGroup',
    'Signature',
    'ProjectReflection',
    'ROOT_ID',
]

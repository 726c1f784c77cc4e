"""
docmodules - regroup documentation reflections into logical modules.

Declarations tagged `@module Name` are moved into a top-level module called
Name, which is an existing top-level container, a container whose comment
carries `@moduledefinition Name`, or a newly created module.
"""

from .reflections import ProjectReflection, Reflection, ReflectionKind, Comment, CommentTag, Signature
from .converter import collect, reorganize, ModuleConverter
from .module_processor import ModuleProcessor
from .result import ConversionResult, ResultStatus

__all__ = [
    'ProjectReflection',
    'Reflection',
    'ReflectionKind',
    'Comment',
    'CommentTag',
    'Signature',
    'collect',
    'reorganize',
    'ModuleConverter',
    'ModuleProcessor',
    'ConversionResult',
    'ResultStatus',
]

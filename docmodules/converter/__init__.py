"""
Collection of module tags and reorganization of the project tree.
"""

from .tags import definition_name, strip_module_tag, tagged_module
from .collector import collect
from .module_converter import ModuleConverter, ConversionStats, reorganize

__all__ = ['definition_name', 'strip_module_tag', 'tagged_module', 'collect',
           'ModuleConverter', 'ConversionStats', 'reorganize']

"""
Collection phase: find module definitions and declarations in the tree.
"""

from typing import Tuple

from ..reflections import ProjectReflection
from ..registry import DefinitionRegistry, DeclarationRegistry
from ..plugin_config import PluginConfig
from .tags import definition_name, tagged_module
from .. import logger


def collect(project: ProjectReflection) -> Tuple[DefinitionRegistry, DeclarationRegistry]:
    """
    Walk the tree once and register every tagged container and declaration.

    Recognized tags are removed from the comments they were read from, so a
    second collection over the same tree finds nothing.

    Returns:
        (definitions, declarations) in tree order
    """
    config = PluginConfig()
    definition_tag = config.module_definition_tag
    module_tag = config.module_tag

    definitions = DefinitionRegistry()
    declarations = DeclarationRegistry()

    for reflection in project.walk():
        if reflection is project:
            continue

        if reflection.is_container:
            comment = reflection.comment
            if comment is None or not comment.has_tag(definition_tag):
                continue
            name = definition_name(comment, definition_tag)
            comment.remove_tag(definition_tag)
            if comment.is_empty():
                reflection.comment = comment = None
            if name is None:
                logger.debug(f"Ignoring blank @{definition_tag} on {reflection}")
                continue
            definitions.add_definition(name, comment, reflection)
            logger.debug(f"Collected definition of module '{name}' from {reflection}")
        else:
            module_name = tagged_module(reflection, module_tag)
            if module_name is not None:
                declarations.add_declaration(module_name, reflection)
                logger.debug(f"Collected {reflection} for module '{module_name}'")

    logger.info(f"Collected {len(definitions)} module definitions "
                f"and {len(declarations)} module declarations")
    return definitions, declarations

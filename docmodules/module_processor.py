"""
ModuleProcessor - runs collection and reorganization over a project tree.
"""

from .reflections import ProjectReflection
from .converter import collect, ModuleConverter
from .result import ConversionResult, ResultStatus
from . import logger


class ModuleProcessor:
    """
    Applies the module tags of a project to its tree.

    1. Collect @moduledefinition and @module tags (tags are stripped)
    2. Move declarations into their logical modules
    3. Prune empty containers and sort the tree
    """

    def process(self, project: ProjectReflection) -> ConversionResult:
        logger.info(f"Processing project '{project.name}' "
                    f"({len(project.reflections)} reflections)")

        definitions, declarations = collect(project)
        try:
            stats = ModuleConverter(project, definitions, declarations).run()
        except Exception as e:
            logger.exception(f"Error reorganizing project '{project.name}': {e}")
            raise

        if stats.changed:
            status = ResultStatus.SUCCESS
            message = (f"Moved {stats.moved_declarations} of {len(declarations)} "
                       f"tagged declarations")
        else:
            status = ResultStatus.UNCHANGED
            message = "Project layout unchanged"

        return ConversionResult(status=status, message=message, stats=stats)

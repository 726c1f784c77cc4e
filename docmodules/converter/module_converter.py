"""
ModuleConverter - moves tagged declarations into their logical modules.
"""

from typing import Any, Dict, List, Optional

from ..reflections import ProjectReflection, Reflection, ReflectionGroup, ReflectionKind
from ..registry import DefinitionRegistry, DeclarationRegistry, ModuleDefinition
from .. import logger


class ConversionStats:
    """Counts of the structural changes made by one conversion run."""

    def __init__(self):
        self.moved_declarations = 0
        self.created_modules = 0
        self.promoted_definitions = 0
        self.relocated_reflections = 0
        self.dropped_aliases = 0
        self.pruned_containers = 0

    @property
    def changed(self) -> bool:
        return any(self.to_dict().values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'moved_declarations': self.moved_declarations,
            'created_modules': self.created_modules,
            'promoted_definitions': self.promoted_definitions,
            'relocated_reflections': self.relocated_reflections,
            'dropped_aliases': self.dropped_aliases,
            'pruned_containers': self.pruned_containers,
        }

    def __repr__(self) -> str:
        return f"ConversionStats({self.to_dict()})"


class ModuleConverter:
    """
    Reorganizes a project tree according to collected module tags.

    A run has three steps:
    1. Move every declaration into the top-level container named by its
       @module tag, promoting a @moduledefinition container or creating a
       new module when no container of that name exists yet
    2. Relocate untagged leftovers of the old layout to the root and prune
       containers left empty
    3. Sort every child sequence and group by kind, then name

    Declarations are processed in registry order and container lookup sees
    the containers created by earlier declarations of the same run.
    """

    def __init__(self, project: ProjectReflection, definitions: DefinitionRegistry,
                 declarations: DeclarationRegistry):
        self.project = project
        self.definitions = definitions
        self.declarations = declarations
        self.stats = ConversionStats()

    def run(self) -> ConversionStats:
        self.convert_declarations()
        self.remove_empty_containers()
        self.sort_all()
        logger.info(f"Module conversion finished: {self.stats}")
        return self.stats

    def convert_declarations(self):
        for declaration in self.declarations:
            reflection = self.project.get_reflection(declaration.reflection_id)
            logger.assert_true(
                reflection is not None,
                f"Declaration for module '{declaration.module_name}' refers to "
                f"unknown reflection #{declaration.reflection_id}"
            )

            target = self._resolve_container(declaration.module_name)
            self._remove_from_all_containers(reflection, target)
            self._move_into(reflection, target)

    def _resolve_container(self, module_name: str) -> Reflection:
        """Find, promote or create the top-level container for a module name."""
        for container in self.project.top_level_containers():
            if container.name == module_name:
                return container

        definition = self.definitions.find(module_name)
        if definition is not None:
            return self._create_module_from_definition(definition)

        return self._create_module(module_name)

    def _create_module_from_definition(self, definition: ModuleDefinition) -> Reflection:
        container = self.project.get_reflection(definition.reflection_id)
        logger.assert_true(
            container is not None,
            f"Module definition '{definition.name}' refers to "
            f"unknown reflection #{definition.reflection_id}"
        )

        self.project.detach(container)
        container.name = definition.name
        self.project.attach(container, self.project)

        if definition.comment is not None and not definition.comment.is_empty():
            container.comment = definition.comment
        else:
            container.comment = None

        self.stats.promoted_definitions += 1
        logger.debug(f"Promoted {container} to top-level module '{definition.name}'")
        return container

    def _create_module(self, module_name: str) -> Reflection:
        module = self.project.create_reflection(module_name, ReflectionKind.MODULE)
        module.is_exported = True
        self.stats.created_modules += 1
        logger.debug(f"Created module {module}")
        return module

    def _remove_from_all_containers(self, reflection: Reflection, target: Reflection):
        """Remove reflection and its aliases from every top-level container but target."""
        for container in reversed(self.project.top_level_containers()):
            if container is target:
                continue
            for child in self.project.children_of(container):
                if not child.stands_for(reflection.id):
                    continue
                if child is reflection:
                    self.project.remove_child(container, child.id)
                else:
                    self._drop_alias(container, child)

    def _move_into(self, reflection: Reflection, target: Reflection):
        alias = self._find_alias(target, reflection)

        if reflection.parent_id != target.id:
            self.project.detach(reflection)
            reflection.parent_id = target.id
            if alias is not None:
                target.children[target.children.index(alias.id)] = reflection.id
            else:
                target.children.append(reflection.id)
            self.stats.moved_declarations += 1
            logger.debug(f"Moved {reflection} into {target}")
        elif reflection.id not in target.children:
            target.children.append(reflection.id)

        self._ensure_group_membership(target, reflection, alias)

        if alias is not None:
            self._drop_alias(target, alias)

    def _ensure_group_membership(self, target: Reflection, reflection: Reflection,
                                 alias: Optional[Reflection]):
        group = target.get_group(reflection.kind)
        if group is None:
            target.groups.append(ReflectionGroup(reflection.kind, [reflection.id]))
            return

        if alias is not None and alias.id in group.children:
            if reflection.id in group.children:
                group.children.remove(alias.id)
            else:
                # Replace in place so the group keeps its order
                group.children[group.children.index(alias.id)] = reflection.id
        elif reflection.id not in group.children:
            group.children.append(reflection.id)

    def _find_alias(self, container: Reflection, reflection: Reflection) -> Optional[Reflection]:
        for child in self.project.children_of(container):
            if child.alias_of == reflection.id:
                return child
        return None

    def _drop_alias(self, container: Reflection, alias: Reflection):
        if alias.id in container.children:
            container.children.remove(alias.id)
        self.project.remove_from_groups(container, alias.id)
        self.project.unregister(alias.id)
        self.stats.dropped_aliases += 1
        logger.debug(f"Dropped alias {alias} from {container}")

    def remove_empty_containers(self):
        """
        Relocate unclaimed children of top-level containers to the root, then
        delete every container whose child sequence is empty.

        Projects without any module declaration keep their layout.
        """
        if len(self.declarations):
            self._relocate_unclaimed()
        self._prune(self.project)

    def _relocate_unclaimed(self):
        pending: List[Reflection] = self.project.top_level_containers()
        while pending:
            container = pending.pop(0)
            for child in self.project.children_of(container):
                if child.id in self.declarations:
                    continue
                if child.is_alias:
                    self._drop_alias(container, child)
                    continue

                self.project.detach(child)
                self.project.attach(child, self.project)
                self.stats.relocated_reflections += 1
                logger.debug(f"Relocated unclaimed {child} from {container} to the root")

                # Nested containers are dissolved the same way
                if child.is_container:
                    pending.append(child)

    def _prune(self, container: Reflection):
        # Backwards, since removal shifts the remaining indices
        for index in range(len(container.children) - 1, -1, -1):
            child = self.project.reflections[container.children[index]]
            if not child.is_container:
                continue
            self._prune(child)
            if not child.children:
                self.project.remove_child(container, child.id)
                self.project.unregister(child.id)
                self.stats.pruned_containers += 1
                logger.debug(f"Removed empty container {child}")

    def sort_all(self):
        self._sort(self.project)

    def _sort(self, reflection: Reflection):
        for child in self.project.children_of(reflection):
            if child.children:
                self._sort(child)

        reflection.children.sort(key=self._sort_key)
        reflection.groups.sort(key=lambda group: group.kind.weight)
        for group in reflection.groups:
            group.children.sort(key=self._sort_key)

    def _sort_key(self, reflection_id: int):
        reflection = self.project.reflections[reflection_id]
        return reflection.kind.weight, reflection.name, reflection.id


def reorganize(project: ProjectReflection, definitions: DefinitionRegistry,
               declarations: DeclarationRegistry) -> ProjectReflection:
    """Move, prune and sort the project tree in place. Returns the project."""
    ModuleConverter(project, definitions, declarations).run()
    return project

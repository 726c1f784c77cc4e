import json
from pathlib import Path

import pytest

from docmodules import logger
from docmodules.plugin_config import PluginConfig
from docmodules.reflections import (
    Comment,
    CommentTag,
    ProjectReflection,
    Reflection,
    ReflectionKind,
    Signature,
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration and log output at a per-test directory."""
    config_file = tmp_path / 'docmodules.json'
    config_file.write_text(json.dumps({'log_dir': str(tmp_path / 'logs')}))
    monkeypatch.setenv('DOCMODULES_CONFIG', str(config_file))
    PluginConfig.reset()
    logger.shutdown()
    yield config_file
    logger.shutdown()
    PluginConfig.reset()


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    work_dir = tmp_path / 'work'
    work_dir.mkdir()
    return work_dir


class TreeBuilder:
    """Builds project trees the way the upstream converter would."""

    def __init__(self, name: str = 'test-project'):
        self.project = ProjectReflection(name)

    def module(self, name: str, parent: Reflection = None, short_text: str = '',
               definition: str = None, kind: ReflectionKind = ReflectionKind.MODULE) -> Reflection:
        module = self.project.create_reflection(name, kind, parent)
        module.is_exported = True
        tags = [CommentTag('moduledefinition', definition)] if definition is not None else []
        if short_text or tags:
            module.comment = Comment(short_text, tags=tags)
        return module

    def declaration(self, name: str, parent: Reflection, kind: ReflectionKind = ReflectionKind.CLASS,
                    module: str = None, short_text: str = '', exported: bool = True) -> Reflection:
        declaration = self.project.create_reflection(name, kind, parent)
        declaration.is_exported = exported
        tags = [CommentTag('module', module)] if module is not None else []
        if short_text or tags:
            declaration.comment = Comment(short_text, tags=tags)
        return declaration

    def function(self, name: str, parent: Reflection, signatures=()) -> Reflection:
        """signatures: (short_text, module) pairs, module may be None"""
        function = self.project.create_reflection(name, ReflectionKind.FUNCTION, parent)
        function.is_exported = True
        for short_text, module in signatures:
            tags = [CommentTag('module', module)] if module is not None else []
            comment = Comment(short_text, tags=tags) if short_text or tags else None
            function.signatures.append(Signature(name, comment))
        return function

    def alias(self, target: Reflection, parent: Reflection) -> Reflection:
        alias = self.project.create_reflection(target.name, target.kind, parent)
        alias.alias_of = target.id
        alias.is_exported = True
        return alias


@pytest.fixture
def tree() -> TreeBuilder:
    return TreeBuilder()


@pytest.fixture
def tree_factory():
    return TreeBuilder


def _check_invariants(project: ProjectReflection, sorted_tree: bool = True):
    reachable = [reflection.id for reflection in project.walk()]
    assert len(reachable) == len(set(reachable))
    assert set(reachable) == set(project.reflections)

    for reflection in project.reflections.values():
        if reflection is project:
            assert reflection.parent_id is None
        else:
            parent = project.reflections[reflection.parent_id]
            assert parent.children.count(reflection.id) == 1

        for child_id in reflection.children:
            assert project.reflections[child_id].parent_id == reflection.id

        grouped = []
        for group in reflection.groups:
            assert group.children
            for child_id in group.children:
                assert child_id in reflection.children
                assert project.reflections[child_id].kind == group.kind
            grouped.extend(group.children)
        assert len(grouped) == len(set(grouped))
        assert sorted(grouped) == sorted(reflection.children)
        kinds = [group.kind for group in reflection.groups]
        assert len(kinds) == len(set(kinds))

        if reflection.is_container and reflection is not project:
            assert reflection.children

        if sorted_tree:
            def key(child_id):
                child = project.reflections[child_id]
                return child.kind.weight, child.name, child.id
            assert reflection.children == sorted(reflection.children, key=key)
            for group in reflection.groups:
                assert group.children == sorted(group.children, key=key)


@pytest.fixture
def check_invariants():
    return _check_invariants


def _shape(project: ProjectReflection, reflection: Reflection = None):
    """Kinds and names of the tree, ignoring ids."""
    reflection = reflection if reflection is not None else project
    return (
        reflection.kind.value,
        reflection.name,
        [_shape(project, child) for child in project.children_of(reflection)],
        [(group.title, [project.reflections[i].name for i in group.children])
         for group in reflection.groups],
    )


@pytest.fixture
def tree_shape():
    return _shape

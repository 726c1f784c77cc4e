from unittest.mock import patch

import pytest
from docmodules.module_processor import ModuleProcessor
from docmodules.result import ResultStatus


class TestModuleProcessor:
    def test_process_tagged_project_succeeds(self, tree, check_invariants):
        source = tree.module('a.ts')
        tree.declaration('Foo', source, module='Utils')

        result = ModuleProcessor().process(tree.project)

        assert result.status == ResultStatus.SUCCESS
        assert result.stats.moved_declarations == 1
        assert result.stats.created_modules == 1
        assert "Moved 1 of 1" in result.message
        check_invariants(tree.project)

    def test_second_process_is_unchanged(self, tree):
        source = tree.module('a.ts')
        tree.declaration('Foo', source, module='Utils')
        processor = ModuleProcessor()
        processor.process(tree.project)

        result = processor.process(tree.project)

        assert result.status == ResultStatus.UNCHANGED
        assert not result.stats.changed

    def test_untagged_project_is_unchanged(self, tree):
        source = tree.module('a.ts')
        tree.declaration('Foo', source)

        result = ModuleProcessor().process(tree.project)

        assert result.status == ResultStatus.UNCHANGED
        assert tree.project.children == [source.id]

    def test_invariant_violation_propagates(self, tree):
        source = tree.module('a.ts')
        tree.declaration('Foo', source, module='Utils')

        with patch('docmodules.module_processor.ModuleConverter.convert_declarations',
                   side_effect=RuntimeError("broken")):
            with pytest.raises(RuntimeError):
                ModuleProcessor().process(tree.project)

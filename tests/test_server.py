from unittest.mock import patch

import pytest
from docmodules import logger
from server.app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def _tagged_project():
    return {
        'id': 0,
        'name': 'demo',
        'kind': 'project',
        'children': [
            {
                'id': 1,
                'name': 'utils_file.ts',
                'kind': 'module',
                'flags': {'isExported': True},
                'children': [
                    {
                        'id': 2,
                        'name': 'Foo',
                        'kind': 'class',
                        'flags': {'isExported': True},
                        'comment': {'shortText': 'Does foo.', 'tags': [{'tag': 'module', 'text': 'Utils'}]},
                    },
                ],
            },
        ],
    }


class TestTagsEndpoint:
    def test_returns_default_tag_names(self, client):
        response = client.get('/api/tags')
        assert response.status_code == 200
        assert response.get_json() == {'module_tag': 'module', 'module_definition_tag': 'moduledefinition'}


class TestReorganizeEndpoint:
    def test_reorganizes_tagged_project(self, client):
        response = client.post('/api/reorganize', json=_tagged_project())

        assert response.status_code == 200
        body = response.get_json()
        assert body['result']['status'] == 'success'
        children = body['project']['children']
        assert [child['name'] for child in children] == ['Utils']
        assert children[0]['id'] == 3
        foo = children[0]['children'][0]
        assert foo['name'] == 'Foo'
        assert foo['comment'] == {'shortText': 'Does foo.'}
        assert body['project']['groups'] == [{'title': 'Modules', 'kind': 'module', 'children': [3]}]

    def test_untagged_project_is_unchanged(self, client):
        data = _tagged_project()
        del data['children'][0]['children'][0]['comment']

        response = client.post('/api/reorganize', json=data)

        body = response.get_json()
        assert body['result']['status'] == 'unchanged'
        assert body['project']['children'][0]['name'] == 'utils_file.ts'

    def test_rejects_non_json_body(self, client):
        response = client.post('/api/reorganize', data='not json', content_type='text/plain')
        assert response.status_code == 400
        assert 'error' in response.get_json()

    def test_rejects_invalid_project(self, client):
        response = client.post('/api/reorganize', json={'kind': 'project', 'children': [{'id': 1}]})
        assert response.status_code == 400
        assert 'Invalid project data' in response.get_json()['error']

    @pytest.mark.parametrize('fields', [
        {'flags': None},
        {'comment': 'Does foo.'},
        {'signatures': ['foo']},
    ])
    def test_rejects_wrongly_typed_fields(self, client, fields):
        data = _tagged_project()
        data['children'][0]['children'][0].update(fields)

        response = client.post('/api/reorganize', json=data)

        assert response.status_code == 400
        assert 'error' in response.get_json()

    def test_rejection_is_logged(self, client, isolated_config):
        client.post('/api/reorganize', json={'kind': 'project', 'children': [{'id': 1}]})

        logger.shutdown()
        content = (isolated_config.parent / 'logs' / 'docmodules.log').read_text(encoding='utf-8')
        assert "[ERROR   ]" in content
        assert "Rejected project" in content

    def test_invariant_violation_answers_error_result(self, client, isolated_config):
        with patch('docmodules.module_processor.ModuleConverter.run',
                   side_effect=RuntimeError("Definition refers to unknown reflection #9")):
            response = client.post('/api/reorganize', json=_tagged_project())

        assert response.status_code == 500
        body = response.get_json()
        assert body['result']['status'] == 'error'
        assert 'project' not in body

        logger.shutdown()
        content = (isolated_config.parent / 'logs' / 'docmodules.log').read_text(encoding='utf-8')
        assert "Error reorganizing project 'demo'" in content
        assert "Traceback" in content

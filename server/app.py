"""
docmodules Server - reorganize serialized documentation trees over HTTP
"""

from flask import Flask, request, jsonify

from docmodules.module_processor import ModuleProcessor
from docmodules.result import ConversionResult, ResultStatus
from docmodules.serialization import SerializationError, project_from_dict, project_to_dict
from docmodules.plugin_config import PluginConfig
from docmodules import logger

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024  # 16MB max tree size


@app.route('/api/tags', methods=['GET'])
def get_tags():
    """Tag names recognized by the converter"""
    config = PluginConfig()
    return jsonify({
        'module_tag': config.module_tag,
        'module_definition_tag': config.module_definition_tag,
    })


@app.route('/api/reorganize', methods=['POST'])
def reorganize_project():
    """Collect module tags from a serialized project and return the reorganized tree"""
    data = request.get_json(silent=True)
    if data is None:
        logger.error("Rejected request: body is not JSON")
        return jsonify({'error': 'Request body must be a JSON project'}), 400

    try:
        project = project_from_dict(data)
    except SerializationError as e:
        logger.error(f"Rejected project: {e}")
        return jsonify({'error': str(e)}), 400

    try:
        result = ModuleProcessor().process(project)
    except RuntimeError as e:
        # Invariant violation; the tree may be half moved, so it is not returned
        result = ConversionResult(status=ResultStatus.ERROR, message=str(e))
        return jsonify({'error': str(e), 'result': result.to_dict()}), 500
    logger.info(f"Reorganized project '{project.name}': {result.status.value}")

    return jsonify({
        'project': project_to_dict(project),
        'result': result.to_dict(),
    })

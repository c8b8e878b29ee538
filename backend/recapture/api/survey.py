from flask import Blueprint, current_app, jsonify

survey = Blueprint('survey', __name__)


def _coordinator():
    return current_app.extensions['survey']


@survey.route('/state', methods=['GET'])
def get_state():
    """
    Returns the same full snapshot that is broadcast as ``state-update``.
    """
    return jsonify(_coordinator().snapshot()), 200


@survey.route('/estimate', methods=['GET'])
def get_estimate():
    return jsonify(_coordinator().estimate()), 200


@survey.route('/config', methods=['GET'])
def get_config():
    """
    Returns the detector layout and map constants so clients need not
    hard-code them.
    """
    return jsonify(_coordinator().public_config()), 200

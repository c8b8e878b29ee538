from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Capture-recapture survey server'})


@main.route('/healthz')
def healthz():
    coordinator = current_app.extensions['survey']
    with coordinator.lock:
        return jsonify({
            'status': 'ok',
            'phase': coordinator.phase,
            'participants': len(coordinator.directory),
        })

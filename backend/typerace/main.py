from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the typerace server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'healthy'})

@main.route('/api/round')
def round_state():
    """Read-only view of the current round."""
    return jsonify(current_app.extensions['typerace'].snapshot())

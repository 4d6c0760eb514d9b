from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the poker table API!',
        'links': {'self': current_app.config.get('API_BASE_PATH', '/v1')},
    })

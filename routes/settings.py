"""User settings routes."""
from flask import Blueprint, request, jsonify

from models import app_setting as app_setting_model

settings_bp = Blueprint('settings', __name__)


@settings_bp.route('/', methods=['GET', 'POST'])
def index():
    if request.method == 'POST':
        payload = request.get_json(silent=True) or {}
        if 'enableAutoProgression' not in payload:
            return jsonify({'error': 'enableAutoProgression is required'}), 400
        app_setting_model.set_auto_progression(bool(payload['enableAutoProgression']))
    return jsonify({'enableAutoProgression': app_setting_model.auto_progression_enabled()})

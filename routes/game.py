"""Game routes — submit a finished session, read the next session's settings."""
import logging

from flask import Blueprint, request, jsonify

from models import game as game_model
from models import game_settings as game_settings_model
from services import analytics_service, progression_service

logger = logging.getLogger(__name__)
game_bp = Blueprint('game', __name__)


@game_bp.route('/complete', methods=['POST'])
def complete():
    """Record a finished session, then run auto-progression for completed n-back games.

    Body: {gameInfo, scoresheet, status='completed', kind='nback'|'tally'}
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Expected a JSON object body'}), 400
    game_info = payload.get('gameInfo')
    scoresheet = payload.get('scoresheet')
    if not isinstance(game_info, dict) or not isinstance(scoresheet, list):
        logger.warning('Rejected game submission: gameInfo=%s scoresheet=%s',
                       type(game_info).__name__, type(scoresheet).__name__)
        return jsonify({'error': 'gameInfo (object) and scoresheet (list) are required'}), 400
    status = payload.get('status', game_model.COMPLETED)
    if status == game_model.TOMBSTONE:
        logger.warning('Rejected game submission with reserved status %r', status)
        return jsonify({'error': 'status "tombstone" is reserved for level transitions'}), 400
    kind = payload.get('kind', 'nback')

    if kind == 'tally':
        analytics = analytics_service.score_tally_trials(game_info, scoresheet, status)
        progression = None
    elif kind == 'nback':
        if 'nBack' not in game_info:
            return jsonify({'error': 'gameInfo.nBack is required for n-back games'}), 400
        analytics = analytics_service.score_trials(game_info, scoresheet, status)
        progression = None
        if status == game_model.COMPLETED:
            progression = progression_service.run_progression(game_info, scoresheet)
    else:
        return jsonify({'error': f'Unknown game kind: {kind}'}), 400

    return jsonify({
        'analytics': analytics,
        'progression': progression,
        'settings': game_settings_model.get(),
    })


@game_bp.route('/settings')
def settings():
    return jsonify(game_settings_model.get())

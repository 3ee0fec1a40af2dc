"""Dashboard routes — recent activity and game history."""
from flask import Blueprint, request, jsonify

from models import game as game_model
from services import analytics_service

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/')
def index():
    """Last game, play time since rollover, and the last 48 hours of history."""
    summary = analytics_service.load_analytics()
    summary['recent_games'] = game_model.get_since_hours(48)
    return jsonify(summary)


@dashboard_bp.route('/history')
def history():
    """Paginated game history, tombstones included."""
    page = max(1, request.args.get('page', 1, type=int))
    per_page = 30
    offset = (page - 1) * per_page
    games = game_model.get_history(limit=per_page, offset=offset)
    total = game_model.count()
    total_pages = max(1, (total + per_page - 1) // per_page)
    return jsonify({
        'games': games,
        'page': page,
        'total_pages': total_pages,
    })

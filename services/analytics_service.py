"""Record finished sessions and build the recent-activity summary."""
import logging

from models import game as game_model
from engine.playtime import format_seconds, rollover_cutoff
from engine.scoresheet import score_scoresheet, tally_by_tag, tally_counts
from config.settings import PROGRESSION_DEFAULTS

logger = logging.getLogger(__name__)


def load_analytics(now=None):
    """Return dict with: last_game, play_time (formatted, or None if nothing today)."""
    last_game = game_model.get_last_recent()
    play_time = game_model.play_time_since(rollover_cutoff(now))
    return {
        'last_game': last_game,
        'play_time': format_seconds(play_time) if play_time > 0 else None,
    }


def score_trials(game_info, scoresheet, status,
                 non_target_mode=PROGRESSION_DEFAULTS['non_target_mode']):
    """Persist an n-back session with per-tag scores and d'. Returns refreshed analytics."""
    scores = tally_by_tag(scoresheet, game_info.get('tags') or [])
    dp, _ = score_scoresheet(scoresheet, non_target_mode)
    game_id = game_model.add({
        **game_info,
        'scores': scores,
        'dp': dp,
        'completedTrials': len(scoresheet),
        'status': status,
    })
    logger.info('Recorded game %d (%s): %d trials, d\'=%.3f',
                game_id, status, len(scoresheet), dp)
    return load_analytics()


def score_tally_trials(game_info, scoresheet, status):
    """Persist a counting-task session (no d'). Returns refreshed analytics."""
    scores = tally_counts(scoresheet)
    game_id = game_model.add({
        **game_info,
        'scores': scores,
        'completedTrials': len(scoresheet),
        'status': status,
    })
    logger.info('Recorded tally game %d (%s): %d/%d',
                game_id, status, scores['tally']['hits'], scores['tally']['possible'])
    return load_analytics()

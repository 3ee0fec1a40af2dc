"""Auto-progression: score a finished n-back session and set up the next one."""
import logging

from models import app_setting as app_setting_model
from models import game as game_model
from models import game_settings as game_settings_model
from engine import progression
from engine.difficulty import difficulty_params
from engine.scoresheet import score_scoresheet
from engine.sdt import corrected_rates, performance_band
from config.settings import PROGRESSION_DEFAULTS

logger = logging.getLogger(__name__)


def _log_session(counts, d_prime):
    hit_rate, fa_rate = corrected_rates(
        counts['hits'], counts['misses'],
        counts['false_alarms'], counts['non_targets'],
    )
    logger.info(
        "Session scored: hits=%d misses=%d fas=%d non_targets=%d | "
        "hit rate %.1f%% | FA rate %.1f%% | d'=%.3f (%s)",
        counts['hits'], counts['misses'], counts['false_alarms'], counts['non_targets'],
        hit_rate * 100, fa_rate * 100, d_prime, performance_band(d_prime),
    )


def run_progression(game_info, scoresheet,
                    non_target_mode=PROGRESSION_DEFAULTS['non_target_mode']):
    """Update level/progress from a session's scoresheet and write the next game's settings.

    game_info is read, never mutated. Returns None when auto-progression is
    disabled, else dict with: event ('advance' | 'fallback' | None), d_prime,
    n_back, level_progress, params.

    Database errors propagate: a half-written transition must not be hidden.
    """
    if not app_setting_model.auto_progression_enabled():
        return None

    d_prime, counts = score_scoresheet(scoresheet, non_target_mode)
    _log_session(counts, d_prime)

    level = int(game_info['nBack'])
    state = progression.advance_state(level, game_info.get('levelProgress') or 0.0, d_prime)
    event = state['event']

    if event is not None:
        # Tombstone carries the pre-transition game info
        game_model.add({
            **game_info,
            'status': game_model.TOMBSTONE,
            'result': progression.EVENT_RESULTS[event],
        })
        logger.info("Auto-progression %s: n-back %d -> %d (d'=%.3f)",
                    event, level, state['level'], d_prime)

    params = difficulty_params(state['progress'])
    level_progress = round(state['progress'], 2)
    fields = {
        'matchChance': params['matchChance'],
        'interference': params['interference'],
        'trialTime': params['trialTime'],
        'levelProgress': level_progress,
    }
    if event is not None:
        fields['nBack'] = state['level']
    # Single write, only after the tombstone is stored
    game_settings_model.set_fields(**fields)

    return {
        'event': event,
        'd_prime': d_prime,
        'n_back': state['level'],
        'level_progress': level_progress,
        'params': params,
    }

"""Level/progress state machine for auto-progression.

State is (level, progress). Each scored session moves progress by a banded
delta on d', then:
  level-up:   progress >= 0.90 and level < 12  -> level + 1, progress 0
  level-down: progress == 0 and d' < 0.5 and level > 1 -> level - 1, progress 0.5
"""
from config.settings import PROGRESSION_DEFAULTS
from engine.difficulty import clamp01

ADVANCE = 'advance'
FALLBACK = 'fallback'

# Tombstone result tag for each event
EVENT_RESULTS = {
    ADVANCE: 'level-up',
    FALLBACK: 'level-down',
}


def progress_delta(d_prime, config=PROGRESSION_DEFAULTS):
    """Progress change for one session's d'. First band from the top wins."""
    for floor, delta in config['bands']:
        if d_prime >= floor:
            return delta
    return config['failure_delta']


def adjust_progress(progress, d_prime, config=PROGRESSION_DEFAULTS):
    """Apply the banded delta and clamp to [0, 1]."""
    # Deltas are whole hundredths; rounding removes float drift before threshold checks
    return round(clamp01((progress or 0.0) + progress_delta(d_prime, config)), 6)


def advance_state(level, progress, d_prime, config=PROGRESSION_DEFAULTS):
    """One score-and-adjust step, plus at most one level transition.

    Returns dict with: level, progress, event (ADVANCE, FALLBACK or None).
    """
    level = max(config['min_level'], min(int(level), config['max_level']))
    new_progress = adjust_progress(progress, d_prime, config)
    new_level = level
    event = None

    if new_progress >= config['level_up_threshold']:
        next_level = min(level + 1, config['max_level'])
        if next_level > level:
            new_level = next_level
            new_progress = 0.0
            event = ADVANCE
    elif new_progress == 0 and d_prime < config['level_down_d_prime']:
        prev_level = max(level - 1, config['min_level'])
        if prev_level < level:
            new_level = prev_level
            new_progress = config['level_down_reseed']
            event = FALLBACK

    return {'level': new_level, 'progress': new_progress, 'event': event}

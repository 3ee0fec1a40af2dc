"""Progress (0.0-1.0) -> stimulus parameters for the next session.

  matchChance  = 25 * 0.5^p          (25% -> 12.5%, exponential decay)
  interference = 35 * p^2            (0% -> 35%, late-game ramp)
  trialTime    = 2500 - 1000 * p     (2500ms -> 1500ms, linear)
"""
import math

from config.settings import DIFFICULTY_DEFAULTS


def clamp01(x):
    return max(0.0, min(1.0, float(x)))


def round_half_up(x):
    return int(math.floor(x + 0.5))


def difficulty_params(progress, curve=DIFFICULTY_DEFAULTS):
    """Map a progress value to {matchChance, interference, trialTime}.

    Progress is clamped first, so any real input is accepted.
    """
    p = clamp01(progress)
    return {
        'matchChance': round_half_up(curve['match_chance_start'] * 0.5 ** p),
        'interference': round_half_up(curve['interference_max'] * p ** 2),
        'trialTime': round_half_up(curve['trial_time_start_ms'] - curve['trial_time_span_ms'] * p),
    }

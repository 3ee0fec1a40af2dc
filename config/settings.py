"""Tessera — centralized configuration."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DB_PATH = os.environ.get('TESSERA_DB_PATH', os.path.join(BASE_DIR, 'tessera.db'))

# Settings collaborator seed value (the stored flag wins once written)
AUTO_PROGRESSION_DEFAULT = os.environ.get('AUTO_PROGRESSION', '1').lower() not in ('0', 'false', 'no', 'off')

# Daily rollover for "play time today" (local hour)
ROLLOVER_HOUR = int(os.environ.get('ROLLOVER_HOUR', '4'))

# Auto-progression: d' bands are evaluated high-to-low, first match wins
PROGRESSION_DEFAULTS = {
    'bands': (
        (2.75, 0.08),   # mastery
        (2.0, 0.04),    # sweet spot
        (1.5, 0.01),    # hanging on
        (1.0, 0.0),     # at the edge
        (0.5, -0.02),   # gentle regression
    ),
    'failure_delta': -0.06,
    'level_up_threshold': 0.90,
    'level_down_d_prime': 0.5,
    'level_down_reseed': 0.5,
    'min_level': 1,
    'max_level': 12,
    # 'tagged' counts explicit non-target entries, 'derived' uses entries - targets
    'non_target_mode': 'tagged',
}

# Progress (0-1) -> stimulus parameters
DIFFICULTY_DEFAULTS = {
    'match_chance_start': 25,
    'interference_max': 35,
    'trial_time_start_ms': 2500,
    'trial_time_span_ms': 1000,
}

# Initial game settings row
GAME_DEFAULTS = {
    'n_back': 2,
    'match_chance': 25,
    'interference': 0,
    'trial_time': 2500,
    'level_progress': 0.0,
}

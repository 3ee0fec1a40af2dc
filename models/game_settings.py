"""CRUD for the single-row game_settings table (next session's configuration)."""
from db.database import query_db, execute_db
from config.settings import GAME_DEFAULTS

# API field name -> column
FIELDS = {
    'nBack': 'n_back',
    'matchChance': 'match_chance',
    'interference': 'interference',
    'trialTime': 'trial_time',
    'levelProgress': 'level_progress',
}


def get():
    """Return the settings as API field names, or defaults if the row is missing."""
    row = query_db("SELECT * FROM game_settings WHERE id=1", one=True)
    source = row if row else GAME_DEFAULTS
    return {field: source[column] for field, column in FIELDS.items()}


def set_field(field, value):
    set_fields(**{field: value})


def set_fields(**values):
    """Overwrite the given fields in one statement."""
    unknown = set(values) - set(FIELDS)
    if unknown:
        raise KeyError(f"Unknown game settings field(s): {sorted(unknown)}")
    if not values:
        return
    assignments = ', '.join(f"{FIELDS[f]}=?" for f in values)
    execute_db(
        f"UPDATE game_settings SET {assignments}, updated_at=CURRENT_TIMESTAMP WHERE id=1",
        tuple(values.values()),
    )

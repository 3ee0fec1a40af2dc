"""CRUD for app_settings table — user-level flags."""
from db.database import query_db, execute_db
from config.settings import AUTO_PROGRESSION_DEFAULT

ENABLE_AUTO_PROGRESSION = 'enable_auto_progression'


def get(key, default=None):
    row = query_db("SELECT value FROM app_settings WHERE key=?", (key,), one=True)
    return row['value'] if row else default


def upsert(key, value):
    execute_db(
        """INSERT INTO app_settings (key, value, updated_at)
           VALUES (?, ?, CURRENT_TIMESTAMP)
           ON CONFLICT(key) DO UPDATE SET
            value=excluded.value,
            updated_at=CURRENT_TIMESTAMP""",
        (key, str(value)),
    )


def auto_progression_enabled():
    value = get(ENABLE_AUTO_PROGRESSION)
    if value is None:
        return AUTO_PROGRESSION_DEFAULT
    return value == '1'


def set_auto_progression(enabled):
    upsert(ENABLE_AUTO_PROGRESSION, '1' if enabled else '0')

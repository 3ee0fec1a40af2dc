"""CRUD for games table — append-only session history (scored games + tombstones)."""
import json
import time

from db.database import query_db, execute_db

TOMBSTONE = 'tombstone'
COMPLETED = 'completed'


def _row_to_game(row):
    """Decode the JSON columns; None passes through."""
    if row is None:
        return None
    game = dict(row)
    game['tags'] = json.loads(game['tags']) if game.get('tags') else []
    game['scores'] = json.loads(game['scores']) if game.get('scores') else None
    game['info'] = json.loads(game.pop('info_json')) if game.get('info_json') else {}
    return game


def add(record, now=None):
    """Append a history record built from a game-info dict.

    Tombstones are stored without scores or d' and must name their result.
    """
    status = record.get('status', COMPLETED)
    is_tombstone = status == TOMBSTONE
    if is_tombstone and not record.get('result'):
        raise ValueError('tombstone records require a result (level-up or level-down)')
    stored = dict(record)
    if is_tombstone:
        for key in ('scores', 'dp', 'completedTrials'):
            stored.pop(key, None)
    scores_json = json.dumps(stored['scores']) if 'scores' in stored else None

    created_at = time.time() if now is None else now
    return execute_db(
        """INSERT INTO games
           (created_at, status, result, mode, n_back, level_progress, tags,
            scores, dp, completed_trials, duration_s, info_json)
           VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
        (
            created_at,
            status,
            stored.get('result'),
            stored.get('mode'),
            stored.get('nBack'),
            stored.get('levelProgress'),
            json.dumps(list(stored.get('tags') or [])),
            scores_json,
            stored.get('dp'),
            stored.get('completedTrials'),
            float(stored.get('durationSeconds') or 0),
            json.dumps(stored, default=list),
        ),
    )


def get_by_id(game_id):
    return _row_to_game(query_db("SELECT * FROM games WHERE id=?", (game_id,), one=True))


def get_since_hours(hours=48, now=None):
    """All history (tombstones included) from the last N hours, newest first."""
    now = time.time() if now is None else now
    rows = query_db(
        "SELECT * FROM games WHERE created_at >= ? ORDER BY created_at DESC, id DESC",
        (now - hours * 3600,),
    )
    return [_row_to_game(r) for r in rows]


def get_last_recent():
    """Most recent non-tombstone game, or None."""
    row = query_db(
        "SELECT * FROM games WHERE status != ? ORDER BY created_at DESC, id DESC LIMIT 1",
        (TOMBSTONE,), one=True,
    )
    return _row_to_game(row)


def play_time_since(cutoff):
    """Summed session duration (seconds) of non-tombstone games since cutoff."""
    row = query_db(
        "SELECT COALESCE(SUM(duration_s), 0) as total FROM games WHERE created_at >= ? AND status != ?",
        (cutoff, TOMBSTONE), one=True,
    )
    return float(row['total']) if row else 0.0


def get_history(limit=30, offset=0):
    rows = query_db(
        "SELECT * FROM games ORDER BY created_at DESC, id DESC LIMIT ? OFFSET ?",
        (limit, offset),
    )
    return [_row_to_game(r) for r in rows]


def count():
    row = query_db("SELECT COUNT(*) as cnt FROM games", one=True)
    return row['cnt'] if row else 0

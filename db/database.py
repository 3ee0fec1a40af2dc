"""SQLite database connection helper and initialization."""
import logging
import os
import sqlite3

from config.settings import DB_PATH, GAME_DEFAULTS

log = logging.getLogger(__name__)
SCHEMA_PATH = os.path.join(os.path.dirname(__file__), 'schema.sql')


def get_db():
    conn = sqlite3.connect(DB_PATH, timeout=5)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def _column_exists(conn, table, column):
    cur = conn.execute(f"PRAGMA table_info({table})")
    return any(row[1] == column for row in cur.fetchall())


def _migrate(conn):
    """Add columns to existing tables (safe to run repeatedly)."""
    migrations = [
        ('games', 'mode', 'TEXT'),
        ('games', 'duration_s', 'REAL DEFAULT 0'),
        ('game_settings', 'level_progress', 'REAL NOT NULL DEFAULT 0'),
    ]
    for table, column, col_type in migrations:
        if not _column_exists(conn, table, column):
            conn.execute(f"ALTER TABLE {table} ADD COLUMN {column} {col_type}")
            log.info("Migration: added %s.%s", table, column)
    conn.commit()


def _seed(conn):
    """Insert the single game settings row if it is missing."""
    conn.execute(
        """INSERT OR IGNORE INTO game_settings
           (id, n_back, match_chance, interference, trial_time, level_progress)
           VALUES (1, ?, ?, ?, ?, ?)""",
        (GAME_DEFAULTS['n_back'], GAME_DEFAULTS['match_chance'],
         GAME_DEFAULTS['interference'], GAME_DEFAULTS['trial_time'],
         GAME_DEFAULTS['level_progress']),
    )
    conn.commit()


def init_db():
    conn = get_db()
    try:
        with open(SCHEMA_PATH, 'r') as f:
            schema = f.read()
        # Tables first, then migrations, then indexes (indexes may need new columns)
        for stmt in schema.split(';'):
            stmt = stmt.strip()
            if not stmt:
                continue
            if stmt.upper().startswith('CREATE TABLE'):
                conn.execute(stmt)
        conn.commit()
        _migrate(conn)
        for stmt in schema.split(';'):
            stmt = stmt.strip()
            if not stmt:
                continue
            if not stmt.upper().startswith('CREATE TABLE'):
                conn.execute(stmt)
        conn.commit()
        _seed(conn)
        log.info("Database initialized at %s", DB_PATH)
    finally:
        conn.close()


def query_db(sql, params=(), one=False):
    conn = get_db()
    try:
        cur = conn.execute(sql, params)
        rows = [dict(row) for row in cur.fetchall()]
        return rows[0] if (one and rows) else (None if one else rows)
    except sqlite3.Error as e:
        log.error("query_db error: %s | SQL: %s", e, sql[:200])
        raise
    finally:
        conn.close()


def execute_db(sql, params=()):
    conn = get_db()
    try:
        cur = conn.execute(sql, params)
        conn.commit()
        return cur.lastrowid
    except sqlite3.Error as e:
        log.error("execute_db error: %s | SQL: %s", e, sql[:200])
        raise
    finally:
        conn.close()

# settings.py
"""Contains global settings"""

from dataclasses import dataclass, field
import os
import sqlite3
from typing import FrozenSet, Optional, Tuple

from dotenv import load_dotenv

from resources import exceptions


ENV_VARIABLE_MISSING = (
    'Required setting {var} in the .env file is missing. Please check your default.env file and update your .env file '
    'accordingly.'
)


# Files and directories
BOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DB_FILE = os.path.join(BOT_DIR, 'database/classicdb_bot.db')
LOG_FILE = os.path.join(BOT_DIR, 'logs/discord.log')


AVAILABLE_PARSERS = ('classicdb', 'itemization')
DEFAULT_PARSER = 'classicdb'
DEFAULT_HOST = 'https://classicdb.ch'
DEFAULT_PREFIX = '!'
EMBED_COLOR = 0xA335EE


@dataclass(frozen=True)
class Config():
    """Settings loaded once at startup. Read-only afterwards."""
    token: str
    host: str = DEFAULT_HOST
    override_ids: FrozenSet[int] = field(default_factory=frozenset)
    available_parsers: Tuple[str, ...] = AVAILABLE_PARSERS
    db_file: str = DEFAULT_DB_FILE
    log_file: str = LOG_FILE
    debug_mode: bool = False
    prefix: str = DEFAULT_PREFIX


def load_config(env_file: Optional[str] = None) -> Config:
    """Reads the .env file and returns the bot configuration.

    Raises
    ------
    ConfigError if a required variable is missing or has the wrong format.
    """
    load_dotenv(env_file)

    token = os.getenv('DISCORD_TOKEN')
    if not token:
        raise exceptions.ConfigError(ENV_VARIABLE_MISSING.format(var='DISCORD_TOKEN'))

    host = os.getenv('HOST') or DEFAULT_HOST
    host = host.rstrip('/')

    override_ids = os.getenv('OVERRIDE_IDS')
    if not override_ids:
        override_ids = frozenset()
    else:
        try:
            override_ids = frozenset(int(user_id.strip()) for user_id in override_ids.split(',') if user_id.strip())
        except ValueError:
            raise exceptions.ConfigError('At least one id in the .env variable OVERRIDE_IDS is not a number.')

    return Config(
        token = token,
        host = host,
        override_ids = override_ids,
        db_file = os.getenv('DB_FILE') or DEFAULT_DB_FILE,
        debug_mode = True if os.getenv('DEBUG_MODE') == 'ON' else False,
        prefix = os.getenv('PREFIX') or DEFAULT_PREFIX,
    )


def open_database(db_file: str) -> sqlite3.Connection:
    """Connects to the sqlite database and creates missing tables."""
    database = sqlite3.connect(db_file, isolation_level=None, detect_types=sqlite3.PARSE_DECLTYPES)
    database.row_factory = sqlite3.Row
    cur = database.cursor()
    cur.execute(
        f'CREATE TABLE IF NOT EXISTS guilds (guild_id INTEGER PRIMARY KEY, '
        f'parser TEXT NOT NULL DEFAULT \'{DEFAULT_PARSER}\')'
    )
    cur.execute('CREATE TABLE IF NOT EXISTS errors (date_time TEXT NOT NULL, error TEXT NOT NULL)')
    return database

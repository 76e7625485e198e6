# errors.py
"""Provides access to the table "errors" in the database"""

import sqlite3

from discord import utils

from resources import logs


async def log_error(database: sqlite3.Connection, error: str) -> None:
    """Writes an error to the table "errors" and to the log file.
    If the database itself fails, the error only goes to the log file.
    """
    logs.logger.error(error)
    table = 'errors'
    sql = f'INSERT INTO {table} (date_time, error) VALUES (?, ?)'
    try:
        cur = database.cursor()
        cur.execute(sql, (utils.utcnow().isoformat(sep=' '), error))
    except sqlite3.Error as db_error:
        logs.logger.error(f'Error inserting error into database.\nError: {db_error}\nSQL: {sql}')

# guilds.py
"""Provides access to the table "guilds" in the database"""

from dataclasses import dataclass
import sqlite3

import discord

from database import errors
from resources import exceptions, settings, strings


# Containers
@dataclass()
class Guild():
    """Object that represents a record from table "guilds"."""
    guild_id: int
    parser: str


# Miscellaneous functions
async def _dict_to_guild(database: sqlite3.Connection, record: dict) -> Guild:
    """Creates a Guild object from a database record

    Raises
    ------
    LookupError if something goes wrong reading the dict. Also logs this error to the database.
    """
    function_name = '_dict_to_guild'
    try:
        guild = Guild(
            guild_id = record['guild_id'],
            parser = record['parser'],
        )
    except Exception as error:
        await errors.log_error(
            database, strings.INTERNAL_ERROR_DICT_TO_OBJECT.format(function=function_name, record=record)
        )
        raise LookupError(error)

    return guild


# Read data
async def get_guild(database: sqlite3.Connection, guild_id: int) -> Guild:
    """Gets the settings of a guild.

    Raises
    ------
    sqlite3.Error if something happened within the database.
    exceptions.NoDataFoundError if no guild was found.
    LookupError if something goes wrong reading the dict.
    Also logs all errors to the database.
    """
    table = 'guilds'
    function_name = 'get_guild'
    sql = f'SELECT * FROM {table} WHERE guild_id=?'
    try:
        cur = database.cursor()
        cur.execute(sql, (guild_id,))
        record = cur.fetchone()
    except sqlite3.Error as error:
        await errors.log_error(
            database, strings.INTERNAL_ERROR_SQLITE3.format(error=error, table=table, function=function_name, sql=sql)
        )
        raise
    if not record:
        raise exceptions.NoDataFoundError(f'No guild data found in database for guild "{guild_id}".')
    guild = await _dict_to_guild(database, dict(record))

    return guild


async def get_parser(database: sqlite3.Connection, guild_id: int) -> str:
    """Returns the parser of a guild or the default parser if the guild has no record."""
    try:
        guild = await get_guild(database, guild_id)
    except exceptions.NoDataFoundError:
        return settings.DEFAULT_PARSER
    return guild.parser


# Write data
async def insert_guild(database: sqlite3.Connection, guild_id: int,
                       parser: str = settings.DEFAULT_PARSER) -> Guild:
    """Inserts a record in the table "guilds".

    Raises
    ------
    sqlite3.Error if something happened within the database.
    Also logs all errors to the database.
    """
    table = 'guilds'
    function_name = 'insert_guild'
    sql = f'INSERT INTO {table} (guild_id, parser) VALUES (?, ?)'
    try:
        cur = database.cursor()
        cur.execute(sql, (guild_id, parser))
    except sqlite3.Error as error:
        await errors.log_error(
            database, strings.INTERNAL_ERROR_SQLITE3.format(error=error, table=table, function=function_name, sql=sql)
        )
        raise

    return await get_guild(database, guild_id)


async def set_parser(database: sqlite3.Connection, guild: discord.Guild, parser: str) -> Guild:
    """Stores the parser of a guild. Creates the guild record if it doesn't exist yet.

    Raises
    ------
    sqlite3.Error if something happened within the database.
    Also logs all errors to the database.
    """
    table = 'guilds'
    function_name = 'set_parser'
    sql = (
        f'INSERT INTO {table} (guild_id, parser) VALUES (?, ?) '
        f'ON CONFLICT(guild_id) DO UPDATE SET parser = excluded.parser'
    )
    try:
        cur = database.cursor()
        cur.execute(sql, (guild.id, parser))
    except sqlite3.Error as error:
        await errors.log_error(
            database, strings.INTERNAL_ERROR_SQLITE3.format(error=error, table=table, function=function_name, sql=sql)
        )
        raise

    return await get_guild(database, guild.id)

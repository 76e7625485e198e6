# commands.py
"""Contains the text commands"""

import sqlite3

import discord

from database import guilds
from resources import logs, settings, strings


# --- Commands ---
async def execute(command_name: str, message: discord.Message, guild: discord.Guild,
                  config: settings.Config, database: sqlite3.Connection) -> str:
    """Runs a text command and returns the answer"""
    if command_name == 'set_parser':
        return await command_set_parser(message, guild, config, database)
    elif command_name == 'help':
        return strings.HELP_TEXT
    else:
        return strings.MSG_UNRECOGNIZED_COMMAND.format(command=command_name, help=strings.HELP_TEXT)


async def command_set_parser(message: discord.Message, guild: discord.Guild,
                             config: settings.Config, database: sqlite3.Connection) -> str:
    """Set parser command. Only the guild owner and override users can use this."""
    is_owner = message.author.id == guild.owner_id
    is_override = message.author.id in config.override_ids
    if not is_owner and not is_override:
        return strings.MSG_ONLY_OWNER
    arguments = message.content.split(' ')
    parser = arguments[2] if len(arguments) > 2 else ''
    if not parser or parser not in config.available_parsers:
        return strings.MSG_AVAILABLE_PARSERS
    try:
        await guilds.set_parser(database, guild, parser)
    except Exception as error:
        logs.logger.error(f'Error updating parser of guild {guild.id}: {error}')
        return strings.MSG_PARSER_UPDATE_ERROR
    logs.logger.info(f'Parser of guild {guild.id} set to {parser} by user {message.author.id}')
    return strings.MSG_PARSER_UPDATED.format(parser=parser)

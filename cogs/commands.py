# commands.py
"""Contains the text commands"""

import sqlite3

import discord
from discord.ext import commands

from content import commands as commands_content
from resources import functions, logs, settings, strings


class CommandsCog(commands.Cog):
    """Cog with the text commands"""
    def __init__(self, bot: commands.Bot, config: settings.Config, database: sqlite3.Connection):
        self.bot = bot
        self.config = config
        self.database = database

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """Runs when a message is sent in a channel."""
        if message.author.bot: return
        arguments = message.content.split(' ')
        if arguments[0] != self.config.prefix or len(arguments) < 2 or not arguments[1]: return
        command_name = arguments[1]
        identity = functions.resolve_identity(message.channel, str(message.author))
        logs.logger.info(
            f'Command "{command_name}" by {message.author.id} in {identity.guild_name} / {identity.name}'
        )
        if message.guild is None and command_name == 'set_parser':
            await message.channel.send(strings.MSG_GUILD_ONLY)
            return
        answer = await commands_content.execute(command_name, message, message.guild, self.config, self.database)
        await message.channel.send(answer)


# Initialization
def setup(bot):
    config = settings.load_config()
    logs.setup_logging(config.log_file, config.debug_mode)
    bot.add_cog(CommandsCog(bot, config, settings.open_database(config.db_file)))

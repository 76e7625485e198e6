# lookup.py
"""Contains item and spell lookup commands"""

import discord
from discord.commands import slash_command, Option
from discord.ext import commands

from content import lookup
from resources import logs, settings


class LookupCog(commands.Cog):
    """Cog with lookup commands"""
    def __init__(self, bot: commands.Bot, config: settings.Config):
        self.bot = bot
        self.config = config

    @slash_command(name='icon', description='Shows the icon of an item or spell')
    async def command_icon(
        self,
        ctx: discord.ApplicationContext,
        id: Option(str, 'Item or spell id'),
        spell: Option(bool, 'Look up a spell instead of an item', default=False),
    ) -> None:
        """Icon command"""
        await lookup.command_icon(ctx, self.config, id, spell)


# Initialization
def setup(bot):
    config = settings.load_config()
    logs.setup_logging(config.log_file, config.debug_mode)
    bot.add_cog(LookupCog(bot, config))

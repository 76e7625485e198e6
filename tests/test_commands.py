"""Tests for the text commands and the commands cog."""

import sqlite3
from unittest.mock import AsyncMock

import discord
import pytest

from cogs.commands import CommandsCog
from content import commands
from database import guilds
from resources import strings


class TestSetParser:
    """set_parser command."""

    async def test_denied_for_other_users(self, config, database, guild, make_message, monkeypatch) -> None:
        set_parser = AsyncMock()
        monkeypatch.setattr(guilds, 'set_parser', set_parser)
        message = make_message(2, '! set_parser classicdb', guild)
        answer = await commands.execute('set_parser', message, guild, config, database)
        assert answer == 'Only the owner is allowed to change this.'
        set_parser.assert_not_awaited()

    async def test_owner_updates_parser(self, config, database, guild, make_message, monkeypatch) -> None:
        set_parser = AsyncMock()
        monkeypatch.setattr(guilds, 'set_parser', set_parser)
        message = make_message(1, '! set_parser classicdb', guild)
        answer = await commands.execute('set_parser', message, guild, config, database)
        assert answer == 'Updated parser to `classicdb`.'
        set_parser.assert_awaited_once_with(database, guild, 'classicdb')

    async def test_override_user_updates_parser(self, config, database, guild, make_message) -> None:
        message = make_message(999, '! set_parser itemization', guild)
        answer = await commands.execute('set_parser', message, guild, config, database)
        assert answer == 'Updated parser to `itemization`.'
        assert await guilds.get_parser(database, guild.id) == 'itemization'

    @pytest.mark.parametrize('content', ['! set_parser', '! set_parser wowhead', '! set_parser ', '! set_parser CLASSICDB'])
    async def test_invalid_parser(self, config, database, guild, make_message, monkeypatch, content) -> None:
        set_parser = AsyncMock()
        monkeypatch.setattr(guilds, 'set_parser', set_parser)
        message = make_message(1, content, guild)
        answer = await commands.execute('set_parser', message, guild, config, database)
        assert answer == strings.MSG_AVAILABLE_PARSERS
        set_parser.assert_not_awaited()

    async def test_storage_error(self, config, database, guild, make_message, monkeypatch) -> None:
        set_parser = AsyncMock(side_effect=sqlite3.OperationalError('database is locked'))
        monkeypatch.setattr(guilds, 'set_parser', set_parser)
        message = make_message(1, '! set_parser classicdb', guild)
        answer = await commands.execute('set_parser', message, guild, config, database)
        assert answer == 'An error occurred while updating parser.'
        set_parser.assert_awaited_once()


class TestHelp:
    """help and unknown commands."""

    async def test_help(self, config, database, guild, make_message) -> None:
        answer = await commands.execute('help', make_message(2, '! help', guild), guild, config, database)
        assert answer == strings.HELP_TEXT
        assert 'set_parser' in answer

    async def test_unrecognized_command(self, config, database, guild, make_message) -> None:
        answer = await commands.execute('xyz', make_message(2, '! xyz', guild), guild, config, database)
        assert 'Unrecognized command' in answer
        assert '`xyz`' in answer
        assert answer.endswith(strings.HELP_TEXT)


class TestCommandsCog:
    """Message listener."""

    @pytest.fixture
    def cog(self, config, database) -> CommandsCog:
        return CommandsCog(bot=None, config=config, database=database)

    async def test_sends_answer(self, cog, guild, make_message) -> None:
        message = make_message(2, '! help', guild)
        await cog.on_message(message)
        message.channel.send.assert_awaited_once_with(strings.HELP_TEXT)

    async def test_sets_parser(self, cog, database, guild, make_message) -> None:
        message = make_message(1, '! set_parser itemization', guild)
        await cog.on_message(message)
        message.channel.send.assert_awaited_once_with('Updated parser to `itemization`.')
        assert await guilds.get_parser(database, 42) == 'itemization'

    @pytest.mark.parametrize('content', ['hello there', '!', '!help', '! '])
    async def test_ignores_other_messages(self, cog, guild, make_message, content) -> None:
        message = make_message(2, content, guild)
        await cog.on_message(message)
        message.channel.send.assert_not_awaited()

    async def test_ignores_bots(self, cog, guild, make_message) -> None:
        message = make_message(2, '! help', guild)
        message.author.bot = True
        await cog.on_message(message)
        message.channel.send.assert_not_awaited()

    async def test_help_in_private_dm(self, cog, make_message) -> None:
        message = make_message(2, '! help', None, discord.ChannelType.private)
        await cog.on_message(message)
        message.channel.send.assert_awaited_once_with(strings.HELP_TEXT)

    async def test_unrecognized_command_in_group_dm(self, cog, make_message) -> None:
        message = make_message(2, '! xyz', None, discord.ChannelType.group)
        await cog.on_message(message)
        answer = message.channel.send.await_args.args[0]
        assert 'Unrecognized command' in answer

    async def test_set_parser_in_private_dm(self, cog, make_message, monkeypatch) -> None:
        set_parser = AsyncMock()
        monkeypatch.setattr(guilds, 'set_parser', set_parser)
        message = make_message(2, '! set_parser classicdb', None, discord.ChannelType.private)
        await cog.on_message(message)
        message.channel.send.assert_awaited_once_with(strings.MSG_GUILD_ONLY)
        set_parser.assert_not_awaited()

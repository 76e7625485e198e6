"""Shared fixtures for tests."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from resources import settings


@pytest.fixture
def config() -> settings.Config:
    """Configuration with one override user."""
    return settings.Config(token='token', host='http://h', override_ids=frozenset({999}))


@pytest.fixture
def database():
    """In-memory database with all tables."""
    database = settings.open_database(':memory:')
    yield database
    database.close()


@pytest.fixture
def guild() -> MagicMock:
    guild = MagicMock()
    guild.id = 42
    guild.name = 'Stormwind'
    guild.owner_id = 1
    return guild


@pytest.fixture
def make_message():
    """Factory for messages sent by a human user."""
    def _make_message(author_id: int, content: str, guild=None,
                      channel_type=discord.ChannelType.text) -> MagicMock:
        message = MagicMock()
        message.author.id = author_id
        message.author.bot = False
        message.author.__str__.return_value = f'user{author_id}'
        message.content = content
        message.guild = guild
        message.channel.type = channel_type
        message.channel.guild = guild
        message.channel.send = AsyncMock()
        return message
    return _make_message

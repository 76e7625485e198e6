# functions.py

from typing import Awaitable, Callable, List, NamedTuple, Optional, Union

import aiohttp
import discord

from resources import enums, logs, regex, strings


# Containers
class ChannelIdentity(NamedTuple):
    """Display identity of the channel a message was sent in"""
    name: str
    guild_name: str
    guild_id: Optional[Union[int, str]]
    owner_id: Optional[Union[int, str]]


# --- Code tables ---
ITEM_QUALITIES = {
    'q0': enums.ItemQuality.POOR,
    'q1': enums.ItemQuality.COMMON,
    'q2': enums.ItemQuality.UNCOMMON,
    'q3': enums.ItemQuality.RARE,
    'q4': enums.ItemQuality.EPIC,
    'q5': enums.ItemQuality.LEGENDARY,
    'q6': enums.ItemQuality.ARTIFACT,
    'q7': enums.ItemQuality.BLIZZARD,
}

# There are no classes c6 and c10 in the game data
CHARACTER_CLASSES = {
    'c1': enums.CharacterClass.WARRIOR,
    'c2': enums.CharacterClass.PALADIN,
    'c3': enums.CharacterClass.HUNTER,
    'c4': enums.CharacterClass.ROGUE,
    'c5': enums.CharacterClass.PRIEST,
    'c7': enums.CharacterClass.SHAMAN,
    'c8': enums.CharacterClass.MAGE,
    'c9': enums.CharacterClass.WARLOCK,
    'c11': enums.CharacterClass.DRUID,
}

ITEM_TYPE_ITEM = 3


def quality_from_code(code: str) -> enums.ItemQuality:
    """Converts a database CSS class (q0-q7) into an ItemQuality. Returns NOQUALITY if the class is unknown."""
    return ITEM_QUALITIES.get(code, enums.ItemQuality.NOQUALITY)


def class_from_code(code: str) -> enums.CharacterClass:
    """Converts a database CSS class (c1-c11) into a CharacterClass. Returns NOCLASS if the class is unknown."""
    return CHARACTER_CLASSES.get(code, enums.CharacterClass.NOCLASS)


def icon_url(icon_name: str, host: str) -> str:
    """Returns the absolute URL of a large icon based on its name in the page JavaScript."""
    return strings.ICON_URL.format(host=host, icon_name=icon_name.lower())


def find_first_item_index(item_details: List[List[int]]) -> int:
    """Returns the index of the first row with item type 3 (Item). Returns -1 if there is none.

    Arguments
    ---------
    item_details: Rows of item type, id, quality and thumbnail.
    """
    for index, row in enumerate(item_details):
        if row and row[0] == ITEM_TYPE_ITEM:
            return index
    return -1


# --- Thumbnails ---
async def fetch_html(url: str) -> str:
    """Fetches a page and returns its body.

    Raises
    ------
    aiohttp.ClientError if the request fails or the response has an error status.
    """
    async with aiohttp.ClientSession() as session:
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.text()


def extract_icon_name(html: str) -> str:
    """Extracts the icon name from the first page line calling Icon.create.
    Returns an empty string if there is no such line or the line doesn't look like Icon.create('name', ...).
    """
    lines = [line for line in html.split('\n') if strings.ICON_MARKER in line]
    if not lines: return ''
    icon_call = lines[0].strip().split(strings.ICON_MARKER)[-1]
    quoted_parts = icon_call.split("'")
    if len(quoted_parts) < 2:
        logs.logger.warning(f'Unexpected {strings.ICON_MARKER} call: {lines[0].strip()}')
        return ''
    icon_name = quoted_parts[1]
    if not icon_name:
        logs.logger.warning(f'Empty icon name in {strings.ICON_MARKER} call: {lines[0].strip()}')
    return icon_name


async def resolve_thumbnail(id: str, is_spell: bool, host: str,
                            fetch: Callable[[str], Awaitable[str]] = fetch_html) -> str:
    """Finds the icon URL of an item or spell.

    Returns
    -------
    The absolute icon URL or an empty string if no icon was found.

    Raises
    ------
    Whatever fetch raises. With the default fetch, aiohttp.ClientError.
    """
    url = strings.THUMBNAIL_PAGE_URL.format(host=host, type='spell' if is_spell else 'item', id=id)
    html = await fetch(url)
    icon_name = extract_icon_name(html)
    if not icon_name:
        logs.logger.debug(f'No icon found on {url}')
        return ''
    return icon_url(icon_name, host)


# --- Channels ---
def resolve_identity(channel: Union[discord.DMChannel, discord.GroupChannel, discord.TextChannel],
                     author_label: str) -> ChannelIdentity:
    """Returns the names and ids identifying the channel and guild of a message."""
    if channel.type == discord.ChannelType.private:
        private_dm = strings.CHANNEL_PRIVATE_DM.format(author=author_label)
        return ChannelIdentity(name=private_dm, guild_name=private_dm, guild_id=private_dm, owner_id=private_dm)
    elif channel.type == discord.ChannelType.group:
        return ChannelIdentity(name=strings.CHANNEL_GROUP_DM, guild_name=strings.CHANNEL_GROUP_DM,
                               guild_id=None, owner_id=None)
    else:
        return ChannelIdentity(name=channel.name, guild_name=channel.guild.name,
                               guild_id=channel.guild.id, owner_id=channel.guild.owner_id)


# --- Validation ---
def is_integer_literal(string: str) -> bool:
    """Checks if a string is an integer like "0", "-42" or "+1337".
    Note that single digits other than 0 are not accepted.
    """
    if not isinstance(string, str): return False
    return regex.INTEGER_LITERAL.fullmatch(string) is not None

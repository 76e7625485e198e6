# lookup.py
"""Contains item and spell lookup commands"""

import aiohttp
import discord

from resources import functions, logs, settings, strings


# --- Commands ---
async def command_icon(ctx: discord.ApplicationContext, config: settings.Config, id: str,
                       spell: bool = False) -> None:
    """Icon command"""
    id = id.strip()
    if not functions.is_integer_literal(id) or id.startswith('-'):
        await ctx.respond(strings.MSG_INVALID_ID.format(id=id), ephemeral=True)
        return
    await ctx.defer()
    try:
        icon = await functions.resolve_thumbnail(id, spell, config.host)
    except aiohttp.ClientError as error:
        logs.logger.error(f'Error fetching icon for {id}: {error}')
        await ctx.respond(strings.MSG_ERROR)
        return
    if not icon:
        await ctx.respond(strings.MSG_NO_ICON_FOUND.format(type='spell' if spell else 'item', id=id))
        return
    embed = await embed_icon(config, id, icon, spell)
    await ctx.respond(embed=embed)


# --- Embeds ---
async def embed_icon(config: settings.Config, id: str, icon: str, spell: bool) -> discord.Embed:
    """Icon embed"""
    page_type = 'spell' if spell else 'item'
    embed = discord.Embed(
        color = settings.EMBED_COLOR,
        title = f'{page_type.capitalize()} {id}',
        url = strings.THUMBNAIL_PAGE_URL.format(host=config.host, type=page_type, id=id),
    )
    embed.set_thumbnail(url=icon)
    return embed

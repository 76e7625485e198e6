# enums.py
"""Contains enumerations for game data shown in item and spell tooltips"""

from enum import Enum


class ItemQuality(Enum):
    """Item rarity as shown by the colour of an item name"""
    POOR = 'poor'
    COMMON = 'common'
    UNCOMMON = 'uncommon'
    RARE = 'rare'
    EPIC = 'epic'
    LEGENDARY = 'legendary'
    ARTIFACT = 'artifact'
    BLIZZARD = 'blizzard'
    NOQUALITY = 'noquality'


class CharacterClass(Enum):
    WARRIOR = 'warrior'
    PALADIN = 'paladin'
    HUNTER = 'hunter'
    ROGUE = 'rogue'
    PRIEST = 'priest'
    SHAMAN = 'shaman'
    MAGE = 'mage'
    WARLOCK = 'warlock'
    DRUID = 'druid'
    NOCLASS = 'noclass'

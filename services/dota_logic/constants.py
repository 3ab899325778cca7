# services/dota_logic/constants.py
from types import MappingProxyType
from typing import Mapping, Tuple

# All Dota 2 roles found in OpenDota hero data, in display order.
ROLES: Tuple[str, ...] = (
    'Carry',
    'Support',
    'Nuker',
    'Disabler',
    'Initiator',
    'Durable',
    'Escape',
    'Pusher',
)

ATTR_LABELS: Mapping[str, str] = MappingProxyType({
    'str': 'Strength',
    'agi': 'Agility',
    'int': 'Intelligence',
    'all': 'Universal',
})

# heroStats image paths are relative to this host.
HERO_IMAGE_CDN = "https://cdn.dota2.com"

RADIANT = "Radiant"
DIRE = "Dire"

# services/dota_logic/game_tables.py
"""
Static lookup tables mirroring OpenDota's `dotaconstants`.

Items resolve in two steps, id -> internal key -> display name, exactly as the
upstream constants are split. Recipes only exist in the id table; those
render as placeholders. Retired items stay so older matches still resolve.
"""
from types import MappingProxyType
from typing import Mapping

HERO_NAMES: Mapping[int, str] = MappingProxyType({
    1: "Anti-Mage", 2: "Axe", 3: "Bane", 4: "Bloodseeker", 5: "Crystal Maiden",
    6: "Drow Ranger", 7: "Earthshaker", 8: "Juggernaut", 9: "Mirana", 10: "Morphling",
    11: "Shadow Fiend", 12: "Phantom Lancer", 13: "Puck", 14: "Pudge", 15: "Razor",
    16: "Sand King", 17: "Storm Spirit", 18: "Sven", 19: "Tiny", 20: "Vengeful Spirit",
    21: "Windranger", 22: "Zeus", 23: "Kunkka", 25: "Lina", 26: "Lion",
    27: "Shadow Shaman", 28: "Slardar", 29: "Tidehunter", 30: "Witch Doctor", 31: "Lich",
    32: "Riki", 33: "Enigma", 34: "Tinker", 35: "Sniper", 36: "Necrophos",
    37: "Warlock", 38: "Beastmaster", 39: "Queen of Pain", 40: "Venomancer", 41: "Faceless Void",
    42: "Wraith King", 43: "Death Prophet", 44: "Phantom Assassin", 45: "Pugna", 46: "Templar Assassin",
    47: "Viper", 48: "Luna", 49: "Dragon Knight", 50: "Dazzle", 51: "Clockwerk",
    52: "Leshrac", 53: "Nature's Prophet", 54: "Lifestealer", 55: "Dark Seer", 56: "Clinkz",
    57: "Omniknight", 58: "Enchantress", 59: "Huskar", 60: "Night Stalker", 61: "Broodmother",
    62: "Bounty Hunter", 63: "Weaver", 64: "Jakiro", 65: "Batrider", 66: "Chen",
    67: "Spectre", 68: "Ancient Apparition", 69: "Doom", 70: "Ursa", 71: "Spirit Breaker",
    72: "Gyrocopter", 73: "Alchemist", 74: "Invoker", 75: "Silencer", 76: "Outworld Destroyer",
    77: "Lycan", 78: "Brewmaster", 79: "Shadow Demon", 80: "Lone Druid", 81: "Chaos Knight",
    82: "Meepo", 83: "Treant Protector", 84: "Ogre Magi", 85: "Undying", 86: "Rubick",
    87: "Disruptor", 88: "Nyx Assassin", 89: "Naga Siren", 90: "Keeper of the Light", 91: "Io",
    92: "Visage", 93: "Slark", 94: "Medusa", 95: "Troll Warlord", 96: "Centaur Warrunner",
    97: "Magnus", 98: "Timbersaw", 99: "Bristleback", 100: "Tusk", 101: "Skywrath Mage",
    102: "Abaddon", 103: "Elder Titan", 104: "Legion Commander", 105: "Techies", 106: "Ember Spirit",
    107: "Earth Spirit", 108: "Underlord", 109: "Terrorblade", 110: "Phoenix", 111: "Oracle",
    112: "Winter Wyvern", 113: "Arc Warden", 114: "Monkey King", 119: "Dark Willow", 120: "Pangolier",
    121: "Grimstroke", 123: "Hoodwink", 126: "Void Spirit", 128: "Snapfire", 129: "Mars",
    131: "Ringmaster", 135: "Dawnbreaker", 136: "Marci", 137: "Primal Beast", 138: "Muerta",
    145: "Kez", 155: "Largo",
})

ITEM_IDS: Mapping[int, str] = MappingProxyType({
    1: "blink", 2: "blades_of_attack", 3: "broadsword", 4: "chainmail", 5: "claymore",
    6: "helm_of_iron_will", 7: "javelin", 8: "mithril_hammer", 9: "platemail", 10: "quarterstaff",
    11: "quelling_blade", 12: "ring_of_protection", 13: "gauntlets", 14: "slippers", 15: "mantle",
    16: "branches", 17: "belt_of_strength", 18: "boots_of_elves", 19: "robe", 20: "circlet",
    21: "ogre_axe", 22: "blade_of_alacrity", 23: "staff_of_wizardry", 24: "ultimate_orb", 25: "gloves",
    26: "lifesteal", 27: "ring_of_regen", 28: "sobi_mask", 29: "boots", 30: "gem",
    31: "cloak", 32: "talisman_of_evasion", 33: "cheese", 34: "magic_stick", 35: "recipe_magic_wand",
    36: "magic_wand", 37: "ghost", 38: "clarity", 39: "flask", 40: "dust",
    41: "bottle", 42: "ward_observer", 43: "ward_sentry", 44: "tango", 46: "tpscroll",
    47: "recipe_travel_boots", 48: "travel_boots", 50: "phase_boots", 51: "demon_edge", 52: "eagle",
    53: "reaver", 54: "relic", 55: "hyperstone", 56: "ring_of_health", 57: "void_stone",
    58: "mystic_staff", 59: "energy_booster", 60: "point_booster", 61: "vitality_booster", 63: "power_treads",
    64: "recipe_hand_of_midas", 65: "hand_of_midas", 67: "oblivion_staff", 69: "pers", 71: "poor_mans_shield",
    72: "recipe_bracer", 73: "bracer", 74: "recipe_wraith_band", 75: "wraith_band", 76: "recipe_null_talisman",
    77: "null_talisman", 79: "mekansm", 81: "vladmir", 86: "buckler", 88: "ring_of_basilius",
    90: "pipe", 92: "urn_of_shadows", 94: "headdress", 96: "sheepstick", 98: "orchid",
    100: "cyclone", 102: "force_staff", 104: "dagon", 108: "ultimate_scepter", 110: "refresher",
    112: "assault", 114: "heart", 116: "black_king_bar", 117: "aegis", 119: "shivas_guard",
    121: "bloodstone", 123: "sphere", 125: "vanguard", 127: "blade_mail", 129: "soul_booster",
    131: "hood_of_defiance", 133: "rapier", 135: "monkey_king_bar", 137: "radiance", 139: "butterfly",
    141: "greater_crit", 143: "basher", 145: "bfury", 147: "manta", 149: "lesser_crit",
    151: "armlet", 152: "invis_sword", 154: "sange_and_yasha", 156: "satanic", 158: "mjollnir",
    160: "skadi", 162: "sange", 164: "helm_of_the_dominator", 166: "maelstrom", 168: "desolator",
    170: "yasha", 172: "mask_of_madness", 174: "diffusal_blade", 176: "ethereal_blade", 178: "soul_ring",
    180: "arcane_boots", 181: "orb_of_venom", 182: "stout_shield", 185: "ancient_janggo", 187: "medallion_of_courage",
    188: "smoke_of_deceit", 190: "veil_of_discord", 206: "rod_of_atos", 208: "abyssal_blade", 210: "heavens_halberd",
    212: "ring_of_aquila", 214: "tranquil_boots", 215: "shadow_amulet", 216: "enchanted_mango", 218: "ward_dispenser",
    220: "travel_boots_2", 223: "meteor_hammer", 225: "nullifier", 226: "lotus_orb", 229: "solar_crest",
    231: "guardian_greaves", 232: "aether_lens", 235: "octarine_core", 236: "dragon_lance", 237: "faerie_fire",
    240: "blight_stone", 241: "tango_single", 242: "crimson_guard", 244: "wind_lace", 247: "moon_shard",
    249: "silver_edge", 250: "bloodthorn", 252: "echo_sabre", 254: "glimmer_cape", 256: "aeon_disk",
    257: "tome_of_knowledge", 259: "kaya", 260: "refresher_shard", 263: "hurricane_pike", 265: "infused_raindrop",
    267: "spirit_vessel", 269: "holy_locket", 271: "ultimate_scepter_2", 273: "kaya_and_sange", 277: "yasha_and_kaya",
    279: "ring_of_tarrasque", 303: "recipe_ironwood_tree",
    596: "falcon_blade", 598: "mage_slayer", 600: "overwhelming_blink", 603: "swift_blink", 604: "arcane_blink",
    609: "aghanims_shard", 610: "wind_waker", 692: "eternal_shroud", 939: "harpoon", 1097: "disperser",
    1107: "phylactery", 1128: "pavise", 1466: "gleipnir", 1806: "angels_demise", 1808: "devastator",
    # Neutral items
    287: "keen_optic", 288: "grove_bow", 289: "quickening_charm", 290: "philosophers_stone", 291: "force_boots",
    293: "phoenix_ash", 294: "seer_stone", 297: "vampire_fangs", 299: "greater_faerie_fire", 300: "timeless_relic",
    301: "mirror_shield", 304: "ironwood_tree", 305: "royal_jelly", 309: "mind_breaker", 311: "spell_prism",
    326: "spider_legs", 331: "vambrace", 334: "imp_claw", 335: "flicker", 349: "arcane_ring",
    354: "ocean_heart", 355: "broom_handle", 356: "trusty_shovel", 357: "nether_shawl", 358: "dragon_scale",
    359: "essence_ring", 361: "enchanted_quiver", 362: "ninja_gear", 364: "havoc_hammer", 365: "panic_button",
    366: "apex", 368: "woodland_striders", 371: "fallen_sky", 372: "pirate_hat", 374: "ex_machina",
    375: "faded_broach", 376: "paladin_sword", 378: "orb_of_destruction", 381: "titan_sliver",
})

ITEM_NAMES: Mapping[str, str] = MappingProxyType({
    "blink": "Blink Dagger", "blades_of_attack": "Blades of Attack", "broadsword": "Broadsword",
    "chainmail": "Chainmail", "claymore": "Claymore", "helm_of_iron_will": "Helm of Iron Will",
    "javelin": "Javelin", "mithril_hammer": "Mithril Hammer", "platemail": "Platemail",
    "quarterstaff": "Quarterstaff", "quelling_blade": "Quelling Blade", "ring_of_protection": "Ring of Protection",
    "gauntlets": "Gauntlets of Strength", "slippers": "Slippers of Agility", "mantle": "Mantle of Intelligence",
    "branches": "Iron Branch", "belt_of_strength": "Belt of Strength", "boots_of_elves": "Band of Elvenskin",
    "robe": "Robe of the Magi", "circlet": "Circlet", "ogre_axe": "Ogre Axe",
    "blade_of_alacrity": "Blade of Alacrity", "staff_of_wizardry": "Staff of Wizardry", "ultimate_orb": "Ultimate Orb",
    "gloves": "Gloves of Haste", "lifesteal": "Morbid Mask", "ring_of_regen": "Ring of Regen",
    "sobi_mask": "Sage's Mask", "boots": "Boots of Speed", "gem": "Gem of True Sight",
    "cloak": "Cloak", "talisman_of_evasion": "Talisman of Evasion", "cheese": "Cheese",
    "magic_stick": "Magic Stick", "magic_wand": "Magic Wand", "ghost": "Ghost Scepter",
    "clarity": "Clarity", "flask": "Healing Salve", "dust": "Dust of Appearance",
    "bottle": "Bottle", "ward_observer": "Observer Ward", "ward_sentry": "Sentry Ward",
    "tango": "Tango", "tpscroll": "Town Portal Scroll", "travel_boots": "Boots of Travel",
    "phase_boots": "Phase Boots", "demon_edge": "Demon Edge", "eagle": "Eaglesong",
    "reaver": "Reaver", "relic": "Sacred Relic", "hyperstone": "Hyperstone",
    "ring_of_health": "Ring of Health", "void_stone": "Void Stone", "mystic_staff": "Mystic Staff",
    "energy_booster": "Energy Booster", "point_booster": "Point Booster", "vitality_booster": "Vitality Booster",
    "power_treads": "Power Treads", "hand_of_midas": "Hand of Midas", "oblivion_staff": "Oblivion Staff",
    "pers": "Perseverance", "bracer": "Bracer", "wraith_band": "Wraith Band",
    "null_talisman": "Null Talisman", "mekansm": "Mekansm", "vladmir": "Vladmir's Offering",
    "buckler": "Buckler", "ring_of_basilius": "Ring of Basilius", "pipe": "Pipe of Insight",
    "urn_of_shadows": "Urn of Shadows", "headdress": "Headdress", "sheepstick": "Scythe of Vyse",
    "orchid": "Orchid Malevolence", "cyclone": "Eul's Scepter of Divinity", "force_staff": "Force Staff",
    "dagon": "Dagon", "ultimate_scepter": "Aghanim's Scepter", "refresher": "Refresher Orb",
    "assault": "Assault Cuirass", "heart": "Heart of Tarrasque", "black_king_bar": "Black King Bar",
    "aegis": "Aegis of the Immortal", "shivas_guard": "Shiva's Guard", "bloodstone": "Bloodstone",
    "sphere": "Linken's Sphere", "vanguard": "Vanguard", "blade_mail": "Blade Mail",
    "soul_booster": "Soul Booster", "hood_of_defiance": "Hood of Defiance", "rapier": "Divine Rapier",
    "monkey_king_bar": "Monkey King Bar", "radiance": "Radiance", "butterfly": "Butterfly",
    "greater_crit": "Daedalus", "basher": "Skull Basher", "bfury": "Battle Fury",
    "manta": "Manta Style", "lesser_crit": "Crystalys", "armlet": "Armlet of Mordiggian",
    "invis_sword": "Shadow Blade", "sange_and_yasha": "Sange and Yasha", "satanic": "Satanic",
    "mjollnir": "Mjollnir", "skadi": "Eye of Skadi", "sange": "Sange",
    "helm_of_the_dominator": "Helm of the Dominator", "maelstrom": "Maelstrom", "desolator": "Desolator",
    "yasha": "Yasha", "mask_of_madness": "Mask of Madness", "diffusal_blade": "Diffusal Blade",
    "ethereal_blade": "Ethereal Blade", "soul_ring": "Soul Ring", "arcane_boots": "Arcane Boots",
    "orb_of_venom": "Orb of Venom", "stout_shield": "Stout Shield", "ancient_janggo": "Drum of Endurance",
    "medallion_of_courage": "Medallion of Courage", "smoke_of_deceit": "Smoke of Deceit",
    "veil_of_discord": "Veil of Discord", "rod_of_atos": "Rod of Atos", "abyssal_blade": "Abyssal Blade",
    "heavens_halberd": "Heaven's Halberd", "ring_of_aquila": "Ring of Aquila", "tranquil_boots": "Tranquil Boots",
    "shadow_amulet": "Shadow Amulet", "enchanted_mango": "Enchanted Mango", "ward_dispenser": "Observer and Sentry Wards",
    "travel_boots_2": "Boots of Travel 2", "meteor_hammer": "Meteor Hammer", "nullifier": "Nullifier",
    "lotus_orb": "Lotus Orb", "solar_crest": "Solar Crest", "guardian_greaves": "Guardian Greaves",
    "aether_lens": "Aether Lens", "octarine_core": "Octarine Core", "dragon_lance": "Dragon Lance",
    "faerie_fire": "Faerie Fire", "blight_stone": "Blight Stone", "tango_single": "Tango (Shared)",
    "crimson_guard": "Crimson Guard", "wind_lace": "Wind Lace", "moon_shard": "Moon Shard",
    "silver_edge": "Silver Edge", "bloodthorn": "Bloodthorn", "echo_sabre": "Echo Sabre",
    "glimmer_cape": "Glimmer Cape", "aeon_disk": "Aeon Disk", "tome_of_knowledge": "Tome of Knowledge",
    "kaya": "Kaya", "refresher_shard": "Refresher Shard", "hurricane_pike": "Hurricane Pike",
    "infused_raindrop": "Infused Raindrops", "spirit_vessel": "Spirit Vessel", "holy_locket": "Holy Locket",
    "ultimate_scepter_2": "Aghanim's Blessing", "kaya_and_sange": "Kaya and Sange", "yasha_and_kaya": "Yasha and Kaya",
    "ring_of_tarrasque": "Ring of Tarrasque", "falcon_blade": "Falcon Blade", "mage_slayer": "Mage Slayer",
    "overwhelming_blink": "Overwhelming Blink", "swift_blink": "Swift Blink", "arcane_blink": "Arcane Blink",
    "aghanims_shard": "Aghanim's Shard", "wind_waker": "Wind Waker", "eternal_shroud": "Eternal Shroud",
    "harpoon": "Harpoon", "disperser": "Disperser", "phylactery": "Phylactery", "pavise": "Pavise",
    "gleipnir": "Gleipnir", "angels_demise": "Khanda", "devastator": "Parasma",
    # Neutral items
    "keen_optic": "Keen Optic", "grove_bow": "Grove Bow", "quickening_charm": "Quickening Charm",
    "philosophers_stone": "Philosopher's Stone", "force_boots": "Force Boots", "phoenix_ash": "Phoenix Ash",
    "seer_stone": "Seer Stone", "vampire_fangs": "Vampire Fangs", "greater_faerie_fire": "Greater Faerie Fire",
    "timeless_relic": "Timeless Relic", "mirror_shield": "Mirror Shield", "ironwood_tree": "Ironwood Tree",
    "royal_jelly": "Royal Jelly", "mind_breaker": "Mind Breaker", "spell_prism": "Spell Prism",
    "spider_legs": "Spider Legs", "vambrace": "Vambrace", "imp_claw": "Imp Claw",
    "flicker": "Flicker", "arcane_ring": "Arcane Ring", "ocean_heart": "Ocean Heart",
    "broom_handle": "Broom Handle", "trusty_shovel": "Trusty Shovel", "nether_shawl": "Nether Shawl",
    "dragon_scale": "Dragon Scale", "essence_ring": "Essence Ring", "enchanted_quiver": "Enchanted Quiver",
    "ninja_gear": "Ninja Gear", "havoc_hammer": "Havoc Hammer", "panic_button": "Magic Lamp",
    "apex": "Apex", "woodland_striders": "Woodland Striders", "fallen_sky": "Fallen Sky",
    "pirate_hat": "Pirate Hat", "ex_machina": "Ex Machina", "faded_broach": "Faded Broach",
    "paladin_sword": "Paladin Sword", "orb_of_destruction": "Orb of Destruction", "titan_sliver": "Titan Sliver",
})

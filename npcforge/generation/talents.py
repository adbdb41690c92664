"""Short rules summaries for the talents the generator can hand out."""

from types import MappingProxyType

DEFAULT_TALENT_DESCRIPTION = "Special ability"

TALENT_DESCRIPTIONS = MappingProxyType({
    "Strike Mighty Blow": "Add SL to melee damage",
    "Combat Reflexes": "+10 Initiative in combat",
    "Fearless": "Immune to mundane fear",
    "Warrior Born": "Reroll failed Melee tests once per round",
    "Strike to Injure": "Critical hits inflict additional Wounds",
    "Sharpshooter": "Ignore range penalties to short range",
    "Marksman": "Add +1 Damage with ranged weapons",
    "Rapid Reload": "Reload as free action",
    "Sure Shot": "Reroll missed Ranged tests",
    "Fast Shot": "Make extra ranged attack",
    "Shieldmaster": "+2 SL when using shield to defend",
    "Tenacious": "Reroll failed Endurance tests",
    "Robust": "+Toughness Bonus to Wounds",
    "Iron Jaw": "Ignore stunned condition once per round",
    "Resolute": "Gain +10 Willpower for resisting",
    "Catfall": "Reduce falling damage by Initiative Bonus",
    "Fleet Footed": "Movement increased by +1",
    "Nimble Fingered": "+1 SL to Sleight of Hand and Pick Lock",
    "Step Aside": "May Dodge as free action once per round",
    "Sprint": "Can Run twice movement in combat",
    "Luck": "Reroll any failed test once per day",
    "Shadow": "+1 SL to Stealth tests",
    "Criminal": "Etiquette with criminals and underworld",
    "Bless": "Can cast minor blessings",
    "Holy Visions": "Receive divine guidance",
    "Savvy": "Can evaluate social situations",
    "Read/Write": "Literate in chosen language",
    "Aethyric Attunement": "Sense magic in area",
    "Instinctive Diction": "Cast one spell without speaking",
    "Magical Sense": "Detect magical effects",
    "Petty Magic": "Know minor magic spells",
    "Arcane Magic": "Can learn arcane spells",
    "Inspiring": "Grant bonus to Leadership tests",
    "Noble Blood": "Recognized nobility",
    "Linguistics": "Learn languages easily",
    "Bookish": "+1 SL to Research tests",
    "Rover": "Ignore movement penalties in wilderness",
    "Hardy": "Ignore effects of exposure",
    "Trapper": "Set and find traps",
    "Strider": "Move through difficult terrain",
    "Frenzy": "Enter berserk rage in combat",
    "Very Strong": "Add +1 to Strength",
    "Furious Assault": "Make extra attacks when frenzied",
    "Ambidextrous": "Use both hands equally",
    "Strike to Stun": "Knock enemies unconscious",
    "Lightning Reflexes": "+5 to Initiative",
    "Reaction Strike": "Free attack when enemy closes",
    "Menacing": "Frightening appearance",
    "Dirty Fighting": "Ignore dishonorable combat penalties",
    "Assassin": "Lethal critical hits",
    "Backstab": "Extra damage from behind",
    "Accurate Shot": "Ignore cover penalties",
    "Small": "Smaller hitbox, advantages in confined spaces",
    "Resistance (Chaos)": "Bonus to resist Chaos corruption",
    "Magic Resistance": "Bonus to resist magic",
    "Sturdy": "Will not fall prone from Impact criticals",
    "Second Sight": "Can perceive invisible or ethereal creatures",
    "Acute Sense (Sight)": "Exceptional vision",
})


def describe_talent(name: str) -> str:
    return TALENT_DESCRIPTIONS.get(name, DEFAULT_TALENT_DESCRIPTION)

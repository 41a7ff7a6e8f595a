"""
Preset table configurations for the round explorer.
"""

from dataclasses import dataclass, field

from .engine.table import TableConfig


@dataclass
class Preset:
    """A named table setup."""
    name: str
    description: str
    config: TableConfig = field(default_factory=TableConfig)


PRESETS = {
    "standard": Preset(
        name="Standard",
        description="Four players, seven cards each",
    ),

    "heads_up": Preset(
        name="Heads Up",
        description="Two players, seven cards each",
        config=TableConfig(num_players=2),
    ),

    "full_table": Preset(
        name="Full Table",
        description="Six players, seven cards each",
        config=TableConfig(num_players=6),
    ),

    "short_hands": Preset(
        name="Short Hands",
        description="Four players with five cards, so shows come early",
        config=TableConfig(hand_size=5),
    ),
}


def get_preset(name: str) -> Preset:
    """Get a preset by name. Raises ValueError for unknown names."""
    preset = PRESETS.get(name.lower().replace(" ", "_"))
    if preset is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())


def get_preset_info(name: str) -> dict:
    """Get info about a preset."""
    preset = get_preset(name)
    return {
        "name": preset.name,
        "description": preset.description,
        "players": preset.config.num_players,
        "hand_size": preset.config.hand_size,
    }

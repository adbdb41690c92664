"""
Request models and errors for the NPC tools.

Tool arguments arrive as loosely-typed dictionaries (MCP calls, Discord
options, CLI flags). They are validated here before reaching the generator.
The archetype stays a free string on purpose: unknown ids fall back to the
default archetype inside the generator rather than being rejected.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

SpeciesId = Literal["human", "halfling", "dwarf", "high-elf", "wood-elf"]

MAX_TOTAL_XP = 10000


class NPCToolError(Exception):
    """Invalid tool input or a failure the caller should see verbatim."""


class CreateNPCRequest(BaseModel):
    """Arguments of the create_custom_npc tool."""

    name: str = Field(min_length=1, description="Display name of the NPC")
    total_xp: int = Field(ge=0, alias="totalXP", description="XP budget")
    archetype: str = Field(min_length=1)
    species: SpeciesId = "human"
    personality_traits: list[str] = Field(default_factory=list, alias="personalityTraits")
    career: str | None = None
    description: str | None = None
    create_in_foundry: bool = Field(default=True, alias="createInFoundry")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("NPC name cannot be blank")
        return value

    @field_validator("personality_traits")
    @classmethod
    def _drop_blank_traits(cls, value: list[str]) -> list[str]:
        return [trait.strip() for trait in value if trait.strip()]


class DistributionRequest(BaseModel):
    """Arguments of the calculate_npc_xp_distribution tool."""

    total_xp: int = Field(ge=0, alias="totalXP")
    archetype: str = Field(min_length=1)
    species: SpeciesId = "human"

    model_config = ConfigDict(populate_by_name=True)


def parse_request(model: type[BaseModel], arguments: dict[str, Any]):
    """
    Validate tool arguments, converting pydantic errors into NPCToolError.

    Both camelCase (tool schema) and snake_case keys are accepted.
    """
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'input'}: {error['msg']}"
            for error in e.errors()
        )
        raise NPCToolError(f"Invalid arguments: {problems}") from e

"""Project locations, pack-relative glob patterns and shared path tables."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Project:
    """Locations of the behavior pack and resource pack, slash separated."""

    bp: str
    rp: str


_wd: str | None = None
_project: Project | None = None


def getwd() -> str:
    """Return the working directory, read once and then remembered."""
    global _wd
    if _wd is None:
        _wd = os.getcwd()
    return _wd


def get_project() -> Project | None:
    """Return the current project, or None if none is set."""
    return _project


def set_project(project: Project | None) -> None:
    """Set the current project."""
    global _project
    _project = project


BP_GLOB = "{behavior_pack,*BP,BP_*,*bp,bp_*}"
RP_GLOB = "{resource_pack,*RP,RP_*,*rp,rp_*}"
PROJECT_GLOB = "{behavior_pack,*BP,BP_*,*bp,bp_*,resource_pack,*RP,RP_*,*rp,rp_*}"


class Pattern(str):
    """A glob tagged with the pack it lives in: 'b' for behavior, 'r' for resource."""

    def pack_type(self) -> str:
        """Return the directory of the pack this pattern belongs to."""
        kind = self[:1]
        if kind not in ("b", "r"):
            raise ValueError("invalid pattern")
        project = _project
        if project is None:
            raise RuntimeError("no project is set")
        return project.bp if kind == "b" else project.rp

    def resolve(self) -> str:
        """Return the glob with the pack directory in front."""
        return self.pack_type() + self[1:]


def behavior_pattern(pattern: str) -> Pattern:
    """Return a pattern rooted at the behavior pack."""
    return Pattern("b" + pattern)


def resource_pattern(pattern: str) -> Pattern:
    """Return a pattern rooted at the resource pack."""
    return Pattern("r" + pattern)


def flat_map(items: Iterable[T], callback: Callable[[T], Iterable[U]]) -> list[U]:
    """Map every item to several values and join the results into one list."""
    return [value for item in items for value in callback(item)]


def find(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item the predicate accepts, or None."""
    return next((item for item in items if predicate(item)), None)


AIM_ASSIST_PRESET_GLOB = behavior_pattern("/aim_assist/presets/**/*.json")
AIM_ASSIST_CATEGORY_GLOB = behavior_pattern("/aim_assist/categories/**/*.json")
ANIMATION_CONTROLLER_GLOB = behavior_pattern("/animation_controllers/**/*.json")
ANIMATION_GLOB = behavior_pattern("/animations/**/*.json")
BIOME_GLOB = behavior_pattern("/biomes/**/*.json")
BLOCK_GLOB = behavior_pattern("/blocks/**/*.json")
CAMERA_GLOB = behavior_pattern("/cameras/presets/**/*.json")
CRAFTING_ITEM_CATALOG_GLOB = behavior_pattern("/item_catalog/crafting_item_catalog.json")
DIALOGUE_GLOB = behavior_pattern("/dialogue/**/*.json")
ENTITY_GLOB = behavior_pattern("/entities/**/*.json")
FEATURE_RULE_GLOB = behavior_pattern("/feature_rules/**/*.json")
FEATURE_GLOB = behavior_pattern("/features/**/*.json")
FUNCTION_GLOB = behavior_pattern("/functions/**/*.mcfunction")
ITEM_GLOB = behavior_pattern("/items/**/*.json")
LOOT_TABLE_GLOB = behavior_pattern("/loot_tables/**/*.json")
RECIPE_GLOB = behavior_pattern("/recipes/**/*.json")
SPAWN_RULE_GLOB = behavior_pattern("/spawn_rules/**/*.json")
STRUCTURE_GLOB = behavior_pattern("/structures/**/*.mcstructure")
TRADE_TABLE_GLOB = behavior_pattern("/trading/**/*.json")
WORLDGEN_PROCESSOR_GLOB = behavior_pattern("/worldgen/processors/**/*.json")
WORLDGEN_TEMPLATE_POOL_GLOB = behavior_pattern("/worldgen/template_pools/**/*.json")
WORLDGEN_JIGSAW_GLOB = behavior_pattern("/worldgen/structures/**/*.json")
WORLDGEN_STRUCTURE_SET_GLOB = behavior_pattern("/worldgen/structure_sets/**/*.json")

ATTACHABLE_GLOB = resource_pattern("/attachables/**/*.json")
ATMOSPHERE_GLOB = resource_pattern("/atmospherics/**/*.json")
BLOCK_CULLING_GLOB = resource_pattern("/block_culling/**/*.json")
CLIENT_ANIMATION_CONTROLLER_GLOB = resource_pattern("/animation_controllers/**/*.json")
CLIENT_ANIMATION_GLOB = resource_pattern("/animations/**/*.json")
CLIENT_BIOME_GLOB = resource_pattern("/biomes/**/*.json")
CLIENT_BLOCK_GLOB = resource_pattern("/blocks.json")
CLIENT_ENTITY_GLOB = resource_pattern("/entity/**/*.json")
CLIENT_SOUND_GLOB = resource_pattern("/sounds.json")
COLOR_GRADING_GLOB = resource_pattern("/color_grading/**/*.json")
ENTITY_MATERIAL_GLOB = resource_pattern("/materials/entity.material")
FLIPBOOK_TEXTURE_GLOB = resource_pattern("/textures/flipbook_textures.json")
FOG_GLOB = resource_pattern("/fogs/**/*.json")
GEOMETRY_GLOB = resource_pattern("/models/**/*.json")
ITEM_TEXTURE_GLOB = resource_pattern("/textures/item_texture.json")
LIGHTING_GLOB = resource_pattern("/lighting/**/*.json")
LOCAL_LIGHTING_GLOB = resource_pattern("/local_lighting/local_lighting.json")
MUSIC_DEFINITION_GLOB = resource_pattern("/sounds/music_definitions.json")
PARTICLE_GLOB = resource_pattern("/particles/**/*.json")
PARTICLE_MATERIAL_GLOB = resource_pattern("/materials/particles.material")
RENDER_CONTROLLER_GLOB = resource_pattern("/render_controllers/**/*.json")
SOUND_DEFINITION_GLOB = resource_pattern("/sounds/sound_definitions.json")
SOUND_GLOB = resource_pattern("/sounds/**/*.{fsb,ogg,wav}")
TERRAIN_TEXTURE_GLOB = resource_pattern("/textures/terrain_texture.json")
TEXTURE_GLOB = resource_pattern("/textures/**/*.{png,tga,jpg,jpeg}")
TEXTURE_SET_GLOB = resource_pattern("/textures/**/*.texture_set.json")
WATER_GLOB = resource_pattern("/water/**/*.json")

PROPERTY_TESTS = ["bool_property", "enum_property", "float_property", "int_property"]

_FILTER_LOCATIONS = [
    "**/filters",
    "minecraft:ageable/interact_filters",
    "minecraft:anger_level/nuisance_filter",
    "minecraft:angry/broadcast_filters",
    "minecraft:area_attack/entity_filter",
    "minecraft:behavior.knockback_roar/damage_filters",
    "minecraft:behavior.knockback_roar/knockback_filters",
    "minecraft:behavior.move_to_block/target_block_filters",
    "minecraft:behavior.nap/can_nap_filters",
    "minecraft:behavior.nap/wake_mob_exceptions",
    "minecraft:behavior.stalk_and_pounce_on_target/stuck_blocks",
    "minecraft:block_sensor/sources",
    "minecraft:breedable/love_filters",
    "minecraft:celebrate_hunt/celebration_targets",
    "minecraft:conditional_bandwidth_optimization/conditional_values",
    "minecraft:entity_sensor/event_filters",
    "minecraft:entity_sensor/subsensors/*/event_filters",
    "minecraft:mob_effect/entity_filter",
    "minecraft:trail/spawn_filter",
]

FILTER_PATHS: list[str] = flat_map(
    _FILTER_LOCATIONS,
    lambda path: [
        "minecraft:entity/components/" + path + "/**",
        "minecraft:entity/component_groups/*/" + path + "/**",
        "minecraft:entity/events/*/" + path + "/**",
    ],
)
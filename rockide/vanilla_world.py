"""Identifiers the base game defines for biomes, atmospherics, cameras, grading and fog."""

from __future__ import annotations


def _ids(names: str, prefix: str = "", suffix: str = "") -> frozenset[str]:
    """Build a set of identifiers from whitespace-separated names."""
    return frozenset(f"{prefix}{name}{suffix}" for name in names.split())


ATMOSPHERIC: frozenset[str] = _ids(
    """
    default basalt_deltas crimson_forest desert end hell hot ice_plains_spikes
    mangrove_swamp mesa mushroom_island pale_garden soulsand_valley swampland
    warmish warped_forest
    """,
    "minecraft:",
    "_atmospherics",
)

BIOME_ID: frozenset[str] = _ids(
    """
    bamboo_jungle bamboo_jungle_hills basalt_deltas beach
    birch_forest birch_forest_hills birch_forest_hills_mutated birch_forest_mutated
    cherry_grove cold_beach cold_ocean cold_taiga cold_taiga_hills cold_taiga_mutated
    crimson_forest deep_cold_ocean deep_dark deep_frozen_ocean deep_lukewarm_ocean
    deep_ocean deep_warm_ocean desert desert_hills desert_mutated dripstone_caves
    extreme_hills extreme_hills_edge extreme_hills_mutated extreme_hills_plus_trees
    extreme_hills_plus_trees_mutated flower_forest forest forest_hills frozen_ocean
    frozen_peaks frozen_river grove hell ice_mountains ice_plains ice_plains_spikes
    jagged_peaks jungle jungle_edge jungle_edge_mutated jungle_hills jungle_mutated
    legacy_frozen_ocean lukewarm_ocean lush_caves mangrove_swamp meadow
    mega_taiga mega_taiga_hills mesa mesa_bryce mesa_plateau mesa_plateau_mutated
    mesa_plateau_stone mesa_plateau_stone_mutated mushroom_island mushroom_island_shore
    ocean pale_garden plains redwood_taiga_hills_mutated redwood_taiga_mutated river
    roofed_forest roofed_forest_mutated savanna savanna_mutated savanna_plateau
    savanna_plateau_mutated snowy_slopes soulsand_valley stone_beach stony_peaks
    sunflower_plains swampland swampland_mutated taiga taiga_hills taiga_mutated
    the_end warm_ocean warped_forest
    """,
    "minecraft:",
)

BIOME_TAG: frozenset[str] = _ids(
    """
    animal bamboo basalt_deltas beach bee_habitat birch caves cherry_grove cold
    crimson_forest deep deep_dark desert dripstone_caves edge extreme_hills
    flower_forest forest frozen frozen_peaks grove has_structure_trail_ruins hills
    ice ice_plains jagged_peaks jungle legacy lukewarm lush_caves mangrove_swamp
    meadow mega mesa monster mooshroom_island mountain mountains mutated nether
    nether_wastes netherwart_forest no_legacy_worldgen ocean overworld
    overworld_generation pale_garden plains plateau rare river roofed savanna shore
    snowy_slopes soulsand_valley spawn_endermen spawn_few_piglins
    spawn_few_zombified_piglins spawn_ghast spawn_magma_cubes spawn_many_magma_cubes
    spawn_piglin spawn_zombified_piglin spawns_cold_variant_farm_animals
    spawns_cold_variant_frogs spawns_gold_rabbits spawns_jungle_mobs spawns_mesa_mobs
    spawns_more_frequent_drowned spawns_nether_mobs
    spawns_polar_bears_on_alternate_blocks spawns_reduced_water_ambient_mobs
    spawns_river_mobs spawns_savanna_mobs spawns_slimes_on_surface spawns_snow_foxes
    spawns_tropical_fish_at_any_height spawns_warm_variant_farm_animals
    spawns_warm_variant_frogs spawns_white_rabbits spawns_without_patrols
    stone swamp taiga the_end warm warped_forest
    """
)

CAMERA_ID: frozenset[str] = _ids(
    """
    first_person third_person third_person_front free follow_orbit fixed_boom
    control_scheme_camera
    """,
    "minecraft:",
)

COLOR_GRADING: frozenset[str] = _ids(
    """
    cold default coolish desert hot ice_plains_spikes lush_caves mangrove_swamp
    mesa mushroom_island pale_garden swampland warmish
    """,
    "minecraft:",
    "_color_grading",
)

FOG: frozenset[str] = _ids(
    """
    bamboo_jungle bamboo_jungle_hills basalt_deltas beach birch_forest
    birch_forest_hills cherry_grove cold_beach cold_ocean cold_taiga cold_taiga_hills
    cold_taiga_mutated crimson_forest deep_cold_ocean deep_frozen_ocean
    deep_lukewarm_ocean deep_ocean deep_warm_ocean default desert desert_hills dry
    extreme_hills extreme_hills_edge extreme_hills_mutated extreme_hills_plus_trees
    extreme_hills_plus_trees_mutated flower_forest forest forest_hills frozen_ocean
    frozen_river hell humid ice_mountains ice_plains ice_plains_spikes jungle
    jungle_edge jungle_hills jungle_mutated lukewarm_ocean lush_caves mangrove_swamp
    mega_spruce_taiga mega_spruce_taiga_mutated mega_taiga mega_taiga_hills
    mega_taiga_mutated mesa mesa_bryce mesa_mutated mesa_plateau mesa_plateau_stone
    mushroom_island mushroom_island_shore ocean pale_garden plains powder_snow river
    roofed_forest savanna savanna_mutated savanna_plateau semi_humid soulsand_valley
    stone_beach sunflower_plains swampland swampland_mutated taiga taiga_hills
    taiga_mutated the_end warm_ocean warped_forest
    """,
    "minecraft:fog_",
)
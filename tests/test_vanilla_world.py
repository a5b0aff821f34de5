import pytest

from rockide import vanilla_world
from rockide.vanilla_world import (
    ATMOSPHERIC,
    BIOME_ID,
    BIOME_TAG,
    CAMERA_ID,
    COLOR_GRADING,
    FOG,
    _ids,
)


def _strip(values, prefix, suffix=""):
    names = []
    for value in values:
        name = value.removeprefix(prefix)
        if suffix:
            name = name.removesuffix(suffix)
        names.append(name)
    return " ".join(names)


def test_ids_applies_prefix_and_suffix():
    assert _ids("a b\n   c", "p:", "_s") == frozenset({"p:a_s", "p:b_s", "p:c_s"})


def test_ids_of_blank_text_is_empty():
    assert _ids("  \n\t ") == frozenset()


def test_atmospherics_are_namespaced_and_suffixed():
    names = _strip(ATMOSPHERIC, "minecraft:", "_atmospherics")
    assert _ids(names, "minecraft:", "_atmospherics") == ATMOSPHERIC
    assert len(ATMOSPHERIC) == 16


def test_color_grading_is_namespaced_and_suffixed():
    names = _strip(COLOR_GRADING, "minecraft:", "_color_grading")
    assert _ids(names, "minecraft:", "_color_grading") == COLOR_GRADING
    assert len(COLOR_GRADING) == 13


def test_fog_ids_share_prefix():
    assert _ids(_strip(FOG, "minecraft:fog_"), "minecraft:fog_") == FOG


def test_biome_and_camera_ids_are_namespaced():
    assert _ids(_strip(BIOME_ID, "minecraft:"), "minecraft:") == BIOME_ID
    assert _ids(_strip(CAMERA_ID, "minecraft:"), "minecraft:") == CAMERA_ID
    assert len(CAMERA_ID) == 7


def test_biome_tags_have_no_namespace():
    assert _ids(" ".join(BIOME_TAG)) == BIOME_TAG
    assert not any(":" in tag for tag in BIOME_TAG)


@pytest.mark.parametrize(
    "collection, member",
    [
        (BIOME_ID, "minecraft:plains"),
        (BIOME_ID, "minecraft:pale_garden"),
        (BIOME_TAG, "overworld"),
        (BIOME_TAG, "spawns_white_rabbits"),
        (CAMERA_ID, "minecraft:free"),
        (CAMERA_ID, "minecraft:control_scheme_camera"),
        (FOG, "minecraft:fog_default"),
        (ATMOSPHERIC, "minecraft:default_atmospherics"),
        (COLOR_GRADING, "minecraft:default_color_grading"),
    ],
)
def test_known_members(collection, member):
    assert _ids(member) <= collection


def test_unknown_ids_are_absent():
    assert _ids("minecraft:fog_plains plains") & BIOME_ID == frozenset()
    assert _ids("plains", "minecraft:") & BIOME_TAG == frozenset()


def test_collections_are_immutable():
    with pytest.raises(AttributeError):
        BIOME_ID.add("minecraft:custom")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        _ids("x").add("y")  # type: ignore[attr-defined]


def test_every_atmospheric_and_grading_name_fits_its_family():
    assert _ids("pale_garden default", "minecraft:", "_atmospherics") <= ATMOSPHERIC
    assert _ids("pale_garden default", "minecraft:", "_color_grading") <= COLOR_GRADING


def test_module_exposes_all_collections_as_frozensets():
    for name in ("ATMOSPHERIC", "BIOME_ID", "BIOME_TAG", "CAMERA_ID", "COLOR_GRADING", "FOG"):
        value = getattr(vanilla_world, name)
        assert isinstance(value, frozenset) and len(value) > 0
        assert _ids(" ".join(sorted(value))) == value
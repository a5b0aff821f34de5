import pytest

from rockide.shared import Project
from rockide.workspace import ProjectNotFoundError, find_project_paths


def test_options_are_cleaned():
    project = find_project_paths({"behaviorPack": "./packs/BP/", "resourcePack": "packs/x/../RP"})
    assert project == Project(bp="packs/BP", rp="packs/RP")


@pytest.mark.parametrize(
    "options",
    [{"behaviorPack": "BP"}, {"resourcePack": "RP"}, {"behaviorPack": 1, "resourcePack": "RP"}],
)
def test_invalid_options_raise(options):
    with pytest.raises(ProjectNotFoundError, match="invalid initialization options"):
        find_project_paths(options)


def test_finds_packs_in_packs_dir(tmp_path, monkeypatch):
    (tmp_path / "packs" / "BP").mkdir(parents=True)
    (tmp_path / "packs" / "RP").mkdir()
    monkeypatch.chdir(tmp_path)
    assert find_project_paths(None) == Project(bp="packs/BP", rp="packs/RP")


def test_finds_packs_in_current_dir(tmp_path, monkeypatch):
    (tmp_path / "behavior_pack").mkdir()
    (tmp_path / "my_rp").mkdir()
    (tmp_path / "other").mkdir()
    monkeypatch.chdir(tmp_path)
    assert find_project_paths(None) == Project(bp="behavior_pack", rp="my_rp")


def test_missing_resource_pack_raises(tmp_path, monkeypatch):
    (tmp_path / "BP_main").mkdir()
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ProjectNotFoundError, match="not a minecraft project"):
        find_project_paths(None)


def test_empty_dir_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ProjectNotFoundError):
        find_project_paths("not a mapping")
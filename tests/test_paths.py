from __future__ import annotations

from pathlib import Path

from docstore.paths import delete_target, logical_path, resource_path, temp_path


def test_resource_path_layout(tmp_path: Path):
    assert resource_path(tmp_path, "fish", "redfish") == tmp_path / "fish" / "redfish.json"
    assert temp_path(tmp_path / "fish" / "redfish.json") == tmp_path / "fish" / "redfish.json.tmp"


def test_logical_path():
    assert logical_path("fish", "ghost") == "fish/ghost"
    assert logical_path("fish") == "fish"


def test_delete_target_probes_bare_then_json(tmp_path: Path):
    (tmp_path / "fish").mkdir()
    (tmp_path / "fish" / "redfish.json").write_text("{}\n", encoding="utf-8")

    assert delete_target(tmp_path, "fish", "redfish") == tmp_path / "fish" / "redfish.json"
    assert delete_target(tmp_path, "fish", "") == tmp_path / "fish"
    assert delete_target(tmp_path, "fish", "ghost") is None
    assert delete_target(tmp_path, "birds", "") is None

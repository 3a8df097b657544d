from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from streamext import PartitionSettings, load_partition_config, validate_config_file


def test_load_partition_config_supports_yaml_section(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("partition:\n  size: 3\n  step: 4\n  pad: [0]\n", encoding="utf-8")

    settings = load_partition_config(config_path)

    assert settings == PartitionSettings(size=3, step=4, pad=[0])
    assert list(settings.build(range(10))) == [[0, 1, 2], [4, 5, 6], [8, 9, 0]]


def test_load_partition_config_supports_top_level_json(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"size": 2, "limit": 5}), encoding="utf-8")

    settings = load_partition_config(config_path)

    assert settings.step is None
    assert settings.limit == 5
    assert list(settings.build(range(5))) == [[0, 1], [2, 3]]


def test_load_partition_config_rejects_invalid_values(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("size: 0\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_partition_config(config_path)


def test_load_partition_config_requires_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_partition_config(config_path)


def test_load_partition_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_partition_config(tmp_path / "missing.yml")


def test_validate_config_file_reports_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("size: 3\nstep: -1\ncolour: blue\n", encoding="utf-8")

    result = validate_config_file(config_path)

    assert not result.ok
    assert any(error.startswith("step:") for error in result.errors)
    assert any(error.startswith("colour:") for error in result.errors)


def test_validate_config_file_normalizes_step(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("size: 3\n", encoding="utf-8")

    result = validate_config_file(config_path)

    assert result.ok
    assert result.as_dict()["normalized"] == {"size": 3, "step": 3, "pad": None, "limit": None}


@pytest.mark.parametrize("document", ["size: true\n", "size: '3'\n", "size: 3\nstep: 2.0\n", "size: 3\nlimit: yes\n"])
def test_load_partition_config_requires_real_integers(tmp_path: Path, document: str) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text(document, encoding="utf-8")

    with pytest.raises(ValidationError):
        load_partition_config(config_path)

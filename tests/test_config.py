from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from shortids.config import GeneratorConfig, load_config, load_schema, validate_config
from shortids.exceptions import ConfigValidationError


def test_defaults():
    config = GeneratorConfig()

    assert config.to_dict() == {
        "delimiter": "_",
        "avoid_camel_cases": False,
        "prefix_max_length": 4,
        "invalid_chars_pattern": "[^A-Za-z0-9]+",
    }


def test_schema_is_packaged_resource():
    assert load_schema()["title"] == "shortids Generator Config"


def test_from_dict_fills_missing_keys_with_defaults():
    config = GeneratorConfig.from_dict({"delimiter": "-"})

    assert config.delimiter == "-"
    assert config.prefix_max_length == 4


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        GeneratorConfig().delimiter = "-"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("payload", "path"),
    [
        ({"prefix_max_length": "4"}, "$.prefix_max_length"),
        ({"prefix_max_length": -2}, "$.prefix_max_length"),
        ({"prefix_max_length": True}, "$.prefix_max_length"),
        ({"avoid_camel_cases": "yes"}, "$.avoid_camel_cases"),
        ({"invalid_chars_pattern": ""}, "$.invalid_chars_pattern"),
        ({"unknown": 1}, "$"),
    ],
)
def test_schema_violations(payload, path):
    with pytest.raises(ConfigValidationError) as excinfo:
        validate_config(payload)
    assert excinfo.value.code == "CFG001"
    assert excinfo.value.path == path


def test_non_object_payload_rejected():
    with pytest.raises(ConfigValidationError) as excinfo:
        validate_config(["delimiter"])  # type: ignore[arg-type]
    assert excinfo.value.path == "$"


def test_uncompilable_pattern_rejected():
    with pytest.raises(ConfigValidationError) as excinfo:
        GeneratorConfig.from_dict({"invalid_chars_pattern": "(unclosed"})
    assert excinfo.value.code == "CFG002"


def test_load_config_file(tmp_path: Path):
    path = tmp_path / "shortids.json"
    path.write_text(json.dumps({"delimiter": "-", "avoid_camel_cases": True}), encoding="utf-8")

    config = load_config(path)

    assert config.delimiter == "-"
    assert config.avoid_camel_cases is True


def test_load_config_rejects_missing_file(tmp_path: Path):
    with pytest.raises(ConfigValidationError) as excinfo:
        load_config(tmp_path / "missing.json")
    assert excinfo.value.code == "CFG003"


def test_load_config_rejects_non_utf8_file(tmp_path: Path):
    path = tmp_path / "latin1.json"
    path.write_bytes('{"delimiter": "é"}'.encode("latin-1"))

    with pytest.raises(ConfigValidationError) as excinfo:
        load_config(path)
    assert excinfo.value.code == "CFG003"


def test_load_config_rejects_malformed_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigValidationError) as excinfo:
        load_config(path)
    assert excinfo.value.code == "CFG003"


def test_error_serializes_to_json():
    with pytest.raises(ConfigValidationError) as excinfo:
        validate_config({"unknown": 1})

    payload = json.loads(excinfo.value.to_json())
    assert payload["error_type"] == "ConfigValidationError"
    assert payload["details"]["code"] == "CFG001"

import json
from pathlib import Path

import pytest

from phrasebreak.errors import MalformedModelError, ModelNotFoundError, PhraseBreakError
from phrasebreak.model_io import load_model, parse_model, total_weight


def test_load_model_reads_two_level_mapping(write_model) -> None:
    path = write_model({"UW4": {"天": 100}, "BW2": {"日本": -42}})

    model = load_model(path)

    assert model == {"UW4": {"天": 100}, "BW2": {"日本": -42}}


def test_load_model_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ModelNotFoundError) as excinfo:
        load_model(tmp_path / "missing.json")

    assert isinstance(excinfo.value, FileNotFoundError)
    assert isinstance(excinfo.value, PhraseBreakError)
    assert "missing.json" in str(excinfo.value)


def test_load_model_directory_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(ModelNotFoundError):
        load_model(tmp_path)


def test_load_model_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(MalformedModelError) as excinfo:
        load_model(path)

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.source == str(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"UW4": ["a"]},
        {"UW4": {"a": "100"}},
        {"UW4": {"a": True}},
        {"UW4": {"a": 2.5}},
        {"UW4": {"a": None}},
        {"UW4": {"a": {"b": 1}}},
    ],
)
def test_parse_model_rejects_wrong_shapes(data) -> None:
    with pytest.raises(MalformedModelError):
        parse_model(data)


def test_malformed_file_names_the_offending_group(write_model) -> None:
    path = write_model({"UW4": {"a": 1}, "TW2": {"abc": "x"}})

    with pytest.raises(MalformedModelError, match=r"TW2\['abc'\]"):
        load_model(path)


def test_parse_model_accepts_integral_floats() -> None:
    model = parse_model({"UW4": {"a": 3.0}})

    assert model == {"UW4": {"a": 3}}
    assert isinstance(model["UW4"]["a"], int)


def test_parse_model_keeps_unknown_groups() -> None:
    model = parse_model({"UW4": {"a": 1}, "UP1": {"U": 5}})

    assert model["UP1"] == {"U": 5}


def test_parse_model_returns_a_copy() -> None:
    data = {"UW4": {"a": 1}}

    model = parse_model(data)
    data["UW4"]["a"] = 99

    assert model["UW4"]["a"] == 1


def test_load_model_accepts_empty_object(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({}), encoding="utf-8")

    assert load_model(path) == {}


def test_total_weight_sums_every_group() -> None:
    assert total_weight({"UW4": {"a": 100, "b": -30}, "XX": {"z": 5}, "BW1": {}}) == 75
    assert total_weight({}) == 0

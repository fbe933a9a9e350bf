"""Unit tests for funseq.pipeline.config: document parsing and validation."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from funseq.operators import OperatorKind
from funseq.pipeline import PipelineConfig, PipelineConfigError, StepConfig


class TestDefault:
    def test_default_values(self) -> None:
        assert PipelineConfig.default().values == (10, 20, 30, 40, 50)

    def test_default_steps(self) -> None:
        steps = PipelineConfig.default().steps
        assert [s.op for s in steps] == [
            OperatorKind.MAP,
            OperatorKind.FILTER,
            OperatorKind.REDUCE,
        ]
        assert steps[0] == StepConfig(OperatorKind.MAP, "multiply", arg=3)
        assert steps[2].initial == 0


class TestFromDict:
    def test_minimal(self) -> None:
        config = PipelineConfig.from_dict({"values": [1, 2]})
        assert config.values == (1, 2)
        assert config.steps == ()

    def test_missing_values_defaults_to_empty(self) -> None:
        assert PipelineConfig.from_dict({}).values == ()

    def test_step_fields(self) -> None:
        config = PipelineConfig.from_dict(
            {"values": [], "steps": [{"op": "reduce", "fn": "add", "initial": 5}]}
        )
        assert config.steps[0] == StepConfig(OperatorKind.REDUCE, "add", initial=5)

    def test_document_must_be_mapping(self) -> None:
        with pytest.raises(PipelineConfigError, match="mapping"):
            PipelineConfig.from_dict([1, 2, 3])

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(PipelineConfigError, match="unknown top-level"):
            PipelineConfig.from_dict({"values": [], "stpes": []})

    def test_values_must_be_list(self) -> None:
        with pytest.raises(PipelineConfigError, match="'values'"):
            PipelineConfig.from_dict({"values": "12345"})

    def test_steps_must_be_list(self) -> None:
        with pytest.raises(PipelineConfigError, match="'steps'"):
            PipelineConfig.from_dict({"steps": {"op": "map"}})

    def test_step_must_be_mapping(self) -> None:
        with pytest.raises(PipelineConfigError) as exc_info:
            PipelineConfig.from_dict({"steps": ["map"]})
        assert exc_info.value.step_index == 0

    def test_unknown_op(self) -> None:
        with pytest.raises(PipelineConfigError, match="'op'") as exc_info:
            PipelineConfig.from_dict(
                {"steps": [{"op": "map", "fn": "negate"}, {"op": "sort", "fn": "x"}]}
            )
        assert exc_info.value.step_index == 1
        assert str(exc_info.value).startswith("step 1:")

    def test_missing_fn(self) -> None:
        with pytest.raises(PipelineConfigError, match="'fn'"):
            PipelineConfig.from_dict({"steps": [{"op": "map"}]})

    def test_unknown_step_key(self) -> None:
        with pytest.raises(PipelineConfigError, match="unknown key"):
            PipelineConfig.from_dict({"steps": [{"op": "map", "fn": "negate", "args": 1}]})

    def test_initial_only_on_reduce(self) -> None:
        with pytest.raises(PipelineConfigError, match="initial"):
            PipelineConfig.from_dict({"steps": [{"op": "map", "fn": "negate", "initial": 0}]})

    def test_reduce_must_be_last(self) -> None:
        with pytest.raises(PipelineConfigError, match="last step") as exc_info:
            PipelineConfig.from_dict(
                {"steps": [{"op": "reduce", "fn": "add"}, {"op": "map", "fn": "negate"}]}
            )
        assert exc_info.value.step_index == 0

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            PipelineConfig.from_dict(None)


class TestSerialization:
    def test_to_dict_omits_unset_fields(self) -> None:
        data = PipelineConfig.default().to_dict()
        assert data["steps"][0] == {"op": "map", "fn": "multiply", "arg": 3}
        assert data["steps"][2] == {"op": "reduce", "fn": "add", "initial": 0}

    def test_json_round_trip(self) -> None:
        config = PipelineConfig.default()
        assert PipelineConfig.from_json(config.to_json()) == config

    def test_yaml_round_trip(self) -> None:
        config = PipelineConfig.default()
        assert PipelineConfig.from_yaml(config.to_yaml()) == config

    def test_yaml_flow_style(self) -> None:
        config = PipelineConfig.from_yaml(
            "values: [1, 2]\nsteps:\n  - {op: map, fn: multiply, arg: 2}\n"
        )
        assert config.steps[0].arg == 2

    def test_invalid_json(self) -> None:
        with pytest.raises(PipelineConfigError, match="invalid JSON"):
            PipelineConfig.from_json("{values: ")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(PipelineConfigError, match="invalid YAML"):
            PipelineConfig.from_yaml("values: [1, 2\n")


class TestLoad:
    def test_load_yaml(self, demo_yaml_path: Path) -> None:
        assert PipelineConfig.load(demo_yaml_path) == PipelineConfig.default()

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "demo.json"
        path.write_text(json.dumps(PipelineConfig.default().to_dict()), encoding="utf-8")
        assert PipelineConfig.load(path) == PipelineConfig.default()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            PipelineConfig.load(tmp_path / "missing.yaml")

    def test_load_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"values: [\xff\xfe]\n")
        with pytest.raises(PipelineConfigError, match="not valid UTF-8"):
            PipelineConfig.load(path)

"""Unit tests for loading motion sequences and planning limits from YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest

from motion_sequencing.io.pydantic_schemata import (
    SequenceItemSchema,
    load_planning_limits,
    load_sequence_request,
)
from motion_sequencing.kinematics import Point3D

YAML_DIR = Path(__file__).parent / "test_data/yaml"


@pytest.fixture
def sequence_yaml() -> Path:
    """Return a path to a YAML file specifying an example motion sequence."""
    yaml_path = YAML_DIR / "example_sequence.yaml"
    assert yaml_path.exists(), f"Expected to find file: {yaml_path}"
    return yaml_path


@pytest.fixture
def limits_yaml() -> Path:
    """Return a path to a YAML file specifying example planning limits."""
    yaml_path = YAML_DIR / "planning_limits.yaml"
    assert yaml_path.exists(), f"Expected to find file: {yaml_path}"
    return yaml_path


def test_load_sequence_request(sequence_yaml: Path) -> None:
    """Verify that a motion sequence can be loaded from YAML."""
    # Act - Load the sequence from the example file
    request = load_sequence_request(sequence_yaml)

    # Assert - Expect three items with the goals, start state, and radii given in the file
    assert len(request) == 3
    assert request.group_names == ["arm", "gripper"]

    first, second, third = request
    assert first.has_start_state
    assert first.request.start_state.configuration == {"x": 0.0, "y": 0.0, "z": 0.3}
    assert first.blend_radius == 0.05
    assert second.request.goal == Point3D(0.4, 0.2, 0.1)
    assert not second.has_start_state
    assert third.request.goal == {"finger": 0.01}
    assert third.blend_radius == 0.0


def test_item_requires_exactly_one_goal() -> None:
    """Verify that an item with both or neither of the goal kinds is rejected."""
    with pytest.raises(ValueError):
        SequenceItemSchema.model_validate({"group": "arm"})
    with pytest.raises(ValueError):
        SequenceItemSchema.model_validate(
            {"group": "arm", "joint_goal": {"x": 1.0}, "cartesian_goal": [1.0, 0.0, 0.0]},
        )


def test_invalid_sequence_file_is_reported(tmp_path: Path) -> None:
    """Verify that a malformed sequence file raises a ValueError naming the file."""
    yaml_path = tmp_path / "bad_sequence.yaml"
    yaml_path.write_text("items:\n  - group: arm\n    blend_radius: 0.1\n")

    with pytest.raises(ValueError, match="bad_sequence.yaml"):
        load_sequence_request(yaml_path)


def test_missing_items_key_is_reported(tmp_path: Path) -> None:
    """Verify that a YAML file without the expected top-level key raises a KeyError."""
    yaml_path = tmp_path / "no_items.yaml"
    yaml_path.write_text("steps: []\n")

    with pytest.raises(KeyError):
        load_sequence_request(yaml_path)


def test_negative_radius_is_loaded_for_later_validation(tmp_path: Path) -> None:
    """Verify that negative blend radii pass schema validation unchanged."""
    yaml_path = tmp_path / "negative.yaml"
    yaml_path.write_text("items:\n  - {group: arm, joint_goal: {x: 1.0}, blend_radius: -0.1}\n")

    request = load_sequence_request(yaml_path)

    assert request[0].blend_radius == -0.1


def test_load_planning_limits(limits_yaml: Path) -> None:
    """Verify that joint and Cartesian limits can be loaded from YAML."""
    limits = load_planning_limits(limits_yaml)

    assert limits.has_joint_limits(["x", "y", "z"])
    assert limits.joint_limits["z"].max_velocity == 0.5
    assert limits.cartesian_limits is not None
    assert limits.cartesian_limits.max_trans_dec == -5.0


def test_invalid_planning_limits_are_reported(tmp_path: Path) -> None:
    """Verify that limits with a positive deceleration are rejected."""
    yaml_path = tmp_path / "limits.yaml"
    yaml_path.write_text(
        "planning_limits:\n"
        "  joint_limits:\n"
        "    x: {max_velocity: 1.0, max_acceleration: 2.0, max_deceleration: 2.0}\n",
    )

    with pytest.raises(ValueError, match="Invalid planning limits"):
        load_planning_limits(yaml_path)

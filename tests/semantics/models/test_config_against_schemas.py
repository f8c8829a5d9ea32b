"""Schema conformance tests for configuration and checklist models.

Each model must accept what its JSON Schema accepts and must reject at
least what the schema rejects. ``ReadingTarget`` clamps numbers instead of
rejecting them, so only its structural constraints are compared.
"""

# pylint: disable=missing-function-docstring,redefined-outer-name,global-statement
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from jsonschema import ValidationError as JsonSchemaValidationError
from jsonschema import validate as jsonschema_validate
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from khatam_planner.core.domain.types import PlanConfig, ReadingTarget
from khatam_planner.core.progress.checklist import ChecklistState

SCHEMA_REGISTRY = Registry()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def load_schema(name: str) -> dict:
    """
    Load JSON schema from the package schema directory.
    """
    global SCHEMA_REGISTRY

    root = Path(__file__).parent.parent.parent.parent
    schema_path = root / "khatam_planner" / "core" / "schemas" / name

    with schema_path.open("r", encoding="utf-8") as f:
        schema = json.load(f)

    schema_id = schema.get("$id")
    if isinstance(schema_id, str) and schema_id:
        resource = Resource.from_contents(schema, default_specification=DRAFT202012)
        SCHEMA_REGISTRY = SCHEMA_REGISTRY.with_resource(schema_id, resource)

    return schema


def assert_pydantic_then_schema_ok(model_type: type[BaseModel], data: dict[str, Any], schema: dict[str, Any]) -> dict:
    """
    Validate with Pydantic first, then validate the dumped instance with JSON Schema.
    """
    obj = model_type.model_validate(data)
    instance = json.loads(obj.model_dump_json(by_alias=True))
    jsonschema_validate(instance=instance, schema=schema, registry=SCHEMA_REGISTRY)
    return instance


def assert_schema_invalid_but_pydantic_rejects(model_type: type[BaseModel], data: dict[str, Any], schema: dict[str, Any]) -> None:
    with pytest.raises(JsonSchemaValidationError):
        jsonschema_validate(instance=data, schema=schema, registry=SCHEMA_REGISTRY)

    with pytest.raises(PydanticValidationError):
        model_type.model_validate(data)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module", autouse=True)
def _load_common_schema() -> None:
    load_schema("common.schema.json")


@pytest.fixture(scope="module")
def plan_config_schema() -> dict:
    return load_schema("plan_config.schema.json")


@pytest.fixture(scope="module")
def reading_target_schema() -> dict:
    return load_schema("reading_target.schema.json")


@pytest.fixture(scope="module")
def checklist_schema() -> dict:
    return load_schema("checklist_state.schema.json")


# ---------------------------------------------------------------------------
# PlanConfig
# ---------------------------------------------------------------------------

def make_plan_config(**overrides) -> dict[str, Any]:
    data: dict[str, Any] = {
        "total": 604,
        "periods": 29,
        "mode": "per-slot",
        "slots_per_day": 5,
        "distribute_remainder": True,
        "unit_label": "pages",
    }
    data.update(overrides)
    return data


def test_plan_config_valid(plan_config_schema):
    assert_pydantic_then_schema_ok(PlanConfig, make_plan_config(), plan_config_schema)
    assert_pydantic_then_schema_ok(PlanConfig, {"total": 1, "periods": 1}, plan_config_schema)


def test_plan_config_bounds(plan_config_schema):
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, make_plan_config(total=0), plan_config_schema)
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, make_plan_config(total=1_000_001), plan_config_schema)
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, make_plan_config(periods=367), plan_config_schema)
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, make_plan_config(slots_per_day=0), plan_config_schema)
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, make_plan_config(slots_per_day=11), plan_config_schema)


def test_plan_config_mode_enum(plan_config_schema):
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, make_plan_config(mode="per-prayer"), plan_config_schema)


def test_plan_config_required_fields(plan_config_schema):
    bad = make_plan_config()
    bad.pop("periods")
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, bad, plan_config_schema)


def test_plan_config_rejects_additional_properties(plan_config_schema):
    bad = make_plan_config(unexpected=1)
    assert_schema_invalid_but_pydantic_rejects(PlanConfig, bad, plan_config_schema)


# ---------------------------------------------------------------------------
# ReadingTarget
# ---------------------------------------------------------------------------

def test_reading_target_valid(reading_target_schema):
    assert_pydantic_then_schema_ok(ReadingTarget, {}, reading_target_schema)
    assert_pydantic_then_schema_ok(
        ReadingTarget,
        {"unit": "ayat", "periods": 30.5, "khatam_times": 3, "mode": "per-day"},
        reading_target_schema,
    )


def test_reading_target_structural_constraints(reading_target_schema):
    assert_schema_invalid_but_pydantic_rejects(ReadingTarget, {"unit": "juz"}, reading_target_schema)
    assert_schema_invalid_but_pydantic_rejects(ReadingTarget, {"mode": "weekly"}, reading_target_schema)
    assert_schema_invalid_but_pydantic_rejects(ReadingTarget, {"days": 30}, reading_target_schema)


# ---------------------------------------------------------------------------
# ChecklistState
# ---------------------------------------------------------------------------

def test_checklist_valid(checklist_schema):
    data = {"completedDays": {"1": True, "12": False}, "completedSlots": {"1:3": True}}
    instance = assert_pydantic_then_schema_ok(ChecklistState, data, checklist_schema)
    assert instance == data


def test_checklist_empty_is_valid(checklist_schema):
    assert_pydantic_then_schema_ok(ChecklistState, {}, checklist_schema)


def test_checklist_day_keys_must_be_numbers(checklist_schema):
    bad = {"completedDays": {"first": True}}
    assert_schema_invalid_but_pydantic_rejects(ChecklistState, bad, checklist_schema)


def test_checklist_values_must_be_booleans(checklist_schema):
    bad = {"completedDays": {"1": "maybe"}}
    assert_schema_invalid_but_pydantic_rejects(ChecklistState, bad, checklist_schema)


def test_checklist_rejects_additional_properties(checklist_schema):
    bad = {"completedDays": {}, "lastRead": 3}
    assert_schema_invalid_but_pydantic_rejects(ChecklistState, bad, checklist_schema)

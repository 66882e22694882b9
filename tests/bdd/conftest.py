"""Shared fixtures and steps for the component generation scenarios."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import when

from bootstrap_hbs.library import ComponentLibraryWriter

if typ.TYPE_CHECKING:
    from bootstrap_hbs.request import GenerationRequest

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@when("I generate the component into a temporary library")
def when_generate(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Run the library writer for the request stored in scenario state."""
    request = typ.cast("GenerationRequest", scenario_state["request"])
    report = ComponentLibraryWriter(request, library_dir=tmp_path / "library").run()
    scenario_state["report"] = report
    scenario_state["library_dir"] = tmp_path / "library"
    scenario_state["template"] = (report.target_dir / "index.hbs").read_text(
        encoding="utf-8"
    )

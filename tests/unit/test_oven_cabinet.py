"""Tests for built-in oven housing panels."""

from __future__ import annotations

import pytest

from cutlist.domain import (
    CabinetOptions,
    CabinetSpec,
    ConstructionConflictError,
    ConstructionSettings,
    DrawerSystem,
    MaterialSet,
)
from cutlist.domain.generators import cabinet_issues, oven_panels, validate_cabinet
from cutlist.domain.generators.oven import oven_drawer_height


@pytest.fixture
def oven() -> CabinetSpec:
    return CabinetSpec.oven(
        "OV1", 600, 760, 580, system=DrawerSystem.METABOX, slider_length=450, rail_height=131
    )


class TestOvenPanels:
    def test_drawer_and_shelf(
        self, oven: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
    ) -> None:
        panels = oven_panels(oven, settings, materials)
        face, bottom, back, shelf = panels[-4:]

        assert face.label == "OV1-> Drawer 1 Face"
        assert (face.length, face.width) == (158, 596)
        assert (bottom.length, bottom.width) == (533, 408)
        assert back.label == "OV1-> Drawer 1 Back"
        assert (back.length, back.width) == (533, 101)
        assert shelf.label == "OV1-> Oven Shelf"
        assert (shelf.length, shelf.width) == (564, 580)
        assert shelf.banding == (1, 0, 0, 0)
        assert shelf.material == "Corpus"

    def test_corpus_comes_first(
        self, oven: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
    ) -> None:
        panels = oven_panels(oven, settings, materials)
        assert panels[0].label == "OV1-> Side panel"
        assert panels[4].label == "OV1-> Back panel"

    def test_resolver_defaults(
        self, settings: ConstructionSettings, materials: MaterialSet
    ) -> None:
        spec = CabinetSpec.oven("OV2", 600, 760, 580)
        bottom, back = oven_panels(spec, settings, materials)[-3:-1]
        # runner 577 - 30 setback, default rail 131
        assert bottom.width == 505
        assert back.width == 101

    def test_drawer_height_with_gola(self, settings: ConstructionSettings) -> None:
        spec = CabinetSpec.oven(
            "OV3", 600, 760, 580, options=CabinetOptions(hidden_handles=True)
        )
        assert oven_drawer_height(spec, settings) == pytest.approx(111.8)


class TestOvenConflicts:
    @pytest.mark.parametrize(
        "options, names",
        [
            (CabinetOptions(inset_back=True), ("inset_back",)),
            (CabinetOptions(rabbet_back=True), ("rabbet_back",)),
            (CabinetOptions(inset_back=True, rabbet_back=True), ("inset_back", "rabbet_back")),
        ],
    )
    def test_fitted_back_rejected(self, options: CabinetOptions, names: tuple[str, ...]) -> None:
        with pytest.raises(ConstructionConflictError, match="Oven cabinet cannot be") as exc_info:
            CabinetSpec.oven("OV1", 600, 760, 580, options=options)
        assert exc_info.value.cabinet_id == "OV1"
        assert exc_info.value.options == names

    def test_conflict_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CabinetSpec.oven("OV1", 600, 760, 580, options=CabinetOptions(inset_back=True))


class TestOvenIssues:
    def test_valid(self, oven: CabinetSpec, settings: ConstructionSettings) -> None:
        assert validate_cabinet(oven, settings)

    def test_wrong_width(self, settings: ConstructionSettings) -> None:
        issues = cabinet_issues(CabinetSpec.oven("OV1", 650, 760, 580), settings)
        assert len(issues) == 1
        assert "600 mm wide" in issues[0]

    def test_too_shallow(self, settings: ConstructionSettings) -> None:
        issues = cabinet_issues(CabinetSpec.oven("OV1", 600, 760, 500), settings)
        assert len(issues) == 1
        assert "560 mm deep" in issues[0]

    def test_drawer_too_low(self, settings: ConstructionSettings) -> None:
        spec = CabinetSpec.oven("OV1", 600, 760, 580, options=CabinetOptions(hidden_handles=True))
        issues = cabinet_issues(spec, settings)
        assert len(issues) == 1
        assert "minimum is 140 mm" in issues[0]

    def test_all_problems_reported(self, settings: ConstructionSettings) -> None:
        assert len(cabinet_issues(CabinetSpec.oven("OV1", 500, 700, 400), settings)) == 3

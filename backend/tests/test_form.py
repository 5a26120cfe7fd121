"""Tests for form-state transitions and input coercion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dutoan.data.repository import CatalogRepository
from dutoan.exceptions import DutoanError, InvalidSelectionError, UnknownFieldError
from dutoan.form import (
    apply_edit,
    coerce_bool,
    coerce_number,
    default_inputs,
    select_basement,
    select_foundation,
    select_package,
    select_roof,
)
from dutoan.models.enums import BasementType, FoundationType, PackageTier, RoofType
from dutoan.models.inputs import CalculationInputs


class TestCoercion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", 0.0),
            ("   ", 0.0),
            (None, 0.0),
            ("abc", 0.0),
            ("1e", 0.0),
            ("nan", 0.0),
            ("inf", 0.0),
            ("12.5", 12.5),
            (" 7 ", 7.0),
            ("-3", -3.0),
            (4, 4.0),
            (2.25, 2.25),
            (10**400, 0.0),
            (-(10**400), 0.0),
            ("1" + "0" * 400, 0.0),
        ],
    )
    def test_coerce_number(self, raw: object, expected: float) -> None:
        assert coerce_number(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (True, True),
            (False, False),
            ("true", True),
            ("on", True),
            ("1", True),
            ("false", False),
            ("", False),
            (0, False),
        ],
    )
    def test_coerce_bool(self, raw: object, expected: bool) -> None:
        assert coerce_bool(raw) is expected


class TestDefaults:
    def test_default_inputs_is_empty_form(self) -> None:
        inputs = default_inputs()
        assert inputs.width == 0.0
        assert inputs.length == 0.0
        assert inputs.num_floors == 0
        assert not inputs.is_complete

    def test_defaults_come_from_tables(self) -> None:
        inputs = default_inputs()
        assert inputs.foundation == FoundationType.PILE
        assert inputs.foundation_coeff == 40.0
        assert inputs.basement == BasementType.NONE
        assert inputs.basement_coeff == 0.0
        assert inputs.roof == RoofType.CONCRETE
        assert inputs.roof_coeff == 50.0
        assert inputs.floor_coeff == 100.0
        assert inputs.has_terrace is False
        assert inputs.terrace_coeff == 50.0
        assert inputs.package_tier == PackageTier.STANDARD
        assert inputs.custom_unit_price == 5_000_000.0

    def test_model_defaults_match_default_inputs(self) -> None:
        assert CalculationInputs() == default_inputs()


class TestNumericEdits:
    def test_edit_returns_new_record(self) -> None:
        before = default_inputs()
        after = apply_edit(before, "width", "10")
        assert after.width == 10.0
        assert before.width == 0.0
        assert after is not before

    def test_records_are_frozen(self) -> None:
        inputs = default_inputs()
        with pytest.raises(ValidationError):
            inputs.width = 5.0  # type: ignore[misc]

    def test_empty_text_coerces_to_zero(self) -> None:
        inputs = apply_edit(default_inputs(), "length", "8")
        inputs = apply_edit(inputs, "length", "")
        assert inputs.length == 0.0

    def test_camel_case_alias_accepted(self) -> None:
        inputs = apply_edit(default_inputs(), "numFloors", "3")
        assert inputs.num_floors == 3

    def test_floor_count_truncated_to_int(self) -> None:
        inputs = apply_edit(default_inputs(), "num_floors", "2.7")
        assert inputs.num_floors == 2
        assert isinstance(inputs.num_floors, int)

    def test_terrace_toggle(self) -> None:
        inputs = apply_edit(default_inputs(), "hasTerrace", "on")
        assert inputs.has_terrace is True
        inputs = apply_edit(inputs, "hasTerrace", False)
        assert inputs.has_terrace is False

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(UnknownFieldError):
            apply_edit(default_inputs(), "height", "3")

    def test_unknown_field_is_dutoan_error(self) -> None:
        with pytest.raises(DutoanError):
            apply_edit(default_inputs(), "", "3")


class TestSelectorResets:
    def test_foundation_change_resets_coefficient(self) -> None:
        inputs = apply_edit(default_inputs(), "foundationCoeff", "33")
        assert inputs.foundation_coeff == 33.0
        inputs = apply_edit(inputs, "foundation", "raft")
        assert inputs.foundation == FoundationType.RAFT
        assert inputs.foundation_coeff == 80.0

    def test_override_sticks_until_next_selection(self) -> None:
        inputs = apply_edit(default_inputs(), "roof", "tile_truss")
        assert inputs.roof_coeff == 70.0
        inputs = apply_edit(inputs, "roofCoeff", "65")
        inputs = apply_edit(inputs, "width", "10")
        assert inputs.roof_coeff == 65.0
        inputs = apply_edit(inputs, "roof", "concrete")
        assert inputs.roof_coeff == 50.0

    def test_reselecting_same_type_resets_override(self) -> None:
        inputs = apply_edit(default_inputs(), "foundationCoeff", "10")
        inputs = apply_edit(inputs, "foundation", "pile")
        assert inputs.foundation_coeff == 40.0

    def test_basement_selection(self) -> None:
        inputs = select_basement(default_inputs(), BasementType.MULTI_LEVEL)
        assert inputs.basement_coeff == 250.0
        inputs = select_basement(inputs, BasementType.NONE)
        assert inputs.basement_coeff == 0.0

    def test_selectors_use_given_catalog(self) -> None:
        catalog = CatalogRepository(foundation_coeffs={
            FoundationType.SINGLE: 1.0,
            FoundationType.PILE: 2.0,
            FoundationType.STRIP: 3.0,
            FoundationType.RAFT: 4.0,
        })
        inputs = select_foundation(default_inputs(), FoundationType.STRIP, catalog)
        assert inputs.foundation_coeff == 3.0

    def test_roof_selection_helper(self) -> None:
        inputs = select_roof(default_inputs(), RoofType.METAL_SHEET)
        assert inputs.roof == RoofType.METAL_SHEET
        assert inputs.roof_coeff == 30.0

    def test_package_switch_keeps_custom_price(self) -> None:
        inputs = apply_edit(default_inputs(), "customUnitPrice", "4200000")
        inputs = select_package(inputs, PackageTier.CUSTOM)
        inputs = apply_edit(inputs, "packageTier", "premium")
        assert inputs.package_tier == PackageTier.PREMIUM
        assert inputs.custom_unit_price == 4_200_000.0

    def test_invalid_selection_rejected(self) -> None:
        with pytest.raises(InvalidSelectionError, match="FoundationType"):
            apply_edit(default_inputs(), "foundation", "floating")

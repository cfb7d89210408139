"""
Tests for caller-side layout validation.
"""

import pytest

from shipbreakers.layout.errors import UnknownTemplateError
from shipbreakers.layout.generator import generate_layout_from_template
from shipbreakers.layout.hull import HullMass
from shipbreakers.layout.models import Layout, RoomDescriptor
from shipbreakers.layout.templates import TemplateCatalog
from shipbreakers.layout.validators import (
    LayoutValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    matches_seed,
    require_known_template,
)


@pytest.fixture
def validator():
    return LayoutValidator()


class TestValidationResult:
    """Result bookkeeping."""

    def test_error_invalidates(self):
        result = ValidationResult()
        result.add_error("x", "bad")
        assert not result.is_valid
        assert result.errors_count == 1

    def test_warning_keeps_valid(self):
        result = ValidationResult()
        result.add_warning("y", "meh", room_index=2)
        assert result.is_valid
        assert result.warnings_count == 1
        assert result.get_issues("y")[0].room_index == 2

    def test_to_dict(self):
        result = ValidationResult()
        result.add_issue(ValidationIssue("z", ValidationSeverity.INFO, "note"))
        data = result.to_dict()
        assert data["is_valid"] is True
        assert data["issues"][0]["severity"] == "info"


class TestGeneratedLayouts:
    """Generator output always passes."""

    @pytest.mark.parametrize("template", TemplateCatalog.list_all())
    def test_generated_layouts_valid(self, validator, template):
        for seed in range(25):
            result = validator.validate(generate_layout_from_template(seed, template))
            assert result.is_valid, result.to_dict()
            assert result.warnings_count == 0

    def test_unknown_template_warns(self, validator):
        result = validator.validate(generate_layout_from_template(7, "nonexistent"))
        assert result.is_valid
        assert len(result.get_issues("layout-template-unknown")) == 1


class TestDefects:
    """Tampered layouts are reported, not repaired."""

    def test_room_count(self, validator, hauler_layout):
        layout = Layout("I-hauler", hauler_layout.rooms[:1])
        result = validator.validate(layout)
        assert not result.is_valid
        assert result.get_issues("layout-room-count")

    def test_kind_mismatch(self, validator):
        layout = Layout("I-hauler", (
            RoomDescriptor(0, 0, 6, 1, "cargo"),
            RoomDescriptor(0, 1, 6, 1, "casino"),
        ))
        issues = validator.validate(layout).get_issues("room-kind-mismatch")
        assert [i.room_index for i in issues] == [1]

    def test_outside_envelope(self, validator):
        layout = Layout("I-hauler", (
            RoomDescriptor(2, 0, 6, 1, "cargo"),
            RoomDescriptor(0, 1, 5, 1, "crew"),
        ))
        issues = validator.validate(layout).get_issues("room-outside-envelope")
        assert [i.room_index for i in issues] == [0, 1]

    def test_nonpositive_extent_reported(self, validator):
        layout = Layout("custom", (RoomDescriptor(0, 0, 0, 2, "cargo"),))
        result = validator.validate(layout)
        assert result.get_issues("room-extent-nonpositive")
        assert layout.rooms[0].w == 0

    def test_checked_rules(self, validator, hauler_layout):
        rules = validator.validate(hauler_layout).checked_rules
        assert "room-extent-nonpositive" in rules
        assert "room-origin-outside-hull" not in rules


class TestHullFit:
    """Origin cells against the hull grid."""

    def test_hauler_on_small_hull(self, validator, hauler_layout):
        result = validator.validate(hauler_layout, hull_mass=HullMass.SMALL)
        issues = result.get_issues("room-origin-outside-hull")
        assert [i.room_index for i in issues] == [0]
        assert result.is_valid

    def test_freighter_on_medium_hull(self, validator):
        layout = generate_layout_from_template(42, "T-freighter")
        issues = validator.validate(layout, hull_mass="medium").get_issues("room-origin-outside-hull")
        assert [i.room_index for i in issues] == [1, 2]

    def test_all_inside_massive_hull(self, validator):
        layout = Layout("I-hauler", (
            RoomDescriptor(0, 0, 6, 1, "cargo"),
            RoomDescriptor(0, 1, 6, 1, "crew"),
        ))
        assert validator.validate(layout, hull_mass="massive").warnings_count == 0


class TestCollaboratorChecks:
    """require_known_template and matches_seed."""

    def test_require_known_template(self):
        assert require_known_template("L-military") == "L-military"

    def test_require_unknown_template(self):
        with pytest.raises(UnknownTemplateError) as exc:
            require_known_template("nonexistent")
        assert exc.value.code == "LAYOUT_001"
        assert exc.value.to_dict()["category"] == "layout_template"

    def test_matches_seed(self, hauler_layout):
        assert matches_seed(hauler_layout, 1)
        assert not matches_seed(hauler_layout, 123456789)

    def test_matches_seed_detects_edit(self):
        layout = generate_layout_from_template(5, "H-luxury")
        edited = Layout(layout.template, layout.rooms[::-1])
        assert not matches_seed(edited, 5)

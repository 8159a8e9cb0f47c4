"""Tests for the TraversalOptions frozen dataclass.

Covers:
- Default values (deep, arrays, preserve_types True; no mappings or filters)
- Immutability (FrozenInstanceError on assignment, read-only field_mappings)
- Normalisation of field lists to frozensets
- Validation of flag and collection types
- from_kwargs() merging of partial configuration
- allows() / mapped_name() precedence helpers
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_casefy.algorithm.config import TraversalOptions
from json_casefy.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestTraversalOptionsDefaults:
    """Default option values."""

    def test_flags_default_to_true(self) -> None:
        options = TraversalOptions()
        assert options.deep is True
        assert options.arrays is True
        assert options.preserve_types is True

    def test_no_mappings_or_filters(self) -> None:
        options = TraversalOptions()
        assert dict(options.field_mappings) == {}
        assert options.exclude_fields == frozenset()
        assert options.include_fields is None


# ---------------------------------------------------------------------------
# Immutability & normalisation
# ---------------------------------------------------------------------------


class TestTraversalOptionsImmutability:
    """Options are frozen and copy caller collections."""

    def test_assignment_raises(self) -> None:
        options = TraversalOptions()
        with pytest.raises(FrozenInstanceError):
            options.deep = False  # type: ignore[misc]

    def test_field_mappings_is_read_only_copy(self) -> None:
        source = {"user_name": "fullName"}
        options = TraversalOptions(field_mappings=source)
        source["user_age"] = "age"
        assert "user_age" not in options.field_mappings
        with pytest.raises(TypeError):
            options.field_mappings["x"] = "y"  # type: ignore[index]

    def test_field_lists_become_frozensets(self) -> None:
        options = TraversalOptions(
            exclude_fields=["a", "b"],  # type: ignore[arg-type]
            include_fields=("c",),  # type: ignore[arg-type]
        )
        assert options.exclude_fields == frozenset({"a", "b"})
        assert options.include_fields == frozenset({"c"})

    def test_empty_include_list_is_an_empty_whitelist(self) -> None:
        options = TraversalOptions(include_fields=[])  # type: ignore[arg-type]
        assert options.include_fields == frozenset()
        assert options.allows("anything") is False

    def test_empty_mapping_targets_are_dropped(self) -> None:
        options = TraversalOptions(field_mappings={"a": "", "b": "B"})
        assert dict(options.field_mappings) == {"b": "B"}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestTraversalOptionsValidation:
    """Ill-typed options raise ConfigurationError."""

    @pytest.mark.parametrize("name", ["deep", "arrays", "preserve_types"])
    def test_non_bool_flag_raises(self, name: str) -> None:
        with pytest.raises(ConfigurationError, match=name):
            TraversalOptions(**{name: 1})  # type: ignore[arg-type]

    def test_bare_string_field_list_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="not a string"):
            TraversalOptions(exclude_fields="user_name")  # type: ignore[arg-type]

    def test_non_iterable_field_list_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="include_fields"):
            TraversalOptions(include_fields=5)  # type: ignore[arg-type]

    def test_non_mapping_field_mappings_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="field_mappings"):
            TraversalOptions(field_mappings=[("a", "b")])  # type: ignore[arg-type]

    def test_non_string_mapping_target_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="field_mappings"):
            TraversalOptions(field_mappings={"a": 5})  # type: ignore[dict-item]

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            TraversalOptions(deep="yes")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# from_kwargs
# ---------------------------------------------------------------------------


class TestFromKwargs:
    """from_kwargs() merges partial configuration with defaults."""

    def test_none_values_fall_back_to_defaults(self) -> None:
        options = TraversalOptions.from_kwargs(
            deep=None, field_mappings=None, include_fields=None
        )
        assert options == TraversalOptions()

    def test_overrides_are_applied(self) -> None:
        options = TraversalOptions.from_kwargs(arrays=False, exclude_fields=["x"])
        assert options.arrays is False
        assert options.exclude_fields == frozenset({"x"})
        assert options.deep is True

    def test_unknown_option_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown traversal option"):
            TraversalOptions.from_kwargs(depth=3)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestPrecedenceHelpers:
    """allows(), mapped_name() and as_dict()."""

    def test_exclusion_beats_inclusion(self) -> None:
        options = TraversalOptions(
            exclude_fields=frozenset({"a"}), include_fields=frozenset({"a", "b"})
        )
        assert options.allows("a") is False
        assert options.allows("b") is True
        assert options.allows("c") is False

    def test_everything_allowed_by_default(self) -> None:
        assert TraversalOptions().allows("whatever") is True

    def test_mapped_name(self) -> None:
        options = TraversalOptions(field_mappings={"user_name": "fullName"})
        assert options.mapped_name("user_name") == "fullName"
        assert options.mapped_name("user_age") is None

    def test_as_dict_is_plain_data(self) -> None:
        options = TraversalOptions(
            exclude_fields=frozenset({"b", "a"}), field_mappings={"x": "y"}
        )
        assert options.as_dict() == {
            "deep": True,
            "arrays": True,
            "preserve_types": True,
            "field_mappings": {"x": "y"},
            "exclude_fields": ["a", "b"],
            "include_fields": None,
        }

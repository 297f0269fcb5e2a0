from types import SimpleNamespace

import pytest

from interaction_analysis.attributes import attributes_comparator, normalize_attributes
from taxonomy import AttributeConstraint


TYPE_BUTTON = (AttributeConstraint(name="type", value="button"),)


class TestNormalizeAttributes:
    @pytest.mark.parametrize("attributes", [
        {"Type": "button", "id": "go"},
        [("type", "button"), ("ID", "go")],
        [{"name": "type", "value": "button"}, {"name": "id", "value": "go"}],
        [SimpleNamespace(name="TYPE", value="button"), SimpleNamespace(name="id", value="go")],
    ])
    def test_supported_shapes(self, attributes):
        assert normalize_attributes(attributes) == {"type": "button", "id": "go"}

    def test_none_is_empty(self):
        assert normalize_attributes(None) == {}

    def test_entries_without_a_name_are_skipped(self):
        spread = SimpleNamespace(argument="props")
        assert normalize_attributes([spread, ("type", "text")]) == {"type": "text"}

    def test_first_occurrence_wins(self):
        assert normalize_attributes([("type", "text"), ("type", "hidden")]) == {"type": "text"}


class TestAttributesComparator:
    def test_no_constraints_match_anything(self):
        assert attributes_comparator((), [])
        assert attributes_comparator((), {"type": "button"})
        assert attributes_comparator(None, None)

    def test_required_value_must_be_equal(self):
        assert attributes_comparator(TYPE_BUTTON, {"type": "button"})
        assert not attributes_comparator(TYPE_BUTTON, {"type": "submit"})

    def test_missing_attribute_is_a_non_match(self):
        assert not attributes_comparator(TYPE_BUTTON, [])
        assert not attributes_comparator(TYPE_BUTTON, {"type": None})

    def test_extra_attributes_are_ignored(self):
        assert attributes_comparator(TYPE_BUTTON, {"type": "button", "class": "primary", "onclick": "go()"})

    def test_attribute_names_compare_case_insensitively(self):
        assert attributes_comparator(TYPE_BUTTON, [("TYPE", "button")])

    def test_presence_only_constraint(self):
        multiple = (AttributeConstraint(name="multiple"),)
        assert attributes_comparator(multiple, {"multiple": ""})
        assert not attributes_comparator(multiple, {"size": "4"})

    def test_set_constraint_needs_a_non_empty_value(self):
        href_set = (AttributeConstraint(name="href", constraints=("set",)),)
        assert attributes_comparator(href_set, {"href": "/home"})
        assert not attributes_comparator(href_set, {"href": ""})
        assert not attributes_comparator(href_set, {})

    def test_undefined_constraint_needs_the_attribute_absent(self):
        no_list = (AttributeConstraint(name="list", constraints=("undefined",)),)
        assert attributes_comparator(no_list, {"type": "text"})
        assert not attributes_comparator(no_list, {"list": "suggestions"})

    def test_every_constraint_must_hold(self):
        text_without_list = (
            AttributeConstraint(name="list", constraints=("undefined",)),
            AttributeConstraint(name="type", value="text"),
        )
        assert attributes_comparator(text_without_list, {"type": "text"})
        assert not attributes_comparator(text_without_list, {"type": "text", "list": "x"})
        assert not attributes_comparator(text_without_list, {"type": "email"})

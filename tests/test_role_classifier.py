import pytest

from interaction_analysis.role_classifier import classify_roles
from taxonomy import load_role_taxonomy
from conftest import SMALL_ROLES, make_role_taxonomy


class TestSmallTaxonomy:
    def test_widget_descendants_are_interactive(self, small_role_taxonomy):
        result = classify_roles(small_role_taxonomy)
        assert "button" in result.interactive_roles
        assert "button" not in result.non_interactive_roles

    def test_role_with_any_widget_chain_is_interactive(self, small_role_taxonomy):
        # row has one structure chain and one widget chain
        result = classify_roles(small_role_taxonomy)
        assert "row" in result.interactive_roles
        assert "row" not in result.non_interactive_roles

    def test_structure_descendants_are_non_interactive(self, small_role_taxonomy):
        result = classify_roles(small_role_taxonomy)
        assert "paragraph" in result.non_interactive_roles

    def test_abstract_roles_are_in_neither_set(self, small_role_taxonomy):
        result = classify_roles(small_role_taxonomy)
        for name in ("widget", "structure"):
            assert name not in result.interactive_roles
            assert name not in result.non_interactive_roles

    def test_overrides(self, small_role_taxonomy):
        result = classify_roles(small_role_taxonomy)
        assert "toolbar" in result.interactive_roles
        assert "toolbar" not in result.non_interactive_roles
        assert "progressbar" in result.non_interactive_roles
        assert "progressbar" not in result.interactive_roles

    def test_generic_is_in_neither_set(self, small_role_taxonomy):
        result = classify_roles(small_role_taxonomy)
        assert "generic" not in result.interactive_roles
        assert "generic" not in result.non_interactive_roles

    def test_overrides_are_added_even_when_roles_are_missing(self):
        roles = {name: SMALL_ROLES[name] for name in ("widget", "button", "paragraph")}
        result = classify_roles(make_role_taxonomy(roles))
        assert "toolbar" in result.interactive_roles
        assert "progressbar" in result.non_interactive_roles


class TestPackagedTaxonomy:
    @pytest.fixture(scope="class")
    def role_taxonomy(self):
        return load_role_taxonomy()

    @pytest.fixture(scope="class")
    def classification(self, role_taxonomy):
        return classify_roles(role_taxonomy)

    def test_every_concrete_role_is_in_at_most_one_set(self, role_taxonomy, classification):
        for name, role in role_taxonomy.roles.items():
            if role.abstract:
                continue
            memberships = (
                (name in classification.interactive_roles)
                + (name in classification.non_interactive_roles)
            )
            expected = 0 if name == "generic" else 1
            assert memberships == expected, name

    @pytest.mark.parametrize("name", [
        "button", "checkbox", "link", "menuitem", "option", "slider",
        "tab", "textbox", "row", "gridcell", "columnheader", "doc-noteref",
    ])
    def test_interactive_roles(self, classification, name):
        assert name in classification.interactive_roles

    @pytest.mark.parametrize("name", [
        "article", "banner", "dialog", "heading", "img", "list", "listitem",
        "main", "meter", "navigation", "paragraph", "presentation", "table", "doc-toc",
    ])
    def test_non_interactive_roles(self, classification, name):
        assert name in classification.non_interactive_roles

    def test_no_abstract_role_is_classified(self, role_taxonomy, classification):
        abstract = {name for name, role in role_taxonomy.roles.items() if role.abstract}
        assert not abstract & classification.interactive_roles
        assert not abstract & classification.non_interactive_roles

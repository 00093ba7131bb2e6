"""
Unit tests for attribute predicate generators.

This module contains unit tests for:
- make_attribute_function() and its eight variants
- Default and explicit contexts
- Existence checks when no value is given
- The pre-built generators for well-known attributes
"""

import pytest

from xpath_locator.locators.builder import lower_case
from xpath_locator.locators.predicates import (
    ATTRIBUTE_FUNCTIONS,
    VARIANT_NAMES,
    AttributeFunction,
    make_attribute_function,
    xclass,
    xid,
    xtext,
)

LOWER_ID = lower_case("@id")
LOWER_FOO = lower_case('"Foo"')


class TestMakeAttributeFunction:
    """Test the variant family built for a key."""

    def test_returns_record_with_all_variants(self):
        generators = make_attribute_function("@data-test")
        assert isinstance(generators, AttributeFunction)
        assert generators.key == "@data-test"
        assert set(generators.variants) == set(VARIANT_NAMES)

    def test_calling_record_calls_plain(self):
        generators = make_attribute_function("@data-test")
        assert generators("x") == generators.plain("x") == '//*[@data-test="x"]'

    def test_variants_are_independent_functions(self):
        generators = make_attribute_function("@id")
        assert len({id(fn) for fn in generators.variants.values()}) == 8


class TestVariants:
    """Test each variant's predicate shape."""

    def test_plain_default_context(self):
        assert xid("foo") == '//*[@id="foo"]'

    def test_plain_explicit_context(self):
        assert xid("foo", "//div") == '//div[@id="foo"]'

    def test_contains_with_context(self):
        assert xid.c("foo", 'id("bar")') == 'id("bar")[contains(@id,"foo")]'

    def test_ignore_case_folds_both_sides(self):
        assert xid.i("Foo") == f'//*[{LOWER_ID}={LOWER_FOO}]'

    def test_ignore_case_contains(self):
        assert xid.ic("Foo") == f'//*[contains({LOWER_ID},{LOWER_FOO})]'

    def test_negated(self):
        assert xid.n("foo") == '//*[not(@id="foo")]'

    def test_negated_contains(self):
        assert xid.nc("foo", "//a") == '//a[not(contains(@id,"foo"))]'

    def test_negated_ignore_case(self):
        assert xid.ni("Foo") == f'//*[not({LOWER_ID}={LOWER_FOO})]'

    def test_negated_ignore_case_contains(self):
        assert xid.nic("Foo") == (
            f'//*[not(contains({LOWER_ID},{LOWER_FOO}))]'
        )

    def test_value_is_quoted(self):
        """Test a value with both quote kinds cannot alter the expression."""
        assert xclass.c('a"b\'c') == '//*[contains(@class,concat("a", \'"\', "b\'c"))]'

    def test_empty_value_compares_to_empty_literal(self):
        assert xid("") == '//*[@id=""]'


class TestOmittedValue:
    """Test existence checks and variants that require a value."""

    def test_plain_without_value_checks_existence(self):
        assert xid() == "//*[@id]"
        assert xid(None, "//input") == "//input[@id]"

    def test_negated_without_value_checks_absence(self):
        assert xid.n(context="//input") == "//input[not(@id)]"

    @pytest.mark.parametrize("variant", ["i", "c", "ic", "nc", "ni", "nic"])
    def test_other_variants_require_value(self, variant):
        with pytest.raises(ValueError):
            getattr(xid, variant)()


class TestPrebuiltGenerators:
    """Test the well-known attribute generators."""

    def test_all_ten_are_defined(self):
        assert set(ATTRIBUTE_FUNCTIONS) == {
            "id", "class", "name", "title", "style", "href", "type", "value", "src", "text",
        }

    @pytest.mark.parametrize("name", ["id", "class", "name", "title", "style", "href", "type", "value", "src"])
    def test_attribute_keys(self, name):
        assert ATTRIBUTE_FUNCTIONS[name].key == f"@{name}"

    def test_text_uses_text_node(self):
        assert xtext("Sign in", "//button") == '//button[text()="Sign in"]'

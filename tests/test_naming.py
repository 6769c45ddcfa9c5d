"""
Tests for GraphQL naming conventions
"""

from unittest import TestCase

from gql_auto_generator.domain.naming import (
    NamingConventions,
    args_type_name,
    pluralize,
    singularize,
    split_words,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)


class TestCaseConversion(TestCase):
    def test_split_words(self):
        assert split_words("createWidget_part") == ["create", "Widget", "part"]
        assert split_words("XMLHttpRequest") == ["XML", "Http", "Request"]

    def test_split_words_rejects_non_strings(self):
        with self.assertRaises(TypeError):
            split_words(None)

    def test_to_camel_case(self):
        assert to_camel_case("WidgetParts") == "widgetParts"
        assert to_camel_case("order_items") == "orderItems"
        assert to_camel_case("Widgets") == "widgets"
        assert to_camel_case("") == ""

    def test_to_pascal_case_keeps_acronyms(self):
        assert to_pascal_case("resetPassword") == "ResetPassword"
        assert to_pascal_case("resetAPIKey") == "ResetAPIKey"
        assert to_pascal_case("serial_number") == "SerialNumber"

    def test_to_snake_case(self):
        assert to_snake_case("widgetsMeta") == "widgets_meta"
        assert to_snake_case("OrderItem") == "order_item"


class TestInflection(TestCase):
    def test_pluralize(self):
        assert pluralize("Widget") == "Widgets"
        assert pluralize("Category") == "Categories"
        assert pluralize("") == ""

    def test_pluralize_capitalized_nouns(self):
        assert pluralize("Company") == "Companies"
        assert pluralize("Policy") == "Policies"
        assert pluralize("Address") == "Addresses"
        assert pluralize("Class") == "Classes"
        assert pluralize("Status") == "Statuses"

    def test_pluralize_only_inflects_last_word(self):
        assert pluralize("ProductCategory") == "ProductCategories"
        assert pluralize("shippingAddress") == "shippingAddresses"

    def test_singularize(self):
        assert singularize("Widgets") == "Widget"
        assert singularize("Widget") == "Widget"
        assert singularize("Categories") == "Category"
        assert singularize("People") == "Person"

    def test_singular_names_ending_in_s_are_unchanged(self):
        for name in ("Address", "Class", "Status", "Bus", "Analysis", "Category", "Company"):
            with self.subTest(name=name):
                assert singularize(name) == name


class TestNamingConventions(TestCase):
    """Test cases for derived query and type names"""

    def test_query_names(self):
        assert NamingConventions.collection_query("Widget") == "widgets"
        assert NamingConventions.meta_query("Widget") == "widgetsMeta"
        assert NamingConventions.single_query("Widget") == "widget"

    def test_irregular_plural(self):
        assert NamingConventions.collection_query("Person") == "people"
        assert NamingConventions.single_query("Person") == "person"

    def test_query_names_for_nouns_inflect_mishandles(self):
        assert NamingConventions.collection_query("Category") == "categories"
        assert NamingConventions.meta_query("Category") == "categoriesMeta"
        assert NamingConventions.single_query("Category") == "category"
        assert NamingConventions.collection_query("Address") == "addresses"
        assert NamingConventions.single_query("Address") == "address"
        assert NamingConventions.lookup_query("Status", "code") == "statusByCode"

    def test_multi_word_model(self):
        assert NamingConventions.collection_query("OrderItem") == "orderItems"
        assert NamingConventions.single_query("OrderItem") == "orderItem"

    def test_lookup_query(self):
        assert NamingConventions.lookup_query("Widget", "serialNumber") == "widgetBySerialNumber"
        assert NamingConventions.lookup_query("Widget", "id") == "widgetById"

    def test_type_names(self):
        assert NamingConventions.filter_type("Widget") == "WidgetFilter"
        assert NamingConventions.unique_filter_type("Widget") == "WidgetUniqueFilter"
        assert NamingConventions.meta_type("Widget") == "WidgetMeta"

    def test_args_type_name(self):
        assert args_type_name("resetName") == "ResetNameArgs"
        assert NamingConventions.args_type("archive") == "ArchiveArgs"

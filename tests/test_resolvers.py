"""
Tests for resolver stub generation
"""

import ast
from unittest import TestCase
from unittest.mock import patch

from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.domain.models import Operation
from gql_auto_generator.exceptions import MissingResolverError
from gql_auto_generator.resolvers import (
    PlainScriptWriter,
    PythonModuleWriter,
    ResolverWriterFactory,
    SourceModuleWriter,
    collect_resolver_context,
    generate_resolvers_code,
    resolver_file_name,
)
from gql_auto_generator.sdl.composer import generate_fragment

from factories import parts_relation, rename_operation, widget_model


def resolvers_for(model, config):
    return generate_resolvers_code(model, generate_fragment(model, config), config)


class TestCollectResolverContext(TestCase):
    """Test cases for collect_resolver_context"""

    def test_stub_names_match_schema_fields(self):
        model = widget_model(operations={"rename": rename_operation()})
        config = GenerationConfig()

        context = collect_resolver_context(model, generate_fragment(model, config), config)

        assert context["queries"] == ["widgets", "widgetsMeta", "widget"]
        assert context["mutations"] == ["rename"]
        assert context["relations"] == []

    def test_by_property_stub_names(self):
        config = GenerationConfig(unique_lookup_mode="by_property")
        model = widget_model()

        context = collect_resolver_context(model, generate_fragment(model, config), config)

        assert context["queries"] == ["widgets", "widgetsMeta", "widgetById"]

    def test_resolver_predicate(self):
        config = GenerationConfig(should_generate_resolver=lambda model, name: name != "widgetsMeta")
        model = widget_model()

        context = collect_resolver_context(model, generate_fragment(model, config), config)

        assert "widgetsMeta" not in context["queries"]

    def test_relation_body_from_hook(self):
        config = GenerationConfig(get_relation_resolver=lambda model, name, rel: "  return []\n")
        model = widget_model(relations={"parts": parts_relation()})

        context = collect_resolver_context(model, generate_fragment(model, config), config)

        assert context["relations"] == [{"name": "parts", "body": "return []"}]

    def test_missing_relation_resolver_raises(self):
        config = GenerationConfig()
        model = widget_model(relations={"parts": parts_relation()})

        with self.assertRaises(MissingResolverError) as cm:
            collect_resolver_context(model, generate_fragment(model, config), config)

        assert cm.exception.context == {"model": "Widget", "relation": "parts"}
        assert cm.exception.error_code == "MISSING_RESOLVER"

    def test_excluded_relation_needs_no_resolver(self):
        config = GenerationConfig(should_type_include_relation=lambda model, name, rel: False)
        model = widget_model(relations={"parts": parts_relation()})

        context = collect_resolver_context(model, generate_fragment(model, config), config)

        assert context["relations"] == []


class TestJavaScriptResolvers(TestCase):
    """Test cases for source-module and plain-script stubs"""

    def test_source_module(self):
        code = resolvers_for(widget_model(operations={"rename": rename_operation()}), GenerationConfig())

        assert code.startswith("// Resolver stubs for Widget\nexport default {\n  Query: {\n")
        assert "    widgets: (parent, args, context, info) => {\n" in code
        assert "      throw new Error('widgets is not implemented')\n" in code
        assert "  Mutation: {\n    rename: (parent, args, context, info) => {\n" in code
        assert code.endswith("  },\n}\n")

    def test_plain_script(self):
        code = resolvers_for(widget_model(), GenerationConfig(output_type="plain-script"))

        assert "module.exports = {" in code
        assert "export default" not in code

    def test_no_mutation_section_without_operations(self):
        code = resolvers_for(widget_model(), GenerationConfig())

        assert "Mutation" not in code

    def test_relation_section(self):
        config = GenerationConfig(
            get_relation_resolver=lambda model, name, rel: "return context.loaders.parts.load(parent.id)"
        )
        code = resolvers_for(widget_model(relations={"parts": parts_relation()}), config)

        assert "  Widget: {\n    parts: (parent, args, context, info) => {\n" in code
        assert "      return context.loaders.parts.load(parent.id)\n    },\n" in code

    def test_quotes_are_not_escaped(self):
        config = GenerationConfig(get_relation_resolver=lambda model, name, rel: "return load('parts', \"x\")")
        code = resolvers_for(widget_model(relations={"parts": parts_relation()}), config)

        assert "return load('parts', \"x\")" in code

    def test_nothing_to_resolve(self):
        config = GenerationConfig(generate_queries=False)

        assert resolvers_for(widget_model(), config) is None


class TestPythonResolvers(TestCase):
    """Test cases for python-module stubs"""

    def test_module_is_valid_python(self):
        config = GenerationConfig(
            output_type="python-module",
            get_relation_resolver=lambda model, name, rel: "return info.context['parts'](obj['id'])",
        )
        model = widget_model(operations={"rename": rename_operation(), "ping": Operation()},
                             relations={"parts": parts_relation()})

        code = resolvers_for(model, config)

        tree = ast.parse(code)
        functions = [node.name for node in tree.body if isinstance(node, ast.FunctionDef)]
        assert functions == [
            "resolve_widgets",
            "resolve_widgets_meta",
            "resolve_widget",
            "resolve_rename",
            "resolve_ping",
            "resolve_widget_parts",
        ]
        assert "from ariadne import MutationType, ObjectType, QueryType" in code
        assert 'widget_type = ObjectType("Widget")' in code
        assert '@query.field("widgetsMeta")' in code
        assert 'raise NotImplementedError("widgetsMeta is not implemented")' in code
        assert "resolvers = [query, mutation, widget_type]" in code

    def test_queries_only(self):
        code = resolvers_for(widget_model(), GenerationConfig(output_type="python-module"))

        assert "from ariadne import QueryType\n" in code
        assert "mutation" not in code
        assert "resolvers = [query]" in code

    def test_output_is_formatted_with_black(self):
        with patch("gql_auto_generator.resolvers.format_python_code_using_black") as mock_black:
            mock_black.return_value = "formatted"

            code = resolvers_for(widget_model(), GenerationConfig(output_type="python-module"))

        assert code == "formatted"
        filepath, _ = mock_black.call_args[0]
        assert filepath.name == "widget_resolvers.py"


class TestResolverWriterFactory(TestCase):
    def test_create(self):
        assert isinstance(ResolverWriterFactory.create("source-module"), SourceModuleWriter)
        assert isinstance(ResolverWriterFactory.create("plain-script"), PlainScriptWriter)
        assert isinstance(ResolverWriterFactory.create("python-module"), PythonModuleWriter)

    def test_unknown_output_type(self):
        with self.assertRaises(ValueError):
            ResolverWriterFactory.create("typescript")

    def test_file_names(self):
        assert resolver_file_name(widget_model(), GenerationConfig()) == "Widget.resolvers.js"
        assert resolver_file_name(widget_model(), GenerationConfig(output_type="plain-script")) == "Widget.resolvers.js"
        assert resolver_file_name(
            widget_model(name="OrderItem"), GenerationConfig(output_type="python-module")
        ) == "order_item_resolvers.py"

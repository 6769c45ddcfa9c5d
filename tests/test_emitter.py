"""
Tests for the generation run: file layout, skip/overwrite and the completion hook
"""

from pathlib import Path
from unittest import TestCase
from unittest.mock import MagicMock, patch

import pytest

from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.domain.models import Schema
from gql_auto_generator.emitter import SchemaEmitter, emit_schema
from gql_auto_generator.exceptions import MissingResolverError

from factories import gadget_model, parts_relation, rename_operation, widget_model


def sample_schema() -> Schema:
    return Schema(models=[widget_model(operations={"rename": rename_operation()}), gadget_model()])


@pytest.mark.usefixtures("output_dir")
class TestPerModelEmission(TestCase):
    """Test cases for the default one-file-per-model mode"""

    def config(self, **overrides) -> GenerationConfig:
        return GenerationConfig(output_dir=str(self.output_dir), **overrides)

    def test_files_written_in_model_order(self):
        files = SchemaEmitter(self.config()).emit(sample_schema())

        out = self.output_dir
        assert files == [
            str(out / "Widget.graphql"),
            str(out / "resolvers" / "Widget.resolvers.js"),
            str(out / "Gadget.graphql"),
            str(out / "resolvers" / "Gadget.resolvers.js"),
        ]
        for path in files:
            assert Path(path).is_file()

    def test_sdl_file_contents(self):
        SchemaEmitter(self.config()).emit(sample_schema())

        sdl = (self.output_dir / "Widget.graphql").read_text(encoding="utf-8")
        assert sdl.startswith("type Widget {\n  id: ID!\n  name: String!\n}\n")
        assert "type Mutation {\n  rename(data: RenameArgs!): Widget\n}\n" in sdl
        assert "Mutation" not in (self.output_dir / "Gadget.graphql").read_text(encoding="utf-8")

    def test_resolvers_can_be_disabled(self):
        files = SchemaEmitter(self.config(emit_resolvers=False)).emit(sample_schema())

        assert [Path(path).name for path in files] == ["Widget.graphql", "Gadget.graphql"]
        assert not (self.output_dir / "resolvers").exists()

    def test_python_resolvers(self):
        files = SchemaEmitter(self.config(output_type="python-module")).emit(sample_schema())

        assert str(self.output_dir / "resolvers" / "widget_resolvers.py") in files

    def test_second_run_writes_nothing(self):
        on_complete = MagicMock()
        config = self.config(on_complete=on_complete)
        emitter = SchemaEmitter(config)

        first = emitter.emit(sample_schema())
        second = emitter.emit(sample_schema())

        assert len(first) == 4
        assert second == []
        assert on_complete.call_args_list[-1][0][0] == []

    def test_existing_file_is_kept(self):
        target = self.output_dir / "Widget.graphql"
        target.write_text("# hand written\n", encoding="utf-8")

        files = SchemaEmitter(self.config()).emit(sample_schema())

        assert str(target) not in files
        assert target.read_text(encoding="utf-8") == "# hand written\n"

    def test_overwrite_existing(self):
        target = self.output_dir / "Widget.graphql"
        target.write_text("# hand written\n", encoding="utf-8")

        files = SchemaEmitter(self.config(overwrite_existing=True)).emit(sample_schema())

        assert str(target) in files
        assert target.read_text(encoding="utf-8").startswith("type Widget {")

    def test_model_predicates_are_combined(self):
        config = self.config(
            should_emit_model=lambda model: True,
            is_model_toplevel=lambda model: model.name != "Gadget",
            emit_resolvers=False,
        )

        files = SchemaEmitter(config).emit(sample_schema())

        assert [Path(path).name for path in files] == ["Widget.graphql"]

    def test_on_complete_receives_written_files(self):
        received = []
        config = self.config(on_complete=received.extend, emit_resolvers=False)

        files = SchemaEmitter(config).emit(sample_schema())

        assert received == files

    def test_missing_resolver_aborts_after_earlier_writes(self):
        schema = Schema(models=[gadget_model(), widget_model(relations={"parts": parts_relation()})])

        with self.assertRaises(MissingResolverError):
            SchemaEmitter(self.config()).emit(schema)

        # Files written before the failure stay on disk
        assert (self.output_dir / "Gadget.graphql").is_file()
        assert (self.output_dir / "Widget.graphql").is_file()

    def test_write_errors_propagate(self):
        emitter = SchemaEmitter(self.config())

        with patch("builtins.open", side_effect=PermissionError("read-only")):
            with self.assertRaises(PermissionError):
                emitter.emit(sample_schema())

    def test_verbose_logs_at_info(self):
        with self.assertLogs("gql_auto_generator.emitter", level="INFO") as logs:
            SchemaEmitter(self.config(verbose=True, emit_resolvers=False)).emit(sample_schema())

        assert any("Generated file:" in line for line in logs.output)


@pytest.mark.usefixtures("output_dir")
class TestMergedEmission(TestCase):
    """Test cases for merge mode"""

    def config(self, **overrides) -> GenerationConfig:
        return GenerationConfig(output_dir=str(self.output_dir), merge_output="schema.graphql", **overrides)

    def test_single_document(self):
        files = SchemaEmitter(self.config(emit_resolvers=False)).emit(sample_schema())

        assert files == [str(self.output_dir / "schema.graphql")]
        merged = (self.output_dir / "schema.graphql").read_text(encoding="utf-8")
        assert merged.startswith("scalar Date\n\ntype Query {\n")
        assert merged.count("type Query") == 1
        assert merged.count("type Mutation") == 1
        assert not (self.output_dir / "Widget.graphql").exists()

    def test_resolvers_are_written_before_the_document(self):
        files = SchemaEmitter(self.config()).emit(sample_schema())

        assert [Path(path).name for path in files] == [
            "Widget.resolvers.js", "Gadget.resolvers.js", "schema.graphql",
        ]

    def test_uuid_scalar_declared(self):
        SchemaEmitter(self.config(use_uuid_scalar=True, emit_resolvers=False)).emit(sample_schema())

        merged = (self.output_dir / "schema.graphql").read_text(encoding="utf-8")
        assert merged.startswith("scalar Date\n\nscalar UUID\n\n")
        assert "id: UUID!" in merged

    def test_render_merged_matches_written_document(self):
        emitter = SchemaEmitter(self.config(emit_resolvers=False))

        emitter.emit(sample_schema())

        assert emitter.render_merged(sample_schema()) == (self.output_dir / "schema.graphql").read_text(
            encoding="utf-8"
        )

    def test_absolute_merge_path(self):
        target = self.output_dir / "elsewhere" / "root.graphql"
        config = GenerationConfig(output_dir=str(self.output_dir / "out"), merge_output=str(target),
                                  emit_resolvers=False)

        files = emit_schema(sample_schema(), config)

        assert files == [str(target)]

"""
Schema emitter for GQL Auto Generator.

`SchemaEmitter` runs one generation pass: it selects the models to emit,
composes an SDL fragment for each, writes the per-model `.graphql` files (or
the single merged document) and the resolver stub files, and hands the list
of written paths to the `on_complete` hook.

Existing files are left alone unless `overwrite_existing` is set; only files
actually written are reported. I/O errors are not caught, so a failed write
aborts the run with everything written so far left on disk.
"""

import logging
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment

from gql_auto_generator.codegen import setup_jinja_env
from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.constants import FileExtensions, GraphQLScalars
from gql_auto_generator.domain.models import Model, Schema
from gql_auto_generator.resolvers import generate_resolvers_code, resolver_file_name
from gql_auto_generator.sdl.composer import generate_fragment
from gql_auto_generator.sdl.document import SchemaFragment, merge_fragments


logger = logging.getLogger(__name__)


class SchemaEmitter:
    """Facade for one generation run"""

    def __init__(self, config: GenerationConfig, env: Optional[Environment] = None):
        self.config = config
        self.output_dir = Path(config.output_dir)
        self.files_emitted: List[str] = []
        self._env = env

    @property
    def env(self) -> Environment:
        if self._env is None:
            self._env = setup_jinja_env()
        return self._env

    @property
    def merge_path(self) -> Optional[Path]:
        if not self.config.merge_mode:
            return None
        path = Path(self.config.merge_output)
        return path if path.is_absolute() else self.output_dir / path

    @property
    def resolvers_dir(self) -> Path:
        return self.output_dir / FileExtensions.RESOLVERS_DIR

    def merge_scalars(self) -> List[str]:
        """Custom scalars declared at the top of the merged document."""
        scalars = [GraphQLScalars.DATE]
        if self.config.use_uuid_scalar:
            scalars.append(GraphQLScalars.UUID)
        return scalars

    def select_models(self, schema: Schema) -> List[Model]:
        selected = []
        for model in schema:
            if self.config.is_model_included(model):
                selected.append(model)
            else:
                logger.debug(f"Model {model.name} excluded from generation")
        return selected

    def compose(self, schema: Schema) -> List[SchemaFragment]:
        """Compose the fragments of every selected model without writing anything."""
        return [generate_fragment(model, self.config) for model in self.select_models(schema)]

    def render_merged(self, schema: Schema) -> str:
        """The merged root document for a schema."""
        return merge_fragments(self.compose(schema), self.merge_scalars())

    def emit(self, schema: Schema) -> List[str]:
        """
        Generate every output file for a schema.

        Returns:
            Paths written during this run, in write order.
        """
        self.files_emitted = []
        fragments = []

        for model in self.select_models(schema):
            logger.debug(f"Composing schema for model {model.name}")
            fragment = generate_fragment(model, self.config)
            fragments.append(fragment)

            if not self.config.merge_mode:
                self.write_file(self.output_dir / f"{model.name}{FileExtensions.SDL}", fragment.render())

            if self.config.emit_resolvers:
                self.write_resolvers(model, fragment)

        if self.config.merge_mode:
            self.write_file(self.merge_path, merge_fragments(fragments, self.merge_scalars()))

        emitted = list(self.files_emitted)
        self._log(f"Calling on_complete with [{', '.join(emitted) or 'Empty Array'}]")
        self.config.on_complete(emitted)
        return emitted

    def write_resolvers(self, model: Model, fragment: SchemaFragment) -> None:
        code = generate_resolvers_code(model, fragment, self.config, self.env)
        if code is None:
            return
        self.write_file(self.resolvers_dir / resolver_file_name(model, self.config), code)

    def write_file(self, output_path: Path, contents: str) -> bool:
        """
        Write contents unless the file exists and overwriting is disabled.

        Returns:
            True when the file was written.
        """
        if output_path.exists() and not self.config.overwrite_existing:
            self._log(f"Skipping existing file: {output_path} (overwrite_existing is disabled)")
            return False

        # Ensure the parent directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(contents)

        self.files_emitted.append(str(output_path))
        self._log(f"Generated file: {output_path}")
        return True

    def _log(self, message: str) -> None:
        """Per-file lines are only shown at INFO level in verbose mode."""
        logger.log(logging.INFO if self.config.verbose else logging.DEBUG, message)


def emit_schema(schema: Schema, config: GenerationConfig) -> List[str]:
    """Run a generation pass with a fresh emitter"""
    files = SchemaEmitter(config).emit(schema)
    logger.info(f"Generated {len(files)} file(s) in {config.output_dir}")
    return files

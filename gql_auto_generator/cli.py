import argparse
import logging
import sys

from gql_auto_generator.config_manager import build_generation_config
from gql_auto_generator.config_validation import load_config
from gql_auto_generator.constants import OutputTypes
from gql_auto_generator.emitter import SchemaEmitter
from gql_auto_generator.exceptions import GqlAutoGeneratorError
from gql_auto_generator.schema_loader import load_schema
from gql_auto_generator.validators import SchemaValidator

# Import colored logging
from gql_auto_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_highlight,
    log_section
)

# Note: Colored logging will be configured after parsing args
logger = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gql-auto-generator",
        description="Generate GraphQL SDL and resolver stubs from a YAML model schema.",
    )
    parser.add_argument(
        "-s",
        "--schema",
        help="Path to the YAML schema document. Overrides 'schema_file' in the config file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Directory to write the generated files to. Overrides config file setting.",
    )
    parser.add_argument(
        "--merge",
        metavar="FILE",
        help="Write one merged schema document (relative to the output directory) instead of one file per model.",
    )
    # Flags default to None so an absent flag does not override the config file
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Overwrite files that already exist.",
    )
    parser.add_argument(
        "--output-type",
        choices=OutputTypes.ALL,
        help="Flavour of the resolver stub files.",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Build the merged schema with graphql-core and fail on errors.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose DEBUG logging and per-file log lines.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv=None):
    # --- Argument Parsing ---
    parser = build_parser()
    args = parser.parse_args(argv)

    # --- Logging Setup ---
    use_colors = not args.no_color
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=use_colors)

    global logger
    logger = get_colored_logger(__name__)

    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")
    if args.no_color:
        logger.debug("Color output disabled.")

    # --- Main Execution Pipeline ---
    try:
        # 1. Load Configuration
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, args)
        if not config.schema_file:
            parser.error("a schema file is required (use -s/--schema or 'schema_file' in the config file)")
        log_success(logger, "Configuration loaded and validated successfully.")
        logger.debug(f"Effective configuration loaded: {config}")

        # 2. Load Schema
        log_section(logger, "Schema Loading")
        log_progress(logger, f"Loading schema from {config.schema_file}...")
        schema = load_schema(config.schema_file)
        if not len(schema):
            logger.warning("Schema does not define any models. Exiting.")
            sys.exit(0)
        log_highlight(logger, f"Found {len(schema)} model(s): {', '.join(schema.model_names)}")

        # 3. Generate SDL and resolvers
        log_section(logger, "GraphQL Generation")
        generation_config = build_generation_config(config)
        emitter = SchemaEmitter(generation_config)
        log_progress(logger, "Composing schema for each model...")
        files = emitter.emit(schema)
        log_success(logger, f"Written {len(files)} file(s) to {generation_config.output_dir}")

        # 4. Validate
        if args.validate:
            log_section(logger, "Validation")
            log_progress(logger, "Validating merged schema with graphql-core...")
            validator = SchemaValidator(emitter.merge_scalars())
            result = validator.validate_sdl(emitter.render_merged(schema))
            for warning in result.warnings:
                logger.warning(warning)
            result.raise_if_invalid()
            log_success(logger, "Schema validation complete: no errors found.")

        # --- Success ---
        log_section(logger, "COMPLETION")
        log_success(logger, "GraphQL generation completed successfully!")
        if generation_config.merge_mode:
            logger.info(f"   Schema document: {emitter.merge_path}")
        else:
            logger.info(f"   Schema documents: {generation_config.output_dir}")

    # --- Error Handling ---
    except GqlAutoGeneratorError as e:
        logger.error(f"{type(e).__name__}: {e}", exc_info=args.verbose)
        sys.exit(1)
    except OSError as e:
        logger.error(f"I/O Error: {e}", exc_info=args.verbose)
        sys.exit(1)
    except Exception as e:
        # Catch any other unexpected exceptions
        logger.error(
            f"An unexpected error occurred during generation: {e}", exc_info=True
        )  # Always show traceback for unexpected
        sys.exit(1)


# --- Script Entry Point ---
if __name__ == "__main__":
    main()

# File: tests/conftest.py
# Shared fixtures for the generator tests.

import logging
from pathlib import Path
from typing import Any, Generator

import pytest

from factories import SAMPLE_CONFIG_YAML, SAMPLE_SCHEMA_YAML


@pytest.fixture
def output_dir(request, tmp_path) -> Generator[Path, Any, None]:
    """
    Temporary output directory, also exposed as `self.output_dir` on
    unittest.TestCase classes that use this fixture.
    """
    if request.cls is not None:
        request.cls.output_dir = tmp_path
    yield tmp_path


@pytest.fixture
def sample_files(request, tmp_path) -> Generator[Path, Any, None]:
    """Writes the sample schema and config files; exposes `self.schema_path` / `self.config_path`."""
    schema_path = tmp_path / "schema.yaml"
    schema_path.write_text(SAMPLE_SCHEMA_YAML, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(SAMPLE_CONFIG_YAML, encoding="utf-8")
    if request.cls is not None:
        request.cls.schema_path = schema_path
        request.cls.config_path = config_path
        request.cls.output_dir = tmp_path / "generated"
    yield tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; put its handlers back after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

import logging
from pathlib import Path

import pytest

from good_codegen import DEFAULT_OPTIONS, OutputBufferManager, RenderOptions
from good_codegen.templating import TEMPLATE_REGISTRY

from codegen_samples import SCHEMA, USERS

TESTS_ROOT = Path(__file__).parent
GOLDEN_DIR = TESTS_ROOT / "fixtures" / "golden"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def pytest_configure(config):
    logging.getLogger("good_codegen").setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# Registry isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clear_global_templates():
    """Clear global templates before each test to prevent interference"""
    original_templates = dict(TEMPLATE_REGISTRY.templates.maps[0])
    TEMPLATE_REGISTRY.templates.clear()

    yield

    TEMPLATE_REGISTRY.templates.clear()
    TEMPLATE_REGISTRY.templates.update(original_templates)


# ---------------------------------------------------------------------------
# Models and outputs
# ---------------------------------------------------------------------------


@pytest.fixture
def schema():
    return SCHEMA


@pytest.fixture
def users_table():
    return USERS


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR


@pytest.fixture
def options() -> RenderOptions:
    return DEFAULT_OPTIONS


@pytest.fixture
def keep_whitespace_options() -> RenderOptions:
    return DEFAULT_OPTIONS.model_copy(update={"strip_whitespace_on_empty_lines": False})


@pytest.fixture
def manager(options) -> OutputBufferManager:
    return OutputBufferManager(options)

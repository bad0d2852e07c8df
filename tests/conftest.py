"""Shared fixtures and sample texts."""

import pytest

from tokenx.config import Config

SENTENCE = "Hello, world! This is a short sentence."

GERMAN = (
    "Die pünktlich gewünschte Trüffelfüllung im übergestülpten Würzkümmel-Würfel "
    "ist kümmerlich und dürfte fürderhin zu Rüffeln in Hülle und Fülle führen"
)


@pytest.fixture
def tmp_config(tmp_path):
    """Config pointing to a temp directory."""
    config = Config(base_dir=tmp_path / ".tokenx")
    config.ensure_dirs()
    return config


@pytest.fixture
def sentence():
    return SENTENCE


@pytest.fixture
def german():
    return GERMAN

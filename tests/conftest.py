"""Shared fixtures."""

import logging

import pytest

DUMP = r"""INSERT INTO `wp_options` VALUES (1,'siteurl','http://old.example.com','yes');
INSERT INTO `wp_options` VALUES (2,'theme_mods','a:1:{s:4:\"logo\";s:35:\"http://old.example.com/img/logo.png\";}','yes');
"""


@pytest.fixture
def dump_file(tmp_path):
    """A small WordPress dump pointing at http://old.example.com."""
    path = tmp_path / 'db.sql'
    path.write_text(DUMP, encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def clean_root_logger():
    """setup_logging() replaces the root handlers, drop them after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)

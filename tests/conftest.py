"""Test configuration and fixtures for source-to-llm."""

import logging

import pytest


@pytest.fixture
def scenario_tree(tmp_path):
    """Create the reference tree: a.txt, b/c.txt and a .git directory."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_text("world")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return root


@pytest.fixture
def project_tree(tmp_path):
    """Create a small project with sources, logs, build output and a binary file."""
    root = tmp_path / "project"
    (root / "src" / "nested").mkdir(parents=True)
    (root / "lib").mkdir()
    (root / "dist").mkdir()
    (root / "node_modules" / "left-pad").mkdir(parents=True)

    (root / "src" / "a.txt").write_text("alpha\n")
    (root / "src" / "nested" / "b.txt").write_text("beta\n")
    (root / "lib" / "c.txt").write_text("gamma\n")
    (root / "dist" / "bundle.js").write_text("console.log('bundle')\n")
    (root / "node_modules" / "left-pad" / "index.js").write_text("module.exports = {}\n")
    (root / "app.log").write_text("log line\n")
    (root / "src" / "nested" / "app.log").write_text("nested log line\n")
    (root / "image.bin").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00\x80")
    return root


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any handler or level the CLI installed on the package logger."""
    logger = logging.getLogger("source_to_llm")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)

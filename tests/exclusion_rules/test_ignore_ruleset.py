import logging
from unittest.mock import patch

import pytest

from source_to_llm.exclusion_rules.git_rules import GitIgnoreExclusionRules
from source_to_llm.exclusion_rules.ignore_ruleset import ALWAYS_IGNORE, IgnoreRuleset, build_ignore_ruleset


@pytest.mark.parametrize(
    "path,is_dir",
    [
        (".git", True),
        ("node_modules", True),
        ("structure.txt", False),
        ("contents.txt", False),
        ("packages/web/node_modules", True),
    ],
)
def test_builtin_names_always_ignored(path, is_dir):
    assert IgnoreRuleset().matches(path, is_dir)


def test_builtin_names_cannot_be_negated():
    ruleset = IgnoreRuleset(["!.git", "!node_modules/", "!structure.txt"])
    assert ruleset.matches(".git", is_dir=True)
    assert ruleset.matches("node_modules", is_dir=True)
    assert ruleset.matches("structure.txt", is_dir=False)


def test_reserved_names_extend_builtins():
    ruleset = IgnoreRuleset(reserved_names=["tree.md", "dump.md"])
    assert ruleset.matches("tree.md", is_dir=False)
    assert ruleset.matches("dump.md", is_dir=False)
    assert ruleset.matches("structure.txt", is_dir=False)
    assert ruleset.builtin_rules.lines == [*ALWAYS_IGNORE, "tree.md", "dump.md"]


def test_directory_patterns_only_match_directories():
    ruleset = IgnoreRuleset(["dist/"])
    assert ruleset.matches("dist", is_dir=True)
    assert ruleset.matches("dist/", is_dir=True)
    assert not ruleset.matches("dist", is_dir=False)


def test_log_pattern_matches_at_any_depth():
    ruleset = IgnoreRuleset(["*.log"])
    assert ruleset.matches("app.log", is_dir=False)
    assert ruleset.matches("nested/app.log", is_dir=False)
    assert not ruleset.matches("app.txt", is_dir=False)


def test_build_reads_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("*.tmp\nbuild/\n")
    ruleset = build_ignore_ruleset(tmp_path, use_gitignore=True)
    assert ruleset.matches("scratch.tmp", is_dir=False)
    assert ruleset.matches("build", is_dir=True)
    assert ruleset.user_rules.lines == ["*.tmp", "build/"]


def test_build_skips_gitignore_when_disabled(tmp_path):
    (tmp_path / ".gitignore").write_text("*.tmp\n")
    ruleset = build_ignore_ruleset(tmp_path, use_gitignore=False)
    assert not ruleset.matches("scratch.tmp", is_dir=False)


def test_build_extra_patterns_come_after_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("*.log\n")
    ruleset = build_ignore_ruleset(tmp_path, extra_patterns=["!keep.log", "dist/"])
    assert ruleset.matches("debug.log", is_dir=False)
    assert not ruleset.matches("keep.log", is_dir=False)
    assert ruleset.matches("dist", is_dir=True)


def test_build_missing_gitignore_is_not_a_warning(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="source_to_llm"):
        ruleset = build_ignore_ruleset(tmp_path)
    assert not ruleset.user_rules.has_rules()
    assert ".gitignore not found" in caplog.text
    assert not [record for record in caplog.records if record.levelno >= logging.WARNING]


def test_build_unreadable_gitignore_warns_and_continues(tmp_path, caplog):
    (tmp_path / ".gitignore").write_text("*.tmp\n")
    with patch.object(GitIgnoreExclusionRules, "load_rules", side_effect=PermissionError("Permission denied")):
        ruleset = build_ignore_ruleset(tmp_path, extra_patterns=["*.log"])

    assert "Could not read .gitignore: Permission denied" in caplog.text
    assert not ruleset.matches("scratch.tmp", is_dir=False)
    assert ruleset.matches("app.log", is_dir=False)
    assert ruleset.matches(".git", is_dir=True)


def test_build_gitignore_directory_warns(tmp_path, caplog):
    (tmp_path / ".gitignore").mkdir()
    build_ignore_ruleset(tmp_path)
    assert any(record.levelno == logging.WARNING for record in caplog.records)

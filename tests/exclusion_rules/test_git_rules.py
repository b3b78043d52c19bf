import pytest

from source_to_llm.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def temp_gitignore(tmp_path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("# build artifacts\n*.txt\n!important.txt\nsubdir/\n*.py[cod]\n**/__pycache__/\n/anchored.md\n")
    return gitignore


@pytest.mark.parametrize(
    "path,expected",
    [
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("subdir/", True),
        ("subdir", False),
        ("subdir/file.py", True),
        ("another_dir/file.txt", True),
        ("another_dir/file.py", False),
        ("nested/subdir/file.py", True),
        ("file.pyc", True),
        ("__pycache__/", True),
        ("lib/__pycache__/cache_file.py", True),
        ("anchored.md", True),
        ("docs/anchored.md", False),
        ("# build artifacts", False),
    ],
)
def test_gitignore_exclusion_rules(temp_gitignore, path, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_empty_rules_exclude_nothing():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()
    assert not rules.exclude("any_file.txt")


def test_empty_file(tmp_path):
    empty = tmp_path / "empty.ignore"
    empty.write_text("")
    rules = GitIgnoreExclusionRules(empty)
    assert not rules.exclude("any_file.txt"), "Empty .gitignore should not exclude any files"


def test_nonexistent_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(tmp_path / "nonexistent_file")


def test_multiple_files_combine_in_order(tmp_path):
    first = tmp_path / "first.ignore"
    first.write_text("*.log\n")
    second = tmp_path / "second.ignore"
    second.write_text("!keep.log\n")

    rules = GitIgnoreExclusionRules([first, second])
    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")

    reversed_rules = GitIgnoreExclusionRules([second, first])
    assert reversed_rules.exclude("keep.log")


def test_add_rule_and_lines():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.pyc")
    rules.add_rules(["build/", "!important.pyc"])

    assert rules.lines == ["*.pyc", "build/", "!important.pyc"]
    assert rules.has_rules()
    assert rules.exclude("test.pyc")
    assert not rules.exclude("important.pyc")
    assert rules.exclude("build/output.txt")


def test_lines_returns_copy():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.pyc")
    rules.lines.append("*.txt")
    assert not rules.exclude("notes.txt")


def test_double_asterisk_across_segments():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("docs/**/*.md")
    assert rules.exclude("docs/a.md")
    assert rules.exclude("docs/deep/er/b.md")
    assert not rules.exclude("other/docs/a.md")

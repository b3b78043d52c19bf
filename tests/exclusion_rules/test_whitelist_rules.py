import pytest

from source_to_llm.exclusion_rules.whitelist_rules import WhitelistRules


def test_empty_whitelist_admits_everything():
    only = WhitelistRules()
    assert not only
    assert only.admits("anything/at/all.txt", is_dir=False)
    assert only.admits("dir", is_dir=True)


@pytest.mark.parametrize(
    "path,is_dir,expected",
    [
        ("src", True, True),
        ("src/a.txt", False, True),
        ("src/nested", True, True),
        ("src/nested/b.txt", False, True),
        ("lib", True, False),
        ("lib/c.txt", False, False),
        ("a.txt", False, False),
    ],
)
def test_double_star_whitelist(path, is_dir, expected):
    assert WhitelistRules(["src/**"]).admits(path, is_dir) == expected


@pytest.mark.parametrize(
    "path,is_dir,expected",
    [
        ("src", True, True),
        ("src/pkg", True, True),
        ("src/pkg/mod.py", False, True),
        ("src/pkg/deeper", True, False),
        ("src/pkg/deeper/mod.py", False, False),
        ("src/top.py", False, False),
        ("tests", True, False),
    ],
)
def test_single_star_stays_within_segment(path, is_dir, expected):
    assert WhitelistRules(["src/*/*.py"]).admits(path, is_dir) == expected


def test_unanchored_pattern_admits_every_directory():
    only = WhitelistRules(["*.py"])
    assert only.admits("any", is_dir=True)
    assert only.admits("any/where", is_dir=True)
    assert only.admits("any/where/mod.py", is_dir=False)
    assert not only.admits("any/where/notes.md", is_dir=False)


def test_directory_pattern_admits_its_contents():
    only = WhitelistRules(["docs/"])
    assert only.admits("docs", is_dir=True)
    assert only.admits("docs/guide/intro.md", is_dir=False)
    assert not only.admits("README.md", is_dir=False)


def test_multiple_patterns():
    only = WhitelistRules(["README.md", "/src/**"])
    assert only.admits("README.md", is_dir=False)
    assert only.admits("src/main.py", is_dir=False)
    assert not only.admits("setup.cfg", is_dir=False)


def test_negation_excludes_from_whitelist():
    only = WhitelistRules(["src/**", "!src/**/*.log"])
    assert only.admits("src/a.txt", is_dir=False)
    assert not only.admits("src/nested/app.log", is_dir=False)

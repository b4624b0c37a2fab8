"""Tests for the skill vocabulary and alias table."""

import pytest

from models.schemas.skill_vocabulary import SkillEntry, SkillVocabulary
from services.skill_vocabulary import DEFAULT_VOCABULARY, SKILL_ALIASES, build_vocabulary


def _entry(name: str) -> SkillEntry:
    return next(e for e in DEFAULT_VOCABULARY.entries if e.canonical_name == name)


def test_canonical_names_are_unique():
    names = DEFAULT_VOCABULARY.names
    assert len(names) == len(set(names))


def test_vocabulary_has_technical_and_soft_skills():
    assert "python" in DEFAULT_VOCABULARY.by_category("technical")
    assert "communication" in DEFAULT_VOCABULARY.by_category("soft")
    assert "python" not in DEFAULT_VOCABULARY.by_category("soft")


def test_every_entry_tests_its_canonical_name_first():
    for entry in DEFAULT_VOCABULARY.entries:
        assert entry.aliases[0] == entry.canonical_name


def test_entry_without_aliases_is_plain_substring():
    entry = SkillEntry(canonical_name="docker")
    assert entry.aliases == ("docker",)
    assert entry.matches("docker compose files")
    assert not entry.matches("kubernetes")


def test_alias_table_entries_are_applied():
    for skill, alternatives in SKILL_ALIASES.items():
        entry = _entry(skill)
        for alt in alternatives:
            assert alt in entry.aliases
            assert entry.matches(f"experience with {alt} daily")


def test_cpp_variants():
    entry = _entry("c++")
    assert entry.matches("modern cpp")
    assert entry.matches("c plus plus")
    assert entry.matches("c++17")


def test_node_variants():
    entry = _entry("node.js")
    assert entry.matches("nodejs backend")
    assert entry.matches("node services")


def test_html_bare_and_versioned():
    entry = _entry("html")
    assert entry.matches("html")
    assert entry.matches("html5")


def test_duplicate_canonical_name_rejected():
    with pytest.raises(ValueError):
        SkillVocabulary(entries=(SkillEntry(canonical_name="python"), SkillEntry(canonical_name="python")))


def test_vocabulary_is_frozen():
    with pytest.raises(Exception):
        DEFAULT_VOCABULARY.entries = ()


def test_build_vocabulary_from_custom_data():
    vocab = build_vocabulary(
        groups=[("technical", ["rust", "go"]), ("soft", ["mentoring"])],
        aliases={"go": ["golang"]},
    )
    assert vocab.names == ["rust", "go", "mentoring"]
    assert vocab.by_category("soft") == ["mentoring"]
    go = vocab.entries[1]
    assert go.matches("golang")


def test_alias_duplicates_collapsed():
    entry = SkillEntry(canonical_name="css", aliases=("CSS", "css3", "css3"))
    assert entry.aliases == ("css", "css3")

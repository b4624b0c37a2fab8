"""Canonical skill vocabulary and alias table.

The vocabulary is built once at import time and passed by reference into
the matcher. Alias handling is pure data: to recognise another spelling of
a skill, add it to SKILL_ALIASES.
"""

from models.schemas.skill_vocabulary import SkillEntry, SkillVocabulary

# ---------------------------------------------------------------------------
# Skills grouped in vocabulary order. Group order defines the order of every
# SkillSet, and therefore of matched/missing lists in the response.
# ---------------------------------------------------------------------------
SKILL_GROUPS: list[tuple[str, list[str]]] = [
    # Languages
    ("technical", [
        "javascript", "python", "java", "c++", "c#", "php", "ruby", "go", "swift",
    ]),
    # Frameworks
    ("technical", [
        "react", "angular", "vue", "node.js", "express", "django", "flask", "spring",
    ]),
    # Web
    ("technical", ["html", "css", "sass", "less", "bootstrap", "tailwind"]),
    # Data stores
    ("technical", ["sql", "mysql", "postgresql", "mongodb", "redis", "oracle"]),
    # Interpersonal
    ("soft", [
        "communication", "teamwork", "leadership", "problem solving", "creativity",
        "time management", "adaptability", "critical thinking", "decision making",
        "collaboration", "negotiation", "presentation", "public speaking",
    ]),
    # Delivery
    ("soft", ["project management", "agile", "scrum", "kanban"]),
    # Tooling & cloud
    ("technical", ["git", "docker", "kubernetes", "aws", "azure", "gcp"]),
    # Integration
    ("technical", ["rest", "graphql", "api", "json", "xml"]),
    # Platforms
    ("technical", ["linux", "unix", "windows", "macos"]),
    # Data & AI
    ("technical", [
        "machine learning", "ai", "data science", "big data", "tableau", "power bi",
    ]),
]

# ---------------------------------------------------------------------------
# Alias table: canonical -> alternative substrings (any-of)
# The canonical name is always tested too.
# ---------------------------------------------------------------------------
SKILL_ALIASES: dict[str, list[str]] = {
    "c++": ["c plus plus", "cpp"],
    "javascript": ["js"],
    "node.js": ["nodejs", "node"],
    "html": ["html5"],
    "css": ["css3"],
    "communication": ["communicator", "communicate"],
}


def build_vocabulary(
    groups: list[tuple[str, list[str]]] | None = None,
    aliases: dict[str, list[str]] | None = None,
) -> SkillVocabulary:
    """Build an immutable vocabulary from skill groups and an alias table."""
    groups = SKILL_GROUPS if groups is None else groups
    aliases = SKILL_ALIASES if aliases is None else aliases

    entries = [
        SkillEntry(canonical_name=skill, category=category, aliases=tuple(aliases.get(skill, ())))
        for category, skills in groups
        for skill in skills
    ]
    return SkillVocabulary(entries=tuple(entries))


DEFAULT_VOCABULARY: SkillVocabulary = build_vocabulary()

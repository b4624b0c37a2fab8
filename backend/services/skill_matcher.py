"""Vocabulary-driven skill detection over free text."""

from models.schemas.skill_vocabulary import SkillVocabulary
from services.skill_vocabulary import DEFAULT_VOCABULARY


def find_skills(text: str, vocabulary: SkillVocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Return canonical skills present in text, in vocabulary order.

    Plain substring containment on lower-cased text, widened per skill by
    the vocabulary's alias table. No word boundaries: "java" is found
    inside "javascript".
    """
    text_lower = (text or "").lower()
    found: list[str] = []
    for entry in vocabulary.entries:
        if entry.canonical_name not in found and entry.matches(text_lower):
            found.append(entry.canonical_name)
    return found

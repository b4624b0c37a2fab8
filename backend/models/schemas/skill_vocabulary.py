"""Skill vocabulary contracts: canonical skills and their alias rules."""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class SkillEntry(BaseModel):
    """A canonical skill with the substrings that count as a match.

    `aliases` always starts with the canonical name, so an entry with no
    extra variants is plain substring containment.
    """
    model_config = ConfigDict(frozen=True)

    canonical_name: str
    category: str = "technical"  # "technical" | "soft", metadata only
    aliases: tuple[str, ...] = Field(default=(), validate_default=True)

    @field_validator("aliases")
    @classmethod
    def _lead_with_canonical(cls, v: tuple[str, ...], info: ValidationInfo) -> tuple[str, ...]:
        name = info.data.get("canonical_name", "").lower()
        rest = tuple(dict.fromkeys(a.lower() for a in v if a.lower() != name))
        return (name, *rest)

    def matches(self, text_lower: str) -> bool:
        """Any-of substring test against already lower-cased text."""
        return any(alias in text_lower for alias in self.aliases)


class SkillVocabulary(BaseModel):
    """Ordered, read-only registry of canonical skills."""
    model_config = ConfigDict(frozen=True)

    entries: tuple[SkillEntry, ...] = ()

    @model_validator(mode="after")
    def _unique_names(self) -> "SkillVocabulary":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.canonical_name in seen:
                raise ValueError(f"Duplicate canonical skill: {entry.canonical_name}")
            seen.add(entry.canonical_name)
        return self

    @property
    def names(self) -> list[str]:
        return [e.canonical_name for e in self.entries]

    def by_category(self, category: str) -> list[str]:
        return [e.canonical_name for e in self.entries if e.category == category]

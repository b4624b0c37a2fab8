"""Pydantic contracts passed between the analysis components."""

from models.schemas.extraction import ExtractionAttempt, ExtractionResult
from models.schemas.scoring import ScoreResult
from models.schemas.skill_vocabulary import SkillEntry, SkillVocabulary

__all__ = [
    "ExtractionAttempt",
    "ExtractionResult",
    "ScoreResult",
    "SkillEntry",
    "SkillVocabulary",
]

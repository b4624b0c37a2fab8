"""Skill comparison output: matched/missing skills and the ATS score."""

from pydantic import BaseModel


class ScoreResult(BaseModel):
    matched_skills: list[str] = []  # JD order
    missing_skills: list[str] = []  # JD order
    ats_score: int = 0  # 0-100

from __future__ import annotations

from .service import CV_ANALYSIS_USE_CASE, analyze_cv
from .types import CVData, Education, WorkExperience

__all__ = [
    "CVData",
    "CV_ANALYSIS_USE_CASE",
    "Education",
    "WorkExperience",
    "analyze_cv",
]

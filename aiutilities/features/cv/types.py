from __future__ import annotations

from pydantic import BaseModel, Field


class WorkExperience(BaseModel):
    position: str
    company: str
    start_date: str | None = Field(default=None, description="Start date as written in the CV.")
    end_date: str | None = Field(default=None, description="End date, or 'present'.")
    description: str | None = None


class Education(BaseModel):
    degree: str
    institution: str
    start_date: str | None = None
    end_date: str | None = None


class CVData(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    summary: str = Field(default="", description="Two or three sentence profile of the candidate.")
    skills: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)

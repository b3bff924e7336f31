# This project was developed with assistance from AI tools.
"""Educational content schemas."""

from pydantic import BaseModel, Field


class VideoLink(BaseModel):
    title: str
    url: str


class GlossaryTerm(BaseModel):
    term: str
    definition: str


class EducationalContent(BaseModel):
    """Static reference material for one loan type."""

    title: str
    description: str
    key_points: list[str] = Field(default_factory=list)
    video_links: list[VideoLink] = Field(default_factory=list)
    common_terms: list[GlossaryTerm] = Field(default_factory=list)

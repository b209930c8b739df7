"""Pydantic models for the Epic → Feature → Story input document."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Story(BaseModel):
    """Leaf work item."""

    title: str
    body: str
    labels: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list, alias="acceptanceCriteria")

    model_config = {"populate_by_name": True}


class Feature(BaseModel):
    """Mid-level work item owning an ordered list of stories."""

    title: str
    body: str
    labels: list[str] = Field(default_factory=list)
    stories: list[Story] = Field(default_factory=list)


class Epic(BaseModel):
    """Root of the hierarchy; exactly one per run."""

    title: str
    body: str
    labels: list[str] = Field(default_factory=list)
    features: list[Feature] = Field(default_factory=list)


class HierarchyDocument(BaseModel):
    """Top-level shape of the input file: ``{"epic": {...}}``."""

    epic: Epic

"""Data models for EDF funding-call documents and the projects extracted from them."""

import re

from typing import Annotated, Dict, List, Optional, Tuple

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
)


def _check_pattern(value: str) -> str:
    try:
        re.compile(value)
    except re.error as exc:
        raise ValueError(f"Invalid regular expression {value!r}: {exc}") from exc
    return value


RegexPattern = Annotated[str, AfterValidator(_check_pattern)]


class RawDocument(BaseModel):
    """Plain text recovered from one source PDF."""
    model_config = ConfigDict(frozen=True)

    file: str = Field(description="Name of the source PDF file")
    text: str = Field(description="Full raw text content of the PDF")


class ConsortiumMember(BaseModel):
    """Data model for an organisation taking part in a project."""
    name: str = Field(description="Name of the entity, without the coordinator marker")
    country: str = Field(description="Country of the entity")
    is_coordinator: bool = Field(default=False, description="Whether the entity leads the consortium")


class Project(BaseModel):
    """Data model representing the information extracted for one funded project."""
    project_name: str = Field(description="Acronym or name of the project")
    call_title: str = Field(description="Title of the call the project was selected under")
    topic_title: str = Field(description="Title of the call topic")
    duration_months: Optional[int] = Field(default=None, description="Duration of the project in months")
    activities: List[str] = Field(default_factory=list, description="Types of activities covered")
    estimated_cost: Optional[float] = Field(default=None, description="Estimated total cost in EUR")
    max_eu_contribution: Optional[float] = Field(
        default=None, description="Maximum EU contribution in EUR"
    )
    description: str = Field(description="Short description of the project")
    consortium_members: List[ConsortiumMember] = Field(
        default_factory=list, description="Members of the consortium, in document order"
    )
    source_file: str = Field(description="Name of the PDF the project was extracted from")

    @property
    def coordinator(self) -> Optional[ConsortiumMember]:
        """First member flagged as coordinator, if any."""
        return next((m for m in self.consortium_members if m.is_coordinator), None)


class Summary(BaseModel):
    """Corpus level statistics over all the extracted projects."""
    total_projects: int = Field(description="Number of projects extracted")
    total_funding: float = Field(description="Sum of the known maximum EU contributions")
    projects_by_call: Dict[str, int] = Field(description="Number of projects per call title")
    projects_by_country: Dict[str, int] = Field(description="Number of participations per country")
    unique_participants: int = Field(description="Number of distinct member names")
    projects: List[Project] = Field(description="Extracted projects, in input order")


class AmountRule(BaseModel):
    """A regular expression locating a currency amount and the group holding it."""
    model_config = ConfigDict(frozen=True)

    pattern: RegexPattern = Field(description="Regular expression searched in the document text")
    group: int = Field(default=1, ge=1, description="Index of the group holding the amount")

    @model_validator(mode="after")
    def check_group(self) -> "AmountRule":
        """Make sure the requested group exists in the pattern."""
        groups = re.compile(self.pattern).groups
        if self.group > groups:
            raise ValueError(f"Pattern {self.pattern!r} has only {groups} group(s), not {self.group}")
        return self


class ExtractionConfig(BaseModel):
    """Fixed phrases, word lists and patterns describing one document template."""
    model_config = ConfigDict(frozen=True)

    template_name: str = Field(description="Name of the document template")
    report_title: str = Field(description="Heading used by the text report")

    skip_markers: Tuple[str, ...] = Field(description="Phrases marking overview documents")
    min_text_length: int = Field(description="Documents shorter than this are skipped")

    header_anchor: str = Field(description="Boilerplate line preceding the project header")
    project_name_offset: int = Field(
        ge=0, description="Position of the project name among the non-empty lines after the anchor"
    )
    call_title_offset: int = Field(
        ge=0, description="Position of the call title among the non-empty lines after the anchor"
    )
    topic_window: Tuple[int, int] = Field(description="Line offsets after the anchor scanned for the topic")
    topic_min_length: int = Field(description="Topic titles are strictly longer than this")
    topic_max_length: int = Field(description="Topic titles are strictly shorter than this")
    topic_excluded_markers: Tuple[str, ...] = Field(description="Substrings ruling out a topic line")
    topic_connectors: Tuple[str, ...] = Field(description="Substrings a topic line must contain one of")

    duration_pattern: RegexPattern = Field(description="Pattern whose first group is the duration in months")
    activities_anchor: str = Field(description="Label preceding the activities line")
    estimated_cost_rules: Tuple[AmountRule, ...] = Field(description="Rules tried in order for the cost")
    eu_contribution_rules: Tuple[AmountRule, ...] = Field(
        description="Rules tried in order for the EU contribution"
    )

    description_anchor: str = Field(description="Label preceding the project description")
    description_terminators: Tuple[str, ...] = Field(
        description="Phrases ending the description, in order of preference"
    )
    description_boilerplate: Tuple[str, ...] = Field(description="Description lines containing these are dropped")
    copyright_glyph: str = Field(description="Description lines starting with this are dropped")

    members_anchor: str = Field(description="Phrase opening the consortium section")
    member_header_markers: Tuple[str, ...] = Field(description="Lines containing these are not members")
    member_header_token: str = Field(description="Member names containing this are rejected")
    coordinator_marker: str = Field(description="Marker flagging the coordinator")

    country_min_length: int = Field(description="Minimum length of a country word")
    country_max_length: int = Field(description="Maximum length of a country word")
    country_extra_chars: str = Field(description="Non alphabetic characters allowed in a country word")
    excluded_words: Tuple[str, ...] = Field(description="Upper case organisation words that are never countries")
    country_prefixes: Tuple[str, ...] = Field(description="First words of multi-word country names")
    known_countries: Tuple[str, ...] = Field(description="Country names used as a last resort")

    unknown_project: str = Field(description="Placeholder for a missing project name")
    unknown_call: str = Field(description="Placeholder for a missing call title")
    unknown_topic: str = Field(description="Placeholder for a missing topic title")
    no_description: str = Field(description="Placeholder for a missing description")

    @field_validator("topic_window")
    @classmethod
    def check_window(cls, value: Tuple[int, int]) -> Tuple[int, int]:
        """The window must be a non-empty range of positive offsets."""
        start, end = value
        if start < 1 or end <= start:
            raise ValueError(f"Invalid topic window {value}")
        return value


_documents_adapter = TypeAdapter(List[RawDocument])


def documents_from_json(data: str) -> List[RawDocument]:
    """Parse the JSON array of ``{"file": ..., "text": ...}`` objects produced
    by the PDF text extraction step.

    Args:
        data: JSON payload

    Returns:
        List of raw documents, in payload order
    """
    return _documents_adapter.validate_json(data)


def split_lines(text: str) -> List[str]:
    """Split text on newlines only, dropping the carriage return of CRLF endings.

    Form feeds and other separators left by the PDF conversion stay inside
    their line.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def normalize_text(raw: str) -> str:
    """Trim every line of raw PDF text and drop the empty ones."""
    return "\n".join(line.strip() for line in split_lines(raw) if line.strip())

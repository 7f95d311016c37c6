"""Extraction of single fields from the raw text of an EDF project document.

Every extractor takes the full document text and returns either the value
or a placeholder/None when the field cannot be located; none of them raises
on missing data.
"""

import logging
import re

from typing import Iterator, List, Optional, Sequence, Tuple

from .configurations import get_extraction_conf
from .data_models import ExtractionConfig, split_lines


class FieldExtractor:
    """Class locating the fields of a project inside the raw document text.

    Header fields (project name, call title) are read at fixed positions after
    the licence boilerplate that precedes them; the other fields are found
    through labels or regular expressions.
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or get_extraction_conf()

        self.duration_re = re.compile(self.config.duration_pattern)
        self.cost_rules = self._compile_rules(self.config.estimated_cost_rules)
        self.contribution_rules = self._compile_rules(self.config.eu_contribution_rules)

    @staticmethod
    def _compile_rules(rules) -> List[Tuple[re.Pattern, int]]:
        return [(re.compile(rule.pattern), rule.group) for rule in rules]

    def _anchor_indexes(self, lines: Sequence[str]) -> Iterator[int]:
        anchor = self.config.header_anchor
        return (i for i, line in enumerate(lines) if line.strip() == anchor)

    def header_field(self, text: str, offset: int) -> Optional[str]:
        """Read a header field from the non-empty lines following the anchor.

        Offsets count non-empty lines only, 0 being the first line after the
        anchor. Every occurrence of the anchor is tried until one is
        followed by enough lines.

        Args:
            text: Full text of the document
            offset: Position of the field among the non-empty lines

        Returns:
            The trimmed line, or None when no anchor is followed by it
        """
        lines = split_lines(text)

        for index in self._anchor_indexes(lines):
            position = 0
            for line in lines[index + 1:]:
                candidate = line.strip()
                if not candidate:
                    continue
                if position == offset:
                    return candidate
                position += 1

        self.logger.debug("Header field at offset %d not found", offset)
        return None

    def project_name(self, text: str) -> str:
        """The project name is the first non-empty line after the anchor."""
        return self.header_field(text, self.config.project_name_offset) or self.config.unknown_project

    def call_title(self, text: str) -> str:
        """The call title is the line following the project name."""
        return self.header_field(text, self.config.call_title_offset) or self.config.unknown_call

    def is_topic_candidate(self, line: str) -> bool:
        """Topic titles are descriptive lines of moderate length."""
        config = self.config
        return (
            config.topic_min_length < len(line) < config.topic_max_length
            and not any(marker in line for marker in config.topic_excluded_markers)
            and any(connector in line for connector in config.topic_connectors)
        )

    def topic_title(self, text: str) -> str:
        """Look for the topic title in the lines following the first anchor."""
        lines = split_lines(text)
        index = next(self._anchor_indexes(lines), None)
        if index is not None:
            start, end = self.config.topic_window
            for line in lines[index + start:index + end]:
                candidate = line.strip()
                if self.is_topic_candidate(candidate):
                    return candidate

        return self.config.unknown_topic

    def duration_months(self, text: str) -> Optional[int]:
        """First ``<n> Months`` found anywhere in the text."""
        match = self.duration_re.search(text)
        if match is None:
            return None
        return int(match.group(1))

    def activities(self, text: str) -> List[str]:
        """Comma separated activities on the line after the activities label."""
        start = text.find(self.config.activities_anchor)
        if start == -1:
            return []

        line_end = text.find("\n", start)
        if line_end == -1:
            return []

        next_end = text.find("\n", line_end + 1)
        if next_end == -1:
            next_end = len(text)

        activities_text = text[line_end + 1:next_end].strip()
        return [item.strip() for item in activities_text.split(",") if item.strip()]

    def _first_amount(self, text: str, rules: Sequence[Tuple[re.Pattern, int]]) -> Optional[float]:
        for pattern, group in rules:
            match = pattern.search(text)
            if match is None:
                continue
            try:
                return float(match.group(group).replace(",", ""))
            except ValueError:
                self.logger.debug("Cannot parse amount %r", match.group(group))
        return None

    def estimated_cost(self, text: str) -> Optional[float]:
        """Estimated total cost, e.g. ``3,938,942.86``."""
        return self._first_amount(text, self.cost_rules)

    def max_eu_contribution(self, text: str) -> Optional[float]:
        """Maximum EU contribution, usually the second of two amounts."""
        return self._first_amount(text, self.contribution_rules)

    def description(self, text: str) -> str:
        """Text between the description label and the consortium section.

        When the consortium anchor is missing, the description stops at the
        members table header instead.
        """
        start = text.find(self.config.description_anchor)
        if start == -1:
            return self.config.no_description

        line_end = text.find("\n", start)
        if line_end == -1:
            return self.config.no_description

        for terminator in self.config.description_terminators:
            end = text.find(terminator, line_end)
            if end != -1:
                return self.clean_description(text[line_end + 1:end].strip())

        return self.config.no_description

    def clean_description(self, description: str) -> str:
        """Drop empty lines and page boilerplate, join the rest on one line."""
        kept = []
        for line in split_lines(description):
            line = line.strip()
            if not line or line.startswith(self.config.copyright_glyph):
                continue
            if any(phrase in line for phrase in self.config.description_boilerplate):
                continue
            kept.append(line)
        return " ".join(kept)


def extract_project_name(text: str) -> str:
    """Project name using the default template."""
    return FieldExtractor().project_name(text)


def extract_call_title(text: str) -> str:
    """Call title using the default template."""
    return FieldExtractor().call_title(text)


def extract_topic_title(text: str) -> str:
    """Topic title using the default template."""
    return FieldExtractor().topic_title(text)


def extract_duration(text: str) -> Optional[int]:
    """Duration in months using the default template."""
    return FieldExtractor().duration_months(text)


def extract_activities(text: str) -> List[str]:
    """Activities using the default template."""
    return FieldExtractor().activities(text)


def extract_estimated_cost(text: str) -> Optional[float]:
    """Estimated total cost using the default template."""
    return FieldExtractor().estimated_cost(text)


def extract_max_eu_contribution(text: str) -> Optional[float]:
    """Maximum EU contribution using the default template."""
    return FieldExtractor().max_eu_contribution(text)


def extract_description(text: str) -> str:
    """Project description using the default template."""
    return FieldExtractor().description(text)


def clean_description(description: str) -> str:
    """Clean a description using the default template."""
    return FieldExtractor().clean_description(description)

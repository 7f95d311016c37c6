"""Turns the raw text of EDF project PDFs into structured project records."""

import logging

from typing import Iterable, Optional

from .aggregator import aggregate
from .configurations import get_extraction_conf
from .data_models import ExtractionConfig, Project, RawDocument, Summary
from .field_extractors import FieldExtractor
from .member_parser import MemberParser


class ProjectExtractor:
    """Class assembling one project record per document.

    Overview documents and documents too short to describe a project are
    skipped. Every field is extracted independently, so a field that cannot
    be located only falls back to its placeholder.
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or get_extraction_conf()
        self.fields = FieldExtractor(self.config)
        self.members = MemberParser(self.config)

    def should_skip(self, text: str) -> bool:
        """Whether the text is an overview document rather than a project."""
        if any(marker in text for marker in self.config.skip_markers):
            return True
        return len(text) < self.config.min_text_length

    def extract_project(self, document: RawDocument) -> Optional[Project]:
        """Extract the project described by a document.

        Args:
            document: Raw text of one PDF

        Returns:
            The project, or None if the document is skipped
        """
        text = document.text
        if self.should_skip(text):
            self.logger.info("Skipping %s, not a project document", document.file)
            return None

        project = Project(
            project_name=self.fields.project_name(text),
            call_title=self.fields.call_title(text),
            topic_title=self.fields.topic_title(text),
            duration_months=self.fields.duration_months(text),
            activities=self.fields.activities(text),
            estimated_cost=self.fields.estimated_cost(text),
            max_eu_contribution=self.fields.max_eu_contribution(text),
            description=self.fields.description(text),
            consortium_members=self.members.extract_consortium_members(text),
            source_file=document.file,
        )
        self.logger.info(
            "Extracted project %s from %s (%d members)",
            project.project_name,
            document.file,
            len(project.consortium_members),
        )
        return project

    def process_documents(self, documents: Iterable[RawDocument]) -> Summary:
        """Extract every project of the corpus and aggregate them.

        Args:
            documents: Raw texts, one per PDF

        Returns:
            Summary of the projects, in document order
        """
        projects = []
        for document in documents:
            project = self.extract_project(document)
            if project is not None:
                projects.append(project)

        return aggregate(projects)


def extract_project(document: RawDocument) -> Optional[Project]:
    """Extract the project of one document using the default template."""
    return ProjectExtractor().extract_project(document)


def process_pdf_texts(documents: Iterable[RawDocument]) -> Summary:
    """Extract and aggregate all the projects using the default template."""
    return ProjectExtractor().process_documents(documents)

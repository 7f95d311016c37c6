"""Corpus level statistics over the extracted EDF projects."""

import logging

from collections import Counter
from typing import Iterable

from .data_models import Project, Summary

logger = logging.getLogger(__name__)


def aggregate(projects: Iterable[Project]) -> Summary:
    """Fold the extracted projects into a summary.

    Participations are counted per country (a country with three members
    counts three), while participants are counted once per distinct name.
    Projects with an unknown EU contribution add nothing to the total funding.

    Args:
        projects: Extracted projects

    Returns:
        Summary keeping the projects in input order
    """
    projects = list(projects)
    projects_by_call = Counter()
    projects_by_country = Counter()
    participants = set()

    for project in projects:
        projects_by_call[project.call_title] += 1
        for member in project.consortium_members:
            projects_by_country[member.country] += 1
            participants.add(member.name)

    total_funding = sum(
        (p.max_eu_contribution for p in projects if p.max_eu_contribution is not None),
        0.0,
    )

    logger.info(
        "Aggregated %d projects, %d unique participants, total funding %.2f",
        len(projects),
        len(participants),
        total_funding,
    )
    return Summary(
        total_projects=len(projects),
        total_funding=total_funding,
        projects_by_call=dict(projects_by_call),
        projects_by_country=dict(projects_by_country),
        unique_participants=len(participants),
        projects=projects,
    )

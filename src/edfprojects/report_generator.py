"""Rendering of the corpus summary as JSON and as a readable text report."""

import logging

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .configurations import get_extraction_conf
from .data_models import Project, Summary

logger = logging.getLogger(__name__)

TOP_COUNTRIES = 15


def _by_count(counts: dict) -> List[Tuple[str, int]]:
    # sorted() is stable, ties keep their first-seen order
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def generate_json_summary(summary: Summary) -> str:
    """Serialise the summary as pretty printed JSON."""
    return summary.model_dump_json(indent=2)


def load_json_summary(data: str) -> Summary:
    """Read back a summary produced by ``generate_json_summary``."""
    return Summary.model_validate_json(data)


def _project_lines(project: Project) -> List[str]:
    lines = [
        f"**{project.project_name}**",
        f"- Topic: {project.topic_title}",
    ]

    if project.duration_months is not None:
        lines.append(f"- Duration: {project.duration_months} months")

    if project.max_eu_contribution is not None:
        lines.append(f"- EU Funding: €{project.max_eu_contribution:.0f}")

    if project.activities:
        lines.append(f"- Activities: {', '.join(project.activities)}")

    countries = sorted({member.country for member in project.consortium_members})
    if countries:
        lines.append(f"- Countries: {', '.join(countries)}")

    coordinator = project.coordinator
    if coordinator is not None:
        lines.append(f"- Coordinator: {coordinator.name} ({coordinator.country})")

    lines.append(f"- Description: {project.description}")
    lines.append("")
    return lines


def generate_structured_summary(
        summary: Summary,
        generated_at: Optional[datetime] = None,
        title: Optional[str] = None) -> str:
    """Generate a concise report of the corpus, grouped by call.

    Args:
        summary: Summary of the extracted projects
        generated_at: Timestamp printed in UTC in the header, defaults to now;
            naive values are taken as local time
        title: Report heading, defaults to the one of the default template

    Returns:
        The report as Markdown text
    """
    generated_at = (generated_at or datetime.now(timezone.utc)).astimezone(timezone.utc)
    title = title or get_extraction_conf().report_title
    calls = _by_count(summary.projects_by_call)

    lines = [
        f"# {title}",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')} UTC",
        "",
        "## OVERVIEW",
        f"- Total Projects: {summary.total_projects}",
        f"- Total EU Funding: €{summary.total_funding / 1_000_000:.1f}M",
        f"- Unique Participants: {summary.unique_participants}",
        "",
        "## PROJECTS BY CALL TYPE",
    ]
    lines.extend(f"- {call}: {count} projects" for call, count in calls)
    lines.append("")

    lines.append("## COUNTRY PARTICIPATION")
    lines.extend(
        f"- {country}: {count} participations"
        for country, count in _by_count(summary.projects_by_country)[:TOP_COUNTRIES]
    )
    lines.append("")

    lines.append("## DETAILED PROJECT LISTINGS")
    for call, _ in calls:
        lines.append(f"\n### {call}")
        lines.append("")
        for project in summary.projects:
            if project.call_title == call:
                lines.extend(_project_lines(project))

    logger.info("Generated report for %d projects in %d calls", summary.total_projects, len(calls))
    return "\n".join(lines) + "\n"

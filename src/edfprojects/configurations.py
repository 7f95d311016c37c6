"""Extraction templates for EDF funding-call documents."""

from .data_models import AmountRule, ExtractionConfig

DEFAULT_TEMPLATE = "EDF2024"

edf2024_conf = ExtractionConfig(
    template_name="EDF2024",
    report_title="EDF 2024 PROJECT SUMMARY",
    skip_markers=(
        "KEY FIGURES OF EDF 2024",
        "HIGHLIGHTS OF EDF 2024 FUNDING",
    ),
    min_text_length=500,
    header_anchor="credit is given and any changes are indicated.",
    project_name_offset=0,
    call_title_offset=1,
    topic_window=(3, 15),
    topic_min_length=20,
    topic_max_length=100,
    topic_excluded_markers=("Months", "€", "NAME", "COUNTRY"),
    topic_connectors=("for", "and", "of", "in"),
    duration_pattern=r"(\d+)\s+Months?",
    activities_anchor="TYPE(S) OF ACTIVITIES:",
    estimated_cost_rules=(
        AmountRule(pattern=r"ESTIMATED TOTAL COST:[^€\d]*€?\s*([\d,]+\.\d+)"),
        AmountRule(pattern=r"€\s*([\d,]+\.\d+)\s*€\s*([\d,]+\.\d+)"),
        AmountRule(pattern=r"([\d,]+\.\d+)\s+([\d,]+\.\d+)\s+[A-Z]"),
    ),
    eu_contribution_rules=(
        AmountRule(pattern=r"MAXIMUM EU CONTRIBUTION[^€\d]*€?\s*([\d,]+\.\d+)"),
        AmountRule(pattern=r"€\s*([\d,]+\.\d+)\s*€\s*([\d,]+\.\d+)", group=2),
        AmountRule(pattern=r"([\d,]+\.\d+)\s+([\d,]+\.\d+)\s+[A-Z]", group=2),
    ),
    description_anchor="SHORT DESCRIPTION OF THE PROJECT:",
    description_terminators=("Members of the consortium", "NAME"),
    description_boilerplate=("European Union, 202", "Reuse of this document"),
    copyright_glyph="©",
    members_anchor="Members of the consortium",
    member_header_markers=(
        "Members of the consortium",
        "NAME",
        "OF THE ENTITY",
        "COUNTRY",
        "SELECTED PROJECTS",
        "EUROPEAN DEFENCE FUND",
    ),
    member_header_token="COUNTRY",
    coordinator_marker="(Coordinator)",
    country_min_length=3,
    country_max_length=20,
    country_extra_chars="-'.",
    excluded_words=(
        "LTD", "LLC", "INC", "CORP", "SA", "SPA", "SRL", "GMBH", "AS", "OY", "AB",
        "SYSTEMS", "TECHNOLOGIES", "SOLUTIONS", "SERVICES", "RESEARCH", "INSTITUTE",
        "UNIVERSITY", "CENTRE", "CENTER", "GROUP", "COMPANY", "ENTERPRISES",
        "FOUNDATION", "ASSOCIATION", "ORGANIZATION", "DEFENCE", "DEFENSE",
    ),
    country_prefixes=("The", "United", "Czech", "New", "South", "North", "West", "East"),
    known_countries=(
        "Austria", "Belgium", "Bulgaria", "Croatia", "Cyprus", "Czechia", "Denmark",
        "Estonia", "Finland", "France", "Germany", "Greece", "Hungary", "Ireland",
        "Italy", "Latvia", "Lithuania", "Luxembourg", "Malta", "Netherlands",
        "Poland", "Portugal", "Romania", "Slovakia", "Slovenia", "Spain", "Sweden",
        "Norway", "Israel", "Switzerland", "Ukraine", "Turkey", "Iceland",
        "The Netherlands", "Czech Republic", "United Kingdom", "United States",
        "New Zealand", "South Korea", "North Korea", "South Africa",
    ),
    unknown_project="Unknown Project",
    unknown_call="Unknown Call",
    unknown_topic="Unknown Topic",
    no_description="No description available",
)


def get_extraction_conf(template_name: str = DEFAULT_TEMPLATE) -> ExtractionConfig:
    """Get the extraction configuration for a document template."""
    if template_name == "EDF2024":
        return edf2024_conf

    raise ValueError(f"Extraction template {template_name} not found")

"""Shared fixtures: the text of a typical EDF project fact sheet."""

import pytest

from edfprojects.configurations import get_extraction_conf
from edfprojects.data_models import ConsortiumMember, Project, RawDocument

PROJECT_TEXT = """EUROPEAN DEFENCE FUND
SELECTED PROJECTS
© European Union, 2024
Reuse of this document is allowed, provided appropriate
credit is given and any changes are indicated.
ARCHER
EDF-2024-DA Development actions
Advanced radar for coastal surveillance
36 Months
€ 3,938,942.86 € 3,500,000.00
TYPE(S) OF ACTIVITIES:
Studies, Design, Prototyping
SHORT DESCRIPTION OF THE PROJECT:
ARCHER develops a low-cost radar for the monitoring
of coastal areas.
© European Union, 2024
The consortium brings together industry and research partners from three Member States to validate the system at sea.
Members of the consortium
NAME OF THE ENTITY COUNTRY
Tech Solutions (Coordinator) Germany
Acme Robotics GmbH France
Institute The Netherlands
Unparsable line here 42
"""


@pytest.fixture
def conf():
    return get_extraction_conf()


@pytest.fixture
def project_text():
    return PROJECT_TEXT


@pytest.fixture
def project_document():
    return RawDocument(file="archer.pdf", text=PROJECT_TEXT)


@pytest.fixture
def make_project():
    """Factory building projects without going through the extractors."""

    def _make(name="ARCHER", call="EDF-2024-DA", funding=None, members=()):
        return Project(
            project_name=name,
            call_title=call,
            topic_title="Unknown Topic",
            max_eu_contribution=funding,
            description="No description available",
            consortium_members=[
                ConsortiumMember(name=m_name, country=country, is_coordinator=coordinator)
                for m_name, country, coordinator in members
            ],
            source_file=f"{name.lower()}.pdf",
        )

    return _make

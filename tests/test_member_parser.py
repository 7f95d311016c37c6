"""Tests for the country heuristic and the consortium member parsing."""

import pytest

from edfprojects.data_models import ExtractionConfig
from edfprojects.member_parser import (
    CountryClassifier,
    CountryStrategy,
    GazetteerStrategy,
    MemberParser,
    extract_consortium_members,
    is_likely_country,
    is_likely_country_part,
    parse_member_line,
)


@pytest.mark.parametrize("word", ["France", "Germany", "Guinea-Bissau", "Côte", "St.Lucia", "Italy"])
def test_country_words(word):
    assert is_likely_country(word)


@pytest.mark.parametrize("word", [
    "france",          # lower case
    "UK",              # too short
    "Abcdefghijklmnopqrstu",  # too long
    "France2",
    "GmbH",
    "University",
    "DEFENCE",
    "(Coordinator)",
])
def test_not_country_words(word):
    assert not is_likely_country(word)


def test_country_parts():
    assert is_likely_country_part("The")
    assert is_likely_country_part("Czech")
    assert not is_likely_country_part("the")
    assert not is_likely_country_part("Republic")


def test_single_word_country():
    assert parse_member_line("Acme Robotics GmbH France") == ("Acme Robotics GmbH", "France")


def test_two_word_country():
    assert parse_member_line("Institute The Netherlands") == ("Institute", "The Netherlands")
    assert parse_member_line("Vojenský Výzkumný Ústav Czech Republic") == (
        "Vojenský Výzkumný Ústav", "Czech Republic"
    )


def test_gazetteer_fallback():
    # the glued last word fails the heuristic but still ends with a known country
    assert parse_member_line("Acme (Coordinator)Germany") == ("Acme (Coordinator)", "Germany")


def test_gazetteer_prefers_longest_name():
    strategy = GazetteerStrategy("COUNTRY", ["Netherlands", "The Netherlands"])
    line = "Acme The Netherlands"
    assert strategy.match(line, line.split()) == ("Acme", "The Netherlands")


@pytest.mark.parametrize("line", [
    "France",
    "COUNTRY Acme France",
    "Unparsable line here 42",
    "",
])
def test_unparsable_lines(line):
    assert parse_member_line(line) is None


def test_extract_members(project_text):
    members = extract_consortium_members(project_text)

    assert [(m.name, m.country, m.is_coordinator) for m in members] == [
        ("Tech Solutions", "Germany", True),
        ("Acme Robotics GmbH", "France", False),
        ("Institute", "The Netherlands", False),
    ]


def test_extract_members_without_section():
    assert extract_consortium_members("SHORT DESCRIPTION OF THE PROJECT:\nNothing here") == []


def test_extract_members_skips_boilerplate():
    text = (
        "Members of the consortium\n"
        "\n"
        "NAME OF THE ENTITY\n"
        "COUNTRY\n"
        "EUROPEAN DEFENCE FUND Belgium\n"
        "SELECTED PROJECTS France\n"
        "Nordic Sensors Oy Finland\n"
    )
    members = extract_consortium_members(text)
    assert [(m.name, m.country) for m in members] == [("Nordic Sensors Oy", "Finland")]


def test_extract_members_runs_to_end_of_text():
    text = (
        "Members of the consortium\n"
        "Acme Labs Spain\n"
        "SHORT DESCRIPTION OF THE PROJECT:\n"
        "Trailing Entity Portugal\n"
    )
    names = [m.name for m in extract_consortium_members(text)]
    assert names == ["Acme Labs", "Trailing Entity"]


def test_injected_country_lists(conf):
    custom = ExtractionConfig(**{
        **conf.model_dump(),
        "country_prefixes": conf.country_prefixes + ("Costa",),
    })
    parser = MemberParser(custom)

    assert parser.parse_member_line("Acme Costa Rica") == ("Acme", "Costa Rica")
    assert CountryClassifier(custom).is_likely_country_part("Costa")
    assert not CountryClassifier(conf).is_likely_country_part("Costa")


def test_page_break_inside_member_line():
    text = "Members of the consortium\nAcme\x0cLabs Spain\r\nNordic Sensors Oy Finland\n"
    members = extract_consortium_members(text)
    assert [(m.name, m.country) for m in members] == [
        ("Acme Labs", "Spain"),
        ("Nordic Sensors Oy", "Finland"),
    ]


def test_strategy_must_implement_match():
    class NoMatchStrategy(CountryStrategy):
        pass

    with pytest.raises(TypeError):
        NoMatchStrategy("COUNTRY")

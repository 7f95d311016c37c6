"""Tests for the data models and the extraction templates."""

import pytest

from pydantic import ValidationError

from edfprojects.configurations import edf2024_conf, get_extraction_conf
from edfprojects.data_models import (
    AmountRule, ExtractionConfig, RawDocument, documents_from_json, normalize_text, split_lines
)
from edfprojects.field_extractors import FieldExtractor


def test_get_extraction_conf():
    assert get_extraction_conf() is edf2024_conf
    assert get_extraction_conf("EDF2024").header_anchor == "credit is given and any changes are indicated."


def test_unknown_template():
    with pytest.raises(ValueError):
        get_extraction_conf("EDF1999")


def test_invalid_pattern_is_rejected(conf):
    with pytest.raises(ValidationError):
        ExtractionConfig(**{**conf.model_dump(), "duration_pattern": r"(\d+"})

    with pytest.raises(ValidationError):
        AmountRule(pattern=r"[\d,+")


def test_amount_rule_group_must_exist():
    with pytest.raises(ValidationError):
        AmountRule(pattern=r"([\d,]+\.\d+)", group=2)


def test_invalid_topic_window(conf):
    with pytest.raises(ValidationError):
        ExtractionConfig(**{**conf.model_dump(), "topic_window": (5, 5)})


def test_config_is_frozen(conf):
    with pytest.raises(ValidationError):
        conf.min_text_length = 10


def test_documents_from_json():
    documents = documents_from_json('[{"file": "a.pdf", "text": "A"}, {"file": "b.pdf", "text": "B"}]')

    assert documents == [RawDocument(file="a.pdf", text="A"), RawDocument(file="b.pdf", text="B")]


def test_documents_from_malformed_json():
    with pytest.raises(ValidationError):
        documents_from_json('[{"file": "a.pdf"}]')


def test_normalize_text():
    assert normalize_text("  ARCHER \n\n\t\nEDF-2024-DA  \n") == "ARCHER\nEDF-2024-DA"


def test_header_offsets_are_immutable(conf):
    with pytest.raises(ValidationError):
        conf.project_name_offset = 1

    text = "credit is given and any changes are indicated.\nA\nB\n"
    assert FieldExtractor().project_name(text) == "A"


def test_config_is_hashable(conf):
    assert hash(conf) == hash(get_extraction_conf())


def test_negative_header_offset(conf):
    with pytest.raises(ValidationError):
        ExtractionConfig(**{**conf.model_dump(), "call_title_offset": -1})


def test_split_lines_on_newlines_only():
    assert split_lines("a\x0cb\r\nc\x0bd\n") == ["a\x0cb", "c\x0bd", ""]


def test_normalize_text_keeps_page_breaks_inside_lines():
    assert normalize_text("Acme\x0cLabs Spain\r\n\n") == "Acme\x0cLabs Spain"

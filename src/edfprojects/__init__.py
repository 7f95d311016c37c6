"""edfprojects"""

from .aggregator import aggregate
from .configurations import get_extraction_conf
from .data_models import ConsortiumMember, ExtractionConfig, Project, RawDocument, Summary
from .pdf_processor import ProjectExtractor, extract_project, process_pdf_texts
from .report_generator import generate_json_summary, generate_structured_summary, load_json_summary

__all__ = [
    "ConsortiumMember",
    "ExtractionConfig",
    "Project",
    "ProjectExtractor",
    "RawDocument",
    "Summary",
    "aggregate",
    "extract_project",
    "generate_json_summary",
    "generate_structured_summary",
    "get_extraction_conf",
    "load_json_summary",
    "process_pdf_texts",
]

__version__ = "1.0.0"
__license__ = "MIT"
__description__ = """
    Tools for turning the text of European Defence Fund project fact sheets
    into structured project records. This package includes heuristics that
    locate the project fields in the raw PDF text, a parser for the consortium
    member lists and the aggregation of the records into corpus statistics
    (funding totals, projects per call, participations per country)."""

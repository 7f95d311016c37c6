"""Summarise the EDF project fact sheets already converted to text."""

import logging
import os

from pathlib import Path

from dotenv import load_dotenv
from termcolor import colored

from edfprojects import ProjectExtractor, generate_structured_summary, get_extraction_conf
from edfprojects.data_models import documents_from_json

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    pdf_text_file = Path(os.getenv("PDF_TEXT_FILE", "backup/pdf_text.json"))
    conf = get_extraction_conf(os.getenv("EXTRACTION_TEMPLATE", "EDF2024"))

    documents = documents_from_json(pdf_text_file.read_text(encoding="utf-8"))
    logger.info("Loaded %d documents from %s", len(documents), pdf_text_file)

    summary = ProjectExtractor(conf).process_documents(documents)
    print(colored(generate_structured_summary(summary, title=conf.report_title), "green"))

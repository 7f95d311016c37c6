"""Parsing of the consortium member list found in EDF project documents.

Member lines carry no separator between the entity name and its country,
e.g. ``Acme Robotics GmbH France``. The country is recovered from the end of
the line by a chain of strategies, each one either returning a match or
leaving the line to the next strategy.
"""

import logging

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from .configurations import get_extraction_conf
from .data_models import ConsortiumMember, ExtractionConfig, split_lines

MemberMatch = Tuple[str, str]


class CountryClassifier:
    """Decides whether a word looks like (part of) a country name."""

    def __init__(self, config: Optional[ExtractionConfig] = None):
        config = config or get_extraction_conf()
        self.min_length = config.country_min_length
        self.max_length = config.country_max_length
        self.extra_chars = frozenset(config.country_extra_chars)
        self.excluded_words = frozenset(config.excluded_words)
        self.country_prefixes = frozenset(config.country_prefixes)

    def is_likely_country(self, word: str) -> bool:
        """A country word is capitalised, of reasonable length, made of letters
        (plus a few punctuation marks) and not a common organisation word."""
        if not self.min_length <= len(word) <= self.max_length:
            return False
        if not word[0].isupper():
            return False
        if not all(c.isalpha() or c in self.extra_chars for c in word):
            return False
        return word.upper() not in self.excluded_words

    def is_likely_country_part(self, word: str) -> bool:
        """Whether the word commonly opens a multi-word country name."""
        return word in self.country_prefixes


class CountryStrategy(ABC):
    """Base class for the strategies splitting a member line into name and country."""

    def __init__(self, header_token: str):
        self.header_token = header_token

    def valid_name(self, name: str) -> bool:
        """Names must be non-empty and must not come from a table header."""
        return bool(name) and self.header_token not in name

    @abstractmethod
    def match(self, line: str, words: Sequence[str]) -> Optional[MemberMatch]:
        """Return ``(name, country)`` or None when the strategy has no opinion."""


class TwoWordCountryStrategy(CountryStrategy):
    """Countries such as ``Czech Republic`` or ``The Netherlands``."""

    def __init__(self, header_token: str, classifier: CountryClassifier):
        super().__init__(header_token)
        self.classifier = classifier

    def match(self, line: str, words: Sequence[str]) -> Optional[MemberMatch]:
        if len(words) < 3:
            return None
        first, last = words[-2], words[-1]
        if not (self.classifier.is_likely_country(last) and self.classifier.is_likely_country_part(first)):
            return None
        name = " ".join(words[:-2]).strip()
        if not self.valid_name(name):
            return None
        return name, f"{first} {last}"


class SingleWordCountryStrategy(CountryStrategy):
    """The last word of the line is the country."""

    def __init__(self, header_token: str, classifier: CountryClassifier):
        super().__init__(header_token)
        self.classifier = classifier

    def match(self, line: str, words: Sequence[str]) -> Optional[MemberMatch]:
        if len(words) < 2 or not self.classifier.is_likely_country(words[-1]):
            return None
        name = " ".join(words[:-1]).strip()
        if not self.valid_name(name):
            return None
        return name, words[-1]


class GazetteerStrategy(CountryStrategy):
    """Last resort: the line ends with a known country name."""

    def __init__(self, header_token: str, known_countries: Sequence[str]):
        super().__init__(header_token)
        # longest first so that multi-word names win over their last word
        self.known_countries = sorted(known_countries, key=len, reverse=True)

    def match(self, line: str, words: Sequence[str]) -> Optional[MemberMatch]:
        for country in self.known_countries:
            if line.endswith(country):
                name = line[:-len(country)].strip()
                if self.valid_name(name):
                    return name, country
        return None


class MemberParser:
    """Class extracting the consortium members from the text of a project document."""

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or get_extraction_conf()
        self.classifier = CountryClassifier(self.config)

        header_token = self.config.member_header_token
        self.strategies: List[CountryStrategy] = [
            TwoWordCountryStrategy(header_token, self.classifier),
            SingleWordCountryStrategy(header_token, self.classifier),
            GazetteerStrategy(header_token, self.config.known_countries),
        ]

    def parse_member_line(self, line: str) -> Optional[MemberMatch]:
        """Split a member line into entity name and country.

        Args:
            line: Trimmed line of the consortium section

        Returns:
            Tuple ``(name, country)``, or None if no strategy recognises a country
        """
        words = line.split()
        for strategy in self.strategies:
            result = strategy.match(line, words)
            if result is not None:
                return result
        return None

    def is_header_line(self, line: str) -> bool:
        """Empty lines and table headers or page boilerplate are not members."""
        return not line or any(marker in line for marker in self.config.member_header_markers)

    def extract_consortium_members(self, text: str) -> List[ConsortiumMember]:
        """Extract every member listed after the consortium anchor.

        The section runs until the end of the text. Lines that cannot be
        split into a name and a country are ignored.

        Args:
            text: Full text of the document

        Returns:
            List of members, in document order
        """
        start = text.find(self.config.members_anchor)
        if start == -1:
            self.logger.debug("No consortium section found")
            return []

        marker = self.config.coordinator_marker
        members = []
        for raw_line in split_lines(text[start:]):
            line = raw_line.strip()
            if self.is_header_line(line):
                continue

            parsed = self.parse_member_line(line)
            if parsed is None:
                self.logger.debug("Skipping unparsable member line %r", line)
                continue

            name, country = parsed
            members.append(ConsortiumMember(
                name=name.replace(marker, "").strip(),
                country=country,
                is_coordinator=marker in name,
            ))

        self.logger.debug("Found %d consortium members", len(members))
        return members


def is_likely_country(word: str) -> bool:
    """Check a word against the default template's country heuristic."""
    return CountryClassifier().is_likely_country(word)


def is_likely_country_part(word: str) -> bool:
    """Check whether a word opens a multi-word country name."""
    return CountryClassifier().is_likely_country_part(word)


def parse_member_line(line: str) -> Optional[MemberMatch]:
    """Split a member line using the default template."""
    return MemberParser().parse_member_line(line)


def extract_consortium_members(text: str) -> List[ConsortiumMember]:
    """Extract the consortium members using the default template."""
    return MemberParser().extract_consortium_members(text)

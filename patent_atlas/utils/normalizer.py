"""Patent normalizer for the text fields compared and filtered by the atlas."""

import re
import unicodedata
from typing import List, Optional, Set

import structlog

logger = structlog.get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


class PatentNormalizer:
    """Normalizer for patent text fields.

    Every comparison goes through ``fold`` on both sides so that Unicode
    compatibility forms and case are handled identically.
    """

    def __init__(self):
        # IPC classification hierarchy
        self.ipc_hierarchy = {
            'A': 'Human Necessities',
            'B': 'Performing Operations; Transporting',
            'C': 'Chemistry; Metallurgy',
            'D': 'Textiles; Paper',
            'E': 'Fixed Constructions',
            'F': 'Mechanical Engineering; Lighting; Heating; Weapons; Blasting',
            'G': 'Physics',
            'H': 'Electricity',
        }

    def fold(self, text: Optional[str]) -> str:
        """Unicode-normalize and lower-case text for comparison."""
        if not text:
            return ""
        return unicodedata.normalize('NFKC', text).lower()

    def keyword_terms(self, keywords: Optional[str]) -> Set[str]:
        """Split a comma-separated keyword string into a set of terms."""
        terms = (term.strip() for term in self.fold(keywords).split(','))
        return {term for term in terms if term}

    def abstract_words(self, abstract: Optional[str]) -> List[str]:
        """Split an abstract into its word sequence, duplicates kept."""
        folded = self.fold(abstract).strip()
        if not folded:
            return []
        return _WHITESPACE_RE.split(folded)

    def normalize_applicant(self, applicant: Optional[str]) -> Optional[str]:
        """Normalize an applicant name for case-insensitive equality."""
        folded = self.fold(applicant)
        return folded if folded.strip() else None

    def primary_class(self, code: Optional[str]) -> Optional[str]:
        """Return the leading token of a classification code ("H04L 9/08" -> "H04L")."""
        if not code or not code.strip():
            return None
        return code.strip().split(' ', 1)[0]

    def get_ipc_rollup(self, code: Optional[str]) -> Optional[str]:
        """Get IPC rollup code (section level)."""
        if not code or not code.strip():
            return None

        section = code.strip()[0].upper()
        if section in self.ipc_hierarchy:
            return f"{section} - {self.ipc_hierarchy[section]}"

        logger.debug("Unknown IPC section", code=code)
        return None

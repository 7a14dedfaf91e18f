from __future__ import annotations

from typing import Dict

# ORCID work type codes and the labels the profile pages show for them.
# Only these eight survive a round trip; every other code collapses to
# "Other" on the way in and "other" on the way out.
ORCID_TO_DISPLAY_TYPE: Dict[str, str] = {
    "journal-article": "Journal Article",
    "conference-paper": "Conference Paper",
    "book-chapter": "Book Chapter",
    "book": "Book",
    "report": "Report",
    "working-paper": "Working Paper",
    "dissertation": "Dissertation",
    "other": "Other",
}

DISPLAY_TO_ORCID_TYPE: Dict[str, str] = {label: code for code, label in ORCID_TO_DISPLAY_TYPE.items()}

FALLBACK_DISPLAY_TYPE = "Other"
FALLBACK_ORCID_TYPE = "other"

# display labels in table order, for pickers and validation
DISPLAY_TYPES = tuple(ORCID_TO_DISPLAY_TYPE.values())


def orcid_type_to_display(orcid_type: str) -> str:
    """
    Translate an ORCID work type code into its display label.
    """
    return ORCID_TO_DISPLAY_TYPE.get(orcid_type, FALLBACK_DISPLAY_TYPE)


def display_type_to_orcid(display_type: str) -> str:
    """
    Translate a display label back into an ORCID work type code.
    """
    return DISPLAY_TO_ORCID_TYPE.get(display_type, FALLBACK_ORCID_TYPE)

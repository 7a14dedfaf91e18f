import pytest
from ProfileBridge import type_codes

KNOWN_TYPES = [
    ("journal-article", "Journal Article"),
    ("conference-paper", "Conference Paper"),
    ("book-chapter", "Book Chapter"),
    ("book", "Book"),
    ("report", "Report"),
    ("working-paper", "Working Paper"),
    ("dissertation", "Dissertation"),
    ("other", "Other"),
]

@pytest.mark.parametrize("code, label", KNOWN_TYPES)
def test_known_types_both_directions(code, label):
    """
    Test every table entry in both directions.
    """
    assert type_codes.orcid_type_to_display(code) == label
    assert type_codes.display_type_to_orcid(label) == code

def test_table_size():
    """
    Test that the table holds exactly the eight supported types.
    """
    assert len(type_codes.ORCID_TO_DISPLAY_TYPE) == 8
    assert type_codes.DISPLAY_TYPES == tuple(label for _, label in KNOWN_TYPES)

@pytest.mark.parametrize("code", ["data-set", "preprint", "Journal-Article", ""])
def test_unknown_code_is_other(code):
    """
    Test that unknown or differently-cased codes display as Other.
    """
    assert type_codes.orcid_type_to_display(code) == "Other"

@pytest.mark.parametrize("label", ["Preprint", "journal article", ""])
def test_unknown_label_is_other(label):
    """
    Test that unknown labels are written as "other".
    """
    assert type_codes.display_type_to_orcid(label) == "other"

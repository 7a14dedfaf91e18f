from ProfileBridge import profile_utils
from ProfileBridge.models import ONGOING, Project, Publication, Researcher

# ===== ASSOCIATION =====

def _researcher() -> Researcher:
    return Researcher(
        name="Maria",
        publications=[
            Publication(id="1", title="Café and rainfall", source="Hydrology Letters", type="Journal Article",
                        project="Amazon Budget"),
            Publication(id="2", title="Snow cover trends", source="IGARSS", type="Conference Paper"),
            Publication(id="3", title="Basin closure", source="WRR", type="Journal Article",
                        project="Amazon Budget"),
            Publication(id="4", title="Thesis", source="UFX", type="Dissertation", project="amazon budget"),
        ],
        projects=[
            Project(id="10", name="Amazon Budget"),
            Project(id="11", name="Andes Snow"),
        ],
    )

def test_associate_publications_by_project_name():
    """
    Test that projects collect the ids of publications naming them exactly.
    """
    r = profile_utils.associate_publications(_researcher())

    assert r.projects[0].publications == ["1", "3"]
    assert r.projects[1].publications == []

def test_associate_publications_leaves_input_untouched():
    """
    Test that association returns a copy.
    """
    original = _researcher()
    profile_utils.associate_publications(original)

    assert all(p.publications == [] for p in original.projects)

# ===== SEARCH =====

def test_filter_publications_accent_insensitive():
    """
    Test that queries without accents match accented titles.
    """
    found = profile_utils.filter_publications(_researcher().publications, "cafe")
    assert [p.id for p in found] == ["1"]

def test_filter_publications_fields():
    """
    Test matching on source and display type, case-insensitively.
    """
    pubs = _researcher().publications

    assert [p.id for p in profile_utils.filter_publications(pubs, "igarss")] == ["2"]
    assert [p.id for p in profile_utils.filter_publications(pubs, "JOURNAL")] == ["1", "3"]
    assert profile_utils.filter_publications(pubs, "no such thing") == []

def test_filter_publications_empty_query():
    """
    Test that an empty or blank query returns everything.
    """
    pubs = _researcher().publications

    assert profile_utils.filter_publications(pubs, "") == pubs
    assert profile_utils.filter_publications(pubs, "   ") == pubs

# ===== LOOKUP AND DISPLAY =====

def test_find_publication():
    """
    Test lookup by id.
    """
    r = _researcher()

    assert profile_utils.find_publication(r, "3").title == "Basin closure"
    assert profile_utils.find_publication(r, "99") is None

def test_format_end_year():
    """
    Test end year display for years and the ongoing marker.
    """
    assert profile_utils.format_end_year(2024) == "2024"
    assert profile_utils.format_end_year(ONGOING) == "Ongoing"

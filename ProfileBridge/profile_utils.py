from __future__ import annotations

import dataclasses
from typing import Iterable, List, Optional

from .config import ONGOING_LABEL
from .models import EndYear, Ongoing, Publication, Researcher
from .text_utils import fold_text

__all__ = [
    "associate_publications",
    "filter_publications",
    "find_publication",
    "format_end_year",
]


def associate_publications(researcher: Researcher) -> Researcher:
    """
    Return a copy of the researcher whose projects list the ids of the
    publications attached to them. A publication belongs to a project when its
    project field equals the project's name exactly. The input researcher is
    not modified.
    """
    projects = []
    for project in researcher.projects:
        ids = [p.id for p in researcher.publications if p.project and p.project == project.name]
        projects.append(dataclasses.replace(project, publications=ids))
    return dataclasses.replace(researcher, projects=projects)


def filter_publications(publications: Iterable[Publication], query: str) -> List[Publication]:
    """
    Case- and accent-insensitive search over title, source, and display type.
    An empty query returns every publication.
    """
    needle = fold_text((query or "").strip())
    if not needle:
        return list(publications)

    return [
        p for p in publications
        if needle in fold_text(p.title) or needle in fold_text(p.source) or needle in fold_text(p.type)
    ]


def find_publication(researcher: Researcher, publication_id: str) -> Optional[Publication]:
    return next((p for p in researcher.publications if p.id == publication_id), None)


def format_end_year(end_year: EndYear) -> str:
    if isinstance(end_year, Ongoing):
        return ONGOING_LABEL
    return str(end_year)

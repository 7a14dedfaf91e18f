from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class Ongoing(Enum):
    """
    Marker used as a project's end year when the funding record has no end
    date. Deliberately not an int subclass, so it can never be mistaken for a
    year in arithmetic or comparisons.
    """
    ONGOING = "ongoing"

    def __str__(self) -> str:
        return self.value


ONGOING = Ongoing.ONGOING

# a year, or ONGOING for projects without an end date
EndYear = Union[int, Ongoing]


@dataclass
class NamedLink:
    name: str = ""
    url: str = ""


@dataclass
class Identifier:
    type: str = ""
    value: str = ""


@dataclass
class Author:
    name: str = ""
    orcid_id: str = ""  # empty when the contributor has no ORCID iD


@dataclass
class Publication:
    """
    A single work as shown in the profile. The identifier keeps only the first
    external id of the record, and project is a free-text join on Project.name.
    """
    id: str = ""
    title: str = ""
    authors: List[Author] = field(default_factory=list)
    year: int = 0  # 0 when the record has no parseable year
    type: str = "Other"
    source: str = ""
    identifier: Identifier = field(default_factory=Identifier)
    abstract: str = ""
    links: List[NamedLink] = field(default_factory=list)
    project: str = ""


@dataclass
class Project:
    """
    A funded project. funding is a display string ("amount currency") and
    publications holds publication ids filled by the association step.
    """
    id: str = ""
    name: str = ""
    title: str = ""
    description: str = ""
    start_year: int = 0
    end_year: EndYear = ONGOING
    funding: str = ""
    funding_agency: str = ""
    role: str = ""
    publications: List[str] = field(default_factory=list)

    @property
    def is_ongoing(self) -> bool:
        return self.end_year is ONGOING


@dataclass
class Researcher:
    """
    A researcher profile. The mapper always returns empty publications and
    projects; callers fill them from separate work and funding requests.
    """
    name: str = ""
    orcid_id: str = ""
    institution: str = ""
    department: str = ""
    role: str = ""
    bio: str = ""
    email: str = ""  # never exposed by the public API
    research_areas: List[str] = field(default_factory=list)
    education: List[str] = field(default_factory=list)
    awards: List[str] = field(default_factory=list)
    institutional_page: str = ""
    external_links: List[NamedLink] = field(default_factory=list)
    publications: List[Publication] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)

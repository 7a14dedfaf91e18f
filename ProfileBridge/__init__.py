from __future__ import annotations

from .api_clients import fetch_complete_researcher, push_project, push_publication, push_researcher
from .exceptions import RemoteServiceError
from .http_utils import fetch_record, put_record
from .inbound import map_funding_to_project, map_record_to_researcher, map_work_to_publication
from .models import ONGOING, Author, Identifier, NamedLink, Ongoing, Project, Publication, Researcher
from .outbound import map_project_to_funding, map_publication_to_work, map_researcher_to_record
from .profile_utils import associate_publications, filter_publications, find_publication, format_end_year
from .type_codes import display_type_to_orcid, orcid_type_to_display

__version__ = "1.0.0"

__all__ = [
    "ONGOING",
    "Author",
    "Identifier",
    "NamedLink",
    "Ongoing",
    "Project",
    "Publication",
    "Researcher",
    "RemoteServiceError",
    "associate_publications",
    "display_type_to_orcid",
    "fetch_complete_researcher",
    "fetch_record",
    "filter_publications",
    "find_publication",
    "format_end_year",
    "map_funding_to_project",
    "map_project_to_funding",
    "map_publication_to_work",
    "map_record_to_researcher",
    "map_researcher_to_record",
    "map_work_to_publication",
    "orcid_type_to_display",
    "push_project",
    "push_publication",
    "push_researcher",
    "put_record",
]

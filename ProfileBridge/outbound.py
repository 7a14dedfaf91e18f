from __future__ import annotations

from typing import Any, Dict, Optional

from .config import (
    CONTRIBUTOR_ROLE_AUTHOR,
    CONTRIBUTOR_SEQUENCE_ADDITIONAL,
    CONTRIBUTOR_SEQUENCE_FIRST,
    IDENTIFIER_RELATIONSHIP_SELF,
    VISIBILITY_PUBLIC,
)
from .models import Project, Publication, Researcher
from .text_utils import split_name
from .type_codes import display_type_to_orcid

__all__ = [
    "map_researcher_to_record",
    "map_publication_to_work",
    "map_project_to_funding",
]


def map_researcher_to_record(researcher: Researcher) -> Dict[str, Any]:
    """
    Build the person payload for a profile update.

    The name is split on the first space: "Ana" becomes given name "Ana" with
    an empty family name. Each researcher URL carries its list position as
    put-code, which the service uses as the update key.
    """
    given_names, family_name = split_name(researcher.name)

    return {
        "biography": {
            "content": researcher.bio,
            "visibility": VISIBILITY_PUBLIC,
        },
        "keywords": {
            "keyword": [
                {"content": area, "visibility": VISIBILITY_PUBLIC}
                for area in researcher.research_areas
            ],
            "visibility": VISIBILITY_PUBLIC,
        },
        "researcher-urls": {
            "researcher-url": [
                {
                    "put-code": index,
                    "url": {"value": link.url},
                    "url-name": link.name,
                    "visibility": VISIBILITY_PUBLIC,
                }
                for index, link in enumerate(researcher.external_links)
            ],
            "visibility": VISIBILITY_PUBLIC,
        },
        "name": {
            "given-names": {"value": given_names},
            "family-name": {"value": family_name},
            "visibility": VISIBILITY_PUBLIC,
        },
    }


def map_publication_to_work(publication: Publication) -> Dict[str, Any]:
    """
    Build a work payload from a Publication. Authors without an ORCID iD get
    a null contributor-orcid (the inbound side represents them with "").
    """
    contributors = []
    for index, author in enumerate(publication.authors):
        contributors.append({
            "contributor-orcid": {"path": author.orcid_id} if author.orcid_id else None,
            "credit-name": {"value": author.name},
            "contributor-attributes": {
                "contributor-sequence": CONTRIBUTOR_SEQUENCE_FIRST if index == 0 else CONTRIBUTOR_SEQUENCE_ADDITIONAL,
                "contributor-role": CONTRIBUTOR_ROLE_AUTHOR,
            },
        })

    return {
        "title": {"title": {"value": publication.title}},
        "journal-title": {"value": publication.source},
        "type": display_type_to_orcid(publication.type),
        "publication-date": {"year": {"value": str(publication.year)}},
        "external-ids": {
            "external-id": [{
                "external-id-type": publication.identifier.type.lower(),
                "external-id-value": publication.identifier.value,
                "external-id-relationship": IDENTIFIER_RELATIONSHIP_SELF,
            }]
        },
        "contributors": {"contributor": contributors},
        "short-description": publication.abstract,
        "visibility": VISIBILITY_PUBLIC,
    }


def _split_funding(funding: str) -> Dict[str, str]:
    # "250000 BRL" -> value + currency; a lone token is kept as the value
    parts = (funding or "").split()
    if len(parts) >= 2:
        return {"value": " ".join(parts[:-1]), "currency-code": parts[-1]}
    if parts:
        return {"value": parts[0]}
    return {}


def map_project_to_funding(project: Project) -> Dict[str, Any]:
    """
    Build a funding payload from a Project. An ONGOING end year is written as a
    null end-date, and the display funding string is split back into amount
    and currency code.
    """
    end_date: Optional[Dict[str, Any]] = None
    if not project.is_ongoing:
        end_date = {"year": {"value": str(project.end_year)}}

    payload: Dict[str, Any] = {
        "type": project.role,
        "title": {"title": {"value": project.title or project.name}},
        "short-description": project.description,
        "organization": {"name": project.funding_agency},
        "start-date": {"year": {"value": str(project.start_year)}},
        "end-date": end_date,
        "visibility": VISIBILITY_PUBLIC,
    }

    amount = _split_funding(project.funding)
    if amount:
        payload["amount"] = amount
    if project.id.isdigit():
        payload["put-code"] = int(project.id)
    return payload

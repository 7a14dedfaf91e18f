from __future__ import annotations

from typing import Any, Union

from .config import INSTITUTIONAL_URL_NAME
from .models import ONGOING, Author, Identifier, NamedLink, Project, Publication, Researcher
from .records import FundingRecord, ProfileRecord, WorkRecord
from .text_utils import join_name, parse_leading_int
from .type_codes import orcid_type_to_display

__all__ = [
    "map_record_to_researcher",
    "map_work_to_publication",
    "map_funding_to_project",
]


def map_record_to_researcher(record: Union[ProfileRecord, Any]) -> Researcher:
    """
    Build a Researcher from an ORCID record payload.

    Institution, department, and role come from the first employment entry
    exactly as the service orders them. Keywords keep their positions even
    when empty, and every researcher URL becomes an external link. The
    institutional page is the first URL named "institutional". Publications
    and projects are left empty; they come from separate work and funding
    requests.

    Missing or mistyped fields anywhere in the payload resolve to empty
    values; this function does not raise on bad input.
    """
    if not isinstance(record, ProfileRecord):
        record = ProfileRecord.from_json(record)

    institutional_page = next(
        (u.url for u in record.urls if u.name == INSTITUTIONAL_URL_NAME),
        "",
    )

    return Researcher(
        name=join_name(record.given_names, record.family_name),
        orcid_id=record.orcid_id,
        institution=record.employment.organization_name,
        department=record.employment.department_name,
        role=record.employment.role_title,
        bio=record.biography,
        email="",
        research_areas=list(record.keywords),
        institutional_page=institutional_page,
        external_links=[NamedLink(name=u.name, url=u.url) for u in record.urls],
        publications=[],
        projects=[],
    )


def map_work_to_publication(work: Union[WorkRecord, Any]) -> Publication:
    """
    Build a Publication from an ORCID work payload.

    Only the first external identifier is kept (a DOI followed by an ISBN
    keeps the DOI). The work type goes through the display-type table, so
    codes outside it become "Other". Links and the project association are
    always empty.
    """
    if not isinstance(work, WorkRecord):
        work = WorkRecord.from_json(work)

    first_id = work.external_ids[0] if work.external_ids else None

    return Publication(
        id=work.put_code,
        title=work.title,
        authors=[Author(name=c.credit_name, orcid_id=c.orcid_id) for c in work.contributors],
        year=parse_leading_int(work.year),
        type=orcid_type_to_display(work.type),
        source=work.journal_title,
        identifier=Identifier(type=first_id.type, value=first_id.value) if first_id else Identifier(),
        abstract=work.short_description,
        links=[],
        project="",
    )


def map_funding_to_project(funding: Union[FundingRecord, Any]) -> Project:
    """
    Build a Project from an ORCID funding payload. A record without an end
    date gets ONGOING as its end year.
    """
    if not isinstance(funding, FundingRecord):
        funding = FundingRecord.from_json(funding)

    end_year = parse_leading_int(funding.end_year) if funding.end_year is not None else ONGOING

    return Project(
        id=funding.put_code,
        name=funding.title,
        title=funding.title,
        description=funding.short_description,
        start_year=parse_leading_int(funding.start_year),
        end_year=end_year,
        funding=f"{funding.amount} {funding.currency_code}".strip(),
        funding_agency=funding.organization_name,
        role=funding.type,
        publications=[],
    )

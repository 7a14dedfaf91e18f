from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import DEFAULT_WORK_TYPE
from .text_utils import safe_get_list, safe_get_nested, safe_get_str

# Typed views of the ORCID v3.0 JSON payloads.
# Every field has a default, so a record parsed from a partial or malformed
# payload is always complete; the mappers never look at raw dicts.
#
# Record: https://pub.orcid.org/v3.0/{orcid}/record
# Work:   https://pub.orcid.org/v3.0/{orcid}/work/{put-code}
# Fund:   https://pub.orcid.org/v3.0/{orcid}/funding/{put-code}


def _first_dict(items: List[Any]) -> Dict[str, Any]:
    if items and isinstance(items[0], dict):
        return items[0]
    return {}


def _dicts(items: List[Any]) -> List[Dict[str, Any]]:
    # entries that are not objects are kept as empty ones so positions survive
    return [item if isinstance(item, dict) else {} for item in items]


@dataclass
class EmploymentSummary:
    organization_name: str = ""
    department_name: str = ""
    role_title: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "EmploymentSummary":
        # v3.0 wraps each summary as {"employment-summary": {...}}
        inner = safe_get_nested(data, "employment-summary")
        if isinstance(inner, dict):
            data = inner
        return cls(
            organization_name=safe_get_str(data, "organization", "name"),
            department_name=safe_get_str(data, "department-name"),
            role_title=safe_get_str(data, "role-title"),
        )


@dataclass
class ResearcherUrl:
    name: str = ""
    url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "ResearcherUrl":
        return cls(
            name=safe_get_str(data, "url-name") or safe_get_str(data, "name"),
            url=safe_get_str(data, "url", "value"),
        )


@dataclass
class ProfileRecord:
    """
    The parts of an ORCID record used for a researcher profile. Employment is
    read from the first affiliation group as returned by the service, which
    lists the current position first.
    """
    orcid_id: str = ""
    given_names: str = ""
    family_name: str = ""
    biography: str = ""
    employment: EmploymentSummary = field(default_factory=EmploymentSummary)
    keywords: List[str] = field(default_factory=list)
    urls: List[ResearcherUrl] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "ProfileRecord":
        person = safe_get_nested(data, "person", default={})
        groups = safe_get_list(person, "employments", "affiliation-group")
        summaries = safe_get_list(_first_dict(groups), "summaries")
        return cls(
            orcid_id=safe_get_str(data, "orcid-identifier", "path"),
            given_names=safe_get_str(person, "name", "given-names", "value"),
            family_name=safe_get_str(person, "name", "family-name", "value"),
            biography=safe_get_str(person, "biography", "content"),
            employment=EmploymentSummary.from_json(_first_dict(summaries)),
            keywords=[safe_get_str(k, "content") for k in safe_get_list(person, "keywords", "keyword")],
            urls=[
                ResearcherUrl.from_json(u)
                for u in safe_get_list(person, "researcher-urls", "researcher-url")
            ],
        )


@dataclass
class Contributor:
    credit_name: str = ""
    orcid_id: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Contributor":
        return cls(
            credit_name=safe_get_str(data, "credit-name", "value"),
            orcid_id=safe_get_str(data, "contributor-orcid", "path"),
        )


@dataclass
class ExternalId:
    type: str = ""
    value: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "ExternalId":
        # the service uses the long keys; hand-built payloads often use the short ones
        return cls(
            type=safe_get_str(data, "external-id-type") or safe_get_str(data, "type"),
            value=safe_get_str(data, "external-id-value") or safe_get_str(data, "value"),
        )


@dataclass
class WorkRecord:
    put_code: str = ""
    title: str = ""
    journal_title: str = ""
    type: str = DEFAULT_WORK_TYPE
    year: str = ""
    contributors: List[Contributor] = field(default_factory=list)
    external_ids: List[ExternalId] = field(default_factory=list)
    short_description: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "WorkRecord":
        return cls(
            put_code=safe_get_str(data, "put-code"),
            title=safe_get_str(data, "title", "title", "value"),
            journal_title=safe_get_str(data, "journal-title", "value"),
            type=safe_get_str(data, "type") or DEFAULT_WORK_TYPE,
            year=safe_get_str(data, "publication-date", "year", "value"),
            contributors=[
                Contributor.from_json(c) for c in _dicts(safe_get_list(data, "contributors", "contributor"))
            ],
            external_ids=[
                ExternalId.from_json(e) for e in _dicts(safe_get_list(data, "external-ids", "external-id"))
            ],
            short_description=safe_get_str(data, "short-description"),
        )


@dataclass
class FundingRecord:
    """
    An ORCID funding item. end_year is None when the record carries no end
    date, which the mapper turns into the ongoing marker.
    """
    put_code: str = ""
    title: str = ""
    organization_name: str = ""
    start_year: str = ""
    end_year: Optional[str] = None
    amount: str = ""
    currency_code: str = ""
    type: str = ""
    short_description: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "FundingRecord":
        return cls(
            put_code=safe_get_str(data, "put-code"),
            title=safe_get_str(data, "title", "title", "value"),
            organization_name=safe_get_str(data, "organization", "name"),
            start_year=safe_get_str(data, "start-date", "year", "value"),
            end_year=safe_get_str(data, "end-date", "year", "value") or None,
            amount=safe_get_str(data, "amount", "value"),
            currency_code=safe_get_str(data, "amount", "currency-code"),
            type=safe_get_str(data, "type"),
            short_description=safe_get_str(data, "short-description"),
        )

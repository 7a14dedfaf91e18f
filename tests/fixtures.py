from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

ORCID_ID = "0000-0002-1825-0097"


def profile_payload() -> Dict[str, Any]:
    """
    A record payload shaped like https://pub.orcid.org/v3.0/{id}/record.
    """
    return {
        "orcid-identifier": {"path": ORCID_ID, "host": "orcid.org"},
        "person": {
            "name": {
                "given-names": {"value": "Maria"},
                "family-name": {"value": "da Silva Souza"},
            },
            "biography": {"content": "Works on tropical hydrology."},
            "researcher-urls": {
                "researcher-url": [
                    {"url-name": "Lab page", "url": {"value": "https://lab.example.org"}},
                    {"url-name": "institutional", "url": {"value": "https://ufx.br/~maria"}},
                    {"url-name": "institutional", "url": {"value": "https://old.ufx.br/~maria"}},
                ]
            },
            "keywords": {
                "keyword": [
                    {"content": "Hydrology"},
                    {},
                    {"content": "Remote Sensing"},
                ]
            },
            "employments": {
                "affiliation-group": [
                    {
                        "summaries": [
                            {
                                "employment-summary": {
                                    "organization": {"name": "Universidade Federal X"},
                                    "department-name": "Civil Engineering",
                                    "role-title": "Associate Professor",
                                }
                            }
                        ]
                    },
                    {
                        "summaries": [
                            {
                                "employment-summary": {
                                    "organization": {"name": "Old Institute"},
                                    "department-name": "Physics",
                                    "role-title": "Postdoc",
                                }
                            }
                        ]
                    },
                ]
            },
        },
    }


def work_payload(
        put_code: int = 1001,
        work_type: Optional[str] = "journal-article",
        external_ids: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    A work payload shaped like https://pub.orcid.org/v3.0/{id}/work/{put-code}.
    """
    if external_ids is None:
        external_ids = [
            {"external-id-type": "doi", "external-id-value": "10.1000/xyz123"},
            {"external-id-type": "isbn", "external-id-value": "978-3-16-148410-0"},
        ]
    payload = {
        "put-code": put_code,
        "title": {"title": {"value": "River discharge from space"}},
        "journal-title": {"value": "Water Resources Research"},
        "publication-date": {"year": {"value": "2021"}, "month": {"value": "04"}},
        "external-ids": {"external-id": external_ids},
        "contributors": {
            "contributor": [
                {
                    "contributor-orcid": {"path": ORCID_ID},
                    "credit-name": {"value": "Maria da Silva Souza"},
                },
                {"credit-name": {"value": "João Pereira"}},
            ]
        },
        "short-description": "We estimate discharge from altimetry.",
    }
    if work_type is not None:
        payload["type"] = work_type
    return payload


def funding_payload(put_code: int = 2001, end_year: Optional[str] = "2024") -> Dict[str, Any]:
    """
    A funding payload shaped like https://pub.orcid.org/v3.0/{id}/funding/{put-code}.
    """
    payload = {
        "put-code": put_code,
        "type": "grant",
        "title": {"title": {"value": "Amazon Basin Water Budget"}},
        "short-description": "Closing the water budget of the Amazon basin.",
        "amount": {"value": "250000", "currency-code": "BRL"},
        "start-date": {"year": {"value": "2020"}},
        "organization": {"name": "CNPq"},
    }
    if end_year is not None:
        payload["end-date"] = {"year": {"value": end_year}}
    return payload


def works_listing(put_codes: List[int]) -> Dict[str, Any]:
    return {"group": [{"work-summary": [{"put-code": pc}]} for pc in put_codes]}


def fundings_listing(put_codes: List[int]) -> Dict[str, Any]:
    return {"group": [{"funding-summary": [{"put-code": pc}]} for pc in put_codes]}


def mock_response(status: int = 200, body: Any = None, reason: str = "OK") -> MagicMock:
    """
    Build a mock requests.Response with the given status and JSON body.
    """
    resp = MagicMock()
    resp.status_code = status
    resp.reason = reason
    resp.ok = 200 <= status < 300
    resp.content = b"" if body is None else json.dumps(body).encode("utf-8")
    return resp


def routed_session(routes: Dict[str, Any]) -> MagicMock:
    """
    Build a mock session whose get() answers each URL from `routes`. Values are
    either a JSON body (served with 200) or a ready-made mock response. Unknown
    URLs answer 404.
    """
    def _get(url, headers=None, timeout=None):
        value = routes.get(url)
        if value is None:
            return mock_response(404, {"error": "not found"}, reason="Not Found")
        if isinstance(value, MagicMock):
            return value
        return mock_response(200, value)

    session = MagicMock()
    session.get.side_effect = _get
    return session

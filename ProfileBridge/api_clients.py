from __future__ import annotations

import dataclasses
from typing import Any, Dict, List, Optional

import requests

from .config import (
    MAX_FUNDINGS_PER_RESEARCHER,
    MAX_WORKS_PER_RESEARCHER,
    ORCID_BASE,
    ORCID_MEMBER_BASE,
)
from .exceptions import ALL_API_ERRORS
from .http_utils import fetch_record, put_record
from .inbound import map_funding_to_project, map_record_to_researcher, map_work_to_publication
from .log_utils import logger, LogSource, LogCategory
from .models import Project, Publication, Researcher
from .outbound import map_project_to_funding, map_publication_to_work, map_researcher_to_record
from .text_utils import clean_orcid_id, safe_get_list, safe_get_str

__all__ = [
    "fetch_complete_researcher",
    "push_researcher",
    "push_publication",
    "push_project",
]


# ============================================================================================
# Reads
# ============================================================================================

def _group_put_codes(listing: Any, summary_key: str, limit: int) -> List[str]:
    """
    Take the put-code of the first summary in each of the first `limit` groups
    of a works or fundings listing, in listing order.
    """
    put_codes = []
    for index, group in enumerate(safe_get_list(listing, "group")[:limit]):
        summaries = safe_get_list(group, summary_key)
        put_code = safe_get_str(summaries[0], "put-code") if summaries else ""
        if not put_code:
            raise ValueError(f"{summary_key} group {index} has no put-code")
        put_codes.append(put_code)
    return put_codes


def fetch_complete_researcher(
        orcid_id: str,
        token: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
) -> Researcher:
    """
    Fetch a researcher's profile, works, and fundings and assemble them into one
    Researcher.

    Requests run strictly one after another: record, works listing, the detail
    of each of the first 20 works, fundings listing, the detail of each of the
    first 10 fundings. Any failure aborts the whole fetch; no partial
    researcher is returned.
    """
    orcid_id = clean_orcid_id(orcid_id)
    base = f"{ORCID_BASE}/{orcid_id}"

    logger.step(f"Fetching researcher {orcid_id}", source=LogSource.ORCID, category=LogCategory.PROFILE)
    try:
        researcher = map_record_to_researcher(fetch_record(f"{base}/record", token, session=session))

        works = fetch_record(f"{base}/works", token, session=session)
        publications: List[Publication] = []
        for put_code in _group_put_codes(works, "work-summary", MAX_WORKS_PER_RESEARCHER):
            work = fetch_record(f"{base}/work/{put_code}", token, session=session)
            publications.append(map_work_to_publication(work))
        logger.info(f"Mapped {len(publications)} work(s)", source=LogSource.ORCID, category=LogCategory.WORK)

        fundings = fetch_record(f"{base}/fundings", token, session=session)
        projects: List[Project] = []
        for put_code in _group_put_codes(fundings, "funding-summary", MAX_FUNDINGS_PER_RESEARCHER):
            funding = fetch_record(f"{base}/funding/{put_code}", token, session=session)
            projects.append(map_funding_to_project(funding))
        logger.info(f"Mapped {len(projects)} funding(s)", source=LogSource.ORCID, category=LogCategory.FUNDING)
    except ALL_API_ERRORS as e:
        logger.error(f"Could not fetch researcher {orcid_id}: {e}", source=LogSource.ORCID, category=LogCategory.ERROR)
        raise

    logger.success(f"Fetched researcher {orcid_id}", source=LogSource.ORCID, category=LogCategory.PROFILE)
    return dataclasses.replace(researcher, publications=publications, projects=projects)


# ============================================================================================
# Writes
# ============================================================================================

def push_researcher(
        orcid_id: str,
        researcher: Researcher,
        token: str,
        *,
        session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Write the researcher's name, biography, keywords, and URLs back to the
    person section of their record.
    """
    orcid_id = clean_orcid_id(orcid_id)
    url = f"{ORCID_MEMBER_BASE}/{orcid_id}/person"
    result = put_record(url, map_researcher_to_record(researcher), token, session=session)
    logger.success(f"Updated profile {orcid_id}", source=LogSource.ORCID, category=LogCategory.SAVE)
    return result


def push_publication(
        orcid_id: str,
        publication: Publication,
        token: str,
        *,
        session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Update an existing work. The publication id is the work's put-code, so a
    publication that never came from the service cannot be pushed.
    """
    if not publication.id:
        raise ValueError("Publication has no put-code; only works read from ORCID can be updated")

    orcid_id = clean_orcid_id(orcid_id)
    url = f"{ORCID_MEMBER_BASE}/{orcid_id}/work/{publication.id}"
    payload = map_publication_to_work(publication)
    payload["put-code"] = int(publication.id) if publication.id.isdigit() else publication.id
    result = put_record(url, payload, token, session=session)
    logger.success(f"Updated work {publication.id}", source=LogSource.ORCID, category=LogCategory.SAVE)
    return result


def push_project(
        orcid_id: str,
        project: Project,
        token: str,
        *,
        session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Update an existing funding item, keyed by the project's put-code.
    """
    if not project.id:
        raise ValueError("Project has no put-code; only fundings read from ORCID can be updated")

    orcid_id = clean_orcid_id(orcid_id)
    url = f"{ORCID_MEMBER_BASE}/{orcid_id}/funding/{project.id}"
    result = put_record(url, map_project_to_funding(project), token, session=session)
    logger.success(f"Updated funding {project.id}", source=LogSource.ORCID, category=LogCategory.SAVE)
    return result

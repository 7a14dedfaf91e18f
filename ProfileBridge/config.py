from __future__ import annotations

import os

# public read API; records are readable without a token
ORCID_BASE = os.environ.get("ORCID_API_BASE", "https://pub.orcid.org/v3.0")

# member API; writes need a bearer token with the /activities/update scope
ORCID_MEMBER_BASE = os.environ.get("ORCID_MEMBER_API_BASE", "https://api.orcid.org/v3.0")

# prefixes stripped from an ORCID iD before it is used in a request path
ORCID_ID_PREFIXES = ("https://orcid.org/", "http://orcid.org/", "orcid.org/")

# Aggregation limits for fetch_complete_researcher.
# Only the first N groups of each list get a detail request, in list order.
# These are fixed policy, not tuning knobs.
MAX_WORKS_PER_RESEARCHER = 20
MAX_FUNDINGS_PER_RESEARCHER = 10

# HTTP request configuration
# None means the request waits as long as the server keeps the connection open
HTTP_TIMEOUT_DEFAULT = None

# Retry policy for the shared session adapter.
# A single attempt is the contract; raising HTTP_MAX_RETRIES and listing
# status codes turns on urllib3 retries with exponential backoff.
HTTP_MAX_RETRIES = 0
HTTP_BACKOFF_INITIAL = 0.25
HTTP_RETRY_STATUS_CODES: tuple = ()

# Record vocabulary
VISIBILITY_PUBLIC = "public"
INSTITUTIONAL_URL_NAME = "institutional"
DEFAULT_WORK_TYPE = "journal-article"
IDENTIFIER_RELATIONSHIP_SELF = "self"
CONTRIBUTOR_SEQUENCE_FIRST = "first"
CONTRIBUTOR_SEQUENCE_ADDITIONAL = "additional"
CONTRIBUTOR_ROLE_AUTHOR = "author"

# label shown for projects without an end date
ONGOING_LABEL = "Ongoing"

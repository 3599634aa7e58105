"""Registry request context value object.

ONLY registry credentials - the headers sent with every metadata registry
call, built once per inbound request.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping

ADMIN_SECRET_HEADER = "x-hasura-admin-secret"

# Transport-level headers that must not be replayed against the registry
NON_FORWARDED_HEADERS = frozenset({
    "host",
    "content-length",
    "content-type",
    "connection",
    "transfer-encoding",
    "accept-encoding",
})


@dataclass(frozen=True)
class RegistryRequestContext:
    """Headers used to talk to the metadata registry on behalf of one request.

    ``admin_headers`` authenticate the gateway itself (bucket lookup,
    metadata finalize, compensation delete). ``caller_headers`` carry the
    caller's own credentials for pre-registration so the registry's
    permission rules apply to the caller.
    """

    admin_headers: Dict[str, str] = field(default_factory=dict)
    caller_headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_request_headers(
        cls,
        headers: Mapping[str, str],
        admin_secret: str
    ) -> "RegistryRequestContext":
        """Build the context from inbound request headers and the admin secret."""
        caller_headers = {
            key.lower(): value
            for key, value in headers.items()
            if key.lower() not in NON_FORWARDED_HEADERS
        }
        return cls(
            admin_headers={ADMIN_SECRET_HEADER: admin_secret},
            caller_headers=caller_headers,
        )

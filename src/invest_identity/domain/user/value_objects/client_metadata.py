"""Request provenance attached to logins and sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientMetadata:
    """User agent and network address of the calling client.

    Carried as-is; neither field has a format requirement.
    """

    user_agent: str
    client_ip: str

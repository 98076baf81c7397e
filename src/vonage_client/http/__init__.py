"""Request dispatch and authentication."""

from vonage_client.http.auth import Authentication, BasicAuth, BearerToken, NoAuth
from vonage_client.http.namespace import FORM, JSON, Namespace

__all__ = [
    "Authentication",
    "BasicAuth",
    "BearerToken",
    "FORM",
    "JSON",
    "NoAuth",
    "Namespace",
]

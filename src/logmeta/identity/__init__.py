"""Identity providers: where the project ID and environment come from.

The Google-backed provider is behind ``logmeta[google]`` and imports its
libraries lazily, so the protocol and the static provider work without them.
"""

from .base import IdentityProvider
from .google_auth import DEFAULT_SCOPES, GoogleAuthIdentityProvider
from .static import StaticIdentityProvider

__all__ = [
    "DEFAULT_SCOPES",
    "GoogleAuthIdentityProvider",
    "IdentityProvider",
    "StaticIdentityProvider",
]

"""Identity provider backed by ``google-auth``.

Project ID comes from Application Default Credentials.  The environment is
classified the same way Google's auth libraries do it: App Engine and Cloud
Functions are recognised by the variables their runtimes set, Compute Engine
by a successful ping of the metadata server.

Requires ``logmeta[google]``.
"""

from __future__ import annotations

import asyncio

from loguru import logger

from logmeta.core.env import FUNCTION_NAME, GAE_MODULE_NAME, GAE_SERVICE, EnvironmentReader, default_reader
from logmeta.core.exceptions import EnvironmentDetectionError, ProjectIdNotFoundError
from logmeta.resource.environment import EnvironmentClassification

DEFAULT_SCOPES = ["https://www.googleapis.com/auth/logging.write"]

# Seconds to wait for each metadata server ping
DEFAULT_METADATA_TIMEOUT = 3.0

# google-auth retries the ping 3 times by default; off GCE every attempt times out
DEFAULT_METADATA_RETRIES = 1


class GoogleAuthIdentityProvider:
    """Resolve identity through Application Default Credentials.

    Blocking google-auth calls run in a worker thread.  The environment
    classification does not change during a process's life, so it is probed
    once and cached.

    Args:
        scopes: OAuth scopes requested from ADC.
        env: Environment reader for the App Engine / Cloud Functions markers.
        metadata_timeout: Per-attempt timeout for the metadata server ping.
        metadata_retries: Ping attempts before concluding this is not GCE.

    An unreachable metadata server is not an error: ``ping`` reports it as
    not being on GCE.  Only failures preparing the request (mTLS
    configuration, for instance) surface as :class:`EnvironmentDetectionError`.
    """

    def __init__(
        self,
        scopes: list[str] | None = None,
        env: EnvironmentReader | None = None,
        metadata_timeout: float = DEFAULT_METADATA_TIMEOUT,
        metadata_retries: int = DEFAULT_METADATA_RETRIES,
    ):
        self.scopes = scopes or list(DEFAULT_SCOPES)
        self.env = env or default_reader()
        self.metadata_timeout = metadata_timeout
        self.metadata_retries = metadata_retries
        self._environment: EnvironmentClassification | None = None

    async def get_project_id(self) -> str:
        return await asyncio.to_thread(self._fetch_project_id)

    async def get_environment(self) -> EnvironmentClassification:
        if self._environment is None:
            self._environment = await asyncio.to_thread(self._detect_environment)
        return self._environment

    def _fetch_project_id(self) -> str:
        try:
            import google.auth
            from google.auth import exceptions
        except ImportError:
            raise ImportError("Install with: pip install logmeta[google]")

        try:
            _, project_id = google.auth.default(scopes=self.scopes)
        except exceptions.DefaultCredentialsError as e:
            raise ProjectIdNotFoundError(f"Could not load default credentials: {e}") from e

        if not project_id:
            raise ProjectIdNotFoundError(
                "Default credentials carry no project ID. Set GOOGLE_CLOUD_PROJECT or configure resource.project_id."
            )
        return project_id

    def _detect_environment(self) -> EnvironmentClassification:
        if self.env.is_set(GAE_SERVICE) or self.env.is_set(GAE_MODULE_NAME):
            return EnvironmentClassification(is_app_engine=True)
        if self.env.is_set(FUNCTION_NAME):
            return EnvironmentClassification(is_cloud_function=True)
        return EnvironmentClassification(is_compute_engine=self._on_compute_engine())

    def _on_compute_engine(self) -> bool:
        try:
            from google.auth import exceptions
            from google.auth.compute_engine import _metadata
            from google.auth.transport.requests import Request
        except ImportError:
            raise ImportError("Install with: pip install logmeta[google]")

        try:
            on_gce = _metadata.ping(Request(), timeout=self.metadata_timeout, retry_count=self.metadata_retries)
        except exceptions.GoogleAuthError as e:
            raise EnvironmentDetectionError(f"Could not prepare metadata server request: {e}") from e

        logger.debug(f"Metadata server ping: on_gce={on_gce}")
        return on_gce

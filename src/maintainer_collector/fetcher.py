"""Remote fetcher for per-project MAINTAINERS files.

Downloads ``{base}/{org}/{project}/{branch}/{filename}`` from the raw GitHub
content host. Only transport failures are reported; the HTTP status is not
inspected, so an error page surfaces later as a decode failure.
"""

from typing import Optional

import httpx

from maintainer_collector.config import DEFAULT_BRANCH, DEFAULT_FILENAME, RAW_BASE_URL
from maintainer_collector.errors import FetchError
from maintainer_collector.logging_config import get_logger

logger = get_logger(__name__)


class MaintainersFetcher:
    """Synchronous HTTP client for MAINTAINERS files.

    Example:
        >>> with MaintainersFetcher() as fetcher:
        ...     data = fetcher.fetch("docker", "cli")
    """

    def __init__(
        self,
        base_url: str = RAW_BASE_URL,
        branch: str = DEFAULT_BRANCH,
        filename: str = DEFAULT_FILENAME,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the fetcher.

        Args:
            base_url: Host serving raw repository files
            branch: Branch to read the file from
            filename: Name of the declaration file in each repository
            client: Optional preconfigured httpx client (owned by the caller)
        """
        self.base_url = base_url.rstrip("/")
        self.branch = branch
        self.filename = filename
        self._client = client
        self._owns_client = client is None

    def __enter__(self) -> "MaintainersFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=None, follow_redirects=True)
        return self._client

    def close(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def build_url(self, org: str, project: str) -> str:
        return f"{self.base_url}/{org}/{project}/{self.branch}/{self.filename}"

    def fetch(self, org: str, project: str) -> bytes:
        """Download the raw MAINTAINERS file of ``org/project``.

        Raises:
            FetchError: On any transport-level failure
        """
        url = self.build_url(org, project)
        logger.info("loading_maintainers_file", org=org, project=project, url=url)

        try:
            response = self._get_client().get(url)
        except httpx.HTTPError as e:
            raise FetchError(org, project, str(e) or type(e).__name__) from e

        logger.debug(
            "maintainers_file_downloaded",
            org=org,
            project=project,
            status=response.status_code,
            size=len(response.content),
        )
        return response.content

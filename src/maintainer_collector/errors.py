"""Custom error types for maintainer-collector.

Fetch and decode errors are recoverable: the project is skipped and the run
continues. Serialization and output write errors end the run.
"""


class MaintainerCollectorError(Exception):
    """Base exception for all maintainer-collector errors."""

    pass


class FetchError(MaintainerCollectorError):
    """Transport failure while downloading a project's MAINTAINERS file."""

    def __init__(self, org: str, project: str, reason: str):
        self.org = org
        self.project = project
        self.reason = reason
        super().__init__(f"{org}/{project}: {reason}")


class DecodeError(MaintainerCollectorError):
    """MAINTAINERS payload is not valid TOML or does not match the declaration schema."""

    pass


class SerializationError(MaintainerCollectorError):
    """Combined model could not be encoded to TOML."""

    pass


class OutputWriteError(MaintainerCollectorError):
    """Combined MAINTAINERS file could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"writing {path} failed: {reason}")

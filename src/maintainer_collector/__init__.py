"""maintainer-collector - combine per-project MAINTAINERS files.

Fetches each configured project's TOML MAINTAINERS declaration, merges
maintainers, curators, docs maintainers and people into one model, and
writes a single combined MAINTAINERS file.
"""

from maintainer_collector.aggregator import (
    collect_maintainers,
    finalize,
    get_project_org,
    merge_declaration,
    remove_duplicates,
)
from maintainer_collector.config import Settings, get_settings
from maintainer_collector.decoder import decode_declaration
from maintainer_collector.errors import (
    DecodeError,
    FetchError,
    MaintainerCollectorError,
    OutputWriteError,
    SerializationError,
)
from maintainer_collector.fetcher import MaintainersFetcher
from maintainer_collector.logging_config import configure_logging, get_logger
from maintainer_collector.models import CombinedMaintainers, MaintainersDeclaration
from maintainer_collector.serializer import assemble, serialize, write_output

__version__ = "1.0.0"

__all__ = [
    # Aggregation
    "collect_maintainers",
    "finalize",
    "get_project_org",
    "merge_declaration",
    "remove_duplicates",
    # Fetch / decode / encode
    "MaintainersFetcher",
    "decode_declaration",
    "serialize",
    "assemble",
    "write_output",
    # Models
    "CombinedMaintainers",
    "MaintainersDeclaration",
    # Configuration and logging
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Errors
    "MaintainerCollectorError",
    "FetchError",
    "DecodeError",
    "SerializationError",
    "OutputWriteError",
]

"""Aggregation of per-project declarations into one combined model.

Projects are processed strictly in configured order:

1. ``org/name`` identifiers are split; bare names use the default org.
2. The project's MAINTAINERS file is fetched and decoded. Failures are
   logged and the project is skipped.
3. The primary ``Maintainers`` group is used if declared, otherwise the
   legacy ``Core maintainers`` group. The two are never merged.
4. Nicknames are lowercased and sorted, then stored under the bare project
   name (the org prefix is dropped).
5. Docs maintainers and curators are appended as declared to the
   ``"Docs maintainers"`` and ``"Curators"`` pseudo-groups.
6. Every person is stored under its lowercased nickname; a later project
   overwrites an earlier one.

Finally both pseudo-groups are deduplicated and sorted. Their entries are not
lowercased, so ``"Tom"`` and ``"tom"`` remain distinct there.
"""

from typing import Iterable, Sequence

from maintainer_collector.decoder import decode_declaration
from maintainer_collector.errors import DecodeError, FetchError
from maintainer_collector.fetcher import MaintainersFetcher
from maintainer_collector.logging_config import get_logger
from maintainer_collector.models import (
    CURATORS_GROUP,
    DOCS_MAINTAINERS_GROUP,
    PSEUDO_GROUPS,
    CombinedMaintainers,
    MaintainersDeclaration,
)

logger = get_logger(__name__)


def get_project_org(identifier: str, default_org: str) -> tuple[str, str]:
    """Split a project identifier into (org, project).

    Example:
        >>> get_project_org("cli", "docker")
        ('docker', 'cli')
        >>> get_project_org("moby/moby", "docker")
        ('moby', 'moby')
    """
    parts = identifier.split("/", 1)
    if len(parts) == 2:
        return parts[0], parts[1]
    return default_org, identifier


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Return the distinct items of ``items``, sorted ascending."""
    seen: set[str] = set()
    uniques: list[str] = []
    for item in items:
        if item not in seen:
            uniques.append(item)
            seen.add(item)
    uniques.sort()
    return uniques


def merge_declaration(
    combined: CombinedMaintainers,
    project: str,
    declaration: MaintainersDeclaration,
) -> CombinedMaintainers:
    """Merge one project's declaration into ``combined`` (in place)."""
    organization = declaration.organization

    people: list[str] = []
    if organization.maintainers is not None:
        people = list(organization.maintainers.people)
    elif organization.core_maintainers is not None:
        people = list(organization.core_maintainers.people)

    combined.org[project] = sorted(nick.lower() for nick in people)

    if organization.docs_maintainers is not None:
        combined.org[DOCS_MAINTAINERS_GROUP].extend(organization.docs_maintainers.people)

    if organization.curators is not None:
        combined.org[CURATORS_GROUP].extend(organization.curators.people)

    for nick, person in declaration.people.items():
        combined.people[nick.lower()] = person

    return combined


def finalize(combined: CombinedMaintainers) -> CombinedMaintainers:
    """Deduplicate and sort the pseudo-groups."""
    for group in PSEUDO_GROUPS:
        combined.org[group] = remove_duplicates(combined.org[group])
    return combined


def collect_maintainers(
    projects: Sequence[str],
    fetcher: MaintainersFetcher,
    default_org: str,
) -> CombinedMaintainers:
    """Fetch, decode and merge every configured project.

    Args:
        projects: Project identifiers, processed in order
        fetcher: Source of raw MAINTAINERS files
        default_org: Organization for identifiers without an ``org/`` prefix

    Returns:
        The finalized combined model
    """
    combined = CombinedMaintainers()

    for identifier in projects:
        org, project = get_project_org(identifier, default_org)
        try:
            declaration = decode_declaration(fetcher.fetch(org, project))
        except (FetchError, DecodeError) as e:
            logger.error(
                "maintainers_file_failed",
                project=project,
                source=f"{org}/{project}",
                error=str(e),
            )
            continue

        merge_declaration(combined, project, declaration)
        logger.info(
            "maintainers_file_merged",
            org=org,
            project=project,
            maintainers=len(combined.org[project]),
            people=len(declaration.people),
        )

    return finalize(combined)

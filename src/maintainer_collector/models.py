"""Declaration and combined-model schemas.

A per-project MAINTAINERS file decodes into ``MaintainersDeclaration``:

    [Org]
        [Org.Maintainers]
            people = ["alice", "Bob"]
        [Org."Docs maintainers"]
            people = ["carol"]

    [people]
        [people.alice]
            Name = "Alice Example"
            Email = "alice@example.com"
            GitHub = "alice"

All projects are merged into a single ``CombinedMaintainers``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

ORG_KEY = "Org"
PEOPLE_KEY = "people"

MAINTAINERS_GROUP = "Maintainers"
CORE_MAINTAINERS_GROUP = "Core maintainers"
DOCS_MAINTAINERS_GROUP = "Docs maintainers"
CURATORS_GROUP = "Curators"

DECLARATION_GROUPS = (
    MAINTAINERS_GROUP,
    CORE_MAINTAINERS_GROUP,
    DOCS_MAINTAINERS_GROUP,
    CURATORS_GROUP,
)

# Pseudo-groups accumulated across every project in the combined model
PSEUDO_GROUPS = (CURATORS_GROUP, DOCS_MAINTAINERS_GROUP)

Person = dict[str, Any]


class PeopleGroup(BaseModel):
    """A group table holding a list of nicknames."""

    model_config = ConfigDict(extra="ignore")

    people: list[str] = Field(default_factory=list)


class Organization(BaseModel):
    """The ``[Org]`` table of a project declaration."""

    model_config = ConfigDict(extra="ignore")

    maintainers: Optional[PeopleGroup] = Field(default=None, alias=MAINTAINERS_GROUP)
    core_maintainers: Optional[PeopleGroup] = Field(default=None, alias=CORE_MAINTAINERS_GROUP)
    docs_maintainers: Optional[PeopleGroup] = Field(default=None, alias=DOCS_MAINTAINERS_GROUP)
    curators: Optional[PeopleGroup] = Field(default=None, alias=CURATORS_GROUP)


class MaintainersDeclaration(BaseModel):
    """One project's decoded MAINTAINERS file."""

    model_config = ConfigDict(extra="ignore")

    organization: Organization = Field(default_factory=Organization, alias=ORG_KEY)
    people: dict[str, Person] = Field(default_factory=dict, alias=PEOPLE_KEY)


def _empty_org() -> dict[str, list[str]]:
    return {name: [] for name in PSEUDO_GROUPS}


@dataclass
class CombinedMaintainers:
    """Aggregation result: group name -> nicknames, nickname -> person."""

    org: dict[str, list[str]] = field(default_factory=_empty_org)
    people: dict[str, Person] = field(default_factory=dict)

    @property
    def curators(self) -> list[str]:
        return self.org[CURATORS_GROUP]

    @property
    def docs_maintainers(self) -> list[str]:
        return self.org[DOCS_MAINTAINERS_GROUP]

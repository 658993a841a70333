"""Serialization of the combined model and assembly of the output file.

The body is rendered with tomlkit; every nesting level is indented by four
spaces and sub-tables are emitted in sorted key order:

    [Org]

        [Org.Curators]
            people = ["alice"]

    [people]

        [people.alice]
            Name = "Alice Example"
"""

import os
from pathlib import Path
from typing import Union

import tomlkit
from tomlkit.items import Table

from maintainer_collector.config import DEFAULT_OUTPUT_MODE
from maintainer_collector.errors import OutputWriteError, SerializationError
from maintainer_collector.logging_config import get_logger
from maintainer_collector.models import ORG_KEY, PEOPLE_KEY, CombinedMaintainers, Person

logger = get_logger(__name__)

INDENT = "    "


def _person_table(person: Person) -> Table:
    table = tomlkit.table(is_super_table=False)
    for key, value in person.items():
        table.add(key, value)
    return table


def _apply_indent(table: Table, depth: int) -> None:
    """Indent the children of a depth-``depth`` table."""
    for key, item in table.value.body:
        if key is None:
            continue
        if isinstance(item, Table):
            item.trivia.indent = "\n" + INDENT * depth
            _apply_indent(item, depth + 1)
        else:
            item.trivia.indent = INDENT * depth


def serialize(combined: CombinedMaintainers) -> str:
    """Encode the combined model as TOML.

    Raises:
        SerializationError: If a person record holds a value TOML cannot represent
    """
    try:
        org_table = tomlkit.table(is_super_table=False)
        for name in sorted(combined.org):
            group = tomlkit.table(is_super_table=False)
            group.add(PEOPLE_KEY, list(combined.org[name]))
            org_table.add(name, group)

        people_table = tomlkit.table(is_super_table=False)
        for nick in sorted(combined.people):
            people_table.add(nick, _person_table(combined.people[nick]))

        document = tomlkit.document()
        document.add(ORG_KEY, org_table)
        document.add(PEOPLE_KEY, people_table)

        org_table.trivia.indent = ""
        people_table.trivia.indent = "\n"
        _apply_indent(org_table, 1)
        _apply_indent(people_table, 1)

        return tomlkit.dumps(document)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"TOML encoding error: {e}") from e


def assemble(header: str, rules: str, roles: str, body: str) -> bytes:
    """Concatenate the output sections in order."""
    return (header + rules + roles + body).encode("utf-8")


def write_output(
    path: Union[str, Path],
    data: bytes,
    mode: int = DEFAULT_OUTPUT_MODE,
) -> Path:
    """Write the combined file and set its permission bits.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_bytes(data)
        os.chmod(path, mode)
    except OSError as e:
        raise OutputWriteError(str(path), str(e)) from e

    logger.debug("output_written", path=str(path), bytes=len(data), mode=oct(mode))
    return path

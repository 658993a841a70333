"""Declaration decoder.

Parses a raw MAINTAINERS payload (TOML) into a ``MaintainersDeclaration``.
Table names are matched case-insensitively, so ``[Org.maintainers]`` and
``[Org.Maintainers]`` are equivalent; an exact-case key takes precedence.
"""

import tomllib
from typing import Any, Iterable

from pydantic import ValidationError

from maintainer_collector.errors import DecodeError
from maintainer_collector.models import (
    DECLARATION_GROUPS,
    ORG_KEY,
    PEOPLE_KEY,
    MaintainersDeclaration,
)


def _fold_keys(table: dict[str, Any], names: Iterable[str]) -> dict[str, Any]:
    """Rename keys of ``table`` that match one of ``names`` ignoring case."""
    canonical = {name.lower(): name for name in names}
    folded: dict[str, Any] = {}
    for key, value in table.items():
        name = canonical.get(key.lower())
        if name is None:
            folded[key] = value
        elif key == name or name not in folded:
            folded[name] = value
    return folded


def decode_declaration(data: bytes) -> MaintainersDeclaration:
    """Decode a MAINTAINERS payload.

    Args:
        data: Raw file contents

    Returns:
        The validated declaration

    Raises:
        DecodeError: If the payload is not UTF-8 TOML or fails validation
    """
    try:
        document = tomllib.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeError(f"MAINTAINERS file is not valid UTF-8: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise DecodeError(f"parsing MAINTAINERS file failed: {e}") from e

    document = _fold_keys(document, (ORG_KEY, PEOPLE_KEY))
    org = document.get(ORG_KEY)
    if isinstance(org, dict):
        org = _fold_keys(org, DECLARATION_GROUPS)
        for group in DECLARATION_GROUPS:
            if isinstance(org.get(group), dict):
                org[group] = _fold_keys(org[group], (PEOPLE_KEY,))
        document[ORG_KEY] = org

    try:
        return MaintainersDeclaration.model_validate(document)
    except ValidationError as e:
        raise DecodeError(f"invalid MAINTAINERS declaration: {e}") from e

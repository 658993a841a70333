"""Pytest fixtures for maintainer-collector tests."""

import logging
import os

import pytest
import structlog
from typer.testing import CliRunner

from maintainer_collector.config import get_settings


@pytest.fixture(autouse=True)
def clean_env():
    """Remove MAINTAINERS_* variables and reset cached settings and logging."""
    original = {k: v for k, v in os.environ.items() if k.upper().startswith("MAINTAINERS_")}
    for key in original:
        del os.environ[key]
    root_handlers = list(logging.getLogger().handlers)
    get_settings.cache_clear()

    yield

    for key in [k for k in os.environ if k.upper().startswith("MAINTAINERS_")]:
        del os.environ[key]
    os.environ.update(original)
    get_settings.cache_clear()
    logging.getLogger().handlers[:] = root_handlers
    structlog.reset_defaults()


@pytest.fixture
def cli_runner():
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def foo_maintainers() -> bytes:
    """Declaration with primary maintainers, curators and docs maintainers."""
    return b"""
[Org]
    [Org.Maintainers]
        people = ["Zed", "amy"]

    [Org.Curators]
        people = ["Tom"]

    [Org."Docs maintainers"]
        people = ["Dora"]

[people]

    [people.Zed]
    Name = "Zed Zulu"
    Email = "zed@example.com"
    GitHub = "Zed"

    [people.amy]
    Name = "Amy Adams"
    Email = "amy@example.com"
    GitHub = "amy"

    [people.tom]
    Name = "Tom Tango"
    Email = "tom@example.com"
    GitHub = "tom"

    [people.dora]
    Name = "Dora Delta"
    Email = "dora@example.com"
    GitHub = "dora"
"""


@pytest.fixture
def legacy_maintainers() -> bytes:
    """Declaration using the legacy "Core maintainers" group."""
    return b"""
[Org]
    [Org."Core maintainers"]
        people = ["bob", "Carl"]

    [Org.Curators]
        people = ["Tom", "Sam"]

[people]

    [people.bob]
    Name = "Bob Bravo"
    Email = "bob@example.com"
    GitHub = "bob"

    [people.carl]
    Name = "Carl Charlie"
    Email = "carl@example.com"
    GitHub = "carl"

    [people.sam]
    Name = "Sam Sierra"
    Email = "sam@example.com"
    GitHub = "sam"

    [people.amy]
    Name = "Amy Adams-Bravo"
    Email = "amy@bravo.example.com"
    GitHub = "amy"
"""

"""Tests for decoding MAINTAINERS payloads."""

import pytest

from maintainer_collector.decoder import decode_declaration
from maintainer_collector.errors import DecodeError

pytestmark = pytest.mark.unit


class TestDecodeDeclaration:
    """Tests for decode_declaration."""

    def test_decodes_all_groups(self, foo_maintainers):
        declaration = decode_declaration(foo_maintainers)
        org = declaration.organization

        assert org.maintainers.people == ["Zed", "amy"]
        assert org.core_maintainers is None
        assert org.curators.people == ["Tom"]
        assert org.docs_maintainers.people == ["Dora"]

    def test_decodes_legacy_group(self, legacy_maintainers):
        org = decode_declaration(legacy_maintainers).organization

        assert org.maintainers is None
        assert org.core_maintainers.people == ["bob", "Carl"]

    def test_people_passed_through(self, foo_maintainers):
        people = decode_declaration(foo_maintainers).people

        assert set(people) == {"Zed", "amy", "tom", "dora"}
        assert people["Zed"] == {
            "Name": "Zed Zulu",
            "Email": "zed@example.com",
            "GitHub": "Zed",
        }

    def test_empty_document(self):
        declaration = decode_declaration(b"")

        assert declaration.organization.maintainers is None
        assert declaration.people == {}

    def test_group_without_people(self):
        declaration = decode_declaration(b'[Org.Maintainers]\nsince = "2016"\n')

        assert declaration.organization.maintainers is not None
        assert declaration.organization.maintainers.people == []

    def test_case_insensitive_table_names(self):
        payload = b"""
[org]
    [org.maintainers]
        people = ["alice"]
    [org."docs MAINTAINERS"]
        People = ["dora"]

[People.alice]
Name = "Alice"
"""
        declaration = decode_declaration(payload)

        assert declaration.organization.maintainers.people == ["alice"]
        assert declaration.organization.docs_maintainers.people == ["dora"]
        assert declaration.people == {"alice": {"Name": "Alice"}}

    def test_exact_case_key_preferred(self):
        payload = b"""
[Org.maintainers]
people = ["lower"]

[Org.Maintainers]
people = ["exact"]
"""
        declaration = decode_declaration(payload)

        assert declaration.organization.maintainers.people == ["exact"]

    def test_unknown_keys_ignored(self):
        payload = b"""
[Rules]
text = "ignored"

[Org.Maintainers]
people = ["alice"]

[Org.Reviewers]
people = ["bob"]
"""
        declaration = decode_declaration(payload)

        assert declaration.organization.maintainers.people == ["alice"]

    def test_invalid_toml_raises(self):
        with pytest.raises(DecodeError, match="parsing MAINTAINERS file failed"):
            decode_declaration(b"404: Not Found")

    def test_invalid_utf8_raises(self):
        with pytest.raises(DecodeError, match="UTF-8"):
            decode_declaration(b"\xff\xfe[Org]")

    def test_wrong_people_type_raises(self):
        with pytest.raises(DecodeError, match="invalid MAINTAINERS declaration"):
            decode_declaration(b'[Org.Maintainers]\npeople = "alice"\n')

    def test_person_must_be_table(self):
        with pytest.raises(DecodeError):
            decode_declaration(b'[people]\nalice = "Alice"\n')

    def test_python_field_names_not_accepted(self):
        """Only the TOML table names select groups, not the model attribute names."""
        payload = b"""
[organization.maintainers]
people = ["x"]

[Org.core_maintainers]
people = ["y"]

[Org.docs_maintainers]
people = ["z"]
"""
        declaration = decode_declaration(payload)

        assert declaration.organization.maintainers is None
        assert declaration.organization.core_maintainers is None
        assert declaration.organization.docs_maintainers is None

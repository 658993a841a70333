"""Tests for the exception hierarchy."""

import pytest

from maintainer_collector.errors import (
    DecodeError,
    FetchError,
    MaintainerCollectorError,
    OutputWriteError,
    SerializationError,
)

pytestmark = pytest.mark.unit


class TestHierarchy:
    """All errors derive from MaintainerCollectorError."""

    @pytest.mark.parametrize(
        "error_class",
        [FetchError, DecodeError, SerializationError, OutputWriteError],
    )
    def test_inherits_from_base(self, error_class):
        assert issubclass(error_class, MaintainerCollectorError)

    def test_base_is_exception(self):
        assert issubclass(MaintainerCollectorError, Exception)


class TestFetchError:
    """Tests for FetchError."""

    def test_attributes(self):
        error = FetchError("bar", "baz", "connection refused")

        assert error.org == "bar"
        assert error.project == "baz"
        assert error.reason == "connection refused"

    def test_message_has_org_project_context(self):
        assert str(FetchError("bar", "baz", "timed out")) == "bar/baz: timed out"


class TestOutputWriteError:
    """Tests for OutputWriteError."""

    def test_attributes_and_message(self):
        error = OutputWriteError("MAINTAINERS", "Permission denied")

        assert error.path == "MAINTAINERS"
        assert error.reason == "Permission denied"
        assert str(error) == "writing MAINTAINERS failed: Permission denied"

    def test_can_catch_as_base(self):
        with pytest.raises(MaintainerCollectorError):
            raise OutputWriteError("MAINTAINERS", "disk full")

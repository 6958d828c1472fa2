"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_scan_context context manager
- get_scan_id helper
- Context cleanup and nesting
"""

import pytest
import structlog

from infrastructure.logging.context import bind_scan_context, get_scan_id


@pytest.fixture(autouse=True)
def clear_contextvars():
    """Ensure each test starts and ends with an empty logging context."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.mark.unit
class TestBindScanContext:
    """Test suite for bind_scan_context."""

    def test_binds_file_and_scan_id(self):
        with bind_scan_context(file="src/app.js", scan_id="scan-1"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["file"] == "src/app.js"
            assert ctx["scan_id"] == "scan-1"

    def test_generates_scan_id(self):
        """A scan ID is generated when none is bound or given."""
        with bind_scan_context(file="src/app.js"):
            assert get_scan_id()

    def test_extra_context(self):
        with bind_scan_context(file="a.js", method="t"):
            assert structlog.contextvars.get_contextvars()["method"] == "t"

    def test_clears_context_on_exit(self):
        with bind_scan_context(file="src/app.js", scan_id="scan-1"):
            pass

        ctx = structlog.contextvars.get_contextvars()
        assert "file" not in ctx
        assert "scan_id" not in ctx

    def test_clears_context_on_exception(self):
        with pytest.raises(ValueError):
            with bind_scan_context(file="src/app.js"):
                raise ValueError("boom")

        assert "file" not in structlog.contextvars.get_contextvars()

    def test_nested_blocks_share_scan_id_and_restore_file(self):
        """Inner blocks reuse the scan ID and give the outer file back."""
        with bind_scan_context(file="outer.js", scan_id="scan-1"):
            with bind_scan_context(file="inner.js"):
                ctx = structlog.contextvars.get_contextvars()
                assert ctx["file"] == "inner.js"
                assert ctx["scan_id"] == "scan-1"

            ctx = structlog.contextvars.get_contextvars()
            assert ctx["file"] == "outer.js"
            assert ctx["scan_id"] == "scan-1"


@pytest.mark.unit
class TestGetScanId:
    """Test suite for get_scan_id."""

    def test_returns_none_outside_scan(self):
        assert get_scan_id() is None

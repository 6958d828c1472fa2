"""Feature-level fixtures for extraction tests."""

import json

import pytest

from tests.factories.extraction import make_call, make_options


@pytest.fixture
def options():
    """Fresh options resolver with the standard defaults."""
    return make_options()


@pytest.fixture
def call(options):
    """Build TranslateCall instances bound to the ``options`` fixture."""

    def _call(*values, **kwargs):
        kwargs.setdefault("settings", options)
        return make_call(*values, **kwargs)

    return _call


@pytest.fixture
def project_dir(tmp_path):
    """Create a project directory with package.json and .i18nrc.

    package.json sets inferredKeyFormat and basePath; .i18nrc overrides
    inferredKeyFormat and adds maxKeyLength.
    """
    package = {
        "name": "sample-app",
        "i18n": {
            "inferredKeyFormat": "underscored",
            "basePath": "src",
        },
    }
    (tmp_path / "package.json").write_text(json.dumps(package), encoding="utf-8")

    rc = {"inferredKeyFormat": "literal", "maxKeyLength": 80}
    (tmp_path / ".i18nrc").write_text(json.dumps(rc), encoding="utf-8")

    return tmp_path

"""
Tests for remote document retrieval (requests is mocked, no network).
"""

import logging
from unittest.mock import Mock

import pytest
import requests

from docscore import source_service
from docscore.source_service import (
    SourceFetchError,
    UnsupportedSourceError,
    fetch_document,
    fetch_from_bitbucket,
    fetch_from_github,
)
from docscore.types import SourceConfig


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get with a Mock returning a successful response."""
    response = Mock()
    response.text = "## 1. Introduction\nhello"
    response.raise_for_status = Mock()
    get = Mock(return_value=response)
    monkeypatch.setattr(source_service.requests, "get", get)
    return get


class TestGitHub:
    """GitHub contents API"""

    def test_requests_raw_contents(self, fake_get):
        text = fetch_from_github("octo", "docs", "docs/overview.md", "s3cr3t")

        assert text == "## 1. Introduction\nhello"
        args, kwargs = fake_get.call_args
        assert args[0] == "https://api.github.com/repos/octo/docs/contents/docs/overview.md"
        assert kwargs["headers"]["Authorization"] == "token s3cr3t"
        assert kwargs["headers"]["Accept"] == "application/vnd.github.v3.raw"
        assert kwargs["params"] is None
        assert kwargs["timeout"] == 30

    def test_missing_token_sends_no_authorization(self, fake_get, caplog):
        with caplog.at_level(logging.WARNING, logger="docscore.source_service"):
            fetch_from_github("octo", "docs", "README.md", None)

        assert "Authorization" not in fake_get.call_args.kwargs["headers"]
        assert "octo/docs" in caplog.text

    def test_ref_is_passed_as_query_param(self, fake_get):
        fetch_from_github("octo", "docs", "README.md", "t", ref="develop")

        assert fake_get.call_args.kwargs["params"] == {"ref": "develop"}

    def test_http_error_is_wrapped(self, fake_get):
        fake_get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error: Not Found")

        with pytest.raises(SourceFetchError, match="Error fetching file from GitHub: 404"):
            fetch_from_github("octo", "docs", "missing.md", "t")

    def test_network_error_is_wrapped(self, fake_get):
        fake_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(SourceFetchError, match="connection refused"):
            fetch_from_github("octo", "docs", "README.md", "t")


class TestBitbucket:
    """Bitbucket src endpoint"""

    def test_url_encodes_path_and_uses_basic_auth(self, fake_get):
        fetch_from_bitbucket("team", "docs", "docs/overview.md", "alice", "app-pass")

        args, kwargs = fake_get.call_args
        assert args[0] == "https://api.bitbucket.org/2.0/repositories/team/docs/src/master/docs%2Foverview.md"
        assert kwargs["auth"] == ("alice", "app-pass")

    def test_custom_branch(self, fake_get):
        fetch_from_bitbucket("team", "docs", "README.md", "alice", "p", branch="main")

        assert "/src/main/README.md" in fake_get.call_args.args[0]

    def test_http_error_is_wrapped(self, fake_get):
        fake_get.return_value.raise_for_status.side_effect = requests.HTTPError("401 Client Error")

        with pytest.raises(SourceFetchError, match="Error fetching file from Bitbucket: 401"):
            fetch_from_bitbucket("team", "docs", "README.md", "alice", "bad")


class TestFetchDocument:
    """Dispatch on the configured source"""

    def test_dispatches_to_github(self, fake_get):
        cfg = SourceConfig(source="GitHub", owner="o", repo="r", file_path="f.md", token="t", branch="v1")

        assert fetch_document(cfg) == "## 1. Introduction\nhello"
        assert fake_get.call_args.args[0].startswith("https://api.github.com/")
        assert fake_get.call_args.kwargs["params"] == {"ref": "v1"}

    def test_dispatches_to_bitbucket(self, fake_get):
        cfg = SourceConfig(source="bitbucket", owner="o", repo="r", file_path="f.md", token="t", username="u", timeout=5)

        fetch_document(cfg)

        assert "/src/master/f.md" in fake_get.call_args.args[0]
        assert fake_get.call_args.kwargs["timeout"] == 5

    def test_bitbucket_requires_username(self, fake_get):
        cfg = SourceConfig(source="bitbucket", owner="o", repo="r", file_path="f.md", token="t")

        with pytest.raises(SourceFetchError, match="Username is required for Bitbucket"):
            fetch_document(cfg)
        fake_get.assert_not_called()

    def test_unsupported_source(self, fake_get):
        cfg = SourceConfig(source="gitlab", owner="o", repo="r", file_path="f.md")

        with pytest.raises(UnsupportedSourceError, match="Unsupported source"):
            fetch_document(cfg)
        fake_get.assert_not_called()

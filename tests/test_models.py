"""Tests for the record and configuration models."""

from __future__ import annotations

import pytest

from revdeps.models import DependencyRecord, FetchConfiguration, FilterOptions, Provider


class TestDependencyRecord:
    def test_defaults(self):
        record = DependencyRecord(name="pkg")
        assert record.version == "unknown"
        assert record.downloads is None

    def test_to_dict_omits_absent_fields(self):
        record = DependencyRecord(name="pkg", version="1.0.0", homepage="https://pkg.dev")
        assert record.to_dict() == {
            "name": "pkg",
            "version": "1.0.0",
            "homepage": "https://pkg.dev",
        }

    def test_to_dict_keeps_zero_downloads(self):
        assert DependencyRecord(name="pkg", downloads=0).to_dict()["downloads"] == 0

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="name"):
            DependencyRecord(name="")

    def test_empty_version_rejected(self):
        with pytest.raises(ValueError, match="version"):
            DependencyRecord(name="pkg", version="")

    def test_negative_downloads_rejected(self):
        with pytest.raises(ValueError):
            DependencyRecord(name="pkg", downloads=-1)


class TestFetchConfiguration:
    def test_defaults(self):
        config = FetchConfiguration()
        assert config.provider is Provider.ECOSYSTEMS
        assert config.credential is None
        assert config.enable_fallback is True

    def test_provider_string_coerced(self):
        assert FetchConfiguration(provider="librariesio").provider is Provider.LIBRARIESIO

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            FetchConfiguration(provider="npmjs")

    def test_empty_credential_is_absent(self):
        assert FetchConfiguration(credential="").credential is None

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError, match="timeout"):
            FetchConfiguration(timeout=0)

    def test_display_names(self):
        assert Provider.ECOSYSTEMS.display_name == "ecosyste.ms"
        assert Provider.LIBRARIESIO.display_name == "Libraries.io"


class TestFilterOptions:
    def test_invalid_sort_rejected(self):
        with pytest.raises(ValueError, match="sort"):
            FilterOptions(sort="stars")

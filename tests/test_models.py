"""Tests for get_llms.models."""

import pytest

from get_llms.models import FallbackStrategy, FetchResult, PackageMetadata, Repository


class TestFallbackStrategy:
    @pytest.mark.parametrize("value", ["none", "readme", "empty", "skip"])
    def test_known_values(self, value):
        assert FallbackStrategy.coerce(value) == value

    def test_case_and_whitespace(self):
        assert FallbackStrategy.coerce(" README ") is FallbackStrategy.README

    @pytest.mark.parametrize("value", ["bogus", "", None])
    def test_unknown_means_none(self, value):
        assert FallbackStrategy.coerce(value) is FallbackStrategy.NONE

    def test_passthrough(self):
        assert FallbackStrategy.coerce(FallbackStrategy.SKIP) is FallbackStrategy.SKIP


class TestFetchResult:
    def test_real_hit(self):
        result = FetchResult(location="https://x.dev/llms.txt", content="# X")
        assert not result.is_fallback
        assert result.fallback_type is None

    def test_fallback_requires_type(self):
        with pytest.raises(ValueError):
            FetchResult(location="fallback:empty", content="x", is_fallback=True)

    def test_fallback_requires_content(self):
        with pytest.raises(ValueError):
            FetchResult(
                location="fallback:empty",
                content="",
                is_fallback=True,
                fallback_type="empty",
            )

    def test_type_without_fallback_rejected(self):
        with pytest.raises(ValueError):
            FetchResult(location="u", content="x", fallback_type="readme")

    def test_immutable(self):
        result = FetchResult(location="u", content="x")
        with pytest.raises(AttributeError):
            result.content = "y"


class TestPackageMetadata:
    def test_repository_object(self):
        meta = PackageMetadata.model_validate(
            {"name": "zod", "repository": {"type": "git", "url": "https://github.com/c/zod"}}
        )
        assert isinstance(meta.repository, Repository)
        assert meta.repository_url == "https://github.com/c/zod"

    def test_repository_string(self):
        meta = PackageMetadata(name="x", repository="git+https://github.com/o/r.git")
        assert meta.repository_url == "git+https://github.com/o/r.git"

    @pytest.mark.parametrize("shorthand", ["o/r", "github:o/r"])
    def test_repository_shorthand(self, shorthand):
        meta = PackageMetadata(name="x", repository=shorthand)
        assert meta.repository_url == "https://github.com/o/r"

    def test_no_repository(self):
        assert PackageMetadata(name="x").repository_url == ""

    def test_extra_fields_ignored(self):
        meta = PackageMetadata.model_validate(
            {"name": "x", "version": "1.0.0", "dist": {"tarball": "t"}}
        )
        assert meta.name == "x"
        assert meta.homepage is None

    def test_repository_object_extra_keys_ignored(self):
        meta = PackageMetadata.model_validate(
            {"name": "x", "repository": {"type": "git", "url": "o/r", "directory": "p"}}
        )
        assert meta.repository == Repository(url="o/r")

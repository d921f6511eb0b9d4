"""
Unit tests for contents location parsing.

The location string is the only required configuration, so every shape
it can take is pinned down here.
"""

import pytest

from spap.core.errors import ConfigurationError
from spap.core.location import ContentsLocation, parse_contents_location


class TestS3Url:
    """Tests for the s3://bucket/prefix form."""

    def test_bucket_and_prefix(self):
        """The first segment is the bucket, the rest is the prefix."""
        assert parse_contents_location("s3://my-bucket/site") == ContentsLocation("my-bucket", "site")

    def test_nested_prefix_is_rejoined(self):
        location = parse_contents_location("s3://my-bucket/site/v2/build")
        assert location.bucket == "my-bucket"
        assert location.prefix == "site/v2/build"

    def test_bucket_only_has_empty_prefix(self):
        location = parse_contents_location("s3://spa-hosting-contents")
        assert location.bucket == "spa-hosting-contents"
        assert location.prefix == ""

    def test_trailing_slash_kept_in_prefix(self):
        """A trailing slash is harmless because keys collapse repeated slashes."""
        location = parse_contents_location("s3://my-bucket/site/")
        assert location.prefix == "site/"


class TestS3Arn:
    """Tests for the arn:aws:s3:::bucket/prefix form."""

    def test_bucket_and_prefix(self):
        location = parse_contents_location("arn:aws:s3:::my-bucket/site/v1")
        assert location == ContentsLocation("my-bucket", "site/v1")

    def test_bucket_only(self):
        location = parse_contents_location("arn:aws:s3:::spa-hosting-contents")
        assert location.bucket == "spa-hosting-contents"
        assert location.prefix == ""

    def test_truncated_arn_is_rejected(self):
        """An ARN without all of its fields cannot be parsed."""
        with pytest.raises(ConfigurationError, match="Malformed"):
            parse_contents_location("arn:aws:s3:bucket")


class TestInvalidLocation:
    """Anything that is neither an ARN nor an S3 URL fails at startup."""

    @pytest.mark.parametrize("value", [
        "",
        "my-bucket/site",
        "https://my-bucket.s3.amazonaws.com/site",
        "arn:aws:dynamodb:us-east-1:123456789012:table/site",
    ])
    def test_unknown_format_raises(self, value):
        with pytest.raises(ConfigurationError):
            parse_contents_location(value)

    def test_empty_bucket_raises(self):
        with pytest.raises(ConfigurationError, match="no bucket"):
            parse_contents_location("s3:///site")


def test_location_is_immutable():
    """Locations are shared across requests and must not change."""
    location = ContentsLocation("my-bucket", "site")
    with pytest.raises(AttributeError):
        location.bucket = "other"  # type: ignore[misc]


def test_display_is_an_s3_url():
    assert ContentsLocation("my-bucket", "site").display == "s3://my-bucket/site"
    assert parse_contents_location("arn:aws:s3:::my-bucket/site").display == "s3://my-bucket/site"

"""
Contents location parsing.

The publisher is pointed at its contents with a single string, either an
S3 ARN (arn:aws:s3:::bucket/prefix) or an S3 URL (s3://bucket/prefix).
It is parsed once at startup into a bucket and a key prefix.
"""

import logging
from dataclasses import dataclass

from botocore.utils import ArnParser, InvalidArnException

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ARN_PREFIX = "arn:aws:s3:"
URL_SCHEME = "s3://"


@dataclass(frozen=True)
class ContentsLocation:
    """Bucket and key prefix where the SPA build lives."""
    bucket: str
    prefix: str = ""

    @property
    def display(self) -> str:
        return f"{URL_SCHEME}{self.bucket}/{self.prefix}"


def parse_contents_location(value: str) -> ContentsLocation:
    """
    Parse an S3 ARN or S3 URL into a ContentsLocation.

    Raises ConfigurationError for anything else, including an empty
    string. The bucket is the first path segment and the prefix is the
    remainder, which may be empty.
    """
    logger.info("Contents location", extra={"contents_location": value})

    if value.startswith(ARN_PREFIX):
        try:
            arn = ArnParser().parse_arn(value)
        except InvalidArnException as e:
            logger.error(
                "Malformed contents location ARN",
                extra={"contents_location": value, "error": str(e)}
            )
            raise ConfigurationError(f"Malformed contents location ARN: {value}") from e
        segments = arn["resource"].split("/")

    elif value.startswith(URL_SCHEME):
        segments = value[len(URL_SCHEME):].split("/")

    else:
        logger.error(
            "Unknown contents location format",
            extra={"contents_location": value}
        )
        raise ConfigurationError(f"Missing contents location: {value!r}")

    bucket, *rest = segments
    if not bucket:
        raise ConfigurationError(f"Contents location has no bucket: {value}")

    return ContentsLocation(bucket=bucket, prefix="/".join(rest))

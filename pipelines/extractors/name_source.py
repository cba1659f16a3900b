"""
Name Source Extractor

Fetches the raw name list from the configured source endpoint.

The source answers a GET with a JSON array of records, each carrying a
NAME field:

    [{"NAME": "MARY"}, {"NAME": "PATRICIA"}, ...]
"""

from typing import Any

from core.errors import SourceUnavailable
from core.http import send_request
from core.settings import Settings
from pipelines.extractors.base import BaseExtractor


NAME_FIELD = "NAME"


class NameSourceExtractor(BaseExtractor):
    """
    Extractor for the raw name list.

    The Authorization header value is sent exactly as configured.
    """

    def __init__(self, settings: Settings):
        super().__init__("name_source")
        self.settings = settings

    def _get_headers(self) -> dict:
        return {"Authorization": self.settings.source_auth.get_secret_value()}

    def _get_params(self) -> dict:
        return {
            "archivo": self.settings.source_file,
            "extension": self.settings.source_extension,
        }

    def extract(self, **kwargs: Any) -> list[str]:
        """
        Fetch and parse the raw name list.

        Returns:
            Raw names in the order the source returned them

        Raises:
            SourceUnavailable: On transport errors, non-2xx responses,
                malformed JSON, or records without a NAME field
        """
        if not self.settings.source_url:
            raise SourceUnavailable("SOURCE_URL is not configured")

        self.log.debug("names_fetch_start", url=self.settings.source_url)

        response = send_request(
            "GET",
            self.settings.source_url,
            SourceUnavailable,
            timeout=self.settings.http_timeout,
            params=self._get_params(),
            headers=self._get_headers(),
        )

        try:
            payload = response.json()
        except ValueError as e:
            raise SourceUnavailable(
                f"Name source returned unparsable content: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        names = parse_names(payload)
        self.log.info("names_fetched", count=len(names))
        return names


def parse_names(payload: Any) -> list[str]:
    """
    Extract the NAME field of every record in a source payload.

    Non-string scalar values are converted with str(). A record that is not
    an object, or whose NAME is absent or null, fails the whole payload.

    Examples:
        >>> parse_names([{"NAME": "MARY"}, {"NAME": " ann "}])
        ['MARY', ' ann ']
    """
    if not isinstance(payload, list):
        raise SourceUnavailable(
            f"Name source payload must be a JSON array, got {type(payload).__name__}"
        )

    names = []
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise SourceUnavailable(
                f"Name record {index} must be a JSON object, got {type(record).__name__}"
            )
        value = record.get(NAME_FIELD)
        if value is None:
            raise SourceUnavailable(f"Name record {index} has no {NAME_FIELD} field")
        names.append(value if isinstance(value, str) else str(value))
    return names

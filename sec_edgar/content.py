"""Extract filing metadata from the content of a browse-edgar feed entry."""

import xml.etree.ElementTree as ET

from sec_edgar.errors import FilingContentNotFoundError, FilingContentValueNotFoundError, ParseError
from sec_edgar.models import FilingContentRecord, FilingEntry

CONTENT_FIELDS = (
    "accession-number",
    "act",
    "file-number",
    "filing-date",
    "filing-type",
    "film-number",
    "form-name",
    "size",
)

_WRAPPER_TAG = "filing-content"


def strip_href_lines(payload: str) -> str:
    """
    Drop every line of the payload that mentions ``href``.

    EDGAR's link elements (``filing-href``, ``xbrl_href``, ...) carry raw
    query strings that do not survive strict XML decoding.
    """
    return "\n".join(line for line in payload.split("\n") if "href" not in line)


class FilingContentParser:
    """Decodes the fixed eight-field schema EDGAR embeds in each entry."""

    def extract(self, entry: FilingEntry | str | None) -> FilingContentRecord:
        """
        Extract the filing record from one feed entry.

        Args:
            entry: A FilingEntry, or the raw content payload of one

        Returns:
            FilingContentRecord with every value kept as a string

        Raises:
            FilingContentNotFoundError: If the entry has no content
            ParseError: If the remaining lines are not well-formed XML
            FilingContentValueNotFoundError: If one of the fields is missing
        """
        payload = entry.content if isinstance(entry, FilingEntry) else entry
        if payload is None:
            raise FilingContentNotFoundError("Feed entry has no content")

        wrapped = f"<{_WRAPPER_TAG}>{strip_href_lines(payload)}</{_WRAPPER_TAG}>"
        try:
            root = ET.fromstring(wrapped)
        except ET.ParseError as e:
            raise ParseError(f"Filing content is not well-formed XML: {e}") from e

        values = {}
        for field in CONTENT_FIELDS:
            element = root.find(field)
            if element is None:
                raise FilingContentValueNotFoundError(field)
            values[field] = (element.text or "").strip()

        return FilingContentRecord.model_validate(values)


def extract_filing_content(entry: FilingEntry | str | None) -> FilingContentRecord:
    """Shortcut for FilingContentParser().extract(entry)."""
    return FilingContentParser().extract(entry)

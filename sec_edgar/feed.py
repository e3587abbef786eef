"""Fetch and decode browse-edgar Atom feeds."""

import copy
import logging
import xml.etree.ElementTree as ET

import httpx

from sec_edgar.config import EdgarConfig
from sec_edgar.errors import ParseError
from sec_edgar.models import Feed, FilingEntry
from sec_edgar.transport import edgar_get

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
NAMESPACES = {"atom": ATOM_NS}


def _local_name(tag: object) -> object:
    # Comments and processing instructions use callables as tags
    if isinstance(tag, str):
        return tag.rsplit("}", 1)[-1]
    return tag


def _text(element: ET.Element, path: str) -> str | None:
    found = element.find(path, NAMESPACES)
    if found is None or found.text is None:
        return None
    return found.text.strip()


def _content_markup(entry: ET.Element) -> str | None:
    """
    Return the inner markup of an entry's <content>, without namespaces.

    EDGAR puts one child element per line, and that layout is preserved
    because each child is serialized together with its trailing whitespace.
    """
    content = entry.find("atom:content", NAMESPACES)
    if content is None:
        return None

    content = copy.deepcopy(content)
    for node in content.iter():
        node.tag = _local_name(node.tag)

    children = "".join(ET.tostring(child, encoding="unicode") for child in content)
    return (content.text or "") + children


def _parse_entry(entry: ET.Element) -> FilingEntry:
    link = entry.find("atom:link", NAMESPACES)
    category = entry.find("atom:category", NAMESPACES)
    return FilingEntry(
        id=_text(entry, "atom:id"),
        title=_text(entry, "atom:title"),
        updated=_text(entry, "atom:updated"),
        link=link.get("href") if link is not None else None,
        category=category.get("term") if category is not None else None,
        summary=_text(entry, "atom:summary"),
        content=_content_markup(entry),
    )


def _company_info(root: ET.Element) -> dict[str, str]:
    info = root.find("atom:company-info", NAMESPACES)
    if info is None:
        return {}

    values = {}
    for child in info:
        # Nested blocks such as <addresses> are skipped
        if len(child) == 0 and child.text and child.text.strip():
            values[_local_name(child.tag)] = child.text.strip()
    return values


def parse_feed(document: str | bytes) -> Feed:
    """
    Decode an Atom 1.0 document.

    Args:
        document: Raw feed; pass bytes to honor the declared encoding

    Returns:
        Feed with its entries in document order

    Raises:
        ParseError: If the document is not well-formed Atom
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise ParseError(f"Feed is not well-formed XML: {e}") from e

    if root.tag != f"{{{ATOM_NS}}}feed":
        raise ParseError(f"Expected an Atom <feed> element, got <{_local_name(root.tag)}>")

    return Feed(
        title=_text(root, "atom:title"),
        updated=_text(root, "atom:updated"),
        company_info=_company_info(root),
        entries=[_parse_entry(entry) for entry in root.findall("atom:entry", NAMESPACES)],
    )


class FeedClient:
    """Retrieves browse-edgar Atom feeds."""

    def __init__(
        self, config: EdgarConfig | None = None, *, client: httpx.Client | None = None
    ) -> None:
        """
        Args:
            config: Request configuration holding the User-Agent
            client: Optional httpx client owned by the caller
        """
        self._config = config
        self._client = client

    def fetch_feed(self, url: httpx.URL | str) -> Feed:
        """
        Fetch a feed along with its title and company information.

        Raises:
            ConfigError: If no User-Agent is configured
            TransportError: If the request fails or returns a non-2xx status
            ParseError: If the body is not well-formed Atom
        """
        response = edgar_get(url, self._config, self._client)
        feed = parse_feed(response.content)
        logger.debug("Decoded %d entries from %s", len(feed.entries), url)
        return feed

    def fetch_entries(self, url: httpx.URL | str) -> list[FilingEntry]:
        """
        Fetch a feed and return its entries in the order EDGAR sent them.

        Raises:
            ConfigError: If no User-Agent is configured
            TransportError: If the request fails or returns a non-2xx status
            ParseError: If the body is not well-formed Atom
        """
        return self.fetch_feed(url).entries

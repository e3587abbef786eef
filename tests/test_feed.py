"""Tests for Atom feed retrieval and decoding."""

import pytest

from sec_edgar.config import EdgarConfig
from sec_edgar.errors import ConfigError, ParseError, TransportError
from sec_edgar.feed import FeedClient, parse_feed
from sec_edgar.models import FilingEntry
from sec_edgar.query import QueryBuilder

FEED_URL = "https://www.sec.gov/cgi-bin/browse-edgar?action=getcompany&CIK=0000002488&type=10-K&dateb=&owner=include&count=10&search_text=&output=atom"

EMPTY_FEED = b"""<?xml version="1.0" encoding="ISO-8859-1" ?>
<feed xmlns="http://www.w3.org/2005/Atom">
<title>No filings</title>
</feed>
"""


class TestParseFeed:
    """Test decoding of browse-edgar Atom documents."""

    def test_entries_keep_document_order(self, atom_feed):
        """Test that entries are returned as listed."""
        entries = parse_feed(atom_feed).entries

        assert [entry.id for entry in entries] == [
            "urn:tag:sec.gov,2008:accession-number=0000002488-24-000012",
            "urn:tag:sec.gov,2008:accession-number=0000002488-23-000047",
            "urn:tag:sec.gov,2008:accession-number=0000002488-22-000016",
        ]

    def test_entry_fields(self, atom_feed):
        """Test the Atom fields of one entry."""
        entry = parse_feed(atom_feed).entries[0]

        assert isinstance(entry, FilingEntry)
        assert entry.category == "10-K"
        assert entry.updated == "2024-01-31T21:31:37-05:00"
        assert entry.link == (
            "https://www.sec.gov/Archives/edgar/data/2488/000000248824000012/"
            "0000002488-24-000012-index.htm"
        )
        assert entry.title.startswith("10-K")

    def test_content_is_one_element_per_line(self, atom_feed):
        """Test that the content markup keeps EDGAR's line layout."""
        content = parse_feed(atom_feed).entries[0].content
        lines = [line for line in content.split("\n") if line.strip()]

        assert lines[0] == "<accession-number>0000002488-24-000012</accession-number>"
        assert "<size>14 MB</size>" in lines
        assert len(lines) == 11
        assert "xmlns" not in content

    def test_entry_without_content(self, atom_feed):
        """Test that a missing <content> element decodes to None."""
        assert parse_feed(atom_feed).entries[2].content is None

    def test_feed_metadata(self, atom_feed):
        """Test the feed title and company information."""
        feed = parse_feed(atom_feed)

        assert feed.title == "ADVANCED MICRO DEVICES INC  (0000002488)"
        assert feed.company_info["conformed-name"] == "ADVANCED MICRO DEVICES INC"
        assert feed.company_info["fiscal-year-end"] == "1228"
        assert feed.company_info["cik"] == "0000002488"
        assert "addresses" not in feed.company_info

    def test_empty_feed(self):
        """Test a feed without entries."""
        feed = parse_feed(EMPTY_FEED)
        assert feed.entries == []
        assert feed.company_info == {}

    def test_malformed_xml_raises(self):
        """Test that broken XML raises ParseError."""
        with pytest.raises(ParseError, match="well-formed"):
            parse_feed(b"<feed xmlns='http://www.w3.org/2005/Atom'><entry></feed>")

    def test_non_atom_document_raises(self):
        """Test that XML other than an Atom feed raises ParseError."""
        with pytest.raises(ParseError, match="Atom"):
            parse_feed("<html><body>Request Rate Threshold Exceeded</body></html>")


class TestFeedClient:
    """Test FeedClient against a mocked EDGAR."""

    def test_fetch_entries(self, config, make_client, atom_feed):
        """Test fetching and decoding a feed."""
        client, handler = make_client(content=atom_feed)
        url = QueryBuilder("2488").set_filing_type("10-K").build()

        entries = FeedClient(config, client=client).fetch_entries(url)

        assert len(entries) == 3
        assert handler.requests[0].url == url

    def test_sends_mandatory_headers(self, config, make_client, atom_feed):
        """Test that SEC identification headers are sent."""
        client, handler = make_client(content=atom_feed)
        FeedClient(config, client=client).fetch_entries(FEED_URL)

        headers = handler.requests[0].headers
        assert headers["User-Agent"] == "Sample Company Name admin@sample.com"
        assert headers["Accept-Encoding"] == "gzip, deflate"
        assert headers["Host"] == "www.sec.gov"

    def test_fetch_feed_includes_company_info(self, config, make_client, atom_feed):
        """Test that fetch_feed returns the feed metadata too."""
        client, _ = make_client(content=atom_feed)
        feed = FeedClient(config, client=client).fetch_feed(FEED_URL)
        assert feed.company_info["state-location"] == "CA"

    def test_http_error_raises_transport_error(self, config, make_client):
        """Test that non-2xx responses raise TransportError."""
        client, _ = make_client(status_code=404)

        with pytest.raises(TransportError) as exc_info:
            FeedClient(config, client=client).fetch_entries(FEED_URL)
        assert exc_info.value.status_code == 404

    def test_missing_user_agent_raises_before_request(self, make_client, atom_feed):
        """Test that ConfigError is raised before any request."""
        client, handler = make_client(content=atom_feed)

        with pytest.raises(ConfigError):
            FeedClient(EdgarConfig(user_agent="  "), client=client).fetch_entries(FEED_URL)
        with pytest.raises(ConfigError):
            FeedClient(client=client).fetch_entries(FEED_URL)
        assert handler.requests == []

    def test_invalid_body_raises_parse_error(self, config, make_client):
        """Test that a non-XML body raises ParseError."""
        client, _ = make_client(content=b"Your request has been blocked.")

        with pytest.raises(ParseError):
            FeedClient(config, client=client).fetch_entries(FEED_URL)

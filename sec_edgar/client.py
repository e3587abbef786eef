"""High-level SEC EDGAR client: ticker in, filing records out."""

import logging
from pathlib import Path

import httpx

from sec_edgar.config import EdgarConfig
from sec_edgar.content import FilingContentParser
from sec_edgar.feed import FeedClient
from sec_edgar.models import FilingContentRecord, FilingTypeOption, OwnerOption
from sec_edgar.query import QueryBuilder
from sec_edgar.ticker import TickerResolver

logger = logging.getLogger(__name__)


class EdgarClient:
    """Chains ticker resolution, query building, feed retrieval and content extraction."""

    def __init__(
        self,
        config: EdgarConfig,
        *,
        ticker_file: Path | str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the pipeline components.

        Args:
            config: Request configuration holding the User-Agent
            ticker_file: Optional local copy of the SEC ticker dictionary
            client: Optional httpx client shared by every request
        """
        self._resolver = TickerResolver(ticker_file, config=config, client=client)
        self._feeds = FeedClient(config, client=client)
        self._parser = FilingContentParser()

    @property
    def resolver(self) -> TickerResolver:
        return self._resolver

    def lookup_cik(self, ticker: str) -> str:
        """
        Find the short CIK for a ticker.

        Raises:
            CIKNotFoundError: If the ticker is not in the dictionary
        """
        return self._resolver.resolve(ticker)

    def query(self, ticker: str) -> QueryBuilder:
        """Return a QueryBuilder seeded with the ticker's CIK."""
        return QueryBuilder(self.lookup_cik(ticker))

    def list_filings(
        self,
        ticker: str,
        filing_type: FilingTypeOption | str | None = None,
        date_boundary: str = "",
        owner: OwnerOption | str = OwnerOption.INCLUDE,
        count: int = 10,
        search_text: str = "",
    ) -> list[FilingContentRecord]:
        """
        Get a company's filings, newest first, as EDGAR lists them.

        Args:
            ticker: Stock ticker symbol (case-insensitive)
            filing_type: Form code to filter by; all forms when None
            date_boundary: Only filings before this YYYYMMDD date
            owner: Insider-ownership filter
            count: Filings per page, snapped to 10/20/40/80/100
            search_text: EDGAR free-text filter

        Returns:
            One FilingContentRecord per feed entry, in feed order

        Raises:
            EdgarError: Any error raised by the underlying components
        """
        builder = (
            self.query(ticker)
            .set_date_boundary(date_boundary)
            .set_owner(owner)
            .set_count(count)
            .set_search_text(search_text)
        )
        if filing_type is not None:
            builder = builder.set_filing_type(filing_type)

        url = builder.build()
        entries = self._feeds.fetch_entries(url)
        logger.debug("Fetched %d entries for %s", len(entries), ticker)

        return [self._parser.extract(entry) for entry in entries]

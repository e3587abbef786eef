"""Resolve ticker symbols to SEC Central Index Keys."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import httpx

from sec_edgar.config import EdgarConfig
from sec_edgar.errors import CIKNotFoundError, TickerFileError, ValidationError
from sec_edgar.models import LocalFile, RemoteURL, TickerRecord, TickerSource
from sec_edgar.transport import edgar_get

logger = logging.getLogger(__name__)

DEFAULT_TICKER_FILE = "ticker.txt"


def parse_ticker_line(line: str) -> TickerRecord | None:
    """
    Parse one ``<ticker> <cik>`` dictionary line.

    Returns:
        TickerRecord, or None if the line does not hold exactly two tokens
    """
    parts = line.split()
    if len(parts) != 2:
        return None
    return TickerRecord(ticker=parts[0], cik=parts[1])


def find_cik(lines: Iterable[str], ticker: str) -> str | None:
    """Return the CIK of the first line whose ticker matches, ignoring case."""
    wanted = ticker.lower()
    for line in lines:
        record = parse_ticker_line(line)
        if record is not None and record.ticker.lower() == wanted:
            return record.cik
    return None


class TickerResolver:
    """
    Looks up short CIKs (no leading zeros) from the SEC ticker dictionary.

    The dictionary source is chosen once, at construction: a local copy of
    https://www.sec.gov/include/ticker.txt when ``file_path`` names an
    existing file, the SEC's own copy otherwise.
    """

    def __init__(
        self,
        file_path: Path | str | None = None,
        *,
        config: EdgarConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the resolver and bind its ticker source.

        Args:
            file_path: Local ticker dictionary; defaults to ./ticker.txt
            config: Request configuration, only used for the remote source
            client: Optional httpx client, only used for the remote source
        """
        path = Path(file_path if file_path is not None else DEFAULT_TICKER_FILE)
        if path.is_file():
            self._source: TickerSource = LocalFile(path=path)
        else:
            self._source = RemoteURL()
        logger.debug("Ticker dictionary source: %s", self._source)

        self._config = config
        self._client = client

    @property
    def source(self) -> TickerSource:
        return self._source

    def resolve(self, ticker: str) -> str:
        """
        Find the CIK for a ticker.

        Args:
            ticker: Stock ticker symbol (case-insensitive)

        Returns:
            The CIK as listed in the dictionary, without leading zeros

        Raises:
            ValidationError: If the ticker is empty
            CIKNotFoundError: If the dictionary has no such ticker
            TickerFileError: If the local dictionary cannot be read
            TransportError: If the remote dictionary cannot be fetched
            ConfigError: If the remote source is used without a User-Agent
        """
        if not ticker or not ticker.strip():
            raise ValidationError("Ticker cannot be empty")

        cik = find_cik(self._lines(), ticker.strip())
        if cik is None:
            raise CIKNotFoundError(ticker)
        return cik

    def records(self) -> Iterator[TickerRecord]:
        """Yield every well-formed record of the bound dictionary."""
        for line in self._lines():
            record = parse_ticker_line(line)
            if record is not None:
                yield record

    def _lines(self) -> list[str]:
        if isinstance(self._source, LocalFile):
            return self._read_lines(self._source.path)
        return self._fetch_lines()

    def _read_lines(self, path: Path) -> list[str]:
        try:
            with open(path, encoding="utf-8") as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise TickerFileError(f"Cannot read ticker dictionary {path}: {e}") from e

    def _fetch_lines(self) -> list[str]:
        response = edgar_get(self._source.url, self._config, self._client)
        return response.text.splitlines()

"""Build browse-edgar query URLs."""

import logging
from urllib.parse import quote, urlencode

import httpx

from sec_edgar.errors import ParseError, ValidationError
from sec_edgar.models import FilingTypeOption, OwnerOption, QueryParameters

logger = logging.getLogger(__name__)

BROWSE_EDGAR_URL = "https://www.sec.gov/cgi-bin/browse-edgar"
CIK_LENGTH = 10
COUNT_OPTIONS = (10, 20, 40, 80, 100)

# (lower bound, count) pairs, checked from the top down
_COUNT_STEPS = ((90, 100), (80, 80), (40, 40), (20, 20))


def pad_cik(cik: str) -> str:
    """Left-pad a CIK with zeros to 10 characters; longer values are kept as is."""
    return cik.rjust(CIK_LENGTH, "0")


def round_count(count: int) -> int:
    """
    Snap a requested number of filings onto the counts EDGAR serves.

    EDGAR only returns 10, 20, 40, 80 or 100 filings per page. Anything below
    20 becomes 10, 90 and above becomes 100, and everything in between is
    rounded down to the nearest allowed value.
    """
    for lower_bound, allowed in _COUNT_STEPS:
        if count >= lower_bound:
            return allowed
    return COUNT_OPTIONS[0]


class QueryBuilder:
    """
    Immutable builder for ``browse-edgar?action=getcompany`` queries.

    Each ``set_*`` method returns a new builder, so a partially configured
    builder can be shared and branched freely:

        >>> base = QueryBuilder("78003").set_count(20)
        >>> annual = base.set_filing_type(FilingTypeOption.FORM_10K)
        >>> str(annual.build())
        'https://www.sec.gov/cgi-bin/browse-edgar?action=getcompany&CIK=0000078003&type=10-K&dateb=&owner=include&count=20&search_text=&output=atom'
    """

    def __init__(self, cik: str) -> None:
        """
        Initialize a builder for one company.

        Args:
            cik: CIK with or without leading zeros

        Raises:
            ValidationError: If the CIK is not made of ASCII digits
        """
        digits = cik.strip() if isinstance(cik, str) else ""
        if not (digits.isascii() and digits.isdecimal()):
            raise ValidationError(f"CIK must be a non-empty string of digits, got {cik!r}")
        self._params = QueryParameters(cik=pad_cik(digits))

    @classmethod
    def _from_parameters(cls, params: QueryParameters) -> "QueryBuilder":
        builder = cls.__new__(cls)
        builder._params = params
        return builder

    def _with(self, **changes: object) -> "QueryBuilder":
        return self._from_parameters(self._params.model_copy(update=changes))

    @property
    def parameters(self) -> QueryParameters:
        return self._params

    def set_filing_type(self, filing_type: FilingTypeOption | str) -> "QueryBuilder":
        """
        Restrict results to one form type.

        Raises:
            ValidationError: If a raw string is not a known form code
        """
        return self._with(filing_type=FilingTypeOption.parse(filing_type).value)

    def set_date_boundary(self, date_boundary: str) -> "QueryBuilder":
        """Only list filings made before this YYYYMMDD date; empty means most recent."""
        return self._with(date_boundary=date_boundary)

    def set_owner(self, owner: OwnerOption | str) -> "QueryBuilder":
        """
        Set the insider-ownership filter.

        Raises:
            ValidationError: If a raw string is not include, exclude or only
        """
        return self._with(owner=OwnerOption.parse(owner))

    def set_count(self, count: int) -> "QueryBuilder":
        """Set the number of filings per page, snapped by round_count()."""
        rounded = round_count(count)
        if rounded != count:
            logger.info(
                "EDGAR only serves %s filings per page; using %d instead of %d",
                "/".join(str(option) for option in COUNT_OPTIONS),
                rounded,
                count,
            )
        return self._with(count=rounded)

    def set_search_text(self, search_text: str) -> "QueryBuilder":
        return self._with(search_text=search_text)

    def build(self) -> httpx.URL:
        """
        Render the query URL.

        Returns:
            The Atom-output browse-edgar URL

        Raises:
            ParseError: If the rendered URL cannot be parsed
        """
        params = self._params
        query = urlencode(
            [
                ("action", "getcompany"),
                ("CIK", params.cik),
                ("type", params.filing_type),
                ("dateb", params.date_boundary),
                ("owner", params.owner.value),
                ("count", str(params.count)),
                ("search_text", params.search_text),
                ("output", "atom"),
            ],
            quote_via=quote,
        )

        try:
            return httpx.URL(f"{BROWSE_EDGAR_URL}?{query}")
        except httpx.InvalidURL as e:
            raise ParseError(f"Could not build EDGAR query URL: {e}") from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryBuilder):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __repr__(self) -> str:
        return f"QueryBuilder({self._params!r})"

"""Data models for SEC EDGAR lookups."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sec_edgar.errors import ValidationError

TICKER_URL = "https://www.sec.gov/include/ticker.txt"


class OwnerOption(str, Enum):
    """EDGAR's filter for insider-ownership filings (forms 3, 4 and 5)."""

    INCLUDE = "include"
    EXCLUDE = "exclude"
    ONLY = "only"

    @classmethod
    def parse(cls, value: "OwnerOption | str") -> "OwnerOption":
        """
        Convert a raw string to an OwnerOption, case-insensitively.

        Raises:
            ValidationError: If the value is not a known owner option
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower())
        except (AttributeError, ValueError) as e:
            raise ValidationError(f"Unknown owner option '{value}'") from e


class FilingTypeOption(str, Enum):
    """SEC form codes accepted by the browse-edgar ``type`` parameter."""

    FORM_3 = "3"
    FORM_4 = "4"
    FORM_5 = "5"
    FORM_6K = "6-K"
    FORM_8A12B = "8-A12B"
    FORM_8K = "8-K"
    FORM_8K_A = "8-K/A"
    FORM_10D = "10-D"
    FORM_10K = "10-K"
    FORM_10K_A = "10-K/A"
    FORM_10KT = "10-KT"
    FORM_10Q = "10-Q"
    FORM_10Q_A = "10-Q/A"
    FORM_11K = "11-K"
    FORM_13F_HR = "13F-HR"
    FORM_13F_NT = "13F-NT"
    FORM_20F = "20-F"
    FORM_40F = "40-F"
    FORM_144 = "144"
    FORM_424B2 = "424B2"
    FORM_424B3 = "424B3"
    FORM_424B4 = "424B4"
    FORM_424B5 = "424B5"
    FORM_485BPOS = "485BPOS"
    FORM_497K = "497K"
    ARS = "ARS"
    CORRESP = "CORRESP"
    D = "D"
    DEF_14A = "DEF 14A"
    DEFA14A = "DEFA14A"
    F_1 = "F-1"
    N_CSR = "N-CSR"
    NPORT_P = "NPORT-P"
    PRE_14A = "PRE 14A"
    S_1 = "S-1"
    S_3 = "S-3"
    S_3ASR = "S-3ASR"
    S_4 = "S-4"
    S_8 = "S-8"
    SC_13D = "SC 13D"
    SC_13D_A = "SC 13D/A"
    SC_13G = "SC 13G"
    SC_13G_A = "SC 13G/A"
    SD = "SD"
    UPLOAD = "UPLOAD"

    @classmethod
    def parse(cls, value: "FilingTypeOption | str") -> "FilingTypeOption":
        """
        Convert a raw string to a FilingTypeOption, case-insensitively.

        Raises:
            ValidationError: If the value is not a known form code
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.upper())
        except (AttributeError, ValueError) as e:
            raise ValidationError(f"Unknown filing type '{value}'") from e


class TickerRecord(BaseModel):
    """One ticker dictionary line; the CIK keeps no leading zeros."""

    model_config = ConfigDict(frozen=True)

    ticker: str
    cik: str


class LocalFile(BaseModel):
    """Ticker dictionary stored on disk."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: Path


class RemoteURL(BaseModel):
    """Ticker dictionary served by the SEC."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["url"] = "url"
    url: str = TICKER_URL


TickerSource = LocalFile | RemoteURL


class QueryParameters(BaseModel):
    """Fields substituted into a browse-edgar query."""

    model_config = ConfigDict(frozen=True)

    cik: str
    filing_type: str = ""
    date_boundary: str = ""
    owner: OwnerOption = OwnerOption.INCLUDE
    count: Literal[10, 20, 40, 80, 100] = 10
    search_text: str = ""


class FilingEntry(BaseModel):
    """
    One ``<entry>`` of a browse-edgar Atom feed.

    ``content`` holds the inner markup of the entry's ``<content>`` element,
    one child element per line, or None when the entry has no content.
    """

    id: str | None = None
    title: str | None = None
    updated: str | None = None
    link: str | None = None
    category: str | None = None
    summary: str | None = None
    content: str | None = None


class Feed(BaseModel):
    """A decoded browse-edgar Atom feed."""

    title: str | None = None
    updated: str | None = None
    company_info: dict[str, str] = Field(default_factory=dict)
    entries: list[FilingEntry] = Field(default_factory=list)


class FilingContentRecord(BaseModel):
    """Filing metadata carried in an entry's content; every value is a string."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    accession_number: str = Field(alias="accession-number")
    act: str
    file_number: str = Field(alias="file-number")
    filing_date: str = Field(alias="filing-date")
    filing_type: str = Field(alias="filing-type")
    film_number: str = Field(alias="film-number")
    form_name: str = Field(alias="form-name")
    size: str

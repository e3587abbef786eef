"""HTTP plumbing shared by every request sent to SEC EDGAR."""

import logging

import httpx

from sec_edgar.config import EdgarConfig
from sec_edgar.errors import ConfigError, TransportError

logger = logging.getLogger(__name__)

ACCEPT_ENCODING = "gzip, deflate"
HOST = "www.sec.gov"


def edgar_headers(config: EdgarConfig | None) -> dict[str, str]:
    """
    Build the headers the SEC requires on every request.

    Args:
        config: Configuration holding the identifying User-Agent

    Returns:
        Dictionary with User-Agent, Accept-Encoding and Host

    Raises:
        ConfigError: If no User-Agent is configured
    """
    user_agent = config.user_agent if config is not None else None
    if not user_agent or not user_agent.strip():
        raise ConfigError(
            "SEC EDGAR requires a User-Agent such as 'Company Name admin@company.com'; "
            "set EdgarConfig.user_agent"
        )

    return {
        "User-Agent": user_agent.strip(),
        "Accept-Encoding": ACCEPT_ENCODING,
        "Host": HOST,
    }


def edgar_client(config: EdgarConfig) -> httpx.Client:
    """
    Create an httpx client preloaded with the mandatory EDGAR headers.

    The caller owns the returned client and is responsible for closing it.

    Raises:
        ConfigError: If no User-Agent is configured
    """
    return httpx.Client(
        headers=edgar_headers(config),
        follow_redirects=config.follow_redirects,
        timeout=config.timeout,
    )


def edgar_get(
    url: httpx.URL | str,
    config: EdgarConfig | None,
    client: httpx.Client | None = None,
) -> httpx.Response:
    """
    Send one GET request to EDGAR.

    Headers are validated before anything touches the network. When no
    client is given, a short-lived one is opened for this request only.

    Args:
        url: Address to fetch
        config: Configuration holding the User-Agent and timeout
        client: Optional client owned by the caller; it is not closed here

    Returns:
        The successful (2xx) response with its body already read

    Raises:
        ConfigError: If no User-Agent is configured
        TransportError: If the request fails or the status is not 2xx
    """
    headers = edgar_headers(config)
    logger.debug("GET %s", url)

    try:
        if client is not None:
            response = client.get(url, headers=headers)
            response.raise_for_status()
            return response

        with httpx.Client(
            follow_redirects=config.follow_redirects, timeout=config.timeout
        ) as owned_client:
            response = owned_client.get(url, headers=headers)
            response.raise_for_status()
            return response
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        raise TransportError(
            f"EDGAR request to {url} failed: HTTP {status_code}", status_code=status_code
        ) from e
    except httpx.RequestError as e:
        raise TransportError(f"EDGAR request to {url} failed: {e}") from e

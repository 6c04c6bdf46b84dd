"""Single-shot HTTP GET returning the response body as text."""

import logging

import httpx

from kivakeli.errors import AuthError, MalformedUrlError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "kivakeli/0.1.0"


def redact(url: str) -> str:
    """Hide the appid query value so keys never reach the logs."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return url
    if "appid" not in parsed.params:
        return url
    return str(parsed.copy_set_param("appid", "REDACTED"))


class HttpFetcher:
    """Fetches JSON documents. Errors are raised, never retried."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.user_agent = user_agent
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        safe_url = redact(url)
        logger.debug("GET %s", safe_url)
        try:
            resp = httpx.get(
                url, headers=headers, timeout=self.timeout, follow_redirects=True
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise MalformedUrlError(f"{safe_url}: {e}") from e
        except httpx.RequestError as e:
            logger.error("Request failed: %s -> %s", safe_url, e)
            raise NetworkError(f"Request failed: {e}") from e

        if resp.status_code == 401:
            logger.error("Unauthorized: %s", safe_url)
            raise AuthError(f"HTTP 401: {resp.text}", resp.status_code)
        if not resp.is_success:
            logger.error("HTTP %d: %s -> %s", resp.status_code, safe_url, resp.text)
            raise NetworkError(f"HTTP {resp.status_code}: {resp.text}", resp.status_code)
        return resp.text

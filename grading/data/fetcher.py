"""
Grade sheet retrieval.

This module fetches the raw text of a grade sheet through an ordered chain
of retrieval strategies (public proxies first, a direct request last).
"""

import logging
import urllib.parse
from dataclasses import dataclass
from typing import Callable

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import PROXY_PREFIXES, REQUEST_TIMEOUT, USER_AGENT
from ..exceptions import ConfigurationError
from ..models import FetchAttempt, FetchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetrievalStrategy:
    """A named transform from a sheet location to the URL actually requested."""
    name: str
    transform: Callable[[str], str]

    def url_for(self, location: str) -> str:
        return self.transform(location)


def prefix_strategy(name: str, prefix: str) -> RetrievalStrategy:
    """
    Strategy that asks a proxy for the sheet.

    The location is percent-encoded in full (like encodeURIComponent) and
    appended to the proxy prefix. An empty prefix gives a direct request
    to the location itself.
    """
    if not prefix:
        return RetrievalStrategy(name, lambda location: location)
    return RetrievalStrategy(name, lambda location: prefix + urllib.parse.quote(location, safe=""))


DIRECT = prefix_strategy("direct", "")


def default_strategies() -> tuple:
    return tuple(prefix_strategy(name, prefix) for name, prefix in PROXY_PREFIXES)


def create_session() -> requests.Session:
    """
    Session used for every sheet request.

    Retries are switched off on purpose: the strategy chain is the only
    fallback, and one attempt per strategy keeps the attempt log readable.
    Redirects are still followed.
    """
    session = requests.Session()
    retries = Retry(
        total=None,
        connect=0,
        read=0,
        status=0,
        other=0,
        redirect=5,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session


class RemoteTextFetcher:
    """
    Fetches raw text through an ordered list of retrieval strategies.

    CONTRACT:
    ---------
    - Strategies are tried one at a time, in order. The first one that
      returns a 2xx response with a non-empty body wins and the rest are
      never contacted.
    - A request exception, a non-2xx status or an empty body counts as a
      failure of that strategy only.
    - fetch_text() never raises. When every strategy fails the result has
      text=None and the last failure reason in `error`.

    Usage:
        fetcher = RemoteTextFetcher()
        result = fetcher.fetch_text("https://pastebin.com/raw/4WscJMh0")
        if result.ok:
            print(result.text)
    """

    def __init__(self, strategies=None, session=None, timeout: float = REQUEST_TIMEOUT):
        self.strategies = tuple(strategies) if strategies is not None else default_strategies()
        if not self.strategies:
            raise ConfigurationError("At least one retrieval strategy is required")
        self.session = session if session is not None else create_session()
        self.timeout = timeout

    def fetch_text(self, location: str) -> FetchResult:
        attempts = []
        last_error = None

        for strategy in self.strategies:
            try:
                url = strategy.url_for(location)
            except Exception as e:
                last_error = f"{strategy.name}: could not build request URL ({e})"
                attempts.append(FetchAttempt(strategy.name, "", False, last_error))
                logger.warning("fetch_strategy_failed strategy=%s location=%s err=%s", strategy.name, location, e)
                continue

            logger.info("fetch_attempt strategy=%s url=%s", strategy.name, url)
            text, error = self._try_strategy(url)

            if error is None:
                attempts.append(FetchAttempt(strategy.name, url, True))
                logger.info("fetch_ok strategy=%s location=%s chars=%d", strategy.name, location, len(text))
                return FetchResult(
                    location=location,
                    text=text,
                    strategy=strategy.name,
                    attempts=tuple(attempts),
                )

            last_error = f"{strategy.name}: {error}"
            attempts.append(FetchAttempt(strategy.name, url, False, error))
            logger.warning("fetch_strategy_failed strategy=%s location=%s err=%s", strategy.name, location, error)

        logger.error("fetch_failed location=%s attempts=%d err=%s", location, len(attempts), last_error)
        return FetchResult(
            location=location,
            error=last_error or "All proxy attempts failed",
            attempts=tuple(attempts),
        )

    def _try_strategy(self, url: str) -> tuple:
        """Request one URL. Returns (text, None) on success, (None, reason) otherwise."""
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            return None, f"{type(e).__name__}: {e}"

        if not 200 <= resp.status_code < 300:
            return None, f"HTTP {resp.status_code}"

        text = resp.text
        if not text or not text.strip():
            return None, "empty response body"

        return text, None

"""Single-page GitHub REST client using httpx."""

import json
import threading
from dataclasses import dataclass

import httpx

from .errors import DecodeError, RemoteError
from .models import ACCEPT, DEFAULT_API_BASE, REQUEST_TIMEOUT, USER_AGENT, PageResult, Repository
from .settings import get_settings


@dataclass(frozen=True)
class ClientConfig:
    """Immutable HTTP settings shared by every page request."""

    token: str | None = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = REQUEST_TIMEOUT
    accept: str = ACCEPT
    user_agent: str = USER_AGENT

    @classmethod
    def from_settings(cls, token: str | None = None) -> "ClientConfig":
        """Build a config from Settings. An explicit token wins over GITHUB_TOKEN."""
        settings = get_settings()
        return cls(
            token=token or settings.github_token,
            api_base=settings.github_api_url.rstrip("/"),
        )

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.accept,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


def parse_link_header(header: str | None) -> dict[str, str]:
    """Parse an RFC 8288 Link header into {relation: url}.

    Entries are split on commas and trimmed one by one, so a `prev` or
    `last` entry never reads as `next`.
    """
    links: dict[str, str] = {}
    if not header:
        return links

    for entry in header.split(","):
        entry = entry.strip()
        if not entry:
            continue
        target, _, params = entry.partition(";")
        url = target.strip().lstrip("<").rstrip(">")
        for param in params.split(";"):
            key, _, value = param.partition("=")
            if key.strip().lower() != "rel":
                continue
            # rel may hold several space-separated relation names
            for rel in value.strip().strip('"').split():
                links.setdefault(rel.strip().lower(), url)
    return links


def has_next_page(header: str | None) -> bool:
    """True iff the Link header advertises a `next` relation."""
    return "next" in parse_link_header(header)


def decode_page(body: bytes | str) -> list[Repository]:
    """Decode a page body (a JSON array of repository objects)."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON in response body: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")
    return [Repository.from_api(record) for record in data]


class RepoPageFetcher:
    """Fetches one page of repositories per call.

    No retry and no throttle: any failure is raised to the caller.
    """

    def __init__(self, config: ClientConfig | None = None, transport: httpx.BaseTransport | None = None):
        self.config = config or ClientConfig.from_settings()
        self._client = httpx.Client(
            headers=self.config.headers(),
            timeout=self.config.timeout,
            transport=transport,
        )

    def _get(self, url: str, outcome: dict):
        try:
            outcome["response"] = self._client.get(url)
        except Exception as e:
            outcome["error"] = e

    def fetch_page(self, url: str) -> PageResult:
        """GET one page and decode it.

        The request runs on a worker thread so that connect, headers and body
        together are bounded by config.timeout; httpx timeouts only bound each
        phase separately.

        Raises:
            RemoteError: status other than 200
            DecodeError: body is not a JSON array of repository objects
            httpx.TimeoutException: response not complete within config.timeout
        """
        outcome: dict = {}
        worker = threading.Thread(target=self._get, args=(url, outcome), daemon=True)
        worker.start()
        worker.join(self.config.timeout)

        if worker.is_alive():
            raise httpx.ReadTimeout(f"Response not complete after {self.config.timeout}s")
        if "error" in outcome:
            raise outcome["error"]

        resp = outcome["response"]
        if resp.status_code != 200:
            raise RemoteError(resp.status_code, resp.text)

        return PageResult(
            repos=decode_page(resp.content),
            has_more=has_next_page(resp.headers.get("link")),
        )

    def close(self):
        self._client.close()

"""Walk a user's or organization's repository listing page by page."""

from urllib.parse import quote, urlencode

from ..client import RepoPageFetcher
from ..errors import ConfigError
from ..models import PER_PAGE, Repository

# target kind -> REST path segment
TARGET_KINDS = {
    "user": "users",
    "org": "orgs",
}


def build_page_url(api_base: str, kind: str, name: str, page: int, per_page: int = PER_PAGE) -> str:
    """Build the listing URL for one page, most recently updated first."""
    segment = TARGET_KINDS.get(kind)
    if segment is None:
        raise ConfigError(f"Unknown target kind '{kind}', expected 'user' or 'org'")

    query = urlencode(
        {
            "page": page,
            "per_page": per_page,
            "sort": "updated",
            "direction": "desc",
        }
    )
    return f"{api_base.rstrip('/')}/{segment}/{quote(name, safe='')}/repos?{query}"


def fetch_repos(fetcher: RepoPageFetcher, kind: str, name: str, per_page: int = PER_PAGE) -> list[Repository]:
    """Fetch every repository for a target, in API order.

    Stops when the Link header has no `next` relation or a page comes back
    empty, whichever happens first. Errors from the fetcher propagate and
    nothing collected so far is returned.
    """
    collected: list[Repository] = []
    page = 1

    while True:
        url = build_page_url(fetcher.config.api_base, kind, name, page, per_page)
        print(f"Fetching page {page}...", flush=True)
        result = fetcher.fetch_page(url)

        print(f"Found {len(result.repos)} repositories on page {page}", flush=True)
        collected.extend(result.repos)

        # Some endpoints omit the Link header on the last page
        if not result.has_more or not result.repos:
            break
        page += 1

    return collected


def fetch_user_repos(fetcher: RepoPageFetcher, name: str) -> list[Repository]:
    return fetch_repos(fetcher, "user", name)


def fetch_org_repos(fetcher: RepoPageFetcher, name: str) -> list[Repository]:
    return fetch_repos(fetcher, "org", name)

"""Data models and constants for repository scraping."""

from dataclasses import dataclass, fields

from .errors import DecodeError

PER_PAGE = 100  # GitHub REST API maximum page size
DEFAULT_API_BASE = "https://api.github.com"
REQUEST_TIMEOUT = 30.0  # seconds, request start to body fully read
USER_AGENT = "GitHub-Repo-Scraper/1.0"
ACCEPT = "application/vnd.github.v3+json"

# attribute -> wire key, in export order
_WIRE_KEYS = {
    "id": "id",
    "name": "name",
    "full_name": "full_name",
    "html_url": "html_url",
    "clone_url": "clone_url",
    "ssh_url": "ssh_url",
    "description": "description",
    "language": "language",
    "stars": "stargazers_count",
    "forks": "forks_count",
    "created_at": "created_at",
    "updated_at": "updated_at",
    "private": "private",
    "fork": "fork",
    "archived": "archived",
}

# Fields the API sends as null when unset
_NULLABLE = {"description", "language"}


@dataclass(frozen=True)
class Repository:
    """Snapshot of one repository record as returned by the API."""

    id: int = 0
    name: str = ""
    full_name: str = ""
    html_url: str = ""
    clone_url: str = ""
    ssh_url: str = ""
    description: str = ""
    language: str = ""
    stars: int = 0
    forks: int = 0
    created_at: str = ""
    updated_at: str = ""
    private: bool = False
    fork: bool = False
    archived: bool = False

    @classmethod
    def from_api(cls, record: dict) -> "Repository":
        """Decode one repository object from a REST response.

        Missing keys keep their zero value. Values of the wrong type raise
        DecodeError.
        """
        if not isinstance(record, dict):
            raise DecodeError(f"Expected a repository object, got {type(record).__name__}")

        values = {}
        for f in fields(cls):
            key = _WIRE_KEYS[f.name]
            if key not in record:
                continue
            value = record[key]
            if value is None and f.name in _NULLABLE:
                value = ""
            values[f.name] = _check_type(key, value, f.type)
        return cls(**values)

    def to_api(self) -> dict:
        """Encode using the same keys `from_api` reads."""
        return {key: getattr(self, attr) for attr, key in _WIRE_KEYS.items()}


def _check_type(key: str, value, expected: type):
    # bool is a subclass of int
    if expected is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise DecodeError(f"Field '{key}' expected {expected.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class PageResult:
    """One decoded page plus whether the API advertised another."""

    repos: list[Repository]
    has_more: bool

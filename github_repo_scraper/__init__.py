"""Fetch every repository of a GitHub user or organization.

Walks the paginated REST listing, filters private, forked and archived
repositories, prints a summary and writes JSON and/or CSV.
"""

from .cli import main
from .client import ClientConfig, RepoPageFetcher
from .models import PageResult, Repository

__all__ = ["main", "ClientConfig", "RepoPageFetcher", "PageResult", "Repository"]

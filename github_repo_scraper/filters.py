"""Visibility and provenance filters."""

from .models import Repository


def filter_repos(
    repos: list[Repository],
    include_private: bool = False,
    include_forks: bool = True,
    include_archived: bool = False,
) -> list[Repository]:
    """Return the repositories that pass all three filters, in input order."""
    return [
        repo
        for repo in repos
        if (include_private or not repo.private)
        and (include_forks or not repo.fork)
        and (include_archived or not repo.archived)
    ]

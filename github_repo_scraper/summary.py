"""Aggregate counts for console display."""

from collections import Counter
from dataclasses import dataclass, field

from .models import Repository


@dataclass(frozen=True)
class RepoSummary:
    total: int = 0
    total_stars: int = 0
    total_forks: int = 0
    private_count: int = 0
    fork_count: int = 0
    archived_count: int = 0
    languages: dict[str, int] = field(default_factory=dict)

    def top_languages(self) -> list[tuple[str, int]]:
        """Languages by count descending, then name."""
        return sorted(self.languages.items(), key=lambda item: (-item[1], item[0]))


def summarize(repos: list[Repository]) -> RepoSummary:
    # Empty language means GitHub could not determine one
    languages = Counter(repo.language for repo in repos if repo.language)
    return RepoSummary(
        total=len(repos),
        total_stars=sum(repo.stars for repo in repos),
        total_forks=sum(repo.forks for repo in repos),
        private_count=sum(1 for repo in repos if repo.private),
        fork_count=sum(1 for repo in repos if repo.fork),
        archived_count=sum(1 for repo in repos if repo.archived),
        languages=dict(languages),
    )


def print_summary(summary: RepoSummary, target_name: str):
    print(f"\n=== Repository Summary for {target_name} ===")
    print(f"Total repositories found: {summary.total}")

    if summary.total == 0:
        return

    print(f"Total stars: {summary.total_stars:,}")
    print(f"Total forks: {summary.total_forks:,}")
    print(f"Private repositories: {summary.private_count}")
    print(f"Forked repositories: {summary.fork_count}")
    print(f"Archived repositories: {summary.archived_count}")

    print("\nTop languages:")
    for language, count in summary.top_languages():
        print(f"  {language}: {count} repositories")

"""Unit tests for summary aggregation."""

from .models import Repository
from .summary import RepoSummary, print_summary, summarize


def describe_summarize():

    def it_aggregates_counts_and_languages():
        repos = [
            Repository(id=1, language="Go", stars=5, forks=1),
            Repository(id=2, language="Go", stars=10, forks=2, private=True),
            Repository(id=3, language="", stars=0, fork=True, archived=True),
        ]

        summary = summarize(repos)

        assert summary.total == 3
        assert summary.total_stars == 15
        assert summary.total_forks == 3
        assert summary.private_count == 1
        assert summary.fork_count == 1
        assert summary.archived_count == 1
        assert summary.languages == {"Go": 2}

    def it_returns_zeroes_for_empty_collection():
        assert summarize([]) == RepoSummary()


def describe_RepoSummary():

    def it_orders_top_languages_by_count_then_name():
        summary = RepoSummary(languages={"Rust": 1, "Go": 3, "C": 1})
        assert summary.top_languages() == [("Go", 3), ("C", 1), ("Rust", 1)]


def describe_print_summary():

    def it_prints_totals_and_languages(capsys):
        summary = summarize(
            [
                Repository(id=1, language="Python", stars=1200),
                Repository(id=2, language="Python", stars=3),
            ]
        )

        print_summary(summary, "octocat")

        out = capsys.readouterr().out
        assert "=== Repository Summary for octocat ===" in out
        assert "Total repositories found: 2" in out
        assert "Total stars: 1,203" in out
        assert "Python: 2 repositories" in out

    def it_prints_only_the_total_when_empty(capsys):
        print_summary(RepoSummary(), "nobody")

        out = capsys.readouterr().out
        assert "Total repositories found: 0" in out
        assert "Total stars" not in out
        assert "Top languages" not in out

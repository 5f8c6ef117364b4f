"""Unit tests for repository filters."""

from itertools import product

import pytest

from .filters import filter_repos
from .models import Repository


@pytest.fixture
def repos():
    # one repository for every combination of private/fork/archived
    return [
        Repository(id=i, name=f"r{i}", private=p, fork=f, archived=a)
        for i, (p, f, a) in enumerate(product([False, True], repeat=3))
    ]


def describe_filter_repos():

    def it_defaults_to_public_non_archived_including_forks(repos):
        result = filter_repos(repos)
        assert result
        assert all(not r.private and not r.archived for r in result)
        assert any(r.fork for r in result)

    def it_is_identity_when_everything_is_included(repos):
        assert filter_repos(repos, True, True, True) == repos

    @pytest.mark.parametrize("flags", list(product([False, True], repeat=3)))
    def it_keeps_exactly_the_matching_subset(repos, flags):
        include_private, include_forks, include_archived = flags
        expected = [
            r
            for r in repos
            if (include_private or not r.private)
            and (include_forks or not r.fork)
            and (include_archived or not r.archived)
        ]

        assert filter_repos(repos, *flags) == expected

    def it_excludes_all_three_when_nothing_is_included(repos):
        result = filter_repos(repos, include_private=False, include_forks=False, include_archived=False)
        assert [r.id for r in result] == [0]

    def it_preserves_order(repos):
        reversed_repos = list(reversed(repos))
        result = filter_repos(reversed_repos, include_private=True)
        assert [r.id for r in result] == [r.id for r in reversed_repos if not r.archived]

    def it_does_not_mutate_input(repos):
        before = list(repos)
        filter_repos(repos)
        assert repos == before

    def it_handles_empty_input():
        assert filter_repos([]) == []

"""E2E tests against the real GitHub API.

No mocks. Skip if GITHUB_TOKEN is not set.
"""

import json
import os

import pytest

from github_repo_scraper.cli import main
from github_repo_scraper.client import ClientConfig, RepoPageFetcher
from github_repo_scraper.fetch_repos import fetch_org_repos, fetch_user_repos

pytestmark = pytest.mark.skipif(
    not os.environ.get("GITHUB_TOKEN"),
    reason="GITHUB_TOKEN required for E2E tests",
)


@pytest.fixture
def fetcher():
    f = RepoPageFetcher(ClientConfig(token=os.environ["GITHUB_TOKEN"]))
    yield f
    f.close()


def test_user_repos(fetcher):
    """octocat has a handful of public repositories, all on one page."""
    repos = fetch_user_repos(fetcher, "octocat")

    assert repos
    assert all(r.full_name.startswith("octocat/") for r in repos)
    assert len({r.id for r in repos}) == len(repos)


def test_org_repos_span_multiple_pages(fetcher):
    """The github org has well over 100 public repositories."""
    repos = fetch_org_repos(fetcher, "github")

    assert len(repos) > 100
    assert len({r.id for r in repos}) == len(repos)


def test_cli_writes_both_formats(tmp_path):
    code = main(["user", "octocat", "--output", "both", "--output-dir", str(tmp_path)])

    assert code == 0
    json_file = next(tmp_path.glob("user_octocat_*.json"))
    csv_file = next(tmp_path.glob("user_octocat_*.csv"))
    data = json.loads(json_file.read_text())
    assert len(csv_file.read_text().splitlines()) == len(data) + 1

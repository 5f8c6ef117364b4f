from .fetch_repos import build_page_url, fetch_org_repos, fetch_repos, fetch_user_repos

__all__ = ["build_page_url", "fetch_org_repos", "fetch_repos", "fetch_user_repos"]

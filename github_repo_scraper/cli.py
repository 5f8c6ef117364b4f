"""CLI for scraping a user's or organization's repositories."""

import argparse
import sys
from pathlib import Path

import httpx

from .client import ClientConfig, RepoPageFetcher
from .errors import ConfigError, DecodeError, RemoteError
from .export import OUTPUT_FORMATS, export_repos, output_basename, resolve_formats
from .fetch_repos import fetch_repos
from .filters import filter_repos
from .summary import print_summary, summarize

EPILOG = """\
Examples:
  github-repos org noi-techpark
  github-repos user octocat --token ghp_xxxx --output both
"""


def _log(msg: str):
    sys.stderr.write(f"{msg}\n")
    sys.stderr.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-repos",
        description="List every repository of a GitHub user or organization",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "kind",
        metavar="KIND",
        help="Target kind: user or org",
    )
    parser.add_argument(
        "name",
        help="GitHub username or organization name",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="GitHub personal access token (default: GITHUB_TOKEN)",
    )
    parser.add_argument(
        "--output",
        choices=sorted(OUTPUT_FORMATS),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--include-private",
        action="store_true",
        help="Include private repositories",
    )
    parser.add_argument(
        "--include-forks",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Include forked repositories",
    )
    parser.add_argument(
        "--include-archived",
        action="store_true",
        help="Include archived repositories",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for output files (default: current directory)",
    )
    return parser


def main(argv: list[str] | None = None, transport: httpx.BaseTransport | None = None) -> int:
    args = build_parser().parse_args(argv)
    formats = resolve_formats(args.output)

    config = ClientConfig.from_settings(token=args.token)
    if not config.token:
        _log("GITHUB_TOKEN not found. Using unauthenticated requests (limited rate).")

    print(f"Scraping repositories for {args.kind}: {args.name}...", flush=True)

    fetcher = RepoPageFetcher(config, transport=transport)
    try:
        repos = fetch_repos(fetcher, args.kind, args.name)
    except ConfigError:
        _log("Error: First argument must be 'user' or 'org'")
        return 1
    except (RemoteError, DecodeError, httpx.HTTPError) as e:
        _log(f"Error scraping repositories: {e}")
        return 1
    finally:
        fetcher.close()

    repos = filter_repos(
        repos,
        include_private=args.include_private,
        include_forks=args.include_forks,
        include_archived=args.include_archived,
    )

    print_summary(summarize(repos), args.name)

    export_repos(repos, output_basename(args.kind, args.name), formats, output_dir=args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())

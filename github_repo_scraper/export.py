"""Write repository collections to JSON and CSV files."""

import json
import sys
from datetime import datetime
from pathlib import Path

from .errors import ConfigError
from .models import Repository

CSV_HEADER = [
    "Name",
    "Full Name",
    "Description",
    "Language",
    "Stars",
    "Forks",
    "Clone URL",
    "HTML URL",
    "Created At",
    "Updated At",
    "Private",
    "Fork",
    "Archived",
]

OUTPUT_FORMATS = {
    "json": ("json",),
    "csv": ("csv",),
    "both": ("json", "csv"),
}


def _log(msg: str):
    sys.stderr.write(f"{msg}\n")
    sys.stderr.flush()


def resolve_formats(output: str) -> tuple[str, ...]:
    """Map an output selector (json, csv, both) to the formats to write."""
    try:
        return OUTPUT_FORMATS[output]
    except KeyError:
        raise ConfigError(
            f"unknown output format '{output}'. Use 'json', 'csv', or 'both'"
        ) from None


def output_basename(kind: str, name: str, now: datetime | None = None) -> str:
    """File name stem, e.g. user_octocat_20240101_120000."""
    now = now or datetime.now()
    return f"{kind}_{name}_{now.strftime('%Y%m%d_%H%M%S')}"


def save_json(repos: list[Repository], path: Path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump([repo.to_api() for repo in repos], f, indent=2)
        f.write("\n")


def escape_description(text: str) -> str:
    """Quote a description for CSV, doubling embedded quotes."""
    return '"' + text.replace('"', '""') + '"'


def _bool(value: bool) -> str:
    return "true" if value else "false"


def csv_row(repo: Repository) -> str:
    """One CSV line. Only the description is quoted; other fields are written as-is."""
    return ",".join(
        [
            repo.name,
            repo.full_name,
            escape_description(repo.description),
            repo.language,
            str(repo.stars),
            str(repo.forks),
            repo.clone_url,
            repo.html_url,
            repo.created_at,
            repo.updated_at,
            _bool(repo.private),
            _bool(repo.fork),
            _bool(repo.archived),
        ]
    )


def save_csv(repos: list[Repository], path: Path):
    """Write a CSV file. An OSError stops at the failing row; earlier rows stay on disk."""
    # lone surrogates are valid JSON but not UTF-8
    with open(path, "w", encoding="utf-8", errors="backslashreplace", newline="") as f:
        f.write(",".join(CSV_HEADER) + "\n")
        for repo in repos:
            f.write(csv_row(repo) + "\n")


_WRITERS = {
    "json": ("JSON", save_json),
    "csv": ("CSV", save_csv),
}


def export_repos(
    repos: list[Repository],
    basename: str,
    formats: tuple[str, ...],
    output_dir: Path | None = None,
) -> dict[str, Path]:
    """Write each requested format. A failed write is reported and skipped.

    Returns the paths that were written, keyed by format.
    """
    output_dir = Path(output_dir) if output_dir is not None else Path.cwd()
    written = {}

    for fmt in formats:
        label, writer = _WRITERS[fmt]
        path = output_dir / f"{basename}.{fmt}"
        try:
            writer(repos, path)
        except (OSError, UnicodeError) as e:
            _log(f"Error saving to {label}: {e}")
            continue
        written[fmt] = path
        print(f"\nRepositories saved to {path}", flush=True)

    return written

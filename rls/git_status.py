"""Git status summaries for the direct children of a listed directory.

Combines ``git status --porcelain`` (dirty/untracked flags) with
``git diff --numstat`` (added/deleted line counts), then folds every
repository path into the child of the listed directory that contains it.
"""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass, replace
from pathlib import Path, PurePosixPath

from .ansi import Cell, colorize
from .ui_theme import DEFAULT_THEME, UITheme

_BRACE_RENAME_RE = re.compile(r"\{([^{}]*) => ([^{}]*)\}")


@dataclass(frozen=True)
class StatusRecord:
    """Change summary for one path, or for all paths under one child."""

    added: int | None = None
    deleted: int | None = None
    dirty: bool = False
    untracked: bool = False

    @property
    def is_clean(self) -> bool:
        return not self.dirty and not self.untracked


def _sum_counts(left: int | None, right: int | None) -> int | None:
    if left is None:
        return right
    if right is None:
        return left
    return left + right


def combine_records(left: StatusRecord, right: StatusRecord) -> StatusRecord:
    """Sum line counts and OR flags of two records."""
    return StatusRecord(
        added=_sum_counts(left.added, right.added),
        deleted=_sum_counts(left.deleted, right.deleted),
        dirty=left.dirty or right.dirty,
        untracked=left.untracked or right.untracked,
    )


def _iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split porcelain v1 output into ``(code, path)`` pairs.

    NUL-separated (``-z``) output carries renames as an extra source-path
    token after the destination; line output uses ``old -> new``.
    """
    records: list[tuple[str, str]] = []
    if "\0" not in output:
        for line in output.splitlines():
            if len(line) < 4 or line[2] != " ":
                continue
            path_text = line[3:]
            if " -> " in path_text:
                path_text = path_text.rsplit(" -> ", 1)[1]
            records.append((line[:2], path_text))
        return records

    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        # The first path token is the destination; skip the source path.
        if "R" in status or "C" in status:
            index += 1

    return records


def parse_porcelain_status(output: str) -> dict[str, StatusRecord]:
    """Parse ``git status --porcelain=v1`` output into path records.

    Accepts both ``-z`` and line output. Ignored (``!!``) entries are skipped
    and renames keep only the destination path.
    """
    records: dict[str, StatusRecord] = {}
    for code, path in _iter_porcelain_records(output):
        if code == "!!" or not path:
            continue
        records[path] = StatusRecord(
            dirty=bool(code.strip()),
            untracked=code == "??",
        )
    return records


def _parse_count(value: str) -> int | None:
    # Binary files report "-" for both counts.
    try:
        return int(value)
    except ValueError:
        return None


def _numstat_destination(path_text: str) -> str:
    """Resolve ``dir/{old => new}/file`` and ``old => new`` rename notation."""
    if " => " not in path_text:
        return path_text
    resolved = _BRACE_RENAME_RE.sub(lambda match: match.group(2), path_text)
    if " => " in resolved:
        resolved = resolved.rsplit(" => ", 1)[1]
    return re.sub(r"/{2,}", "/", resolved).strip("/")


def _iter_numstat_records(output: str) -> list[tuple[str, str, str]]:
    """Split numstat output into ``(added, deleted, path)`` triples.

    With ``-z`` a rename leaves the path field empty and is followed by the
    source and destination tokens.
    """
    records: list[tuple[str, str, str]] = []
    if "\0" not in output:
        for line in output.splitlines():
            fields = line.split("\t", 2)
            if len(fields) == 3:
                records.append((fields[0], fields[1], _numstat_destination(fields[2])))
        return records

    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        fields = tokens[index].split("\t", 2)
        index += 1
        if len(fields) != 3:
            continue
        path = fields[2]
        if not path:
            if index + 1 >= len(tokens):
                break
            path = tokens[index + 1]
            index += 2
        records.append((fields[0], fields[1], path))
    return records


def merge_numstat(records: dict[str, StatusRecord], output: str) -> dict[str, StatusRecord]:
    """Merge ``git diff --numstat`` output into ``records``.

    Existing records only gain counts they do not have yet; every path that
    shows up in the diff is dirty.
    """
    merged = dict(records)
    for added_text, deleted_text, path in _iter_numstat_records(output):
        if not path:
            continue
        added = _parse_count(added_text)
        deleted = _parse_count(deleted_text)

        existing = merged.get(path)
        if existing is None:
            merged[path] = StatusRecord(added=added, deleted=deleted, dirty=True)
            continue
        merged[path] = replace(
            existing,
            added=existing.added if existing.added is not None else added,
            deleted=existing.deleted if existing.deleted is not None else deleted,
            dirty=True,
        )
    return merged


def scope_status_records(
    records: dict[str, StatusRecord],
    prefix: PurePosixPath | str,
) -> dict[str, StatusRecord]:
    """Aggregate repository-relative records per direct child of ``prefix``.

    ``prefix`` is the listed directory relative to the repository root
    (``""`` or ``"."`` for the root itself). Paths outside it, and the
    directory itself, are dropped.
    """
    prefix_parts = PurePosixPath(prefix).parts
    if prefix_parts == (".",):
        prefix_parts = ()
    depth = len(prefix_parts)

    scoped: dict[str, StatusRecord] = {}
    for path, record in records.items():
        parts = PurePosixPath(path).parts
        if len(parts) <= depth or parts[:depth] != prefix_parts:
            continue
        child = parts[depth]
        existing = scoped.get(child)
        scoped[child] = record if existing is None else combine_records(existing, record)
    return scoped


def _run_git(
    cwd: Path,
    args: list[str],
    timeout_seconds: float | None,
) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None


def resolve_repo_root(path: Path, timeout_seconds: float | None = None) -> Path | None:
    """Return the worktree root containing ``path``, or ``None`` outside git."""
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    if not top:
        return None
    return Path(top).resolve()


def _numstat_output(repo_root: Path, timeout_seconds: float | None) -> str | None:
    diff_proc = _run_git(repo_root, ["diff", "--numstat", "-z", "-M", "HEAD"], timeout_seconds)
    if diff_proc is not None and diff_proc.returncode == 0:
        return diff_proc.stdout

    # Fallback for unborn-HEAD repos: staged changes first, then the worktree.
    head_proc = _run_git(repo_root, ["rev-parse", "--verify", "--quiet", "HEAD"], timeout_seconds)
    if head_proc is None or head_proc.returncode == 0:
        return None
    staged_proc = _run_git(repo_root, ["diff", "--numstat", "-z", "-M", "--cached"], timeout_seconds)
    unstaged_proc = _run_git(repo_root, ["diff", "--numstat", "-z", "-M"], timeout_seconds)
    outputs: list[str] = []
    for proc in (staged_proc, unstaged_proc):
        if proc is None or proc.returncode != 0:
            return None
        outputs.append(proc.stdout)
    return "".join(outputs)


def collect_git_status(directory: Path, timeout_seconds: float | None = None) -> dict[str, StatusRecord] | None:
    """Return per-child status records for ``directory``.

    ``None`` means status is unavailable: the directory is not inside a git
    worktree, git is missing, or either git command failed.
    """
    directory = directory.resolve()
    repo_root = resolve_repo_root(directory, timeout_seconds)
    if repo_root is None or not directory.is_relative_to(repo_root):
        return None

    status_proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=all"],
        timeout_seconds,
    )
    if status_proc is None or status_proc.returncode != 0:
        return None
    numstat = _numstat_output(repo_root, timeout_seconds)
    if numstat is None:
        return None

    records = merge_numstat(parse_porcelain_status(status_proc.stdout), numstat)
    prefix = PurePosixPath(directory.relative_to(repo_root).as_posix())
    return scope_status_records(records, prefix)


def format_status_suffix(record: StatusRecord, theme: UITheme | None = None) -> Cell:
    """Render ``record`` as a parenthesized change summary.

    Clean records have no visible suffix text; their styled form is a neutral
    ``(clean)`` label.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if record.is_clean:
        return Cell(text="", styled=colorize("(clean)", active_theme.status_clean, reset))

    tokens: list[Cell] = []
    if record.untracked and record.added is None:
        tokens.append(Cell.colored("+?", active_theme.status_untracked, reset))
    if record.added is not None:
        tokens.append(Cell.colored(f"+{record.added}", active_theme.status_added, reset))
    if record.deleted is not None:
        tokens.append(Cell.colored(f"-{record.deleted}", active_theme.status_deleted, reset))
    if not tokens:
        tokens.append(Cell.colored("dirty", active_theme.status_dirty, reset))

    text = " ".join(token.text for token in tokens)
    styled = " ".join(token.styled for token in tokens)
    return Cell(text=f"({text})", styled=f"({styled})")


__all__ = [
    "StatusRecord",
    "collect_git_status",
    "combine_records",
    "format_status_suffix",
    "merge_numstat",
    "parse_porcelain_status",
    "resolve_repo_root",
    "scope_status_records",
]

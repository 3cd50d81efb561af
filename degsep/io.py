"""Edge-list input helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import GraphFormatError, InputError
from .graph import AdjacencyList, Edge, build_adjacency

EdgeList = List[Edge]


def _parse_id(text: str, path: Path, lineno: int) -> int:
    try:
        value = int(text.strip())
    except ValueError as exc:
        raise GraphFormatError(f"{path}:{lineno}: invalid vertex id {text.strip()!r}") from exc
    if value < 0:
        raise GraphFormatError(f"{path}:{lineno}: negative vertex id {value}")
    return value


def _read_csv(path: Path, has_header: bool) -> EdgeList:
    """Read a comma- or tab-separated edge file.

    The first two columns of each row are the endpoint ids; any further
    columns are ignored. Blank lines and lines starting with ``#`` are
    skipped. When ``has_header`` is set, the first remaining line is the
    header row and is not parsed.

    Args:
        path: Path to the edge file.
        has_header: Whether the file starts with a header row.

    Returns:
        The edges in file order.

    Raises:
        GraphFormatError: If a row has fewer than two columns or a
            non-integer id.
    """
    edges: EdgeList = []
    header_pending = has_header
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            if header_pending:
                header_pending = False
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) < 2:
                raise GraphFormatError(f"{path}:{lineno}: expected two columns, got {row!r}")
            edges.append((_parse_id(parts[0], path, lineno), _parse_id(parts[1], path, lineno)))
    return edges


def _read_jsonl(path: Path, has_header: bool) -> EdgeList:
    """Read JSON Lines where each object carries ``u`` and ``v`` ids."""
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                u, v = obj["u"], obj["v"]
            except (ValueError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: malformed edge object") from exc
            edges.append((_parse_id(str(u), path, lineno), _parse_id(str(v), path, lineno)))
    return edges


_FMT_READERS: Dict[str, Callable[[Path, bool], EdgeList]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}


def _detect_format(path: Path) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv", ".txt"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    return None


def read_edges(path: str, fmt: Optional[str] = None, has_header: bool = True) -> EdgeList:
    """Read an undirected edge list from ``path``.

    Args:
        path: The edge file.
        fmt: ``"csv"`` or ``"jsonl"``; auto-detected from the extension when
            ``None``.
        has_header: Whether a CSV file starts with a header row.

    Returns:
        Edges as ``(a, b)`` tuples, duplicates and self-loops included.

    Raises:
        InputError: If the file does not exist.
        GraphFormatError: If the format is unknown, a row is malformed, or no
            edge is found.
    """
    p = Path(path)
    if not p.exists():
        raise InputError(f"edges file not found: {path}")
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError("unknown edge file format")
    edges = _FMT_READERS[fmt](p, has_header)
    if not edges:
        raise GraphFormatError("no edges parsed from file")
    return edges


def read_graph(
    path: str, fmt: Optional[str] = None, has_header: bool = True
) -> Tuple[EdgeList, AdjacencyList]:
    """Read an edge file and build its adjacency."""
    edges = read_edges(path, fmt=fmt, has_header=has_header)
    return edges, build_adjacency(edges)


__all__ = ["EdgeList", "read_edges", "read_graph"]

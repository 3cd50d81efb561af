import json

import pytest

from degsep.exceptions import GraphFormatError, InputError
from degsep.io import read_edges, read_graph


def test_read_csv_with_header(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("id_1,id_2\n0,23977\n1,34526\n1,2370\n", encoding="utf-8")
    assert read_edges(str(path)) == [(0, 23977), (1, 34526), (1, 2370)]


def test_read_csv_without_header_extra_columns_and_comments(tmp_path):
    path = tmp_path / "edges.tsv"
    path.write_text("# comment\n\n1\t2\t0.5\n2\t3\tfoo\n", encoding="utf-8")
    assert read_edges(str(path), has_header=False) == [(1, 2), (2, 3)]


def test_read_keeps_duplicates_and_loops(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("a,b\n1,1\n1,2\n1,2\n", encoding="utf-8")
    assert read_edges(str(path)) == [(1, 1), (1, 2), (1, 2)]


def test_read_jsonl(tmp_path):
    path = tmp_path / "edges.jsonl"
    path.write_text("\n".join(json.dumps({"u": u, "v": v}) for u, v in [(0, 1), (1, 2)]), encoding="utf-8")
    assert read_edges(str(path)) == [(0, 1), (1, 2)]


def test_bad_row_raises(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("a,b\n1,2\n3,x\n", encoding="utf-8")
    with pytest.raises(GraphFormatError, match=":3:"):
        read_edges(str(path))


def test_negative_id_raises(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("a,b\n1,-2\n", encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_edges(str(path))


def test_single_column_raises(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("a,b\n7\n", encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_edges(str(path))


def test_malformed_jsonl_raises(tmp_path):
    path = tmp_path / "edges.jsonl"
    path.write_text('{"u": 1}\n', encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_edges(str(path))


def test_header_only_file_has_no_edges(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("a,b\n", encoding="utf-8")
    with pytest.raises(GraphFormatError, match="no edges"):
        read_edges(str(path))


def test_unknown_format(tmp_path):
    path = tmp_path / "edges.bin"
    path.write_bytes(b"\x00")
    with pytest.raises(GraphFormatError):
        read_edges(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(InputError):
        read_edges(str(tmp_path / "nope.csv"))


def test_read_graph(tmp_path, diamond_edges):
    path = tmp_path / "diamond.csv"
    path.write_text("a,b\n" + "".join(f"{a},{b}\n" for a, b in diamond_edges), encoding="utf-8")
    edges, adjacency = read_graph(str(path))
    assert len(edges) == 5
    assert adjacency.num_vertices == 4

from concurrent.futures import ThreadPoolExecutor

import pytest
from graphsynth import Chunk, MergeRangeException, MergeTask, copy_rows, merge_chunk, plan_merge
from graphsynth.chunk import EDGES_HEADER, NODES_HEADER

NODE_ROWS = [b"0|a\n1|bb\n", b"2\n3|c\n4\n", b"", b"5|dddd\n"]
EDGE_ROWS = [b"0|4\n0|5\n", b"", b"", b"5|0\n5|1\n5|2\n"]


@pytest.fixture
def chunk_files(tmp_path):
    (tmp_path / "nodes.csv").write_bytes(NODES_HEADER)
    (tmp_path / "edges.csv").write_bytes(EDGES_HEADER)
    chunks = []
    for index, (nodes, edges) in enumerate(zip(NODE_ROWS, EDGE_ROWS)):
        chunk = Chunk(index, index, index + 1)
        (tmp_path / "nodes_{}.csv".format(index)).write_bytes(nodes)
        (tmp_path / "edges_{}.csv".format(index)).write_bytes(edges)
        (tmp_path / "stats_{}.txt".format(index)).write_bytes(b"")
        chunks.append(chunk)
    return chunks


def merge_all(chunks, outdir, keep_stats=True):
    node_table, edge_table = plan_merge(chunks, outdir)
    tasks = [
        MergeTask(chunk, outdir, node_table.range_of(chunk.index), edge_table.range_of(chunk.index), keep_stats)
        for chunk in chunks
    ]
    # reverse order on purpose: placement must not depend on completion order
    with ThreadPoolExecutor(max_workers=len(tasks)) as pool:
        return list(pool.map(merge_chunk, reversed(tasks)))


def test_merge_concatenates_in_chunk_order(tmp_path, chunk_files):
    summaries = merge_all(chunk_files, str(tmp_path))

    assert (tmp_path / "nodes.csv").read_bytes() == NODES_HEADER + b"".join(NODE_ROWS)
    assert (tmp_path / "edges.csv").read_bytes() == EDGES_HEADER + b"".join(EDGE_ROWS)
    assert sum(summary.bytes_written for summary in summaries) == len(b"".join(NODE_ROWS + EDGE_ROWS))


def test_merge_removes_chunk_files_and_keeps_stats(tmp_path, chunk_files):
    merge_all(chunk_files, str(tmp_path))

    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "edges.csv",
        "nodes.csv",
        "stats_0.txt",
        "stats_1.txt",
        "stats_2.txt",
        "stats_3.txt",
    ]


def test_merge_discards_stats(tmp_path, chunk_files):
    merge_all(chunk_files, str(tmp_path), keep_stats=False)

    assert sorted(path.name for path in tmp_path.iterdir()) == ["edges.csv", "nodes.csv"]


def test_copy_rows_rejects_overflow(tmp_path):
    (tmp_path / "src").write_bytes(b"1\n22\n")
    (tmp_path / "dst").write_bytes(b"\0" * 10)

    with pytest.raises(MergeRangeException):
        copy_rows(str(tmp_path / "src"), str(tmp_path / "dst"), (0, 4))
    assert (tmp_path / "dst").read_bytes()[4:] == b"\0" * 6


def test_copy_rows_rejects_gap(tmp_path):
    (tmp_path / "src").write_bytes(b"1\r\n")
    (tmp_path / "dst").write_bytes(b"\0" * 3)

    with pytest.raises(MergeRangeException):
        copy_rows(str(tmp_path / "src"), str(tmp_path / "dst"), (0, 3))


def test_copy_rows_terminates_last_row(tmp_path):
    (tmp_path / "src").write_bytes(b"1\n2")
    (tmp_path / "dst").write_bytes(b"H\n" + b"\0" * 4)

    assert copy_rows(str(tmp_path / "src"), str(tmp_path / "dst"), (2, 6)) == 4
    assert (tmp_path / "dst").read_bytes() == b"H\n1\n2\n"

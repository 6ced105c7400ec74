import pytest
from graphsynth import Chunk, IncorrectParametersException, partition


@pytest.mark.parametrize("n_nodes", [0, 1, 2, 7, 9, 10, 100, 101, 1023])
@pytest.mark.parametrize("num_chunks", [1, 2, 3, 8, 16])
def test_partition_covers_all_ids_in_order(n_nodes, num_chunks):
    chunks = partition(n_nodes, num_chunks)

    assert len(chunks) == num_chunks
    assert [chunk.index for chunk in chunks] == list(range(num_chunks))
    assert chunks[0].start == 0
    assert chunks[-1].end == n_nodes
    for previous, current in zip(chunks, chunks[1:]):
        assert previous.end == current.start
    assert [node for chunk in chunks for node in range(chunk.start, chunk.end)] == list(range(n_nodes))


def test_last_chunk_absorbs_remainder():
    assert partition(10, 3) == [Chunk(0, 0, 3), Chunk(1, 3, 6), Chunk(2, 6, 10)]


def test_fewer_nodes_than_chunks():
    chunks = partition(2, 4)
    assert [len(chunk) for chunk in chunks] == [0, 0, 0, 2]


def test_chunk_paths(tmp_path):
    chunk = Chunk(3, 30, 40)
    assert chunk.nodes_path(str(tmp_path)) == str(tmp_path / "nodes_3.csv")
    assert chunk.edges_path(str(tmp_path)) == str(tmp_path / "edges_3.csv")
    assert chunk.stats_path(str(tmp_path)) == str(tmp_path / "stats_3.txt")
    assert 30 in chunk
    assert 40 not in chunk


@pytest.mark.parametrize("n_nodes, num_chunks", [(10, 0), (-1, 2)])
def test_partition_rejects_bad_input(n_nodes, num_chunks):
    with pytest.raises(IncorrectParametersException):
        partition(n_nodes, num_chunks)

import io

import pytest
from hypothesis import given, strategies as st

from algorithmia.floyd import INF, floyd_warshall, format_matrix, main

GRAPH = [
    [0, 3, INF, 7],
    [8, 0, 2, INF],
    [5, INF, 0, 1],
    [2, INF, INF, 0],
]
SHORTEST = [
    [0, 3, 5, 6],
    [5, 0, 2, 3],
    [3, 6, 0, 1],
    [2, 5, 7, 0],
]


@st.composite
def graphs(draw):
    n = draw(st.integers(min_value=1, max_value=5))
    weight = st.one_of(st.just(INF), st.integers(min_value=0, max_value=50))
    rows = [draw(st.lists(weight, min_size=n, max_size=n)) for _ in range(n)]
    for i, row in enumerate(rows):
        row[i] = 0
    return rows


def test_worked_example():
    assert floyd_warshall(GRAPH) == SHORTEST


def test_input_is_not_modified():
    graph = [row[:] for row in GRAPH]
    floyd_warshall(graph)
    assert graph == GRAPH


def test_unreachable_stays_infinite():
    graph = [[0, 4], [INF, 0]]
    assert floyd_warshall(graph) == [[0, 4], [INF, 0]]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


@given(graphs())
def test_triangle_inequality(graph):
    dist = floyd_warshall(graph)
    n = len(dist)
    for i in range(n):
        for j in range(n):
            for k in range(n):
                if dist[i][k] != INF and dist[k][j] != INF:
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


@given(graphs())
def test_never_longer_than_direct_edge(graph):
    dist = floyd_warshall(graph)
    for row, original in zip(dist, graph):
        for value, weight in zip(row, original):
            assert value <= weight


@given(graphs())
def test_idempotent(graph):
    once = floyd_warshall(graph)
    assert floyd_warshall(once) == once


def test_format_matrix_trailing_spaces():
    assert format_matrix([[0, INF], [1, 0]]) == "0 999 \n1 0 \n"


def test_main_prints_distances(monkeypatch, capsys):
    text = " ".join(str(w) for row in GRAPH for w in row)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == format_matrix(SHORTEST)


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 1 2"))
    assert main([]) == 1
    assert "expected 16" in capsys.readouterr().err
import io

import pytest

from dsalgos.prims import CityGraph, main

_EDGES = [(0, 1, 4), (0, 2, 1), (1, 2, 2), (1, 3, 5), (2, 3, 8), (3, 4, 3), (2, 4, 9)]


def _triangle():
    graph = CityGraph(3)
    graph.connect(0, 1, 1)
    graph.connect(1, 2, 2)
    graph.connect(0, 2, 3)
    return graph


def _five():
    graph = CityGraph(5)
    for first, second, cost in _EDGES:
        graph.connect(first, second, cost)
    return graph


def test_format_unconnected():
    assert CityGraph(2).format_matrix() == "0 ∞ \n∞ 0 "


def test_connect_is_symmetric():
    graph = CityGraph(2)
    graph.connect(0, 1, 7)
    assert graph.format_matrix() == "0 7 \n7 0 "


def test_triangle_tree():
    tree = _triangle().prim(0)
    assert tree.total == 3
    assert {frozenset((e.source, e.target)) for e in tree.edges} == {
        frozenset({0, 1}),
        frozenset({1, 2}),
    }


@pytest.mark.parametrize("start", range(5))
def test_tree_invariants(start):
    tree = _five().prim(start)
    assert len(tree.edges) == 4
    assert tree.total == sum(edge.cost for edge in tree.edges)
    joined = {start}
    for edge in tree.edges:
        assert edge.source in joined
        assert edge.target not in joined
        joined.add(edge.target)
    assert joined == set(range(5))


def test_tree_edges_exist_in_graph():
    costs = {frozenset((a, b)): c for a, b, c in _EDGES}
    for edge in _five().prim(0).edges:
        assert costs[frozenset((edge.source, edge.target))] == edge.cost


def test_total_independent_of_start():
    graph = _five()
    totals = {graph.prim(start).total for start in range(5)}
    assert len(totals) == 1


def test_single_city():
    tree = CityGraph(1).prim(0)
    assert tree.edges == ()
    assert tree.total == 0


def test_disconnected_raises():
    graph = CityGraph(3)
    graph.connect(0, 1, 5)
    with pytest.raises(ValueError):
        graph.prim(0)


@pytest.mark.parametrize("start", [-1, 3])
def test_bad_start_raises(start):
    with pytest.raises(ValueError):
        _triangle().prim(start)


@pytest.mark.parametrize("cities", [0, 21])
def test_city_count_limits(cities):
    with pytest.raises(ValueError):
        CityGraph(cities)


def test_connect_rejects_self_and_unknown():
    graph = CityGraph(3)
    with pytest.raises(ValueError):
        graph.connect(1, 1, 4)
    with pytest.raises(ValueError):
        graph.connect(0, 5, 4)


def test_main_prints_tree(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\ny\n1\nn\ny\n2\n1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "City 1 -> City 2 (Cost: 1)" in out
    assert "Total cost of the Minimum Spanning Tree: 3" in out


def test_main_rejects_start(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nn\n5\n"))
    assert main([]) == 1
    assert "Invalid starting city!" in capsys.readouterr().out
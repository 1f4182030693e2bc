import random

import networkx as nx
import pytest

from algoritmo_de_busca.shortest_path_search import shortest_path_search
from classes_de_elementos.distance_index import DistanceIndex
from classes_de_elementos.road_segment import RoadSegment


def test_search_runs_backward_from_origin(chain_index):
    nodes = shortest_path_search("C", ["A", "B", "C"], chain_index)
    assert nodes["C"].weight == 0 and nodes["C"].predecessor is None
    assert nodes["B"].weight == 2 and nodes["B"].predecessor == "C"
    assert nodes["A"].weight == 6 and nodes["A"].predecessor == "B"


def test_unreachable_cities_keep_infinite_weight(chain_index):
    nodes = shortest_path_search("A", ["A", "B", "C", "D"], chain_index)
    assert nodes["A"].weight == 0
    for city_id in ("B", "C", "D"):
        assert nodes[city_id].weight == float("inf")
        assert nodes[city_id].predecessor is None
        assert not nodes[city_id].visited


def test_relaxation_uses_minimum_parallel_edge():
    index = DistanceIndex.from_segments([
        RoadSegment("S", "T", 3),
        RoadSegment("S", "T", 7),
        RoadSegment("S", "T", 5),
    ])
    nodes = shortest_path_search("T", ["S", "T"], index)
    assert nodes["S"].weight == 3


def test_longer_direct_road_loses_to_detour():
    index = DistanceIndex.from_segments([
        RoadSegment("A", "C", 10),
        RoadSegment("A", "B", 3),
        RoadSegment("B", "C", 3),
    ])
    nodes = shortest_path_search("C", ["A", "B", "C"], index)
    assert nodes["A"].weight == 6
    assert nodes["A"].predecessor == "B"


def test_weight_ties_resolved_by_city_order():
    # A e B chegam a C com 5; D chega por A ou por B com o mesmo custo
    index = DistanceIndex.from_segments([
        RoadSegment("A", "C", 5),
        RoadSegment("B", "C", 5),
        RoadSegment("D", "A", 1),
        RoadSegment("D", "B", 1),
    ])
    nodes = shortest_path_search("C", ["B", "A", "C", "D"], index)
    assert nodes["D"].weight == 6
    assert nodes["D"].predecessor == "B"


def test_each_search_allocates_fresh_state(chain_index):
    first = shortest_path_search("C", ["A", "B", "C"], chain_index)
    second = shortest_path_search("B", ["A", "B", "C"], chain_index)
    assert first["A"].weight == 6
    assert second["A"].weight == 4
    assert second["C"].weight == float("inf")


def test_unknown_origin_raises(chain_index):
    with pytest.raises(ValueError):
        shortest_path_search("Z", ["A", "B", "C"], chain_index)


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_matches_networkx_dijkstra_on_random_graphs(seed):
    rng = random.Random(seed)
    city_ids = [f"c{i}" for i in range(25)]
    segments = [
        RoadSegment(rng.choice(city_ids), rng.choice(city_ids), rng.randint(0, 30))
        for _ in range(80)
    ]
    index = DistanceIndex.from_segments(segments)
    G = index.to_networkx()
    G.add_nodes_from(city_ids)

    origin = city_ids[0]
    expected = nx.single_source_dijkstra_path_length(G.reverse(copy=True), origin, weight="d")
    nodes = shortest_path_search(origin, city_ids, index)

    for city_id in city_ids:
        assert nodes[city_id].weight == expected.get(city_id, float("inf"))


def test_road_from_unlisted_city_raises_value_error(chain_index):
    with pytest.raises(ValueError, match="A"):
        shortest_path_search("C", ["B", "C"], chain_index)

import pytest

from classes_de_elementos.distance_index import DistanceIndex
from classes_de_elementos.erros import ParseError
from classes_de_elementos.road_segment import RoadSegment


def test_index_is_keyed_by_destination_then_source(chain_index):
    assert chain_index.backward == {"B": {"A": [4]}, "C": {"B": [2]}}
    assert chain_index.sources_into("A") == {}


def test_parallel_edges_kept_and_sorted_numerically():
    index = DistanceIndex.from_segments([
        RoadSegment("X", "Y", 3),
        RoadSegment("X", "Y", 10),
        RoadSegment("X", "Y", 7),
        RoadSegment("X", "Y", 5),
    ])
    assert index.sources_into("Y")["X"] == [3, 5, 7, 10]
    assert index.min_distance("X", "Y") == 3
    assert index.min_distance("Y", "X") is None
    assert index.segment_count() == 4


def test_negative_distance_rejected():
    with pytest.raises(ParseError):
        DistanceIndex.from_segments([RoadSegment("X", "Y", -1)])


def test_load_distances_text(tmp_path):
    path = tmp_path / "distances.txt"
    path.write_text('"São Paulo" "Campinas" 95\n\n# comentário\nA B 4\n"São Paulo" "Campinas" 90\n', encoding="utf-8")
    index = DistanceIndex.load_distances(str(path))
    assert index.sources_into('"Campinas"') == {'"São Paulo"': [90, 95]}
    assert index.min_distance("A", "B") == 4
    assert index.city_ids() == {'"São Paulo"', '"Campinas"', "A", "B"}


@pytest.mark.parametrize("line", [
    "A B",
    "A B 4 5",
    "A B x",
    "A B 4.5",
    "A B -3",
    '"A B 4',
])
def test_load_distances_rejects_malformed_line(tmp_path, line):
    path = tmp_path / "distances.txt"
    path.write_text(f"A C 1\n{line}\n", encoding="utf-8")
    with pytest.raises(ParseError, match="Linha 2"):
        DistanceIndex.load_distances(str(path))


def test_load_csv_ignores_extra_columns(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("u,v,d,name,highway\n1,2,40,Rua A,residential\n1,2,30,Rua B,primary\n2,3,5,,service\n",
                    encoding="utf-8")
    index = DistanceIndex.load_csv(str(path))
    assert index.sources_into("2") == {"1": [30, 40]}
    assert index.min_distance("2", "3") == 5


def test_load_csv_requires_columns(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("u,v\n1,2\n", encoding="utf-8")
    with pytest.raises(ParseError, match="d"):
        DistanceIndex.load_csv(str(path))


def test_load_csv_rejects_bad_distance(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("u,v,d\n1,2,3\n2,3,abc\n", encoding="utf-8")
    with pytest.raises(ParseError, match="Linha 3"):
        DistanceIndex.load_csv(str(path))


def test_to_networkx_uses_road_direction_and_min_distance():
    index = DistanceIndex.from_segments([
        RoadSegment("A", "B", 9),
        RoadSegment("A", "B", 4),
        RoadSegment("B", "C", 2),
    ])
    G = index.to_networkx()
    assert G.has_edge("A", "B") and not G.has_edge("B", "A")
    assert G["A"]["B"]["d"] == 4
    assert G["A"]["B"]["parallel"] == 2

import pytest

from classes_de_elementos.distance_index import DistanceIndex
from classes_de_elementos.road_segment import RoadSegment


@pytest.fixture
def write_inputs(tmp_path):
    """Grava os três arquivos de entrada e devolve seus caminhos."""
    def _write(stores: str, destinations: str, distances: str, suffix: str = "txt"):
        paths = []
        for name, content in (("stores", stores), ("destinations", destinations), ("distances", distances)):
            path = tmp_path / f"{name}.{suffix}"
            path.write_text(content, encoding="utf-8")
            paths.append(str(path))
        return tuple(paths)
    return _write


@pytest.fixture
def chain_index():
    # A -> B (4), B -> C (2)
    return DistanceIndex.from_segments([
        RoadSegment("A", "B", 4),
        RoadSegment("B", "C", 2),
    ])

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from algoritmo_de_busca.shortest_path_search import shortest_path_search
from classes_de_elementos.distance_index import DistanceIndex
from classes_de_elementos.erros import PathNotFound
from classes_de_elementos.search_node import SearchNode
from constantes.constantes import INFINITY

@dataclass(frozen=True)
class PathEntry:
    '''Parada da rota e a distância até a próxima parada (0 no destino).'''
    city_id: str
    distance: int

@dataclass(frozen=True)
class NearestStoreResult:
    store_id: str
    path_length: int
    path: List[PathEntry]

def _reconstruct_path(nodes: Dict[str, SearchNode], store_id: str,
                      destination_id: str, distance_index: DistanceIndex) -> List[PathEntry]:
    '''
    Segue os predecessores do armazém até o destino. Cada salto usa o menor
    trecho paralelo da estrada atual -> predecessor.
    '''
    path: List[PathEntry] = []
    cursor = nodes[store_id]
    while cursor.predecessor is not None:
        hop = distance_index.min_distance(cursor.city_id, cursor.predecessor)
        path.append(PathEntry(cursor.city_id, hop))
        cursor = nodes[cursor.predecessor]
    path.append(PathEntry(destination_id, 0))
    return path

def find_nearest_store(destination_id: str, city_ids: Iterable[str],
                       store_ids: Iterable[str], distance_index: DistanceIndex) -> NearestStoreResult:
    '''
    Procura o armazém mais próximo (pela malha) do ponto de entrega informado.

    Parâmetros
    ----------
    destination_id : str (cidade que precisa da entrega)
    city_ids       : Iterable[str] (todas as cidades)
    store_ids      : Iterable[str] (cidades com armazém)
    distance_index : DistanceIndex (índice reverso de trechos)

    Retorno
    -------
    NearestStoreResult :
        store_id    - cidade do armazém escolhido
        path_length - distância total do armazém até o destino
        path        - rota armazém→destino com a distância de cada salto

    Observações
    -----------
    - Empate entre armazéns: vence o primeiro de store_ids.
    - Nenhum armazém alcançável (ou nenhum armazém): PathNotFound.
    '''

    nodes = shortest_path_search(destination_id, city_ids, distance_index)

    nearest: Optional[SearchNode] = None
    for store_id in store_ids:
        node = nodes[store_id]
        if nearest is None or node.weight < nearest.weight:
            nearest = node

    if nearest is None or nearest.weight == INFINITY:
        raise PathNotFound(destination_id)

    return NearestStoreResult(
        store_id=nearest.city_id,
        path_length=nearest.weight,
        path=_reconstruct_path(nodes, nearest.city_id, destination_id, distance_index),
    )

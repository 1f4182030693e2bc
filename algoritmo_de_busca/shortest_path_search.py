from typing import Dict, Iterable, Optional

from classes_de_elementos.distance_index import DistanceIndex
from classes_de_elementos.search_node import SearchNode
from constantes.constantes import INFINITY

def _closest_unvisited(nodes: Dict[str, SearchNode]) -> Optional[SearchNode]:
    '''
    Varredura linear pelo nó não visitado de menor peso.
    Em empate vence o primeiro na ordem do cadastro.
    '''
    best: Optional[SearchNode] = None
    for node in nodes.values():
        if node.visited:
            continue
        if best is None or node.weight < best.weight:
            best = node
    return best

def shortest_path_search(origin_id: str, city_ids: Iterable[str],
                         distance_index: DistanceIndex) -> Dict[str, SearchNode]:
    '''
    Dijkstra de origem única sobre o índice reverso: parte de origin_id
    (um ponto de entrega) e descobre de quais cidades se chega até ele.

    Parâmetros
    ----------
    origin_id      : str (cidade de partida da busca)
    city_ids       : Iterable[str] (todas as cidades, na ordem do cadastro)
    distance_index : DistanceIndex

    Retorno
    -------
    dict[str, SearchNode] : estado final de cada cidade; as não alcançadas
                            ficam com weight = inf e predecessor = None

    Observações
    -----------
    - Sem fila de prioridade: cada iteração varre todos os nós (O(V²)).
    - Relaxa sempre com o menor trecho paralelo (posição 0 da lista ordenada).
    - Distâncias negativas não são suportadas (o índice já as rejeita).
    '''

    nodes: Dict[str, SearchNode] = {city_id: SearchNode(city_id) for city_id in city_ids}
    if origin_id not in nodes:
        raise ValueError(f"Cidade de origem desconhecida: {origin_id}")
    nodes[origin_id].weight = 0

    while True:
        current = _closest_unvisited(nodes)
        if current is None or current.weight == INFINITY:
            break
        current.visited = True

        for source_id, distances in distance_index.sources_into(current.city_id).items():
            neighbor = nodes.get(source_id)
            if neighbor is None:
                raise ValueError(f"Trecho {source_id} -> {current.city_id} cita cidade fora da lista: {source_id}")
            candidate_weight = current.weight + distances[0]
            if not neighbor.visited and candidate_weight < neighbor.weight:
                neighbor.weight = candidate_weight
                neighbor.predecessor = current.city_id

    return nodes

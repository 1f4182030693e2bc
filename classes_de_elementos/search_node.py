from dataclasses import dataclass
from typing import Optional

from constantes.constantes import INFINITY

@dataclass
class SearchNode:
    '''
    Estado transitório de uma cidade durante UMA execução do Dijkstra.

    - weight      : distância acumulada até a origem da busca
    - visited     : já foi fixada pelo laço principal
    - predecessor : id da cidade seguinte rumo à origem (None na origem
                    e nas cidades não alcançadas)
    '''
    city_id: str
    weight: float = INFINITY
    visited: bool = False
    predecessor: Optional[str] = None

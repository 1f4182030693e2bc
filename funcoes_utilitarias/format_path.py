from typing import List

from algoritmo_de_busca.nearest_store_resolver import PathEntry
from constantes.constantes import PATH_SEPARATOR

def format_path(path: List[PathEntry]) -> str:
    '''
    Formata a rota alternando cidade e distância do salto:
    "A -> 4 -> B -> 2 -> C". A distância 0 do destino final é omitida.

    Parâmetros
    ----------
    path : list[PathEntry] (armazém→destino)

    Retorno
    -------
    str : rota pronta para a linha "path:"
    '''

    parts: List[str] = []
    for entry in path:
        parts.extend([entry.city_id, str(entry.distance)])
    return PATH_SEPARATOR.join(parts[:-1])

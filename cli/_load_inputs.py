import logging
from typing import Tuple

from classes_de_elementos.city_catalog import CityCatalog
from classes_de_elementos.distance_index import DistanceIndex

def _load_inputs(stores_path: str, destinations_path: str, distances_path: str,
                 input_format: str = "txt") -> Tuple[CityCatalog, DistanceIndex]:
    '''
    Lê cadastro e trechos no formato pedido e confere que os trechos só
    citam cidades cadastradas.

    Parâmetros
    ----------
    stores_path, destinations_path, distances_path : str
    input_format : str ('txt' | 'csv')

    Retorno
    -------
    (CityCatalog, DistanceIndex)
    '''

    if input_format == "csv":
        catalog = CityCatalog.load_csv(stores_path, destinations_path)
        distance_index = DistanceIndex.load_csv(distances_path)
    elif input_format == "txt":
        catalog = CityCatalog.load(stores_path, destinations_path)
        distance_index = DistanceIndex.load_distances(distances_path)
    else:
        raise ValueError(f"Formato de entrada inválido: {input_format!r}. Use 'txt' ou 'csv'.")

    catalog.check_distance_index(distance_index)
    logging.debug("Índice com %d trechos em %d cidades de chegada",
                  distance_index.segment_count(), len(distance_index.backward))
    return catalog, distance_index

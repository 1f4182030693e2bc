import logging
from typing import Tuple

from algoritmo_de_busca.nearest_store_resolver import find_nearest_store
from classes_de_elementos.erros import PathNotFound
from cli._load_inputs import _load_inputs
from funcoes_utilitarias.format_report_block import format_not_found_block, format_report_block
from funcoes_utilitarias.open_report import open_report

def cli_nearest_store(stores_path: str, destinations_path: str, distances_path: str,
                      output_txt: str, input_format: str = "txt") -> Tuple[int, int]:
    '''
    Resolve o armazém mais próximo de cada ponto de entrega e grava o relatório,
    um bloco por destino, na ordem do arquivo de destinos.

    Parâmetros
    ----------
    stores_path       : str (cidades e flag de armazém)
    destinations_path : str (cidades e flag de entrega)
    distances_path    : str (trechos de estrada)
    output_txt        : str (relatório; "-" para saída padrão)
    input_format      : str ('txt' | 'csv')

    Retorno
    -------
    (int, int) : (destinos resolvidos, destinos sem caminho)

    Observações
    -----------
    - Erro de leitura (ParseError) interrompe tudo antes de gravar o relatório.
    - PathNotFound vira uma linha no relatório e o laço segue.
    '''

    catalog, distance_index = _load_inputs(stores_path, destinations_path, distances_path, input_format)

    resolved, not_found = 0, 0
    with open_report(output_txt) as write:
        for destination_id in catalog.destination_ids:
            try:
                result = find_nearest_store(destination_id, catalog.city_ids,
                                            catalog.store_ids, distance_index)
            except PathNotFound as exc:
                logging.warning("Sem armazém alcançável para %s", destination_id)
                lines = format_not_found_block(exc)
                not_found += 1
            else:
                logging.debug("%s -> armazém %s (%s)", destination_id, result.store_id, result.path_length)
                lines = format_report_block(destination_id, result)
                resolved += 1
            for line in lines:
                write(line)

    logging.info("Destinos resolvidos: %d | sem caminho: %d", resolved, not_found)
    return resolved, not_found

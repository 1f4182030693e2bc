from typing import List

from algoritmo_de_busca.nearest_store_resolver import NearestStoreResult
from classes_de_elementos.erros import PathNotFound
from funcoes_utilitarias.format_path import format_path

def format_report_block(destination_id: str, result: NearestStoreResult) -> List[str]:
    '''
    Linhas do relatório para um destino resolvido: id, armazém, distância,
    rota e uma linha em branco de separação.
    '''

    return [
        destination_id,
        f"store: {result.store_id}",
        f"distance: {result.path_length}",
        f"path: {format_path(result.path)}",
        "",
    ]

def format_not_found_block(error: PathNotFound) -> List[str]:
    '''Linha "<destino>: path not found" seguida da linha em branco.'''
    return [str(error), ""]

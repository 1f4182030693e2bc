import networkx as nx

from cli._load_inputs import _load_inputs

def cli_stats(stores_path: str, destinations_path: str, distances_path: str,
              input_format: str = "txt") -> None:
    '''
    Carrega cadastro e trechos e imprime estatísticas básicas: |V|, |E|,
    armazéns, destinos e componentes fracamente conexas.

    Parâmetros
    ----------
    stores_path       : str
    destinations_path : str
    distances_path    : str
    input_format      : str ('txt' | 'csv')

    Retorno
    -------
    None
    '''

    catalog, distance_index = _load_inputs(stores_path, destinations_path, distances_path, input_format)
    G = distance_index.to_networkx()
    G.add_nodes_from(catalog.city_ids)
    print(f"Malha |V|={G.number_of_nodes()} |E|={distance_index.segment_count()} "
          f"armazéns={len(catalog.store_ids)} destinos={len(catalog.destination_ids)} "
          f"componentes={nx.number_weakly_connected_components(G)}")

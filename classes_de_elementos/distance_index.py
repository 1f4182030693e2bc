import logging
from typing import Dict, Iterable, List, Optional, Set

import networkx as nx

from classes_de_elementos.erros import ParseError
from classes_de_elementos.road_segment import RoadSegment
from funcoes_utilitarias._parse_distance import _parse_distance
from funcoes_utilitarias._read_csv_table import _read_csv_table
from funcoes_utilitarias._read_record_lines import _read_record_lines
from funcoes_utilitarias._split_record_line import _split_record_line

EDGE_CSV_COLUMNS = ("u", "v", "d")

class DistanceIndex:
    '''
    Índice reverso de distâncias da malha rodoviária dirigida.
    - backward[dest_id][source_id] = distâncias (ordem crescente) de todos os
      trechos source_id -> dest_id
    - backward[dest_id][source_id][0] é sempre o menor trecho paralelo

    Observações
    -----------
    O índice é chaveado pelo FIM da estrada para que a busca parta do ponto de
    entrega e caminhe "para trás" até os armazéns. Depois de construído não é
    mais alterado.
    '''
    def __init__(self) -> None:
        '''
        Inicializa o índice vazio.
        '''
        self.backward: Dict[str, Dict[str, List[int]]] = {}

    @classmethod
    def from_segments(cls, segments: Iterable[RoadSegment]) -> "DistanceIndex":
        '''
        Constrói o índice a partir dos trechos, sem deduplicar paralelos.

        Parâmetros
        ----------
        segments : Iterable[RoadSegment]

        Retorno
        -------
        DistanceIndex : instância pronta para consulta
        '''
        index = cls()
        for segment in segments:
            if segment.distance < 0:
                raise ParseError(
                    f"Trecho inválido: {segment.source_id} -> {segment.dest_id} | erro: distância negativa {segment.distance}"
                )
            sources = index.backward.setdefault(segment.dest_id, {})
            sources.setdefault(segment.source_id, []).append(segment.distance)

        for sources in index.backward.values():
            for distances in sources.values():
                distances.sort()
        return index

    @classmethod
    def load_distances(cls, distances_txt: str) -> "DistanceIndex":
        '''
        Lê o arquivo texto de trechos "<origem> <destino> <distância>".

        Parâmetros
        ----------
        distances_txt : caminho do arquivo de distâncias

        Retorno
        -------
        DistanceIndex

        Observações
        -----------
        - Qualquer linha malformada interrompe a leitura com ParseError;
          um índice parcial nunca é devolvido.
        '''
        segments: List[RoadSegment] = []
        for line_number, line in _read_record_lines(distances_txt):
            source_id, dest_id, raw_distance = _split_record_line(line, line_number, 3, 3)
            segments.append(RoadSegment(source_id, dest_id, _parse_distance(raw_distance, line_number, line)))

        logging.info("Lidos %d trechos de %s", len(segments), distances_txt)
        return cls.from_segments(segments)

    @classmethod
    def load_csv(cls, edges_csv: str) -> "DistanceIndex":
        '''
        Lê o CSV de arestas (u,v,d[,name,highway...]); colunas extras são ignoradas.

        Parâmetros
        ----------
        edges_csv : caminho do CSV de arestas

        Retorno
        -------
        DistanceIndex
        '''
        edges_df = _read_csv_table(edges_csv)
        missing = [col for col in EDGE_CSV_COLUMNS if col not in edges_df.columns]
        if missing:
            raise ParseError(f"CSV de arestas {edges_csv} sem as colunas: {', '.join(missing)}")

        segments: List[RoadSegment] = []
        # linha 1 é o cabeçalho
        for row_number, (source_id, dest_id, raw_distance) in enumerate(
                zip(edges_df["u"], edges_df["v"], edges_df["d"]), start=2):
            source_id, dest_id = source_id.strip(), dest_id.strip()
            if not source_id or not dest_id:
                raise ParseError(f"Linha {row_number} inválida: {source_id!r},{dest_id!r},{raw_distance!r} | erro: id vazio")
            distance = _parse_distance(raw_distance, row_number, f"{source_id},{dest_id},{raw_distance}")
            segments.append(RoadSegment(source_id, dest_id, distance))

        logging.info("Lidos %d trechos de %s", len(segments), edges_csv)
        return cls.from_segments(segments)

    def sources_into(self, dest_id: str) -> Dict[str, List[int]]:
        '''
        Retorna {origem: distâncias} dos trechos que chegam em dest_id
        (vazio se nenhum trecho chega nele).
        '''
        return self.backward.get(dest_id, {})

    def min_distance(self, source_id: str, dest_id: str) -> Optional[int]:
        '''
        Menor distância entre os trechos paralelos source_id -> dest_id.

        Retorno
        -------
        int | None : None se não há trecho direto
        '''
        distances = self.sources_into(dest_id).get(source_id)
        return distances[0] if distances else None

    def segment_count(self) -> int:
        '''
        Retorno
        -------
        int : |E| contando cada trecho paralelo
        '''
        return sum(len(distances) for sources in self.backward.values() for distances in sources.values())

    def city_ids(self) -> Set[str]:
        '''Todas as cidades citadas em algum trecho (origem ou destino).'''
        ids: Set[str] = set(self.backward)
        for sources in self.backward.values():
            ids.update(sources)
        return ids

    def to_networkx(self) -> nx.DiGraph:
        '''
        Exporta o índice como nx.DiGraph no sentido real das estradas
        (u -> v), com o menor trecho paralelo no atributo 'd'.
        '''
        G = nx.DiGraph()
        G.add_nodes_from(self.city_ids())
        for dest_id, sources in self.backward.items():
            for source_id, distances in sources.items():
                G.add_edge(source_id, dest_id, d=distances[0], parallel=len(distances))
        return G

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from classes_de_elementos.city import City
from classes_de_elementos.distance_index import DistanceIndex
from classes_de_elementos.erros import ParseError
from funcoes_utilitarias._is_flag_on import _is_flag_on
from funcoes_utilitarias._read_csv_table import _read_csv_table
from funcoes_utilitarias._read_record_lines import _read_record_lines
from funcoes_utilitarias._split_record_line import _split_record_line

Record = Tuple[str, Optional[str]]

class CityCatalog:
    '''
    Catálogo de cidades: todas as cidades, os armazéns e os pontos de entrega.
    - city_ids        : ids na ordem do arquivo de cidades
    - store_ids       : subconjunto marcado como armazém (mesma ordem)
    - destination_ids : entregas na ordem do arquivo de destinos
    '''
    def __init__(self, cities: Dict[str, City], destination_ids: List[str]) -> None:
        self.cities = cities
        self.city_ids: List[str] = list(cities)
        self.store_ids: List[str] = [cid for cid, city in cities.items() if city.is_store]
        self.destination_ids = destination_ids

    @classmethod
    def from_records(cls, city_records: Iterable[Record],
                     destination_records: Iterable[Record]) -> "CityCatalog":
        '''
        Monta o catálogo a partir de pares (id, flag).

        Parâmetros
        ----------
        city_records        : Iterable[(id, flag|None)] (flag de armazém)
        destination_records : Iterable[(id, flag|None)] (flag de entrega)

        Retorno
        -------
        CityCatalog

        Observações
        -----------
        - Flag "0" desmarca; qualquer outro valor, ou ausência, marca.
        - Destinos com flag "0" são descartados sem erro.
        - Cidade repetida, destino repetido ou destino desconhecido: ParseError.
        '''
        store_flags: Dict[str, bool] = {}
        for city_id, flag in city_records:
            if city_id in store_flags:
                raise ParseError(f"Cidade repetida no cadastro: {city_id}")
            store_flags[city_id] = _is_flag_on(flag)

        destination_ids: List[str] = []
        for city_id, flag in destination_records:
            if not _is_flag_on(flag):
                continue
            if city_id not in store_flags:
                raise ParseError(f"Destino {city_id} não está no cadastro de cidades")
            if city_id in destination_ids:
                raise ParseError(f"Destino repetido: {city_id}")
            destination_ids.append(city_id)

        wanted = set(destination_ids)
        cities = {
            city_id: City(city_id, is_store, city_id in wanted)
            for city_id, is_store in store_flags.items()
        }
        return cls(cities, destination_ids)

    @staticmethod
    def _read_flag_records(file_path: str) -> List[Record]:
        records: List[Record] = []
        for line_number, line in _read_record_lines(file_path):
            fields = _split_record_line(line, line_number, 1, 2)
            records.append((fields[0], fields[1] if len(fields) > 1 else None))
        return records

    @classmethod
    def load(cls, stores_txt: str, destinations_txt: str) -> "CityCatalog":
        '''
        Lê os arquivos texto "<id> [flag]" de cidades e de destinos.
        '''
        catalog = cls.from_records(cls._read_flag_records(stores_txt),
                                   cls._read_flag_records(destinations_txt))
        logging.info("Cadastro: %d cidades, %d armazéns, %d destinos",
                     len(catalog.city_ids), len(catalog.store_ids), len(catalog.destination_ids))
        return catalog

    @staticmethod
    def _read_csv_records(file_path: str, flag_column: str) -> List[Record]:
        df = _read_csv_table(file_path)
        if "city" not in df.columns:
            raise ParseError(f"CSV {file_path} sem a coluna: city")
        flags = df[flag_column] if flag_column in df.columns else [None] * len(df)
        records: List[Record] = []
        for row_number, (city_id, flag) in enumerate(zip(df["city"], flags), start=2):
            city_id = city_id.strip()
            if not city_id:
                raise ParseError(f"Linha {row_number} inválida em {file_path} | erro: id vazio")
            # célula vazia equivale a flag ausente
            records.append((city_id, flag if flag else None))
        return records

    @classmethod
    def load_csv(cls, cities_csv: str, destinations_csv: str) -> "CityCatalog":
        '''
        Lê os CSVs de cidades (city[,store]) e destinos (city[,destination]).
        '''
        catalog = cls.from_records(cls._read_csv_records(cities_csv, "store"),
                                   cls._read_csv_records(destinations_csv, "destination"))
        logging.info("Cadastro: %d cidades, %d armazéns, %d destinos",
                     len(catalog.city_ids), len(catalog.store_ids), len(catalog.destination_ids))
        return catalog

    def check_distance_index(self, distance_index: DistanceIndex) -> None:
        '''
        Garante que todo trecho liga cidades cadastradas.
        '''
        unknown = sorted(distance_index.city_ids() - set(self.cities))
        if unknown:
            raise ParseError(f"Trechos citam cidades fora do cadastro: {', '.join(unknown)}")

from dataclasses import dataclass

@dataclass(frozen=True)
class RoadSegment:
    '''
    Trecho de estrada dirigido source_id -> dest_id com distância inteira.

    Observações
    -----------
    Trechos paralelos (mesmo par de cidades) são mantidos separadamente;
    nada é deduplicado na leitura.
    '''
    source_id: str
    dest_id: str
    distance: int

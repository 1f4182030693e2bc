from dataclasses import dataclass

@dataclass(frozen=True)
class City:
    '''Cidade da malha: pode ser armazém e/ou ponto de entrega.'''
    city_id: str
    is_store: bool
    is_destination: bool = False

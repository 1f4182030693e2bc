class ParseError(ValueError):
    '''
    Registro de entrada malformado (campo ausente, distância não inteira,
    aspas desbalanceadas...). Fatal para a etapa de leitura.
    '''


class PathNotFound(LookupError):
    '''
    Nenhum armazém alcançável a partir do destino informado.
    A mensagem é a própria linha gravada no relatório.
    '''

    def __init__(self, destination_id: str) -> None:
        super().__init__(f"{destination_id}: path not found")
        self.destination_id = destination_id

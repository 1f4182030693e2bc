from classes_de_elementos.erros import ParseError

def _parse_distance(value, line_number: int, line: str) -> int:
    '''
    Converte o campo de distância de um trecho para int (>= 0).

    Parâmetros
    ----------
    value       : str | número lido do arquivo
    line_number : int
    line        : str (linha original, para a mensagem de erro)

    Retorno
    -------
    int : distância
    '''

    try:
        distance = int(str(value).strip())
    except ValueError as exc:
        raise ParseError(f"Linha {line_number} inválida: {line!r} | erro: distância não inteira {value!r}") from exc
    if distance < 0:
        raise ParseError(f"Linha {line_number} inválida: {line!r} | erro: distância negativa {distance}")
    return distance

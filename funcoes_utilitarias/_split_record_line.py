import shlex
from typing import List

from classes_de_elementos.erros import ParseError

def _split_record_line(line: str, line_number: int, min_fields: int, max_fields: int) -> List[str]:
    '''
    Separa uma linha de registro em campos.

    Parâmetros
    ----------
    line        : str (ex.: '"São Paulo" "Campinas" 95')
    line_number : int (usado na mensagem de erro)
    min_fields  : int
    max_fields  : int

    Retorno
    -------
    list[str] : campos na ordem da linha

    Observações
    -----------
    - Ids entre aspas podem conter espaços; as aspas fazem parte do id
      (shlex em modo não-POSIX preserva o token como está no arquivo).
    - Quantidade de campos fora de [min_fields, max_fields] é ParseError.
    '''

    try:
        fields = shlex.split(line, posix=False)
    except ValueError as exc:
        raise ParseError(f"Linha {line_number} inválida: {line!r} | erro: {exc}") from exc

    if not min_fields <= len(fields) <= max_fields:
        expected = str(min_fields) if min_fields == max_fields else f"{min_fields} a {max_fields}"
        raise ParseError(
            f"Linha {line_number} inválida: {line!r} | erro: esperado {expected} campos, recebido {len(fields)}"
        )
    return fields

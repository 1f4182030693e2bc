from typing import Iterator, Tuple

from classes_de_elementos.erros import ParseError
from constantes.constantes import COMMENT_PREFIX

def _read_record_lines(file_path: str) -> Iterator[Tuple[int, str]]:
    '''
    Percorre um arquivo texto de registros devolvendo (nº da linha, linha).

    Parâmetros
    ----------
    file_path : str (caminho do arquivo)

    Retorno
    -------
    Iterator[tuple[int, str]] : linhas sem espaços nas pontas, numeradas a partir de 1

    Observações
    -----------
    - Linhas vazias e comentários ("#...") são pulados, mas contam na numeração.
    - Linha que não é UTF-8 válido: ParseError com o número da linha.
    '''

    # leitura binária para decodificar linha a linha e saber onde falhou
    with open(file_path, "rb") as f:
        for line_number, raw_bytes in enumerate(f, start=1):
            try:
                line = raw_bytes.decode("utf-8").strip()
            except UnicodeDecodeError as exc:
                raise ParseError(f"Linha {line_number} inválida em {file_path} | erro: {exc}") from exc
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            yield line_number, line

import sys
from contextlib import contextmanager
from typing import Callable, Iterator

from constantes.constantes import STDOUT_MARKER

@contextmanager
def open_report(output_txt: str) -> Iterator[Callable[[str], None]]:
    '''
    Abre o relatório (truncando o arquivo) e fornece uma função que grava
    uma linha por chamada.

    Parâmetros
    ----------
    output_txt : str (caminho do relatório; "-" grava na saída padrão)

    Retorno
    -------
    Iterator[Callable[[str], None]] : write(linha)
    '''

    if output_txt == STDOUT_MARKER:
        yield lambda line: print(line, file=sys.stdout)
        return

    with open(output_txt, "w", encoding="utf-8") as f:
        yield lambda line: f.write(line + "\n")

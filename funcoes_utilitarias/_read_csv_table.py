import pandas as pd

from classes_de_elementos.erros import ParseError

def _read_csv_table(csv_path: str) -> pd.DataFrame:
    '''
    Lê um CSV de entrada com todas as células como texto.

    Parâmetros
    ----------
    csv_path : str (caminho do CSV)

    Retorno
    -------
    pd.DataFrame : células vazias viram "" (nada de NaN)

    Observações
    -----------
    - Linha com campos a mais, arquivo vazio ou bytes fora de UTF-8: ParseError.
    '''

    try:
        return pd.read_csv(csv_path, dtype=str, keep_default_na=False, encoding="utf-8")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise ParseError(f"CSV {csv_path} inválido | erro: {exc}") from exc

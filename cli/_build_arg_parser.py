import argparse

from constantes.constantes import (
    DEFAULT_DESTINATIONS_TXT,
    DEFAULT_DISTANCES_TXT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_TXT,
    DEFAULT_STORES_TXT,
    INPUT_FORMATS,
)

# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lojarota",
        description=(
            "Encontra o armazém mais próximo de cada ponto de entrega numa malha dirigida.\n"
            " - cidades : <id> [flag de armazém]\n"
            " - destinos: <id> [flag de entrega]\n"
            " - trechos : <origem> <destino> <distância>"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", dest="log_level", default=DEFAULT_LOG_LEVEL, help="Nível de log (ex.: INFO, DEBUG)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_input_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--stores", dest="stores_path", default=DEFAULT_STORES_TXT, help="Arquivo de cidades/armazéns")
        sub.add_argument("--destinations", dest="destinations_path", default=DEFAULT_DESTINATIONS_TXT, help="Arquivo de destinos")
        sub.add_argument("--distances", dest="distances_path", default=DEFAULT_DISTANCES_TXT, help="Arquivo de trechos")
        sub.add_argument("--format", dest="input_format", choices=INPUT_FORMATS, default="txt", help="Formato dos arquivos de entrada")

    nearest = subparsers.add_parser("nearest", help="Gera o relatório de armazém mais próximo")
    add_input_args(nearest)
    nearest.add_argument("--out", dest="output_txt", default=DEFAULT_OUTPUT_TXT, help="Relatório de saída ('-' para stdout)")

    stats = subparsers.add_parser("stats", help="Imprime estatísticas da malha")
    add_input_args(stats)
    return parser

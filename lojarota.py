#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
============================================================================
lojarota: armazém mais próximo por ponto de entrega
----------------------------------------------------------------------------
Lê três arquivos (cidades, destinos, trechos de estrada dirigidos) e, para
cada destino, grava no relatório:

    <destino>
    store: <armazém>
    distance: <distância total>
    path: <armazém> -> <d> -> <cidade> -> ... -> <destino>

ou "<destino>: path not found" quando nenhum armazém chega até ele.

Uso
---
  python lojarota.py nearest --stores stores.txt --destinations destinations.txt \
      --distances distances.txt --out output.txt
  python lojarota.py stats --format csv --stores cities.csv ...
============================================================================
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List

from classes_de_elementos.erros import ParseError
from cli._build_arg_parser import _build_arg_parser
from cli.cli_nearest_store import cli_nearest_store
from cli.cli_stats import cli_stats
from constantes.constantes import LOG_FORMAT

def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    inputs = (args.stores_path, args.destinations_path, args.distances_path)
    for path in inputs:
        if not Path(path).exists():
            logging.error("Arquivo de entrada não existe: %s", path)
            return 1

    start_time = time.time()
    try:
        if args.command == "nearest":
            cli_nearest_store(*inputs, args.output_txt, args.input_format)
        else:
            cli_stats(*inputs, args.input_format)
    except ParseError as exc:
        logging.error("Falha ao ler a entrada: %s", exc)
        return 2

    logging.info("Concluído em %.3f s.", time.time() - start_time)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

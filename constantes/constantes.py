# Arquivos de entrada/saída usados quando nada é informado na linha de comando
DEFAULT_STORES_TXT = "stores.txt"
DEFAULT_DESTINATIONS_TXT = "destinations.txt"
DEFAULT_DISTANCES_TXT = "distances.txt"
DEFAULT_OUTPUT_TXT = "output.txt"

# "-" em --out grava o relatório na saída padrão
STDOUT_MARKER = "-"

INPUT_FORMATS = ("txt", "csv")

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Flag "0" desmarca armazém/entrega; qualquer outro valor (ou ausência) marca
FLAG_OFF = "0"

# Linhas que começam com isto são ignoradas nos arquivos texto
COMMENT_PREFIX = "#"

# Separador entre cidades e distâncias na linha "path:"
PATH_SEPARATOR = " -> "

INFINITY = float("inf")

from typing import Optional

from constantes.constantes import FLAG_OFF

def _is_flag_on(flag: Optional[str]) -> bool:
    '''
    Interpreta a flag de armazém/entrega: só "0" desmarca.
    Flag ausente (None) conta como marcada, como nos arquivos de origem.
    '''

    return flag is None or str(flag).strip() != FLAG_OFF

import re
from typing import Optional


def normalizar_cpf(cpf: Optional[str]) -> Optional[str]:
    """Remove máscara do CPF (pontos, hífen, espaços). Retorna None se vazio."""
    if cpf is None:
        return None
    digitos = re.sub(r"\D", "", str(cpf))
    return digitos or None


def cpf_estrutura_valida(cpf: Optional[str]) -> bool:
    """
    Checagem estrutural do CPF: 11 dígitos após remover a máscara e
    não pode ser uma sequência repetida (ex.: 00000000000).

    Não valida dígitos verificadores.
    """
    digitos = normalizar_cpf(cpf)
    if not digitos or len(digitos) != 11:
        return False
    return len(set(digitos)) > 1

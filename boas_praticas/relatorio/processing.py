# relatorio/processing.py
"""Módulo de cálculos: média das notas, ano de nascimento e formatação de textos."""
from datetime import datetime
from typing import Iterable, List, Optional

try:
    # 1. Import relativo (para pytest)
    from .models import Person
    from .errors import InvalidArgumentError, EmptySequenceError, InvalidRangeError
    from .config import MIN_CURRENT_YEAR, TITLE_MAX_WIDTH, TIMESTAMP_FORMAT
except (ImportError, ValueError):
    # 2. Import direto (python relatorio/main.py)
    from models import Person
    from errors import InvalidArgumentError, EmptySequenceError, InvalidRangeError
    from config import MIN_CURRENT_YEAR, TITLE_MAX_WIDTH, TIMESTAMP_FORMAT
# --------------------------------------------------

def compute_average(values: Optional[Iterable[float]]) -> float:
    """Calcula a média aritmética de uma sequência de valores.

    Levanta InvalidArgumentError se `values` for None e EmptySequenceError
    se a sequência não tiver elementos. Nunca devolve 0.0 "por padrão".
    """
    if values is None:
        raise InvalidArgumentError("Sequência de valores não pode ser nula (values).")
    try:
        items = list(values)
    except TypeError:
        raise InvalidArgumentError(f"Valor '{values}' não é uma sequência de números.")

    if not items:
        raise EmptySequenceError("Sequência não pode ser vazia. (values)")
    return sum(items) / len(items)

def estimate_birth_year(person: Optional[Person], current_year: int) -> int:
    """Estima o ano de nascimento a partir da idade e do ano atual."""
    if person is None:
        raise InvalidArgumentError("Pessoa não pode ser nula (person).")
    if current_year < MIN_CURRENT_YEAR:
        raise InvalidRangeError(f"Ano atual inválido: {current_year}. (current_year)")

    # Person já valida a idade, mas a função também aceita objetos montados fora desse caminho
    age = max(0, person.age)
    return current_year - age

def format_title(text: Optional[str], max_width: int = TITLE_MAX_WIDTH) -> List[str]:
    """Devolve o título e o sublinhado com '-'. Título em branco não gera linhas."""
    if text is None or not text.strip():
        return []
    return [text, "-" * min(len(text), max_width)]

def format_report_lines(person: Person, average: float, generated_at: datetime) -> List[str]:
    """Monta as três linhas do relatório."""
    return [
        f"Relatório gerado em {generated_at.strftime(TIMESTAMP_FORMAT)}",
        str(person),
        f"Média das notas: {average:.2f}",
    ]

# relatorio/main.py
"""Módulo principal: orquestra a leitura dos dados, os cálculos e o relatório."""
import sys
import logging
from datetime import datetime
from typing import Iterable, Optional

try:
    # 1. Import relativo (pytest e python -m relatorio.main)
    from . import io_utils, processing, config
    from .models import Person
except (ImportError, ValueError):
    # 2. Import direto (python relatorio/main.py)
    import io_utils
    import processing
    import config
    from models import Person
# -------------------------

logger = logging.getLogger(__name__)

def print_title(text: Optional[str]):
    """Exibe o título sublinhado. Título em branco não imprime nada."""
    for line in processing.format_title(text, config.TITLE_MAX_WIDTH):
        print(line)

def run(report_path: str = config.REPORT_PATH,
        grades: Iterable[float] = config.GRADES,
        now: Optional[datetime] = None):
    """Executa o fluxo completo, do título até o relatório salvo."""
    if now is None:
        now = datetime.now()

    print_title(config.TITLE)

    name = io_utils.read_required_text(config.NAME_PROMPT)
    age = io_utils.read_age(config.AGE_PROMPT)

    person = Person(name, age)
    print(f"Olá, {person.name}. Você tem {person.age} anos.")

    birth_year = processing.estimate_birth_year(person, now.year)
    print(f"Ano de nascimento (estimado): {birth_year}")

    average = processing.compute_average(grades)
    print(f"Média das notas: {average:.2f}")

    with io_utils.open_report_writer(report_path) as writer:
        for line in processing.format_report_lines(person, average, now):
            writer.write_line(line)
    print(f"Relatório salvo em '{report_path}'.")

def main() -> int:
    """Ponto de entrada: devolve 0 em caso de sucesso e 1 em qualquer erro."""
    try:
        run()
        return 0
    except KeyboardInterrupt:
        print("\nPrograma interrompido pelo usuário.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Falha não tratada", exc_info=True)
        print(f"Erro inesperado: {e}", file=sys.stderr)
        return 1

if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    sys.exit(main())

# relatorio/io_utils.py
"""Módulo de entrada/saída: leitura validada do console e escrita do relatório."""
import logging
import os
import re
from typing import Optional, Union

try:
    # Primeiro o relativo (para pytest)
    from .config import (
        MIN_AGE, MAX_AGE, EMPTY_NAME_MESSAGE, INVALID_AGE_MESSAGE, AGE_RANGE_MESSAGE,
    )
    from .errors import InvalidArgumentError, ReportFileError
except (ImportError, ValueError):
    # Depois o direto (python relatorio/main.py)
    from config import (
        MIN_AGE, MAX_AGE, EMPTY_NAME_MESSAGE, INVALID_AGE_MESSAGE, AGE_RANGE_MESSAGE,
    )
    from errors import InvalidArgumentError, ReportFileError
# -------------------------

logger = logging.getLogger(__name__)

# Só dígitos ASCII: int() aceitaria também '1_000' e dígitos de outros alfabetos
_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

def parse_int_invariant(text: Optional[str]) -> Optional[int]:
    """Converte texto em inteiro base 10 sem depender da localidade. None se inválido."""
    if text is None or not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    # Mesmo limite de um inteiro de 32 bits: valores maiores são "inválidos", não "fora do intervalo"
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value

def read_required_text(prompt: str) -> str:
    """Lê do console um texto não vazio (já sem espaços nas pontas)."""
    while True:
        text = input(prompt).strip()
        if text:
            return text
        logger.debug("Entrada vazia para o prompt %r", prompt)
        print(EMPTY_NAME_MESSAGE)

def read_age(prompt: str) -> int:
    """Lê do console uma idade inteira entre MIN_AGE e MAX_AGE."""
    while True:
        raw = input(prompt)
        age = parse_int_invariant(raw)
        if age is None:
            logger.debug("Idade não numérica: %r", raw)
            print(INVALID_AGE_MESSAGE)
        elif age < MIN_AGE or age > MAX_AGE:
            logger.debug("Idade fora do intervalo: %d", age)
            print(AGE_RANGE_MESSAGE)
        else:
            return age


class ReportWriter:
    """Escritor de linhas com flush depois de cada escrita.

    Use sempre com `with`: o arquivo é fechado em qualquer saída do bloco,
    inclusive quando uma escrita falha.
    """

    def __init__(self, file, path: str):
        self._file = file
        self.path = path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write_line(self, text: str = "") -> None:
        if self._file.closed:
            raise ReportFileError(f"O relatório {self.path} já foi fechado.")
        try:
            self._file.write(f"{text}\n")
            self._file.flush()
        except OSError as e:
            raise ReportFileError(f"Erro ao escrever no arquivo {self.path}: {e}") from e
        logger.debug("Linha gravada em %s", self.path)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.info("Relatório fechado: %s", self.path)

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


def open_report_writer(path: Union[str, "os.PathLike[str]", None]) -> ReportWriter:
    """Abre (ou sobrescreve) o arquivo de relatório, criando a pasta se faltar."""
    if path is None:
        raise InvalidArgumentError("Caminho não pode ser vazio. (path)")
    try:
        path = os.fspath(path)
    except TypeError:
        raise InvalidArgumentError(f"Caminho inválido: {path!r}. (path)")
    if not isinstance(path, str):
        raise InvalidArgumentError(f"Caminho inválido: {path!r}. (path)")
    if not path.strip():
        raise InvalidArgumentError("Caminho não pode ser vazio. (path)")

    full_path = os.path.abspath(path)
    folder = os.path.dirname(full_path)
    try:
        if folder and not os.path.isdir(folder):
            os.makedirs(folder, exist_ok=True)
            logger.info("Pasta criada: %s", folder)
        # Modo 'w' trunca o conteúdo; outros processos continuam podendo ler o arquivo
        file = open(full_path, mode="w", encoding="utf-8")
    except OSError as e:
        raise ReportFileError(f"Não foi possível abrir o arquivo {full_path}: {e}") from e

    logger.info("Relatório aberto para escrita: %s", full_path)
    return ReportWriter(file, full_path)

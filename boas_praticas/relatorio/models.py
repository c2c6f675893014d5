# relatorio/models.py
"""Módulo com o modelo de dados principal: Person."""
from dataclasses import dataclass

try:
    from .config import MIN_AGE, MAX_AGE
except (ImportError, ValueError):
    from config import MIN_AGE, MAX_AGE


@dataclass(frozen=True)
class Person:
    """Pessoa com nome e idade. Imutável depois de criada."""

    name: str
    age: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Nome da pessoa não pode ser vazio.")
        # frozen=True: a normalização do nome precisa passar por object.__setattr__
        object.__setattr__(self, "name", self.name.strip())

        # bool é subclasse de int, mas True não é uma idade
        if not isinstance(self.age, int) or isinstance(self.age, bool):
            raise ValueError(f"Idade '{self.age}' deve ser um número inteiro.")
        if self.age < MIN_AGE or self.age > MAX_AGE:
            raise ValueError(f"Idade {self.age} inválida. Intervalo permitido: {MIN_AGE}-{MAX_AGE}.")

    def __str__(self) -> str:
        """Representação amigável, usada também na linha do relatório."""
        return f"Pessoa: {self.name} ({self.age} anos)"

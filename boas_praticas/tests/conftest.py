# tests/conftest.py
import pytest
from typing import List
from relatorio.models import Person

@pytest.fixture
def sample_person() -> Person:
    """Fixture com uma pessoa válida."""
    return Person("Ana", 30)

@pytest.fixture
def scripted_input(monkeypatch):
    """Substitui input() por uma sequência fixa de respostas.

    Devolve a lista de prompts exibidos, para conferir quantas vezes
    o programa perguntou.
    """
    prompts: List[str] = []

    def install(answers: List[str]) -> List[str]:
        answers_iter = iter(answers)

        def mock_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(answers_iter)
            except StopIteration:
                # Fim do roteiro: o mesmo que Ctrl+D no console
                raise EOFError

        monkeypatch.setattr('builtins.input', mock_input)
        return prompts

    return install

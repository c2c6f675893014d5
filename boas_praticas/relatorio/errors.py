# relatorio/errors.py
"""Módulo com as exceções próprias da aplicação."""

class RelatorioAppError(Exception):
    """Classe base para todas as exceções desta aplicação."""
    pass

class InvalidArgumentError(RelatorioAppError, ValueError):
    """Argumento ausente (None) ou inválido passado a uma função interna."""
    pass

class EmptySequenceError(RelatorioAppError, ValueError):
    """Sequência vazia onde pelo menos um elemento é obrigatório."""
    pass

class InvalidRangeError(RelatorioAppError, ValueError):
    """Valor fora do intervalo aceito (por exemplo, ano atual < 1900)."""
    pass

class ReportFileError(RelatorioAppError):
    """Falha ao criar a pasta, abrir ou escrever o arquivo de relatório."""
    pass

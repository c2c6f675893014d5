# relatorio/config.py
"""Constantes do programa: textos, limites e caminho do relatório."""
import logging

# --- CONFIGURAÇÃO ---
TITLE = "Boas práticas em Python (iniciante)"
TITLE_MAX_WIDTH = 60

REPORT_PATH = "relatorio.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Notas fixas (não vêm da entrada do usuário)
GRADES = (8.5, 7.0, 9.0, 6.5)

MIN_AGE = 0
MAX_AGE = 130
MIN_CURRENT_YEAR = 1900

# --- Textos do console ---
NAME_PROMPT = "Digite seu nome: "
AGE_PROMPT = "Digite sua idade: "
EMPTY_NAME_MESSAGE = "Nome não pode ser vazio. Tente novamente.\n"
INVALID_AGE_MESSAGE = "Valor inválido. Digite um número inteiro.\n"
AGE_RANGE_MESSAGE = f"Idade deve estar entre {MIN_AGE} e {MAX_AGE}. Tente novamente.\n"

# --- Logging ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# relatorio/__init__.py
"""Programa de console: lê nome e idade, calcula médias e grava um relatório."""

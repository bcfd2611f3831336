"""Estruturas de dados clássicas: pilha, tabela de dispersão e heap de máximo."""

__version__ = "0.1.0"
__all__ = ["heap", "pilha", "tabela"]
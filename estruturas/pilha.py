"""A stack of integer keys, printed from the top down."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


class Pilha:
    """Last-in, first-out stack of integer keys."""

    def __init__(self) -> None:
        self._itens: list[int] = []

    def empilhar(self, chave: int) -> None:
        """Push ``chave`` onto the top of the stack."""
        self._itens.append(chave)

    def desempilhar(self) -> int:
        """Remove and return the key on top of the stack."""
        if not self._itens:
            raise IndexError("desempilhar de pilha vazia")
        return self._itens.pop()

    def vazia(self) -> bool:
        """Return True when the stack holds no keys."""
        return not self._itens

    def formata(self) -> str:
        """Return the keys from top to bottom, comma separated, ending in a newline.

        An empty stack yields an empty string.
        """
        if not self._itens:
            return ""
        return ", ".join(str(chave) for chave in self) + "\n"

    def escrever(self, saida: TextIO | None = None) -> None:
        """Write the formatted stack to ``saida`` (standard output by default)."""
        (saida or sys.stdout).write(self.formata())

    def __iter__(self) -> Iterator[int]:
        return reversed(self._itens)

    def __len__(self) -> int:
        return len(self._itens)


def main(argv: Sequence[str] | None = None) -> int:
    """Push 2, 4 and 3, show the stack, pop once and show it again."""
    pilha = Pilha()
    for chave in (2, 4, 3):
        pilha.empilhar(chave)
    pilha.escrever()
    print(f"A chave desempilhada foi: {pilha.desempilhar()}.")
    pilha.escrever()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
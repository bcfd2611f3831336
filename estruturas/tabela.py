"""Hash table of integers with separate chaining."""

from __future__ import annotations

from collections.abc import Sequence


class TabelaDispersao:
    """Hash table of ``tamanho`` buckets using ``x % tamanho`` as hash."""

    def __init__(self, tamanho: int) -> None:
        if tamanho <= 0:
            raise ValueError("tamanho deve ser positivo")
        self._m = tamanho
        self._tabela: list[list[int]] = [[] for _ in range(tamanho)]

    def _balde(self, x: int) -> list[int]:
        return self._tabela[x % self._m]

    def insere(self, x: int) -> None:
        """Insert ``x`` at the front of its bucket; duplicates are kept."""
        self._balde(x).insert(0, x)

    def busca(self, x: int) -> bool:
        """Return True if ``x`` is stored in the table."""
        return x in self._balde(x)

    def remover(self, x: int) -> bool:
        """Remove one occurrence of ``x``; return whether one was found."""
        balde = self._balde(x)
        try:
            balde.remove(x)
        except ValueError:
            return False
        return True

    def fator_carga(self) -> float:
        """Return the load factor, elements divided by bucket count."""
        return self.elementos() / self._m

    def elementos(self) -> int:
        """Return the number of stored elements."""
        return sum(len(balde) for balde in self._tabela)

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and self.busca(x)

    def __len__(self) -> int:
        return self.elementos()


def main(argv: Sequence[str] | None = None) -> int:
    """Insert 5, 4 and 3 into a table of 10, remove 3 and print the count."""
    tabela = TabelaDispersao(10)
    for x in (5, 4, 3):
        tabela.insere(x)
    tabela.remover(3)
    print(tabela.elementos(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
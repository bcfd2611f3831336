"""Binary max-heap of integer priorities stored in a list."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


class Heap:
    """Max-heap kept in a flat list; the largest priority sits at index 0."""

    def __init__(self, dados: Iterable[int] | None = None) -> None:
        self._s: list[int] = list(dados) if dados is not None else []
        for i in range(len(self._s) // 2 - 1, -1, -1):
            self._desce(i)

    @staticmethod
    def _pai(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def _esquerdo(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _direito(i: int) -> int:
        return 2 * i + 2

    def _troca(self, i: int, j: int) -> None:
        self._s[i], self._s[j] = self._s[j], self._s[i]

    def _desce(self, i: int) -> None:
        s = self._s
        n = len(s)
        while True:
            e, d = self._esquerdo(i), self._direito(i)
            maior = i
            if e < n and s[e] > s[maior]:
                maior = e
            if d < n and s[d] > s[maior]:
                maior = d
            if maior == i:
                return
            self._troca(i, maior)
            i = maior

    def _sobe(self, i: int) -> None:
        s = self._s
        while i > 0 and s[self._pai(i)] < s[i]:
            pai = self._pai(i)
            self._troca(i, pai)
            i = pai

    def insere(self, p: int) -> None:
        """Insert priority ``p``."""
        self._s.append(p)
        self._sobe(len(self._s) - 1)

    def consulta_maxima(self) -> int:
        """Return the largest priority without removing it."""
        if not self._s:
            raise IndexError("consulta em heap vazia")
        return self._s[0]

    def extrai_maxima(self) -> int:
        """Remove and return the largest priority."""
        if not self._s:
            raise IndexError("extração de heap vazia")
        maxima = self._s[0]
        self._troca(0, len(self._s) - 1)
        self._s.pop()
        self._desce(0)
        return maxima

    def altera_prioridade(self, i: int, p: int) -> None:
        """Set the priority at position ``i`` to ``p`` and restore heap order."""
        if not 0 <= i < len(self._s):
            raise IndexError("posição fora da heap")
        antigo = self._s[i]
        self._s[i] = p
        if p < antigo:
            self._desce(i)
        else:
            self._sobe(i)

    def formata_niveis(self) -> str:
        """Return the heap level by level, one level per line."""
        partes: list[str] = []
        escritos, fim_nivel = 0, 1
        for elemento in self._s:
            partes.append(f"{elemento} ")
            escritos += 1
            if escritos == fim_nivel:
                partes.append("\n")
                fim_nivel *= 2
                escritos = 0
        partes.append("\n")
        return "".join(partes)

    def _linhas_arvore(self, prefixo: str, i: int) -> Iterator[str]:
        if i >= len(self._s):
            return
        eh_esquerdo = i % 2 != 0
        tem_irmao = i < len(self._s) - 1
        ramo = "├──" if eh_esquerdo and tem_irmao else "└──"
        yield f"{prefixo}{ramo}{self._s[i]}\n"
        novo_prefixo = prefixo + ("│   " if eh_esquerdo else "    ")
        yield from self._linhas_arvore(novo_prefixo, self._esquerdo(i))
        yield from self._linhas_arvore(novo_prefixo, self._direito(i))

    def formata_arvore(self) -> str:
        """Return the heap drawn as a tree, one node per line."""
        return "".join(self._linhas_arvore("", 0))

    def escreve_niveis(self, saida: TextIO | None = None) -> None:
        """Write the level-by-level view to ``saida`` (standard output by default)."""
        (saida or sys.stdout).write(self.formata_niveis())

    def escreve(self, saida: TextIO | None = None) -> None:
        """Write the tree view to ``saida`` (standard output by default)."""
        (saida or sys.stdout).write(self.formata_arvore())

    def copia(self) -> Heap:
        """Return an independent copy of this heap."""
        nova = Heap()
        nova._s = list(self._s)
        return nova

    def __len__(self) -> int:
        return len(self._s)

    def __iter__(self) -> Iterator[int]:
        return iter(self._s)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the heap: insertions, extraction, priority changes and copies."""
    h = Heap()
    for i in range(1, 11):
        h.insere(i)
    print("h:")
    h.escreve()

    h.extrai_maxima()
    h.altera_prioridade(0, -3)
    print("h:")
    h.escreve()

    v = [1, 2, 3, 4, 5]

    h2 = Heap(v)
    h2.insere(15)
    print("h2:")
    h2.escreve()

    h3 = h2.copia()
    h2.insere(30)
    print("h3:")
    h3.escreve()

    h4 = h2.copia()
    h2.insere(40)
    print("h4:")
    h4.escreve()

    h = h2.copia()
    h.insere(100)
    print("h2:")
    h2.escreve()
    print("h:")
    h.escreve()

    h = Heap(v)
    print("h:")
    h.escreve()

    h.extrai_maxima()
    h.altera_prioridade(0, -2)
    print("h:")
    h.escreve()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
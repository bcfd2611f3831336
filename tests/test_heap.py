import io

import pytest

from estruturas.heap import Heap, main


def _eh_heap_maxima(valores):
    return all(valores[(i - 1) // 2] >= valores[i] for i in range(1, len(valores)))


@pytest.mark.parametrize(
    "dados",
    [[], [1], [1, 2, 3, 4, 5], [5, 4, 3, 2, 1], [3, 9, 2, 7, 7, 1, 8, 0, 6], list(range(20))],
)
def test_construcao_gera_heap(dados):
    h = Heap(dados)
    assert _eh_heap_maxima(list(h))
    assert sorted(h) == sorted(dados)
    assert len(h) == len(dados)


def test_insercoes_mantem_heap_e_maxima():
    h = Heap()
    for i in range(1, 11):
        h.insere(i)
        assert _eh_heap_maxima(list(h))
        assert h.consulta_maxima() == i
    assert len(h) == 10


def test_extrai_maxima_em_ordem_decrescente():
    dados = [4, 1, 9, 3, 9, 0, 7, 2]
    h = Heap(dados)
    extraidos = [h.extrai_maxima() for _ in range(len(dados))]
    assert extraidos == sorted(dados, reverse=True)
    assert len(h) == 0


def test_heap_vazia_levanta_erro():
    h = Heap()
    with pytest.raises(IndexError):
        h.extrai_maxima()
    with pytest.raises(IndexError):
        h.consulta_maxima()


def test_altera_prioridade_para_baixo():
    h = Heap(range(1, 11))
    h.extrai_maxima()
    h.altera_prioridade(0, -3)
    assert _eh_heap_maxima(list(h))
    assert -3 in list(h)
    assert h.consulta_maxima() == 8


def test_altera_prioridade_para_cima():
    h = Heap([1, 2, 3, 4, 5])
    ultimo = len(h) - 1
    h.altera_prioridade(ultimo, 50)
    assert h.consulta_maxima() == 50
    assert _eh_heap_maxima(list(h))


def test_altera_prioridade_indice_invalido():
    h = Heap([1, 2])
    with pytest.raises(IndexError):
        h.altera_prioridade(2, 0)
    with pytest.raises(IndexError):
        h.altera_prioridade(-1, 0)


def test_copia_independente():
    h2 = Heap([1, 2, 3, 4, 5])
    h2.insere(15)
    h3 = h2.copia()
    h2.insere(30)
    assert len(h3) == 6
    assert h3.consulta_maxima() == 15
    assert h2.consulta_maxima() == 30


def test_formata_arvore_tres_elementos():
    h = Heap([1, 2, 3])
    assert h.formata_arvore() == "└──3\n    ├──2\n    └──1\n"


def test_formata_niveis_tres_elementos():
    h = Heap([1, 2, 3])
    assert h.formata_niveis() == "3 \n2 1 \n\n"


def test_formata_vazia():
    h = Heap()
    assert h.formata_arvore() == ""
    assert h.formata_niveis() == "\n"


def test_escreve_usa_saida():
    h = Heap([5, 8, 1, 4])
    saida = io.StringIO()
    h.escreve(saida)
    assert saida.getvalue() == h.formata_arvore()
    saida_niveis = io.StringIO()
    h.escreve_niveis(saida_niveis)
    assert saida_niveis.getvalue() == h.formata_niveis()


def test_arvore_tem_uma_linha_por_elemento():
    h = Heap(range(10))
    linhas = h.formata_arvore().splitlines()
    assert len(linhas) == 10
    assert sorted(int(linha.split("──")[1]) for linha in linhas) == list(range(10))


def test_main_escreve_heaps(capsys):
    assert main() == 0
    saida = capsys.readouterr().out
    assert saida.startswith("h:\n└──10\n")
    assert saida.count("h:\n") == 5
    assert saida.count("h2:\n") == 2
    assert "h3:\n" in saida and "h4:\n" in saida
# estruturas

Implementações simples de três estruturas de dados clássicas para
chaves inteiras:

- `Pilha` — pilha (último a entrar, primeiro a sair) em `estruturas.pilha`;
- `TabelaDispersao` — tabela de dispersão com encadeamento separado e
  função de hash `x % m` em `estruturas.tabela`;
- `Heap` — heap de máximo armazenado em lista em `estruturas.heap`.

## Instalação

```
pip install .
```

Para rodar os testes:

```
pip install ".[test]"
pytest
```

## Uso

### Pilha

```python
from estruturas.pilha import Pilha

p = Pilha()
p.empilhar(2)
p.empilhar(4)
p.empilhar(3)

print(p.formata(), end="")  # "3, 4, 2\n": do topo para a base
print(p.desempilhar())      # 3
print(len(p), p.vazia())    # 2 False
```

- `formata()` devolve as chaves do topo para a base separadas por
  `", "` e terminadas em quebra de linha; para a pilha vazia devolve `""`.
- `escrever(saida=None)` grava essa mesma representação em `saida`
  (a saída padrão, se omitida).
- `desempilhar()` em uma pilha vazia levanta `IndexError`.
- Percorrer a pilha com `for` visita as chaves do topo para a base.

### Tabela de dispersão

```python
from estruturas.tabela import TabelaDispersao

t = TabelaDispersao(10)
t.insere(5)
t.insere(4)
t.insere(3)

t.busca(4)          # True
t.remover(3)        # True: o elemento existia e foi removido
t.remover(3)        # False: não há mais 3 na tabela
5 in t              # True
t.elementos()       # 2, o mesmo que len(t)
t.fator_carga()     # 0.2: elementos / tamanho da tabela
```

- O tamanho precisa ser positivo; caso contrário, `ValueError`.
- `insere` coloca o valor no início do seu balde e aceita repetidos;
  `remover` retira uma única ocorrência.

### Heap de máximo

```python
from estruturas.heap import Heap

h = Heap([1, 2, 3, 4, 5])   # constrói o heap a partir dos dados
h.insere(15)
h.consulta_maxima()         # 15
h.extrai_maxima()           # 15
h.altera_prioridade(0, -2)  # muda a prioridade da posição 0

outro = h.copia()           # cópia independente
print(h.formata_niveis())   # um nível da árvore por linha
print(h.formata_arvore())   # árvore desenhada com ├── e └──
```

- `Heap()` sem argumentos cria um heap vazio.
- `consulta_maxima()` e `extrai_maxima()` em um heap vazio levantam
  `IndexError`; `altera_prioridade` com posição fora do heap também.
- `escreve_niveis(saida=None)` e `escreve(saida=None)` gravam as
  representações de `formata_niveis()` e `formata_arvore()` em `saida`
  (a saída padrão, se omitida).
- `len(h)` dá o número de elementos e `for` percorre a lista interna na
  ordem em que está armazenada.

## Linha de comando

Cada estrutura tem um pequeno programa de demonstração, sem opções:

```
estruturas-pilha
estruturas-tabela
estruturas-heap
```

- `estruturas-pilha` empilha 2, 4 e 3, mostra a pilha, desempilha um
  elemento, informa qual foi e mostra a pilha de novo;
- `estruturas-tabela` cria uma tabela de tamanho 10, insere 5, 4 e 3,
  remove o 3 e mostra quantos elementos restaram;
- `estruturas-heap` insere de 1 a 10 em um heap e mostra a árvore,
  extrai o máximo e altera a prioridade da raiz; em seguida constrói um
  heap a partir de `[1, 2, 3, 4, 5]`, faz inserções e cópias com
  `copia()` mostrando que as cópias ficam independentes, e por fim
  extrai o máximo e altera a prioridade da raiz de um novo heap,
  mostrando a árvore a cada passo.
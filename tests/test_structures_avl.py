import sys
import os
import pytest

# Setup de importação
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.structures.exceptions import EmptyTreeError
from src.core.models.outcome import Outcome

def build(values, verbose=False):
    tree = AVLTree(verbose=verbose)
    for v in values:
        tree.insert(v)
    return tree

def test_avl_sequential_insert():
    print("--- Iniciando Teste da AVL: inserção sequencial 1..11 ---")

    # Numa BST simples a raiz seria 1 e a árvore uma lista ligada
    avl = build(range(1, 12))

    print(f"Raiz da árvore após balanceamento: {avl.root.value}")
    print(f"Altura da árvore: {avl.height()}")

    assert avl.root.value == 4, "A raiz deveria ser 4"
    assert avl.height() == 3, "Altura deveria ser 3 para 11 nós"
    assert avl.get_all_values() == list(range(1, 12)), "Percurso em ordem incorreto"
    avl.validate()
    print(">> SUCESSO: A altura está controlada (logarítmica).")

def test_avl_delete_two_children_root():
    print("--- Teste: remoção da raiz com dois filhos ---")
    values = [9, 4, 11, 2, 6, 10, 12, 1, 3, 5, 7, 13, 8]
    avl = build(values)
    assert avl.root.value == 9

    outcome = avl.delete(9)

    # A subárvore esquerda é mais alta: o predecessor (8) sobe para a raiz
    print(f"Nova raiz: {avl.root.value}")
    assert outcome == Outcome.DELETED
    assert avl.root.value == 8, "O predecessor 8 deveria ocupar a raiz"
    assert not avl.find(9)
    assert avl.get_all_values() == sorted(v for v in values if v != 9)
    assert len(avl) == 12
    avl.validate()
    print(">> SUCESSO: Cópia do predecessor e remoção recursiva.")

def test_delete_two_children_uses_taller_subtree():
    # Direita mais alta: sucessor
    avl = build([2, 1, 3, 4])
    avl.delete(2)
    assert avl.root.value == 3
    assert avl.get_all_values() == [1, 3, 4]
    avl.validate()

    # Alturas iguais: lado esquerdo (predecessor)
    avl = build([2, 1, 3])
    avl.delete(2)
    assert avl.root.value == 1
    assert avl.root.right.value == 3
    avl.validate()

def test_delete_leaf_and_one_child():
    avl = build([5, 3, 8, 1, 9])

    assert avl.delete(1) == Outcome.DELETED   # folha
    assert avl.get_all_values() == [3, 5, 8, 9]
    avl.validate()

    assert avl.delete(8) == Outcome.DELETED   # um filho
    assert avl.get_all_values() == [3, 5, 9]
    assert avl.root.right.value == 9
    assert avl.root.right.parent is avl.root
    avl.validate()

def test_delete_root_with_single_child():
    avl = build([1, 2])
    avl.delete(1)

    assert avl.root.value == 2
    assert avl.root.parent is None
    assert avl.root.height == 0
    avl.validate()

def test_delete_last_node_empties_tree():
    avl = build([42])
    avl.delete(42)
    assert avl.is_empty()
    assert avl.height() == -1

def test_duplicate_insert_is_noop():
    avl = build([5, 3, 8, 1, 4])
    before = avl.structural_print()

    outcome = avl.insert(4)

    assert outcome == Outcome.DUPLICATE
    assert avl.structural_print() == before, "Duplicata alterou a árvore"
    assert len(avl) == 5

def test_missing_delete_is_noop():
    avl = build([5, 3, 8])
    before = avl.structural_print()

    assert avl.delete(7) == Outcome.NOT_FOUND
    assert avl.structural_print() == before

    empty = AVLTree()
    assert empty.delete(1) == Outcome.EMPTY_TREE
    assert empty.is_empty()

def test_verbose_diagnostics(capsys):
    avl = build([5], verbose=True)
    avl.insert(5)
    avl.delete(6)
    out = capsys.readouterr().out
    assert "[AVL] Valor 5 já está na árvore" in out
    assert "[AVL] Valor 6 não existe na árvore" in out

def test_min_max():
    empty = AVLTree()
    with pytest.raises(EmptyTreeError):
        empty.get_min()
    with pytest.raises(EmptyTreeError):
        empty.get_max()
    with pytest.raises(EmptyTreeError):
        empty.get()

    avl = build([5, 3, 8])
    assert avl.get_min() == 3
    assert avl.get_max() == 8
    assert avl.get() == 5

def test_find_and_containment():
    avl = build([2.5, -1, 7, 0.25])

    assert avl.find(2.5)
    assert avl.find(-1)
    assert not avl.find(3)
    assert 7 in avl
    assert 8 not in avl
    assert not AVLTree().find(1)
    assert list(avl) == [-1, 0.25, 2.5, 7]

def test_nan_rejected():
    with pytest.raises(ValueError):
        AVLTree().insert(float('nan'))

def test_clear():
    avl = build(range(10))
    avl.clear()
    assert avl.is_empty()
    assert avl.get_all_values() == []

def test_structural_print():
    avl = build([2, 1, 3])
    rendering = avl.structural_print()
    print(rendering)

    lines = rendering.split("\n")
    assert lines == [
        "       3",
        "    /",
        "  2",
        "    \\",
        "       1",
    ], "Desenho ASCII inesperado"
    assert AVLTree().structural_print() == ""

if __name__ == "__main__":
    test_avl_sequential_insert()
    test_avl_delete_two_children_root()

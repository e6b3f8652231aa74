import sys
import os
from typing import Callable, Iterable, Optional

# Permite executar como script: python src/ui/console.py
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.structures.exceptions import AVLTreeError

SEED_VALUES = range(1, 12)

MENU = """
1.  Inserir
2.  Remover
3.  Buscar valor
4.  Buscar menor valor
5.  Buscar maior valor
6.  Imprimir em ordem
7.  Imprimir árvore
8.  Limpar árvore
0.  Sair"""


def _parse_number(text: str):
    """Aceita inteiros ou decimais ('3', '2.5')."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _show_structure(tree: AVLTree):
    rendering = tree.structural_print()
    if not tree.verbose:
        print(f"\n{rendering}\n")


def run_console(tree: Optional[AVLTree] = None,
                input_fn: Callable[[str], str] = input,
                seed: Iterable = SEED_VALUES) -> AVLTree:
    """
    Menu interativo sobre a AVL. Apenas chama a interface pública da árvore.
    Retorna a árvore no estado final (útil para testes).
    """
    if tree is None:
        tree = AVLTree(verbose=True)
        for value in seed:
            tree.insert(value)

    print("Representação ASCII da árvore:")
    _show_structure(tree)

    while True:
        print(MENU)
        try:
            choice = int(input_fn("> ").strip())

            if choice == 0:
                print("Saindo")
                return tree
            elif choice == 1:
                tree.insert(_parse_number(input_fn("Valor a inserir: ")))
            elif choice == 2:
                tree.delete(_parse_number(input_fn("Valor a remover: ")))
            elif choice == 3:
                value = _parse_number(input_fn("Valor a buscar: "))
                if tree.find(value):
                    print(f"Valor {value} encontrado na árvore")
                else:
                    print(f"Valor {value} não encontrado na árvore")
            elif choice == 4:
                print(f"O menor valor da árvore é {tree.get_min()}")
            elif choice == 5:
                print(f"O maior valor da árvore é {tree.get_max()}")
            elif choice == 6:
                if tree.is_empty():
                    print("Árvore vazia!")
                else:
                    print("Percurso em ordem:")
                    for value in tree.inorder_traverse():
                        print(value)
            elif choice == 7:
                if tree.is_empty():
                    print("Árvore vazia!")
                else:
                    print("Árvore:")
                    _show_structure(tree)
            elif choice == 8:
                tree.clear()
                print("A árvore foi reiniciada!")
            else:
                print("Opção inválida")
        except EOFError:
            print("Saindo")
            return tree
        except ValueError:
            print("Opção inválida")
        except AVLTreeError as e:
            print(f"[AVL Erro] {e}")


def main():
    run_console()


if __name__ == "__main__":
    main()

import math
from typing import Iterator, List, Optional

from src.core.algorithms.balancing import TreeBalancer, get_height, taller_child
from src.core.algorithms.validation import collect_violations
from src.core.models.node import AVLNode, Number
from src.core.models.outcome import Outcome
from src.core.structures.exceptions import EmptyTreeError, InconsistentTreeError


class AVLTree:
    """
    Árvore AVL de chaves numéricas com referência ao pai em cada nó.
    Após cada inserção ou remoção o TreeBalancer sobe do ponto alterado até
    a raiz, garantindo altura O(log n).
    Chaves duplicadas são rejeitadas.
    """
    INDENT_STEP = "     "
    BRANCH_INDENT = "  "
    BASE_INDENT = "  "

    def __init__(self, verbose: bool = False):
        self.root: Optional[AVLNode] = None
        self.verbose = verbose
        self.balancer = TreeBalancer(self)

    # --- Busca ---

    def _find_closest(self, start: Optional[AVLNode], key: float) -> Optional[AVLNode]:
        """
        Desce a partir de 'start' procurando 'key'.
        Retorna o nó com a chave ou, se não existir, o último nó visitado
        (ponto de inserção). Retorna None apenas se 'start' for None.
        """
        node = start
        while node is not None:
            if key < node.value:
                if node.left is None:
                    return node
                node = node.left
            elif key > node.value:
                if node.right is None:
                    return node
                node = node.right
            else:
                return node
        return None

    def find(self, value: Number) -> bool:
        """Busca em O(log n)."""
        if self.root is None:
            return False
        return self._find_closest(self.root, value).value == value

    def __contains__(self, value) -> bool:
        return self.find(value)

    def get(self) -> Number:
        """Valor da raiz."""
        if self.root is None:
            raise EmptyTreeError()
        return self.root.value

    def get_min(self) -> Number:
        if self.root is None:
            raise EmptyTreeError()
        return self._find_closest(self.root, -math.inf).value

    def get_max(self) -> Number:
        if self.root is None:
            raise EmptyTreeError()
        return self._find_closest(self.root, math.inf).value

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        return get_height(self.root)

    def clear(self):
        self.root = None

    # --- Inserção ---

    def insert(self, value: Number) -> str:
        """
        Insere um valor e rebalanceia a árvore a partir do ponto de inserção.
        Retorna Outcome.DUPLICATE (sem alterar a árvore) se o valor já existir.
        """
        if isinstance(value, float) and math.isnan(value):
            raise ValueError("NaN não pode ser inserido na árvore.")

        attach = self._find_closest(self.root, value)

        if attach is None:
            self.root = AVLNode(value)
            return Outcome.INSERTED

        if attach.value == value:
            self._log(f"Valor {value} já está na árvore")
            return Outcome.DUPLICATE

        new_node = AVLNode(value)
        new_node.parent = attach
        if value < attach.value:
            attach.left = new_node
        else:
            attach.right = new_node

        self.balancer.rebalance(attach)
        return Outcome.INSERTED

    # --- Remoção ---

    def delete(self, value: Number) -> str:
        """
        Remove um valor. Árvore vazia ou valor ausente não alteram nada e
        são informados pelo Outcome retornado.
        """
        return self._delete(self.root, value)

    def _delete(self, start: Optional[AVLNode], value: Number) -> str:
        if start is None:
            self._log("Árvore vazia!")
            return Outcome.EMPTY_TREE

        target = self._find_closest(start, value)
        if target.value != value:
            self._log(f"Valor {value} não existe na árvore")
            return Outcome.NOT_FOUND

        if target.is_leaf:
            self._delete_leaf(target)
        elif target.child_count == 1:
            self._delete_one(target)
        else:
            # Dois filhos: copia o extremo da subárvore mais alta e remove-o.
            # O rebalanceamento fica a cargo da chamada recursiva.
            replacement = self._find_closest(taller_child(target), target.value)
            target.value = replacement.value
            return self._delete(replacement, replacement.value)

        # 'target.parent' ainda aponta para o antigo pai
        if self.root is not None and target.parent is not None:
            self.balancer.rebalance(target.parent)
        return Outcome.DELETED

    def _delete_leaf(self, node: AVLNode):
        if node is self.root:
            self.root = None
        elif node.is_left_child():
            node.parent.left = None
        else:
            node.parent.right = None

    def _delete_one(self, node: AVLNode):
        child = node.left if node.left is not None else node.right

        if node.parent is None:
            self.root = child
            child.parent = None
            return

        child.parent = node.parent
        if node.is_left_child():
            node.parent.left = child
        else:
            node.parent.right = child

    # --- Percurso e depuração ---

    def inorder_traverse(self) -> Iterator[Number]:
        """Valores em ordem crescente."""
        return self._in_order(self.root)

    def _in_order(self, node: Optional[AVLNode]) -> Iterator[Number]:
        if node:
            yield from self._in_order(node.left)
            yield node.value
            yield from self._in_order(node.right)

    def get_all_values(self) -> List[Number]:
        return list(self.inorder_traverse())

    def __iter__(self):
        return self.inorder_traverse()

    def __len__(self):
        return sum(1 for _ in self.inorder_traverse())

    def structural_print(self) -> str:
        """
        Desenho ASCII da árvore: subárvore direita em cima, esquerda embaixo.
        Formato apenas para depuração.
        """
        lines: List[str] = []
        self._ascii(self.root, self.BASE_INDENT, lines)
        rendering = "\n".join(lines)
        if self.verbose:
            print(f"\n{rendering}\n")
        return rendering

    def _ascii(self, node: Optional[AVLNode], indent: str, lines: List[str]):
        if node is None:
            return
        self._ascii(node.right, indent + self.INDENT_STEP, lines)
        if node.right is not None:
            lines.append(indent + self.BRANCH_INDENT + "/")
        lines.append(f"{indent}{node.value}")
        if node.left is not None:
            lines.append(indent + self.BRANCH_INDENT + "\\")
        self._ascii(node.left, indent + self.INDENT_STEP, lines)

    def validate(self):
        """Lança InconsistentTreeError se alguma invariante estiver quebrada."""
        violations = collect_violations(self.root)
        if violations:
            raise InconsistentTreeError("; ".join(violations))

    def _log(self, message: str):
        if self.verbose:
            print(f"[AVL] {message}")

    def __repr__(self):
        return f"AVLTree(size={len(self)}, height={self.height()})"

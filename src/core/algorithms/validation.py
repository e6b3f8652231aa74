"""
Verificação das invariantes da AVL.
Cada função percorre a árvore de forma independente do cache de alturas e
retorna a lista de violações encontradas (vazia se a árvore estiver correta).
"""
import math
from typing import List, Optional

from src.core.models.node import AVLNode


def check_bst_order(root: Optional[AVLNode]) -> List[str]:
    """Ordem estrita: esquerda < nó < direita em toda a subárvore."""
    violations: List[str] = []
    stack = [(root, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if not (low < node.value < high):
            violations.append(f"Ordem: {node.value} fora do intervalo ({low}, {high})")
        stack.append((node.left, low, node.value))
        stack.append((node.right, node.value, high))
    return violations


def _true_height(node: Optional[AVLNode], violations: List[str]) -> int:
    if node is None:
        return -1
    left = _true_height(node.left, violations)
    right = _true_height(node.right, violations)
    expected = 1 + max(left, right)
    if node.height != expected:
        violations.append(f"Altura: nó {node.value} tem {node.height}, esperado {expected}")
    return expected


def check_heights(root: Optional[AVLNode]) -> List[str]:
    violations: List[str] = []
    _true_height(root, violations)
    return violations


def check_balance(root: Optional[AVLNode]) -> List[str]:
    """Fator de balanceamento calculado com alturas recontadas."""
    violations: List[str] = []

    def walk(node):
        if node is None:
            return -1
        left = walk(node.left)
        right = walk(node.right)
        if abs(left - right) > 1:
            violations.append(f"Balanceamento: nó {node.value} com alturas {left} e {right}")
        return 1 + max(left, right)

    walk(root)
    return violations


def check_links(root: Optional[AVLNode]) -> List[str]:
    """Consistência das referências pai/filho."""
    violations: List[str] = []
    if root is not None and root.parent is not None:
        violations.append(f"Ligação: raiz {root.value} possui pai")

    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                violations.append(f"Ligação: filho {child.value} não aponta para o pai {node.value}")
            stack.append(child)
    return violations


def collect_violations(root: Optional[AVLNode]) -> List[str]:
    return (check_bst_order(root) + check_heights(root)
            + check_balance(root) + check_links(root))

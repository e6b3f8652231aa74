from typing import Optional

from src.core.models.node import AVLNode
from src.core.models.outcome import RotationKind
from src.core.structures.exceptions import InconsistentTreeError

# --- Funções auxiliares de altura ---

def get_height(node: Optional[AVLNode]) -> int:
    """Altura em cache do nó. Subárvore vazia tem altura -1."""
    if node is None:
        return -1
    return node.height


def adjust_height(node: Optional[AVLNode]):
    """Recalcula a altura a partir dos filhos (que já devem estar corretos)."""
    if node is None:
        return
    node.height = 1 + max(get_height(node.left), get_height(node.right))


def is_balanced(node: Optional[AVLNode]) -> bool:
    if node is None:
        return True
    return abs(get_height(node.left) - get_height(node.right)) <= 1


def taller_child(node: AVLNode) -> Optional[AVLNode]:
    """
    Filho de maior altura. Em caso de empate retorna o filho esquerdo.
    """
    if get_height(node.right) > get_height(node.left):
        return node.right
    return node.left


class TreeBalancer:
    """
    Motor de balanceamento da AVL.
    Sobe do ponto de mutação até a raiz corrigindo alturas e aplicando a
    reestruturação trinodal onde a diferença de alturas passa de 1.
    Complexidade: O(log n) por mutação.
    """
    def __init__(self, tree):
        self.tree = tree
        self.rotations = 0
        self.last_rotation: Optional[str] = None

    def rebalance(self, node: Optional[AVLNode]):
        """
        Rebalanceia a partir de 'node' em direção à raiz.
        Lança InconsistentTreeError se 'node' for None.
        """
        if node is None:
            raise InconsistentTreeError("Não é possível rebalancear um nó nulo.")

        while node is not None:
            adjust_height(node)
            if not is_balanced(node):
                node = self.restructure(node)
            node = node.parent

    def restructure(self, z: AVLNode) -> AVLNode:
        """
        Reestruturação trinodal no nó desbalanceado z.
        Identifica y (filho mais alto de z) e x (filho mais alto de y),
        renomeia os três em ordem como (a, b, c), religa as quatro
        subárvores T0..T3 e coloca b na posição de z.
        Retorna b, a nova raiz local.
        """
        y = taller_child(z)
        y_is_left = y.is_left_child()

        # Empate nos filhos de y só ocorre após remoção: x fica do mesmo lado
        # de y para que a rotação simples seja aplicada.
        if get_height(y.left) == get_height(y.right):
            x = y.left if y_is_left else y.right
        else:
            x = taller_child(y)
        x_is_left = x.is_left_child()

        if y_is_left:
            if x_is_left:
                # Rotação simples à direita (Left-Left)
                kind = RotationKind.SINGLE_RIGHT
                a, b, c = x, y, z
                t0, t1, t2, t3 = x.left, x.right, y.right, z.right
            else:
                # Rotação dupla esquerda-direita (Left-Right)
                kind = RotationKind.LEFT_RIGHT
                a, b, c = y, x, z
                t0, t1, t2, t3 = y.left, x.left, x.right, z.right
        elif x_is_left:
            # Rotação dupla direita-esquerda (Right-Left)
            kind = RotationKind.RIGHT_LEFT
            a, b, c = z, x, y
            t0, t1, t2, t3 = z.left, x.left, x.right, y.right
        else:
            # Rotação simples à esquerda (Right-Right)
            kind = RotationKind.SINGLE_LEFT
            a, b, c = z, y, x
            t0, t1, t2, t3 = z.left, y.left, x.left, x.right

        # Substitui z por b
        parent = z.parent
        if parent is None:
            self.tree.root = b
        elif z.is_left_child():
            parent.left = b
        else:
            parent.right = b
        b.parent = parent

        b.left = a
        a.parent = b
        b.right = c
        c.parent = b

        self._attach(a, t0, t1)
        self._attach(c, t2, t3)

        # Filhos antes do pai
        adjust_height(a)
        adjust_height(c)
        adjust_height(b)

        self.rotations += 1
        self.last_rotation = kind
        if self.tree.verbose:
            print(f"[AVL] {kind} em {z.value}: nova raiz local {b.value}")
        return b

    @staticmethod
    def _attach(node: AVLNode, left: Optional[AVLNode], right: Optional[AVLNode]):
        node.left = left
        if left is not None:
            left.parent = node
        node.right = right
        if right is not None:
            right.parent = node

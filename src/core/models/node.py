from typing import Optional, Union

from src.core.structures.exceptions import InconsistentTreeError

Number = Union[int, float]


class AVLNode:
    """
    Nó da Árvore AVL.
    Os filhos pertencem ao nó; o pai é apenas uma referência de navegação
    usada na subida do rebalanceamento.
    """
    def __init__(self, value: Number):
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.parent: Optional["AVLNode"] = None
        self.height = 0         # Folha tem altura 0, subárvore vazia tem -1

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def is_left_child(self) -> bool:
        """
        Retorna True se o nó é o filho esquerdo do pai.
        Lança InconsistentTreeError se o nó for a raiz ou se o pai não
        apontar de volta para ele.
        """
        if self.parent is None:
            raise InconsistentTreeError(f"O nó {self.value} não possui pai.")
        if self.parent.left is self:
            return True
        if self.parent.right is self:
            return False
        raise InconsistentTreeError(
            f"O pai {self.parent.value} não aponta para o nó {self.value}."
        )

    def __repr__(self):
        return f"AVLNode(value={self.value}, height={self.height})"

class AVLTreeError(Exception):
    """Erro base da Árvore AVL."""


class EmptyTreeError(AVLTreeError):
    """Operação de leitura (mínimo, máximo, raiz) em árvore vazia."""
    def __init__(self, message: str = "A árvore está vazia!"):
        super().__init__(message)


class InconsistentTreeError(AVLTreeError):
    """
    Invariante interna quebrada (ligação pai/filho inválida, rebalanceamento
    em nó nulo, altura ou ordem incorretas). Indica bug, nunca é recuperado.
    """

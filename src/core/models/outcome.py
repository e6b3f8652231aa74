class Outcome:
    """
    Resultado das operações de mutação.
    Duplicatas e remoções de valores ausentes não são erros, apenas resultados.
    """
    INSERTED = "INSERIDO"
    DUPLICATE = "DUPLICADO"
    DELETED = "REMOVIDO"
    NOT_FOUND = "NAO_ENCONTRADO"
    EMPTY_TREE = "ARVORE_VAZIA"


class RotationKind:
    """Formato da reestruturação trinodal aplicada."""
    SINGLE_RIGHT = "ROTACAO_DIREITA"
    LEFT_RIGHT = "ROTACAO_ESQUERDA_DIREITA"
    RIGHT_LEFT = "ROTACAO_DIREITA_ESQUERDA"
    SINGLE_LEFT = "ROTACAO_ESQUERDA"

# src/ui/tree_plot.py
import sys
import os
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.structures.avl_tree import AVLTree


def compute_layout(tree: AVLTree) -> Dict[int, Tuple[float, float]]:
    """
    Posição de cada nó: x = índice no percurso em ordem, y = -profundidade.
    Chave do dicionário é o id() do nó.
    """
    positions: Dict[int, Tuple[float, float]] = {}
    counter = [0]

    def walk(node, depth):
        if node is None:
            return
        walk(node.left, depth + 1)
        positions[id(node)] = (counter[0], -depth)
        counter[0] += 1
        walk(node.right, depth + 1)

    walk(tree.root, 0)
    return positions


def plot_tree(tree: AVLTree, filepath: Optional[str] = None, title: str = "Árvore AVL"):
    """
    Desenha o formato da árvore (valor e altura de cada nó).
    Se 'filepath' for informado salva a imagem, senão abre a janela.
    Retorna a Figure gerada.
    """
    positions = compute_layout(tree)
    fig = plt.figure(figsize=(max(6, len(positions) * 0.6), 5))
    ax = fig.add_subplot(1, 1, 1)

    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        x, y = positions[id(node)]
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[id(child)]
                ax.plot([x, cx], [y, cy], 'k-', linewidth=1, zorder=1)
                stack.append(child)
        ax.scatter([x], [y], s=600, c='lightsteelblue', edgecolors='navy', zorder=2)
        ax.text(x, y, f"{node.value}", ha='center', va='center', fontsize=9, zorder=3)
        ax.text(x, y - 0.3, f"h={node.height}", ha='center', va='top', fontsize=7, color='gray')

    ax.set_title(title)
    ax.axis('off')

    if filepath:
        directory = os.path.dirname(filepath)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        fig.savefig(filepath)
        plt.close(fig)
        print(f">> Gráfico salvo em '{filepath}'")
    else:
        plt.show()
    return fig

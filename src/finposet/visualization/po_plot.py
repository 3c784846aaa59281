"""
Visualization module for Hasse diagrams.
"""

from typing import Dict, Any, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from ..poset.base import Poset


class POPlot:
    """Class for drawing posets as Hasse diagrams."""

    @staticmethod
    def ranks(G: nx.DiGraph) -> Dict[Any, int]:
        """Length of the longest chain from a minimal element to each node."""
        rank = {}
        for node in nx.topological_sort(G):
            preds = list(G.predecessors(node))
            rank[node] = 1 + max(rank[p] for p in preds) if preds else 0
        return rank

    @staticmethod
    def rank_layout(poset: Poset) -> Dict[int, Tuple[float, float]]:
        """
        Positions for a Hasse diagram: one row per rank, elements of a row
        centred around x = 0 in ascending order.
        """
        G = poset.to_networkx()
        rank = POPlot.ranks(G)
        rows: Dict[int, list] = {}
        for node in sorted(G.nodes):
            rows.setdefault(rank[node], []).append(node)
        pos = {}
        for r, nodes in rows.items():
            offset = (len(nodes) - 1) / 2.0
            for i, node in enumerate(nodes):
                pos[node] = (i - offset, float(r))
        return pos

    @staticmethod
    def visualize_hasse(
        poset: Poset,
        labels: Optional[Dict[int, str]] = None,
        title: Optional[str] = None,
        ax=None
    ):
        """
        Draws the Hasse diagram of a poset, smaller elements at the bottom.

        Parameters:
        - poset: Poset in any representation.
        - labels (dict, optional): Node labels; element identifiers by default.
        - title (str, optional): Plot title; a default title is generated if missing.
        - ax (optional): Matplotlib axes to draw on; a new figure is created if missing.

        Returns:
        - The matplotlib axes holding the drawing.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 6))
        if title is None:
            title = f"Hasse Diagram ({poset.md.n} elements)"
        if labels is None:
            labels = {i: str(i) for i in poset.elements()}

        G = poset.to_networkx()
        pos = POPlot.rank_layout(poset)
        nx.draw(G, pos, ax=ax, labels=labels, with_labels=True, arrows=False,
                node_color='lightblue', node_size=500, font_size=12, font_weight='bold')
        ax.set_title(title)
        return ax

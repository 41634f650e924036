"""
Scoring model visualization.

Draws a score or cost model as a heatmap of its substitution table next to
a panel holding the gap (or indel) scalars.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence, Tuple

from .models import AbstractCostModel, AffineGapScoreModel
from .submat import SubstitutionMatrix


def _model_scalars(model) -> Tuple[Tuple[str, str], Tuple[float, float]]:
    if isinstance(model, AffineGapScoreModel):
        return ("Gap Open", "Gap Extend"), (float(model.gap_open), float(model.gap_extend))
    if isinstance(model, AbstractCostModel):
        return ("Insertion", "Deletion"), (float(model.insertion), float(model.deletion))
    raise TypeError(f"Cannot plot {type(model).__name__}")


def _substitution_grid(model, alphabet: Optional[Sequence]) -> Tuple[np.ndarray, list]:
    submat = model.submat
    if alphabet is None and isinstance(submat, SubstitutionMatrix):
        if submat.alphabet_to_index is not None:
            labels = sorted(submat.alphabet_to_index, key=submat.alphabet_to_index.get)
            return np.asarray(submat.matrix, dtype=float), [str(s) for s in labels]
        if submat.matrix.shape[0] == submat.matrix.shape[1]:
            n = submat.matrix.shape[0]
            return np.asarray(submat.matrix, dtype=float), [str(i) for i in range(n)]
    if alphabet is None:
        alphabet = ["A", "C", "G", "T"]
    lookup = model.substitution_score if isinstance(model, AffineGapScoreModel) else model.substitution_cost
    grid = np.array([[float(lookup(a, b)) for b in alphabet] for a in alphabet])
    return grid, [str(a) for a in alphabet]


def plot_score_model(
    model,
    alphabet: Optional[Sequence] = None,
    figsize: Tuple[float, float] = (5, 3.5),
) -> plt.Figure:
    """
    Display a scoring model as a heatmap of the substitution table and a
    panel showing the gap scores (or insertion/deletion costs).

    Parameters
    ----------
    model : AffineGapScoreModel or CostModel
        Model to draw.
    alphabet : sequence, optional
        Symbols to tabulate.  Defaults to the matrix alphabet when the
        table carries one, otherwise to A, C, G, T.
    figsize : tuple, optional
        Figure size (width, height).

    Returns
    -------
    fig : matplotlib.figure.Figure
        The figure object.
    """
    def tc(val, v, cmap):  # auto text color
        rgb = cmap((val + v) / (2 * v))
        lum = 0.2126 * rgb[0] + 0.7152 * rgb[1] + 0.0722 * rgb[2]
        return "white" if lum < 0.5 else "black"

    names, scalars = _model_scalars(model)
    s, labs = _substitution_grid(model, alphabet)
    k = len(labs)

    cmap = plt.cm.RdBu.copy()  # negative=red, positive=blue
    cmap.set_bad("white")
    v = np.max(np.abs(np.concatenate([s.ravel(), scalars])))
    v = v if v > 0 else 1.0

    fig, ax = plt.subplots(1, 2, figsize=figsize)

    # ---------------- substitution ----------------
    ax[0].imshow(s, cmap=cmap, vmin=-v, vmax=v)
    if k <= 25:
        for i in range(k):
            for j in range(k):
                val = s[i, j]
                ax[0].text(j, i, f"{val:g}", ha="center", va="center",
                           color=tc(val, v, cmap))
        ax[0].set_xticks(np.arange(k), labs)
        ax[0].set_yticks(np.arange(k), labs)
    title = "Substitution Matrix" if isinstance(model, AffineGapScoreModel) else "Substitution Cost"
    ax[0].set_title(f"{title}\ns(a, b)")
    ax[0].set_xlabel("Seq2 Symbol")
    ax[0].set_ylabel("Seq1 Symbol")
    for sp in ax[0].spines.values():
        sp.set_visible(False)

    # ---------------- gaps / indels ----------------
    g = np.full((2, 1), np.nan)
    g[0, 0], g[1, 0] = scalars

    ax[1].imshow(g, cmap=cmap, vmin=-v, vmax=v)
    for row, val in enumerate(scalars):
        ax[1].text(0, row, f"{val:g}", ha="center", va="center",
                   color=tc(val, v, cmap))

    ax[1].set_xticks([])
    ax[1].set_yticks([0, 1])
    ax[1].set_yticklabels(list(names))
    ax[1].set_title("Affine Gaps" if isinstance(model, AffineGapScoreModel) else "Indels")
    for sp in ax[1].spines.values():
        sp.set_visible(False)

    plt.tight_layout()
    return fig

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .models import GridItem
from .sanity import item_rect, placed_items
from .units import format_float


def render_preview(
    items: Sequence[GridItem],
    container_size: float,
    path: str | Path | None = None,
    title: str = "",
) -> plt.Figure:
    """Draw the placed items; columns run left to right, content downward."""
    fig = plt.Figure(figsize=(6, 6))
    ax = fig.add_subplot(111)
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)

    placed = placed_items(items)
    if not placed:
        ax.axis("off")
        ax.text(
            0.5,
            0.5,
            "No placed items",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )
    else:
        top = min(0.0, min(item_rect(item)[1] for _, item in placed))
        bottom = max(item_rect(item)[1] + item_rect(item)[3] for _, item in placed)
        ax.add_patch(
            Rectangle(
                (0, top),
                container_size,
                bottom - top,
                fill=False,
                edgecolor="black",
                lw=1.5,
            )
        )
        for idx, item in placed:
            x, y, w, h = item_rect(item)
            ax.add_patch(
                Rectangle(
                    (x, y),
                    w,
                    h,
                    fill=True,
                    facecolor="#cfe2f3",
                    edgecolor="#0b5394",
                    lw=1,
                    alpha=0.9,
                )
            )
            label = item.key or str(idx)
            ax.text(
                x + w / 2,
                y + h / 2,
                f"{label}\n{format_float(h, 0)}",
                ha="center",
                va="center",
                fontsize=8,
                color="#0b5394",
            )
        left = min(0.0, min(item_rect(item)[0] for _, item in placed))
        right = max(
            container_size,
            max(item_rect(item)[0] + item_rect(item)[2] for _, item in placed),
        )
        ax.set_xlim(left, right)
        ax.set_ylim(bottom, top)
        ax.grid(True, linestyle="--", alpha=0.2)
        ax.set_xlabel("inline")
        ax.set_ylabel("content")

    if path is not None:
        fig.savefig(str(path))
    return fig

"""
Visualization utilities for displaying board states.
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from board.coordinates import FILES
from board.pieces import EMPTY, encode_char


def render_board_text(grid: np.ndarray, boxed: bool = False) -> str:
    """
    Render a grid as plain text, rank 8 at the top.

    Args:
        grid: 8x8 array of piece ids
        boxed: Draw a grid of '+--+' borders with rank labels on both sides

    Returns:
        Multi-line string
    """
    lines = []

    if not boxed:
        for row in range(8):
            symbols = " ".join(encode_char(grid[row, col]) for col in range(8))
            lines.append(f"{8 - row} {symbols}")
        lines.append("  " + " ".join(FILES))
        return "\n".join(lines)

    files_line = "    " + "  ".join(FILES)
    border = "  +" + "--+" * 8
    lines.append(files_line)
    lines.append(border)
    for row in range(8):
        rank_num = 8 - row
        cells = "".join(f" {encode_char(grid[row, col])}|" for col in range(8))
        lines.append(f"{rank_num} |{cells} {rank_num}")
        lines.append(border)
    lines.append(files_line)
    return "\n".join(lines)


def plot_board(
    grid: np.ndarray,
    fen: Optional[str] = None,
    output_path: Optional[str] = None,
    title: str = "Board"
) -> None:
    """
    Draw a board state with matplotlib.

    Args:
        grid: 8x8 array of piece ids
        fen: Optional FEN shown under the title
        output_path: Where to save the image (default: show window)
        title: Plot title
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    for row in range(8):
        for col in range(8):
            color = '#F0D9B5' if (row + col) % 2 == 0 else '#B58863'
            rect = plt.Rectangle((col, 7 - row), 1, 1, facecolor=color)
            ax.add_patch(rect)

            piece = int(grid[row, col])
            if piece == EMPTY:
                continue

            # White: light letter on dark disc, Black: dark letter on light disc
            text_color = 'white' if piece > 0 else 'black'
            ax.text(col + 0.5, 7 - row + 0.5, encode_char(piece).upper(),
                    fontsize=32, ha='center', va='center',
                    color=text_color, weight='bold',
                    bbox=dict(boxstyle='circle', facecolor='#555555' if piece > 0 else '#DDDDDD',
                              edgecolor='none', alpha=0.6))

    ax.set_xlim(0, 8)
    ax.set_ylim(0, 8)
    ax.set_aspect('equal')

    # File labels (a-h)
    for i, label in enumerate(FILES):
        ax.text(i + 0.5, -0.3, label, fontsize=14, ha='center', weight='bold')

    # Rank labels (1-8)
    for i in range(8):
        ax.text(-0.3, i + 0.5, str(i + 1), fontsize=14, ha='center', va='center', weight='bold')

    ax.axis('off')
    ax.set_title(title if fen is None else f'{title}\nFEN: {fen}', fontsize=14, weight='bold')

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=100, bbox_inches='tight')
        print(f"Board image saved to: {output_path}")
    else:
        plt.show()

    plt.close(fig)

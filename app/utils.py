"""
Utility functions for Streamlit UI
"""

from typing import Dict, Tuple
import matplotlib.pyplot as plt
import matplotlib
from matplotlib.figure import Figure
import numpy as np
from numpy.typing import NDArray

matplotlib.rcParams['font.family'] = ['DejaVu Sans', 'sans-serif']

STRATEGY_COLORS = {"stay": "#4C78A8", "switch": "#54A24B"}


def create_win_rate_chart(
    win_rates: Dict[str, float],
    title: str = "Win Rate by Strategy",
    figsize: Tuple[float, float] = (6, 4)
) -> Figure:
    """
    戦略ごとの勝率の棒グラフを作成

    Args:
        win_rates: {"stay": p, "switch": p}
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    labels = list(win_rates.keys())
    values = [win_rates[k] for k in labels]
    colors = [STRATEGY_COLORS.get(k, "#F58518") for k in labels]

    bars = ax.bar(labels, values, edgecolor="black", alpha=0.8, color=colors)
    for bar, value in zip(bars, values):
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            value + 0.02,
            f"{value:.1%}",
            ha="center",
            fontweight="bold"
        )

    ax.set_ylim(0, 1)
    ax.set_ylabel("Win Rate")
    ax.set_title(title)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    return fig


def create_convergence_chart(
    running_rates: Dict[str, NDArray[np.float64]],
    title: str = "Running Win Rate",
    figsize: Tuple[float, float] = (10, 5)
) -> Figure:
    """
    ラウンド経過に伴う累積勝率の折れ線グラフを作成

    Args:
        running_rates: 戦略名 -> 累積勝率の配列
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    for label, rates in running_rates.items():
        rounds = np.arange(1, len(rates) + 1)
        ax.plot(
            rounds,
            rates,
            color=STRATEGY_COLORS.get(label, "#F58518"),
            linewidth=1.5,
            label=label
        )

    # 理論値
    for ref in (1 / 3, 2 / 3):
        ax.axhline(ref, color="gray", linestyle="--", linewidth=1)

    ax.set_ylim(0, 1)
    ax.set_xlabel("Games")
    ax.set_ylabel("Win Rate")
    ax.set_title(title)
    ax.legend()
    ax.grid(alpha=0.3)
    fig.tight_layout()

    return fig


def format_number(value: float, decimals: int = 1) -> str:
    """
    数値をフォーマット

    Args:
        value: 数値
        decimals: 小数点以下桁数

    Returns:
        フォーマットされた文字列
    """
    if decimals == 0:
        return f"{value:,.0f}"
    else:
        return f"{value:,.{decimals}f}"

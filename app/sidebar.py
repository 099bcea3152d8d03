"""
Sidebar component for Streamlit UI
"""

from typing import Tuple
import streamlit as st

from montyhall_core.config import SimulationConfig, DEFAULT_N_GAMES
from montyhall_core.exceptions import ConfigurationError


def render_sidebar() -> Tuple[SimulationConfig | None, bool]:
    """
    サイドバーをレンダリング

    Returns:
        (設定オブジェクト or None, 実行ボタンが押されたか)
    """
    st.sidebar.header("Simulation Settings")

    # ラウンド数
    n_games = st.sidebar.number_input(
        "Number of Games",
        min_value=1,
        max_value=100_000,
        value=DEFAULT_N_GAMES,
        step=100,
        help="Number of rounds; each round evaluates both strategies"
    )

    # 並列ワーカー数
    n_workers = st.sidebar.slider(
        "Worker Processes",
        min_value=1,
        max_value=8,
        value=1,
        help="Rounds are split into contiguous chunks, one per worker"
    )

    # 表示桁数
    decimals = st.sidebar.selectbox(
        "Decimals",
        options=[2, 3, 4],
        index=0,
        help="Rounding for the proportion table"
    )

    st.sidebar.markdown("---")

    # シード
    use_seed = st.sidebar.checkbox("Use fixed random seed", value=False)
    random_seed: int | None = None
    if use_seed:
        random_seed = int(
            st.sidebar.number_input(
                "Random Seed",
                min_value=0,
                max_value=2**31 - 1,
                value=42,
                step=1
            )
        )

    run_clicked = st.sidebar.button(
        "Run Simulation", type="primary", use_container_width=True
    )

    try:
        config = SimulationConfig(
            n_games=int(n_games),
            random_seed=random_seed,
            n_workers=int(n_workers),
            decimals=int(decimals),
        )
    except ConfigurationError as e:
        st.sidebar.error(str(e))
        return None, run_clicked

    return config, run_clicked

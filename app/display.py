"""
Display component for Streamlit UI
"""

import streamlit as st
import matplotlib.pyplot as plt

from montyhall_core.config import SimulationConfig, Strategy
from montyhall_core.simulation import SimulationEngine
from app.utils import create_win_rate_chart, create_convergence_chart, format_number


def render_results(config: SimulationConfig) -> None:
    """
    シミュレーションを実行し結果を表示

    Args:
        config: シミュレーション設定
    """
    # 実行条件サマリ
    st.subheader("Execution Settings")
    col1, col2, col3 = st.columns(3)
    col1.metric("Games", f"{config.n_games:,}")
    col2.metric("Workers", config.n_workers)
    col3.metric("Seed", "random" if config.random_seed is None else config.random_seed)

    st.markdown("---")

    # プログレスバー
    progress_bar = st.progress(0)
    status_text = st.empty()
    step = max(1, config.n_games // 100)

    def progress_callback(current: int, total: int) -> None:
        if current != total and current % step != 0:
            return
        progress = current / total if total > 0 else 0
        progress_bar.progress(progress)
        status_text.text(f"Running... {current}/{total} games completed")

    # シミュレーション実行
    try:
        engine = SimulationEngine(config, progress_callback=progress_callback)
        results = engine.run()
    except Exception as e:
        st.error(f"Simulation failed: {e}")
        return

    status_text.text("Completed!")
    progress_bar.progress(1.0)

    st.markdown("---")

    # 勝率
    st.subheader("Results Summary")
    win_rates = {s.value: results.win_rate(s) for s in Strategy}
    col1, col2 = st.columns(2)
    col1.metric("Stay Win Rate", format_number(win_rates["stay"] * 100, 1) + "%")
    col2.metric("Switch Win Rate", format_number(win_rates["switch"] * 100, 1) + "%")

    st.markdown("**Outcome proportions by strategy**")
    st.dataframe(results.crosstab(config.decimals), use_container_width=True)

    st.markdown("---")

    # グラフ（左右に並べて表示）
    st.subheader("Charts")
    col_left, col_right = st.columns(2)

    with col_left:
        fig = create_win_rate_chart(win_rates)
        st.pyplot(fig)
        plt.close(fig)

    with col_right:
        fig_conv = create_convergence_chart(
            {s.value: results.running_win_rate(s) for s in Strategy}
        )
        st.pyplot(fig_conv)
        plt.close(fig_conv)

    st.markdown("---")

    # ラウンド別結果テーブル
    st.subheader("Game Results")
    games_df = results.games_dataframe().rename(columns={
        "round_id": "Game",
        "arrangement": "Arrangement",
        "car_door": "Car",
        "first_pick": "First Pick",
        "opened_door": "Opened",
        "stay_outcome": "Stay",
        "switch_outcome": "Switch",
    })
    st.dataframe(games_df, use_container_width=True, hide_index=True)

    st.markdown("---")

    # CSVダウンロード
    csv = results.to_dataframe().to_csv(index=False)
    st.download_button(
        label="Download Results (CSV)",
        data=csv,
        file_name="montyhall_results.csv",
        mime="text/csv",
        use_container_width=True
    )

    st.download_button(
        label="Download Summary (TXT)",
        data=results.get_summary_text(config.decimals),
        file_name="montyhall_summary.txt",
        mime="text/plain",
        use_container_width=True
    )

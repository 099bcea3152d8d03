"""
Streamlit application entry point for Monty Hall Simulator
"""

import streamlit as st

from app.sidebar import render_sidebar
from app.display import render_results


def main() -> None:
    """Streamlitアプリのエントリーポイント"""

    # ページ設定
    st.set_page_config(
        page_title="Monty Hall Simulator",
        page_icon=":door:",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # タイトル
    st.title("Monty Hall Simulator")
    st.markdown(
        "**Stay or switch? An empirical comparison over repeated games**"
    )

    st.markdown("---")

    # サイドバーでパラメータ入力
    config, run_clicked = render_sidebar()

    # メイン領域
    if run_clicked:
        if config is not None:
            render_results(config)
        else:
            st.error(
                "Configuration error. Please check the sidebar settings."
            )
    else:
        # 初期表示
        st.info(
            "Configure simulation parameters in the sidebar and click "
            "**Run Simulation** to start."
        )

        with st.expander("How It Works", expanded=True):
            st.markdown("""
            ### One Game

            1. A car is placed behind one of three doors, goats behind the other two
            2. The contestant picks a door at random
            3. The host opens another door that hides a goat
               - If the contestant holds the car, the host picks one of the two goats at random
               - Otherwise only one door qualifies
            4. **Stay** keeps the first pick; **Switch** takes the remaining closed door

            Both strategies are judged against the same doors and the same
            first pick, so the only difference between them is the decision.

            ### Expected Result

            - **Stay** wins about 1/3 of the time
            - **Switch** wins about 2/3 of the time
            """)


if __name__ == "__main__":
    main()

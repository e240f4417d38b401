"""Main Streamlit application entry point."""

import streamlit as st

from gridiron.app.pages import account, admin, lineup, squad_builder, standings

# Navigation
PAGES = {
    "Account & League": account,
    "Squad": squad_builder,
    "Lineup": lineup,
    "Standings": standings,
    "Admin": admin,
}


def main() -> None:
    """Run the main application."""
    st.set_page_config(
        page_title="Gridiron - NFL Fantasy",
        page_icon="🏈",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.sidebar.title("Gridiron")
    st.sidebar.markdown("*NFL Fantasy (FPL-style)*")
    account = st.session_state.get("account")
    if account:
        st.sidebar.caption(f"Signed in as **{account.get('name')}**")
    else:
        st.sidebar.caption("Not signed in")
    st.sidebar.divider()

    # Page selection
    page_name = st.sidebar.radio("Navigation", list(PAGES.keys()), label_visibility="collapsed")

    # Run selected page
    page = PAGES[page_name]
    page.render()


if __name__ == "__main__":
    main()

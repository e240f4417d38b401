"""Account and league page."""

import streamlit as st

from ...client import ServiceError
from ..state import init_session_state


def _register() -> None:
    service = st.session_state.service
    service.seed_demo()
    try:
        user_id = service.register(st.session_state.reg_name, st.session_state.reg_email)
    except ServiceError as e:
        st.session_state.account_message = ("error", f"Register failed: {e}")
        return
    st.session_state.user_id = user_id
    st.session_state.account = {"id": user_id, "name": st.session_state.reg_name, "email": st.session_state.reg_email}
    st.session_state.account_message = ("success", "Registered!")


def _load_account() -> None:
    raw = st.session_state.existing_user_id.strip()
    if not raw.isdigit():
        st.session_state.account_message = ("error", "User ID must be a number")
        return
    try:
        st.session_state.account = st.session_state.service.me(int(raw))
    except ServiceError as e:
        st.session_state.account_message = ("error", f"Load account failed: {e}")
        return
    st.session_state.user_id = int(raw)
    st.session_state.account_message = None


def _create_league() -> None:
    try:
        league_id, entry_id = st.session_state.service.create_league(
            st.session_state.user_id, st.session_state.team_name
        )
    except ServiceError as e:
        st.session_state.account_message = ("error", f"Create league failed: {e}")
        return
    st.session_state.league_id = league_id
    st.session_state.entry_id = entry_id
    st.session_state.account_message = ("success", f"League created! ID: {league_id}")


def _join_league() -> None:
    raw = st.session_state.join_league_id.strip()
    if not raw.isdigit():
        st.session_state.account_message = ("error", "League ID must be a number")
        return
    try:
        entry_id = st.session_state.service.join_league(
            st.session_state.user_id, int(raw), st.session_state.team_name
        )
    except ServiceError as e:
        st.session_state.account_message = ("error", f"Join league failed: {e}")
        return
    st.session_state.league_id = int(raw)
    st.session_state.entry_id = entry_id
    st.session_state.account_message = ("success", "Joined league!")


def render() -> None:
    """Render the account page."""
    init_session_state()

    st.title("Account & League")

    message = st.session_state.get("account_message")
    if message:
        kind, text = message
        getattr(st, kind)(text)

    register_col, login_col = st.columns(2)
    with register_col:
        st.subheader("Register")
        st.text_input("Name", key="reg_name")
        st.text_input("Email", key="reg_email")
        st.button("Register", on_click=_register)
    with login_col:
        st.subheader("Existing account")
        st.text_input("User ID", key="existing_user_id")
        st.button("Load Account", on_click=_load_account)
        account = st.session_state.account
        if account:
            st.caption(f"Signed in as {account.get('name')} ({account.get('email')})")

    st.divider()
    st.subheader("League")
    signed_in = st.session_state.user_id is not None
    st.text_input("Team Name", key="team_name")
    create_col, join_col, info_col = st.columns(3)
    with create_col:
        st.button("Create League", on_click=_create_league, disabled=not signed_in)
    with join_col:
        st.text_input("League ID", key="join_league_id")
        st.button("Join League", on_click=_join_league, disabled=not signed_in)
    with info_col:
        st.markdown(f"League ID: **{st.session_state.league_id or '-'}**")
        st.markdown(f"Entry ID: **{st.session_state.entry_id or '-'}**")

"""Login and registration forms."""
import streamlit as st

from todolist.config.settings import get_settings
from todolist.state.app_state import AppState
from .feedback import render_feedback


def render_login(app: AppState) -> None:
    """Render the login screen."""
    st.title("✅ ToDo List")

    with st.form("login"):
        email = st.text_input("Email address")
        password = st.text_input("Password", type="password")
        submit = st.form_submit_button("Log in")

    if submit:
        email, password = email.strip(), password.strip()
        if not email or not password:
            render_feedback("Please enter an email and a password", type_="error")
        elif app.login(email, password):
            st.session_state.screen = "home"
            st.rerun()
        else:
            render_feedback("Incorrect email or password", type_="error")

    if st.button("No account? Sign up"):
        st.session_state.screen = "register"
        st.rerun()


def render_register(app: AppState) -> None:
    """Render the registration screen."""
    min_length = get_settings().MIN_PASSWORD_LENGTH
    st.title("Create an account")

    with st.form("register"):
        name = st.text_input("Full name")
        email = st.text_input("Email address")
        password = st.text_input("Password", type="password")
        submit = st.form_submit_button("Sign up")

    if submit:
        name, email, password = name.strip(), email.strip(), password.strip()
        if not name:
            render_feedback("Please enter your name", type_="error")
        elif not email:
            render_feedback("Please enter an email", type_="error")
        elif len(password) < min_length:
            render_feedback(
                f"The password must be at least {min_length} characters long",
                type_="error"
            )
        elif app.register(name, email, password):
            st.session_state.screen = "home"
            st.rerun()
        else:
            render_feedback("This email is already in use", type_="error")

    if st.button("Back to login"):
        st.session_state.screen = "login"
        st.rerun()

"""Feedback component for displaying user messages."""
import streamlit as st


def render_feedback(message: str, type_: str = "info") -> None:
    """
    Display a feedback message.

    Args:
        message: The message to display
        type_: Type of message ('success', 'error', or 'info')
    """
    if type_ == "success":
        st.success(message)
    elif type_ == "error":
        st.error(message)
    else:
        st.info(message)

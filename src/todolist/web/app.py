"""Main Streamlit application for TodoList.

Run with ``streamlit run src/todolist/web/app.py``.
"""
import uuid
import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from todolist.config.settings import get_streamlit_settings
from todolist.db.session import create_db_engine
from todolist.services.task_store import TaskStore
from todolist.state.app_state import AppState
from todolist.web.components import (
    render_login,
    render_register,
    render_task_list,
    render_add_task,
    render_preferences,
    apply_theme,
    render_feedback
)
from todolist.utils.logger import get_logger, log_context

logger = get_logger(__name__)


@st.cache_resource
def get_store() -> TaskStore:
    """One store (and engine) for the whole server process."""
    return TaskStore(create_db_engine())


def init_session_state() -> None:
    """Initialize session state variables."""
    if 'session_id' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        logger.info("New session started", session_id=st.session_state.session_id)

    if 'app' not in st.session_state:
        st.session_state.app = AppState(get_store())

    if 'screen' not in st.session_state:
        st.session_state.screen = 'login'


def render_home(app: AppState) -> None:
    """Render the task list of the logged in user."""
    user = app.auth.current_user

    col1, col2, col3 = st.columns([4, 1, 1])
    col1.title(f"Hello, {user.name}")
    if col2.button("⚙️", help="Preferences"):
        st.session_state.screen = 'preferences'
        st.rerun()
    if col3.button("🚪", help="Log out"):
        app.logout()
        st.session_state.screen = 'login'
        st.rerun()

    render_add_task(app.tasks)
    render_task_list(app.tasks)


def main() -> None:
    """Main application entry point."""
    settings = get_streamlit_settings()
    st.set_page_config(
        page_title=settings.PAGE_TITLE,
        page_icon=settings.PAGE_ICON,
        layout=settings.LAYOUT
    )

    init_session_state()
    app: AppState = st.session_state.app
    user = app.auth.current_user
    with log_context(
        session_id=st.session_state.session_id,
        user_id=user.id if user else None
    ):
        render_screen(app)


def render_screen(app: AppState) -> None:
    """Apply the theme and render the current screen."""
    apply_theme(app.theme)

    screen = st.session_state.screen
    if screen in ('home', 'preferences') and not app.auth.is_authenticated:
        screen = st.session_state.screen = 'login'

    try:
        if screen == 'register':
            render_register(app)
        elif screen == 'home':
            render_home(app)
        elif screen == 'preferences':
            if st.button("← Back"):
                st.session_state.screen = 'home'
                st.rerun()
            render_preferences(app.theme, app.auth.current_user)
        else:
            render_login(app)
    except SQLAlchemyError:
        logger.exception("Storage error")
        render_feedback("Something went wrong while saving. Please try again.", type_="error")


if __name__ == "__main__":
    main()

"""Preferences screen: theme mode, color and background image."""
from pathlib import Path
import base64

import streamlit as st

from todolist.config.settings import get_settings
from todolist.domain.colors import color_from_hex, color_to_hex
from todolist.domain.types import ThemeMode, UserRecord
from todolist.state.theme import ThemeState
from todolist.utils.logger import get_logger

logger = get_logger(__name__)

MODE_LABELS = {
    ThemeMode.LIGHT: "☀️ Light",
    ThemeMode.DARK: "🌙 Dark",
    ThemeMode.SYSTEM: "💻 System",
}


def save_upload(user: UserRecord, upload) -> Path:
    """
    Store an uploaded image and return where it was written.

    Only the path is kept in preferences; the bytes stay on disk.
    """
    upload_dir = get_settings().UPLOAD_DIR
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / f"{user.id}_{Path(upload.name).name}"
    path.write_bytes(upload.getvalue())
    logger.debug("Background image saved", user_id=user.id, path=str(path))
    return path


def apply_theme(theme: ThemeState) -> None:
    """Inject CSS for the current theme color, mode and background."""
    swatch = theme.swatch
    rules = [
        f".stButton > button, .stFormSubmitButton > button "
        f"{{ border-color: {swatch[500].to_css()}; }}",
        f"h1, h2, h3 {{ color: {swatch[900].to_css()}; }}",
    ]
    if theme.theme_mode == ThemeMode.DARK:
        rules.append(".stApp { background-color: #0E1117; color: #FAFAFA; }")
    elif theme.theme_mode == ThemeMode.LIGHT:
        rules.append(".stApp { background-color: #FFFFFF; color: #31333F; }")

    path = theme.background_image_path
    if path and Path(path).is_file():
        encoded = base64.b64encode(Path(path).read_bytes()).decode()
        rules.append(
            ".stApp { background-image: linear-gradient(rgba(0,0,0,0.3), rgba(0,0,0,0.3)), "
            f"url(data:image;base64,{encoded}); background-size: cover; }}"
        )

    st.markdown(f"<style>{' '.join(rules)}</style>", unsafe_allow_html=True)


def render_preferences(theme: ThemeState, user: UserRecord) -> None:
    """Render the preferences screen."""
    st.header("Preferences")

    st.subheader("Display mode")
    modes = list(ThemeMode)
    mode = st.radio(
        "Display mode",
        options=modes,
        format_func=lambda m: MODE_LABELS[m],
        index=modes.index(theme.theme_mode),
        horizontal=True,
        label_visibility="collapsed"
    )
    if mode != theme.theme_mode:
        theme.update_theme(user, theme_mode=mode)
        st.rerun()

    st.subheader("Theme color")
    picked = st.color_picker("Theme color", value=color_to_hex(theme.color))
    if picked.upper() != color_to_hex(theme.color):
        theme.update_theme(user, color=color_from_hex(picked))
        st.rerun()

    st.divider()
    st.subheader("Background")
    upload = st.file_uploader("Choose a background image", type=["png", "jpg", "jpeg", "gif", "webp"])
    if upload is not None and st.button("Use this image"):
        theme.update_theme(user, background_image_path=str(save_upload(user, upload)))
        st.rerun()

    if theme.background_image_path and st.button("Remove the background image"):
        theme.update_theme(user, background_image_path="")
        st.rerun()

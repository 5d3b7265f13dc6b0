"""Task list display and editing."""
import streamlit as st

from todolist.domain.types import TaskRecord
from todolist.state.tasks import TaskListState
from .feedback import render_feedback


def render_add_task(tasks: TaskListState) -> None:
    """Render the form for creating a new task."""
    with st.expander("New task", expanded=False):
        with st.form("add_task", clear_on_submit=True):
            title = st.text_input("Title")
            content = st.text_area("Content")
            submit = st.form_submit_button("Save")

        if submit:
            if not title:
                render_feedback("A task needs a title", type_="error")
            else:
                tasks.add_task(title, content)
                st.rerun()


def _render_edit_form(tasks: TaskListState, task: TaskRecord) -> None:
    with st.form(f"edit_form_{task.id}"):
        title = st.text_input("Title", value=task.title)
        content = st.text_area("Content", value=task.content)
        col1, col2 = st.columns(2)
        save = col1.form_submit_button("Save")
        cancel = col2.form_submit_button("Cancel")

    if save and title:
        task.title = title
        task.content = content
        tasks.update_task(task)
        st.session_state.editing_task = None
        st.rerun()
    elif cancel:
        st.session_state.editing_task = None
        st.rerun()


def _render_delete_confirmation(tasks: TaskListState, task: TaskRecord) -> None:
    st.warning("Do you really want to delete this task?")
    col1, col2 = st.columns(2)
    if col1.button("Delete", key=f"confirm_del_{task.id}", type="primary"):
        tasks.delete_task(task.id)
        st.session_state.deleting_task = None
        st.rerun()
    if col2.button("Cancel", key=f"cancel_del_{task.id}"):
        st.session_state.deleting_task = None
        st.rerun()


def render_task_list(tasks: TaskListState) -> None:
    """
    Render the tasks of the current user.

    Args:
        tasks: Task list state bound to the logged in user
    """
    if not tasks.tasks:
        st.info("You have no tasks.")
        return

    for task in tasks.tasks:
        if st.session_state.get("editing_task") == task.id:
            _render_edit_form(tasks, task)
            continue

        col1, col2, col3, col4 = st.columns([1, 6, 1, 1])
        with col1:
            checked = st.checkbox(
                "Done",
                value=task.completed,
                key=f"done_{task.id}",
                label_visibility="collapsed"
            )
            if checked != task.completed:
                tasks.toggle_task_status(task)
                st.rerun()
        with col2:
            title = f"~~{task.title}~~" if task.completed else f"**{task.title}**"
            st.markdown(title)
            if task.content:
                st.caption(task.content)
        with col3:
            if st.button("✏️", key=f"edit_{task.id}"):
                st.session_state.editing_task = task.id
                st.rerun()
        with col4:
            if st.button("🗑️", key=f"del_{task.id}"):
                st.session_state.deleting_task = task.id
                st.rerun()

        if st.session_state.get("deleting_task") == task.id:
            _render_delete_confirmation(tasks, task)

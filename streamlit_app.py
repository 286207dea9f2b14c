"""Streamlit entrypoint for the random meal recommendation page."""

from __future__ import annotations

import streamlit as st

from meal_app.logging_config import get_logger
from meal_app.models import LoadState
from meal_app.session_state import (
    get_orchestrator,
    initialize_session_state,
    request_load,
)
from meal_app.utils import summarize

logger = get_logger(__name__)


def load_with_spinner() -> None:
    """Request a new recipe while showing a spinner."""
    with st.spinner("Finding something to eat..."):
        started = request_load()
    if not started:
        logger.info("Recommendation ignored because a load is already running")


def render_recipe(state: LoadState) -> None:
    """Render the recipe card with a short summary and the full text on demand."""
    recipe = state.recipe
    if recipe.thumbnail_url:
        st.image(recipe.thumbnail_url, use_container_width=True)

    st.subheader(recipe.name)
    if recipe.category:
        st.caption(f"# {recipe.category}")

    st.markdown("#### How to cook")
    text = state.display_text
    st.write(summarize(text))

    with st.expander("Show full recipe"):
        st.markdown(f"**{recipe.name}**")
        st.write(text)


def render_state(state: LoadState) -> None:
    if state.is_loading:
        st.info("Recommending a meal...")
    elif state.recipe is not None:
        render_recipe(state)
    elif state.error_message:
        st.error(state.error_message)
    else:
        st.write("No meal yet. Press the button below to get a recommendation!")


def main() -> None:
    """Primary Streamlit entrypoint."""
    initialize_session_state()

    st.title("What should I eat today?")
    logger.info("Application started/refreshed")

    if not st.session_state.initial_load_done:
        st.session_state.initial_load_done = True
        logger.info("Loading first recommendation for session")
        load_with_spinner()

    state = get_orchestrator().snapshot()
    render_state(state)

    st.button(
        "Loading..." if state.is_loading else "Recommend again",
        on_click=load_with_spinner,
        disabled=state.is_loading,
        use_container_width=True,
        type="primary",
    )


if __name__ == "__main__":
    logger.info("=== Meal Recommender Application Starting ===")
    try:
        main()
    except Exception as exc:  # noqa: BLE001 - top-level Streamlit error handler
        logger.critical("Unhandled exception in main application: %s", exc, exc_info=True)
        st.error(f"A critical error occurred: {exc}")
    logger.info("=== Application execution completed ===")

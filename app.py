from dataclasses import dataclass
from typing import List

import streamlit as st

from ascii_bros.config import EngineConfig
from ascii_bros.examples.overworld import make_session
from ascii_bros.renderer.image import ImageRenderer
from ascii_bros.session import Session

st.set_page_config(layout="wide", page_title="ASCII Bros")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


@dataclass(frozen=True)
class ViewerConfig:
    width: int
    height: int
    target_fps: int
    step_seconds: float


def set_default_config() -> None:
    if "viewer_config" not in st.session_state:
        st.session_state["viewer_config"] = ViewerConfig(
            width=80, height=25, target_fps=30, step_seconds=1.0 / 30
        )


def get_config_from_widgets() -> ViewerConfig:
    viewer_config: ViewerConfig = st.session_state["viewer_config"]

    st.subheader("Display")
    width: int = st.slider("Width", 8, 160, viewer_config.width, key="width")
    height: int = st.slider("Height", 8, 60, viewer_config.height, key="height")

    st.subheader("Timing")
    target_fps: int = st.slider(
        "Target FPS", 1, 60, viewer_config.target_fps, key="target_fps"
    )
    step_seconds: float = st.slider(
        "Seconds per step",
        0.0,
        1.0,
        viewer_config.step_seconds,
        step=0.01,
        key="step_seconds",
    )
    return ViewerConfig(
        width=width, height=height, target_fps=target_fps, step_seconds=step_seconds
    )


def make_session_and_start(config: ViewerConfig) -> None:
    session = make_session(
        EngineConfig(
            width=config.width, height=config.height, target_fps=config.target_fps
        )
    )
    session.on_start()
    session.on_update(0.0)
    st.session_state["session"] = session


def do_steps(session: Session, count: int, seconds: float) -> None:
    for _ in range(count):
        session.on_update(seconds)


def display_atlas(session: Session) -> None:
    lines: List[str] = session.atlas.dump()
    st.code("\n".join(lines) or "(empty)", language=None)


# --------- Main App ---------
set_default_config()
tab_view, tab_config, tab_atlas = st.tabs(["View", "Config", "Atlas"])

with tab_config:
    config: ViewerConfig = get_config_from_widgets()
    st.session_state["viewer_config"] = config
    if st.button("🔄 Restart", key="restart_btn", use_container_width=True):
        make_session_and_start(config)

with tab_view:
    if "session" not in st.session_state:
        make_session_and_start(st.session_state["viewer_config"])
    session: Session = st.session_state["session"]
    config = st.session_state["viewer_config"]

    left_col, right_col = st.columns([0.8, 0.2])
    with right_col:
        if st.button("▶️ Step", key="step_btn", use_container_width=True):
            do_steps(session, 1, config.step_seconds)
        if st.button("⏩ 10 steps", key="step10_btn", use_container_width=True):
            do_steps(session, 10, config.step_seconds)
        st.info(f"**Frame:** {session.scene.frame}", icon="🎞️")
        st.info(f"**Tiles:** {len(session.atlas)}", icon="🧩")
        for name, message in session.rejected.items():
            st.warning(f"{name}: {message}")

    with left_col:
        frame = session.last_frame or session.render()
        st.image(ImageRenderer().render(frame), use_container_width=True)
        st.code(frame.text(), language=None)

with tab_atlas:
    display_atlas(st.session_state["session"])
    st.json(
        {
            name: {
                "width": sprite.width,
                "height": sprite.height,
                "z_order": sprite.z_order,
                "tile_ids": list(sprite.tile_ids),
            }
            for name, sprite in session.sprites.items()
        },
        expanded=1,
    )

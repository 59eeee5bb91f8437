"""Terminal entry point for the overworld demo.

Sizes the window to the current terminal (capped at the configured window
size) and runs the game loop until interrupted.
"""

import logging
import shutil
from typing import Optional

from ascii_bros.config import EngineConfig
from ascii_bros.errors import ValidationError
from ascii_bros.examples.overworld import make_session
from ascii_bros.loop import run
from ascii_bros.renderer.terminal import TerminalDisplay

logger = logging.getLogger(__name__)


def main(frames: Optional[int] = None) -> None:
    logging.basicConfig(level=logging.WARNING)
    defaults = EngineConfig()
    columns, lines = shutil.get_terminal_size((defaults.width, defaults.height))
    if lines < defaults.height:
        raise ValidationError(
            f"Window is too small: need {defaults.height} lines, have {lines}"
        )
    config = EngineConfig(width=min(columns, defaults.width), height=defaults.height)

    display = TerminalDisplay()
    session = make_session(config, display=display)
    try:
        run(session, frames=frames)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        display.close()


if __name__ == "__main__":
    main()

"""Fixed-rate game loop.

Calls :meth:`Session.on_update` with the measured elapsed time, then sleeps
out whatever is left of the target frame duration. ``clock`` and ``sleep``
are injectable so the loop can be driven deterministically.
"""

import logging
import time
from typing import Callable, Optional

from ascii_bros.session import Session

logger = logging.getLogger(__name__)


def run(
    session: Session,
    frames: Optional[int] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run until the session stops or ``frames`` frames have been drawn.

    Returns:
        int: Number of frames drawn.
    """
    if not session.running:
        session.on_start()

    budget = session.config.frame_duration
    drawn = 0
    previous = clock()
    elapsed = 0.0

    while session.running and (frames is None or drawn < frames):
        started = clock()
        session.on_update(elapsed)
        drawn += 1

        remaining = budget - (clock() - started)
        if remaining > 0:
            sleep(remaining)

        now = clock()
        elapsed = now - previous
        previous = now

    logger.info("Game loop stopped after %d frames", drawn)
    return drawn

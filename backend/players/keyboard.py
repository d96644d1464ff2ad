"""
Keyboard bindings: translate key names into engine commands.

Arrow keys and WASD steer, space toggles pause. Key names follow the
browser KeyboardEvent.key values ("ArrowUp", "w", " ").
"""

import logging
from typing import Dict, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[str, str] = {
    "ArrowUp": UP, "w": UP, "W": UP,
    "ArrowDown": DOWN, "s": DOWN, "S": DOWN,
    "ArrowLeft": LEFT, "a": LEFT, "A": LEFT,
    "ArrowRight": RIGHT, "d": RIGHT, "D": RIGHT,
}

PAUSE_KEYS = {" ", "Space", "space"}


def direction_for_key(key: str) -> Optional[str]:
    return KEY_BINDINGS.get(key)


def handle_key(engine, key: str) -> bool:
    """
    Apply one key press to the engine.

    Returns:
        True if the key is bound, False if it was ignored
    """
    if key in PAUSE_KEYS:
        engine.toggle_pause()
        return True

    direction = direction_for_key(key)
    if direction is None:
        logger.debug("Unbound key %r", key)
        return False
    engine.set_intent(direction)
    return True

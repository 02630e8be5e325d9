"""
Logging Configuration
Sets up the logger for the animation.

With autoplay on, every timer tick changes the scene. Those DEBUG lines are
left out unless asked for, so a DEBUG log mostly shows tree rebuilds.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "banachtarski"
SCENE_LOGGER = "banachtarski.model.state"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    trace_scenes: bool = False,
) -> None:
    """
    Configures the 'banachtarski' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        trace_scenes: Also log every scene change at DEBUG level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # A second MainWindow in the same process must not double the output
    if logger.hasHandlers():
        logger.handlers.clear()

    # Scene changes are logged by the state at DEBUG
    scene_logger = logging.getLogger(SCENE_LOGGER)
    if trace_scenes:
        scene_logger.setLevel(logging.NOTSET)
    else:
        scene_logger.setLevel(max(level, logging.INFO))

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                f"{', scene changes traced' if trace_scenes else ''}.")

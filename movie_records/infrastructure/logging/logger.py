import logging
import os
from typing import Optional

DEFAULT_NOISY_LIBS = {"pymongo": logging.WARNING, "motor": logging.WARNING}


def setup_logging(noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        handlers=[handler],
        force=True,
    )

    if noisy_libs is None:
        noisy_libs = DEFAULT_NOISY_LIBS
    for lib, level in noisy_libs.items():
        logging.getLogger(lib).setLevel(level)

import logging
import os
from pathlib import Path

logger = logging.getLogger("lexfreq")

DATA_ENV_KEY = "LEXFREQ_DATA"

try:
    PROJECT_ROOT_PATH = os.path.abspath(os.path.join(__file__, os.pardir, os.pardir))
except NameError:
    PROJECT_ROOT_PATH = os.path.abspath(os.path.join(os.getcwd()))

PACKAGE_DATA_PATH = Path(__file__).resolve().parent / "data"
DATA_PATH = Path(PROJECT_ROOT_PATH) / "data"


def resolve_data_dir() -> Path:
    """
    Locate the directory holding the frequency tables.

    The `LEXFREQ_DATA` environment variable wins when it points to an existing
    directory; otherwise the bundled package data and then the project-level
    data directory are used.
    """
    override = os.environ.get(DATA_ENV_KEY, "").strip()
    if override:
        override_path = Path(override).expanduser()
        if override_path.is_dir():
            return override_path
        logger.warning(f"{DATA_ENV_KEY}={override!r} is not a directory, using bundled data instead")

    if PACKAGE_DATA_PATH.is_dir() and any(PACKAGE_DATA_PATH.glob("*.msgpack.gz")):
        return PACKAGE_DATA_PATH
    return DATA_PATH

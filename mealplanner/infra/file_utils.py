"""Shopping list file output."""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Union

from mealplanner.domain.Errors import StorageError

logger = logging.getLogger(__name__)


def save_lines(filename: Union[str, Path], lines: Iterable[str]) -> Path:
    """Write one line per entry, replacing any existing file with the same name.

    The content goes to a temporary file in the target directory first and is then
    moved over the target, so a failed write never leaves a half-written list behind.
    """
    target = Path(filename)
    directory = target.parent
    tmp_path = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(directory), prefix=".shopping_", suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            for line in lines:
                tmp.write(f"{line}\n")
        shutil.move(tmp_path, str(target))
        tmp_path = None
    except OSError as e:
        logger.error(f"Saving shopping list to {target} failed: {e}")
        raise StorageError(f"Saving shopping list to {target} failed: {e}") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
    logger.info(f"Shopping list saved to {target}")
    return target

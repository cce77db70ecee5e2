import logging
import os

from pathlib import Path

from passmgr.storage.container import from_json, to_json
from passmgr.utils.models import Container

logger = logging.getLogger(__name__)


def save_container(path: Path, container: Container) -> None:
    """Write the container atomically: temp file, fsync, then replace."""
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            # os.open only applies the mode when it creates the file
            os.fchmod(f.fileno(), 0o600)
            f.write(to_json(container))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("wrote vault %s", path)


def load_container(path: Path) -> Container | None:
    path = Path(path)
    if not path.exists():
        return None
    return from_json(path.read_bytes())

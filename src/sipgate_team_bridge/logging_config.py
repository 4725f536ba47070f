import sys
from pathlib import Path
from typing import Any, Callable

from loguru import logger

# Defaults for the fields SipgateTeamAdapter binds per operation.
_EXTRA_DEFAULTS = {"operation": "-", "contact_id": "-"}

_CONSOLE_FORMAT = (
    "<level>{level:<8}</level> | <cyan>{extra[operation]}</cyan>"
    "<dim>[{extra[contact_id]}]</dim> - <level>{message}</level>"
)
_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {extra[operation]} "
    "contact={extra[contact_id]} | {name}:{function}:{line} - {message}"
)


def _add_console(level: str) -> str:
    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT)
    return f"console (stderr, {level})"


def _add_file(level: str, path: str = "logs/bridge.log", rotation: str = "10 MB", retention: int = 5) -> str:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    logger.add(path, level=level, format=_FILE_FORMAT, rotation=rotation, retention=retention)
    return f"file ({path}, {level})"


_SINKS: dict[str, Callable[..., str]] = {
    "console": _add_console,
    "file": _add_file,
}


def setup_logging(
    level: str = "INFO",
    consumers: list[dict[str, Any]] | None = None,
) -> list[str]:
    """Route bridge logs to the ``LogConsumers`` entries from config.json.

    Each entry names a sink ``type`` and may override ``level``; other keys go
    to the sink (``path``, ``rotation``, ``retention`` for files). Without
    entries, logs go to stderr only.
    """
    logger.remove()
    logger.configure(extra=dict(_EXTRA_DEFAULTS))

    descriptions: list[str] = []
    for entry in consumers or [{"type": "console"}]:
        add_sink = _SINKS.get(entry.get("type", ""))
        if add_sink is None:
            logger.warning(f"Unknown log consumer type: {entry.get('type')!r}")
            continue

        options = {k: v for k, v in entry.items() if k not in ("type", "level")}
        descriptions.append(add_sink(entry.get("level", level), **options))

    return descriptions

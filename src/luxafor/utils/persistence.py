"""JSON persistence for pydantic models.

Used for the config file. Reading turns pydantic and I/O failures into
ConfigurationError subclasses; writing is atomic and keeps the previous
file as ``<name>.bak``::

    config.json      <- replaced in one step from config.json.tmp
    config.json.bak  <- copy of what was there before
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from luxafor.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_suffix(path.suffix + suffix)


class PydanticPersistence:
    """Stateless load/save helpers for pydantic models stored as JSON."""

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read and validate a model.

        Raises:
            FileNotFoundError: The file does not exist
            ConfigFileInvalidError: Empty, unreadable or malformed file
            ConfigValidationError: Well-formed JSON with invalid values
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Could not read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} is not a valid {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def load_json_or_default(
        path: Path,
        model_type: type[M],
        default_factory: Optional[Callable[[], M]] = None,
    ) -> M:
        """
        Like load_json, but a missing file gives a default model.

        The default is not written to disk. A file that exists but is
        broken still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        backup: bool = True,
    ) -> None:
        """
        Write a model as JSON.

        Parent directories are created. With backup, an existing file is
        copied to ``.bak`` first.

        Raises:
            OSError: The file could not be written
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, _sibling(path, ".bak"))

        temp_path = _sibling(path, ".tmp")
        try:
            temp_path.write_text(data.model_dump_json(indent=indent), encoding="utf-8")
            temp_path.replace(path)
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {type(data).__name__} to {path}")

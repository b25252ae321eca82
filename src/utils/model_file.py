import contextlib
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel


T = TypeVar("T", bound=BaseModel)


class ModelFileError(RuntimeError):
    pass


class ModelFile(Generic[T]):
    """JSON file holding one pydantic model.

    A missing file is created from `default_factory`; an unreadable one is
    logged and replaced in memory by the default, leaving the file untouched.
    """

    def __init__(
        self,
        model_type: type[T],
        file: Path,
        logger: logging.Logger,
        default_factory: Callable[[], T],
    ) -> None:
        self.model_type = model_type
        self._file = file
        self._logger = logger.getChild(self.__class__.__name__)
        self._default_factory = default_factory

        self._data = self._load()

    @property
    def file(self) -> Path:
        return self._file

    @property
    def data(self) -> T:
        return self._data

    def update(self, data: T) -> None:
        if self._data == data:
            return

        self._logger.debug("Updating %s", self._file)

        self._save(data)
        self._data = data

    def reset(self) -> None:
        self._logger.debug("Resetting data of %s", self._file)
        self._save(self._default_factory())
        self._data = self._default_factory()

    def _save(self, data: T) -> None:
        self._logger.debug("Saving data to %s", self._file)

        try:
            self._file.parent.mkdir(parents=True, exist_ok=True)
            with self._file.open("w", encoding="utf-8") as f:
                f.write(data.model_dump_json(indent=4))
        except (OSError, TypeError) as e:
            msg = f"Failed to save data to {self._file!s}"
            self._logger.exception(msg)
            raise ModelFileError(msg) from e

    def _load(self) -> T:
        self._logger.debug("Loading data from %s", self._file)
        if not self._file.exists():
            self._logger.info("Data file not found, creating default: %s", self._file)
            default = self._default_factory()
            # Failure is logged by _save; the default still applies for this run.
            with contextlib.suppress(ModelFileError):
                self._save(default)
            return default

        try:
            with self._file.open("r", encoding="utf-8") as f:
                data = json.load(f)
                return self.model_type.model_validate(data)
        except (OSError, json.JSONDecodeError, ValueError):
            self._logger.exception("Failed to load data from %s, using default", self._file)
            return self._default_factory()

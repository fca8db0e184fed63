"""Load and save the planted root record."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import AwareDatetime, BaseModel, Field, ValidationError

from .root import Root

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The root record could not be read or written."""


class NotPlantedError(StorageError):
    pass


class RootRecord(BaseModel):
    """Persisted form of a root; the grid itself is never stored."""

    name: str = Field(min_length=1)
    seed: int = Field(ge=0, lt=2**64)
    planted_time: AwareDatetime
    last_watered_time: AwareDatetime

    @classmethod
    def from_root(cls, root: Root) -> "RootRecord":
        return cls(
            name=root.name,
            seed=root.seed,
            planted_time=root.planted_time,
            last_watered_time=root.last_watered_time,
        )

    def to_root(self) -> Root:
        return Root(
            name=self.name,
            seed=self.seed,
            planted_time=self.planted_time,
            last_watered_time=self.last_watered_time,
        )


class RootStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Root:
        if not self.exists():
            raise NotPlantedError(f"no root planted at {self.path}; run `roots plant` first")
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"cannot read root file {self.path}: {exc}") from exc
        try:
            record = RootRecord.model_validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"root file {self.path} is corrupt: {exc.error_count()} invalid field(s)") from exc
        logger.debug("loaded root %r from %s", record.name, self.path)
        return record.to_root()

    def save(self, root: Root) -> Path:
        try:
            payload = RootRecord.from_root(root).model_dump_json(indent=2)
        except ValidationError as exc:
            raise StorageError(f"cannot save root {root.name!r}: {exc.errors()[0]['msg']}") from exc
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"cannot write root file {self.path}: {exc}") from exc
        logger.info("saved root %r to %s", root.name, self.path)
        return self.path

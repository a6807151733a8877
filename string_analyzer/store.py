"""
Record store: whole-collection load/save of StringRecords.

Two backends share the same contract:

- ``JsonFileStore`` keeps ``{"strings": [...]}`` in a flat JSON file.
- ``SqlRecordStore`` keeps one row per record in a table keyed by fingerprint.

``save`` always replaces the full persisted state with the given collection.
"""
import json
import logging
import os
import tempfile
from functools import lru_cache
from typing import List

from sqlalchemy.orm import sessionmaker

from string_analyzer.config import Settings, get_settings
from string_analyzer.database import init_db, make_engine
from string_analyzer.models import StringAnalysis
from string_analyzer.schemas import StringProperties, StringRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Interface for loading and saving the full record collection."""

    def load(self) -> List[StringRecord]:
        raise NotImplementedError

    def save(self, records: List[StringRecord]) -> None:
        raise NotImplementedError


class JsonFileStore(RecordStore):
    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[StringRecord]:
        """Read every record; creates an empty store file on first use."""
        if not os.path.exists(self.path):
            logger.info(f"Store file {self.path} not found, creating an empty one")
            self.save([])
            return []

        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return [StringRecord.model_validate(item) for item in data.get("strings", [])]

    def save(self, records: List[StringRecord]) -> None:
        payload = {"strings": [record.model_dump() for record in records]}

        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        # Write to a sibling temp file and swap it in, so readers never see half a file
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class SqlRecordStore(RecordStore):
    def __init__(self, database_url: str):
        self.engine = make_engine(database_url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        init_db(self.engine)

    def load(self) -> List[StringRecord]:
        db = self.SessionLocal()
        try:
            rows = db.query(StringAnalysis).order_by(StringAnalysis.created_at, StringAnalysis.id).all()
            return [
                StringRecord(
                    id=row.id,
                    value=row.value,
                    properties=StringProperties(
                        length=row.length,
                        is_palindrome=row.is_palindrome,
                        unique_characters=row.unique_characters,
                        word_count=row.word_count,
                        sha256_hash=row.sha256_hash,
                        character_frequency_map=row.character_frequency_map,
                    ),
                    created_at=row.created_at,
                )
                for row in rows
            ]
        finally:
            db.close()

    def save(self, records: List[StringRecord]) -> None:
        db = self.SessionLocal()
        try:
            db.query(StringAnalysis).delete()
            db.add_all([
                StringAnalysis(
                    id=record.id,
                    value=record.value,
                    length=record.properties.length,
                    is_palindrome=record.properties.is_palindrome,
                    unique_characters=record.properties.unique_characters,
                    word_count=record.properties.word_count,
                    sha256_hash=record.properties.sha256_hash,
                    character_frequency_map=record.properties.character_frequency_map,
                    created_at=record.created_at,
                )
                for record in records
            ])
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


def build_store(settings: Settings) -> RecordStore:
    """Create the store selected by settings.store_backend."""
    if settings.store_backend == "json":
        logger.info(f"Using JSON file store at {settings.data_file}")
        return JsonFileStore(settings.data_file)
    if settings.store_backend == "sql":
        logger.info("Using SQL record store")
        return SqlRecordStore(settings.database_url)
    raise ValueError(f"Unknown STORE_BACKEND '{settings.store_backend}' (expected 'json' or 'sql')")


@lru_cache()
def get_store() -> RecordStore:
    """Dependency providing the process-wide store handle."""
    return build_store(get_settings())

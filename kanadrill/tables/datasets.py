"""Kanji and vocabulary dataset loading.

The datasets are JSON lists of records, one per kanji or word. Records that
fail validation are skipped with a warning so one bad row does not take the
whole drill down; a missing or malformed file is a hard error.
"""

import json
import os
from typing import List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from kanadrill import DATA_DIR, KANJI_FILE, VOCABULARY_FILE
from kanadrill.logger import logger
from kanadrill.nlp.base import DatasetError
from kanadrill.schema import JLPTLevel, KanjiEntry, VocabularyEntry

T = TypeVar("T", KanjiEntry, VocabularyEntry)
M = TypeVar("M", bound=BaseModel)


def _load_records(path: str, model: Type[M]) -> List[M]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise DatasetError(path, "file not found")
    except json.JSONDecodeError as e:
        raise DatasetError(path, f"invalid JSON ({e})")

    if not isinstance(raw, list):
        raise DatasetError(path, f"expected a JSON list, got {type(raw).__name__}")

    entries: List[M] = []
    for idx, record in enumerate(raw):
        try:
            entries.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping invalid {model.__name__} record #{idx} in {path}: {e.error_count()} error(s)")
    logger.info(f"Loaded {len(entries)} {model.__name__} records from {os.path.basename(path)}")
    return entries


def load_kanji(path: Optional[str] = None) -> List[KanjiEntry]:
    """Load kanji entries (character, meanings, on/kun readings, JLPT level)."""
    return _load_records(path or os.path.join(DATA_DIR, KANJI_FILE), KanjiEntry)


def load_vocabulary(path: Optional[str] = None) -> List[VocabularyEntry]:
    """Load vocabulary entries; missing romanizations are derived from the kana."""
    return _load_records(path or os.path.join(DATA_DIR, VOCABULARY_FILE), VocabularyEntry)


def find_kanji(entries: Sequence[KanjiEntry], character: str) -> Optional[KanjiEntry]:
    return next((k for k in entries if k.character == character), None)


def find_vocabulary(entries: Sequence[VocabularyEntry], word: str) -> Optional[VocabularyEntry]:
    return next((v for v in entries if v.word == word), None)


def entries_for_level(
    entries: Sequence[T],
    level: Union[JLPTLevel, str],
    include_lower: bool = True,
) -> List[T]:
    """Entries for a JLPT level.

    Levels are cumulative by default: N4 includes the N5 entries. With
    ``include_lower=False`` only entries tagged with exactly *level* are kept.
    """
    level = JLPTLevel(level)
    if include_lower:
        return [e for e in entries if e.jlpt_level.rank >= level.rank]
    return [e for e in entries if e.jlpt_level is level]

"""Runtime configuration read from the environment (and an optional .env file)."""

import os
from enum import Enum
from typing import Mapping, Optional, Type, TypeVar

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from kanadrill.nlp.base import ConfigurationError

load_dotenv()

STRATEGY_ENV = "KANADRILL_ANALYSIS_STRATEGY"
SCRIPT_MODE_ENV = "KANADRILL_SCRIPT_MODE"

E = TypeVar("E", bound=Enum)


class AnalysisStrategy(str, Enum):
    tokenized_resync = "tokenized-resync"   # syllable tokenizer with resync
    conversion_based = "conversion-based"   # romaji -> kana, then kana alignment


class ScriptMode(str, Enum):
    hiragana = "hiragana"
    katakana = "katakana"
    kana = "kana"            # both scripts


class Settings(BaseModel):
    analysis_strategy: AnalysisStrategy = AnalysisStrategy.tokenized_resync
    script_mode: ScriptMode = ScriptMode.kana
    model_config = ConfigDict(frozen=True)


def parse_enum(enum_cls: Type[E], setting: str, raw: str) -> E:
    """Parse *raw* into *enum_cls*, failing loudly on anything unrecognized."""
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        raise ConfigurationError(setting, raw, [m.value for m in enum_cls])


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Unset variables take their defaults; set-but-invalid ones raise
    :class:`ConfigurationError` instead of silently falling back, since a
    wrong matching strategy would corrupt scoring.
    """
    environ = os.environ if environ is None else environ
    values = {}

    strategy = environ.get(STRATEGY_ENV)
    if strategy:
        values["analysis_strategy"] = parse_enum(AnalysisStrategy, STRATEGY_ENV, strategy)

    script_mode = environ.get(SCRIPT_MODE_ENV)
    if script_mode:
        values["script_mode"] = parse_enum(ScriptMode, SCRIPT_MODE_ENV, script_mode)

    return Settings(**values)

from enum import Enum
from typing import Any, List, Tuple
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class CharacterClass(str, Enum):
    plain = "plain"
    voiced = "voiced"    # dakuten / handakuten
    combo = "combo"      # two-glyph youon, e.g. きゃ


class ReadingMode(str, Enum):
    onyomi = "onyomi"
    kunyomi = "kunyomi"
    mixed = "mixed"


class JLPTLevel(str, Enum):
    N5 = "N5"
    N4 = "N4"
    N3 = "N3"
    N2 = "N2"
    N1 = "N1"

    @property
    def rank(self) -> int:
        """5 for N5 (easiest) down to 1 for N1."""
        return int(self.value[1])


class CharacterUnit(BaseModel):
    glyph: str = Field(..., min_length=1, max_length=2)
    transliterations: Tuple[str, ...] = Field(..., min_length=1)
    character_class: CharacterClass = CharacterClass.plain
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def canonical(self) -> str:
        return self.transliterations[0]

    def accepts(self, syllable: str) -> bool:
        """Exact, case-insensitive comparison against the accepted spellings."""
        syllable = syllable.lower()
        return any(t.lower() == syllable for t in self.transliterations)


class KanjiEntry(BaseModel):
    character: str = Field(..., min_length=1)
    meanings: List[str] = Field(default_factory=list)
    onyomi: List[str] = Field(default_factory=list)
    kunyomi: List[str] = Field(default_factory=list)
    jlpt_level: JLPTLevel = Field(..., validation_alias=AliasChoices("jlpt_level", "jlptLevel"))
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def readings(self, mode: ReadingMode = ReadingMode.mixed) -> List[str]:
        """Accepted answers for a reading drill in the given mode."""
        mode = ReadingMode(mode)
        if mode is ReadingMode.onyomi:
            return list(self.onyomi)
        if mode is ReadingMode.kunyomi:
            return list(self.kunyomi)
        return [*self.onyomi, *self.kunyomi]


class VocabularyEntry(BaseModel):
    word: str = Field(..., min_length=1)
    kana: str = Field(..., min_length=1)
    # Older datasets spell this field "romaji" or "romanji".
    romanizations: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("romanizations", "romaji", "romanji"),
    )
    meaning: str = ""
    jlpt_level: JLPTLevel = Field(..., validation_alias=AliasChoices("jlpt_level", "jlptLevel"))
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _derive_romanizations(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        present = [k for k in ("romanizations", "romaji", "romanji") if data.get(k)]
        if not present and data.get("kana"):
            from kanadrill.nlp.phonetics import kana_to_romaji

            data = {k: v for k, v in data.items() if k not in ("romaji", "romanji")}
            data["romanizations"] = [kana_to_romaji(data["kana"])]
        return data


class CharacterAnalysis(BaseModel):
    character: str
    user_syllable: str = ""
    correct_syllables: List[str] = Field(default_factory=list)
    is_correct: bool
    position: int = Field(..., ge=0)
    model_config = ConfigDict(extra="forbid")

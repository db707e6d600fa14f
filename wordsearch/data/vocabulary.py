"""Difficulty tiers, word pools and round word sampling."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import Difficulty
from ..core.exceptions import VocabularyError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

WORDS_PER_GAME = 10
SCORE_PER_WORD = 10
MIN_WORD_LENGTH = 2

GRID_SIZE: Dict[Difficulty, int] = {
    Difficulty.EASY: 10,
    Difficulty.MEDIUM: 12,
    Difficulty.HARD: 14,
}

EASY_WORDS: Tuple[str, ...] = (
    "SEE", "SAY", "NEW", "SIT", "SAD", "SHY", "BUS", "CAR", "ZOO", "CRY", "CUP", "WIN",
    "HUG", "FIX", "TRY", "NAME", "FINE", "NICE", "MEET", "HAND", "KIND", "WAKE",
    "PLAY", "PARK", "GAME", "TIDY", "BOOK", "DRAW", "TALL", "HAIR", "AUNT", "KITE",
    "TAKE", "CUTE", "EXAM", "EXIT", "SIGN", "HEAR", "COOK", "GOOD", "BUSY", "CUFF",
    "BELL", "PULL", "TELL", "MISS", "LESS", "BUZZ", "FUZZ", "JAZZ", "WELL", "CITY",
    "DUCK", "JUMP", "BLUE", "SOCK", "BACK", "NECK", "MALL", "ROLL", "LION", "WALK",
    "SAVE", "SOON", "HOLE", "FREE", "LICK", "WORK", "TEAM", "CARE", "KNEE", "COAT",
    "FACE", "GOAL", "NEED", "TALK", "GIFT", "CLEAN", "PACK", "DARE", "STEP", "TURN",
    "PLAN", "PASS", "FAIR", "PAGE", "HUGE", "GATE", "NEAR", "KICK", "SPRAY", "SPIN",
    "BUMP", "RIDE", "HOLD", "PUSH", "FEET"
)

MEDIUM_WORDS: Tuple[str, ...] = (
    "LATER", "CHECK", "SHORT", "GREEN", "RAISE", "HELP", "MESSY", "STAND", "SHOUT",
    "CLOSE", "START", "KEEP", "WRITE", "WHALE", "WHEEL", "WHEN", "WHITE", "WHERE",
    "FUNNY", "CURLY", "BROWN", "LAUGH", "BRUSH", "HAPPY", "ANGRY", "QUIET", "SHELF",
    "SMILE", "PRETTY", "CLOWN", "WATCH", "TOUCH", "SOUND", "SLEEP", "DREAM", "STRING",
    "GRAPH", "PIANO", "BRAVE", "EXIST", "PHONE", "PHOTO", "STORY", "TRUCK", "PILOT",
    "HOUSE", "TRAIN", "STAFF", "GRASS", "CAIRO", "HORSE", "CAMEL", "LOCK", "SUNNY",
    "COUCH", "STUCK", "STICK", "LUNCH", "CHIPS", "JUICE", "POUND", "DRINK", "CLIMB",
    "SCRATCH", "LOCAL", "EXCITED", "CHORES", "TIRED", "BORED", "SCORE", "PROUD",
    "SOLVE", "REACH", "SPRING", "WATER", "SPLASH", "SHARE", "CHEER", "COACH", "MAGIC",
    "GREAT", "GROUND", "MEETING", "BREAKFAST", "HOMEWORK", "SCHOOL", "FOOTBALL",
    "SPLIT", "SCREEN", "FAMILY", "PRIMARY", "FRIEND", "TEACHER", "BATHROOM", "PLEASE",
    "KITCHEN", "STUDENT", "GARDEN"
)

HARD_WORDS: Tuple[str, ...] = (
    "TOGETHER", "DRESS", "LISTEN", "ANSWER", "FATHER", "UNCLE", "STRAIGHT", "SISTER",
    "BROTHER", "EASILY", "COUSIN", "HELPFUL", "MEMBER", "MOTHER", "SOLDIER", "SALTED",
    "EXAMPLE", "ELEPHANT", "ALPHABET", "BALLOON", "RABBIT", "PICTURE", "FAVORITE",
    "REMIND", "BAKER", "PATIENT", "TRAVEL", "STATION", "MUSEUM", "BUTTON", "FOREVER",
    "FARMER", "DOCTOR", "VISIT", "BEHIND", "BETWEEN", "CURTAIN", "MONKEY", "TICKET",
    "LANDMARK", "BOUNCE", "TOWER", "PEDAL", "SHOPPING", "MISTAKE", "BETTER", "LIVING",
    "POSTER", "WORRIED", "PUDDLE", "FOLLOW", "NERVOUS", "FENCE", "PROBLEM", "SUCCESS",
    "GIRAFFE", "CLOTHES", "CARTOON", "RUNNER", "PROJECT", "BRIDGE", "DONATE",
    "BEDROOM", "BEHAVIOR", "CLASSROOM", "CAREFULLY", "FRIENDLY", "GRANDMOTHER",
    "GRANDFATHER", "CELEBRATION", "EXERCISE", "MORNING", "PRACTICE", "EVERYDAY",
    "LIBRARY", "PYRAMID", "HOLIDAY", "ADVENTURE", "EXAMINE", "AMUSEMENT", "HOSPITAL",
    "DESCRIBE", "QUICKLY", "RECEIVE", "COMMUNITY", "SWIMMER", "TRADITIONS",
    "NEIGHBORHOOD", "SUPERMARKET"
)

WORD_POOLS: Dict[Difficulty, Tuple[str, ...]] = {
    Difficulty.EASY: EASY_WORDS,
    Difficulty.MEDIUM: MEDIUM_WORDS,
    Difficulty.HARD: HARD_WORDS,
}


def parse_difficulty(value: str | Difficulty) -> Difficulty:
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(str(value).strip().upper())
    except ValueError as exc:
        known = ", ".join(d.value for d in Difficulty)
        raise VocabularyError(f"Unknown difficulty '{value}' (known: {known})") from exc


def grid_size_for(difficulty: str | Difficulty) -> int:
    return GRID_SIZE[parse_difficulty(difficulty)]


def load_word_pool(path: Path | str) -> List[str]:
    """Read words from a file, one per line. Blank lines and # comments are skipped."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise VocabularyError(f"Cannot read words file {source}: {exc}") from exc
    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def prepare_words(raw_words: Sequence[str]) -> List[str]:
    """Normalize, drop too-short entries and de-duplicate, keeping first-seen order."""

    prepared: List[str] = []
    seen = set()
    for raw in raw_words:
        word = clean_word(raw)
        if len(word) < MIN_WORD_LENGTH:
            LOGGER.debug("Skipping vocabulary entry %r (too short after cleaning)", raw)
            continue
        if word in seen:
            continue
        seen.add(word)
        prepared.append(word)
    return prepared


class VocabularySampler:
    """Draws a round's words from the pool of a difficulty tier."""

    def __init__(
        self,
        pools: Optional[Mapping[Difficulty, Sequence[str]]] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        source = pools if pools is not None else WORD_POOLS
        self.pools: Dict[Difficulty, List[str]] = {
            parse_difficulty(tier): prepare_words(words) for tier, words in source.items()
        }
        self.rng = rng or random.Random(seed)

    def sample(self, difficulty: str | Difficulty, count: int = WORDS_PER_GAME) -> List[str]:
        """Return up to ``count`` distinct uppercase words, without replacement."""

        tier = parse_difficulty(difficulty)
        if count <= 0:
            raise VocabularyError(f"Word count must be positive, got {count}")
        pool = self.pools.get(tier)
        if not pool:
            raise VocabularyError(f"No words available for difficulty {tier.value}")
        if count > len(pool):
            LOGGER.warning(
                "Requested %s words but the %s pool only has %s; using all of them",
                count,
                tier.value,
                len(pool),
            )
            count = len(pool)
        words = self.rng.sample(pool, count)
        LOGGER.info("Sampled %s %s words", len(words), tier.value)
        return words

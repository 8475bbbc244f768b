"""Loading of the polarity lexicon and the stop-word list.

Both resources are read once per run and handed to the pipeline
explicitly. Defaults come from the ``afinn`` package (AFINN word scores)
and NLTK's English stop-word corpus; either can be replaced by a plain
text file.
"""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from ..core.constants import LexiconConstants
from ..core.errors import LexiconError

logger = logging.getLogger(__name__)


def build_lexicon(entries: Iterable[Tuple[str, int]], source: Optional[str] = None) -> Dict[str, int]:
    """Validate (word, score) pairs into a lexicon mapping.

    Raises LexiconError on duplicate words or scores outside [-5, 5].
    """
    lexicon: Dict[str, int] = {}
    for word, score in entries:
        if isinstance(score, bool) or not isinstance(score, int):
            raise LexiconError(f"score for '{word}' must be an integer", path=source)
        if not LexiconConstants.MIN_SCORE <= score <= LexiconConstants.MAX_SCORE:
            raise LexiconError(f"score {score} for '{word}' outside "
                               f"[{LexiconConstants.MIN_SCORE}, {LexiconConstants.MAX_SCORE}]", path=source)
        if word in lexicon:
            raise LexiconError(f"duplicate lexicon word '{word}'", path=source)
        lexicon[word] = score
    return lexicon


def read_lexicon_file(path: Union[str, Path]) -> Dict[str, int]:
    """Read a tab-separated ``word<TAB>score`` file in the AFINN layout."""
    path = str(path)
    entries = []
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                word, sep, raw_score = line.rpartition("\t")
                if not sep or not word:
                    raise LexiconError("expected 'word<TAB>score'", path=path, line_number=line_number)
                try:
                    score = int(raw_score)
                except ValueError:
                    raise LexiconError(f"score '{raw_score}' is not an integer",
                                       path=path, line_number=line_number) from None
                entries.append((word.strip(), score))
    except UnicodeDecodeError as e:
        raise LexiconError(f"lexicon is not valid UTF-8 ({e.reason})", path=path) from e
    except OSError as e:
        raise LexiconError(f"cannot read lexicon: {e.strerror or e}", path=path) from e

    lexicon = build_lexicon(entries, source=path)
    logger.info(f"Loaded {len(lexicon)} lexicon words from {path}")
    return lexicon


def load_afinn_lexicon(language: str = LexiconConstants.DEFAULT_AFINN_LANGUAGE) -> Dict[str, int]:
    """AFINN word scores as shipped with the ``afinn`` package."""
    from afinn import Afinn

    # Afinn exposes no public accessor for its word table
    words = Afinn(language=language, emoticons=False)._dict
    lexicon = build_lexicon(((word, int(score)) for word, score in words.items()), source=f"afinn:{language}")
    logger.info(f"Loaded {len(lexicon)} AFINN words ({language})")
    return lexicon


def read_stop_words_file(path: Union[str, Path]) -> FrozenSet[str]:
    """Read one stop word per line; blank lines and '#' comments are ignored."""
    path = str(path)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            words = {
                line.strip().lower()
                for line in f
                if line.strip() and not line.lstrip().startswith("#")
            }
    except UnicodeDecodeError as e:
        raise LexiconError(f"stop words are not valid UTF-8 ({e.reason})", path=path) from e
    except OSError as e:
        raise LexiconError(f"cannot read stop words: {e.strerror or e}", path=path) from e
    logger.info(f"Loaded {len(words)} stop words from {path}")
    return frozenset(words)


def load_nltk_stop_words(language: str = LexiconConstants.NLTK_STOPWORDS_LANGUAGE) -> FrozenSet[str]:
    """NLTK stop-word list, downloading the corpus on first use."""
    import nltk
    from nltk.corpus import stopwords

    try:
        words = stopwords.words(language)
    except LookupError:
        logger.info("Downloading NLTK stopwords corpus")
        nltk.download("stopwords", quiet=True)
        try:
            words = stopwords.words(language)
        except LookupError as e:
            raise LexiconError(f"NLTK stopwords corpus unavailable for '{language}'; "
                               "download it with nltk.download('stopwords') or pass a stop-word file",
                               path=f"nltk:{language}") from e
    logger.info(f"Loaded {len(words)} NLTK stop words ({language})")
    return frozenset(w.lower() for w in words)


def load_resources(lexicon_file: Optional[str] = None, stop_words_file: Optional[str] = None,
                   afinn_language: str = LexiconConstants.DEFAULT_AFINN_LANGUAGE
                   ) -> Tuple[Mapping[str, int], FrozenSet[str]]:
    """Load the lexicon and the stop words, preferring the given files."""
    if lexicon_file:
        lexicon = read_lexicon_file(lexicon_file)
    else:
        lexicon = load_afinn_lexicon(afinn_language)

    if stop_words_file:
        stop_words = read_stop_words_file(stop_words_file)
    else:
        stop_words = load_nltk_stop_words()
    return lexicon, stop_words

"""
Keyword Extractor.

Pulls the most frequent meaningful words out of free review text using
stop-word filtering and frequency counting.
"""

import logging
import re
from collections import Counter
from typing import Iterable, List, Optional

import config.settings as settings

logger = logging.getLogger(__name__)


# Common function words excluded from keyword counting.
# The empty string is redundant with the length filter but kept in the set.
STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'is', 'are', 'was', 'be', 'been', 'being',
    'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would', 'could', 'should',
    'may', 'might', 'must', 'can', 'this', 'that', 'these', 'those', 'i', 'you',
    'he', 'she', 'it', 'we', 'they', 'what', 'which', 'who', 'when', 'where',
    'why', 'how', 'all', 'each', 'every', 'both', 'few', 'more', 'most', 'other',
    'some', 'such', 'no', 'nor', 'not', 'only', 'same', 'so', 'than', 'too',
    'very', 'just', 'well', 'really', 'much', 'also', 'even',
    '', 'if', 'as', 'were'
])

# Whitespace as browsers define it; control characters such as \x1c and
# \x85 are not whitespace here and get deleted like punctuation.
_WHITESPACE = " \t\n\v\f\r\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# Anything that is not an ASCII word character or whitespace is deleted,
# not replaced, so "great-movie" becomes the single token "greatmovie".
_PUNCTUATION = re.compile(f"[^A-Za-z0-9_{_WHITESPACE}]")
_SEPARATOR = re.compile(f"[{_WHITESPACE}]+")


class KeywordExtractor:
    """
    Ranks the words of a text by frequency.

    Pipeline: lower-case → delete punctuation → split on whitespace →
    drop short tokens and stop words → count → sort by frequency.
    Ties keep first-occurrence order.
    """

    def __init__(
        self,
        min_length: int = settings.MIN_KEYWORD_LENGTH,
        stop_words: Iterable[str] = STOP_WORDS,
        limit: int = settings.KEYWORD_LIMIT
    ):
        """
        Initialize keyword extractor.

        Args:
            min_length: Tokens shorter than this are discarded
            stop_words: Words never reported as keywords
            limit: Default number of keywords returned by extract()
        """
        self.min_length = min_length
        self.stop_words = frozenset(stop_words)
        self.limit = limit

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Split text into candidate keyword tokens.

        Args:
            text: Raw review text (None or empty yields no tokens)

        Returns:
            Tokens in original order, after length and stop-word filtering
        """
        if not text:
            return []

        cleaned = _PUNCTUATION.sub("", text.lower())
        return [
            word for word in _SEPARATOR.split(cleaned)
            if len(word) >= self.min_length and word not in self.stop_words
        ]

    def extract(self, text: Optional[str], limit: Optional[int] = None) -> List[str]:
        """
        Extract the most frequent keywords from text.

        Args:
            text: Raw review text
            limit: Maximum number of keywords (defaults to self.limit)

        Returns:
            Keywords, most frequent first
        """
        if limit is None:
            limit = self.limit
        if limit <= 0:
            return []

        word_freq = Counter(self.tokenize(text))

        # sorted() is stable and Counter keeps insertion order,
        # so equal counts stay in first-occurrence order
        ranked = sorted(word_freq.items(), key=lambda item: item[1], reverse=True)
        keywords = [word for word, _ in ranked[:limit]]

        logger.debug(f"Extracted {len(keywords)} keywords from {len(word_freq)} distinct tokens")
        return keywords


_default_extractor = KeywordExtractor()


def extract_keywords(text: Optional[str], limit: int = settings.KEYWORD_LIMIT) -> List[str]:
    """Extract the top `limit` keywords from text with the default rules."""
    return _default_extractor.extract(text, limit)

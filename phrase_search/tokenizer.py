"""
Text normalization and tokenization module.

This module lowercases and cleans raw text and splits it into the tokens
used for indexing and querying. Word character ranges, character folds and
stop words all come from configuration so the same code serves any dataset.
"""

import re
from typing import Iterable, List, Mapping, Optional


class Tokenizer:
    """Handles text normalization and tokenization."""

    def __init__(self, config, folds: Optional[Mapping[str, str]] = None,
                 stop_words: Optional[Iterable[str]] = None):
        """
        Initialize with configuration.

        Args:
            config: Configuration object.
            folds: Character replacements applied after lowercasing. If None,
                uses config.CHARACTER_FOLDS.
            stop_words: Tokens dropped by tokenize(). If None, uses config.STOP_WORDS.
        """
        self.config = config
        if folds is None:
            folds = getattr(config, "CHARACTER_FOLDS", {})
        if stop_words is None:
            stop_words = config.STOP_WORDS
        self.fold_table = str.maketrans({k: v for k, v in folds.items()})
        self.stop_words = frozenset(stop_words)
        self.non_word_regex = re.compile(rf"[^{config.WORD_CHARACTERS}\s]")
        self.space_regex = re.compile(r"\s+")

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for indexing and matching.

        Lowercases, applies character folds, replaces everything outside the
        word character ranges with a space and collapses whitespace.

        Args:
            text: Text to normalize. None and empty strings are accepted.

        Returns:
            Normalized text, possibly empty.
        """
        if not text:
            return ""
        txt = str(text).lower().translate(self.fold_table)
        txt = self.non_word_regex.sub(" ", txt)
        return self.space_regex.sub(" ", txt).strip()

    def tokenize(self, text: Optional[str], max_tokens: Optional[int] = None) -> List[str]:
        """
        Tokenize text into search tokens.

        Args:
            text: Text to tokenize.
            max_tokens: Maximum number of tokens to keep. If None, uses
                config.MAX_QUERY_TOKENS.

        Returns:
            List of tokens in text order, short tokens and stop words removed.
        """
        if max_tokens is None:
            max_tokens = self.config.MAX_QUERY_TOKENS

        normalized = self.normalize(text)
        if not normalized:
            return []

        min_len = self.config.MIN_TOKEN_LENGTH
        tokens = [
            tok for tok in normalized.split(" ")
            if len(tok) >= min_len and tok not in self.stop_words
        ]
        return tokens[:max_tokens]

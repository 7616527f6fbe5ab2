"""
Auto-correction module for query processing.

This module suggests corrections for query words that are missing from
the index, using Levenshtein distance and posting frequency.
"""

from typing import Dict, List, Mapping, Optional, Set, Tuple
from collections import defaultdict
from rapidfuzz.distance import Levenshtein


class AutoCorrect:
    """Handles query auto-correction using edit distance and frequency."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.word_vocab: Set[str] = set()
        self.word_freq: Dict[str, int] = {}
        self.by_len_index: Dict[int, List[str]] = {}

    def fit(self, word_freq: Mapping[str, int]) -> None:
        """
        Load the vocabulary corrections are drawn from.

        Multi-word keywords are skipped; only single words can replace a
        single query word.

        Args:
            word_freq: Mapping of indexed word to its frequency.
        """
        self.word_freq = {w: f for w, f in word_freq.items() if w and " " not in w}
        self.word_vocab = set(self.word_freq)
        self.by_len_index = self.build_len_index(self.word_vocab)

    def build_len_index(self, word_vocab: Set[str]) -> Dict[int, List[str]]:
        """
        Build a length-based index for efficient candidate lookup.

        Args:
            word_vocab: Set of vocabulary words.

        Returns:
            Dictionary mapping word length to sorted list of words of that length.
        """
        index = defaultdict(list)
        for w in sorted(word_vocab):
            index[len(w)].append(w)
        return dict(index)

    def _candidate_words(self, word: str, max_len_diff: Optional[int] = None) -> List[str]:
        """
        Generate candidate words from vocabulary within a length band.

        Args:
            word: Input word.
            max_len_diff: Maximum length difference to consider.

        Returns:
            List of candidate words.
        """
        if max_len_diff is None:
            max_len_diff = self.config.MAX_EDIT_DISTANCE

        L = len(word)
        candidates = []
        for dL in range(-max_len_diff, max_len_diff + 1):
            bucket = self.by_len_index.get(L + dL)
            if bucket:
                candidates.extend(bucket)
        return candidates

    def suggest_correction(self, word: str, max_dist: Optional[int] = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Suggest a correction for a word using edit distance and frequency.

        Args:
            word: Word to correct.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (best_word, best_distance) or (None, None) if no good match.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        best_word, best_dist, best_freq = None, None, -1

        for cand in self._candidate_words(word, max_len_diff=max_dist):
            dist = Levenshtein.distance(word, cand, score_cutoff=max_dist)
            if dist <= max_dist:
                freq = self.word_freq.get(cand, 0)
                # Tie-break: smaller distance first, then higher frequency
                if (best_dist is None) or (dist < best_dist) or (dist == best_dist and freq > best_freq):
                    best_word, best_dist, best_freq = cand, dist, freq
                if best_dist == 0:
                    break

        return best_word, best_dist

    def autocorrect_query_words(self, words: List[str], max_dist: Optional[int] = None) -> Tuple[List[str], List[Tuple[str, str]], List[str]]:
        """
        Auto-correct a list of query words.

        Words already in the vocabulary and words shorter than
        config.MIN_WORD_LENGTH are kept as they are.

        Args:
            words: List of words to correct.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (corrected_words, changes, oov_no_suggest).
            - corrected_words: List of corrected words
            - changes: List of (original, corrected) pairs
            - oov_no_suggest: List of words with no viable suggestions
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        corrected = []
        changes = []
        oov_no_suggest = []

        for w in words:
            if w in self.word_vocab or len(w) < self.config.MIN_WORD_LENGTH:
                corrected.append(w)
                continue

            suggestion, _dist = self.suggest_correction(w, max_dist=max_dist)
            if suggestion is None:
                corrected.append(w)
                oov_no_suggest.append(w)
            else:
                corrected.append(suggestion)
                changes.append((w, suggestion))

        return corrected, changes, oov_no_suggest

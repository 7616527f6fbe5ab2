"""
Phrase translation lookup.

Russian phrases map to their Norwegian translation (with a pronunciation
hint). Lookup tries an exact match first and then falls back to the first
phrase that contains, or is contained in, the requested text.
"""

import random
from typing import Dict, List, Mapping, Optional, Tuple

from rapidfuzz import fuzz, process


class TranslationLookup:
    """Exact-then-substring lookup over a phrase dictionary."""

    def __init__(self, translations: Mapping[str, str], rng: Optional[random.Random] = None,
                 fuzzy_cutoff: Optional[float] = None):
        """
        Args:
            translations: Mapping of phrase to translation.
            rng: Random source for random_translation(); a fresh one if None.
            fuzzy_cutoff: Minimum similarity (0-100) for misspelled phrases to
                appear in suggestions(). None disables fuzzy suggestions.
        """
        self.translations: Dict[str, str] = {k.lower().strip(): v for k, v in translations.items()}
        self.rng = rng or random.Random()
        self.fuzzy_cutoff = fuzzy_cutoff

    def __len__(self) -> int:
        return len(self.translations)

    @staticmethod
    def _clean(text: Optional[str]) -> str:
        return (text or "").lower().strip()

    def lookup(self, text: Optional[str]) -> Optional[str]:
        """
        Translate a phrase.

        Args:
            text: Phrase to translate.

        Returns:
            The translation, or None if no phrase matches.
        """
        phrase = self._clean(text)
        if not phrase:
            return None

        if phrase in self.translations:
            return self.translations[phrase]

        for key, value in self.translations.items():
            if key in phrase or phrase in key:
                return value
        return None

    def suggestions(self, text: Optional[str], limit: int = 3) -> List[Tuple[str, str]]:
        """
        List phrases close to the text.

        Partial matches come first, in dictionary order; remaining slots are
        filled with the most similar phrases above the fuzzy cutoff.

        Args:
            text: Phrase that had no exact translation.
            limit: Maximum number of suggestions.

        Returns:
            List of (phrase, translation) pairs.
        """
        phrase = self._clean(text)
        found = []
        if not phrase or limit <= 0:
            return found
        for key, value in self.translations.items():
            if key in phrase or phrase in key:
                found.append((key, value))
                if len(found) >= limit:
                    return found

        if self.fuzzy_cutoff is not None:
            seen = {key for key, _ in found}
            matches = process.extract(
                phrase, list(self.translations), scorer=fuzz.ratio,
                limit=limit + len(seen), score_cutoff=self.fuzzy_cutoff,
            )
            for key, _score, _idx in matches:
                if key not in seen:
                    found.append((key, self.translations[key]))
                    if len(found) >= limit:
                        break
        return found

    def random_translation(self) -> Optional[Tuple[str, str]]:
        """Pick a random (phrase, translation) pair for practice."""
        if not self.translations:
            return None
        key = self.rng.choice(list(self.translations))
        return key, self.translations[key]

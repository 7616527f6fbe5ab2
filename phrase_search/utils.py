"""
Utility functions for configuration and result formatting.

This module contains helpers for building configuration objects,
highlighting query words and printing ranked results.
"""

import re
from types import SimpleNamespace
from typing import Dict, List, Optional

import config as default_config

from .models import SearchResult


def load_config(config_dict: Optional[Dict] = None, base=default_config):
    """
    Build a configuration object from the config module and overrides.

    Args:
        config_dict: Optional mapping of UPPERCASE setting names to values.
        base: Module or object providing the defaults.

    Returns:
        The base module itself when there are no overrides, otherwise a
        namespace with every base setting plus the overrides.
    """
    if not config_dict:
        return base
    settings = {k: getattr(base, k) for k in dir(base) if k.isupper()}
    settings.update(config_dict)
    return SimpleNamespace(**settings)


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _word_pattern(self, words: List[str]) -> Optional[re.Pattern]:
        """Whole-word regex for the given words, longest first; None if there are none."""
        uniq = sorted({w for w in words or () if w}, key=len, reverse=True)
        if not uniq:
            return None
        flags = 0 if self.config.HIGHLIGHT_CASE_SENSITIVE else re.IGNORECASE
        return re.compile("|".join(rf"(?<!\w){re.escape(w)}(?!\w)" for w in uniq), flags)

    def highlight_words(self, text: str, words: List[str]) -> str:
        """
        Wrap whole-word matches of the query words in the highlight markers.

        Args:
            text: Text to highlight.
            words: Query words.

        Returns:
            Highlighted text.
        """
        pattern = self._word_pattern(words)
        if pattern is None:
            return text
        start, end = self.config.HIGHLIGHT_START, self.config.HIGHLIGHT_END
        return pattern.sub(lambda m: f"{start}{m.group(0)}{end}", text)

    def make_snippet(self, text: str, query_words: List[str], max_chars: Optional[int] = None) -> str:
        """
        Cut a single-line window of the text around the first query word and highlight it.

        The window is measured on the plain text, so highlight markers never
        count against max_chars and are never cut in half.

        Args:
            text: Record text.
            query_words: Words to highlight.
            max_chars: Window width. If None, uses config.SNIPPET_CHARS.

        Returns:
            Highlighted snippet, with an ellipsis on each trimmed side.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        plain = " ".join(text.split())
        if len(plain) <= max_chars:
            return self.highlight_words(plain, query_words)

        pattern = self._word_pattern(query_words)
        match = pattern.search(plain) if pattern is not None else None
        start = max(0, match.start() - max_chars // 3) if match else 0
        end = min(len(plain), start + max_chars)

        prefix = "…" if start > 0 else ""
        suffix = "…" if end < len(plain) else ""
        return prefix + self.highlight_words(plain[start:end], query_words) + suffix

    def print_results_table(self, ranked: List[SearchResult], query_words: List[str],
                            max_chars: Optional[int] = None) -> None:
        """
        Render results as a clean ASCII table.

        Args:
            ranked: Ranked search results.
            query_words: Query tokens, shown in the footer and highlighted in snippets.
            max_chars: Maximum characters in snippet.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not ranked:
            print("No matching records found.")
            return

        rows = []
        for rank, result in enumerate(ranked, start=1):
            record = result.record
            text = record.secondary_text or record.primary_text
            snippet = self.make_snippet(text, query_words, max_chars=max_chars)
            rows.append([
                str(rank), str(record.id), str(result.score),
                record.category or "-", record.level or "-", snippet,
            ])

        headers = ["#", "ID", "Score", "Category", "Level", "Text"]
        if not self.config.SHOW_SCORES:
            headers.pop(2)
            for row in rows:
                row.pop(2)

        max_widths = {"#": 3, "ID": 12, "Score": 6, "Category": 16, "Level": 12}
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths.get(h, width)))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        print("\n=== Top Results ===")
        print(" | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers)))
        print("-+-".join("-" * w for w in col_widths))
        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))

        print(f"\n(query tokens used: [{', '.join(query_words)}])\n")

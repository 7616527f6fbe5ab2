"""
Main PhraseSearchEngine class that orchestrates the search pipeline.

This module contains the PhraseSearchEngine class that owns the inverted
index and the result cache, and answers keyword queries against a static,
in-memory set of records.
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .autocorrect import AutoCorrect
from .cache import ResultCache
from .indexer import Indexer
from .models import Record, SearchOptions, SearchResult
from .ranker import Ranker
from .tokenizer import Tokenizer
from .utils import load_config

logger = logging.getLogger(__name__)


class PhraseSearchEngine:
    """
    Keyword search engine over a small static record set.

    Queries are matched with AND semantics first and fall back to OR when
    no record contains every query token. Category and level filters are
    applied afterwards as hard constraints.
    """

    def __init__(self, config_dict: Optional[Dict] = None, config=None):
        """
        Initialize the PhraseSearchEngine.

        Args:
            config_dict: Optional configuration dictionary to override defaults.
            config: Optional ready-made configuration object; takes precedence
                over config_dict.
        """
        self.config = config if config is not None else load_config(config_dict)

        self.tokenizer = Tokenizer(self.config)
        self.indexer = Indexer(self.config, tokenizer=self.tokenizer)
        self.ranker = Ranker(self.config, tokenizer=self.tokenizer)
        self.auto_correct = AutoCorrect(self.config)
        self.cache = ResultCache(
            max_entries=self.config.CACHE_MAX_SIZE,
            enabled=self.config.CACHE_ENABLED,
        )

        self.total_searches = 0
        self.total_search_time = 0.0

    def build_index(self, records: Iterable[Union[Record, Mapping]]) -> None:
        """
        Build the search index from records, replacing any previous index.

        The result cache is cleared since every cached ranking may be stale.

        Args:
            records: Records or record-shaped mappings.
        """
        start = time.perf_counter()
        self.indexer.build_inverted_index(records)
        self.cache.clear()
        self.auto_correct.fit({
            tok: len(ids) for tok, ids in self.indexer.keyword_index.items()
        })
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Indexed %d records, %d keywords in %.2fms",
            self.indexer.record_count, self.indexer.token_count, elapsed,
        )

    def clear(self) -> None:
        """Drop the index and every cached result."""
        self.indexer.clear()
        self.cache.clear()
        self.auto_correct.fit({})

    def search(self, query: Optional[str],
               options: Union[SearchOptions, Mapping[str, Any], None] = None,
               **kwargs: Any) -> List[SearchResult]:
        """
        Search for records matching the given query.

        Args:
            query: Raw query text.
            options: SearchOptions or a mapping with category, level and limit.
            **kwargs: category, level or limit given directly; these override options.

        Returns:
            List of SearchResult sorted by relevance, at most limit long.
        """
        start = time.perf_counter()
        self.total_searches += 1

        opts = SearchOptions.coerce(options, default_limit=self.config.TOP_K_RESULTS, **kwargs)
        normalized_query = self.tokenizer.normalize(query)
        cache_key = (normalized_query,) + opts.cache_key_part()

        hits_before = self.cache.hits
        results = self.cache.get_or_compute(
            cache_key, lambda: self._perform_search(normalized_query, opts)
        )

        elapsed = (time.perf_counter() - start) * 1000
        self.total_search_time += elapsed
        if self.cache.hits > hits_before:
            logger.debug("Cached result for %r: %d records", query, len(results))
        else:
            logger.info("Search %r: %d results in %.2fms", query, len(results), elapsed)
        return list(results)

    def _perform_search(self, normalized_query: str, opts: SearchOptions) -> Tuple[SearchResult, ...]:
        query_tokens = self.tokenizer.tokenize(normalized_query)
        if not query_tokens:
            return ()

        candidates = self.indexer.get_common_documents(query_tokens)
        if not candidates:
            candidates = self.indexer.get_documents_containing(query_tokens)

        if opts.category:
            candidates = candidates & self.indexer.get_category_postings(opts.category)
        if opts.level:
            candidates = candidates & self.indexer.get_level_postings(opts.level)
        if not candidates:
            return ()

        records = [self.indexer.records_by_id[rid] for rid in self.indexer.sort_by_insertion(candidates)]
        return tuple(self.ranker.rank(records, normalized_query, query_tokens, topk=opts.limit))

    def find_best(self, query: Optional[str], **kwargs: Any) -> Optional[SearchResult]:
        """Return the top-ranked result for a query, or None."""
        results = self.search(query, **kwargs)
        return results[0] if results else None

    def preload_popular_queries(self, queries: Iterable[str]) -> None:
        """Run each query once so its results are cached."""
        count = 0
        for query in queries:
            self.search(query)
            count += 1
        logger.info("Preloaded %d popular queries", count)

    def get_suggestions(self, partial_query: Optional[str], limit: Optional[int] = None) -> List[str]:
        """
        Autocomplete a partial query from the indexed keywords.

        Args:
            partial_query: Text typed so far.
            limit: Maximum number of suggestions. If None, uses config default.

        Returns:
            Indexed keywords starting with the normalized partial query,
            excluding an exact match, in index order.
        """
        if limit is None:
            limit = self.config.SUGGESTION_LIMIT

        normalized = self.tokenizer.normalize(partial_query)
        suggestions = []
        if limit <= 0:
            return suggestions
        for keyword in self.indexer.keyword_index:
            if keyword.startswith(normalized) and keyword != normalized:
                suggestions.append(keyword)
                if len(suggestions) >= limit:
                    break
        return suggestions

    def suggest_corrections(self, query: Optional[str]) -> Tuple[Optional[str], List[Tuple[str, str]]]:
        """
        Propose a corrected query for misspelled words.

        Args:
            query: Raw query text.

        Returns:
            Tuple of (corrected_query, changes); corrected_query is None when
            auto-correction is disabled or nothing changed.
        """
        if not self.config.AUTO_CORRECT_ENABLED:
            return None, []

        words = self.tokenizer.tokenize(query)
        corrected_words, changes, _oov = self.auto_correct.autocorrect_query_words(words)
        if not changes:
            return None, []
        return " ".join(corrected_words), changes

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the index, cache and searches so far.

        Returns:
            Dictionary containing various statistics.
        """
        total = self.total_searches
        hit_rate = (self.cache.hits / total * 100) if total else 0.0
        return {
            "total_searches": total,
            "cache_hits": self.cache.hits,
            "cache_hit_rate": f"{hit_rate:.2f}%",
            "avg_search_time_ms": (self.total_search_time / total) if total else 0.0,
            "total_items": self.indexer.record_count,
            "total_keywords": self.indexer.token_count,
            "cache_size": len(self.cache),
        }

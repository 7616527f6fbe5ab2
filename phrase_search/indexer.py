"""
Inverted index construction and management.

This module builds and holds the keyword, category and level postings
used by the search engine. Postings are sets of record ids; the records
themselves are kept in insertion order so ties can be broken by dataset
order.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional, Set, Union

from .models import Record, RecordId
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Indexer:
    """Handles inverted index construction and lookups."""

    def __init__(self, config, tokenizer: Optional[Tokenizer] = None):
        """Initialize with configuration."""
        self.config = config
        self.tokenizer = tokenizer or Tokenizer(config)

        self.keyword_index: Dict[str, Set[RecordId]] = {}
        self.category_index: Dict[str, Set[RecordId]] = {}
        self.level_index: Dict[str, Set[RecordId]] = {}
        self.records_by_id: Dict[RecordId, Record] = {}
        self.order: Dict[RecordId, int] = {}

    @property
    def record_count(self) -> int:
        return len(self.records_by_id)

    @property
    def token_count(self) -> int:
        return len(self.keyword_index)

    def clear(self) -> None:
        """Drop all postings and records."""
        self.keyword_index.clear()
        self.category_index.clear()
        self.level_index.clear()
        self.records_by_id.clear()
        self.order.clear()

    def build_inverted_index(self, records: Iterable[Union[Record, Mapping]]) -> None:
        """
        Build the inverted index from a list of records.

        Any previous index state is discarded first. Records without an id
        are skipped; a record whose id was already indexed is skipped too,
        so the first occurrence wins.

        Args:
            records: Records or record-shaped mappings.
        """
        self.clear()

        keyword_postings = defaultdict(set)
        category_postings = defaultdict(set)
        level_postings = defaultdict(set)
        skipped = 0

        for raw in records:
            record = raw if isinstance(raw, Record) else Record.from_mapping(raw)
            if record is None or record.id is None or record.id == "":
                skipped += 1
                continue
            if record.id in self.records_by_id:
                logger.warning("Duplicate record id %r skipped", record.id)
                continue

            self.order[record.id] = len(self.records_by_id)
            self.records_by_id[record.id] = record

            # Keywords are posted whole, free text is posted token by token
            for keyword in record.keywords:
                normalized = self.tokenizer.normalize(keyword)
                if normalized:
                    keyword_postings[normalized].add(record.id)

            for text in (record.primary_text, record.secondary_text):
                for tok in self.tokenizer.tokenize(text):
                    keyword_postings[tok].add(record.id)

            if record.category:
                category_postings[record.category].add(record.id)
                if self.config.INDEX_CATEGORY_AS_KEYWORD:
                    normalized = self.tokenizer.normalize(record.category)
                    if normalized:
                        keyword_postings[normalized].add(record.id)
            if record.level:
                level_postings[record.level].add(record.id)

        self.keyword_index = dict(keyword_postings)
        self.category_index = dict(category_postings)
        self.level_index = dict(level_postings)

        if skipped:
            logger.debug("Skipped %d records without an id", skipped)

    def get_posting_list(self, token: str) -> Set[RecordId]:
        """
        Get the posting set for a token.

        Args:
            token: Normalized token or keyword.

        Returns:
            Set of record ids; empty if the token was never indexed.
        """
        return self.keyword_index.get(token, set())

    def get_category_postings(self, category: str) -> Set[RecordId]:
        return self.category_index.get(category, set())

    def get_level_postings(self, level: str) -> Set[RecordId]:
        return self.level_index.get(level, set())

    def get_document_frequency(self, token: str) -> int:
        """Number of records posted under a token."""
        return len(self.get_posting_list(token))

    def get_documents_containing(self, tokens: List[str]) -> Set[RecordId]:
        """
        Get the set of records containing any of the given tokens.

        Args:
            tokens: List of tokens to search for.

        Returns:
            Set of record ids containing at least one of the tokens.
        """
        doc_ids = set()
        for token in tokens:
            doc_ids.update(self.get_posting_list(token))
        return doc_ids

    def get_common_documents(self, tokens: List[str]) -> Set[RecordId]:
        """
        Get the set of records containing all of the given tokens.

        Args:
            tokens: List of tokens to search for.

        Returns:
            Set of record ids containing every token.
        """
        if not tokens:
            return set()

        common_docs = set(self.get_posting_list(tokens[0]))
        for token in tokens[1:]:
            if not common_docs:
                break
            common_docs &= self.get_posting_list(token)
        return common_docs

    def sort_by_insertion(self, doc_ids: Iterable[RecordId]) -> List[RecordId]:
        """Order record ids the way their records were indexed."""
        return sorted(doc_ids, key=lambda rid: self.order[rid])

    def summarize_index(self) -> None:
        """Print a summary of the inverted index."""
        num_tokens = self.token_count
        total_postings = sum(len(postings) for postings in self.keyword_index.values())

        print("\n=== Inverted Index Summary ===")
        print(f"Records indexed: {self.record_count}")
        print(f"Unique tokens: {num_tokens}")
        print(f"Total postings: {total_postings}")
        if num_tokens:
            print(f"Average postings per token: {total_postings / num_tokens:.2f}")
        print(f"Categories: {len(self.category_index)}  |  Levels: {len(self.level_index)}")

"""
Record ranking and scoring module.

This module assigns lexical relevance scores to candidate records and
orders them. Scores are additive and uncapped:

    exact keyword match         EXACT_KEYWORD_SCORE   (per keyword)
    keyword contains the query  PARTIAL_KEYWORD_SCORE (per keyword)
    query token in primary      PRIMARY_TOKEN_SCORE   (per query token)
    query token in secondary    SECONDARY_TOKEN_SCORE (per query token)
    category among query tokens CATEGORY_BONUS
"""

from typing import List, Optional, Sequence

from .models import Record, SearchResult
from .tokenizer import Tokenizer


class Ranker:
    """Handles record scoring and ordering."""

    def __init__(self, config, tokenizer: Optional[Tokenizer] = None):
        """Initialize with configuration."""
        self.config = config
        self.tokenizer = tokenizer or Tokenizer(config)

    def score_record(self, record: Record, query: str, query_tokens: Sequence[str]) -> int:
        """
        Compute the relevance score of a record for a query.

        Args:
            record: Candidate record.
            query: The normalized query string.
            query_tokens: Tokens of the query.

        Returns:
            Relevance score.
        """
        cfg = self.config
        score = 0

        for keyword in record.keywords:
            normalized = self.tokenizer.normalize(keyword)
            if normalized == query:
                score += cfg.EXACT_KEYWORD_SCORE
            elif query in normalized:
                score += cfg.PARTIAL_KEYWORD_SCORE

        if record.primary_text:
            primary_tokens = set(self.tokenizer.tokenize(record.primary_text))
            score += cfg.PRIMARY_TOKEN_SCORE * sum(1 for t in query_tokens if t in primary_tokens)

        if record.secondary_text:
            secondary_tokens = set(self.tokenizer.tokenize(record.secondary_text))
            score += cfg.SECONDARY_TOKEN_SCORE * sum(1 for t in query_tokens if t in secondary_tokens)

        if record.category and record.category.lower() in query_tokens:
            score += cfg.CATEGORY_BONUS

        return score

    def rank(self, records: Sequence[Record], query: str, query_tokens: Sequence[str],
             topk: Optional[int] = None) -> List[SearchResult]:
        """
        Score and order candidate records.

        Records with equal scores keep the order they were passed in.

        Args:
            records: Candidate records, already in tie-break order.
            query: The normalized query string.
            query_tokens: Tokens of the query.
            topk: Number of top results to return. If None, uses config default.

        Returns:
            List of SearchResult sorted by score descending.
        """
        if topk is None:
            topk = self.config.TOP_K_RESULTS

        ranked = [SearchResult(record=r, score=self.score_record(r, query, query_tokens)) for r in records]
        ranked.sort(key=lambda x: x.score, reverse=True)
        return ranked[:topk]

#!/usr/bin/env python3
"""
Example usage of the Norwegian phrase search engine.

This script demonstrates how to use the search engine and the assistant
programmatically.
"""

import sys
import time
from pathlib import Path

# Add parent directory to path to import phrase_search
sys.path.append(str(Path(__file__).parent.parent))

from phrase_search import LanguageAssistant, PhraseSearchEngine, build_records, load_dataset


def basic_search_example():
    """Demonstrate basic search with filters."""
    print("=== Basic Search Example ===")

    engine = PhraseSearchEngine()
    engine.build_index(build_records(load_dataset()))

    searches = [
        ("привет", {}),
        ("god morgen", {}),
        ("jeg forstår", {"limit": 2}),
        ("greetings", {"category": "greetings", "limit": 3}),
        ("det", {"level": "intermediate"}),
    ]

    for query, options in searches:
        print(f"\nSearching for: '{query}' {options or ''}")
        results = engine.search(query, options)
        if results:
            for i, result in enumerate(results, 1):
                print(f"  {i}. Score: {result.score} | {result.record.id} | {result.record.primary_text}")
        else:
            print("  No results found.")


def autocomplete_example():
    """Demonstrate autocomplete and auto-correction."""
    print("\n=== Autocomplete / Auto-correction Example ===")

    engine = PhraseSearchEngine()
    engine.build_index(build_records(load_dataset()))

    for partial in ["ta", "god", "при"]:
        print(f"'{partial}' -> {engine.get_suggestions(partial)}")

    for query in ["tak", "beklagr", "спосибо"]:
        corrected, changes = engine.suggest_corrections(query)
        print(f"'{query}' -> {corrected} {changes}")


def assistant_example():
    """Demonstrate the conversation layer."""
    print("\n=== Assistant Example ===")

    assistant = LanguageAssistant.from_dataset()
    for message in ["как сказать спасибо", "hei", "расскажи про артикли", "дай новое слово", "qwerty"]:
        print(f"\n> {message}")
        print(assistant.answer(message))


def performance_test():
    """Compare cold and cached query times."""
    print("\n=== Performance Test ===")

    engine = PhraseSearchEngine()
    engine.build_index(build_records(load_dataset()))

    queries = ["привет", "takk", "hvor er bussen", "доброе утро", "jeg kommer fra russland"]
    for label in ("cold", "cached"):
        start = time.perf_counter()
        for query in queries:
            engine.search(query)
        elapsed = (time.perf_counter() - start) * 1000
        print(f"{label}: {len(queries)} queries in {elapsed:.3f}ms")

    for key, value in engine.get_stats().items():
        print(f"  {key}: {value}")


def main():
    """Run all examples."""
    print("Norwegian Phrase Search - Example Usage")
    print("=" * 50)

    basic_search_example()
    autocomplete_example()
    assistant_example()
    performance_test()

    print("\n" + "=" * 50)
    print("All examples completed successfully!")


if __name__ == "__main__":
    main()

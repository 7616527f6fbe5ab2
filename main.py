#!/usr/bin/env python3
"""
Main entry point for the Norwegian phrase search engine.

This script provides a command-line interface for the search engine
and the learning assistant built on top of it.
"""

import argparse
import logging
import sys

from phrase_search import LanguageAssistant, ResultFormatter, load_dataset
import config


def interactive_session(assistant: LanguageAssistant) -> None:
    """
    Start an interactive assistant session.

    Type 'exit' or 'quit' to end the session.
    """
    print("\n=== Norwegian Assistant ===")
    print("Type 'exit' or 'quit' to quit.")

    while True:
        try:
            message = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if not message:
            continue
        if message.lower() in ("exit", "quit"):
            print("Ha det!")
            break

        print(assistant.answer(message))
        print()


def main():
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="Keyword search over a Norwegian learning dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Start interactive assistant
  python main.py --query "привет"                  # Ranked search results
  python main.py --query "god" --category greetings --limit 3
  python main.py --ask "как сказать спасибо"       # Single assistant answer
  python main.py --suggest "ta"                    # Autocomplete
  python main.py --data words.json --stats         # Custom dataset
        """
    )

    parser.add_argument("--data", type=str, default=None,
                        help="JSON dataset file (default: built-in dataset)")
    parser.add_argument("--query", type=str, default=None,
                        help="Single search query (prints ranked results)")
    parser.add_argument("--ask", type=str, default=None,
                        help="Single message for the assistant")
    parser.add_argument("--category", type=str, default=None,
                        help="Only return records of this category")
    parser.add_argument("--level", type=str, default=None,
                        help="Only return records of this level")
    parser.add_argument("--limit", type=int, default=None,
                        help="Number of results to return (default: 10)")
    parser.add_argument("--suggest", type=str, default=None,
                        help="Print autocomplete suggestions for a partial query")
    parser.add_argument("--build-only", action="store_true",
                        help="Only build the index, don't start interactive mode")
    parser.add_argument("--stats", action="store_true",
                        help="Show index and search statistics")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL,
                        help="Logging level (default: %(default)s)")

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    try:
        dataset = load_dataset(args.data or config.DATA_FILE)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Error loading dataset: {e}")
        sys.exit(1)

    assistant = LanguageAssistant.from_dataset(dataset)
    engine = assistant.engine
    formatter = ResultFormatter(engine.config)

    if args.stats:
        engine.indexer.summarize_index()

    if args.build_only:
        print(f"Indexed {engine.indexer.record_count} records. Exiting.")
        return

    if args.suggest is not None:
        for suggestion in engine.get_suggestions(args.suggest):
            print(suggestion)

    elif args.query is not None:
        results = engine.search(args.query, category=args.category, level=args.level, limit=args.limit)
        query_words = engine.tokenizer.tokenize(args.query)
        formatter.print_results_table(results, query_words)
        if not results:
            corrected, _changes = engine.suggest_corrections(args.query)
            if corrected:
                print(f"Did you mean: {corrected}?")

    elif args.ask is not None:
        print(assistant.answer(args.ask))

    else:
        interactive_session(assistant)

    if args.stats:
        print("\n=== Search Statistics ===")
        for key, value in engine.get_stats().items():
            print(f"{key}: {value}")


if __name__ == "__main__":
    main()

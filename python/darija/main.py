"""darija CLI - Moroccan Arabic dictionary toolkit.

Usage:
    python -m darija.main search shokran
    python -m darija.main browse --category food
    python -m darija.main categories
    python -m darija.main word-of-the-day
    python -m darija.main practice greetings --mode darija-to-english
    python -m darija.main progress --deck greetings
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from . import config as cfg
from .ingest import load_lexicon
from .practice import (
    DECKS,
    DeckMode,
    JsonProgressStore,
    PracticeSession,
    get_deck,
    learned_count,
    level_histogram,
    level_label,
)
from .schema import Entry, Lexicon


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="darija - Moroccan Arabic dictionary toolkit"
    )
    parser.add_argument(
        "--words",
        type=Path,
        default=None,
        help="Word source file (default: from config.json)",
    )
    parser.add_argument(
        "--phrases",
        type=Path,
        default=None,
        help="Phrase source file (default: from config.json)",
    )
    parser.add_argument(
        "--progress",
        type=Path,
        default=None,
        help="Progress file for practice (default: from config.json)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search words and phrases")
    search.add_argument("query", nargs="+", help="Query in any language")

    browse = sub.add_parser("browse", help="List entries by category or tag")
    group = browse.add_mutually_exclusive_group(required=True)
    group.add_argument("--category", "-c", type=str)
    group.add_argument("--tag", "-t", type=str)
    browse.add_argument(
        "--list-phrases", "-p", dest="show_phrases", action="store_true",
        help="List phrases instead of words",
    )

    sub.add_parser("categories", help="Show categories and entry counts")
    sub.add_parser("word-of-the-day", help="Show today's featured word")

    practice = sub.add_parser("practice", help="Flashcard practice")
    practice.add_argument(
        "deck", help=f"Deck id: {', '.join(d.id for d in DECKS)}"
    )
    practice.add_argument(
        "--mode", "-m",
        choices=[m.value for m in DeckMode],
        default=cfg.default_mode(),
    )
    practice.add_argument("--cap", type=int, default=cfg.default_session_cap())

    progress = sub.add_parser("progress", help="Show practice progress")
    progress.add_argument("--deck", "-d", type=str, help="Limit to one deck")

    return parser


def format_entry(entry: Entry) -> str:
    line = f"{entry.darija:<20} {entry.arabic:<15} {entry.english}"
    if entry.french:
        line += f" / {entry.french}"
    return line


def cmd_search(lexicon: Lexicon, args) -> int:
    results = lexicon.search(
        " ".join(args.query),
        word_limit=cfg.default_word_limit(),
        phrase_limit=cfg.default_phrase_limit(),
    )
    words, phrases = results.words, results.phrases

    print(f"Words ({len(words)}):")
    for entry in words:
        print(f"  {format_entry(entry)}")
    print(f"\nPhrases ({len(phrases)}):")
    for entry in phrases:
        print(f"  {format_entry(entry)}")
    return 0


def cmd_browse(lexicon: Lexicon, args) -> int:
    if args.show_phrases:
        if args.tag:
            raise ValueError("Phrases can only be browsed by category")
        entries = (
            lexicon.proverbs() if args.category == "proverbs"
            else lexicon.phrases_by_category(args.category)
        )
    elif args.category:
        entries = lexicon.words_by_category(args.category)
    else:
        entries = lexicon.words_by_tag(args.tag)

    for entry in entries:
        print(f"  {format_entry(entry)}")
    print(f"\n{len(entries)} entries")
    return 0


def cmd_categories(lexicon: Lexicon, args) -> int:
    meta = lexicon.metadata()
    print(f"Words: {meta['total_words']:,}  Phrases: {meta['total_phrases']:,}")

    print("\nWord categories:")
    for cat in lexicon.word_categories():
        print(f"  {cat.name:<25} {cat.count:>5}")
    print("\nPhrase categories:")
    for cat in lexicon.phrase_categories():
        print(f"  {cat.name:<25} {cat.count:>5}")
    return 0


def cmd_word_of_the_day(lexicon: Lexicon, args) -> int:
    entry = lexicon.word_of_the_day()
    if entry is None:
        print("No word of the day available.")
        return 0
    print(format_entry(entry))
    if entry.pronunciation:
        print(f"  [{entry.pronunciation}]")
    print(f"\n  {entry.cultural_note}")
    return 0


def cmd_practice(
    lexicon: Lexicon,
    args,
    input_fn: Callable[[str], str] = input,
) -> int:
    deck = get_deck(args.deck)
    mode = DeckMode(args.mode)
    store = JsonProgressStore(args.progress)
    session = PracticeSession(
        deck.select(lexicon),
        store,
        cap=args.cap,
        intervals=cfg.default_intervals(),
    )

    print("=" * 60)
    print(f"{deck.label} - {len(session.queue)} cards")
    print("=" * 60)

    while not session.finished:
        entry = session.current
        print(f"\n[{level_label(session.card_for(entry))}] {mode.prompt(entry)}")
        input_fn("  (enter to reveal) ")
        print(f"  -> {mode.reveal(entry)}")

        reply = ""
        while reply not in ("y", "n", "q"):
            reply = input_fn("  Did you know it? [y/n/q] ").strip().lower()
        if reply == "q":
            break
        session.answer(reply == "y")

    stats = session.stats
    print("\n" + "=" * 60)
    print(f"Correct: {stats.correct}  Incorrect: {stats.incorrect}  "
          f"Accuracy: {stats.accuracy:.0%}")
    print("=" * 60)
    return 0


def cmd_progress(lexicon: Lexicon, args) -> int:
    progress = JsonProgressStore(args.progress).load_all()
    decks = [get_deck(args.deck)] if args.deck else list(DECKS)

    for deck in decks:
        entries = deck.select(lexicon)
        if not entries:
            continue
        learned = learned_count(progress, entries)
        print(f"{deck.label:<25} {learned:>4}/{len(entries)} learned")
        if args.deck:
            for label, count in level_histogram(progress, entries).items():
                print(f"    {label:<10} {count:>4}")
    return 0


COMMANDS = {
    "search": cmd_search,
    "browse": cmd_browse,
    "categories": cmd_categories,
    "word-of-the-day": cmd_word_of_the_day,
    "practice": cmd_practice,
    "progress": cmd_progress,
}


def main(
    argv: Optional[list[str]] = None,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    words_path = args.words or cfg.default_words_path()
    phrases_path = args.phrases or cfg.default_phrases_path()
    if args.progress is None:
        args.progress = cfg.default_progress_path()

    try:
        lexicon, results = load_lexicon(words_path, phrases_path)
        for result in results:
            for error in result.errors:
                print(f"[{result.kind.value}s] skipped {error}", file=sys.stderr)

        if args.command == "practice":
            return cmd_practice(lexicon, args, input_fn)
        return COMMANDS[args.command](lexicon, args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())

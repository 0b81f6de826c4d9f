"""darija - Moroccan Arabic dictionary toolkit.

Search and flashcard practice over a Darija / Arabic / English / French
dictionary.

Core concepts:
    - Transliterations are spelled many ways; they normalize to one form
    - Searches rank exact, prefix and substring hits above fuzzy ones
    - Practice moves each card up or down a fixed ladder of intervals

Example:
    "chukran", "shokran", "shukran" → normalized "shukran"

Usage:
    from darija.ingest import load_lexicon
    from darija.practice import PracticeSession, JsonProgressStore, get_deck

    lexicon, _ = load_lexicon("data/words.json", "data/phrases.json")
    results = lexicon.search("shokran")

    deck = get_deck("greetings").select(lexicon)
    session = PracticeSession(deck, JsonProgressStore("progress.json"))
    session.answer(correct=False)
"""

__version__ = "0.1.0"

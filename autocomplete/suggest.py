from __future__ import annotations
from itertools import islice
from typing import Callable, Dict, Iterable, List

from autocomplete.trie import Index, default_suggestion

class Autocomplete:
    """
    Propose des suggestions par préfixe à partir d'un trie (Index).
    La suggestion stockée pour chaque mot vient de `suggestion_for`
    (par défaut : 'Suggestion for "<mot>"').
    """
    def __init__(self, index: Index | None = None, suggestion_for: Callable[[str], str] = default_suggestion):
        self.index = index if index is not None else Index()
        self.suggestion_for = suggestion_for

    def add_word(self, word: str) -> None:
        self.index.insert(word, self.suggestion_for(word))

    def add_words(self, words: Iterable[str]) -> int:
        n = 0
        for w in words:
            self.add_word(w)
            n += 1
        return n

    def suggest(self, prefix: str, top_k: int | None = None) -> List[str]:
        # pas de score : top_k coupe simplement l'ordre du parcours
        if top_k is None:
            return self.index.search(prefix)
        if top_k <= 0:
            return []
        return list(islice(self.index.iter_search(prefix), top_k))

    # une entrée par mot distinct, dans l'ordre de la requête
    def suggest_many(self, words: Iterable[str], top_k: int | None = None) -> Dict[str, List[str]]:
        out: Dict[str, List[str]] = {}
        for w in words:
            if w not in out:
                out[w] = self.suggest(w, top_k)
        return out

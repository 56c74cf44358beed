from __future__ import annotations
import logging
from typing import Callable, Dict, List

from tqdm import tqdm

from autocomplete.corpus import CorpusReader
from autocomplete.preprocess import TextPreprocessor
from autocomplete.suggest import Autocomplete
from autocomplete.trie import default_suggestion

logger = logging.getLogger(__name__)

DOCS_DIR = "data"
DEFAULT_TOP_K = None

class SuggestionEngine:
    """
    Relie la source de mots (TextPreprocessor / CorpusReader) au trie.
    On construit l'index une fois, ensuite on ne fait que des requêtes.
    """
    def __init__(self, preproc: TextPreprocessor | None = None,
                 suggestion_for: Callable[[str], str] = default_suggestion):
        self.preproc = preproc or TextPreprocessor()
        self.autocomplete = Autocomplete(suggestion_for=suggestion_for)

    @property
    def index(self):
        return self.autocomplete.index

    def build_from_text(self, text: str) -> int:
        n = self.autocomplete.add_words(self.preproc.process(text))
        logger.info("Index construit : %d mots, %d noeuds", n, self.index.node_count)
        return n

    def build_from_docs(self, docs_dir: str = DOCS_DIR, show_progress: bool = True) -> int:
        cr = CorpusReader(docs_dir)
        n = 0
        for doc_id, text in tqdm(cr.iter_docs(), total=len(cr), desc="Indexation", disable=not show_progress):
            added = self.autocomplete.add_words(self.preproc.process(text))
            logger.debug("%s : %d mots", doc_id, added)
            n += added
        logger.info("Index construit depuis %s : %d documents, %d mots, %d noeuds",
                    docs_dir, len(cr), n, self.index.node_count)
        return n

    def suggest(self, prefix: str, top_k: int | None = DEFAULT_TOP_K) -> List[str]:
        return self.autocomplete.suggest(prefix, top_k)

    def suggest_selection(self, selection: str, top_k: int | None = DEFAULT_TOP_K) -> Dict[str, List[str]]:
        """
        Découpe la sélection avec le même prétraitement que l'index
        et renvoie {mot: suggestions}. Sélection vide -> {}.
        """
        words = [w for w in self.preproc.process(selection) if w]
        return self.autocomplete.suggest_many(words, top_k)

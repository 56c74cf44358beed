#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Autocomplétion par préfixe sur un texte ou un dossier de documents.

Exemples:
  python3 main.py --text data/article.txt ca do
  python3 main.py --docs_dir data --top_k 5
  python3 main.py --docs_dir data --strip_accents -v
"""
from __future__ import annotations
import argparse
import logging
import sys

from autocomplete.engine import SuggestionEngine
from autocomplete.preprocess import TextPreprocessor


# ----------------------------- CLI -----------------------------

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Suggestions par préfixe (trie).")

    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", type=str, help="Fichier texte dont on indexe les mots.")
    src.add_argument("--docs_dir", type=str, help="Dossier contenant les .txt à indexer.")

    p.add_argument("--top_k", type=int, default=None, help="Nombre max de suggestions par mot.")
    p.add_argument("--strip_accents", action="store_true", help="Retire les accents (é -> e).")
    p.add_argument("--no_progress", action="store_true", help="Pas de barre de progression.")
    p.add_argument("--verbose", "-v", action="store_true", help="Logs détaillés.")
    p.add_argument("selection", nargs="*", help="Mots à compléter (sinon mode interactif).")

    return p.parse_args(argv)


# ------------------------ Affichage ------------------------

def show_suggestions(engine: SuggestionEngine, selection: str, top_k: int | None) -> None:
    results = engine.suggest_selection(selection, top_k=top_k)
    # c'est l'appelant qui décide quoi afficher si rien n'est trouvé
    if not results:
        print("Aucune sélection.")
        return
    for word, suggestions in results.items():
        if not suggestions:
            print(f"Aucune suggestion trouvée pour « {word} ».")
            continue
        print(f"{word} :")
        for i, s in enumerate(suggestions, 1):
            print(f"  {i:2d}. {s}")


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
    )

    engine = SuggestionEngine(TextPreprocessor(strip_accents=args.strip_accents))
    try:
        if args.text is not None:
            with open(args.text, encoding="utf-8", errors="ignore") as f:
                engine.build_from_text(f.read())
        else:
            engine.build_from_docs(args.docs_dir, show_progress=not args.no_progress)
    except OSError as e:
        print(f"Erreur : {e}", file=sys.stderr)
        return 1

    if args.selection:
        show_suggestions(engine, " ".join(args.selection), args.top_k)
        return 0

    while True:
        try:
            q = input("\nPréfixe (ENTER pour quitter) > ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not q:
            break
        show_suggestions(engine, q, args.top_k)
    return 0


if __name__ == "__main__":
    sys.exit(main())

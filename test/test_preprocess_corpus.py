import pytest

from autocomplete.corpus import CorpusReader
from autocomplete.preprocess import TextPreprocessor


def test_tokenize_splits_on_non_word_runs():
    tp = TextPreprocessor()
    assert tp.process("Le chat, le chien... et LE chat!") == ["le", "chat", "le", "chien", "et", "le", "chat"]


def test_keep_empty_tokens():
    tp = TextPreprocessor(keep_empty=True)
    # séparateurs au début et à la fin -> tokens vides
    assert tp.process("  bonjour monde ! ") == ["", "bonjour", "monde", ""]


def test_unique_keeps_first_occurrence():
    tp = TextPreprocessor(unique=True)
    assert tp.process("b a b c a") == ["b", "a", "c"]


def test_accents_kept_by_default():
    tp = TextPreprocessor()
    assert tp.process("Élève été") == ["élève", "été"]


def test_strip_accents():
    tp = TextPreprocessor(strip_accents=True)
    assert tp.process("Élève été") == ["eleve", "ete"]


def test_no_lowercase():
    tp = TextPreprocessor(lowercase=False)
    assert tp.process("Paris Lyon") == ["Paris", "Lyon"]


def test_corpus_reader(tmp_path):
    (tmp_path / "b.txt").write_text("deux", encoding="utf-8")
    (tmp_path / "a.txt").write_text("un", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignoré", encoding="utf-8")
    cr = CorpusReader(str(tmp_path))
    assert len(cr) == 2
    assert cr.list_files() == ["a.txt", "b.txt"]
    assert cr.list_files(1) == ["a.txt"]
    assert cr.read("b.txt") == "deux"
    assert list(cr.iter_docs()) == [("a.txt", "un"), ("b.txt", "deux")]


def test_corpus_reader_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        CorpusReader(str(tmp_path / "absent"))


def test_corpus_reader_not_a_dir(tmp_path):
    f = tmp_path / "fichier.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        CorpusReader(str(f))


def test_corpus_reader_skips_directories(tmp_path):
    (tmp_path / "a.txt").write_text("un", encoding="utf-8")
    (tmp_path / "archive.txt").mkdir()
    cr = CorpusReader(str(tmp_path))
    assert cr.list_files() == ["a.txt"]
    assert list(cr.iter_docs()) == [("a.txt", "un")]

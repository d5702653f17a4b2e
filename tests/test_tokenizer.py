import tempfile
import unittest
from pathlib import Path

from entity_resolution.tokenizer import load_stopwords, tokenize

QUICK_BROWN_FOX = "A quick brown fox jumps over the lazy dog."


class TokenizeTests(unittest.TestCase):
    def test_quick_brown_fox(self):
        self.assertEqual(
            tokenize(QUICK_BROWN_FOX),
            ["a", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog"],
        )

    def test_underscore_is_a_word_character(self):
        self.assertEqual(tokenize("one_ one_ two!"), ["one_", "one_", "two"])
        self.assertEqual(tokenize("_foo_"), ["_foo_"])

    def test_punctuation_splits_and_digits_stay(self):
        self.assertEqual(tokenize("Hello-World, 42!"), ["hello", "world", "42"])

    def test_repetitions_and_order_preserved(self):
        self.assertEqual(tokenize("b a b A"), ["b", "a", "b", "a"])

    def test_unicode_letters(self):
        self.assertEqual(tokenize("Café Crème"), ["café", "crème"])

    def test_no_word_characters(self):
        self.assertEqual(tokenize("!!! ,,, ..."), [])
        self.assertEqual(tokenize(""), [])

    def test_non_string_is_empty(self):
        self.assertEqual(tokenize(None), [])
        self.assertEqual(tokenize(float("nan")), [])

    def test_deterministic(self):
        self.assertEqual(tokenize(QUICK_BROWN_FOX), tokenize(QUICK_BROWN_FOX))

    def test_stopwords_removed_case_insensitively(self):
        stopwords = {"a", "the", "over"}
        tokens = tokenize("The quick fox jumps OVER a dog", stopwords)
        self.assertEqual(tokens, ["quick", "fox", "jumps", "dog"])
        for word in stopwords:
            self.assertNotIn(word, tokens)

    def test_empty_stopword_set_keeps_everything(self):
        self.assertEqual(tokenize("the dog", set()), ["the", "dog"])


class LoadStopwordsTests(unittest.TestCase):
    def test_load(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "stopwords.txt"
            path.write_text("a\nThe\n\n  and  \n", encoding="utf-8")
            self.assertEqual(load_stopwords(path), frozenset({"a", "the", "and"}))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_stopwords(Path("/nonexistent/stopwords.txt"))


if __name__ == "__main__":
    unittest.main()

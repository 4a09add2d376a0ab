import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.vocabulary import get_default_vocabulary, load_vocabulary  # noqa: E402


class VocabularyTests(unittest.TestCase):
    def test_default_vocabulary_is_shared_and_lower_cased(self):
        vocabulary = get_default_vocabulary()
        self.assertIs(vocabulary, get_default_vocabulary())
        self.assertIsInstance(vocabulary.skills, frozenset)
        self.assertTrue(vocabulary.is_skill("node.js"))
        self.assertTrue(vocabulary.is_skill("machine learning"))
        self.assertTrue(vocabulary.is_stop_word("the"))
        self.assertTrue(all(term == term.lower() for term in vocabulary.skills))

    def test_custom_files_are_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            stop_path = Path(tmp) / "stop.json"
            skill_path = Path(tmp) / "skills.json"
            stop_path.write_text(json.dumps(["The", " AND "]), encoding="utf-8")
            skill_path.write_text(json.dumps(["Machine   Learning", "", "Go"]), encoding="utf-8")

            vocabulary = load_vocabulary(stop_words_path=stop_path, skills_path=skill_path)

        self.assertEqual(vocabulary.stop_words, frozenset({"the", "and"}))
        self.assertEqual(vocabulary.skills, frozenset({"machine learning", "go"}))

    def test_non_list_file_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            bad_path = Path(tmp) / "bad.json"
            bad_path.write_text(json.dumps({"python": 1}), encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_vocabulary(stop_words_path=bad_path)


if __name__ == "__main__":
    unittest.main()

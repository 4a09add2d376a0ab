import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import resume_insight.main  # noqa: F401
from resume_insight.core.scoring import get_scoring_value


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("ats_heuristic.max_score"), 95)


if __name__ == "__main__":
    unittest.main()

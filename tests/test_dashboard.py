import unittest
from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app" / "main.py")


class FailingSource:
    name = "failing"

    def load(self):
        raise RuntimeError("down")


class MalformedSource:
    name = "malformed"

    def load(self):
        return [{"id": "1", "league": "italy-serie-a", "home": {"name": "Team italy_1"}}]


class TestDashboard(unittest.TestCase):

    def setUp(self):
        self.at = AppTest.from_file(APP, default_timeout=30)
        self.at.run()

    def test_loads_matches(self):
        self.assertFalse(self.at.exception)
        self.assertEqual(len(self.at.session_state["matches"]), 36)
        self.assertIn("ScoutPredict", self.at.title[0].value)
        self.assertIn("**Matches found: 6**", [md.value for md in self.at.markdown])

    def test_league_and_search_filters(self):
        self.at.selectbox(key="league_filter").set_value("spain-laliga").run()
        self.at.text_input(key="team_query").input("spain_3").run()
        self.assertFalse(self.at.exception)
        self.assertIn("**Matches found: 1**", [md.value for md in self.at.markdown])

    def test_save_to_history(self):
        self.at.button(key="save_1").click().run()
        self.assertFalse(self.at.exception)
        history = self.at.session_state["history"]
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0]["match_id"], "1")

    def test_update_data_replaces_matches(self):
        before = self.at.session_state["matches"]
        self.at.button(key="update_data").click().run()
        self.assertFalse(self.at.exception)
        self.assertNotEqual(self.at.session_state["matches"], before)

    def test_failed_refresh_keeps_previous_matches(self):
        before = self.at.session_state["matches"]
        self.at.session_state["source"] = FailingSource()
        with self.assertLogs("scoutpredict.dashboard", level="ERROR") as logs:
            self.at.button(key="update_data").click().run()
        self.assertFalse(self.at.exception)
        self.assertTrue(self.at.error)
        self.assertIn("Could not load matches", self.at.error[0].value)
        self.assertIn("failing: down", self.at.error[0].value)
        self.assertIs(self.at.session_state["matches"], before)
        self.assertTrue(any("Failed to load matches" in line for line in logs.output))

    def test_malformed_rows_shown_as_error(self):
        before = self.at.session_state["matches"]
        self.at.session_state["source"] = MalformedSource()
        self.at.button(key="update_data").click().run()
        self.assertFalse(self.at.exception)
        self.assertTrue(self.at.error)
        self.assertIs(self.at.session_state["matches"], before)


if __name__ == "__main__":
    unittest.main()

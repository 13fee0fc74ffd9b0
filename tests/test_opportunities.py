import unittest

from betting.opportunities import attach_predictions, pick_best_opportunity, predict_match
from models.state import MarketProbabilities, Opportunity, TeamStatistics


def probs(corner35, corner45, cards15):
    return MarketProbabilities(corner35=corner35, corner45=corner45, cards15=cards15)


class TestPickBestOpportunity(unittest.TestCase):

    def test_highest_probability_wins(self):
        best = pick_best_opportunity(probs(70, 60, 70), probs(70, 80, 50))
        self.assertEqual(best, Opportunity(team="away", market="corner45", probability=80))

    def test_tie_across_teams_goes_to_home(self):
        best = pick_best_opportunity(probs(80, 10, 10), probs(80, 10, 10))
        self.assertEqual(best, Opportunity(team="home", market="corner35", probability=80))

    def test_tie_within_team_follows_market_order(self):
        best = pick_best_opportunity(probs(20, 10, 10), probs(30, 55, 55))
        self.assertEqual((best.team, best.market), ("away", "corner45"))

    def test_home_cards_beats_tied_away_corners(self):
        best = pick_best_opportunity(probs(40, 30, 66), probs(66, 66, 66))
        self.assertEqual((best.team, best.market, best.probability), ("home", "cards15", 66))

    def test_all_equal_returns_first_candidate(self):
        best = pick_best_opportunity(probs(50, 50, 50), probs(50, 50, 50))
        self.assertEqual((best.team, best.market), ("home", "corner35"))

    def test_label(self):
        best = pick_best_opportunity(probs(10, 10, 90), probs(10, 10, 10))
        self.assertEqual(best.label, "Over 1.5 Cards")
        self.assertEqual(best.as_dict()["label"], "Over 1.5 Cards")


class TestPredictMatch(unittest.TestCase):

    def setUp(self):
        self.match = {
            "id": "1",
            "league": "italy-serie-a",
            "date": "2026-10-17T15:00:00+00:00",
            "home": {"name": "Team italy_1", "stats": TeamStatistics(3.5, 3.5, 1.5)},
            "away": {"name": "Team italy_2", "stats": TeamStatistics(6.5, 2.0, 2.2)},
        }

    def test_predictions_attached(self):
        result = predict_match(self.match)
        preds = result["predictions"]
        self.assertEqual(preds["home"], probs(50, 28, 47))
        self.assertEqual(preds["away"], probs(98, 87, 70))
        self.assertEqual(preds["suggestion"], Opportunity("away", "corner35", 98))

    def test_input_not_mutated(self):
        predict_match(self.match)
        self.assertNotIn("predictions", self.match)

    def test_attach_predictions_keeps_order(self):
        other = {**self.match, "id": "2"}
        result = attach_predictions([self.match, other])
        self.assertEqual([m["id"] for m in result], ["1", "2"])
        self.assertTrue(all("predictions" in m for m in result))


if __name__ == "__main__":
    unittest.main()

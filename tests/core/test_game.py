import unittest

from qgames.game import Game


class Test_Game(unittest.TestCase):
    def setUp(self):
        self.game = Game("game_01")

    def test_new_game(self):
        self.assertEqual("game_01", self.game.key)
        self.assertDictEqual(
            {"total_kills": 0, "players": [], "kills": {}, "kills_by_means": {}},
            self.game.to_dict(),
        )

    def test_addPlayer(self):
        self.assertTrue(self.game.addPlayer("Mocinha"))
        self.assertTrue(self.game.addPlayer("Isgalamido"))
        self.assertFalse(self.game.addPlayer("Mocinha"))
        # first seen order
        self.assertListEqual(["Mocinha", "Isgalamido"], self.game.players)

    def test_addKill(self):
        self.game.addKill("MOD_ROCKET")
        self.game.addKill("MOD_RAILGUN")
        self.game.addKill("MOD_ROCKET")
        self.assertEqual(3, self.game.totalKills)
        self.assertDictEqual({"MOD_RAILGUN": 1, "MOD_ROCKET": 2}, self.game.killsByMeans)
        self.assertDictEqual({}, self.game.kills)

    def test_creditKill(self):
        self.assertEqual(1, self.game.creditKill("Zeh"))
        self.assertEqual(2, self.game.creditKill("Zeh"))
        self.assertEqual(-1, self.game.creditKill("Mal", -1))
        self.assertDictEqual({"Mal": -1, "Zeh": 2}, self.game.kills)

    def test_creditKill_back_to_zero(self):
        self.game.creditKill("Zeh", -1)
        self.assertEqual(0, self.game.creditKill("Zeh", 1))
        self.assertNotIn("Zeh", self.game.kills)

    def test_to_dict_sorts_maps(self):
        self.game.creditKill("Zeh")
        self.game.creditKill("Assasinu Credi")
        self.game.addKill("MOD_SHOTGUN")
        self.game.addKill("MOD_BFG")
        data = self.game.to_dict()
        self.assertListEqual(["Assasinu Credi", "Zeh"], list(data["kills"]))
        self.assertListEqual(["MOD_BFG", "MOD_SHOTGUN"], list(data["kills_by_means"]))

    def test_from_dict(self):
        data = {
            "total_kills": 2,
            "players": ["Zeh", "Mal"],
            "kills": {"Zeh": 1, "Mal": 0},
            "kills_by_means": {"MOD_RAILGUN": 2},
        }
        game = Game.from_dict("game_07", data)
        self.assertEqual("game_07", game.key)
        self.assertEqual(2, game.totalKills)
        self.assertListEqual(["Zeh", "Mal"], game.players)
        self.assertDictEqual({"Zeh": 1}, game.kills)
        self.assertDictEqual({"MOD_RAILGUN": 2}, game.killsByMeans)

    def test_equality(self):
        other = Game("game_02")
        self.assertEqual(self.game, other)
        other.addPlayer("Zeh")
        self.assertNotEqual(self.game, other)
        self.assertNotEqual(self.game, "game_01")


if __name__ == "__main__":
    unittest.main()

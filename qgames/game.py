__version__ = "1.2"


class Game:
    """
    Statistics of one match, from an InitGame line to the next one.
    """

    # set from the InitGame info string, never serialized
    mapName = None
    gameType = None
    fragLimit = None
    timeLimit = None

    def __init__(self, key):
        """
        Object constructor.
        :param key: The game key (game_01, game_02, ...)
        """
        self.key = key
        self.totalKills = 0
        self.players = []
        self.kills = {}
        self.killsByMeans = {}

    def __repr__(self):
        return "Game<%s>(total_kills=%s, players=%r)" % (
            self.key,
            self.totalKills,
            self.players,
        )

    def __eq__(self, other):
        if not isinstance(other, Game):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def addPlayer(self, name):
        """
        Add a player to the game unless already known.
        :param name: The player name
        :return: True if the player was added
        """
        if name in self.players:
            return False
        self.players.append(name)
        return True

    def addKill(self, means):
        """
        Count a kill and the means of death which caused it.
        :param means: The means of death (MOD_ROCKET, MOD_FALLING, ...)
        """
        self.totalKills += 1
        self.killsByMeans[means] = self.killsByMeans.get(means, 0) + 1

    def creditKill(self, player, delta=1):
        """
        Change the net kill score of a player.
        A score going back to zero is removed from the kills mapping.
        :param player: The player name
        :param delta: The score change (+1 for a kill, -1 for a world kill)
        :return: The new score of the player
        """
        score = self.kills.get(player, 0) + delta
        if score:
            self.kills[player] = score
        else:
            self.kills.pop(player, None)
        return score

    def to_dict(self):
        return {
            "total_kills": self.totalKills,
            "players": list(self.players),
            "kills": dict(sorted(self.kills.items())),
            "kills_by_means": dict(sorted(self.killsByMeans.items())),
        }

    @classmethod
    def from_dict(cls, key, data):
        """
        Build a Game out of its serialized form.
        :param key: The game key
        :param data: A dict as returned by to_dict()
        """
        game = cls(key)
        game.totalKills = int(data["total_kills"])
        game.players = list(data["players"])
        game.kills = {k: int(v) for k, v in data["kills"].items() if int(v)}
        game.killsByMeans = {k: int(v) for k, v in data["kills_by_means"].items()}
        return game

import enum
import logging
import re
from collections import Counter, OrderedDict

import qgames
import qgames.output
from qgames.game import Game

__version__ = "1.6.1"


class ParserState(enum.Enum):
    NORMAL = "normal"
    # the current game saw a malformed line: its record is dropped and the
    # game's remaining lines are ignored until the next InitGame
    AWAITING_RECOVERY = "awaiting recovery"


class LogParser:
    """
    Turn the lines of a Quake 3 Arena server log into per game statistics.

    A parser instance holds the state of one parse run: build a new one for
    every log file.
    """

    gameKeyFormat = "game_%02d"
    encoding = None  # None means the platform default
    scoreSelfKills = True

    # checked in this order, the first marker found in a line wins
    _markers = (
        (qgames.MARKER_INITGAME, "initgame"),
        (qgames.MARKER_USERINFO, "clientuserinfochanged"),
        (qgames.MARKER_KILL, "kill"),
    )

    _lineFormats = {
        # 20:34 ClientUserinfoChanged: 2 n\Isgalamido\t\0\model\xian/default\hmodel\xian/default\g_redteam\\...
        "clientuserinfochanged": re.compile(
            r"ClientUserinfoChanged: "
            r"(?P<cid>[0-9]+) "
            r"n\\(?P<name>[^\\]+)\\"
        ),
        # 22:06 Kill: 2 3 7: Isgalamido killed Mocinha by MOD_ROCKET_SPLASH
        # 21:42 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
        "kill": re.compile(
            r"Kill: "
            r"(?P<acid>[0-9]+) "
            r"(?P<cid>[0-9]+) "
            r"(?P<aweap>[0-9]+): "
            r"(?P<killer>.+?) killed "
            r"(?P<victim>.+?) by "
            r"(?P<means>[^ ]+)"
        ),
    }

    # actions handled in each state, anything else is ignored
    _transitions = {
        (ParserState.NORMAL, "initgame"): "OnInitgame",
        (ParserState.NORMAL, "clientuserinfochanged"): "OnClientuserinfochanged",
        (ParserState.NORMAL, "kill"): "OnKill",
        (ParserState.AWAITING_RECOVERY, "initgame"): "OnInitgame",
    }

    def __init__(self, scoreSelfKills=None, encoding=None, log=None):
        """
        Object constructor.
        :param scoreSelfKills: Whether a player killing himself scores a kill
        :param encoding: The encoding used to read log files
        :param log: The logger instance, defaults to the qgames logger
        """
        if scoreSelfKills is not None:
            self.scoreSelfKills = scoreSelfKills
        if encoding:
            self.encoding = encoding
        self.log = log or logging.getLogger(qgames.output.LOGGER_NAME)
        self.reset()

    @classmethod
    def fromConfig(cls, config, log=None):
        """
        Build a parser using the settings of the main configuration.
        :param config: The MainConfig instance
        :param log: The logger instance
        """
        return cls(
            scoreSelfKills=config.get_score_self_kills(),
            encoding=config.get_encoding(),
            log=log,
        )

    def reset(self):
        """
        Forget everything about a previous parse run.
        """
        self.line = None
        self.gameCounter = 0
        self.state = ParserState.NORMAL
        self.games = OrderedDict()
        self.lineCounter = Counter()

    @property
    def errorState(self):
        return self.state is ParserState.AWAITING_RECOVERY

    ####################################################################################################################
    #                                                                                                                  #
    #   PARSING                                                                                                        #
    #                                                                                                                  #
    ####################################################################################################################

    def parseFile(self, filename):
        """
        Parse a game log file.
        :param filename: The path of the log file
        :raise OSError: If the file cannot be opened or read
        :return: An ordered dict game key -> Game
        """
        self.bot("Parsing game log: %s", filename)
        with open(filename, "r", encoding=self.encoding) as f:
            return self.parse(f)

    def parse(self, lines):
        """
        Parse a sequence of log lines.
        Errors raised while reading the lines are propagated.
        :param lines: An iterable of log lines
        :return: An ordered dict game key -> Game
        """
        self.reset()
        for line in lines:
            self.parseLine(line.rstrip("\r\n"))

        # a malformed line may be the last one of the log
        self.checkErrorState()

        self.dumpLineCounter()
        self.bot("Parsed %s games, %s kept", self.gameCounter, len(self.games))
        return self.games

    def parseLine(self, line):
        """
        Parse a single log line updating the current game.
        :param line: The log line to be parsed
        """
        self.line = line
        self.checkErrorState()

        if not (action := self.getLineAction(line)):
            return

        self.lineCounter[action] += 1
        if not (func_name := self._transitions.get((self.state, action))):
            self.verbose2("Ignoring %s line of discarded game %s: %s", action, self.gameKey(), line)
            return

        self.state = getattr(self, func_name)(action, line)

    def getLineAction(self, line):
        """
        Return the action of the first marker found in the line, None if none is found.
        :param line: The log line
        """
        for marker, action in self._markers:
            if marker in line:
                return action
        return None

    def gameKey(self):
        """
        Return the key of the current game.
        """
        return self.gameKeyFormat % self.gameCounter

    def currentGame(self):
        """
        Return the current Game, None if there is no such record.
        """
        return self.games.get(self.gameKey())

    def getOrCreateGame(self):
        """
        Return the current Game creating an empty one if needed.
        """
        key = self.gameKey()
        if (game := self.games.get(key)) is None:
            game = self.games[key] = Game(key)
        return game

    def checkErrorState(self):
        """
        Drop the record of the current game if a malformed line was found in it.
        The parser stays in error state until the next InitGame.
        """
        if self.errorState and self.gameKey() in self.games:
            del self.games[self.gameKey()]
            self.lineCounter["discarded"] += 1
            self.info("Discarded %s", self.gameKey())

    def malformedLine(self, action):
        self.warning(
            "Malformed %s line in %s, the game will be discarded: %r",
            action,
            self.gameKey(),
            self.line,
        )
        return ParserState.AWAITING_RECOVERY

    def dumpLineCounter(self):
        lines = ["Line Marker Counts"]
        for _, action in self._markers:
            lines.append(f"{self.lineCounter[action]:10,}: {action}")
        lines.append(f"Games Discarded: {self.lineCounter['discarded']}")
        self.info("\n".join(lines))

    @staticmethod
    def parseInfoFields(info):
        """Parses the back-slash delimited list of fields and returns a dict."""
        # \sv_floodProtect\1\sv_maxPing\0\sv_hostname\Code Miner Server\g_gametype\0\...\mapname\q3dm17
        parts = info.lstrip(" \\").split("\\")
        return dict(zip(parts[0::2], parts[1::2]))

    ####################################################################################################################
    #                                                                                                                  #
    #   EVENT HANDLERS                                                                                                 #
    #                                                                                                                  #
    ####################################################################################################################

    def OnInitgame(self, action, line):
        # 0:00 InitGame: \sv_floodProtect\1\sv_maxPing\0\...\mapname\q3dm17\gamename\baseq3\g_needpass\0
        self.gameCounter += 1
        if self.gameCounter == 100:
            self.warning("More than 99 games found: game keys are now 3 digits wide")

        game = self.getOrCreateGame()
        info = self.parseInfoFields(line.split(qgames.MARKER_INITGAME, 1)[1])
        game.mapName = info.get("mapname")
        game.gameType = info.get("g_gametype")
        game.fragLimit = info.get("fraglimit")
        game.timeLimit = info.get("timelimit")
        self.info(
            "Game start: %s map [%s], game_type [%s], fraglimit [%s], timelimit [%s]",
            game.key,
            game.mapName,
            game.gameType,
            game.fragLimit,
            game.timeLimit,
        )
        return ParserState.NORMAL

    def OnClientuserinfochanged(self, action, line):
        # 2 n\Isgalamido\t\0\model\uriel/zael\hmodel\uriel/zael\g_redteam\\g_blueteam\\c1\5\c2\5\hc\100\w\0\l\0
        if not (match := self._lineFormats[action].search(line)):
            return self.malformedLine(action)

        if not (game := self.currentGame()):
            self.warning("Player info outside of any game: %r", line)
            return self.state

        if game.addPlayer(match["name"]):
            self.verbose("%s: player %s joined (slot %s)", game.key, match["name"], match["cid"])
        return self.state

    def OnKill(self, action, line):
        # 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
        if not (match := self._lineFormats[action].search(line)):
            return self.malformedLine(action)

        if not (game := self.currentGame()):
            self.warning("Kill outside of any game: %r", line)
            return self.state

        killer, victim, means = match["killer"], match["victim"], match["means"]
        game.addKill(means)

        if killer == qgames.WORLD:
            score = game.creditKill(victim, -1)
            self.verbose("%s: %s killed by the world (%s), score %s", game.key, victim, means, score)
        elif killer == victim and not self.scoreSelfKills:
            self.verbose("%s: %s killed himself (%s), not scored", game.key, killer, means)
        else:
            score = game.creditKill(killer, 1)
            self.verbose("%s: %s killed %s (%s), score %s", game.key, killer, victim, means, score)
        return self.state

    ####################################################################################################################
    #                                                                                                                  #
    #   LOGGING                                                                                                        #
    #                                                                                                                  #
    ####################################################################################################################

    def bot(self, msg, *args, **kwargs):
        """
        Log a BOT message.
        """
        self.log.bot(msg, *args, **kwargs)

    def verbose(self, msg, *args, **kwargs):
        """
        Log a VERBOSE message.
        """
        self.log.verbose(msg, *args, **kwargs)

    def verbose2(self, msg, *args, **kwargs):
        """
        Log a VERBOSE2 message.
        """
        self.log.verbose2(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        """
        Log a WARNING message.
        """
        self.log.warning(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        """
        Log an INFO message.
        """
        self.log.info(msg, *args, **kwargs)

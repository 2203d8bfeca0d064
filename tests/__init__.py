import logging
import os
import sys
import unittest

from mockito import unstub

import qgames.output  # unused but we need it to add the `bot` log level
from qgames.config import MainConfig, load
from qgames.parser import LogParser

logging.raiseExceptions = (
    False  # get rid of 'No handlers could be found for logger qgames' message
)
log = logging.getLogger(qgames.output.LOGGER_NAME)
log.setLevel(logging.WARNING)

RESOURCES_DIR = os.path.join(os.path.dirname(__file__), "resources")
SAMPLE_LOG = os.path.join(RESOURCES_DIR, "qgames.log")

INITGAME_LINE = (
    r"  0:00 InitGame: \sv_floodProtect\1\sv_maxPing\0\sv_minPing\0\sv_maxRate\10000\sv_minRate\0"
    r"\sv_hostname\Code Miner Server\g_gametype\0\sv_privateClients\2\sv_maxclients\16"
    r"\sv_allowDownload\0\dmflags\0\fraglimit\20\timelimit\15\g_maxGameClients\0\capturelimit\8"
    r"\version\ioq3 1.36 linux-x86_64 Apr 12 2009\protocol\68\mapname\q3dm17\gamename\baseq3\g_needpass\0"
)


def userinfo_line(name, cid=2):
    return (
        r" 20:38 ClientUserinfoChanged: %s n\%s\t\0\model\uriel/zael\hmodel\uriel/zael"
        r"\g_redteam\\g_blueteam\\c1\5\c2\5\hc\100\w\0\l\0\tt\0\tl\0" % (cid, name)
    )


def kill_line(killer, victim, means, acid=3, cid=2, aweap=6):
    return "  3:13 Kill: %s %s %s: %s killed %s by %s" % (acid, cid, aweap, killer, victim, means)


def flush_console_streams():
    sys.stderr.flush()
    sys.stdout.flush()


class QGamesTestCase(unittest.TestCase):
    def setUp(self):
        flush_console_streams()
        self.conf = MainConfig(load())
        self.parser = LogParser.fromConfig(self.conf, log=log)

    def tearDown(self):
        flush_console_streams()
        unstub()

    def parseLines(self, *lines):
        """
        Feed lines to the parser one at a time, without the end of input flush.
        """
        for line in lines:
            self.parser.parseLine(line)
        return self.parser.games

    def assertGame(self, key, total_kills, players, kills, kills_by_means):
        self.assertIn(key, self.parser.games)
        self.assertDictEqual(
            {
                "total_kills": total_kills,
                "players": players,
                "kills": kills,
                "kills_by_means": kills_by_means,
            },
            self.parser.games[key].to_dict(),
        )

__version__ = "1.2.0"

version = f"qgames v{__version__}"

# killer name used by the game for environmental deaths
WORLD = "<world>"

# markers of the log lines the parser cares about
MARKER_INITGAME = "InitGame:"
MARKER_USERINFO = "ClientUserinfoChanged:"
MARKER_KILL = "Kill:"

DEFAULT_GAME_LOG = "qgames.log"
DEFAULT_OUTPUT = "qgames.json"


def getVersionString():
    """
    Return the qgames version as a string.
    """
    return version

import json
import sys
from collections import OrderedDict

from qgames.game import Game

__version__ = "1.1"


def dumps(games, indent=None):
    """
    Serialize the parse result to JSON.
    :param games: A dict game key -> Game
    :param indent: The JSON indentation, None for compact output
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        OrderedDict((key, game.to_dict()) for key, game in games.items()),
        indent=indent,
        separators=separators,
        ensure_ascii=False,
    )


def loads(text):
    """
    Rebuild a parse result out of its JSON form.
    :param text: The JSON document produced by dumps()
    :raise ValueError: If the document is not valid JSON
    """
    return OrderedDict(
        (key, Game.from_dict(key, data)) for key, data in json.loads(text).items()
    )


def write(games, filename, indent=None, encoding="UTF-8"):
    """
    Write the JSON report to a file, or to stdout when filename is '-'.
    """
    text = dumps(games, indent=indent)
    if filename == "-":
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return
    with open(filename, "w", encoding=encoding) as f:
        f.write(text)
        f.write("\n")

import argparse

import qgames
import qgames.config
import qgames.functions
import qgames.output
import qgames.report
from qgames.parser import LogParser

__version__ = '1.3'


def start(mainconfig, options):
    """
    Parse the game log and write the report.
    :param mainconfig: The configuration file instance qgames.config.MainConfig
    :param options: command line options
    """
    log = qgames.output.getInstance(
        mainconfig.get_logfile(),
        mainconfig.get_log_level(),
        mainconfig.get_log_size(),
        mainconfig.get_log2console(),
    )

    log.bot('Starting %s', qgames.getVersionString())
    if mainconfig.fileName:
        log.bot('Loading config   : %s', qgames.functions.getShortPath(mainconfig.fileName))

    game_log = options.input or mainconfig.get_game_log()
    output = options.output or mainconfig.get_output()

    parser = LogParser.fromConfig(mainconfig, log=log)
    try:
        games = parser.parseFile(game_log)
    except (OSError, UnicodeDecodeError) as err:
        log.critical('Could not read game log %s: %s', game_log, err)

    try:
        qgames.report.write(games, output, indent=mainconfig.get_indent())
    except OSError as err:
        log.critical('Could not write report %s: %s', output, err)

    if output != '-':
        log.bot('Report written   : %s', output)
    return games


def run(options):
    """
    Load the configuration and run qgames.
    :param options: command line options
    """
    try:
        main_config = qgames.config.get_main_config(options.config)
    except qgames.config.ConfigFileNotValid as err:
        qgames.functions.console_exit(f'ERROR: invalid configuration file: {err}')

    if analysis := main_config.analyze():
        qgames.functions.console_exit(
            'ERROR: invalid configuration file specified:\n >>> ' +
            '\n >>> '.join(analysis)
        )

    return start(main_config, options)


def main(argv=None):
    p = argparse.ArgumentParser(
        prog='qgames',
        description='Summarize the matches of a Quake 3 Arena server log as JSON.'
    )
    p.add_argument(
        'input',
        nargs='?',
        default=None,
        metavar='qgames.log',
        help=f'Game log to parse (default: {qgames.DEFAULT_GAME_LOG})'
    )
    p.add_argument(
        'output',
        nargs='?',
        default=None,
        metavar='qgames.json',
        help=f'Report file to write, - for stdout (default: {qgames.DEFAULT_OUTPUT})'
    )
    p.add_argument(
        '-c',
        '--config',
        dest='config',
        default=None,
        metavar='qgames.ini',
        help='qgames config file. Example: -c qgames.ini'
    )
    p.add_argument(
        '-v',
        '--version',
        action='version',
        version=qgames.getVersionString(),
        help='Show qgames version and exit'
    )

    options = p.parse_args(argv)
    run(options)


if __name__ == '__main__':
    main()

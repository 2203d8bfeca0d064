import logging
import sys
from logging import CRITICAL, ERROR, INFO, WARNING, DEBUG
from logging import handlers

__version__ = '1.3'

LOGGER_NAME = 'qgames'

BOT = 21
VERBOSE = 9
VERBOSE2 = 8

logging.addLevelName(CRITICAL, 'CRITICAL')
logging.addLevelName(ERROR, 'ERROR   ')
logging.addLevelName(INFO, 'INFO    ')
logging.addLevelName(WARNING, 'WARNING ')
logging.addLevelName(DEBUG, 'DEBUG   ')
logging.addLevelName(BOT, 'BOT     ')
logging.addLevelName(VERBOSE, 'VERBOSE ')
logging.addLevelName(VERBOSE2, 'VERBOS2 ')

# logger object instance
__output = None


class OutputHandler(logging.Logger):

    def __init__(self, name, level=logging.NOTSET):
        """
        Object constructor.
        :param name: The logger name
        :param level: The default logging level
        """
        logging.Logger.__init__(self, name, level)

    def critical(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'CRITICAL' and exit.
        """
        kwargs['exc_info'] = True
        logging.Logger.critical(self, msg, *args, **kwargs)
        sys.exit(2)

    def bot(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'BOT'.
        """
        self.log(BOT, msg, *args, **kwargs)

    def verbose(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'VERBOSE'.
        """
        self.log(VERBOSE, msg, *args, **kwargs)

    def verbose2(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'VERBOSE2'.
        """
        self.log(VERBOSE2, msg, *args, **kwargs)


logging.setLoggerClass(OutputHandler)


def getInstance(logfile=None, loglevel=BOT, logsize=10485760, log2console=False):
    """
    Return a Logger instance.
    :param logfile: The logfile name. When None only the console is used.
    :param loglevel: The logging level.
    :param logsize: The size of the log file (in bytes)
    :param log2console: Whether or not to extend logging to the console.
    """
    global __output

    if __output is None:

        __output = logging.getLogger(LOGGER_NAME)

        if logfile:
            # FILE HANDLER
            file_formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s', '%y%m%d %H:%M:%S')
            handler = handlers.RotatingFileHandler(logfile, maxBytes=logsize, backupCount=5, encoding="UTF-8")
            handler.doRollover()
            handler.setFormatter(file_formatter)

            __output.addHandler(handler)

        if log2console or not logfile:
            # CONSOLE HANDLER: stdout is reserved for the JSON report
            console_formatter = logging.Formatter('%(asctime)s\t%(levelname)s\t%(message)s', '%M:%S')
            handler2 = logging.StreamHandler(sys.stderr)
            handler2.setFormatter(console_formatter)

            __output.addHandler(handler2)

        __output.setLevel(loglevel)

    return __output

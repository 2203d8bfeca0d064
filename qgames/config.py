import codecs
import configparser
import os
from io import StringIO

import qgames
import qgames.functions
from qgames.exceptions import ConfigFileNotFound
from qgames.exceptions import ConfigFileNotValid
from qgames.exceptions import NoOptionError
from qgames.exceptions import NoSectionError

__version__ = '1.4'

# default main configuration: every option the program reads is listed here
DEFAULT_CONFIG = r"""
[qgames]
log_level: 21
logfile:
logsize: 10MB
log2console: no

[parser]
game_log: %(game_log)s
encoding:
score_self_kills: yes

[output]
file: %(output)s
indent:
""" % {'game_log': qgames.DEFAULT_GAME_LOG, 'output': qgames.DEFAULT_OUTPUT}


class ConfigParserMixin:
    """
    Mixin implementing ConfigParser methods more useful for qgames business.
    """

    def get(self, *args, **kwargs):
        """
        Return a configuration value as a string.
        """
        raise NotImplementedError

    def getboolean(self, section, setting):
        """
        Return a configuration value as a boolean.
        :param section: The configuration file section.
        :param setting: The configuration file setting.
        """
        value_raw = self.get(section, setting)
        value = value_raw.lower() if value_raw else ''
        if value in ('yes', '1', 'on', 'true'):
            return True
        elif value in ('no', '0', 'off', 'false'):
            return False
        else:
            raise ValueError("%s.%s : '%s' is not a boolean value" % (section, setting, value))

    def getpath(self, section, setting):
        """
        Return an absolute path name and expand the user prefix (~).
        :param section: The configuration file section.
        :param setting: The configuration file setting.
        """
        return qgames.functions.getAbsolutePath(self.get(section, setting))

    def getsize(self, section, setting):
        """
        Return a configuration value expressed as a size (10MB, 512K, ...) in bytes.
        :param section: The configuration file section.
        :param setting: The configuration file setting.
        """
        try:
            return qgames.functions.getBytes(self.get(section, setting))
        except TypeError as err:
            raise ValueError("%s.%s : %s" % (section, setting, err))


class CfgConfigParser(ConfigParserMixin, configparser.ConfigParser):
    """
    A config parser class that mimics the ConfigParser, reads the cfg format.
    """
    fileName = ''

    def __init__(self, allow_no_value=False):
        """
        Object constructor.
        :param allow_no_value: Whether or not to allow empty values in configuration sections
        """
        opts = {
            "allow_no_value": allow_no_value,
            "inline_comment_prefixes": ";",
            "interpolation": None
        }
        configparser.ConfigParser.__init__(self, **opts)

    def get(self, section, option, **kwargs):
        """
        Return a configuration value as a string.
        """
        try:
            value = configparser.ConfigParser.get(self, section, option, **kwargs)
            return '' if value is None else value
        except NoSectionError:
            # callers only catch NoOptionError
            raise NoOptionError(option, section)

    def load(self, filename):
        """
        Load a configuration file.
        """
        with open(filename, 'r') as f:
            self.readfp(f, filename)
        self.fileName = filename
        return True

    def loadFromString(self, cfg_string):
        """
        Read the cfg config from a string.
        """
        fp = StringIO(cfg_string)
        self.readfp(fp)
        fp.close()
        self.fileName = None
        return True

    def readfp(self, fp, filename=None):
        """
        Inherits from configparser.ConfigParser to throw our custom exception if needed
        """
        try:
            configparser.ConfigParser.read_file(self, fp, filename)
        except Exception as e:
            raise ConfigFileNotValid("%s" % e)


def load(filename=None):
    """
    Load a configuration file on top of the default settings.
    :param filename: The configuration file name, None to only use the defaults.
    """
    config = CfgConfigParser(allow_no_value=True)
    config.loadFromString(DEFAULT_CONFIG)
    if filename:
        filename = qgames.functions.getAbsolutePath(filename)
        if not os.path.isfile(filename):
            raise ConfigFileNotFound(filename)
        config.load(filename)
    return config


class MainConfig(ConfigParserMixin):
    """
    Class to use to parse the qgames main config file.
    """

    def __init__(self, config_parser):
        if not isinstance(config_parser, CfgConfigParser):
            raise NotImplementedError("unexpected config type: %r" % config_parser.__class__)
        self._config_parser = config_parser

    def get(self, *args, **kwargs):
        """
        Override the get method defined in the ConfigParserMixin
        """
        return self._config_parser.get(*args, **kwargs)

    def get_optional(self, section, setting):
        """
        Return a configuration value, None when the setting is missing or empty.
        """
        try:
            return self.get(section, setting) or None
        except NoOptionError:
            return None

    def get_log_level(self):
        return self._config_parser.getint('qgames', 'log_level')

    def get_log_size(self):
        return self.getsize('qgames', 'logsize')

    def get_logfile(self):
        if logfile := self.get_optional('qgames', 'logfile'):
            return qgames.functions.getWritableFilePath(logfile)
        return None

    def get_log2console(self):
        return self.getboolean('qgames', 'log2console')

    def get_game_log(self):
        if self.get_optional('parser', 'game_log'):
            return self.getpath('parser', 'game_log')
        return qgames.functions.getAbsolutePath(qgames.DEFAULT_GAME_LOG)

    def get_encoding(self):
        return self.get_optional('parser', 'encoding')

    def get_score_self_kills(self):
        return self.getboolean('parser', 'score_self_kills')

    def get_output(self):
        if (output := self.get_optional('output', 'file')) == '-':
            return output
        if output:
            return self.getpath('output', 'file')
        return qgames.functions.getAbsolutePath(qgames.DEFAULT_OUTPUT)

    def get_indent(self):
        if (indent := self.get_optional('output', 'indent')) is None:
            return None
        return int(indent)

    def analyze(self):
        """
        Analyze the main configuration file checking for common mistakes.
        :return: A list of strings highlighting problems found (so they can be logged/displayed easily)
        """
        analysis = []

        def _check(getter, section, option, expected):
            try:
                getter()
            except NoOptionError:
                analysis.append('missing configuration value %s::%s' % (section, option))
            except (ValueError, TypeError):
                analysis.append('invalid value for %s::%s (%r): expecting %s' % (
                    section, option, self.get_optional(section, option), expected))

        _check(self.get_log_level, 'qgames', 'log_level', 'an integer')
        _check(self.get_log_size, 'qgames', 'logsize', 'a size like 10MB')
        _check(self.get_log2console, 'qgames', 'log2console', 'a boolean')
        _check(self.get_score_self_kills, 'parser', 'score_self_kills', 'a boolean')
        _check(self.get_indent, 'output', 'indent', 'an integer')

        if encoding := self.get_optional('parser', 'encoding'):
            try:
                codecs.lookup(encoding)
            except LookupError:
                analysis.append('unknown encoding specified in parser::encoding (%s)' % encoding)

        return analysis

    def __getattr__(self, name):
        """
        Act as a proxy in front of self._config_parser.
        Any attribute or method call which does not exists in this
        object (MainConfig) is then tried on the self._config_parser
        :param name: str Attribute or method name
        """
        if name == '_config_parser':
            raise AttributeError(name)
        return getattr(self._config_parser, name)


def get_main_config(config_path=None):
    """
    Return the MainConfig to use: the given file, else the first
    qgames.ini found in the usual places, else the default settings.
    :param config_path: The configuration file given on the command line
    """
    config = None
    if config_path:
        config = qgames.functions.getAbsolutePath(config_path)
        if not os.path.isfile(config):
            qgames.functions.console_exit(f'ERROR: configuration file not found ({config}).')
    else:
        home_dir = qgames.functions.get_home_path(create=False)
        for p in ('qgames.ini', os.path.join('conf', 'qgames.ini'), os.path.join(home_dir, 'qgames.ini')):
            path = qgames.functions.getAbsolutePath(p)
            if os.path.isfile(path):
                config = path
                break

    return MainConfig(load(config))

import configparser

NoOptionError = configparser.NoOptionError
NoSectionError = configparser.NoSectionError


class ConfigFileNotFound(Exception):
    """
    Raised whenever the configuration file can't be found.
    """

    def __init__(self, message):
        Exception.__init__(self, message)

    def __str__(self):
        return repr(self.args[0])


class ConfigFileNotValid(Exception):
    """
    Raised whenever we are parsing an invalid configuration file.
    """

    def __init__(self, message):
        Exception.__init__(self, message)

    def __str__(self):
        return repr(self.args[0])

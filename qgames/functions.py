import os
import re
import tempfile

__version__ = '1.3'


def console_exit(message=''):
    """
    Terminate the current console application displaying the given message.
    :param message: the message to prompt to the user
    """
    raise SystemExit(message)


def getBytes(size):
    """
    Convert the given size in the correspondent amount of bytes.
    :param size: The size we want to convert in bytes
    :raise TypeError: If an invalid input is given
    :return: The given size converted in bytes
    >>> getBytes(10)
    10
    >>> getBytes('10')
    10
    >>> getBytes('1KB')
    1024
    >>> getBytes('1M')
    1048576
    >>> getBytes('1GB')
    1073741824
    """
    size = str(size).upper()
    r = re.compile(r'''^(?P<size>\d+)\s*(?P<mult>KB|MB|GB|TB|K|M|G|T?)$''')
    m = r.match(size)
    if not m:
        raise TypeError(f'invalid input given: {size}')

    multipliers = {
        'K': 1024, 'KB': 1024,
        'M': 1048576, 'MB': 1048576,
        'G': 1073741824, 'GB': 1073741824,
        'T': 1099511627776, 'TB': 1099511627776,
    }

    try:
        return int(m.group('size')) * multipliers[m.group('mult')]
    except KeyError:
        return int(m.group('size'))


def get_home_path(create=True):
    """
    Return the path to the qgames home directory.
    """
    path = os.path.normpath(os.path.expanduser('~/.qgames'))
    if create and not os.path.isdir(path):
        os.mkdir(path)
    return path


def getAbsolutePath(path):
    """
    Return an absolute path name and expand the user prefix (~).
    A leading '@home/' is replaced with the qgames home directory.
    :param path: the relative path we want to expand
    """
    if path.startswith('@') and path[1:6] in ('home\\', 'home/'):
        path = os.path.join(get_home_path(create=True), path[6:])
    path = os.path.normpath(os.path.expanduser(path))
    return os.path.abspath(path)


def getWritableFilePath(filepath):
    """
    Return an absolute file path making sure the current user can write it.
    If the given path is not writable by the current user, the path will be converted
    into an absolute path pointing inside the qgames home directory (see `get_home_path`)
    which is assumed to be writable.
    :param filepath: the relative path we want to expand
    """
    filepath = getAbsolutePath(filepath)
    home_dir = get_home_path(create=False)
    if not filepath.startswith(home_dir):
        try:
            with tempfile.TemporaryFile(dir=os.path.dirname(filepath)):
                pass
        except OSError:
            home_dir = get_home_path(create=True)
            filepath = os.path.join(home_dir, os.path.basename(filepath))
    return filepath


def getShortPath(filepath):
    """
    Convert the given absolute path into a short path.
    Will replace path string with proper tokens (such as @home, ~, ...)
    :param filepath: the path to convert
    :return: string
    """
    # NOTE: make sure to have os.path.sep at the end otherwise also files starting with '.qgames' will be matched
    homepath = get_home_path(create=False) + os.path.sep
    if filepath.startswith(homepath):
        return filepath.replace(homepath, '@home' + os.path.sep, 1)
    userpath = os.path.expanduser('~') + os.path.sep
    if filepath.startswith(userpath):
        return filepath.replace(userpath, '~' + os.path.sep, 1)
    return filepath

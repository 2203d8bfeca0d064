import sys

__version__ = '1.0'

if sys.version_info < (3, 8):
    raise SystemExit("qgames is not compatible with Python versions <3.8")


def main():
    import qgames.__main__
    qgames.__main__.main()


if __name__ == "__main__":
    main()

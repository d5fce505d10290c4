"""thumbgrab - YouTube thumbnail link builder and downloader."""

__version__ = "1.0.0"

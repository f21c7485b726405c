"""Version information for isologger."""

__version__ = "1.1.0"
__app_name__ = "isologger"

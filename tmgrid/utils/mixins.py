"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin class for logging. Loggers are named after the concrete class
    (e.g. 'tmgrid.grid.NationalGrid') so they inherit the package logger's
    level and handler.
    """

    WARNED_ONCE: set = set()

    @property
    def logger(self) -> logging.Logger:
        _class = self.__class__
        module_name = _class.__module__
        classname = _class.__name__
        logstr = f"{classname}" if module_name == "builtins" else f"{module_name}.{classname}"
        return logging.getLogger(logstr)

    @classmethod
    def _set_warned_once(cls, msg):
        """Appends message to classvar"""
        cls.WARNED_ONCE.add(msg)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message"""
        if msg in self.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        self._set_warned_once(msg)

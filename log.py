"""
Copyright (c) 2014 Brian Muller

Leveled logging on top of twisted.python.log.

Messages carry a numeric `loglevel`. A FileLogObserver only writes the
events at or below its configured level, errors are always written.
"""

import sys
from twisted.python import log

DEBUG = 5
WARNING = 4
INFO = 3
ERROR = 2
CRITICAL = 1

levels = {"debug": DEBUG, "warning": WARNING, "info": INFO, "error": ERROR, "critical": CRITICAL}


class FileLogObserver(log.FileLogObserver):
    def __init__(self, f=None, level="info", default=DEBUG):
        log.FileLogObserver.__init__(self, f or sys.stdout)
        if level not in levels:
            raise ValueError("unknown log level %r, expected one of %s" % (level, ", ".join(sorted(levels))))
        self.level = levels[level]
        self.default = default

    def emit(self, eventDict):
        ll = eventDict.get('loglevel', self.default)
        if eventDict['isError'] or 'failure' in eventDict or self.level >= ll:
            log.FileLogObserver.emit(self, eventDict)


class Logger(object):
    """
    Tags every message with the keyword arguments given at construction,
    usually `system=<component name>`.
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def msg(self, message, **kw):
        kw.update(self.kwargs)
        if 'system' in kw and not isinstance(kw['system'], str):
            kw['system'] = kw['system'].__class__.__name__
        log.msg(message, **kw)

    def _log(self, level, name, message, **kw):
        kw['loglevel'] = level
        self.msg("[%s] %s" % (name, message), **kw)

    def debug(self, message, **kw):
        self._log(DEBUG, "DEBUG", message, **kw)

    def info(self, message, **kw):
        self._log(INFO, "INFO", message, **kw)

    def warning(self, message, **kw):
        self._log(WARNING, "WARNING", message, **kw)

    def error(self, message, **kw):
        self._log(ERROR, "ERROR", message, **kw)

    def critical(self, message, **kw):
        self._log(CRITICAL, "CRITICAL", message, **kw)


def start_logging(level="info", f=None):
    """Send log events of the given level and above to `f` (stdout by default)."""
    observer = FileLogObserver(f, level=level)
    log.addObserver(observer.emit)
    return observer


def stop_logging(observer):
    log.removeObserver(observer.emit)

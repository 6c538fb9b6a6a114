"""
The ``physq`` logger. The library only attaches a :class:`logging.NullHandler`; applications choose where
records go, e.g. ``logging.basicConfig(level=logging.DEBUG)``. Messages are %-style templates formatted
lazily, only when a handler accepts the record.
"""
import logging

logger = logging.getLogger("physq")
logger.addHandler(logging.NullHandler())


def GetLogger():
    return logger


def Info(message, *args):
    logger.info(message, *args)


def Debug(message, *args):
    logger.debug(message, *args)


def SetLoggingLevel(level):
    logger.setLevel(level)

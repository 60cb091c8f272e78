"""
Utility logging functions
"""
import logging

BLAB = logging.DEBUG - 1
logging.addLevelName(BLAB, "BLAB")

def blab(log, msg, *args, **kwargs):
    """
    log a verbose message. This uses a log level, BLAB, that is lower than 
    DEBUG; in other words when a log's level is set to DEBUG, this message 
    will not be displayed.  This is intended for messages that would appear 
    voluminously if the level were set to BLAB, such as the full content of 
    API responses.

    :param Logger log:  the Logger object to record to
    :param str    msg:  the message to write
    :param args:        treat msg as a template and insert these values
    :param kwargs:      other arbitrary keywords to pass to log.log()
    """
    log.log(BLAB, msg, *args, **kwargs)

def truncate(text, maxlen=500):
    """
    return the given text shortened to no more than maxlen characters, for inclusion in a log message
    """
    if text is None:
        return ""
    if len(text) <= maxlen:
        return text
    return text[:maxlen] + "...[{0} more chars]".format(len(text) - maxlen)

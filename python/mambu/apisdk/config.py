"""
Utilities for loading configuration data and setting up logging for the Mambu API SDK.

Configuration is provided as a dictionary, usually loaded from a YAML (or JSON) file.  The parameters
used to connect to Mambu are described in :py:class:`~mambu.apisdk.connection.MambuAPIService`.
"""
import os, json, logging
from collections.abc import Mapping
from copy import deepcopy

import yaml

from .exceptions import ConfigurationException

__all__ = [ "ConfigurationException", "load_from_file", "merge_config", "configure_log",
            "NORMAL", "LOG_FORMAT" ]

# a log level between INFO and DEBUG
NORMAL = 15
logging.addLevelName(NORMAL, "NORMAL")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
global_logdir = None
global_logfile = None
_log_handler = None

def load_from_file(configfile: str) -> Mapping:
    """
    read the configuration from the given file and return it as a dictionary.  The file is read
    as YAML unless its name ends in ".json".
    :raises ConfigurationException:  if the file cannot be read or parsed
    """
    try:
        with open(configfile) as fd:
            if configfile.endswith('.json'):
                out = json.load(fd)
            else:
                out = yaml.safe_load(fd)
    except OSError as ex:
        raise ConfigurationException("{0}: unable to read config file: {1}"
                                     .format(configfile, str(ex))) from ex
    except (ValueError, yaml.YAMLError) as ex:
        raise ConfigurationException("{0}: config file syntax error: {1}"
                                     .format(configfile, str(ex))) from ex

    if out is None:
        out = {}
    if not isinstance(out, Mapping):
        raise ConfigurationException("{0}: config file does not contain a dictionary".format(configfile))
    return out

def merge_config(primary: Mapping, defconf: Mapping) -> Mapping:
    """
    merge the data from two configurations, where values in primary override those in defconf.
    Dictionary values are merged recursively; all other values (including lists) are replaced.
    The inputs are not changed.
    """
    out = deepcopy(defconf)
    for key, val in primary.items():
        if isinstance(val, Mapping) and isinstance(out.get(key), Mapping):
            out[key] = merge_config(val, out[key])
        else:
            out[key] = deepcopy(val)
    return out

def get_param(config: Mapping, name: str, default=None, required=False):
    """
    return the value of a (possibly hierarchical) configuration parameter.  A dotted name (e.g.
    "auth.user") is looked up through nested dictionaries.
    :raises ConfigurationException:  if required is True and the parameter is not set
    """
    val = config
    for part in name.split('.'):
        if not isinstance(val, Mapping) or part not in val:
            if required:
                raise ConfigurationException("Missing required config parameter: "+name)
            return default
        val = val[part]
    if val is None and required:
        raise ConfigurationException("Missing required config parameter: "+name)
    return val

def configure_log(logfile: str=None, level: int=None, format: str=None, config: Mapping=None,
                  addstderr=False):
    """
    configure the root logger to write messages to a file.

    :param str logfile:   the path to the log file; if relative, it is taken to be relative to
                          the ``logdir`` config parameter (or the current directory)
    :param int level:     the minimum level of messages to record (default: ``loglevel`` from config
                          or NORMAL)
    :param str format:    the format of the messages (default: LOG_FORMAT)
    :param dict config:   configuration data that may contain ``logfile``, ``logdir``, and
                          ``loglevel`` parameters
    :param bool addstderr: if True, also send messages to standard error
    """
    global global_logdir, global_logfile, _log_handler
    if not config:
        config = {}
    if not logfile:
        logfile = config.get('logfile', 'mambu-apisdk.log')
    if not os.path.isabs(logfile):
        logdir = config.get('logdir', os.getcwd())
        logfile = os.path.join(logdir, logfile)
    if level is None:
        level = config.get('loglevel', NORMAL)
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ConfigurationException("loglevel: unrecognized log level name: " +
                                             config['loglevel'])
    if not format:
        format = LOG_FORMAT

    rootlogger = logging.getLogger()
    if _log_handler:
        rootlogger.removeHandler(_log_handler)
        _log_handler.close()

    global_logdir = os.path.dirname(logfile)
    global_logfile = logfile
    _log_handler = logging.FileHandler(logfile)
    _log_handler.setLevel(level)
    _log_handler.setFormatter(logging.Formatter(format))
    rootlogger.addHandler(_log_handler)
    rootlogger.setLevel(min(level, logging.DEBUG))

    if addstderr:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format))
        rootlogger.addHandler(handler)

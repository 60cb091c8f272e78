"""
The command-line interface to the Mambu API.  See :py:mod:`mambu.apisdk.cli.mambu` and the
:program:`mambu` script for the top-level program.

The commands provided here access Mambu generically:  the kind of entity to retrieve is given by
name on the command line (e.g. ``LoanAccount`` or ``loan_account``), and the request is built from
the matching standard :py:class:`~mambu.apisdk.apidef.ApiType` category.
"""
import sys
import simplejson as json
from collections.abc import Mapping

from ..utils.cli import CommandFailure
from ..exceptions import (InvalidArgument, ConfigurationException, MambuServiceException,
                          MambuResourceNotFound)
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..factory import MambuAPIFactory

def define_output_opt(subparser):
    """
    define the -o option for writing a command's output to a file
    """
    subparser.add_argument("-o", "--output-file", metavar="FILE", type=str, dest="outfile",
                           help="write the output to the named file instead of standard out")

def define_params_opt(subparser):
    """
    define the -p option for passing extra request parameters
    """
    subparser.add_argument("-p", "--param", metavar="NAME=VALUE", type=str, action="append",
                           dest="params", default=[],
                           help="send the parameter NAME with the given VALUE with the request "+
                                "(e.g. offset=0); may be repeated")

def parse_params(params, cmd):
    """
    convert a list of NAME=VALUE strings into a parameter dictionary
    """
    out = {}
    for param in params or []:
        name, eq, val = param.partition('=')
        if not eq or not name.strip():
            raise CommandFailure(cmd, "Bad parameter syntax (need NAME=VALUE): "+param, 2)
        out[name.strip()] = val
    return out

def lookup_kind(name, cmd):
    """
    return the EntityKind with the given name
    """
    try:
        return EntityKind.lookup(name)
    except InvalidArgument as ex:
        raise CommandFailure(cmd, str(ex), 2) from ex

def create_factory(config, cmd, log=None):
    """
    create a MambuAPIFactory from the configuration
    """
    try:
        return MambuAPIFactory(config, log)
    except ConfigurationException as ex:
        raise CommandFailure(cmd, "Configuration error: "+str(ex), 6, ex) from ex

def submit(cmd, func, *args, **kwargs):
    """
    call the given function to send a Mambu request, converting its failures to CommandFailures
    """
    try:
        return func(*args, **kwargs)
    except MambuResourceNotFound as ex:
        raise CommandFailure(cmd, "Not found: "+ex.url, 1, ex) from ex
    except InvalidArgument as ex:
        raise CommandFailure(cmd, str(ex), 2, ex) from ex
    except ConfigurationException as ex:
        raise CommandFailure(cmd, "Configuration error: "+str(ex), 6, ex) from ex
    except MambuServiceException as ex:
        raise CommandFailure(cmd, "Mambu request failed: "+str(ex), 5, ex) from ex

def _to_json_data(result):
    if isinstance(result, MambuEntity):
        return result.to_dict()
    if isinstance(result, list):
        return [_to_json_data(r) for r in result]
    return result

def write_output(result, outfile, cmd):
    """
    write a request's result as JSON to the named file (or to standard out if outfile is None or "-")
    """
    fp = None   # file object for file output
    op = None   # file object for output (may be equal to fp)
    try:
        if outfile and outfile != '-':
            fp = open(outfile, 'w')
            op = fp
        else:
            op = sys.stdout

        json.dump(_to_json_data(result), op, indent=4, separators=(',', ': '), use_decimal=True)
        op.write("\n")

    except OSError as ex:
        raise CommandFailure(cmd, "Failed to write data to %s: %s" %
                             ((fp and outfile) or "standard out", str(ex)), 4, ex)
    finally:
        if fp: fp.close()

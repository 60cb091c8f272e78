"""
CLI command that retrieves a single entity from Mambu by its ID
"""
import logging

from . import define_output_opt, lookup_kind, create_factory, submit, write_output
from ..apidef import ApiDefinition, ApiType

default_name = "get"
help = "retrieve an entity from Mambu given its kind and ID"
description = """
  Retrieve an entity of a given kind (e.g. Client, LoanAccount) given its ID (or encoded key).  By
  default, the entity is written as JSON to standard out, but with the -o option, it can be written
  to a specific file.
"""

def load_into(subparser, current_dests=None, as_cmd=None):
    """
    load this command into a CLI by defining the command's arguments and options
    :param argparser.ArgumentParser subparser:  the argument parser instance to define this command's
                                                interface into it
    :rtype: None
    """
    p = subparser
    p.description = description
    p.add_argument("kind", metavar="KIND", type=str,
                   help="the kind of entity to retrieve (e.g. Client, LoanAccount, SavingsAccount)")
    p.add_argument("id", metavar="ID", type=str, help="the ID or encoded key of the entity")
    p.add_argument("-f", "--full-details", action="store_true", dest="fulldetails",
                   help="request the full details of the entity (e.g. its custom field values)")
    define_output_opt(p)
    return None

def execute(args, config=None, log=None):
    """
    execute this command: retrieve the entity and write it out
    """
    cmd = default_name
    if not log:
        log = logging.getLogger(cmd)
    if not config:
        config = {}

    kind = lookup_kind(args.kind, cmd)
    apitype = ApiType.GET_ENTITY_DETAILS if args.fulldetails else ApiType.GET_ENTITY
    apidef = submit(cmd, ApiDefinition, apitype, kind)

    factory = create_factory(config, cmd, log)
    log.debug("Retrieving %s %s", kind.value, args.id)
    ent = submit(cmd, factory.executor.execute, apidef, args.id)

    write_output(ent, args.outfile, cmd)

"""
CLI command that retrieves a list of entities of a given kind
"""
import logging

from . import (define_output_opt, define_params_opt, parse_params, lookup_kind, create_factory,
               submit, write_output)
from ..apidef import ApiDefinition, ApiType

default_name = "list"
help = "list the entities of a given kind"
description = """
  Retrieve a list of all entities of a given kind (e.g. Branch, LoanAccount).  Filtering and paging
  parameters (e.g. offset, limit, branchId) can be passed on to Mambu with the -p option.
"""

def load_into(subparser, current_dests=None, as_cmd=None):
    """
    load this command into a CLI by defining the command's arguments and options
    :rtype: None
    """
    p = subparser
    p.description = description
    p.add_argument("kind", metavar="KIND", type=str,
                   help="the kind of entity to list (e.g. Branch, Client, LoanProduct)")
    define_params_opt(p)
    define_output_opt(p)
    return None

def execute(args, config=None, log=None):
    """
    execute this command: retrieve the list and write it out
    """
    cmd = default_name
    if not log:
        log = logging.getLogger(cmd)
    if not config:
        config = {}

    kind = lookup_kind(args.kind, cmd)
    params = parse_params(args.params, cmd)
    apidef = submit(cmd, ApiDefinition, ApiType.GET_LIST, kind)

    factory = create_factory(config, cmd, log)
    ents = submit(cmd, factory.executor.execute, apidef, params=params)
    log.debug("Retrieved %d %s entities", len(ents), kind.value)

    write_output(ents, args.outfile, cmd)

"""
CLI command that retrieves the entities owned by another entity (e.g. the loan accounts of a client)
"""
import logging

from . import (define_output_opt, define_params_opt, parse_params, lookup_kind, create_factory,
               submit, write_output)
from ..apidef import ApiDefinition, ApiType

default_name = "owned"
help = "list the entities of one kind owned by a given entity"
description = """
  Retrieve the entities of kind RELKIND that belong to the entity of kind KIND with the given ID;
  for example, "owned Client 8832 LoanAccount" lists the loan accounts of client 8832.
"""

def load_into(subparser, current_dests=None, as_cmd=None):
    """
    load this command into a CLI by defining the command's arguments and options
    :rtype: None
    """
    p = subparser
    p.description = description
    p.add_argument("kind", metavar="KIND", type=str, help="the kind of the owning entity")
    p.add_argument("id", metavar="ID", type=str, help="the ID or encoded key of the owning entity")
    p.add_argument("relkind", metavar="RELKIND", type=str, help="the kind of the owned entities")
    define_params_opt(p)
    define_output_opt(p)
    return None

def execute(args, config=None, log=None):
    """
    execute this command: retrieve the owned entities and write them out
    """
    cmd = default_name
    if not log:
        log = logging.getLogger(cmd)
    if not config:
        config = {}

    kind = lookup_kind(args.kind, cmd)
    relkind = lookup_kind(args.relkind, cmd)
    params = parse_params(args.params, cmd)
    apidef = submit(cmd, ApiDefinition, ApiType.GET_OWNED_ENTITIES, kind, relkind)

    factory = create_factory(config, cmd, log)
    ents = submit(cmd, factory.executor.execute, apidef, args.id, params=params)

    write_output(ents, args.outfile, cmd)

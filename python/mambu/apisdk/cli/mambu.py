"""
mambu command-line program for retrieving data from a Mambu tenant
"""
import os, sys, logging

from ..utils import cli
from ..exceptions import ConfigurationException
from . import get, owned
from . import listing

description = "retrieve data from a Mambu tenant"
epilog = None
default_prog_name = "mambu"
default_conf_file = os.path.join(os.path.expanduser("~"), ".mambu", "config.yml")

def main(cmdname, args):
    """
    a function that executes the ``mambu`` command-line tool.
    """
    if not cmdname:
        cmdname = default_prog_name

    # set up the commands
    argparser = cli.define_prog_opts(cmdname, description, epilog)
    mambu = cli.CLISuite(cmdname, default_conf_file, argparser)
    mambu.load_subcommand(get)
    mambu.load_subcommand(listing)
    mambu.load_subcommand(owned)

    # execute the commands
    mambu.execute(args)
    return args

def run(argv=None):
    """
    run the ``mambu`` program with the given arguments (defaulting to sys.argv) and exit
    """
    if argv is None:
        argv = sys.argv
    prog = os.path.splitext(os.path.basename(argv[0]))[0] or default_prog_name
    try:
        main(prog, argv[1:])
        sys.exit(0)
    except cli.CommandFailure as ex:
        logging.getLogger(f"{prog} {ex.cmd}").critical(str(ex))
        sys.exit(ex.stat)
    except ConfigurationException as ex:
        logging.getLogger(prog).critical("Config error: "+str(ex))
        sys.exit(6)
    except Exception as ex:
        logging.getLogger(prog).exception(ex)
        sys.exit(200)

if __name__ == "__main__":
    run()

#! /usr/bin/env python3
#
# type "mambu -h" for help on command-line options
#
from mambu.apisdk.cli.mambu import run

if __name__ == "__main__":
    run()

#!/usr/bin/python3

## Builds mathml.descriptions.txt from the entity files of the MathML 2 DTD
## (see DESCRIPTIONS in config/dtd_sources.yaml for the files and their priority)

import sys
import os
import argparse

current = os.path.dirname(os.path.realpath(__file__))
parent = os.path.dirname(current)
sys.path.append(parent)

import config.config
from config.logging_config import *
from lib.utils import write_file
from lib.dtd import load_entities
from lib.descriptions import build_entries, resolve_aliases, format_table

def run(APP, output = None):

    output = output or APP['output']['descriptions']
    logging.info(f"Converting descriptions: {output}")

    # Everything is parsed before anything is written, so a bad line or
    # failed download leaves the previous table in place
    merged = load_entities(APP, 'DESCRIPTIONS')
    entries = resolve_aliases(build_entries(merged))
    outfile = format_table(entries)

    write_file(output, outfile)
    logging.info(f"Wrote {len(entries)} descriptions to {output}")

    return outfile

def main():
    APP = config.config.APP
    parser = argparse.ArgumentParser(description="This script builds the mathml.descriptions.txt file from the MathML DTD entity files",
                                    formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-o', '--output', help="Output file (default from config)")
    parser.add_argument('-c', '--cache', help="Folder for the downloaded entity files (default from config)")
    parser.add_argument('-d', '--debug', action='store_true')
    args = vars(parser.parse_args())

    APP['debug'] = APP['debug'] or args['debug']
    set_debug(APP['debug'])

    if args['cache']:
        APP['dtd']['cache_folder'] = args['cache']

    print(run(APP, args['output']), end='')

if __name__ == '__main__':
    main()

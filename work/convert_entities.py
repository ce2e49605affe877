#!/usr/bin/python3

## Builds mathml.entities.txt (entity name=character) from the entity files of the MathML 2 DTD
## Readers split each line on the first '=' and do not skip comments, so there is no header line.

import sys
import os
import argparse

current = os.path.dirname(os.path.realpath(__file__))
parent = os.path.dirname(current)
sys.path.append(parent)

import config.config
from config.logging_config import *
from lib.utils import write_file
from lib.dtd import load_entities, decode_value

def format_entities(merged):
    out = ''
    for name, record in merged.items():
        out += f"{name}={decode_value(record.value)}\n"

    return out

def run(APP, output = None):

    output = output or APP['output']['entities']
    logging.info(f"Converting entities: {output}")

    merged = load_entities(APP, 'ENTITIES')
    outfile = format_entities(merged)

    write_file(output, outfile)
    logging.info(f"Wrote {len(merged)} entities to {output}")

    return outfile

def main():
    APP = config.config.APP
    parser = argparse.ArgumentParser(description="This script builds the mathml.entities.txt file from the MathML DTD entity files",
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

#! /usr/bin/python3

# Reads the generated descriptions table and the override table the way the
# renderer does, and reports what it ended up with

import argparse
import os
import sys
import logging

current = os.path.dirname(os.path.realpath(__file__))
parent = os.path.dirname(current)
sys.path.append(parent)

import config.config
import config.logging_config
from lib.utils import get_size
from lib.descriptions import read_descriptions, longest_sequence


def main():

    APP = config.config.APP

    parser = argparse.ArgumentParser(description="This script checks mathml.descriptions.txt and override.descriptions.txt",
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('FILES', nargs='*', help="Description files, later ones override earlier ones (default from config)")
    parser.add_argument('-k', '--key', help="Print the description for this code key, e.g. 2220 or 1d49c,302")
    args = vars(parser.parse_args())

    files = args['FILES'] or [APP['output']['descriptions'], APP['output']['override']]

    for file in files:
        logging.info(f"{file}: {get_size(file)} bytes")

    descriptions = read_descriptions(files)

    print(f"Found {len(descriptions)} descriptions")
    print(f"Longest key sequence: {longest_sequence(descriptions)}")

    if args['key']:
        print(f"{args['key']}={descriptions.get(args['key'])}")

if __name__ == '__main__':
    main()

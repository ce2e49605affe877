#!/usr/bin/python3

## Lists the distinct $$...$$ TeX equations in dumps of forum posts, e.g. from
## select message from mdl_forumng_posts where message like '%$$%' and oldversion=0 and deleted=0

import sys
import os
import re
import argparse

current = os.path.dirname(os.path.realpath(__file__))
parent = os.path.dirname(current)
sys.path.append(parent)

import config.config
from config.logging_config import *
from lib.utils import read_file, write_file, strip_tags

TEX_REGEX = re.compile(r'\$\$(.*?)\$\$')

def find_tex(messages):
    return set(strip_tags(tex).strip() for tex in TEX_REGEX.findall(messages))

def run(APP, files = None, output = None):

    files = files or APP['tex']['messages']

    messages = ''
    for file in files:
        logging.info(f"Reading messages from {file}")
        messages += read_file(file)

    alltex = sorted(find_tex(messages))
    logging.info(f"Found {len(alltex)} distinct equations")

    if output:
        write_file(output, ''.join(f"{tex}\n" for tex in alltex))

    return alltex

def main():
    APP = config.config.APP
    parser = argparse.ArgumentParser(description="This script lists the distinct $$...$$ TeX equations in forum post dumps",
                                    formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument("FILES", nargs='*', help="CSV dumps of forum messages (default from config)")
    parser.add_argument('-o', '--output', help="Also write the equations to this file")
    parser.add_argument('-d', '--debug', action='store_true')
    args = vars(parser.parse_args())

    APP['debug'] = APP['debug'] or args['debug']
    set_debug(APP['debug'])

    for tex in run(APP, args['FILES'], args['output']):
        print(tex)

if __name__ == '__main__':
    main()

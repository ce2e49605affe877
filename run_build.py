#!/usr/bin/python3

## This script rebuilds the generated tables by running the steps in config/build.yaml

import sys
import time
import argparse
import importlib
import logging

import config.config
import lib.utils

from config.logging_config import set_debug

def run_build_step(APP, step):

    mod = importlib.import_module('work.{}'.format(step['action']))
    func = getattr(mod, 'run')

    func(APP=APP)  # this runs the step

def start_build(build_file, APP):

    start_time = time.time()
    build_steps = lib.utils.read_yaml(build_file)

    if build_steps['STEPS'] is None:
        logging.warning("There are no steps in this build.")
        return True

    for step in build_steps['STEPS']:
        logging.info("Executing build step: {}".format(step['action']))

        try:
            run_build_step(APP, step)
        except Exception as e:
            # Later steps don't run; a table is only written once its step completes
            logging.exception(e)
            logging.error("Build step {} failed: {}".format(step['action'], e))
            return False

    logging.info("Build completed in {:.1f}s".format(time.time() - start_time))
    return True

def main():
    APP = config.config.APP
    parser = argparse.ArgumentParser(description="This script rebuilds mathml.entities.txt and mathml.descriptions.txt",
                                    formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-b', '--build', default=APP['build'], help="Build steps file")
    parser.add_argument('-d', '--debug', action='store_true')
    args = vars(parser.parse_args())

    APP['debug'] = APP['debug'] or args['debug']
    set_debug(APP['debug'])

    if not start_build(args['build'], APP):
        sys.exit(1)

if __name__ == '__main__':
    main()

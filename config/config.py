#!/usr/bin/python3

from pathlib import Path

SCRIPT_FOLDER = Path(__file__).resolve().parent.parent

# Local copy of the MathML DTD and the generated tables ($CFG->dataroot/mml in Moodle)
DATA_FOLDER = SCRIPT_FOLDER / 'data' / 'mml'

# Persistent logging
LOG_PATH = SCRIPT_FOLDER / 'oumaths_tools.log'
LOG_IN_CONSOLE = True
LOG_IN_FILE = True

APP = {
  'script_folder' : SCRIPT_FOLDER,
  'config_folder' : SCRIPT_FOLDER / 'config',

  # Only accept True or False
  'debug': False,

  'dtd': {
    'base_url' : 'http://www.w3.org/Math/DTD/mathml2/',

    # DESCRIPTIONS and ENTITIES lists, highest priority first
    'sources' : SCRIPT_FOLDER / 'config' / 'dtd_sources.yaml',

    # Downloaded .ent files are kept here and never refreshed;
    # delete a file to download it again
    'cache_folder' : DATA_FOLDER,
  },

  'output': {
    'descriptions' : DATA_FOLDER / 'mathml.descriptions.txt',
    'entities' : DATA_FOLDER / 'mathml.entities.txt',
    'override' : DATA_FOLDER / 'override.descriptions.txt',
  },

  # Forum post dumps:
  # select message from mdl_forumng_posts where message like '%$$%' and oldversion=0 and deleted=0
  'tex': {
    'messages' : ['tex.messages.l1.csv', 'tex.messages.l2.csv'],
  },

  'build' : SCRIPT_FOLDER / 'config' / 'build.yaml',

  # Here for the config unittest
  'loaded' : True,
}

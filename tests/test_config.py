import unittest
import importlib
import logging

import lib.utils
import config

from config.config import *
from config.logging_config import set_debug

class ConfigTestCase(unittest.TestCase):
    def test_config(self):

        # global config
        global APP
        self.assertTrue(APP['loaded'])
        self.assertTrue(APP['dtd']['base_url'].endswith('/'))

    def test_sources(self):

        sources = lib.utils.read_yaml(APP['dtd']['sources'])

        for list_name in ['DESCRIPTIONS', 'ENTITIES']:
            self.assertTrue(len(sources[list_name]) > 0)
            self.assertEqual(len(sources[list_name]), len(set(sources[list_name])))

            for path in sources[list_name]:
                self.assertTrue(path.endswith('.ent'))

        # Alias names take priority over the ISO sets
        self.assertEqual(sources['DESCRIPTIONS'][0], 'mathml/mmlalias.ent')
        self.assertEqual(set(sources['DESCRIPTIONS']), set(sources['ENTITIES']))

    def test_entities_order(self):

        sources = lib.utils.read_yaml(APP['dtd']['sources'])

        # mmlalias, mmlextra, then the ISO sets from isopub back to isoamsa
        self.assertEqual(sources['ENTITIES'][:2], ['mathml/mmlalias.ent', 'mathml/mmlextra.ent'])
        self.assertEqual(sources['ENTITIES'][2:], list(reversed(sources['DESCRIPTIONS'][2:])))
        self.assertEqual(sources['ENTITIES'][2], 'iso8879/isopub.ent')
        self.assertEqual(sources['ENTITIES'][-1], 'iso9573-13/isoamsa.ent')

    def test_set_debug(self):

        logger = logging.getLogger()
        level = logger.level
        try:
            set_debug(True)
            self.assertEqual(logger.level, logging.DEBUG)

            set_debug(False)
            self.assertEqual(logger.level, logging.INFO)
        finally:
            logger.setLevel(level)

    # Every build step is a work/ module with a run function
    def test_build_steps(self):

        build_steps = lib.utils.read_yaml(APP['build'])
        self.assertTrue(len(build_steps['STEPS']) > 0)

        for step in build_steps['STEPS']:
            mod = importlib.import_module('work.{}'.format(step['action']))
            self.assertTrue(callable(getattr(mod, 'run')))

if __name__ == '__main__':
    unittest.main(failfast=True)

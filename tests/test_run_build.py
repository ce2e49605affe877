import os
import copy
import tempfile
import unittest

import config.config
from run_build import start_build
from unittest.mock import patch

class RunBuildTestCase(unittest.TestCase):

    def setUp(self) -> None:
        self.ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
        self.tmp = tempfile.TemporaryDirectory()

        self.APP = copy.deepcopy(config.config.APP)
        self.APP['dtd']['sources'] = self.ROOT_DIR + '/test_files/dtd_sources.yaml'
        self.APP['dtd']['cache_folder'] = self.ROOT_DIR + '/test_files/mml/'
        self.APP['output']['descriptions'] = os.path.join(self.tmp.name, 'mathml.descriptions.txt')
        self.APP['output']['entities'] = os.path.join(self.tmp.name, 'mathml.entities.txt')

    def tearDown(self) -> None:
        self.tmp.cleanup()

    @patch('lib.dtd.requests.get')
    def test_build(self, mock_get):
        self.assertTrue(start_build(self.APP['build'], self.APP))

        self.assertTrue(os.path.exists(self.APP['output']['descriptions']))
        self.assertTrue(os.path.exists(self.APP['output']['entities']))
        mock_get.assert_not_called()

    @patch('lib.dtd.requests.get')
    def test_failed_step_stops_build(self, mock_get):
        self.APP['dtd']['cache_folder'] = self.ROOT_DIR + '/test_files/mml_broken/'

        self.assertFalse(start_build(self.APP['build'], self.APP))

        self.assertFalse(os.path.exists(self.APP['output']['entities']))
        self.assertFalse(os.path.exists(self.APP['output']['descriptions']))

    def test_empty_build(self):
        build_file = os.path.join(self.tmp.name, 'build.yaml')
        with open(build_file, 'w') as f:
            f.write("STEPS:\n")

        self.assertTrue(start_build(build_file, self.APP))


if __name__ == '__main__':
    unittest.main(failfast=True)

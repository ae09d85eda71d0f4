import os
import subprocess
import sys
from unittest import TestCase


class TestImportCycles(TestCase):
    """
    Ensures that every module can be imported in isolation. Sometimes due to import cycles or
    delayed imports, a module import will succeed if it comes after a dependency has already been
    imported, but fail if the dependency has not already been imported. By importing each module in
    a completely fresh interpreter instance, we can verify that every single module can be
    successfully imported, and that no module needs another module to be imported first in order to
    be successfully imported itself.
    """

    def test_import_cycles(self):
        base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + '/'
        for dir_path, dir_names, file_names in os.walk(base_path + 'beamparse'):
            assert dir_path.startswith(base_path)
            relative_dir_path = dir_path[len(base_path):].replace('\\', '/')
            try:
                dir_names.remove('__pycache__')
            except ValueError:
                pass
            for file_name in file_names:
                if not file_name.endswith('.py'):
                    continue
                relative_file_path = relative_dir_path + '/' + file_name
                if file_name == '__init__.py':
                    module_name_identifiers = relative_file_path[:-12].split('/')
                else:
                    module_name_identifiers = relative_file_path[:-3].split('/')
                self.assertTrue(module_name_identifiers)
                self.assertEqual(module_name_identifiers[0], 'beamparse')
                for identifier in module_name_identifiers:
                    self.assertTrue(identifier.isidentifier(),
                                    "%s is not a valid Python identifier." % identifier)
                module_name = '.'.join(module_name_identifiers)
                result = subprocess.call([sys.executable, '-c', 'import %s' % module_name],
                                         cwd=base_path)
                self.assertFalse(result, "Import of %s failed." % module_name)

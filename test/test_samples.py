""" Run the example programs and compare their output """

import unittest
import io
import os
from util import relpath, source_files
from fungus.api import run_program
from fungus.inputs import BufferedInput


def read_text(filename, default=''):
    if not os.path.exists(filename):
        return default
    with open(filename) as f:
        return f.read()


def create_test_function(source, output):
    """ Create a test function for a program file """
    base = os.path.splitext(source)[0]
    input_text = read_text(base + '.in')
    expected = read_text(output)

    def tst_func(slf):
        slf.do(source, input_text, expected)
    return tst_func


def add_samples(*folders):
    """ Create a decorator function that adds tests in the given folders """
    def deco(cls):
        for folder in folders:
            for source in source_files(relpath('..', folder), '.bf'):
                output = os.path.splitext(source)[0] + '.out'
                basename = os.path.splitext(os.path.basename(source))[0]
                tf = create_test_function(source, output)
                setattr(cls, 'test_' + basename, tf)
        return cls
    return deco


@add_samples('examples')
class ExamplesTestCase(unittest.TestCase):
    max_steps = 100000

    def do(self, source, input_text, expected):
        f = io.StringIO()
        interpreter = run_program(
            source, input_source=BufferedInput(input_text), output=f,
            max_steps=self.max_steps)
        self.assertFalse(interpreter.is_running)
        self.assertEqual(expected, f.getvalue())


class SampleFilesTestCase(unittest.TestCase):
    def test_every_program_has_output(self):
        sources = list(source_files(relpath('..', 'examples'), '.bf'))
        self.assertTrue(sources)
        for source in sources:
            output = os.path.splitext(source)[0] + '.out'
            self.assertTrue(os.path.exists(output), output)


if __name__ == '__main__':
    unittest.main()

import unittest
import io
import os
import random
import runpy
from tempfile import mkstemp
from unittest.mock import patch

from fungus.api import run_program
from fungus.cli.run import run


def write_program(testcase, text, suffix='.bf'):
    """ Store a program in a temporary file, removed after the test """
    handle, filename = mkstemp(suffix=suffix)
    os.close(handle)
    testcase.addCleanup(os.remove, filename)
    with open(filename, 'w') as f:
        f.write(text)
    return filename


@patch('sys.stdin', new_callable=io.StringIO)
@patch('sys.stderr', new_callable=io.StringIO)
@patch('sys.stdout', new_callable=io.StringIO)
class RunTestCase(unittest.TestCase):
    def test_help(self, mock_stdout, mock_stderr, mock_stdin):
        """ Check run help message """
        with self.assertRaises(SystemExit) as cm:
            run(['-h'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('befunge', mock_stdout.getvalue())

    def test_version(self, mock_stdout, mock_stderr, mock_stdin):
        with self.assertRaises(SystemExit) as cm:
            run(['--version'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('fungus', mock_stdout.getvalue())

    def test_main_module(self, mock_stdout, mock_stderr, mock_stdin):
        """ Check that python -m fungus reaches the runner """
        with patch('sys.argv', ['fungus', '--version']):
            with self.assertRaises(SystemExit) as cm:
                runpy.run_module('fungus', run_name='__main__')
        self.assertEqual(0, cm.exception.code)

    def test_run(self, mock_stdout, mock_stderr, mock_stdin):
        filename = write_program(self, '"!iH",,,@\n')
        run([filename])
        self.assertEqual('Hi!', mock_stdout.getvalue())

    def test_stdin(self, mock_stdout, mock_stderr, mock_stdin):
        """ Input comes from standard input when it is not a terminal """
        mock_stdin.write('3\n4\n')
        mock_stdin.seek(0)
        filename = write_program(self, '&&+.@')
        run([filename])
        self.assertEqual('7 ', mock_stdout.getvalue())

    def test_input_file(self, mock_stdout, mock_stderr, mock_stdin):
        filename = write_program(self, '~,~,@')
        input_filename = write_program(self, 'ok', suffix='.txt')
        run(['--input', input_filename, filename])
        self.assertEqual('ok', mock_stdout.getvalue())

    def test_max_steps(self, mock_stdout, mock_stderr, mock_stdin):
        filename = write_program(self, '1.')
        run(['--max-steps', '6', filename])
        self.assertEqual('1 1 1 ', mock_stdout.getvalue())
        self.assertIn('Stopped after 6 steps', mock_stderr.getvalue())

    def test_seed(self, mock_stdout, mock_stderr, mock_stdin):
        """ The seed is handed to the random generator of the program """
        src = '?1.@\n2\n.\n@'
        filename = write_program(self, src)
        with patch('fungus.cli.run.random.Random',
                   wraps=random.Random) as mock_random:
            run(['--seed', '7', filename])
        mock_random.assert_called_once_with(7)
        expected = io.StringIO()
        run_program(src, rng=random.Random(7), output=expected)
        self.assertEqual(expected.getvalue(), mock_stdout.getvalue())

    def test_missing_file(self, mock_stdout, mock_stderr, mock_stdin):
        with self.assertRaises(SystemExit) as cm:
            run(['no_such_program.bf'])
        self.assertEqual(1, cm.exception.code)
        self.assertIn('File not found', mock_stderr.getvalue())

    def test_fatal_error(self, mock_stdout, mock_stderr, mock_stdin):
        """ A program error is reported with its location """
        filename = write_program(self, '01-,@')
        with self.assertRaises(SystemExit) as cm:
            run([filename])
        self.assertEqual(1, cm.exception.code)
        self.assertIn('not a valid character code', mock_stderr.getvalue())
        self.assertIn(filename, mock_stderr.getvalue())

    def test_console_debugger(self, mock_stdout, mock_stderr, mock_stdin):
        mock_stdin.write('step\nstep\nstack\nrun\nquit\n')
        mock_stdin.seek(0)
        filename = write_program(self, '12+.@')
        run(['--debug', '--console', filename])
        output = mock_stdout.getvalue()
        self.assertIn('DBG>', output)
        self.assertIn("Output: '3 '", output)

    def test_log_level(self, mock_stdout, mock_stderr, mock_stdin):
        filename = write_program(self, '@')
        run(['--log', 'info', filename])
        self.assertIn('Program finished after 1 steps',
                      mock_stderr.getvalue())

    def test_report(self, mock_stdout, mock_stderr, mock_stdin):
        filename = write_program(self, '5.@')
        report_filename = write_program(self, '', suffix='.log')
        run(['--report', report_filename, filename])
        with open(report_filename) as f:
            self.assertIn('Program finished', f.read())


if __name__ == '__main__':
    unittest.main(verbosity=2)

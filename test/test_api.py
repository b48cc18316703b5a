import unittest
import io
import os
import random
from tempfile import mkstemp
from unittest.mock import MagicMock
from fungus.api import load_program, run_program, befunge_to_text
from fungus.grid import Grid
from fungus.inputs import BufferedInput


class LoadProgramTestCase(unittest.TestCase):
    def test_load_text(self):
        grid = load_program('12\n345')
        self.assertEqual(3, grid.width)
        self.assertEqual(2, grid.height)

    def test_load_file_object(self):
        grid = load_program(io.StringIO('>@'))
        self.assertEqual('>@', str(grid))

    def test_load_grid(self):
        grid = Grid.from_text('@')
        self.assertIs(grid, load_program(grid))

    def test_load_filename(self):
        handle, filename = mkstemp(suffix='.bf')
        os.close(handle)
        self.addCleanup(os.remove, filename)
        with open(filename, 'w') as f:
            f.write('5.@\n')
        grid = load_program(filename)
        self.assertEqual('5.@', befunge_to_text(grid))

    def test_load_file_keeps_cells(self):
        """ Files are read without newline translation """
        handle, filename = mkstemp(suffix='.bf')
        os.close(handle)
        self.addCleanup(os.remove, filename)
        with open(filename, 'w', newline='') as f:
            f.write('a\rb\x0c@\r\n5@\r\n')
        grid = load_program(filename)
        self.assertEqual(2, grid.height)
        self.assertEqual(5, grid.row_width(0))
        self.assertEqual(2, grid.row_width(1))

    def test_missing_file_is_program_text(self):
        """ A string that names no file is the program itself """
        grid = load_program('no_such_program.bf')
        self.assertEqual(1, grid.height)


class RunProgramTestCase(unittest.TestCase):
    def test_output(self):
        f = io.StringIO()
        interpreter = run_program('"!iH",,,@', output=f)
        self.assertEqual('Hi!', f.getvalue())
        self.assertFalse(interpreter.is_running)

    def test_input(self):
        f = io.StringIO()
        run_program('&&*.@', input_source=BufferedInput('6 7'), output=f)
        self.assertEqual('42 ', f.getvalue())

    def test_max_steps(self):
        with self.assertLogs('api', level='WARNING'):
            interpreter = run_program('>', max_steps=20)
        self.assertTrue(interpreter.is_running)
        self.assertEqual(20, interpreter.steps)

    def test_rng(self):
        rng = MagicMock()
        rng.choice.side_effect = random.Random(1).choice
        run_program('?@@@@\n@\n@', rng=rng, max_steps=5)
        self.assertEqual(1, rng.choice.call_count)

    def test_line_separator_in_string(self):
        f = io.StringIO()
        run_program('"\u2028",@', output=f)
        self.assertEqual('\u2028', f.getvalue())

    def test_without_output(self):
        interpreter = run_program('12+@')
        self.assertEqual([3], interpreter.stack)


class BefungeToTextTestCase(unittest.TestCase):
    def test_round_trip(self):
        text = 'v  <\n>:#,_@'
        self.assertEqual(text, befunge_to_text(load_program(text)))

    def test_written_cells(self):
        grid = load_program('@')
        grid.set(2, 1, load_program('x').get(0, 0))
        self.assertEqual('@\n  x', befunge_to_text(grid))


if __name__ == '__main__':
    unittest.main()

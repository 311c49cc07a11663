import unittest

# Module to test
from standings_sheets.services.sheets import utils


class TestSheetsUtils(unittest.TestCase):

    def test_convert_index_to_column_name(self):
        """Test single and double letter columns."""
        self.assertEqual(utils.convert_index_to_column_name(0), 'A')
        self.assertEqual(utils.convert_index_to_column_name(12), 'M')
        self.assertEqual(utils.convert_index_to_column_name(25), 'Z')
        self.assertEqual(utils.convert_index_to_column_name(26), 'AA')
        self.assertEqual(utils.convert_index_to_column_name(701), 'ZZ')

    def test_convert_index_to_column_name_negative(self):
        """A missing column (-1) has no name."""
        with self.assertRaises(ValueError):
            utils.convert_index_to_column_name(-1)

    def test_create_cell_reference(self):
        self.assertEqual(utils.create_cell_reference('M', 3), 'M3')

    def test_create_cell_range_string(self):
        self.assertEqual(utils.create_cell_range_string('A', 21, 28), 'A21:A28')
        self.assertEqual(utils.create_cell_range_string('A', 21, 28, utils.CellRangeOptions.FIX_ROW), 'A$21:A$28')
        self.assertEqual(utils.create_cell_range_string('A', 21, 28, utils.CellRangeOptions.FIX_COLUMN), '$A21:$A28')
        self.assertEqual(utils.create_cell_range_string('AB', 3, 18, utils.CellRangeOptions.FIX_BOTH), '$AB$3:$AB$18')


if __name__ == '__main__':
    unittest.main()

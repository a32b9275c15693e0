import json
import unittest
from unittest.mock import patch

import pandas as pd

from CurriculumGraph.config.data_logger import DataLogger
from tests.test_CurriculumGraph.test_base import BaseTestCase, make_scales


class TestDataLogger(BaseTestCase):
    """
    Unit tests for the DataLogger class: row collection, JSON export and
    table logging.
    """

    def setUp(self):
        super().setUp()
        self.logger = DataLogger()
        self.output_file = "test_output.json"

    def test_init(self):
        self.assertEqual(self.logger.subject_data, [])
        self.assertEqual(self.logger.arrow_data, [])

    def test_add_subject_data(self):
        self.logger.add_subject_data("I1", "Inglés I", "Aprobada", "Aprobable", True)
        self.assertEqual(
            self.logger.subject_data, [["I1", "Inglés I", "Aprobada", "Aprobable", True]]
        )

    def test_add_arrow_data(self):
        self.logger.add_arrow_data("I1", "I2", "Aprobable")
        self.assertEqual(self.logger.arrow_data, [["I1", "I2", "Aprobable"]])

    def test_save_dataframes_as_json(self):
        subject_df = pd.DataFrame(
            [{"Subject": "I1", "Status": "Aprobada"}, {"Subject": "I2", "Status": "Sin cursar"}]
        )
        arrow_df = pd.DataFrame([{"From": "I1", "To": "I2", "Availability": "Aprobable"}])

        self.logger.save_dataframes_as_json(
            subject_df, arrow_df, self.output_file, extra={"variant": "k08"}
        )

        with open(self.output_file, "r") as f:
            data = json.load(f)

        self.assertEqual(data["subject_data"][1]["Subject"], "I2")
        self.assertEqual(data["arrow_data"][0]["To"], "I2")
        self.assertEqual(data["variant"], "k08")

    @patch("CurriculumGraph.config.data_logger.logger")
    def test_log_tables(self, mock_logger):
        self.logger.add_subject_data("I1", "Inglés I", "Aprobada", "Aprobable", False)
        self.logger.add_arrow_data("I1", "I2", "Aprobable")

        self.logger.log_tables()

        calls = [call[0][0] for call in mock_logger.info.call_args_list]
        self.assertTrue(any("Subject Data Table:" in c for c in calls))
        self.assertTrue(any("Arrow Data Table:" in c for c in calls))

    @patch("CurriculumGraph.config.data_logger.logger")
    def test_log_tables_skips_empty(self, mock_logger):
        self.logger.log_tables()
        mock_logger.info.assert_not_called()

    @patch("CurriculumGraph.config.data_logger.logger")
    def test_log_legend(self, mock_logger):
        self.logger.log_legend(make_scales())

        calls = [call[0][0] for call in mock_logger.info.call_args_list]
        self.assertTrue(any("Sin cursar" in c for c in calls))
        self.assertTrue(any("Disponible para aprobar" in c for c in calls))


if __name__ == "__main__":
    unittest.main()

import unittest
from unittest.mock import MagicMock, patch

from CurriculumGraph.main import main


class TestMain(unittest.TestCase):
    """
    Unit tests for the command line entry point.
    """

    @patch("CurriculumGraph.main.sys.exit")
    @patch("CurriculumGraph.main.RunManager")
    def test_main_successful_run(self, mock_RunManager, mock_exit):
        mock_run_manager_instance = MagicMock()
        mock_RunManager.return_value = mock_run_manager_instance
        mock_RunManager.create_job_folder.return_value = "dummy_folder"

        main()

        mock_exit.assert_not_called()
        mock_RunManager.create_job_folder.assert_called_once()
        mock_RunManager.assert_called_once_with(folder="dummy_folder")
        mock_run_manager_instance.run_curriculum_workflow.assert_called_once()

    @patch("CurriculumGraph.main.sys.exit")
    @patch("CurriculumGraph.main.RunManager")
    @patch("CurriculumGraph.main.logger")
    def test_main_exception_triggers_exit(
        self, mock_logger, mock_RunManager, mock_exit
    ):
        mock_run_manager_instance = MagicMock()
        mock_RunManager.return_value = mock_run_manager_instance
        mock_RunManager.create_job_folder.return_value = "dummy_folder"
        mock_run_manager_instance.run_curriculum_workflow.side_effect = Exception(
            "Test exception"
        )

        main()

        mock_exit.assert_called_once_with(1)
        mock_logger.critical.assert_called_once_with(
            "Fatal error during curriculum evaluation: Test exception", exc_info=True
        )


if __name__ == "__main__":
    unittest.main()

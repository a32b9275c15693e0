import logging
import sys

from CurriculumGraph.run import RunManager

logger = logging.getLogger(__name__)


def main():
    """
    Main function for evaluating curriculum availability.
    """
    folder = RunManager.create_job_folder()

    try:
        run_manager = RunManager(folder=folder)
        run_manager.run_curriculum_workflow()
    except Exception as e:
        logger.critical(f"Fatal error during curriculum evaluation: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

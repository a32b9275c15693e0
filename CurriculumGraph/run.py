import copy
import logging
import os
import sys

import pandas as pd

from CurriculumGraph.config.arg_config_manager import ConfigManager
from CurriculumGraph.config.data_logger import DataLogger
from CurriculumGraph.config.logging_config import LoggingConfig
from CurriculumGraph.curriculum.loader import load_variant
from CurriculumGraph.curriculum.progress import compute_progress
from CurriculumGraph.curriculum.status_store import (
    StatusStore,
    apply_statuses,
    collect_statuses,
    export_progress,
    import_progress,
)
from CurriculumGraph.graph import Graph
from CurriculumGraph.graph.links import contributed_availability
from CurriculumGraph.renderers import NetworkxRenderer, RecordingRenderer

logger = logging.getLogger(__name__)
console = LoggingConfig.get_console()

SELECTION_PREFIX = "graphSelection-"
SELECTED_VARIANT_KEY = "variant"


class RunManager:
    """
    Handles the setup and execution of curriculum evaluation runs, including
    configuration loading, logging, status persistence and result output.
    """

    def __init__(self, folder):
        self.folder = folder
        self._config_manager = ConfigManager()
        self._data_logger = DataLogger()
        self._logging_config = LoggingConfig(folder)

    @staticmethod
    def create_job_folder():
        """
        Create a new job folder with an incremented job number based on existing
        folders.
        """
        current_dir = os.getcwd()

        existing_folders = [f for f in os.listdir(current_dir) if f.startswith("job")]

        job_numbers = []
        for folder in existing_folders:
            try:
                job_numbers.append(int(folder[3:]))
            except ValueError:
                continue

        next_job_number = max(job_numbers) + 1 if job_numbers else 1

        new_folder_path = os.path.join(current_dir, f"job{next_job_number:03d}")
        os.makedirs(new_folder_path, exist_ok=True)

        return new_folder_path

    def run_curriculum_workflow(self):
        """
        Sets up logging, loads ``config.yaml``, parses command line arguments and
        evaluates every configured run.
        """
        try:
            logger = self._logging_config.setup_logging()

            config = self._config_manager.load_config("config.yaml")
            if not config:
                raise ValueError(
                    "No configuration file found, and no CLI arguments were provided."
                )

            parser = self._config_manager.setup_argparse()
            cli_args, _ = parser.parse_known_args()

            for run_name, run_config in config.items():
                if not isinstance(run_config, dict):
                    logger.warning(
                        f"Run configuration for {run_name} is not a dictionary."
                    )
                    continue

                args = self._config_manager.merge_configs(
                    copy.copy(cli_args), run_config
                )

                log_level = logging.DEBUG if args.verbose else logging.INFO
                self._logging_config.update_logging_level(log_level)

                command = " ".join(sys.argv)
                logging.getLogger("commands").info(command)

                self._config_manager.validate_run_arguments(args)

                logger.info(f"All input for {run_name}")
                for arg in vars(args):
                    logger.info(f" {arg}: {getattr(args, arg)}")

                self.evaluate_curriculum(args)

        except Exception as e:
            logger.error(f"RunManager encountered an error: {e}", exc_info=True)
            raise

    def evaluate_curriculum(self, args):
        """
        Evaluate one curriculum variant and write its results.

        Returns the built graph and the renderer holding the draw instructions.
        """
        store = StatusStore(args.status_file)
        selection = StatusStore(args.status_file, prefix=SELECTION_PREFIX)

        requested = args.variant
        if args.import_file:
            imported_variant, imported_statuses = import_progress(args.import_file)
            requested = requested or imported_variant
        stored_variant = selection.get(SELECTED_VARIANT_KEY)

        variant_id, variant = load_variant(
            args.curriculum_file, requested=requested, stored=stored_variant
        )
        selection.set(SELECTED_VARIANT_KEY, variant_id)

        if args.import_file:
            store.save_statuses(variant_id, imported_statuses)
            logger.info(
                f"Imported {len(imported_statuses)} statuses from {args.import_file}"
            )

        apply_statuses(variant.subjects, store.load_statuses(variant_id), variant.scales)
        graph = Graph(variant.scales, variant.subjects, variant.connectors)

        changed = False
        for subject_id in args.toggle or []:
            changed = graph.toggle_status(subject_id) or changed
        if changed and args.persist:
            store.save_statuses(variant_id, collect_statuses(graph))

        renderer = RecordingRenderer()
        graph.render(renderer)

        if args.graphml_file:
            graphml = NetworkxRenderer()
            graph.render(graphml)
            graphml.write_graphml(os.path.join(self.folder, args.graphml_file))

        self._record_results(graph)

        progress = compute_progress(graph)
        console.print(
            f"{variant.name}: {progress.approved_percent}% approved, "
            f"{progress.pending_percent}% approved or pending "
            f"({progress.total} subjects)"
        )

        subject_df = pd.DataFrame(
            self._data_logger.subject_data,
            columns=["Subject", "Name", "Status", "Availability", "Leaf"],
        )
        arrow_df = pd.DataFrame(
            self._data_logger.arrow_data, columns=["From", "To", "Availability"]
        )
        self._data_logger.save_dataframes_as_json(
            subject_df,
            arrow_df,
            os.path.join(self.folder, args.output_file),
            extra={
                "variant": variant_id,
                "progress": {
                    "approved_percent": progress.approved_percent,
                    "pending_percent": progress.pending_percent,
                },
                "render": renderer.to_dict(),
            },
        )

        if args.export_file:
            export_progress(variant_id, collect_statuses(graph), args.export_file)

        return graph, renderer

    def _record_results(self, graph):
        self._data_logger.subject_data = []
        self._data_logger.arrow_data = []

        for node in graph.subject_nodes():
            self._data_logger.add_subject_data(
                node.id,
                node.subject.name,
                node.status.name,
                node.get_availability().name,
                node.is_leaf,
            )

        for node in graph.nodes:
            for dependency in node.links:
                self._data_logger.add_arrow_data(
                    dependency.id,
                    node.id,
                    contributed_availability(dependency, node).name,
                )

        self._data_logger.log_legend(graph.scales)
        self._data_logger.log_tables()

import argparse
import logging
import os

import yaml

logger = logging.getLogger(__name__)

arg_map = {
    "curriculum_file": {
        "type": str,
        "help": "Path to the curriculum document (JSON or YAML)",
    },
    "variant": {
        "type": str,
        "help": (
            "Curriculum variant to evaluate. Defaults to the last stored variant, "
            "then to the document's default variant."
        ),
        "default": None,
    },
    "status_file": {
        "type": str,
        "help": "JSON file where subject statuses are persisted per variant",
        "default": "statuses.json",
    },
    "import_file": {
        "type": str,
        "help": "Progress file ({variant, statuses}) to import before evaluating",
        "default": None,
    },
    "export_file": {
        "type": str,
        "help": "Write the current progress ({variant, statuses}) to this file",
        "default": None,
    },
    "toggle": {
        "type": str,
        "nargs": "+",
        "help": "Subject ids whose status advances one step before evaluating",
        "default": None,
    },
    "output_file": {
        "type": str,
        "help": "Name of the file where the output will be written",
        "default": "output_file.json",
    },
    "graphml_file": {
        "type": str,
        "help": "Also write the rendered graph as GraphML to this file",
        "default": None,
    },
    "persist": {
        "type": bool,
        "help": "If set to False, toggled statuses are not saved to the status file",
        "default": True,
    },
    "verbose": {
        "action": "store_true",
        "help": "Enable verbose output",
    },
}


class ConfigManager:
    def __init__(self):
        self.arg_map = arg_map

    def load_config(self, file_path):
        """Load YAML configuration file."""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Configuration file '{file_path}' not found.")

        with open(file_path, "r") as file:
            config = yaml.safe_load(file)

            if config is None:
                config = {}

        return config

    def str2bool(self, value):
        """
        Convert a string or boolean input into a boolean value.

        Accepts "true", "t", "yes", "1" and "false", "f", "no", "0" in any case.
        Booleans are returned as-is.

        Raises:
            argparse.ArgumentTypeError: If the input cannot be interpreted as a boolean.
        """
        if isinstance(value, bool):
            return value
        value = value.lower()
        if value in {"true", "t", "yes", "1"}:
            return True
        elif value in {"false", "f", "no", "0"}:
            return False
        else:
            raise argparse.ArgumentTypeError("Boolean value expected (True/False).")

    def setup_argparse(self):
        """Setup argument parsing dynamically based on arg_map."""
        parser = argparse.ArgumentParser(
            description="CurriculumGraph: curriculum availability evaluation."
        )

        for arg, properties in self.arg_map.items():
            help_text = properties.get("help", "")
            default = properties.get("default", None)

            if properties.get("type") == bool:
                parser.add_argument(
                    f"--{arg}",
                    type=self.str2bool,
                    default=default,
                    help=f"{help_text} (default: {default})",
                )
            else:
                kwargs = {k: v for k, v in properties.items() if k != "help"}
                parser.add_argument(f"--{arg}", **kwargs, help=help_text)

        return parser

    def merge_configs(self, args, run_config):
        """Merge CLI arguments with YAML configuration and adjust logging level."""
        if run_config is None:
            run_config = {}

        if not isinstance(run_config, dict):
            raise TypeError("run_config must be a dictionary or None.")

        args_dict = vars(args)

        parser = self.setup_argparse()
        default_dict = vars(parser.parse_args([]))

        cli_provided_args = {
            key for key, value in args_dict.items() if value != default_dict.get(key)
        }

        # YAML fills anything the command line left at its default
        for key, yaml_value in run_config.items():
            if yaml_value is not None and key not in cli_provided_args:
                logger.debug(f"Using YAML value for {key}: {yaml_value}")
                setattr(args, key, yaml_value)

        for key, params in self.arg_map.items():
            if getattr(args, key, None) is None:
                setattr(args, key, params.get("default"))

        for key in self.arg_map.keys():
            cli_value = args_dict.get(key)
            if cli_value is not None:
                run_config[key] = cli_value

        if getattr(args, "verbose", False):
            logger.setLevel(logging.DEBUG)
            for handler in logger.handlers:
                handler.setLevel(logging.DEBUG)
            logger.debug("Verbose mode enabled. Logger set to DEBUG level.")
        else:
            logger.setLevel(logging.INFO)
            for handler in logger.handlers:
                handler.setLevel(logging.INFO)

        return args

    def validate_run_arguments(self, args):
        """Check the arguments a run cannot do without."""
        if not getattr(args, "curriculum_file", None):
            raise ValueError("Missing 'curriculum_file' argument.")
        if not os.path.exists(args.curriculum_file):
            raise ValueError(
                f"Curriculum file '{args.curriculum_file}' does not exist."
            )
        toggle = getattr(args, "toggle", None)
        if isinstance(toggle, str):
            args.toggle = [toggle]

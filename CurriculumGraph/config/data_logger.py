import json
import logging

from tabulate import tabulate

logger = logging.getLogger(__name__)


class DataLogger:
    def __init__(self):
        self.subject_data = []
        self.arrow_data = []

    def save_dataframes_as_json(self, subject_df, arrow_df, output_file, extra=None):
        """Save both result tables into a single JSON file with separate keys"""
        data = {
            "subject_data": subject_df.to_dict(orient="records"),
            "arrow_data": arrow_df.to_dict(orient="records"),
        }
        if extra:
            data.update(extra)

        with open(output_file, "w") as out:
            json.dump(data, out, indent=4)

    def add_subject_data(self, subject_id, name, status, availability, is_leaf):
        """Add one row per subject"""
        self.subject_data.append([subject_id, name, status, availability, is_leaf])

    def add_arrow_data(self, from_id, to_id, availability):
        """Add one row per drawn arrow"""
        self.arrow_data.append([from_id, to_id, availability])

    def log_legend(self, scales):
        """Log the status and availability scales, lowest first"""
        table_str = tabulate(
            [[s.id, s.name, s.color] for s in scales.statuses],
            headers=["Status", "Name", "Fill"],
            tablefmt="grid",
        )
        logger.info(f"Statuses:\n{table_str}")
        table_str = tabulate(
            [[a.id, a.name, a.color] for a in scales.availabilities],
            headers=["Availability", "Name", "Border"],
            tablefmt="grid",
        )
        logger.info(f"Availabilities:\n{table_str}")

    def log_tables(self):
        """Log both tables at once"""
        if self.subject_data:
            logger.info("Subject Data Table:")
            table_str = tabulate(
                self.subject_data,
                headers=["Subject", "Name", "Status", "Availability", "Leaf"],
                tablefmt="grid",
                numalign="center",
                stralign="center",
            )
            logger.info(f"\n{table_str}")

        if self.arrow_data:
            logger.info("Arrow Data Table:")
            table_str = tabulate(
                self.arrow_data,
                headers=["From", "To", "Availability"],
                tablefmt="grid",
                numalign="center",
                stralign="center",
            )
            logger.info(f"\n{table_str}")

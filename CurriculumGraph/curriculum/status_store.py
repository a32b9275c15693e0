import json
import logging
import os

logger = logging.getLogger(__name__)


class StatusStore:
    """
    Key/value store persisted as one JSON object on disk.

    Keys are prefixed so several kinds of entries can share a file. Subject
    statuses live under ``<prefix><variant>``.
    """

    def __init__(self, path, prefix="graphStatus-"):
        self.path = path
        self.prefix = prefix

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as file:
            content = file.read()
        return json.loads(content) if content.strip() else {}

    def _write(self, data):
        with open(self.path, "w", encoding="utf-8") as file:
            json.dump(data, file, indent=2)

    def _key(self, key):
        return f"{self.prefix}{key}"

    def get(self, key):
        return self._read().get(self._key(key))

    def set(self, key, value):
        data = self._read()
        data[self._key(key)] = value
        self._write(data)

    def remove(self, key):
        data = self._read()
        if data.pop(self._key(key), None) is not None:
            self._write(data)

    def get_json(self, key):
        value = self.get(key)
        return json.loads(value) if value else None

    def set_json(self, key, value):
        self.set(key, json.dumps(value))

    def load_statuses(self, variant):
        return self.get_json(variant) or {}

    def save_statuses(self, variant, statuses):
        self.set_json(variant, statuses)
        logger.debug(f"Saved {len(statuses)} statuses for variant {variant}")


def collect_statuses(graph):
    """Subject id -> status for every subject past the default status."""
    default = graph.scales.lowest_status.id
    return {
        node.id: node.subject.status
        for node in graph.subject_nodes()
        if node.subject.status != default
    }


def apply_statuses(subjects, statuses, scales):
    """Give each subject its saved status, else its own, else the default."""
    for subject in subjects:
        subject.status = (
            statuses.get(subject.id) or subject.status or scales.lowest_status.id
        )
    return subjects


def export_progress(variant, statuses, file_path):
    if not statuses:
        raise ValueError("No progress to export.")
    with open(file_path, "w", encoding="utf-8") as file:
        json.dump({"variant": variant, "statuses": statuses}, file, indent=2)
    logger.info(f"Exported {len(statuses)} statuses to {file_path}")
    return file_path


def import_progress(file_path):
    """Read a ``{variant, statuses}`` envelope. Returns (variant, statuses)."""
    with open(file_path, "r", encoding="utf-8") as file:
        data = json.load(file)
    if not isinstance(data, dict) or not isinstance(data.get("statuses"), dict):
        raise ValueError("Invalid progress data format")
    return data.get("variant"), data["statuses"]

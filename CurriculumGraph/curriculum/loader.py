import json
import logging
import os

import yaml

from CurriculumGraph.curriculum.models import (
    Availability,
    Connector,
    DependencyGroup,
    Position,
    PrerequisiteTier,
    Scales,
    Status,
    Subject,
    Variant,
)

logger = logging.getLogger(__name__)


def _pick(data, *keys, default=None):
    """First present key; data files use both snake_case and camelCase."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def load_document(file_path):
    """Load a curriculum document from a JSON or YAML file."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Curriculum file '{file_path}' not found.")

    suffix = os.path.splitext(file_path)[1].lower()
    with open(file_path, "r", encoding="utf-8") as file:
        if suffix == ".json":
            document = json.load(file)
        elif suffix in (".yaml", ".yml"):
            document = yaml.safe_load(file)
        else:
            raise ValueError(f"Unsupported curriculum file type '{suffix}'.")

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ValueError(f"Curriculum file '{file_path}' must hold a mapping.")

    logger.debug(f"Loaded curriculum document {file_path}")
    return document


def variants_of(document):
    """
    The variants of a document, keyed by id.

    A document without a ``variants`` mapping is a single, anonymous variant.
    """
    variants = document.get("variants")
    if variants is None:
        return {"default": document}
    return variants


def select_variant(document, requested=None, stored=None):
    """
    Choose which variant to show.

    An explicitly requested variant wins, then the last stored one, then the
    document's default, then the first variant declared.
    """
    variants = variants_of(document)
    if not variants:
        raise ValueError("The curriculum document declares no variants.")

    if requested is not None:
        if requested in variants:
            return requested
        logger.warning(f"Variant {requested!r} not found, falling back.")

    if stored is not None and stored in variants:
        return stored

    default = _pick(document, "default_variant", "defaultVariant")
    if default in variants:
        return default

    return next(iter(variants))


def _parse_position(data):
    if not data:
        return Position()
    return Position(x=float(data.get("x", 0)), y=float(data.get("y", 0)))


def _parse_status(data):
    return Status(
        id=data["id"],
        name=data.get("name", data["id"]),
        color=data.get("color", ""),
        text_color=_pick(data, "text_color", "textColor", default="#FFFFFF"),
        leaf_text_color=_pick(data, "leaf_text_color", "leafTextColor"),
    )


def _parse_availability(data):
    return Availability(
        id=data["id"], name=data.get("name", data["id"]), color=data.get("color", "")
    )


def _parse_tier(data):
    groups = [
        DependencyGroup(
            required_status=_pick(group, "required_status", "statusId", default=""),
            subject_ids=list(_pick(group, "subject_ids", "subjects", default=[])),
        )
        for group in _pick(data, "dependency_groups", "dependencies", default=[])
    ]
    return PrerequisiteTier(
        availability_id=_pick(data, "availability_id", "availabilityId", default=""),
        dependency_groups=groups,
    )


def _parse_subject(data, scales):
    return Subject(
        id=data["id"],
        name=data.get("name", data["id"]),
        short_name=_pick(data, "short_name", "shortName", default=data["id"]),
        position=_parse_position(data.get("position")),
        status=data.get("status") or scales.lowest_status.id,
        prerequisites=[_parse_tier(t) for t in data.get("prerequisites", [])],
    )


def _parse_connector(data):
    return Connector(
        id=data["id"],
        position=_parse_position(data.get("position")),
        dependency_ids=list(_pick(data, "dependency_ids", "dependencies", default=[])),
        target_ids=list(_pick(data, "target_ids", "targets", default=[])),
    )


def parse_variant(data, name=None):
    """Build a :class:`Variant` from one variant mapping."""
    scales = Scales(
        [_parse_status(s) for s in data.get("statuses", [])],
        [_parse_availability(a) for a in data.get("availabilities", [])],
    )
    connectors = _pick(data, "connectors", "edges", default=[])
    return Variant(
        name=data.get("name", name or ""),
        scales=scales,
        subjects=[_parse_subject(s, scales) for s in data.get("subjects", [])],
        connectors=[_parse_connector(c) for c in connectors],
    )


def load_variant(file_path, requested=None, stored=None):
    """Load a document and parse the selected variant. Returns (id, Variant)."""
    document = load_document(file_path)
    variant_id = select_variant(document, requested, stored)
    variant = parse_variant(variants_of(document)[variant_id], name=variant_id)
    logger.info(
        f"Variant {variant_id}: {len(variant.subjects)} subjects, "
        f"{len(variant.connectors)} connectors"
    )
    return variant_id, variant

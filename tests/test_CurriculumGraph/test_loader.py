import json
import os

import yaml

from CurriculumGraph.curriculum.loader import (
    load_document,
    load_variant,
    parse_variant,
    select_variant,
)
from tests.test_CurriculumGraph.test_base import BaseTestCase

CAMEL_CASE_DOCUMENT = {
    "name": "Plan K08",
    "statuses": [
        {"id": "INACTIVE", "name": "Sin cursar", "color": "#111827",
         "textColor": "#FFFFFF", "leafTextColor": "#FFD700"},
        {"id": "APPROVED", "name": "Aprobada", "color": "#3b82f6",
         "textColor": "#FFFFFF"},
    ],
    "availabilities": [
        {"id": "NOT_AVAILABLE", "name": "No disponible", "color": "#6b7280"},
        {"id": "APPROVED", "name": "Aprobable", "color": "#387dd9"},
    ],
    "subjects": [
        {"id": "I1", "name": "Inglés I", "shortName": "Ing1",
         "position": {"x": 400, "y": 100}, "prerequisites": []},
        {"id": "I2", "name": "Inglés II", "position": {"x": 500, "y": 100},
         "prerequisites": [
             {"availabilityId": "APPROVED",
              "dependencies": [{"statusId": "APPROVED", "subjects": ["I1"]}]},
         ]},
    ],
    "edges": [
        {"id": "link1", "position": {"x": 450, "y": 100},
         "dependencies": ["I1"], "targets": ["I2"]},
    ],
}


class TestLoader(BaseTestCase):
    """
    Unit tests for reading curriculum documents and selecting variants.
    """

    def test_parse_variant_accepts_camel_case_keys(self):
        variant = parse_variant(CAMEL_CASE_DOCUMENT)

        self.assertEqual(variant.name, "Plan K08")
        self.assertEqual(variant.scales.statuses[0].leaf_text_color, "#FFD700")
        self.assertIsNone(variant.scales.statuses[1].leaf_text_color)

        i1, i2 = variant.subjects
        self.assertEqual(i1.short_name, "Ing1")
        self.assertEqual(i2.short_name, "I2")
        self.assertEqual(i1.status, "INACTIVE")
        self.assertEqual(i1.position.x, 400.0)

        tier = i2.prerequisites[0]
        self.assertEqual(tier.availability_id, "APPROVED")
        self.assertEqual(tier.dependency_groups[0].required_status, "APPROVED")
        self.assertEqual(tier.dependency_groups[0].subject_ids, ["I1"])

        connector = variant.connectors[0]
        self.assertEqual(connector.dependency_ids, ["I1"])
        self.assertEqual(connector.target_ids, ["I2"])

    def test_parse_variant_accepts_snake_case_keys(self):
        data = {
            "statuses": [{"id": "S", "name": "s", "color": "#000"}],
            "availabilities": [{"id": "A", "name": "a", "color": "#fff"}],
            "subjects": [
                {"id": "X", "short_name": "x", "status": "S",
                 "prerequisites": [
                     {"availability_id": "A", "dependency_groups": [
                         {"required_status": "S", "subject_ids": ["Y"]}]}]},
            ],
            "connectors": [{"id": "c", "dependency_ids": ["X"], "target_ids": []}],
        }
        variant = parse_variant(data, name="fallback")

        self.assertEqual(variant.name, "fallback")
        self.assertEqual(variant.subjects[0].prerequisite_ids(), ["Y"])
        self.assertEqual(variant.connectors[0].dependency_ids, ["X"])
        self.assertEqual(variant.connectors[0].target_ids, [])

    def test_empty_scales_are_rejected(self):
        with self.assertRaises(ValueError):
            parse_variant({"statuses": [], "availabilities": []})

    def test_select_variant_preference_order(self):
        document = {
            "defaultVariant": "b",
            "variants": {"a": {}, "b": {}, "c": {}},
        }

        self.assertEqual(select_variant(document, "c", "a"), "c")
        self.assertEqual(select_variant(document, None, "a"), "a")
        self.assertEqual(select_variant(document, None, "zzz"), "b")
        self.assertEqual(select_variant({"variants": {"a": {}, "b": {}}}), "a")

    def test_select_unknown_variant_warns(self):
        document = {"default_variant": "a", "variants": {"a": {}}}

        with self.assertLogs("CurriculumGraph.curriculum.loader", level="WARNING"):
            self.assertEqual(select_variant(document, "missing"), "a")

    def test_select_variant_without_variants_raises(self):
        with self.assertRaises(ValueError):
            select_variant({"variants": {}})

    def test_load_json_and_yaml_documents(self):
        document = {"variants": {"k08": CAMEL_CASE_DOCUMENT}}
        with open("curriculum.json", "w") as f:
            json.dump(document, f)
        with open("curriculum.yaml", "w") as f:
            yaml.safe_dump(document, f, allow_unicode=True)

        self.assertEqual(load_document("curriculum.json"), document)
        self.assertEqual(load_document("curriculum.yaml"), document)

    def test_load_single_variant_document(self):
        with open("single.json", "w") as f:
            json.dump(CAMEL_CASE_DOCUMENT, f)

        variant_id, variant = load_variant("single.json")

        self.assertEqual(variant_id, "default")
        self.assertEqual(len(variant.subjects), 2)

    def test_load_document_errors(self):
        with self.assertRaises(FileNotFoundError):
            load_document("missing.json")

        with open("curriculum.txt", "w") as f:
            f.write("{}")
        with self.assertRaises(ValueError):
            load_document("curriculum.txt")

        with open("list.yaml", "w") as f:
            f.write("- a\n- b\n")
        with self.assertRaises(ValueError):
            load_document("list.yaml")

    def test_example_curriculum_loads(self):
        example = os.path.join(
            os.path.dirname(__file__), "..", "..", "Example", "curriculum.yaml"
        )
        variant_id, variant = load_variant(example)

        self.assertEqual(variant_id, "sistemas-2023")
        self.assertEqual(len(variant.connectors), 2)

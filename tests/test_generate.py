"""
Unit tests for the table generator using the small datasets in tests/data.
"""

import io
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

# Add project root to path so we can import isosubdiv as a package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from isosubdiv import generate as generator
from isosubdiv.errors import DatasetError, GenerationError, TemplateError
from isosubdiv.models import CountryRecord, SubdivisionRecord

DATA_DIR = project_root / "tests" / "data"
COUNTRIES = DATA_DIR / "iso_3166-1.json"
SUBDIVISIONS = DATA_DIR / "iso_3166-2.json"
SUBDIVISIONS_WITH_PARENTS = DATA_DIR / "iso_3166-2-parents.json"


def exec_generated(source):
    """Execute generated module source and return its namespace."""
    namespace = {"__name__": "generated_subdivisions"}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


def countries():
    return generator.load_countries(COUNTRIES)


class TestLoadDataset(unittest.TestCase):
    """Test cases for reading the JSON datasets."""

    def test_load_countries(self):
        records = generator.load_countries(COUNTRIES)
        self.assertEqual([r.alpha_2 for r in records], ["FR", "GB", "US"])
        self.assertEqual(records[2], CountryRecord("US", "USA", "United States", 840))

    def test_load_subdivisions_keeps_dataset_order(self):
        records = generator.load_subdivisions(SUBDIVISIONS)
        self.assertEqual([r.code for r in records], ["US-NY", "FR-75", "GB-ABC"])

    def test_missing_file_is_fatal(self):
        with self.assertRaises(DatasetError):
            generator.load_subdivisions(DATA_DIR / "does-not-exist.json")

    def test_malformed_json_is_fatal(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.json"
            path.write_text('{"3166-2": [', encoding="utf-8")
            with self.assertRaises(DatasetError):
                generator.load_subdivisions(path)

    def test_wrong_top_level_key_is_fatal(self):
        # The countries document has no "3166-2" array
        with self.assertRaises(DatasetError):
            generator.load_subdivisions(COUNTRIES)


class TestBuildVariants(unittest.TestCase):
    """Test cases for validation performed before rendering."""

    def test_scenario_three_entries(self):
        variants = generator.build_variants(generator.load_subdivisions(SUBDIVISIONS), countries())
        self.assertEqual([v.code_identifier for v in variants], ["US_NY", "FR_75", "GB_ABC"])

    def test_parents_are_normalized(self):
        variants = generator.build_variants(generator.load_subdivisions(SUBDIVISIONS_WITH_PARENTS), countries())
        parents = {v.code: v.parent for v in variants}
        self.assertEqual(parents["FR-75"], "FR-IDF")
        self.assertEqual(parents["GB-ABC"], "GB-NIR")
        self.assertIsNone(parents["US-AZ"])

    def test_duplicate_code_fails(self):
        records = [
            SubdivisionRecord("US-NY", "New York", "State"),
            SubdivisionRecord("US-NY", "New York", "State"),
        ]
        with self.assertRaises(DatasetError):
            generator.build_variants(records, countries())

    def test_dangling_parent_fails(self):
        records = [SubdivisionRecord("FR-75", "Paris", "Metropolitan department", "IDF")]
        with self.assertRaises(DatasetError):
            generator.build_variants(records, countries())

    def test_cross_country_parent_fails(self):
        records = [
            SubdivisionRecord("GB-NIR", "Northern Ireland", "Province"),
            SubdivisionRecord("US-NY", "New York", "State", "GB-NIR"),
        ]
        with self.assertRaises(DatasetError):
            generator.build_variants(records, countries())

    def test_unknown_country_fails(self):
        records = [SubdivisionRecord("DE-BE", "Berlin", "Land")]
        with self.assertRaises(DatasetError):
            generator.build_variants(records, countries())

    def test_only_selects_countries(self):
        records = generator.load_subdivisions(SUBDIVISIONS_WITH_PARENTS)
        variants = generator.build_variants(records, countries(), only=["FR"])
        self.assertEqual([v.code for v in variants], ["FR-IDF", "FR-75"])

    def test_identifier_collision_fails(self):
        # Built directly, bypassing the code format check in from_dict
        records = [
            SubdivisionRecord("US-NY", "New York", "State"),
            SubdivisionRecord("US_NY", "New York", "State"),
        ]
        with self.assertRaises(DatasetError) as ctx:
            generator.build_variants(records, countries())
        self.assertIn("identifier 'US_NY'", str(ctx.exception))

    def test_only_with_unknown_country_fails(self):
        with self.assertRaises(DatasetError):
            generator.build_variants([], countries(), only=["ZZ"])


class TestRender(unittest.TestCase):
    """Test cases for rendering the generated module."""

    def setUp(self):
        self.variants = generator.build_variants(generator.load_subdivisions(SUBDIVISIONS), countries())

    def test_scenario_generated_code(self):
        namespace = exec_generated(generator.render(self.variants))
        Code = namespace["Code"]

        self.assertEqual([c.name for c in Code], ["US_NY", "FR_75", "GB_ABC"])
        self.assertIs(Code.from_str("US-NY"), Code.US_NY)
        self.assertEqual(str(Code.US_NY), "US-NY")
        self.assertEqual(namespace["TABLE"][Code.GB_ABC.ordinal][0], "Armagh City, Banbridge and Craigavon")

    def test_generated_ordering_follows_dataset(self):
        Code = exec_generated(generator.render(self.variants))["Code"]
        # "US-NY" sorts after "FR-75" as a string but is declared first
        self.assertLess(Code.US_NY, Code.FR_75)
        self.assertEqual(sorted([Code.GB_ABC, Code.FR_75, Code.US_NY]), [Code.US_NY, Code.FR_75, Code.GB_ABC])

    def test_names_with_quotes_are_escaped(self):
        records = [
            SubdivisionRecord("US-NY", "Val-d'Oise \"quoted\" \\ back", "State"),
        ]
        variants = generator.build_variants(records, countries())
        table = exec_generated(generator.render(variants))["TABLE"]
        self.assertEqual(table[0], ("Val-d'Oise \"quoted\" \\ back", "State", None))

    def test_empty_dataset_renders_valid_module(self):
        namespace = exec_generated(generator.render([]))
        self.assertEqual(len(namespace["Code"]), 0)
        self.assertEqual(namespace["TABLE"], ())

    def test_unknown_template_field_fails(self):
        template = "{% for variant in subdivisions %}{{ variant.alpha_3 }}\n{% endfor %}"
        with self.assertRaises(TemplateError):
            generator.render(self.variants, template)

    def test_unknown_template_field_through_filter_fails(self):
        template = "{% for variant in subdivisions %}{{ variant.numeric|py }}\n{% endfor %}"
        with self.assertRaises(TemplateError):
            generator.render(self.variants, template)

    def test_only_variant_fields_are_reachable(self):
        for expression in (
            "subdivisions[0].from_record",
            "subdivisions[0].__class__",
            "subdivisions[0].items",
            "subdivisions[0]['keys']",
        ):
            with self.subTest(expression=expression):
                with self.assertRaises(TemplateError):
                    generator.render(self.variants, "{{ " + expression + " }}")

    def test_item_lookup_of_a_field(self):
        output = generator.render(self.variants, "{{ subdivisions[1]['code_identifier'] }}")
        self.assertEqual(output, "FR_75")

    def test_template_syntax_error_fails(self):
        with self.assertRaises(TemplateError):
            generator.render(self.variants, "{% for variant in subdivisions %}")

    def test_custom_template_sees_every_field(self):
        template = (
            "{% for v in subdivisions %}"
            "{{ v.code }}|{{ v.code_identifier }}|{{ v.name }}|{{ v.type }}|{{ v.parent }}\n"
            "{% endfor %}"
        )
        output = generator.render(self.variants, template)
        self.assertEqual(output.splitlines()[0], "US-NY|US_NY|New York|State|None")


class TestGenerate(unittest.TestCase):
    """Test cases for the whole pipeline and its entrypoint."""

    def test_generate_writes_module(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "table.py"
            written = generator.generate(SUBDIVISIONS_WITH_PARENTS, COUNTRIES, output)
            self.assertEqual(written, output)
            namespace = exec_generated(output.read_text(encoding="utf-8"))
            Code = namespace["Code"]
            self.assertEqual(namespace["TABLE"][Code.FR_75.ordinal], ("Paris", "Metropolitan department", "FR-IDF"))

    def test_failed_generation_writes_nothing(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "table.py"
            template = Path(tmp) / "broken.j2"
            template.write_text("{{ subdivisions[0].bogus }}", encoding="utf-8")
            with self.assertRaises(GenerationError):
                generator.generate(SUBDIVISIONS, COUNTRIES, output, template_path=template)
            self.assertFalse(output.exists())

    def test_main_reports_failure(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = io.StringIO()
            with redirect_stdout(out):
                status = generator.main([tmp, str(Path(tmp) / "table.py")])
            self.assertEqual(status, 1)
            self.assertIn("Failed to generate subdivisions", out.getvalue())

    def test_main_with_only(self):
        with tempfile.TemporaryDirectory() as tmp:
            data_dir = Path(tmp)
            (data_dir / generator.SUBDIVISIONS_FILE).write_text(
                SUBDIVISIONS_WITH_PARENTS.read_text(encoding="utf-8"), encoding="utf-8"
            )
            (data_dir / generator.COUNTRIES_FILE).write_text(COUNTRIES.read_text(encoding="utf-8"), encoding="utf-8")
            output = data_dir / "table.py"
            with redirect_stdout(io.StringIO()):
                status = generator.main([str(data_dir), str(output), "--only", "gb"])
            self.assertEqual(status, 0)
            Code = exec_generated(output.read_text(encoding="utf-8"))["Code"]
            self.assertEqual([str(c) for c in Code], ["GB-NIR", "GB-ABC"])

    def test_empty_selection_is_not_written_over_packaged_table(self):
        with tempfile.TemporaryDirectory() as tmp:
            subdivisions = Path(tmp) / "empty.json"
            subdivisions.write_text('{"3166-2": []}', encoding="utf-8")
            packaged = Path(tmp) / "_table.py"
            with mock.patch.object(generator, "DEFAULT_OUTPUT", packaged):
                with self.assertRaises(DatasetError):
                    generator.generate(subdivisions, COUNTRIES, packaged)
            self.assertFalse(packaged.exists())

    def test_empty_selection_is_written_elsewhere(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "table.py"
            written = generator.generate(SUBDIVISIONS, COUNTRIES, output, only=["GB", "US"])
            self.assertEqual(len(exec_generated(written.read_text(encoding="utf-8"))["Code"]), 2)

            subdivisions = Path(tmp) / "empty.json"
            subdivisions.write_text('{"3166-2": []}', encoding="utf-8")
            generator.generate(subdivisions, COUNTRIES, output)
            namespace = exec_generated(output.read_text(encoding="utf-8"))
            self.assertEqual(len(namespace["Code"]), 0)

    def test_committed_table_is_up_to_date(self):
        """The committed _table.py matches a fresh render of data/."""
        data_dir = project_root / "data"
        variants = generator.build_variants(
            generator.load_subdivisions(data_dir / generator.SUBDIVISIONS_FILE),
            generator.load_countries(data_dir / generator.COUNTRIES_FILE),
        )
        expected = generator.render(variants)
        self.assertEqual(generator.DEFAULT_OUTPUT.read_text(encoding="utf-8"), expected)


if __name__ == "__main__":
    unittest.main()

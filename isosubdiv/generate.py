"""
Generates the Code enumeration and its metadata table from the ISO dataset.

Reads the ISO 3166-1 and ISO 3166-2 JSON documents, validates every
subdivision against them, and renders isosubdiv/_table.py from a Jinja2
template.
"""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from jinja2 import Environment, StrictUndefined, Undefined
from jinja2 import TemplateError as JinjaTemplateError

from .errors import DatasetError, GenerationError, TemplateError
from .models import CountryRecord, GeneratedVariant, SubdivisionRecord

PACKAGE_DIR = Path(__file__).parent
PROJECT_ROOT = PACKAGE_DIR.parent
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_OUTPUT = PACKAGE_DIR / "_table.py"
DEFAULT_TEMPLATE = PACKAGE_DIR / "templates" / "subdivision.py.j2"

SUBDIVISIONS_FILE = "iso_3166-2.json"
COUNTRIES_FILE = "iso_3166-1.json"


def _read_dataset(path: Path, key: str) -> List[Any]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            content = json.load(f)
    except OSError as e:
        raise DatasetError(f"Failed to read dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Failed to parse dataset {path}: {e}") from e

    if not isinstance(content, dict) or not isinstance(content.get(key), list):
        raise DatasetError(f"Dataset {path} has no '{key}' array")
    return content[key]


def load_subdivisions(path: Path) -> List[SubdivisionRecord]:
    """Load the subdivision records held under the "3166-2" key."""
    return [SubdivisionRecord.from_dict(entry) for entry in _read_dataset(path, "3166-2")]


def load_countries(path: Path) -> List[CountryRecord]:
    """Load the country records held under the "3166-1" key."""
    return [CountryRecord.from_dict(entry) for entry in _read_dataset(path, "3166-1")]


def build_variants(
    subdivisions: Iterable[SubdivisionRecord],
    countries: Iterable[CountryRecord],
    only: Optional[Sequence[str]] = None,
) -> List[GeneratedVariant]:
    """
    Turn subdivision records into template variants, in dataset order.

    Args:
        subdivisions: Records as loaded from the ISO 3166-2 dataset.
        countries: Records as loaded from the ISO 3166-1 dataset; every
            subdivision must belong to one of them.
        only: If provided, keep only subdivisions of these alpha-2 countries.

    Raises:
        DatasetError: On an unknown country, a duplicate code or identifier,
            or a parent that does not resolve within the same country.
    """
    known_countries = {country.alpha_2 for country in countries}
    if only is not None:
        unknown = sorted(set(only) - known_countries)
        if unknown:
            raise DatasetError(f"Unknown country codes requested: {', '.join(unknown)}")
        selected = set(only)
    else:
        selected = known_countries

    variants: List[GeneratedVariant] = []
    by_code: dict[str, GeneratedVariant] = {}
    by_identifier: dict[str, str] = {}
    for record in subdivisions:
        if record.country_code not in known_countries:
            raise DatasetError(f"Subdivision '{record.code}' references unknown country '{record.country_code}'")
        if record.country_code not in selected:
            continue

        variant = GeneratedVariant.from_record(record)
        if variant.code in by_code:
            raise DatasetError(f"Duplicate subdivision code '{variant.code}'")
        if variant.code_identifier in by_identifier:
            raise DatasetError(
                f"Codes '{by_identifier[variant.code_identifier]}' and '{variant.code}' "
                f"both map to identifier '{variant.code_identifier}'"
            )
        by_code[variant.code] = variant
        by_identifier[variant.code_identifier] = variant.code
        variants.append(variant)

    for variant in variants:
        if variant.parent is None:
            continue
        if variant.parent[:2] != variant.code[:2]:
            raise DatasetError(f"Subdivision '{variant.code}' has parent '{variant.parent}' in another country")
        if variant.parent not in by_code:
            raise DatasetError(f"Subdivision '{variant.code}' has unknown parent '{variant.parent}'")

    return variants


def _python_literal(value: Any) -> str:
    if isinstance(value, Undefined):
        # StrictUndefined raises UndefinedError here
        str(value)
    return repr(value)


class _FieldEnvironment(Environment):
    """
    Resolves `variant.field` and `variant["field"]` against the variant's
    fields only; methods and dunder attributes of a variant are undefined.
    """

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, dict):
            return self._field(obj, attribute)
        return super().getattr(obj, attribute)

    def getitem(self, obj: Any, argument: Any) -> Any:
        if isinstance(obj, dict):
            return self._field(obj, argument)
        return super().getitem(obj, argument)

    def _field(self, obj: dict, name: Any) -> Any:
        if isinstance(name, str) and name in obj:
            return obj[name]
        return self.undefined(obj=obj, name=name)


def _environment() -> Environment:
    env = _FieldEnvironment(
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["py"] = _python_literal
    return env


def render(variants: Sequence[GeneratedVariant], template: Optional[str] = None) -> str:
    """
    Render the generated module source.

    Args:
        variants: Variants in declaration order.
        template: Template text; defaults to templates/subdivision.py.j2.

    Raises:
        TemplateError: If the template fails to compile or references a
            name other than a GeneratedVariant field.
    """
    if template is None:
        template = DEFAULT_TEMPLATE.read_text(encoding="utf-8")

    env = _environment()
    try:
        compiled = env.from_string(template)
    except JinjaTemplateError as e:
        raise TemplateError(f"Failed to compile template: {e}") from e
    try:
        return compiled.render(subdivisions=[dataclasses.asdict(v) for v in variants])
    except JinjaTemplateError as e:
        raise TemplateError(f"Failed to render template: {e}") from e


def generate(
    subdivisions_path: Path,
    countries_path: Path,
    output_path: Path = DEFAULT_OUTPUT,
    template_path: Optional[Path] = None,
    only: Optional[Sequence[str]] = None,
) -> Path:
    """
    Run the whole pipeline and write the generated module.

    Nothing is written unless every step succeeds. An empty selection is
    never written over the packaged table, which the package imports.
    """
    subdivisions = load_subdivisions(subdivisions_path)
    countries = load_countries(countries_path)
    variants = build_variants(subdivisions, countries, only=only)
    if not variants and Path(output_path).resolve() == DEFAULT_OUTPUT.resolve():
        raise DatasetError(f"No subdivisions selected; refusing to overwrite {DEFAULT_OUTPUT} with an empty table")

    template = None
    if template_path is not None:
        try:
            template = Path(template_path).read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"Failed to read template {template_path}: {e}") from e
    source = render(variants, template)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(source, encoding="utf-8")
    return output_path


def main(argv: Sequence[str]) -> int:
    """
    Entrypoint for `python -m isosubdiv.generate [data_dir] [output] [--only US,FR]`.
    """
    args = list(argv)
    only = None
    if "--only" in args:
        index = args.index("--only")
        if index + 1 >= len(args):
            print("Error: --only needs a comma separated list of alpha-2 country codes (e.g. US,FR).")
            return 1
        only = [code.strip().upper() for code in args[index + 1].split(",") if code.strip()]
        del args[index : index + 2]

    data_dir = Path(args[0]) if len(args) > 0 else DEFAULT_DATA_DIR
    output_path = Path(args[1]) if len(args) > 1 else DEFAULT_OUTPUT

    print(f"Generating subdivision table from {data_dir}...")
    try:
        written = generate(
            data_dir / SUBDIVISIONS_FILE,
            data_dir / COUNTRIES_FILE,
            output_path,
            only=only,
        )
    except GenerationError as e:
        print(f"✗ Failed to generate subdivisions: {e}")
        return 1
    print(f"✓ Wrote {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

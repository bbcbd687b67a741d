"""
Responsible for fetching the ISO 3166 datasets and storing them to disk.

The generator only ever reads the stored copies under data/; this module is
how those copies are refreshed.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import requests
from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://salsa.debian.org/iso-codes-team/iso-codes/-/raw/main/data"
DATASETS = ("iso_3166-1.json", "iso_3166-2.json")


class Load:
    """
    Fetches the ISO 3166 JSON documents published by the iso-codes project
    and persists them unchanged.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30) -> None:
        load_dotenv()
        self.base_url = (base_url or os.getenv("ISO_CODES_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout

    def _build_url(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    def fetch(self, name: str) -> Dict[str, Any]:
        url = self._build_url(name)
        print("Fetching data from:", url)
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def store(self, data: Dict[str, Any], output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        return output_path

    def fetch_and_store(self, data_dir: Path, names: Iterable[str] = DATASETS) -> List[Path]:
        # Fetch everything before writing so a failed download leaves data/ untouched
        documents = {name: self.fetch(name) for name in names}
        return [self.store(data, Path(data_dir) / name) for name, data in documents.items()]


if __name__ == "__main__":
    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent.parent / "data"
    try:
        written = Load().fetch_and_store(data_dir)
    except requests.RequestException as e:
        print(f"✗ Failed to fetch ISO datasets: {e}")
        sys.exit(1)
    for path in written:
        print(f"✓ Stored {path}")

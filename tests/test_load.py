"""
Unit tests for Load with requests.get patched out.
"""

import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

import requests

# Add project root to path so we can import isosubdiv as a package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from isosubdiv.load import DEFAULT_BASE_URL, Load


def fake_response(payload, status=200):
    response = mock.Mock()
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return response


class TestLoad(unittest.TestCase):
    """Test cases for fetching and storing the ISO datasets."""

    def test_base_url_from_environment(self):
        with mock.patch("isosubdiv.load.load_dotenv"), mock.patch.dict(
            "os.environ", {"ISO_CODES_BASE_URL": "https://example.test/data/"}
        ):
            self.assertEqual(Load()._build_url("iso_3166-2.json"), "https://example.test/data/iso_3166-2.json")

    def test_default_base_url(self):
        with mock.patch("isosubdiv.load.load_dotenv"), mock.patch.dict("os.environ", {}, clear=True):
            self.assertEqual(Load().base_url, DEFAULT_BASE_URL)

    def test_fetch_and_store(self):
        documents = {
            "iso_3166-1.json": {"3166-1": [{"alpha_2": "US", "alpha_3": "USA", "name": "United States", "numeric": "840"}]},
            "iso_3166-2.json": {"3166-2": [{"code": "US-AZ", "name": "Arizona", "type": "State"}]},
        }

        def get(url, timeout):
            return fake_response(documents[url.rsplit("/", 1)[1]])

        with tempfile.TemporaryDirectory() as tmp, mock.patch("isosubdiv.load.requests.get", side_effect=get):
            with redirect_stdout(io.StringIO()):
                written = Load(base_url="https://example.test").fetch_and_store(Path(tmp))
            self.assertEqual([p.name for p in written], ["iso_3166-1.json", "iso_3166-2.json"])
            stored = json.loads((Path(tmp) / "iso_3166-2.json").read_text(encoding="utf-8"))
            self.assertEqual(stored, documents["iso_3166-2.json"])

    def test_http_error_writes_nothing(self):
        responses = [fake_response({"3166-1": []}), fake_response({}, status=404)]

        with tempfile.TemporaryDirectory() as tmp, mock.patch("isosubdiv.load.requests.get", side_effect=responses):
            with redirect_stdout(io.StringIO()), self.assertRaises(requests.HTTPError):
                Load(base_url="https://example.test").fetch_and_store(Path(tmp))
            self.assertEqual(list(Path(tmp).iterdir()), [])


if __name__ == "__main__":
    unittest.main()

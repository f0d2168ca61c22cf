"""Tests for the JSON export used by `--output`."""

import json

from conftest import fixture_json
from contentful_cma import Asset
from contentful_cma.adapters.json_exporter import export_entities_json


def test_export_can_be_loaded_back(tmp_path):
    asset = Asset.model_validate(fixture_json("asset_1.json"))
    output = tmp_path / "nested" / "assets.json"

    path = export_entities_json(entities=[asset], output_path=output)

    exported = json.loads(path.read_text(encoding="utf-8"))
    reloaded = Asset.model_validate(exported[0])
    assert reloaded.sys.id == "3HNzx9gvJScKku4UmcekYw"
    assert reloaded.sys.version == 2
    assert reloaded.fields.file["en-US"].file_name == asset.fields.file["en-US"].file_name

import json
import os
from pathlib import Path
from unittest import mock

import pytest

from core.config import AppSettings, default_data_dir
from core.resources_loader import (
    ResourceError,
    load_group_policy,
    load_ignore_list,
    load_monitor_list,
    load_spec_index,
    resolve_index_path,
)

INDEX = [
    {
        "url": "https://www.w3.org/TR/css-grid-2/",
        "shortname": "css-grid-2",
        "series": {"shortname": "css-grid", "currentSpecification": "css-grid-2"},
        "seriesVersion": "2",
        "nightly": {"url": "https://drafts.csswg.org/css-grid-2/", "repository": "https://github.com/w3c/csswg-drafts"},
        "release": {"url": "https://www.w3.org/TR/css-grid-2/"},
        "title": "CSS Grid Layout Module Level 2",
    },
    {
        "url": "https://html.spec.whatwg.org/multipage/",
        "shortname": "html",
        "series": {"shortname": "html"},
        "nightly": {"url": "https://html.spec.whatwg.org/multipage/"},
    },
]


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_spec_index(tmp_path):
    specs = load_spec_index(write_json(tmp_path / "index.json", INDEX))

    assert [s.series.shortname for s in specs] == ["css-grid", "html"]
    assert specs[0].series_version == "2"
    assert specs[0].release is not None and specs[0].release.url == "https://www.w3.org/TR/css-grid-2/"
    assert specs[1].release is None


def test_missing_file_raises_resource_error(tmp_path):
    with pytest.raises(ResourceError) as excinfo:
        load_spec_index(tmp_path / "index.json")
    assert excinfo.value.path == tmp_path / "index.json"


def test_invalid_json_raises_resource_error(tmp_path):
    path = tmp_path / "ignore.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ResourceError):
        load_ignore_list(path)


def test_index_with_wrong_shape_raises_resource_error(tmp_path):
    with pytest.raises(ResourceError):
        load_spec_index(write_json(tmp_path / "index.json", {"specs": []}))


def test_monitor_list_must_be_an_object(tmp_path):
    with pytest.raises(ResourceError):
        load_monitor_list(write_json(tmp_path / "monitor-repos.json", ["w3c/foo"]))


def test_shipped_data_files_load():
    ignore = load_ignore_list(default_data_dir() / "ignore.json")
    monitored = load_monitor_list(default_data_dir() / "monitor-repos.json")
    policy = load_group_policy(default_data_dir() / "groups.json")

    assert "w3c/web-platform-tests" in ignore.repos
    assert isinstance(monitored, dict)
    assert policy.community_groups


def test_resolve_index_path(tmp_path):
    with mock.patch.dict(os.environ, {}, clear=True):
        relative = AppSettings(_env_file=None, index_path=Path("index.json"))
        absolute = AppSettings(_env_file=None, index_path=tmp_path / "index.json")

    assert resolve_index_path(relative) == Path.cwd() / "index.json"
    assert resolve_index_path(absolute) == tmp_path / "index.json"

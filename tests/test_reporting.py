import os
import re
from unittest import mock

import pytest

from adapters.checklist_exporter import render_checklist, render_line
from adapters.github_actions import export_variable
from core.domain.models import Candidate


def test_render_line():
    line = render_line(Candidate(repo="w3c/example-spec", spec="https://example.com/spec/"))
    assert line == "- [ ] https://example.com/spec/ from [w3c/example-spec](https://github.com/w3c/example-spec)"


def test_render_checklist_joins_lines_in_order():
    checklist = render_checklist(
        [
            Candidate(repo="whatwg/dom", spec="https://dom.spec.whatwg.org/"),
            Candidate(repo="w3c/foo", spec="https://w3c.github.io/foo/"),
        ]
    )
    assert checklist.splitlines() == [
        "- [ ] https://dom.spec.whatwg.org/ from [whatwg/dom](https://github.com/whatwg/dom)",
        "- [ ] https://w3c.github.io/foo/ from [w3c/foo](https://github.com/w3c/foo)",
    ]


def test_render_checklist_empty():
    assert render_checklist([]) == ""


def test_export_variable_without_github_env():
    with mock.patch.dict(os.environ, {}, clear=True):
        assert export_variable("candidate_list", "- [ ] a") is None
        assert os.environ["candidate_list"] == "- [ ] a"


def test_export_variable_appends_multiline_value_to_github_env(tmp_path):
    env_file = tmp_path / "github_env"
    env_file.write_text("EXISTING=1\n", encoding="utf-8")
    value = "- [ ] https://a.example/ from [w3c/a](https://github.com/w3c/a)\n- [ ] https://b.example/ from [w3c/b](https://github.com/w3c/b)"

    with mock.patch.dict(os.environ, {"GITHUB_ENV": str(env_file)}, clear=True):
        assert export_variable("candidate_list", value) == env_file
        assert os.environ["candidate_list"] == value

    content = env_file.read_text(encoding="utf-8")
    match = re.fullmatch(r"EXISTING=1\ncandidate_list<<(ghadelimiter_[0-9a-f-]+)\n(.*)\n\1\n", content, re.S)
    assert match is not None
    assert match.group(2) == value


def test_export_variable_rejects_values_containing_the_delimiter(tmp_path):
    with (
        mock.patch.dict(os.environ, {"GITHUB_ENV": str(tmp_path / "env")}, clear=True),
        mock.patch("adapters.github_actions.uuid.uuid4", return_value="fixed"),
    ):
        with pytest.raises(ValueError):
            export_variable("candidate_list", "oops ghadelimiter_fixed")

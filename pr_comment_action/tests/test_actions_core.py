#
#  Copyright © 2021-2024 Mergify SAS
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

import pathlib

import pytest

from pr_comment_action import actions_core


def test_get_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_GITHUB-TOKEN", "  secret  ")
    monkeypatch.setenv("INPUT_MY_INPUT", "value")

    core = actions_core.ActionsCore()
    assert core.get_input("github-token") == "secret"
    assert core.get_input("github-token", trim_whitespace=False) == "  secret  "
    assert core.get_input("my input") == "value"


def test_get_input_missing() -> None:
    core = actions_core.ActionsCore()
    assert not core.get_input("github-token")

    with pytest.raises(
        actions_core.InputNotSetError,
        match="Input required and not supplied: github-token",
    ):
        core.get_input("github-token", required=True)


def test_set_output(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: pathlib.Path,
) -> None:
    output = tmp_path / "output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))

    core = actions_core.ActionsCore()
    core.set_output("comment-id", 123)
    core.set_output("name", "value")

    assert output.read_text() == "comment-id=123\nname=value\n"


def test_set_output_multiline(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: pathlib.Path,
) -> None:
    output = tmp_path / "output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))

    actions_core.ActionsCore().set_output("body", "line1\nline2")

    name_line, line1, line2, end, trailing = output.read_text().split("\n")
    delimiter = name_line.removeprefix("body<<")
    assert delimiter.startswith("ghadelimiter_")
    assert (line1, line2) == ("line1", "line2")
    assert end == delimiter
    assert not trailing


def test_set_output_without_output_file(capsys: pytest.CaptureFixture[str]) -> None:
    actions_core.ActionsCore().set_output("comment-id", 123)

    assert capsys.readouterr().out == "::set-output name=comment-id::123\n"


def test_set_failed(capsys: pytest.CaptureFixture[str]) -> None:
    core = actions_core.ActionsCore()
    assert not core.failed
    assert core.exit_code == 0

    core.set_failed("100% broken\nsee logs")

    assert core.failed
    assert core.exit_code == 1
    assert capsys.readouterr().out == "::error::100%25 broken%0Asee logs\n"


def test_debug(capsys: pytest.CaptureFixture[str]) -> None:
    core = actions_core.ActionsCore()
    core.debug("[bold]not markup[/]")

    assert capsys.readouterr().out == "::debug::[bold]not markup[/]\n"
    assert not core.failed

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

from __future__ import annotations

import json
import os
import typing
import uuid

from pr_comment_action import console


def _to_command_value(value: typing.Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class InputNotSetError(Exception):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class ActionsCore:
    """Read inputs and report results the way a GitHub Actions runner expects.

    Inputs come from ``INPUT_<NAME>`` environment variables, outputs are
    appended to the ``GITHUB_OUTPUT`` file and failures are emitted as
    ``::error::`` workflow commands.
    """

    def __init__(self) -> None:
        self.exit_code = 0

    @property
    def failed(self) -> bool:
        return self.exit_code != 0

    def get_input(
        self,
        name: str,
        *,
        required: bool = False,
        trim_whitespace: bool = True,
    ) -> str:
        value = os.getenv(f"INPUT_{name.replace(' ', '_').upper()}", "")
        if required and not value:
            raise InputNotSetError(name)
        if trim_whitespace:
            return value.strip()
        return value

    def set_output(self, name: str, value: typing.Any) -> None:
        output = _to_command_value(value)
        output_path = os.getenv("GITHUB_OUTPUT")
        if not output_path:
            # Runners older than 2.297 only understand the stdout command
            self._issue_command(f"set-output name={name}", output)
            return

        if "\n" in output:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{output}\n{delimiter}\n"
        else:
            line = f"{name}={output}\n"

        with open(output_path, "a", encoding="utf-8") as f:  # noqa: PTH123
            f.write(line)

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self.error(message)

    def error(self, message: str) -> None:
        self._issue_command("error", message)

    def debug(self, message: str) -> None:
        self._issue_command("debug", message)

    @staticmethod
    def _issue_command(command: str, message: str) -> None:
        console.out(
            f"::{command}::{_escape_data(message)}",
            highlight=False,
        )

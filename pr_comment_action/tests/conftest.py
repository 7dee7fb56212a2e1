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
import pytest

from pr_comment_action import utils


GITHUB_ENV_VARS = (
    "GITHUB_API_URL",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_OUTPUT",
    "GITHUB_REPOSITORY",
    "INPUT_GITHUB-TOKEN",
    "RUNNER_DEBUG",
)


@pytest.fixture(autouse=True)
def _unset_github_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Tests may run inside a GitHub Actions job
    for env in GITHUB_ENV_VARS:
        monkeypatch.delenv(env, raising=False)


@pytest.fixture(autouse=True)
def _reset_debug() -> None:
    utils.set_debug(False)

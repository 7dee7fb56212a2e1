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

import typing

from pr_comment_action import utils


if typing.TYPE_CHECKING:
    from pr_comment_action import event
    from pr_comment_action import github_types


DEFAULT_GITHUB_SERVER = "https://api.github.com"


class GitHubClient:
    def __init__(self, github_server: str, token: str) -> None:
        self.github_server = github_server
        self.token = token

    async def create_comment(
        self,
        *,
        issue_number: int,
        owner: str,
        repo: str,
        body: str,
    ) -> github_types.CommentResult:
        async with utils.get_github_http_client(
            self.github_server,
            self.token,
        ) as client:
            resp = await client.post(
                f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
                json={"body": body},
            )
        return {"data": resp.json()}


class ActionsGitHub:
    """Event context and API client factory of a GitHub Actions run."""

    def __init__(
        self,
        context: event.Context,
        github_server: str = DEFAULT_GITHUB_SERVER,
    ) -> None:
        self.context = context
        self.github_server = github_server

    def get_octokit(self, token: str) -> GitHubClient:
        return GitHubClient(self.github_server, token)

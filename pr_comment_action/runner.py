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

from pr_comment_action import comment
from pr_comment_action import err_console


if typing.TYPE_CHECKING:
    from pr_comment_action import event
    from pr_comment_action import github_types


TOKEN_INPUT = "github-token"
COMMENT_ID_OUTPUT = "comment-id"
NOT_A_PULL_REQUEST_MSG = "This action only runs on pull requests"


class Core(typing.Protocol):
    def get_input(self, name: str) -> str: ...

    def set_failed(self, message: str) -> None: ...

    def set_output(self, name: str, value: typing.Any) -> None: ...


class CommentsClient(typing.Protocol):
    async def create_comment(
        self,
        *,
        issue_number: int,
        owner: str,
        repo: str,
        body: str,
    ) -> github_types.CommentResult: ...


class GitHub(typing.Protocol):
    @property
    def context(self) -> event.Context: ...

    def get_octokit(self, token: str) -> CommentsClient: ...


def get_error_message(exc: BaseException) -> str:
    if len(exc.args) == 1 and isinstance(exc.args[0], str) and exc.args[0]:
        return exc.args[0]
    return str(exc) or type(exc).__name__


async def run(core: Core, github: GitHub) -> None:
    try:
        token = core.get_input(TOKEN_INPUT)

        pull_request = github.context.payload.pull_request
        if pull_request is None:
            core.set_failed(NOT_A_PULL_REQUEST_MSG)
            return

        body = comment.format_pr_comment(
            pull_request.number,
            pull_request.user.login,
            pull_request.title,
        )

        octokit = github.get_octokit(token)
        result = await octokit.create_comment(
            issue_number=pull_request.number,
            owner=github.context.repo.owner,
            repo=github.context.repo.repo,
            body=body,
        )
        core.set_output(COMMENT_ID_OUTPUT, result["data"]["id"])
    except Exception as e:  # noqa: BLE001
        message = get_error_message(e)
        err_console.print(
            message,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        core.set_failed(message)

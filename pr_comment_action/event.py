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

import dataclasses
import os
import pathlib

import aiofiles
import pydantic

from pr_comment_action import utils


class ContextError(Exception):
    pass


class User(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    login: str


class PullRequest(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    number: int
    title: str = ""
    user: User


class Repository(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    name: str | None = None
    owner: User | None = None


class GitHubEvent(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    pull_request: PullRequest | None = None
    repository: Repository | None = None


@dataclasses.dataclass(frozen=True)
class RepositoryCoordinates:
    owner: str
    repo: str


@dataclasses.dataclass(frozen=True)
class Context:
    """Triggering event of the running workflow and the repository it belongs to."""

    payload: GitHubEvent
    repo: RepositoryCoordinates
    event_name: str | None = None

    @classmethod
    async def from_env(cls) -> Context:
        event_name = os.getenv("GITHUB_EVENT_NAME")
        event_path = os.getenv("GITHUB_EVENT_PATH")

        if event_path and pathlib.Path(event_path).is_file():
            async with aiofiles.open(event_path) as f:
                raw = await f.read()
            try:
                payload = GitHubEvent.model_validate_json(raw)
            except pydantic.ValidationError as e:
                msg = f"invalid event payload in `{event_path}`: {e}"
                raise ContextError(msg) from e
        else:
            payload = GitHubEvent()

        return cls(
            payload=payload,
            repo=_get_repository_coordinates(payload),
            event_name=event_name,
        )


def _get_repository_coordinates(payload: GitHubEvent) -> RepositoryCoordinates:
    if repository := os.getenv("GITHUB_REPOSITORY"):
        try:
            owner, repo = utils.get_slug(repository)
        except ValueError as e:
            raise ContextError(str(e)) from e
        return RepositoryCoordinates(owner=owner, repo=repo)

    if (
        payload.repository is not None
        and payload.repository.owner is not None
        and payload.repository.name
    ):
        return RepositoryCoordinates(
            owner=payload.repository.owner.login,
            repo=payload.repository.name,
        )

    msg = "context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'"
    raise ContextError(msg)

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

import asyncio
import functools
import typing

import httpx

from pr_comment_action import VERSION
from pr_comment_action import console


_DEBUG = False


def set_debug(debug: bool) -> None:
    global _DEBUG  # noqa: PLW0603
    _DEBUG = debug


def is_debug() -> bool:
    return _DEBUG


class GitHubAPIError(Exception):
    def __init__(
        self,
        status_code: int,
        message: str,
        errors: list[str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"HTTPError {self.status_code}: {self.message}"
        if self.errors:
            text += "\n" + "\n".join(f"* {e}" for e in self.errors)
        return text


async def check_for_status(response: httpx.Response) -> None:
    if response.status_code < 400:
        return

    await response.aread()
    try:
        data = response.json()
    except ValueError:
        data = {}

    if not isinstance(data, dict):
        data = {}

    if is_debug():
        console.print(f"url: {response.request.url}", style="red", markup=False)
        console.print(
            f"data: {response.request.content.decode()}",
            style="red",
            markup=False,
        )

    raise GitHubAPIError(
        response.status_code,
        data.get("message") or response.reason_phrase,
        [
            e.get("message") or str(e) if isinstance(e, dict) else str(e)
            for e in data.get("errors", [])
        ],
    )


def get_slug(repository: str) -> tuple[str, str]:
    owner, sep, repo = repository.partition("/")
    if not sep or not owner or not repo:
        msg = f"invalid repository `{repository}`, expected `owner/repo`"
        raise ValueError(msg)
    return owner, repo.removesuffix(".git")


# NOTE: must be async for httpx
async def log_httpx_request(request: httpx.Request) -> None:  # noqa: RUF029
    console.print(
        f"[purple]DEBUG: request: {request.method} {request.url} - Waiting for response[/]",
    )


# NOTE: must be async for httpx
async def log_httpx_response(response: httpx.Response) -> None:
    request = response.request
    await response.aread()
    elapsed = response.elapsed.total_seconds()
    console.print(
        f"[purple]DEBUG: response: {request.method} {request.url} - Status {response.status_code} - Elasped {elapsed} s[/]",
    )


def get_github_http_client(github_server: str, token: str) -> httpx.AsyncClient:
    event_hooks: typing.Mapping[str, list[typing.Callable[..., typing.Any]]] = {
        "request": [],
        "response": [check_for_status],
    }
    if is_debug():
        event_hooks["request"].insert(0, log_httpx_request)
        event_hooks["response"].insert(0, log_httpx_response)

    return httpx.AsyncClient(
        base_url=github_server,
        headers={
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": f"pr_comment_action/{VERSION}",
            "Authorization": f"token {token}",
        },
        event_hooks=event_hooks,
        follow_redirects=True,
        timeout=5.0,
    )


P = typing.ParamSpec("P")
R = typing.TypeVar("R")


def run_with_asyncio(
    func: typing.Callable[
        P,
        typing.Coroutine[typing.Any, typing.Any, R],
    ],
) -> functools._Wrapped[
    P,
    typing.Coroutine[typing.Any, typing.Any, R],
    P,
    R,
]:
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        result = func(*args, **kwargs)
        return asyncio.run(result)

    return wrapper

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

import os
import sys

import click

from pr_comment_action import VERSION
from pr_comment_action import actions_core
from pr_comment_action import client
from pr_comment_action import event
from pr_comment_action import runner
from pr_comment_action import utils


@click.command(help="Post a review-ready comment on the triggering pull request")
@click.option(
    "--github-server",
    help="URL of the GitHub API",
    envvar="GITHUB_API_URL",
    default=client.DEFAULT_GITHUB_SERVER,
    show_default=True,
)
@click.option("--debug", is_flag=True, default=False, help="debug mode")
@click.version_option(VERSION)
@utils.run_with_asyncio
async def cli(github_server: str, debug: bool) -> None:
    utils.set_debug(debug or os.getenv("RUNNER_DEBUG") == "1")

    core = actions_core.ActionsCore()
    try:
        context = await event.Context.from_env()
    except event.ContextError as e:
        raise click.ClickException(str(e)) from e

    if utils.is_debug():
        core.debug(
            f"event: {context.event_name} - repository: {context.repo.owner}/{context.repo.repo}",
        )

    await runner.run(core, client.ActionsGitHub(context, github_server))
    sys.exit(core.exit_code)


def main() -> None:
    cli()

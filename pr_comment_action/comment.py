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


BOT_SIGNATURE = "GitHub Action Bot"
READY_FOR_REVIEW = "Ready for review"


def format_pr_comment(pull_request_number: int, author_login: str, title: str) -> str:
    # The title is user content and is rendered as-is
    return (
        f"## 👋 Hello @{author_login}!\n"
        "\n"
        f"Thanks for opening **PR #{pull_request_number}**: {title}\n"
        "\n"
        f"**Status:** ✅ {READY_FOR_REVIEW}\n"
        "\n"
        "---\n"
        f"_This comment was posted by {BOT_SIGNATURE}._\n"
    )

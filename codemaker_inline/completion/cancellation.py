# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Cooperative cancellation for completion requests."""

import asyncio
from typing import Optional


class CancellationToken:
    """Signals that the host no longer wants a pending completion.

    The host cancels the token when the cursor moves or typing continues.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        """Wait until the token is cancelled."""
        await self._event.wait()


async def delay_or_cancel(token: Optional[CancellationToken], delay: float) -> bool:
    """Sleep for ``delay`` seconds unless the token is cancelled first.

    Args:
        token: Cancellation token (None is never cancelled)
        delay: Delay in seconds

    Returns:
        True if the token was cancelled
    """
    if token is None:
        await asyncio.sleep(delay)
        return False
    if token.is_cancellation_requested:
        return True

    sleeper = asyncio.ensure_future(asyncio.sleep(delay))
    waiter = asyncio.ensure_future(token.wait())
    try:
        await asyncio.wait({sleeper, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (sleeper, waiter):
            if not task.done():
                task.cancel()
    return token.is_cancellation_requested

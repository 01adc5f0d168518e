from __future__ import annotations

import asyncio
import random
from typing import Optional, Sequence

import structlog

from moderation_console.client import LoginClient
from moderation_console.enums import AuthPhase
from moderation_console.errors import AuthenticationFailed
from moderation_console.schemas import Credential, Session

logger = structlog.get_logger(__name__)


def select_credential(pool: Sequence[Credential], rng: Optional[random.Random] = None) -> Credential:
    """Pick one credential uniformly at random from ``pool``.

    The pool is a rotation list of shared reviewer accounts; selection spreads
    sessions across them and carries no security meaning.
    """
    if not pool:
        raise AuthenticationFailed("Credential pool is empty")
    chooser = rng or random
    return pool[chooser.randrange(len(pool))]


class SessionAuthenticator:
    def __init__(
        self,
        client: LoginClient,
        pool: Sequence[Credential],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.client = client
        self.pool = tuple(pool)
        self.rng = rng
        self.phase = AuthPhase.PENDING
        self.username: Optional[str] = None
        self.session: Optional[Session] = None
        self.error: Optional[AuthenticationFailed] = None
        self._task: Optional[asyncio.Task] = None

    async def authenticate(self) -> Session:
        # One login per authenticator: every caller awaits the same task.
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._login_once())
        return await asyncio.shield(self._task)

    async def _login_once(self) -> Session:
        self.phase = AuthPhase.AUTHENTICATING
        try:
            credential = select_credential(self.pool, self.rng)
            self.username = credential.username
            logger.info("login_started", username=credential.username)
            token = await self.client.login(credential)
        except AuthenticationFailed as exc:
            self.phase = AuthPhase.FAILED
            self.error = exc
            logger.error("login_failed", username=self.username, error=str(exc))
            raise

        self.session = Session(token=token, username=credential.username)
        self.phase = AuthPhase.AUTHENTICATED
        logger.info("login_succeeded", username=credential.username)
        return self.session

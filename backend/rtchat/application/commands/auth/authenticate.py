"""Authenticate Command - exchange username/password for a bearer credential."""

from dataclasses import dataclass

from rtchat.application.common.interfaces import Command, CommandHandler
from rtchat.application.services.authorization_gate import AuthorizationGate
from rtchat.domain.entities.user import User


@dataclass
class AuthenticateResult:
    user: User
    token: str


@dataclass(frozen=True)
class AuthenticateCommand(Command[AuthenticateResult]):
    username: str
    password: str


class AuthenticateHandler(CommandHandler[AuthenticateResult]):
    def __init__(self, gate: AuthorizationGate):
        self._gate = gate

    async def execute(self, command: AuthenticateCommand) -> AuthenticateResult:
        user = await self._gate.authenticate(command.username, command.password)
        return AuthenticateResult(user=user, token=self._gate.issue_credential(user))

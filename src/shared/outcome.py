"""Command outcome boundary.

Callers at the edge of the system (an HTTP adapter, a message consumer, a
script) submit commands through ``dispatch()`` and receive a
``CommandOutcome`` instead of an exception, so every failure mode is visible
in the return value and only a stable code ever reaches the user.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from shared.errors import INFRASTRUCTURE_FAILURE, INVALID_INPUT, NOT_FOUND, describe

logger = structlog.get_logger(__name__)


class OutcomeKind(Enum):
    OK = "Ok"
    RULE_VIOLATION = "RuleViolation"
    NOT_FOUND = "NotFound"
    INFRASTRUCTURE_FAILURE = "InfrastructureFailure"


@dataclass(frozen=True)
class CommandOutcome:
    """Result of processing one command."""

    kind: OutcomeKind
    value: Any = None
    code: str | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.OK

    @classmethod
    def success(cls, value: Any = None) -> "CommandOutcome":
        return cls(kind=OutcomeKind.OK, value=value)

    @classmethod
    def failure(cls, kind: OutcomeKind, code: str) -> "CommandOutcome":
        return cls(kind=kind, code=code, detail=describe(code))


def dispatch(command) -> CommandOutcome:
    """Process ``command`` synchronously in the active domain."""
    command_name = type(command).__name__
    try:
        value = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        # Field-level validation from Protean carries no code of its own
        code = getattr(exc, "code", INVALID_INPUT)
        logger.info("Command rejected", command=command_name, code=code, messages=exc.messages)
        return CommandOutcome.failure(OutcomeKind.RULE_VIOLATION, code)
    except ObjectNotFoundError as exc:
        code = getattr(exc, "code", NOT_FOUND)
        logger.info("Command target not found", command=command_name, code=code)
        return CommandOutcome.failure(OutcomeKind.NOT_FOUND, code)
    except Exception:
        logger.exception("Command failed", command=command_name)
        return CommandOutcome.failure(OutcomeKind.INFRASTRUCTURE_FAILURE, INFRASTRUCTURE_FAILURE)

    return CommandOutcome.success(value)

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from .errors import BadStatusCode, BalanceFailed, MalformedEnvelope

logger = logging.getLogger(__name__)

STATUS_OK = "1"
STATUS_NOTOK = "0"


class StatusPolicy(Enum):
    """How much an endpoint's status field is trusted."""

    # "1" is success, "0" means no balance data, anything else is an error.
    AUTHORITATIVE = "authoritative"
    # List endpoints answer "0" for empty listings; the result list wins.
    ADVISORY = "advisory"


@dataclass(frozen=True)
class Envelope:
    status: str
    message: str
    result: Any

    @classmethod
    def from_payload(cls, payload: Any) -> "Envelope":
        if not isinstance(payload, dict):
            raise MalformedEnvelope("payload is not a JSON object")
        status = payload.get("status")
        if not isinstance(status, str):
            raise MalformedEnvelope("missing or non-string status")
        if "result" not in payload:
            raise MalformedEnvelope("missing result")
        message = payload.get("message")
        return cls(
            status=status,
            message=message if isinstance(message, str) else "",
            result=payload["result"],
        )

    def interpret(self, policy: StatusPolicy) -> Any:
        if policy is StatusPolicy.AUTHORITATIVE:
            return self._interpret_authoritative()
        return self._interpret_advisory()

    def _interpret_authoritative(self) -> Any:
        if self.status == STATUS_OK:
            return self.result
        if self.status == STATUS_NOTOK:
            raise BalanceFailed(self._detail() or self.message)
        raise BadStatusCode(self.status, self.message, self._detail())

    def _interpret_advisory(self) -> List[Any]:
        if isinstance(self.result, list):
            if self.status != STATUS_OK:
                logger.debug(
                    "Ignoring status %r (%s) on list response with %d rows",
                    self.status,
                    self.message,
                    len(self.result),
                )
            return self.result
        # Errors such as an invalid API key put their text in result.
        raise BadStatusCode(self.status, self.message, self._detail())

    def _detail(self) -> str:
        if isinstance(self.result, str):
            return self.result
        return ""

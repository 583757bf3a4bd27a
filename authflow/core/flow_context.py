from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import uuid

@dataclass(frozen=True)
class FlowContext:
    flow: str
    flow_id: uuid.UUID

    def log_extra(self, **fields: Any) -> dict[str, Any]:
        return {"flow": self.flow, "flow_id": str(self.flow_id), **fields}

def new_flow_context(flow: str) -> FlowContext:
    # one id per flow instance, so interleaved flows can be told apart in logs
    return FlowContext(flow=flow, flow_id=uuid.uuid4())

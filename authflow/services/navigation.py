import logging
from typing import Protocol

log = logging.getLogger("authflow")

class Navigator(Protocol):
    def navigate(self, path: str) -> None:
        ...

class DevNavigator:
    def navigate(self, path: str) -> None:
        log.info("navigate", extra={"path": path})

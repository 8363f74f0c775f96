"""
Contexto efímero de una petición: lo que ambos middlewares registran en el log.
"""

from dataclasses import dataclass

from starlette.types import Scope


@dataclass(frozen=True)
class RequestContext:
    method: str
    ip: str
    url: str

    @classmethod
    def from_scope(cls, scope: Scope) -> "RequestContext":
        client = scope.get("client")
        ip = f"{client[0]}:{client[1]}" if client else ""
        return cls(method=scope["method"], ip=ip, url=scope["path"])

    def as_log_fields(self) -> dict[str, str]:
        return {"method": self.method, "ip": self.ip, "url": self.url}

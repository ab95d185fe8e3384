import json
from typing import Any
from fastapi.responses import JSONResponse

class PrettyJSONResponse(JSONResponse):
    """JSONResponse indentée (2 espaces), pour un rapport lisible tel quel dans un navigateur."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")

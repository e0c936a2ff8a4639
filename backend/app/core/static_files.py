from __future__ import annotations

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class FallbackStaticFiles(StaticFiles):
    """Static files that answer unknown paths with a default document.

    Lets a single-page site own its client-side routes: any GET that does not
    hit a file gets ``index_file`` with status 200.
    """

    def __init__(self, *, directory: str, index_file: str = "index.html", **kwargs) -> None:
        super().__init__(directory=directory, html=True, **kwargs)
        self.index_file = index_file

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response(self.index_file, scope)

        if response.status_code == 404:
            return await super().get_response(self.index_file, scope)
        return response

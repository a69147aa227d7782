"""BaseService — shared foundation for nestsort services.

Every service receives the resolved :class:`NestsortSettings` at
construction time and reads its defaults from there.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from nestsort.services.result import ServiceResult

if TYPE_CHECKING:
    from nestsort.config.settings import NestsortSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SortService(BaseService):
            def sort(self, text: str) -> ServiceResult:
                data, error = self._parse("sort", text)
                ...
    """

    def __init__(self, settings: NestsortSettings) -> None:
        self._settings = settings

    @staticmethod
    def _parse(op: str, text: str) -> tuple[Any, ServiceResult | None]:
        """Decode JSON input, returning ``(data, None)`` or ``(None, failure)``."""
        try:
            return json.loads(text), None
        except json.JSONDecodeError as exc:
            return None, ServiceResult.failure(
                op,
                "INVALID_JSON",
                f"Input is not valid JSON: {exc.msg}",
                line=exc.lineno,
                column=exc.colno,
            )

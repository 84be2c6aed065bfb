from __future__ import annotations
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from atium.services.schemas.conversion import ConversionRequest, ConversionResponse


class ConversionPort(Protocol):
    def convert(self, request: ConversionRequest) -> ConversionResponse: ...

"""PageSpeed Insights audit engine.

Calls the PSI v5 API, which runs Lighthouse on Google's infrastructure and
returns the LHR under ``lighthouseResult``.
"""

from dataclasses import dataclass

import httpx
import structlog
from pydantic import ValidationError

from analyzer.engine.base import AuditEngine
from analyzer.engine.lhr import LighthouseResult
from analyzer.exceptions import EngineError
from analyzer.models import Category

logger = structlog.get_logger(__name__)

PAGESPEED_API_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"


@dataclass
class PageSpeedConfig:
    """Configuration for the PageSpeed Insights API."""

    api_key: str | None = None
    api_url: str = PAGESPEED_API_URL
    strategy: str = "mobile"
    timeout_seconds: float = 90.0


class PageSpeedEngine(AuditEngine):
    """Audit engine backed by the PageSpeed Insights API."""

    name = "pagespeed"

    def __init__(
        self,
        config: PageSpeedConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or PageSpeedConfig()
        self._transport = transport

    def build_params(self, url: str, category: Category) -> dict[str, str]:
        params = {
            "url": url,
            "category": category.value.upper(),
            "strategy": self.config.strategy,
        }
        if self.config.api_key:
            params["key"] = self.config.api_key
        return params

    async def run(self, url: str, category: Category) -> LighthouseResult:
        params = self.build_params(url, category)
        logger.debug("pagespeed_request", url=url, category=category.value)

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(self.config.api_url, params=params)
        except httpx.TimeoutException as e:
            raise EngineError(
                self.name, f"request timed out after {self.config.timeout_seconds}s"
            ) from e
        except httpx.HTTPError as e:
            raise EngineError(self.name, f"request failed: {e}") from e

        if response.status_code != 200:
            raise EngineError(self.name, f"HTTP {response.status_code}: {response.text[:500]}")

        try:
            data = response.json()
        except ValueError as e:
            raise EngineError(self.name, "response is not JSON") from e

        lhr = data.get("lighthouseResult") if isinstance(data, dict) else None
        if lhr is None:
            raise EngineError(self.name, "response has no lighthouseResult")

        try:
            return LighthouseResult.from_json(lhr)
        except ValidationError as e:
            raise EngineError(self.name, f"unreadable report: {e}") from e

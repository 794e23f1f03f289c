"""Lighthouse CLI audit engine.

Runs the ``lighthouse`` binary once per category and reads the JSON report
from stdout. Each run launches its own headless Chrome, so concurrent runs
share nothing.
"""

import asyncio
import contextlib
from dataclasses import dataclass, field

import structlog
from pydantic import ValidationError

from analyzer.engine.base import AuditEngine
from analyzer.engine.lhr import LighthouseResult
from analyzer.exceptions import EngineError
from analyzer.models import Category

logger = structlog.get_logger(__name__)


@dataclass
class LighthouseConfig:
    """Configuration for the Lighthouse CLI."""

    binary: str = "lighthouse"
    chrome_flags: list[str] = field(
        default_factory=lambda: ["--headless=new", "--no-sandbox", "--disable-gpu"]
    )
    timeout_seconds: float = 120.0
    extra_args: list[str] = field(default_factory=list)


class LighthouseCLIEngine(AuditEngine):
    """Audit engine backed by a local Lighthouse install."""

    name = "lighthouse"

    def __init__(self, config: LighthouseConfig | None = None):
        self.config = config or LighthouseConfig()

    def build_command(self, url: str, category: Category) -> list[str]:
        cmd = [
            self.config.binary,
            url,
            "--output=json",
            "--output-path=stdout",
            "--quiet",
            f"--only-categories={category.lighthouse_id}",
        ]
        if self.config.chrome_flags:
            cmd.append(f"--chrome-flags={' '.join(self.config.chrome_flags)}")
        cmd.extend(self.config.extra_args)
        return cmd

    async def run(self, url: str, category: Category) -> LighthouseResult:
        cmd = self.build_command(url, category)
        logger.debug("lighthouse_starting", url=url, category=category.value)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise EngineError(self.name, f"binary not found: {self.config.binary}") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self.config.timeout_seconds
            )
        except TimeoutError as e:
            raise EngineError(
                self.name, f"timed out after {self.config.timeout_seconds}s"
            ) from e
        finally:
            # Timeout or cancellation: never leave Chrome running
            if proc.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
                await proc.wait()

        if proc.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()[-500:]
            raise EngineError(self.name, f"exited with code {proc.returncode}: {detail}")

        try:
            result = LighthouseResult.from_json(stdout)
        except ValidationError as e:
            raise EngineError(self.name, f"unreadable report: {e}") from e

        logger.debug(
            "lighthouse_complete",
            url=url,
            category=category.value,
            lighthouse_version=result.lighthouse_version,
        )
        return result

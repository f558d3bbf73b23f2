# File: remote_sme/engine.py
"""remote_sme.engine: orchestration layer that runs fetch → locate → fetch → render."""

from __future__ import annotations

import asyncio
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from aiohttp import ClientSession

from remote_sme.artifact import BrowserLaunchError, open_in_browser, write_temp_html
from remote_sme.config import ExplorerConfig
from remote_sme.fetcher import Fetcher
from remote_sme.locator import locate
from remote_sme.logger import logger
from remote_sme.models import (
    ExitStatus,
    FetchFailure,
    InvalidReference,
    PipelineError,
    PipelineOutcome,
    SourceMapNotFound,
    Stage,
)
from remote_sme.utils import InvalidArgument, parse_absolute_url
from remote_sme.visualizer import SourceMapExplorerCommand, Visualize, VisualizationError

__all__ = ["Pipeline", "run"]

Reporter = Callable[[str], None]


class Pipeline:
    """Facade for the CLI and tests: one script URL in, one visualization out.

    Every collaborator can be replaced; by default the HTML is rendered by the
    ``source-map-explorer`` command, written to a temp file and opened in the
    default browser.
    """

    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        *,
        visualize: Optional[Visualize] = None,
        write_artifact: Optional[Callable[[str], Path]] = None,
        open_browser: Optional[Callable[[Path], None]] = None,
        progress: Optional[Reporter] = None,
        report_error: Optional[Reporter] = None,
    ) -> None:
        self.config = config or ExplorerConfig()
        self.visualize = visualize or SourceMapExplorerCommand.from_config(self.config)
        self.write_artifact = write_artifact or partial(
            write_temp_html, directory=self.config.output_dir
        )
        self.open_browser = open_browser or open_in_browser
        self.progress = progress or logger.info
        self.report_error = report_error or logger.error

    def _fail(self, outcome: PipelineOutcome, stage: Stage, message: str) -> PipelineOutcome:
        outcome.error = PipelineError(stage, message)
        self.report_error(str(outcome.error))
        return outcome

    async def execute(self, raw_url: str) -> PipelineOutcome:
        """Run every step once; stop at the first failure."""
        outcome = PipelineOutcome()
        try:
            script_url = parse_absolute_url(raw_url)
        except InvalidArgument as exc:
            return self._fail(outcome, Stage.ARGUMENT, str(exc))

        async with ClientSession() as session:
            fetcher = Fetcher(session, self.config)

            self.progress(f"Fetching {script_url}...")
            script = await fetcher.fetch(script_url)
            outcome.fetches += 1
            if isinstance(script, FetchFailure):
                return self._fail(outcome, Stage.FETCH_SCRIPT, str(script))

            location = locate(script.body, script_url, self.config.window_size)
            if isinstance(location, (SourceMapNotFound, InvalidReference)):
                return self._fail(outcome, Stage.LOCATE, str(location))
            logger.debug("sourceMappingURL %r -> %s", location.reference, location.url)

            self.progress(f"Fetching {location.url}...")
            source_map = await fetcher.fetch(location.url)
            outcome.fetches += 1
            if isinstance(source_map, FetchFailure):
                return self._fail(outcome, Stage.FETCH_MAP, str(source_map))

        return self._render(outcome, script.body, source_map.body)

    def _render(self, outcome: PipelineOutcome, script: bytes, source_map: bytes) -> PipelineOutcome:
        self.progress("Generating visualization HTML...")
        try:
            html = self.visualize(script, source_map)
        except VisualizationError as exc:
            return self._fail(outcome, Stage.VISUALIZE, str(exc))

        try:
            outcome.artifact = self.write_artifact(html)
        except OSError as exc:
            return self._fail(outcome, Stage.WRITE, f"Unable to write visualization: {exc}")

        if not self.config.open_browser:
            self.progress(f"Visualization written to {outcome.artifact}")
            return outcome

        self.progress("Opening visualization in browser...")
        try:
            self.open_browser(outcome.artifact)
        except BrowserLaunchError as exc:
            return self._fail(outcome, Stage.OPEN_BROWSER, str(exc))
        return outcome

    def run(self, raw_url: str) -> ExitStatus:
        """Synchronous entry point: returns the process exit status."""
        outcome = asyncio.run(self.execute(raw_url))
        if not outcome.ok:
            return ExitStatus.FAILURE
        self.progress("All done, enjoy your visualization!")
        return ExitStatus.OK


def run(raw_url: str, config: Optional[ExplorerConfig] = None, **collaborators) -> ExitStatus:
    """Build a :class:`Pipeline` and run it against *raw_url*."""
    return Pipeline(config, **collaborators).run(raw_url)

"""Async wrapper around the ``gh`` CLI."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any

from issuetree.exceptions import ProviderError

logger = logging.getLogger(__name__)

API_HEADERS = ("Accept: application/vnd.github+json", "X-GitHub-Api-Version: 2022-11-28")


@dataclass
class CompletedProcess:
    """Result of a ``gh`` CLI invocation."""

    returncode: int
    stdout: str
    stderr: str


class GhClient:
    """Async wrapper around the ``gh`` CLI binary.

    All GitHub calls are executed by shelling out to ``gh``.

    Args:
        executable: Name or path of the ``gh`` binary.
    """

    def __init__(self, executable: str = "gh") -> None:
        self.executable = executable

    async def run(self, args: list[str], *, check: bool = True) -> CompletedProcess:
        """Execute ``gh <args>`` asynchronously.

        Args:
            args: Arguments to pass to gh.
            check: If True, raise on non-zero exit.

        Returns:
            CompletedProcess with stdout, stderr, returncode.

        Raises:
            ProviderError: If the binary cannot be started, or check=True and
                the command fails.
        """
        cmd = [self.executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ProviderError(f"failed to execute {self.executable}: {exc}") from exc
        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CompletedProcess(
            returncode=proc.returncode or 0,
            stdout=stdout_bytes.decode(errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode(errors="replace") if stderr_bytes else "",
        )
        if check and result.returncode != 0:
            raise ProviderError(f"gh command failed: {' '.join(cmd)}\n{result.stderr.strip()}")
        return result

    async def json(self, args: list[str]) -> Any:
        """Execute ``gh <args>`` and parse stdout as JSON.

        Returns:
            Parsed JSON, or None if stdout is empty.

        Raises:
            ProviderError: If the command fails or stdout is not valid JSON.
        """
        result = await self.run(args)
        if not result.stdout.strip():
            return None
        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise ProviderError(f"gh returned invalid JSON for {' '.join(args)}: {exc}") from exc

    async def api(self, endpoint: str, *, method: str = "GET", fields: dict[str, Any] | None = None) -> Any:
        """Call the REST API via ``gh api``.

        Non-string field values are sent with ``-F`` so gh keeps their JSON
        type (integers stay integers); strings use ``-f``.

        Args:
            endpoint: Path such as ``repos/OWNER/REPO/issues/1``.
            method: HTTP method.
            fields: Request body fields.

        Returns:
            Parsed JSON response, or None for an empty body.
        """
        args = ["api", "-X", method]
        for header in API_HEADERS:
            args.extend(["-H", header])
        args.append(endpoint)
        for key, value in (fields or {}).items():
            if isinstance(value, str):
                args.extend(["-f", f"{key}={value}"])
            else:
                args.extend(["-F", f"{key}={json.dumps(value)}"])
        return await self.json(args)

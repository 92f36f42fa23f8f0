"""GitHub license provider — repository metadata with retries and rate-limit handling."""

from __future__ import annotations

import asyncio
import re
import time
from datetime import datetime, timezone
from typing import Any

import httpx
import structlog

from lic.config import GitHubSettings
from lic.context import ScanContext
from lic.exceptions import (
    NoLicenseFoundError,
    RateLimitExceededError,
    RepositoryRequestError,
    TransientAPIError,
    UnparsableRepositoryError,
)

log = structlog.get_logger("lic.license")

_API_BASE = "https://api.github.com"
_GITHUB_PREFIX = "github.com/"

# github.com/<owner>/<repo>[/subpackage...]
_REPO_RE = re.compile(r"^github\.com/([^/]+)/([^/]+)")


def parse_repo_owner(import_path: str) -> tuple[str, str]:
    """Extract ``(owner, repo)`` from a ``github.com/owner/repo/...`` import path.

    Raises :class:`UnparsableRepositoryError` when the path has no
    owner/repo pair directly after the host.
    """
    m = _REPO_RE.match(import_path)
    if m is None:
        raise UnparsableRepositoryError(import_path)
    owner, repo = m.group(1), m.group(2)
    if repo.endswith(".git"):
        repo = repo[:-4]
    if not repo:
        raise UnparsableRepositoryError(import_path)
    return owner, repo


def backoff_delay(attempt: int, base_delay: float = 1.0, max_delay: float = 30.0) -> float:
    """Exponential backoff: ``base_delay * 2**attempt``, capped at *max_delay*."""
    return min(base_delay * (2**attempt), max_delay)


class GitHubLicenseProvider:
    """Resolves ``github.com/...`` imports through ``GET /repos/{owner}/{repo}``.

    Retry policy per lookup:
      - rate limited (403/429 with rate-limit headers): sleep until reset when
        the reset is within ``rate_limit_max_wait`` and the accumulated wait
        stays under ``rate_limit_total_wait``; otherwise
        :class:`RateLimitExceededError`. Rate-limit waits do not use up attempts.
      - timeout, transport error, 5xx: back off and retry, up to
        ``max_retries`` extra attempts, then :class:`TransientAPIError`.
      - other 4xx or malformed body: :class:`RepositoryRequestError`, no retry.
      - repository without license: :class:`NoLicenseFoundError`.
    """

    name = "GitHub"

    def __init__(
        self,
        settings: GitHubSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or GitHubSettings()
        if client is None:
            headers: dict[str, str] = {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
            if self._settings.token:
                headers["Authorization"] = f"Bearer {self._settings.token}"
            client = httpx.AsyncClient(
                base_url=_API_BASE,
                headers=headers,
                timeout=self._settings.request_timeout,
                follow_redirects=True,
            )
        self._client = client

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GitHubLicenseProvider:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── provider interface ─────────────────────────────────────────────────

    def supports(self, import_path: str) -> bool:
        return import_path.startswith(_GITHUB_PREFIX)

    async def get_license(
        self,
        ctx: ScanContext,
        import_path: str,
        version: str = "",
        branch: str = "",
        url: str = "",
    ) -> str:
        owner, repo = parse_repo_owner(import_path)
        data = await self._get_repository(ctx, owner, repo)
        license_info = data.get("license")
        key = license_info.get("key") if isinstance(license_info, dict) else None
        if not key or not isinstance(key, str):
            raise NoLicenseFoundError(owner, repo)
        return key

    # ── internal ───────────────────────────────────────────────────────────

    async def _get_repository(self, ctx: ScanContext, owner: str, repo: str) -> dict[str, Any]:
        settings = self._settings
        max_attempts = settings.max_retries + 1
        path = f"/repos/{owner}/{repo}"
        full_name = f"{owner}/{repo}"

        attempt = 0
        rate_limit_waited = 0.0
        last_exc: Exception | None = None

        while attempt < max_attempts:
            ctx.raise_if_cancelled()
            timeout = settings.request_timeout
            remaining = ctx.remaining()
            if remaining is not None:
                timeout = min(timeout, remaining)

            try:
                resp = await asyncio.wait_for(self._client.get(path), timeout=timeout)
            except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
                log.warning(
                    "github.timeout", repo=full_name, attempt=attempt + 1, max_attempts=max_attempts
                )
                last_exc = exc
            except httpx.TransportError as exc:
                log.warning(
                    "github.transport_error",
                    repo=full_name,
                    error=str(exc),
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                )
                last_exc = exc
            except httpx.RequestError as exc:
                # redirect loops, undecodable bodies: retrying cannot help
                raise RepositoryRequestError(f"request for {full_name} failed: {exc}") from exc
            else:
                if self._is_rate_limited(resp):
                    wait = self._get_rate_limit_wait(resp)
                    if (
                        wait is None
                        or wait > settings.rate_limit_max_wait
                        or rate_limit_waited + wait > settings.rate_limit_total_wait
                    ):
                        raise RateLimitExceededError(self._get_rate_limit_reset(resp))
                    log.warning("github.rate_limit", repo=full_name, wait_seconds=wait)
                    ctx.raise_if_cancelled()
                    await asyncio.sleep(wait)
                    rate_limit_waited += wait
                    continue

                if resp.status_code >= 500:
                    log.warning(
                        "github.server_error",
                        repo=full_name,
                        status=resp.status_code,
                        attempt=attempt + 1,
                        max_attempts=max_attempts,
                    )
                    last_exc = httpx.HTTPStatusError(
                        f"{resp.status_code}", request=resp.request, response=resp
                    )
                elif resp.status_code != 200:
                    raise RepositoryRequestError(
                        f"GitHub API returned status {resp.status_code} for {full_name}",
                        status_code=resp.status_code,
                    )
                else:
                    return self._parse_body(resp, full_name)

            attempt += 1
            if attempt < max_attempts:
                delay = backoff_delay(attempt - 1, settings.base_delay, settings.max_delay)
                log.info("github.retry", repo=full_name, delay_seconds=delay, attempt=attempt)
                ctx.raise_if_cancelled()
                await asyncio.sleep(delay)

        raise TransientAPIError(
            f"failed to get repository {full_name} after {attempt} attempts: {last_exc!r}",
            attempts=attempt,
        ) from last_exc

    @staticmethod
    def _parse_body(resp: httpx.Response, full_name: str) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as exc:
            raise RepositoryRequestError(f"malformed response for {full_name}: {exc}") from exc
        if not isinstance(data, dict):
            raise RepositoryRequestError(f"malformed response for {full_name}: expected object")
        return data

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        """403/429 with exhausted quota or a Retry-After header."""
        if response.status_code not in (403, 429):
            return False
        remaining = GitHubLicenseProvider._parse_header_int(
            response.headers.get("X-RateLimit-Remaining")
        )
        if remaining == 0:
            return True
        return "Retry-After" in response.headers

    @staticmethod
    def _get_rate_limit_wait(response: httpx.Response) -> int | None:
        """Seconds until the limit resets, or None when the headers do not say."""
        retry_after = GitHubLicenseProvider._parse_header_int(response.headers.get("Retry-After"))
        if retry_after is not None:
            return max(retry_after, 1)
        reset_ts = GitHubLicenseProvider._parse_header_int(
            response.headers.get("X-RateLimit-Reset")
        )
        if reset_ts is not None:
            return max(reset_ts - int(time.time()), 1)
        return None

    @staticmethod
    def _get_rate_limit_reset(response: httpx.Response) -> datetime | None:
        reset_ts = GitHubLicenseProvider._parse_header_int(
            response.headers.get("X-RateLimit-Reset")
        )
        if reset_ts is not None:
            return datetime.fromtimestamp(reset_ts, tz=timezone.utc)
        retry_after = GitHubLicenseProvider._parse_header_int(response.headers.get("Retry-After"))
        if retry_after is not None:
            return datetime.fromtimestamp(time.time() + retry_after, tz=timezone.utc)
        return None

    @staticmethod
    def _parse_header_int(value: str | None) -> int | None:
        """Safely parse an integer header value."""
        if value is None:
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            return None

"""wger catalog client - Implements ICatalogProvider port.

Read-only access to the public wger exercise database.

Key Features:
- exerciseinfo listing with limit/offset pagination and structured filters
- Exercise details, categories, muscles, equipment, images and videos
- Circuit breaker (5 failures → 60s timeout)
- Retry logic (exponential backoff) on transport errors and 5xx answers
- Failures surface as UpstreamFetchError, never as empty results
"""

from typing import Any, Dict, List, Optional, Union

import httpx
import structlog
from circuitbreaker import CircuitBreaker, CircuitBreakerError
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from fittrack.domain.catalog.models import (
    Category,
    Equipment,
    Exercise,
    ExerciseFilters,
    ExerciseImage,
    ExercisePage,
    ExerciseVideo,
    Muscle,
)
from fittrack.domain.catalog.ports import ICatalogProvider
from fittrack.domain.shared.errors import (
    ExerciseNotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    TimeoutError,
    UpstreamFetchError,
)
from fittrack.infrastructure.config import Settings

from .wger_mapper import (
    map_category,
    map_equipment,
    map_exercise,
    map_exercise_page,
    map_exercises,
    map_image,
    map_muscle,
    map_video,
)

logger = structlog.get_logger(__name__)


class WgerCatalogClient(ICatalogProvider):
    """
    wger API client implementing ICatalogProvider port.

    Either owns its ``httpx.AsyncClient`` (async context manager) or uses
    one injected by the caller.

    Example:
        >>> async with WgerCatalogClient() as client:
        ...     page = await client.list_exercises(limit=100)
        ...     print(f"{page.count} exercises upstream")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        retry_wait: Optional[wait_base] = None,
        failure_threshold: int = 5,
        recovery_timeout: int = 60,
    ) -> None:
        """Initialize wger client.

        Args:
            settings: Base URL, language, timeout and retry count
            http_client: Pre-built client; closed by its owner, not by us
            retry_wait: tenacity wait strategy between attempts
            failure_threshold: Failures before the circuit opens
            recovery_timeout: Seconds before a half-open probe
        """
        self._settings = settings or Settings()
        self._session: Optional[httpx.AsyncClient] = http_client
        self._owns_session = False
        self._retry_wait = retry_wait or wait_exponential(multiplier=1, min=2, max=10)
        self._breaker = CircuitBreaker(
            failure_threshold=failure_threshold,
            recovery_timeout=recovery_timeout,
            expected_exception=UpstreamFetchError,
            name="wger_catalog",
        )
        self._guarded_get = self._breaker(self._get_json)

    async def __aenter__(self) -> "WgerCatalogClient":
        """Async context manager entry."""
        if self._session is None:
            self._session = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.catalog_timeout_s)
            )
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.aclose()
            self._session = None
            self._owns_session = False

    @property
    def language(self) -> int:
        return self._settings.catalog_language_id

    # ------------------------------------------------------------------
    # ICatalogProvider
    # ------------------------------------------------------------------

    async def list_exercises(
        self,
        limit: int,
        offset: int = 0,
        filters: Optional[ExerciseFilters] = None,
    ) -> ExercisePage:
        """Fetch one page of ``exerciseinfo``.

        Args:
            limit: Page size
            offset: Offset of the first entry
            filters: Structured filters (category, muscle, equipment)

        Returns:
            ExercisePage with unnamed entries removed

        Raises:
            UpstreamFetchError: On any transport or HTTP failure
        """
        params: Dict[str, Any] = {"limit": limit, "offset": offset, "language": self.language}
        if filters is not None:
            params.update(filters.to_query_params())

        payload = await self._request("exerciseinfo/", params)
        return map_exercise_page(payload, self.language)

    async def get_exercise(self, exercise_id: Union[int, str]) -> Exercise:
        """Fetch one exercise with images and videos.

        Raises:
            ExerciseNotFoundError: Unknown id or no usable name
            UpstreamFetchError: On any other failure
        """
        payload = await self._request(
            f"exerciseinfo/{exercise_id}/", {"language": self.language}, missing_ok=True
        )
        exercise = map_exercise(payload, self.language) if payload is not None else None
        if exercise is None:
            logger.info("Exercise not found", exercise_id=exercise_id)
            raise ExerciseNotFoundError(exercise_id)
        return exercise

    async def search_by_name(self, query: str, limit: int) -> List[Exercise]:
        payload = await self._request(
            "exerciseinfo/", {"language": self.language, "name": query, "limit": limit}
        )
        return map_exercises(payload.get("results") or [], self.language)

    async def list_categories(self) -> List[Category]:
        payload = await self._request("exercisecategory/")
        return [map_category(c) for c in payload.get("results") or []]

    async def list_muscles(self) -> List[Muscle]:
        payload = await self._request("muscle/")
        return [map_muscle(m) for m in payload.get("results") or []]

    async def list_equipment(self) -> List[Equipment]:
        payload = await self._request("equipment/")
        return [map_equipment(e) for e in payload.get("results") or []]

    async def list_images(self, exercise_id: Union[int, str]) -> List[ExerciseImage]:
        payload = await self._request("exerciseimage/", {"exercise": exercise_id})
        return [map_image(i) for i in payload.get("results") or []]

    async def list_videos(self, exercise_id: Union[int, str]) -> List[ExerciseVideo]:
        payload = await self._request("exercisevideo/", {"exercise": exercise_id})
        return [map_video(v) for v in payload.get("results") or []]

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    async def _request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        missing_ok: bool = False,
    ) -> Any:
        if self._session is None:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            return await self._guarded_get(path, params or {}, missing_ok)
        except CircuitBreakerError as e:
            logger.error("wger circuit open", path=path)
            raise ServiceUnavailableError(f"Catalog circuit open: {e}") from e

    async def _get_json(self, path: str, params: Dict[str, Any], missing_ok: bool) -> Any:
        url = f"{self._settings.catalog_base_url}/{path}"
        logger.debug("Catalog request", url=url, params=params)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._settings.catalog_max_retries),
                wait=self._retry_wait,
                retry=retry_if_exception_type((httpx.TransportError, ServiceUnavailableError)),
                reraise=True,
            ):
                with attempt:
                    response = await self._session.get(url, params=params)
                    if response.status_code >= 500:
                        logger.warning(
                            "wger server error", url=url, status=response.status_code
                        )
                        raise ServiceUnavailableError(
                            f"Catalog server error {response.status_code}",
                            status=response.status_code,
                        )
        except httpx.TimeoutException as e:
            logger.error("wger API timeout", url=url)
            raise TimeoutError(f"Catalog API timeout: {url}") from e
        except httpx.TransportError as e:
            logger.error("wger API unreachable", url=url, error=str(e))
            raise UpstreamFetchError(f"Catalog API unreachable: {e}") from e
        except ServiceUnavailableError:
            logger.error("wger API unavailable after retries", url=url)
            raise

        status = response.status_code
        if status == 404 and missing_ok:
            return None
        if status == 429:
            logger.error("wger rate limit exceeded", url=url)
            raise RateLimitError("Catalog rate limit exceeded", status=status)
        if status >= 400:
            logger.error("wger API error", url=url, status=status)
            raise UpstreamFetchError(f"Catalog API error {status}", status=status)

        try:
            return response.json()
        except ValueError as e:
            logger.error("wger API returned invalid JSON", url=url)
            raise UpstreamFetchError(f"Catalog API returned invalid JSON: {e}") from e

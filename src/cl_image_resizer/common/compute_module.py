"""ComputeModule - Abstract base class for compute tasks."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic

from pydantic import JsonValue, ValidationError

from .errors import ImageResizeError
from .schema_job import JobRecordUpdate, JobStatus, P, Q

logger = logging.getLogger(__name__)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - Params are validated once and passed through
    - run() does the work and returns metadata only
    - execute() turns every outcome into a JobRecordUpdate
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    def setup(self) -> None:
        """Optional per-execution setup."""
        pass

    @abstractmethod
    async def run(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q: ...

    async def execute(
        self,
        params: dict[str, JsonValue],
        progress_callback: Callable[[int], None] | None = None,
    ) -> JobRecordUpdate:
        try:
            validated = self.schema.model_validate(params)

            self.setup()

            output = await self.run(validated, progress_callback)

            return JobRecordUpdate(
                status=JobStatus.completed,
                output=output.model_dump(mode="json"),
                progress=100,
            )

        except ValidationError as exc:
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=f"Invalid parameters: {exc}",
            )

        except ImageResizeError as exc:
            logger.error(f"{self.task_type} failed: {exc}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )

        except Exception as exc:
            logger.exception(f"{self.task_type} failed unexpectedly")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )

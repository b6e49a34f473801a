"""
Capability Router Base - Presentation Layer

A capability router is bound to exactly one live capability and exposes its
operations as a FastAPI sub-router. Routers know nothing about each other;
they are mounted by ``mount_capability_routers``.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Type, TypeVar

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ValidationError

from valetudo.domain.capabilities.base import Capability
from valetudo.domain.entities.errors import (
    CapabilityNotImplementedError,
    InvalidArgumentError,
    NotFoundError,
)
from valetudo.domain.repositories.config_store import IConfigStore
from valetudo.shared import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


class CapabilityRouter(ABC):
    """Base class of the per-capability routers."""

    def __init__(self, capability: Capability, config_store: IConfigStore):
        self.capability = capability
        self.config_store = config_store
        self.router = APIRouter(tags=[capability.get_type()])
        self.init_routes()

    @abstractmethod
    def init_routes(self) -> None:
        """Declare the routes of this capability on ``self.router``."""
        pass

    @staticmethod
    def parse_body(model_cls: Type[ModelT], payload: Any) -> ModelT:
        """
        Validate a request body against a DTO.

        Raises:
            HTTPException: 400 with the validation errors
        """
        try:
            return model_cls.model_validate(payload)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=[
                    {"loc": list(error["loc"]), "msg": error["msg"]}
                    for error in e.errors()
                ],
            )

    async def run(
        self,
        operation: Awaitable[T],
        event: str,
        not_found_status: int = status.HTTP_404_NOT_FOUND,
        **context: Any,
    ) -> T:
        """
        Await a capability or store operation at the router boundary.

        Domain errors become their HTTP counterparts; anything else is
        logged and answered with 500 and the error message.
        """
        try:
            return await operation
        except HTTPException:
            raise
        except NotFoundError as e:
            raise HTTPException(status_code=not_found_status, detail=e.message)
        except InvalidArgumentError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
        except CapabilityNotImplementedError as e:
            raise HTTPException(
                status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=e.message
            )
        except Exception as e:
            logger.warning(
                event,
                capability=self.capability.get_type(),
                error=str(e),
                exc_info=e,
                **context,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            ) from e

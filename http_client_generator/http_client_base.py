"""
Базовый класс сгенерированных HTTP клиентов
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel, TypeAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_RESPONSE_MESSAGE = "No response."
REQUEST_FAILED_MESSAGE = "An error occurred while making the API request."


@dataclass
class Error:
    """Ошибка результата"""

    message: str


@dataclass
class Result(Generic[T]):
    """Результат вызова: значение при успехе или список ошибок"""

    value: Optional[T] = None
    errors: List[Error] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return not self.errors

    @property
    def is_failed(self) -> bool:
        return bool(self.errors)

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, errors: Union[Error, List[Error]]) -> "Result[T]":
        if isinstance(errors, Error):
            errors = [errors]
        return cls(errors=list(errors))


class ErrorModel(BaseModel):
    """Запись о проблеме в теле неуспешного ответа"""

    code: Optional[Union[str, int]] = None
    message: Optional[str] = None


_problem_details_adapter = TypeAdapter(List[ErrorModel])


class BaseApiClient:
    """Общий примитив отправки запроса для сгенерированных клиентов"""

    def __init__(self, http_client: httpx.AsyncClient):
        self._http_client = http_client

    def _build_request(self, method: str, path: str, **kwargs) -> httpx.Request:
        return self._http_client.build_request(method, path, **kwargs)

    @classmethod
    def _serialize(cls, value: Any) -> Any:
        """Подготовка тела запроса к JSON сериализации"""
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True)
        elif isinstance(value, Enum):
            return value.value
        elif isinstance(value, dict):
            return {k: cls._serialize(v) for k, v in value.items()}
        elif isinstance(value, (list, tuple)):
            return [cls._serialize(item) for item in value]
        else:
            return value

    async def _send_request(
        self, request: httpx.Request, result_type: Any = Any
    ) -> Result:
        """
        Отправка запроса и разбор ответа.

        Успешный статус - тело декодируется в result_type. Неуспешный -
        тело декодируется как список ErrorModel, по ошибке на запись.
        Любое исключение, включая ошибку декодирования успешного ответа,
        превращается в одну общую ошибку.
        """
        try:
            logger.debug(f"Making {request.method} request to {request.url}")
            response = await self._http_client.send(request)
            logger.debug(f"Response status: {response.status_code}")

            if response.is_success:
                value = TypeAdapter(result_type).validate_json(response.content)
                return Result.ok(value)

            problem_details = self._get_problem_details(response)

            if not problem_details:
                return Result.fail(Error(NO_RESPONSE_MESSAGE))

            return Result.fail(
                [
                    Error(
                        "".join(
                            str(part)
                            for part in (problem.code, problem.message)
                            if part is not None
                        )
                    )
                    for problem in problem_details
                ]
            )

        except Exception as exc:
            logger.warning(f"Request {request.method} {request.url} failed: {exc}")
            return Result.fail(Error(REQUEST_FAILED_MESSAGE))

    @staticmethod
    def _get_problem_details(response: httpx.Response) -> List[ErrorModel]:
        return _problem_details_adapter.validate_json(response.content)

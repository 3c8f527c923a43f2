from typing import Any, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .type_mapper import UNTYPED


class Diagnostic(BaseModel):
    """Пропущенный или деградировавший элемент документа"""

    model_config = ConfigDict(frozen=True)

    location: str
    message: str

    def __str__(self):
        return f"{self.location}: {self.message}"


class ParameterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    location: Optional[str] = None
    ref: Optional[str] = None


class RequestBodySpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    ref: Optional[str] = None


class OperationSpec(BaseModel):
    """Одна операция: HTTP метод под одним путем"""

    model_config = ConfigDict(frozen=True)

    path: str
    method: str
    parameters: Tuple[ParameterSpec, ...] = ()
    request_body: Optional[RequestBodySpec] = None
    summary: Optional[str] = None

    # Объявленные ответы не используются
    return_type: str = UNTYPED


class SchemaSpec(BaseModel):
    """Именованная схема из components.schemas"""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: Literal["enum", "record", "unmatched"]
    enum_values: Tuple[Any, ...] = ()
    properties: Tuple[Tuple[str, Optional[str]], ...] = ()

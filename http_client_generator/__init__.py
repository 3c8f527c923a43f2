"""Генератор HTTP клиентов и моделей из OpenAPI/Swagger документов"""

from .generator import ApiClientGenerator
from .http_client_base import BaseApiClient, Error, Result

__all__ = ["ApiClientGenerator", "BaseApiClient", "Error", "Result"]

"""
Главный модуль генератора - чистый интерфейс
"""

import logging
from typing import Any, Dict, Union

from .internal.generator.client_generator import ClientGenerator
from .internal.generator.model_generator import ModelGenerator
from .internal.parser.openapi import SchemaDocument, load_document, load_tree
from .internal.types.models import Project

logger = logging.getLogger(__name__)


def output_dirname(document: SchemaDocument) -> str:
    """Директория результата: {TitleWithSpacesRemoved}HttpClient"""
    return document.title.replace(" ", "") + "HttpClient"


class ApiClientGenerator:
    """Чистый интерфейс для генерации HTTP клиента и моделей"""

    def __init__(self, document: Union[SchemaDocument, Dict[str, Any]]):
        if not isinstance(document, SchemaDocument):
            document = load_tree(document)
        self.document = document

    @classmethod
    def from_json(cls, text: str) -> "ApiClientGenerator":
        return cls(load_document(text))

    def generate(self) -> Project:
        """Генерация проекта: файл клиента и файлы моделей"""
        project = Project(name=output_dirname(self.document))

        models = ModelGenerator(self.document, project)
        ClientGenerator(self.document, project, models.model_names()).generate()
        models.generate()

        for diagnostic in project.diagnostics:
            logger.debug(f"Диагностика: {diagnostic}")

        return project

import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

import httpx

from ...exceptions import DocumentFetchError, ParseError

logger = logging.getLogger(__name__)


def _freeze(value: Any) -> Any:
    """Рекурсивно превращает дерево JSON в неизменяемое"""
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def lookup(node: Any, *keys: str) -> Any:
    """Проверяемый доступ по цепочке ключей, None если звена нет"""
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


class SchemaDocument:
    """Разобранный OpenAPI документ с проверяемым доступом к секциям"""

    def __init__(self, tree: Mapping):
        self._tree = _freeze(dict(tree))

    @property
    def tree(self) -> Mapping:
        return self._tree

    @property
    def title(self) -> str:
        return str(lookup(self._tree, "info", "title"))

    @property
    def version(self) -> str:
        return str(lookup(self._tree, "info", "version"))

    @property
    def paths(self) -> Mapping:
        return lookup(self._tree, "paths")

    @property
    def schemas(self) -> Optional[Mapping]:
        """components.schemas или None, если секции нет"""
        schemas = lookup(self._tree, "components", "schemas")
        return schemas if isinstance(schemas, Mapping) else None

    def get(self, *keys: str) -> Any:
        return lookup(self._tree, *keys)


def load_document(text: str) -> SchemaDocument:
    """Разбор JSON текста в SchemaDocument"""
    try:
        tree = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Документ не является корректным JSON: {exc}") from exc

    return load_tree(tree)


def load_tree(tree: Any) -> SchemaDocument:
    """Проверка обязательных секций уже разобранного дерева"""
    if not isinstance(tree, dict):
        raise ParseError("Корень документа должен быть объектом")

    for section in ("info", "paths"):
        if not isinstance(tree.get(section), dict):
            raise ParseError("Отсутствует обязательная секция", section=section)

    for key in ("title", "version"):
        if tree["info"].get(key) is None:
            raise ParseError("Отсутствует обязательное поле", section=f"info.{key}")

    document = SchemaDocument(tree)
    logger.debug(
        f"Загружен документ {document.title} {document.version}: "
        f"{len(document.paths)} путей"
    )
    return document


def load_file(path: str) -> SchemaDocument:
    """Чтение документа из локального файла"""
    with open(path, "r", encoding="utf-8") as f:
        return load_document(f.read())


def fetch_document(url: str, timeout: float = 30.0) -> str:
    """Загрузка текста документа по HTTP"""
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DocumentFetchError(
            "Сервер вернул ошибку", url=url, status_code=exc.response.status_code
        ) from exc
    except httpx.HTTPError as exc:
        raise DocumentFetchError(str(exc), url=url) from exc

    return response.text

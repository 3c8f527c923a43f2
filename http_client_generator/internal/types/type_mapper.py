"""Отображение типов схемы на типы Python"""

from typing import Collection, Optional

from ..utils.naming import capitalize_first

UNTYPED = "Any"

PRIMITIVE_TYPES = {
    "integer": "int",
    "string": "str",
    "boolean": "bool",
    "array": "List[Any]",
}


def map_type(token: Optional[str]) -> str:
    """
    Тип Python для примитивного типа схемы.

    Токен с точкой трактуется как `Namespace.TypeName` по двум последним
    сегментам и имеет приоритет над таблицей примитивов. Неизвестные токены
    (включая object и отсутствующий тип) дают Any.
    """
    if not isinstance(token, str):
        return UNTYPED

    if "." in token:
        parts = token.split(".")
        return f"{capitalize_first(parts[-2])}.{capitalize_first(parts[-1])}"

    return PRIMITIVE_TYPES.get(token, UNTYPED)


def ref_name(ref: Optional[str]) -> Optional[str]:
    """Имя схемы из $ref - последний сегмент после '/'"""
    if not isinstance(ref, str) or not ref:
        return None

    return ref.split("/")[-1] or None


def resolve_ref(ref: Optional[str], known_models: Collection[str] = ()) -> str:
    """Тип Python для $ref: имя сгенерированной модели или результат map_type()"""
    name = ref_name(ref)

    if name is None:
        return UNTYPED

    if "." not in name and name in known_models:
        return name

    return map_type(name)

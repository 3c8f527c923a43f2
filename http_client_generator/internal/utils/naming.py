"""Нормализация имен: операции, свойства, идентификаторы"""

import keyword
import re
from typing import Optional


def capitalize_first(name: Optional[str]) -> Optional[str]:
    """
    Заглавная только первая буква, остаток строки не меняется.

    В отличие от operation_name() не разбивает snake_case и kebab-case.

    Examples:
        >>> capitalize_first("petName")
        'PetName'
        >>> capitalize_first("pet_name")
        'Pet_name'
    """
    if not name:
        return name

    return name[0].upper() + name[1:]


def pascal_case(text: Optional[str]) -> Optional[str]:
    """
    PascalCase по разделителям: любой символ кроме букв, цифр и '_'.

    Первая буква после разделителя заглавная, остальные строчные,
    сами разделители удаляются.

    Examples:
        >>> pascal_case("/user-profile/{id}")
        'UserProfileId'
    """
    if not text:
        return text

    result = []
    next_upper = True

    for char in text:
        if not (char.isalnum() or char == "_"):
            next_upper = True
            continue

        if next_upper:
            result.append(char.upper())
            next_upper = False
        else:
            result.append(char.lower())

    return "".join(result)


def operation_name(path: Optional[str], method: Optional[str]) -> Optional[str]:
    """
    Имя метода клиента из пути и HTTP метода.

    Examples:
        >>> operation_name("/pets", "get")
        'PetsGet'
        >>> operation_name("/user-profile/{id}", "GET")
        'UserProfileIdGet'
    """
    if not path or not method:
        return path

    # Метод идет отдельным токеном, поэтому отделяем его разделителем
    return pascal_case(f"{path}/{method}")


def identifier(text: Optional[str]) -> str:
    """Оставляет в строке только символы, допустимые в идентификаторе"""
    return re.sub(r"\W", "", text or "")


def safe_identifier(name: str) -> str:
    """Очистка имени параметра для использования в сигнатуре Python"""
    clean = re.sub(r"\W", "_", name or "")
    # Убираем множественные подчеркивания и подчеркивания по краям
    clean = re.sub(r"_+", "_", clean).strip("_")

    if not clean:
        return "param"

    if clean[0].isdigit():
        clean = f"param_{clean}"

    if keyword.iskeyword(clean) or clean == "self":
        clean = f"{clean}_"

    return clean


def property_name(key: str) -> str:
    """
    Имя поля модели для ключа свойства.

    Обычно это capitalize_first(key). Если ключ не становится идентификатором,
    недопустимые символы заменяются на '_', а первая буква все равно заглавная.

    Examples:
        >>> property_name("petName")
        'PetName'
        >>> property_name("_id")
        'Id'
        >>> property_name("display-name")
        'Display_name'
    """
    name = capitalize_first(safe_identifier(capitalize_first(key)))

    if not name[0].isupper():
        name = f"F_{name}"

    if keyword.iskeyword(name):
        name = f"{name}_"

    return name


def enum_member_name(value) -> str:
    """Имя атрибута Enum для литерала: сам литерал, если он валидный идентификатор"""
    text = str(value)

    if text.isidentifier() and not keyword.iskeyword(text):
        return text

    if not text.strip():
        return "EMPTY"

    name = re.sub(r"\W", "_", text)
    name = re.sub(r"_+", "_", name).strip("_")

    if not name:
        return "VALUE"

    if name[0].isdigit():
        name = f"VALUE_{name}"

    if keyword.iskeyword(name):
        name = f"{name}_"

    return name

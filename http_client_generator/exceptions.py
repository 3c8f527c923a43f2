"""
Исключения генератора HTTP клиентов
"""


class GeneratorError(Exception):
    """Базовая ошибка генератора"""


class ParseError(GeneratorError):
    """Документ не является корректным JSON или не содержит обязательных секций"""

    def __init__(self, message: str, section: str = None):
        self.message = message
        self.section = section
        super().__init__(f"[{section}] {message}" if section else message)


class DocumentFetchError(GeneratorError):
    """Не удалось загрузить документ по URL"""

    def __init__(self, message: str, url: str, status_code: int = None):
        self.message = message
        self.url = url
        self.status_code = status_code
        super().__init__(
            f"[{status_code}] {url}: {message}" if status_code else f"{url}: {message}"
        )

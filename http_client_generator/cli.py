import argparse
import logging
import os
import sys
from typing import List, Optional

from http_client_generator.config import CONFIG_FILE_NAME, OpenApiConfig
from http_client_generator.exceptions import DocumentFetchError, GeneratorError
from http_client_generator.generator import ApiClientGenerator
from http_client_generator.internal.parser.openapi import (
    fetch_document,
    load_document,
    load_file,
)
from http_client_generator.internal.types.models import Project

USAGE_HINT = "Укажите URL swagger.json: http-client-generator <url>"


def _generate_client_core(config: OpenApiConfig) -> Project:
    """Ядро генерации клиента - только генерация без сохранения"""
    print(f"🚀 Генерация клиента из {config.url}")

    # Проверяем - это локальный файл или URL
    if config.url.startswith(("http://", "https://")):
        print("📥 Загрузка swagger.json...")
        document = load_document(fetch_document(config.url))
    elif os.path.exists(config.url):
        document = load_file(config.url)
    else:
        raise DocumentFetchError(
            "не является URL или путем к существующему файлу", url=config.url
        )

    print("⚙️ Генерация кода...")
    return ApiClientGenerator(document).generate()


def _save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    for code_file in project.files:
        path = os.path.join(target_path, code_file.file_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(str(code_file))

    print("✅ Генерация завершена успешно!")
    print(f"📦 Клиент создан в: {os.path.abspath(target_path)}")


def _report_diagnostics(project: Project):
    """Вывод пропущенных элементов документа"""
    if not project.diagnostics:
        return

    print(f"⚠️ Пропущено элементов: {len(project.diagnostics)}")
    for diagnostic in project.diagnostics:
        print(f"   {diagnostic}")


def generate(argv: Optional[List[str]] = None):
    """Генерация HTTP клиента и моделей из swagger.json"""
    parser = argparse.ArgumentParser(
        prog="http-client-generator",
        description="Генерация HTTP клиента и моделей из OpenAPI/Swagger документа",
    )
    parser.add_argument("url", nargs="?", help="URL или путь к swagger.json")
    parser.add_argument("--dirname", type=str, help="Директория для генерации клиента")
    parser.add_argument("--config", type=str, help="Путь к openapi.toml")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Сохранить настройки в openapi.toml в директории клиента",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = OpenApiConfig(url=args.url, dirname=args.dirname)

    if args.config:
        file_config = OpenApiConfig.from_file(args.config)
        if file_config is None:
            print(f"❌ Ошибка: не удалось прочитать конфиг {args.config}")
            sys.exit(1)
        print(f"📋 Используется конфиг {args.config}")
        config = file_config.merge_with_args(args)

    if not config.url:
        print(USAGE_HINT)
        parser.print_usage()
        sys.exit(1)

    try:
        project = _generate_client_core(config)
        target_path = config.dirname or project.name
        _report_diagnostics(project)
        _save_project_files(project, target_path)

        if args.save_config:
            config_path = os.path.join(target_path, CONFIG_FILE_NAME)
            config.save_to_file(config_path)
            print(f"💾 Конфиг сохранен в {config_path}")

    except (GeneratorError, OSError) as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()

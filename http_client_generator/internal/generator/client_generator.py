import logging
import re
from collections.abc import Mapping
from typing import Collection, Dict, List, Optional, Tuple

from ..parser.openapi import SchemaDocument, lookup
from ..types.models import (
    CodeBlock,
    CodeFile,
    Function,
    Parameter,
    Project,
    Variable,
)
from ..types.specs import OperationSpec, ParameterSpec, RequestBodySpec
from ..types.type_mapper import resolve_ref
from ..utils.naming import identifier, operation_name, safe_identifier
from .templates import templates

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

JSON_CONTENT_TYPE = "application/json"

REQUEST_BODY_NAME = "requestBody"


def _string(value) -> Optional[str]:
    return value if isinstance(value, str) else None


def client_class_name(title: str, version: str) -> str:
    """PetStore + v1 -> PetStoreV1HttpClient"""
    clean_title = title.replace(".", "").replace(" ", "")
    clean_version = version[1:] if version[:1] in ("v", "V") else version
    return f"{identifier(clean_title)}V{identifier(clean_version)}HttpClient"


class ClientGenerator:
    """Генератор класса HTTP клиента: один метод на каждую пару (путь, метод)"""

    def __init__(
        self,
        document: SchemaDocument,
        project: Project,
        known_models: Collection[str] = (),
    ):
        self.document = document
        self.project = project
        self.known_models = set(known_models)
        self.used_models = set()

    def generate(self) -> CodeFile:
        """Генерация файла клиента"""
        class_name = client_class_name(self.document.title, self.document.version)
        client_file = self.project.add_file(f"{class_name}.py")
        client_class = client_file.add_class(class_name, inherits=["BaseApiClient"])

        for operation in self.collect_operations():
            function = self._generate_method(operation)
            if function.name in client_class.functions:
                self.project.add_diagnostic(
                    f"{operation.method} {operation.path}",
                    f"имя метода {function.name} уже занято, операция пропущена",
                )
                logger.warning(f"Дублирующееся имя метода {function.name}")
                continue
            client_class.add_function(function)

            # В запрос попадают только плейсхолдеры пути
            for parameter in operation.parameters:
                if parameter.location not in (None, "path"):
                    self.project.add_diagnostic(
                        f"{operation.method} {operation.path}",
                        f"параметр {parameter.name} ({parameter.location}) "
                        "принимается методом, но не передается в запрос",
                    )

        client_file.imports.append(
            templates.client_header.format(
                title=" ".join(self.document.title.split()),
                version=" ".join(self.document.version.split()),
            )
        )
        if self.used_models:
            client_file.imports.append("")
            client_file.imports.append(
                templates.type_checking_imports.format(
                    imports="\n".join(
                        f"    from .{model} import {model}"
                        for model in sorted(self.used_models)
                    )
                )
            )

        logger.debug(
            f"Клиент {class_name}: {len(client_class.functions)} методов"
        )
        return client_file

    def collect_operations(self) -> List[OperationSpec]:
        """Обход paths -> операции в порядке документа"""
        operations = []

        for path, path_item in self.document.paths.items():
            if not isinstance(path_item, Mapping):
                self.project.add_diagnostic(path, "описание пути не является объектом")
                continue

            shared_parameters = lookup(path_item, "parameters")

            for method, operation in path_item.items():
                if method.lower() not in HTTP_METHODS:
                    continue

                location = f"{method.upper()} {path}"
                if not isinstance(operation, Mapping):
                    self.project.add_diagnostic(
                        location, "описание операции не является объектом"
                    )
                    continue

                operations.append(
                    OperationSpec(
                        path=path,
                        method=method.upper(),
                        parameters=self._collect_parameters(
                            location, shared_parameters, lookup(operation, "parameters")
                        ),
                        request_body=self._collect_request_body(
                            location, lookup(operation, "requestBody")
                        ),
                        summary=self._summary(operation),
                    )
                )

        return operations

    def _collect_parameters(
        self, location: str, shared_parameters, operation_parameters
    ) -> Tuple[ParameterSpec, ...]:
        """Параметры операции; параметры уровня пути идут первыми"""
        parameters: Dict[Tuple[str, Optional[str]], ParameterSpec] = {}

        for raw_parameters in (shared_parameters, operation_parameters):
            if raw_parameters is None:
                continue
            if not isinstance(raw_parameters, (list, tuple)):
                self.project.add_diagnostic(location, "parameters не является массивом")
                continue

            for raw in raw_parameters:
                name = lookup(raw, "name")
                if not isinstance(name, str) or not name:
                    self.project.add_diagnostic(
                        location, "параметр без имени пропущен"
                    )
                    continue

                parameter = ParameterSpec(
                    name=name,
                    location=_string(lookup(raw, "in")),
                    ref=_string(lookup(raw, "schema", "$ref")),
                )
                # Параметр операции переопределяет одноименный параметр пути
                parameters[(parameter.name, parameter.location)] = parameter

        return tuple(parameters.values())

    def _collect_request_body(
        self, location: str, request_body
    ) -> Optional[RequestBodySpec]:
        """Тело запроса учитывается только для application/json"""
        if request_body is None:
            return None

        json_content = lookup(request_body, "content", JSON_CONTENT_TYPE)
        if not isinstance(json_content, Mapping):
            self.project.add_diagnostic(
                location, "requestBody без application/json пропущен"
            )
            return None

        return RequestBodySpec(ref=_string(lookup(json_content, "schema", "$ref")))

    def _generate_method(self, operation: OperationSpec) -> Function:
        """Генерация метода клиента для одной операции"""
        parameters = [Parameter(name="self")]
        used_names = {"self"}
        path_arguments = {}

        for spec in operation.parameters:
            name = self._unique_name(safe_identifier(spec.name), used_names)
            parameters.append(
                Parameter(name=name, var_type=Variable(value=self._resolve(spec.ref)))
            )
            if spec.location in (None, "path"):
                path_arguments.setdefault(spec.name, name)

        body_name = None
        if operation.request_body is not None:
            body_name = self._unique_name(REQUEST_BODY_NAME, used_names)
            parameters.append(
                Parameter(
                    name=body_name,
                    var_type=Variable(value=self._resolve(operation.request_body.ref)),
                )
            )
            code = templates.request_with_body
        else:
            code = templates.request

        code = code.format(
            method=operation.method,
            path=self._render_path(operation.path, path_arguments),
            body=body_name,
        )
        code += "\n" + templates.send_request.format(
            return_type=operation.return_type
        )

        return Function(
            name=operation_name(operation.path, operation.method),
            parameters=parameters,
            response=f"Result[{operation.return_type}]",
            async_def=True,
            description=operation.summary,
            code=CodeBlock(code=code),
        )

    @staticmethod
    def _summary(operation) -> Optional[str]:
        return _string(lookup(operation, "summary")) or _string(
            lookup(operation, "description")
        )

    def _resolve(self, ref: Optional[str]) -> str:
        type_name = resolve_ref(ref, self.known_models)
        if type_name in self.known_models:
            self.used_models.add(type_name)
        return type_name

    @staticmethod
    def _unique_name(name: str, used_names: set) -> str:
        unique, index = name, 2
        while unique in used_names:
            unique = f"{name}_{index}"
            index += 1
        used_names.add(unique)
        return unique

    @staticmethod
    def _render_path(path: str, arguments: Dict[str, str]) -> str:
        """Литерал пути; плейсхолдеры известных параметров подставляются через f-строку"""
        escaped = path.replace("\\", "\\\\").replace('"', '\\"')
        tokens = re.split(r"(\{[^{}]*\})", escaped)

        if not any(token[1:-1] in arguments for token in tokens if token.startswith("{")):
            return f'"{escaped}"'

        parts = []
        for token in tokens:
            if token.startswith("{") and token[1:-1] in arguments:
                parts.append("{" + arguments[token[1:-1]] + "}")
            else:
                parts.append(token.replace("{", "{{").replace("}", "}}"))

        return 'f"' + "".join(parts) + '"'

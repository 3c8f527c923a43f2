import logging
import re
from collections.abc import Mapping
from typing import List

from ..parser.openapi import SchemaDocument, lookup
from ..types.models import Parameter, Project, Variable
from ..types.specs import SchemaSpec
from ..types.type_mapper import UNTYPED, map_type
from ..utils.naming import (
    capitalize_first,
    enum_member_name,
    identifier,
    property_name,
)
from .templates import templates

logger = logging.getLogger(__name__)

# typing в модели импортируется под этим именем, поля моделей его не перекрывают
TYPING_ALIAS = "_t"

_TYPING_NAMES = re.compile(r"\b(Any|List|Optional)\b")


def _qualify_typing(annotation: str) -> str:
    """List[Any] -> _t.List[_t.Any]"""
    return _TYPING_NAMES.sub(rf"{TYPING_ALIAS}.\1", annotation)


class ModelGenerator:
    """Генератор моделей из components.schemas: Enum или pydantic модель на схему"""

    def __init__(self, document: SchemaDocument, project: Project):
        self.document = document
        self.project = project

    def collect_schemas(self) -> List[SchemaSpec]:
        """Разбор components.schemas в порядке документа"""
        schemas = self.document.schemas
        if schemas is None:
            return []

        result = []
        for name, schema in schemas.items():
            enum_values = lookup(schema, "enum")

            if isinstance(enum_values, (list, tuple)):
                result.append(
                    SchemaSpec(name=name, kind="enum", enum_values=tuple(enum_values))
                )
            elif isinstance(schema, Mapping) and "properties" in schema:
                properties = schema["properties"]
                if not isinstance(properties, Mapping):
                    properties = None

                result.append(
                    SchemaSpec(
                        name=name,
                        kind="record",
                        properties=tuple(
                            (key, self._type_token(value))
                            for key, value in (properties or {}).items()
                        ),
                    )
                )
            else:
                result.append(SchemaSpec(name=name, kind="unmatched"))

        return result

    def model_names(self) -> List[str]:
        """Имена схем, для которых будут созданы модели"""
        return [
            spec.name
            for spec in self.collect_schemas()
            if spec.kind != "unmatched" and spec.name.isidentifier()
        ]

    def generate(self) -> None:
        """Генерация файла модели для каждой схемы"""
        if self.document.schemas is None:
            logger.debug("components.schemas отсутствует, модели не создаются")
            return

        for spec in self.collect_schemas():
            if spec.kind == "enum":
                self._generate_enum(spec)
            elif spec.kind == "record":
                self._generate_record(spec)
            else:
                self.project.add_diagnostic(
                    spec.name, "схема без enum и properties пропущена"
                )
                logger.warning(f"Схема {spec.name} без enum и properties пропущена")

    def _generate_enum(self, spec: SchemaSpec) -> None:
        """Enum: по члену на каждый литерал в исходном порядке"""
        model_file = self.project.add_file(f"{spec.name}.py")
        model_file.imports.append(templates.enum_header)

        inherits = ["Enum"]
        if all(isinstance(value, str) for value in spec.enum_values):
            inherits = ["str", "Enum"]

        model_class = model_file.add_class(self._class_name(spec), inherits=inherits)

        used_names = set()
        for value in spec.enum_values:
            name = base = enum_member_name(value)
            index = 2
            while name in used_names:
                name = f"{base}_{index}"
                index += 1
            used_names.add(name)

            model_class.add_parameter(
                Parameter(name=name, default=Variable(value=repr(value)))
            )

    def _generate_record(self, spec: SchemaSpec) -> None:
        """pydantic модель: поле на каждое свойство"""
        properties = lookup(self.document.schemas, spec.name, "properties")
        if properties is not None and not isinstance(properties, Mapping):
            self.project.add_diagnostic(
                spec.name, "properties не является объектом, модель без полей"
            )

        model_file = self.project.add_file(f"{spec.name}.py")
        model_file.imports.append(templates.model_header)

        model_class = model_file.add_class(
            self._class_name(spec), inherits=["BaseModel"]
        )
        model_class.add_parameter(
            Parameter(
                name="model_config",
                default=Variable(value="ConfigDict(populate_by_name=True)"),
            )
        )

        used_names = set()
        for key, type_token in spec.properties:
            field_name = property_name(key)
            if field_name in used_names:
                self.project.add_diagnostic(
                    f"{spec.name}.{key}", f"поле {field_name} уже объявлено"
                )
                continue
            used_names.add(field_name)

            if field_name != capitalize_first(key):
                self.project.add_diagnostic(
                    f"{spec.name}.{key}", f"имя поля приведено к {field_name}"
                )

            field_type = map_type(type_token)
            var_type = Variable(value=_qualify_typing(field_type))
            if field_type != UNTYPED:
                var_type = Variable(
                    value=var_type, wrap_name=f"{TYPING_ALIAS}.Optional"
                )

            # Если имя изменилось, сохраняем исходный ключ через alias
            default = Variable(value="None")
            if field_name != key:
                default = Variable(value=f"_Field(default=None, alias={key!r})")

            model_class.add_parameter(
                Parameter(name=field_name, var_type=var_type, default=default)
            )

    @staticmethod
    def _class_name(spec: SchemaSpec) -> str:
        return identifier(spec.name) or "Model"

    @staticmethod
    def _type_token(property_spec):
        token = lookup(property_spec, "type")
        return token if isinstance(token, str) else None

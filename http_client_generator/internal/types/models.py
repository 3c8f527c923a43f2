from textwrap import indent
from typing import Optional, Union, List

from pydantic import BaseModel, field_validator

from .specs import Diagnostic

INDENT = "    "


class Variable(BaseModel):
    value: list[Union["Variable", str]] = []
    wrap_name: Optional[str] = None

    @field_validator("value", mode="before")
    def value_check(cls, value):
        _value = value

        if not isinstance(value, list):
            _value = [value]

        return _value

    def __str__(self):
        _value = ", ".join([_.__str__() for _ in self.value])

        if self.wrap_name is None:
            return _value

        return f"{self.wrap_name}[{_value}]"


class Parameter(BaseModel):
    name: str

    default: Optional[Variable] = None
    var_type: Optional[Variable] = None

    order: int = 0

    def __str__(self):
        return (
            self.name
            + (f": {self.var_type}" if self.var_type else "")
            + (f" = {self.default}" if self.default else "")
        )


class CodeBlock(BaseModel):
    order: int = 0
    code: str = "pass"

    def __str__(self):
        return self.code.replace("\t", INDENT)


class Function(BaseModel):
    name: str
    parameters: list[Parameter] = []
    response: str = "None"

    async_def: bool = False
    decorators: list[str] = []

    description: Optional[str] = None

    code: CodeBlock = CodeBlock(order=0, code="pass")

    order: int = 0

    def __str__(self) -> str:
        parameters = ", ".join(map(str, self.parameters))

        # Больше одного параметра - каждый на своей строке
        if len(self.parameters) > 1:
            parameters = (
                "\n" + indent(",\n".join(map(str, self.parameters)), INDENT) + ",\n"
            )

        lines = list(self.decorators)
        lines.append(
            f"{'async ' if self.async_def else ''}def {self.name}({parameters})"
            f" -> {self.response}:"
        )

        docstring = self._generate_docstring()
        if docstring:
            lines.append(indent(docstring, INDENT))

        lines.append(indent(str(self.code), INDENT))
        return "\n".join(lines)

    def _generate_docstring(self) -> str:
        """Docstring из описания операции"""
        if not self.description:
            return ""

        description = (
            self.description.strip().replace("\\", "\\\\").replace('"""', "'''")
        )
        if description.endswith('"'):
            description += " "

        if "\n" in description:
            return '"""\n' + description + '\n"""'
        return '"""' + description + '"""'


class Class(BaseModel):
    name: str

    functions: dict[str, "Function"] = {}
    parameters: list[Parameter] = []
    code_blocks: list["CodeBlock"] = []

    inherits: list[str] = []

    order: int = 0

    def __str__(self) -> str:
        header = (
            f"class {self.name}"
            + (f"({', '.join(self.inherits)})" if self.inherits else "")
            + ":"
        )

        members = []
        if self.parameters:
            members.append("\n".join(map(str, self.parameters)))

        members.extend(
            map(
                str,
                sorted(
                    self.code_blocks + list(self.functions.values()),
                    key=lambda x: x.order,
                    reverse=True,
                ),
            )
        )

        body = "\n\n".join(members) if members else "pass"
        return header + "\n" + indent(body, INDENT)

    def add_function(self, function: Union["Function", str], **kwargs) -> "Function":
        if isinstance(function, str):
            function = Function(name=function, **kwargs)

        self.functions[function.name] = function
        return function

    def add_parameter(self, parameter: Parameter) -> "Parameter":
        self.parameters.append(parameter)
        return parameter


class CodeFile(BaseModel):
    file_name: str

    imports: list[str] = []
    classes: dict[str, "Class"] = {}
    code_blocks: list["CodeBlock"] = []

    def __str__(self):
        parts = []

        if self.imports:
            parts.append("\n".join(self.imports))

        parts.extend(
            map(
                str,
                sorted(
                    self.code_blocks + list(self.classes.values()),
                    key=lambda x: x.order,
                    reverse=True,
                ),
            )
        )

        return "\n\n\n".join(parts) + "\n"

    def add_class(self, cls: Union["Class", str], **kwargs) -> "Class":
        if isinstance(cls, str):
            cls = Class(name=cls, **kwargs)

        self.classes[cls.name] = cls
        return cls


class Project(BaseModel):
    name: str
    files: list[CodeFile] = []
    diagnostics: List[Diagnostic] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        code_file = file_name
        if isinstance(file_name, str):
            code_file = CodeFile(file_name=file_name, **kwargs)

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional["CodeFile"]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None

    def add_diagnostic(self, location: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(location=location, message=message)
        self.diagnostics.append(diagnostic)
        return diagnostic

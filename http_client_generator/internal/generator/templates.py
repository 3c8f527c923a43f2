class Templates:
    """Шаблоны для генерации файлов"""

    client_header = """# {title} {version}
# Сгенерировано http_client_generator, ручные правки будут перезаписаны
from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from http_client_generator.http_client_base import BaseApiClient, Result"""

    type_checking_imports = """if TYPE_CHECKING:
{imports}"""

    enum_header = """# Сгенерировано http_client_generator, ручные правки будут перезаписаны
from enum import Enum"""

    model_header = """# Сгенерировано http_client_generator, ручные правки будут перезаписаны
from __future__ import annotations

import typing as _t

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field"""

    request = 'request = self._build_request("{method}", {path})'

    request_with_body = (
        "request = self._build_request(\n"
        '\t"{method}", {path}, json=self._serialize({body})\n'
        ")"
    )

    send_request = "return await self._send_request(request, {return_type})"


templates = Templates()
